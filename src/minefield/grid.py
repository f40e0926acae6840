"""
Grid module for the Minefield game.

Holds grid configuration and validation, random mine placement, and the
row-major matrix of cells with each cell's adjacent mine count.
"""
import logging
import random
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Set, Tuple

import numpy as np

from .cell import Cell
from .coordinates import Coordinate
from .errors import (
    GridTooLargeError,
    GridTooSmallError,
    TooFewMinesError,
    TooManyMinesError,
)

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

MIN_DIMENSION = 2
MAX_DIMENSION = 40
MIN_MINES = 1


@dataclass(frozen=True)
class GridConfig:
    """
    Configuration for a Minefield grid.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 9
    height: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Check dimensions first, then mine count."""
        if self.width < MIN_DIMENSION or self.height < MIN_DIMENSION:
            raise GridTooSmallError(
                f"Invalid dimensions {self.width}x{self.height}. "
                f"Must be at least {MIN_DIMENSION}x{MIN_DIMENSION}."
            )
        if self.width > MAX_DIMENSION or self.height > MAX_DIMENSION:
            raise GridTooLargeError(
                f"Invalid dimensions {self.width}x{self.height}. "
                f"Must be at most {MAX_DIMENSION}x{MAX_DIMENSION}."
            )
        if self.num_mines < MIN_MINES:
            raise TooFewMinesError(
                f"Too few mines ({self.num_mines}). Place at least {MIN_MINES}."
            )
        if self.num_mines > self.cell_count:
            raise TooManyMinesError(
                f"Too many mines ({self.num_mines}). The mine count cannot "
                f"exceed the number of cells ({self.cell_count})."
            )

    @property
    def cell_count(self) -> int:
        return self.width * self.height


# Per-cell (is_mined, is_revealed, is_flagged, adjacent_mines)
CellValues = Tuple[bool, bool, bool, int]


@dataclass(frozen=True)
class GridLayout:
    """
    Immutable, hashable copy of a grid, as carried by events.

    Use Grid.freeze() to build one and thaw() to get a playable Grid back.
    """

    width: int
    height: int
    rows: Tuple[Tuple[CellValues, ...], ...]

    def thaw(self) -> "Grid":
        """Build a new mutable Grid from this layout."""
        return Grid(
            self.width,
            self.height,
            [[Cell(*values) for values in row] for row in self.rows],
        )


# Preset difficulty levels
BEGINNER = GridConfig(9, 9, 10)
INTERMEDIATE = GridConfig(16, 16, 40)
EXPERT = GridConfig(30, 16, 99)


# ============================================================================
# Grid Class
# ============================================================================

@dataclass
class Grid:
    """
    Rectangular matrix of cells, addressed rows[y][x].

    A grid is owned by a single game and only changes while that game
    applies events to it.
    """

    width: int
    height: int
    rows: List[List[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if not self.rows:
            self.rows = [
                [Cell() for _ in range(self.width)]
                for _ in range(self.height)
            ]
        if len(self.rows) != self.height or any(
            len(row) != self.width for row in self.rows
        ):
            raise ValueError(
                f"Rows do not match grid dimensions {self.width}x{self.height}"
            )

    @classmethod
    def from_mines(
        cls, width: int, height: int, mines: Iterable[Tuple[int, int]]
    ) -> "Grid":
        """
        Build a grid with mines at exactly the given coordinates.

        Args:
            width: Number of columns.
            height: Number of rows.
            mines: (x, y) positions to mine; duplicates are ignored.

        Returns:
            Grid with mines placed and adjacent counts filled in.
        """
        grid = cls(width, height)
        for x, y in set(mines):
            grid._place_mine(Coordinate(x, y))
        return grid

    # ========================================================================
    # Mine Placement (Low-level)
    # ========================================================================

    def _place_mine(self, coordinate: Coordinate) -> None:
        """Mine a cell and bump the count of each in-bounds neighbor."""
        if not self.contains(coordinate):
            raise ValueError(f"Mine at {coordinate} is outside the grid")

        x, y = coordinate
        self.rows[y][x].is_mined = True
        for delta_y in (-1, 0, 1):
            for delta_x in (-1, 0, 1):
                if delta_x == 0 and delta_y == 0:
                    continue
                new_x = x + delta_x
                new_y = y + delta_y
                if 0 <= new_x < self.width and 0 <= new_y < self.height:
                    self.rows[new_y][new_x].adjacent_mines += 1

    # ========================================================================
    # Accessors
    # ========================================================================

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    @property
    def mine_count(self) -> int:
        return sum(1 for _, cell in self.cells() if cell.is_mined)

    def contains(self, coordinate: Coordinate) -> bool:
        """Check if coordinate is within grid bounds."""
        x, y = coordinate
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, coordinate: Coordinate) -> Cell:
        """Get the cell at a coordinate that is known to be in bounds."""
        x, y = coordinate
        return self.rows[y][x]

    def cells(self) -> Iterator[Tuple[Coordinate, Cell]]:
        """Iterate over every cell in row-major order."""
        for y, row in enumerate(self.rows):
            for x, cell in enumerate(row):
                yield Coordinate(x, y), cell

    def copy(self) -> "Grid":
        """Deep copy; the copy shares no cells with this grid."""
        return Grid(
            self.width,
            self.height,
            [
                [
                    Cell(
                        is_mined=cell.is_mined,
                        is_revealed=cell.is_revealed,
                        is_flagged=cell.is_flagged,
                        adjacent_mines=cell.adjacent_mines,
                    )
                    for cell in row
                ]
                for row in self.rows
            ],
        )

    def freeze(self) -> GridLayout:
        """Immutable copy of this grid."""
        return GridLayout(
            self.width,
            self.height,
            tuple(
                tuple(
                    (cell.is_mined, cell.is_revealed, cell.is_flagged,
                     cell.adjacent_mines)
                    for cell in row
                )
                for row in self.rows
            ),
        )

    def to_observation(self) -> np.ndarray:
        """
        Get the player-visible grid as a numpy array.

        Returns:
            2D int8 array of shape (height, width) where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.height, self.width), dtype=np.int8)
        for (x, y), cell in self.cells():
            obs[y, x] = cell.to_observation()
        return obs

    def mine_mask(self) -> np.ndarray:
        """Boolean array of shape (height, width), True where mined."""
        mask = np.zeros((self.height, self.width), dtype=bool)
        for (x, y), cell in self.cells():
            mask[y, x] = cell.is_mined
        return mask


# ============================================================================
# Grid Generation
# ============================================================================

def generate_grid(
    width: int,
    height: int,
    mine_count: int,
    rng: Optional[random.Random] = None,
) -> Grid:
    """
    Create a grid with mines placed uniformly at random.

    Args:
        width: Number of columns (2-40).
        height: Number of rows (2-40).
        mine_count: Mines to place (1 to width * height).
        rng: Random source; defaults to the module-level generator.

    Returns:
        New grid with no cells revealed.

    Raises:
        ConfigurationError: If the dimensions or mine count are invalid.
    """
    config = GridConfig(width, height, mine_count)
    mines = _choose_mine_placements(config, rng or random)

    grid = Grid(config.width, config.height)
    for coordinate in mines:
        grid._place_mine(coordinate)

    logger.debug(
        "Generated %dx%d grid with %d mines", width, height, len(mines)
    )
    return grid


def _choose_mine_placements(config: GridConfig, rng) -> Set[Coordinate]:
    """Pick distinct mine positions, drawing again on a collision."""
    chosen: Set[Coordinate] = set()
    while len(chosen) < config.num_mines:
        chosen.add(
            Coordinate(rng.randrange(config.width), rng.randrange(config.height))
        )
    return chosen
