"""
Game aggregate for Minefield.

A Game is an event-sourced aggregate: every state change is an event that
is applied to the game and appended to its log. Replaying the log against
a fresh Game rebuilds the same state.
"""
import logging
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from enum import Enum, auto
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .coordinates import (
    Coordinate,
    cell_name_to_coordinate,
    coordinate_to_cell_name,
    get_neighbors,
)
from .errors import (
    CellAlreadyRevealedError,
    EventError,
    EventVersionError,
    GameNotStartedError,
    GameOverError,
    IdentifierUnavailableError,
    OutOfBoundsError,
    UnknownEventError,
)
from .events import CellFlagged, CellRevealed, Event, GameLost, GameStarted, GameWon
from .grid import Grid, GridConfig, generate_grid
from .providers import Providers, SystemProviders

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameOutcome(Enum):
    """Possible outcomes of a game."""

    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


@dataclass(frozen=True)
class GameSnapshot:
    """Point-in-time copy of a game's state, comparable with ==."""

    id: str
    version: int
    name: Optional[str]
    grid: Optional[Grid]
    cell_count: int
    revealed_or_flagged_cell_count: int
    is_ended: bool
    outcome: GameOutcome
    created_at: Optional[datetime]
    updated_at: Optional[datetime]


# ============================================================================
# Game Aggregate
# ============================================================================

class Game:
    """
    Minefield game aggregate.

    Use Game.create() for a random grid, Game.start() for a prepared one,
    or Game.from_events() to rebuild a game from its log. A new Game()
    is empty until a GameStarted event is applied.

    Not safe for concurrent use; callers sharing a game across threads
    must serialize access themselves.
    """

    def __init__(self, providers: Optional[Providers] = None) -> None:
        self._providers = providers or SystemProviders()
        self._id = ""
        self._version = 0
        self._name: Optional[str] = None
        self._grid: Optional[Grid] = None
        self._cell_count = 0
        self._revealed_or_flagged_cell_count = 0
        self._is_ended = False
        self._outcome = GameOutcome.IN_PROGRESS
        self._created_at: Optional[datetime] = None
        self._updated_at: Optional[datetime] = None
        self._events: List[Event] = []

    # ========================================================================
    # Construction
    # ========================================================================

    @classmethod
    def create(
        cls,
        width: int,
        height: int,
        mine_count: int,
        name: Optional[str] = None,
        providers: Optional[Providers] = None,
    ) -> "Game":
        """
        Create a new game on a randomly mined grid.

        Args:
            width: Number of columns (2-40).
            height: Number of rows (2-40).
            mine_count: Mines to place (1 to width * height).
            name: Optional display name.
            providers: Id and clock source; defaults to SystemProviders.

        Returns:
            Game with a single GameStarted event in its log.

        Raises:
            ConfigurationError: If the grid cannot be generated.
            IdentifierUnavailableError: If no id could be generated.
        """
        grid = generate_grid(width, height, mine_count)
        return cls.start(grid, name=name, providers=providers)

    @classmethod
    def start(
        cls,
        grid: Grid,
        name: Optional[str] = None,
        providers: Optional[Providers] = None,
    ) -> "Game":
        """Start a new game on a prepared grid."""
        GridConfig(grid.width, grid.height, grid.mine_count)

        providers = providers or SystemProviders()
        try:
            aggregate_id = providers.new_id()
        except Exception as error:
            raise IdentifierUnavailableError(
                f"Unable to generate an id for a new game: {error}"
            ) from error

        game = cls(providers)
        game.apply(
            GameStarted(
                aggregate_id=aggregate_id,
                version=1,
                at=providers.now(),
                grid=grid.freeze(),
                name=name,
            )
        )
        logger.info(
            "Started game %s (%dx%d, %d mines)",
            aggregate_id, grid.width, grid.height, grid.mine_count,
        )
        return game

    @classmethod
    def from_events(
        cls, events: Iterable[Event], providers: Optional[Providers] = None
    ) -> "Game":
        """
        Rebuild a game by replaying its event log.

        Args:
            events: Events in log order, starting with GameStarted.
            providers: Used for any moves made after the replay.

        Returns:
            Game in the state the log describes.
        """
        game = cls(providers)
        for event in events:
            game.apply(event)
        return game

    # ========================================================================
    # Event Application (Low-level)
    # ========================================================================

    def apply(self, event: Event) -> None:
        """
        Apply an event to this game and append it to the log.

        Raises:
            UnknownEventError: If event is not a game event.
            NotImplementedError: For CellFlagged, which is reserved.
            EventVersionError: If the event does not continue this log.
            EventError: If the game has already ended.
        """
        if isinstance(event, GameStarted):
            handler = self._on_game_started
        elif isinstance(event, CellRevealed):
            handler = self._on_cell_revealed
        elif isinstance(event, GameWon):
            handler = self._on_game_won
        elif isinstance(event, GameLost):
            handler = self._on_game_lost
        elif isinstance(event, CellFlagged):
            raise NotImplementedError("Flagging cells is not supported")
        else:
            raise UnknownEventError(f"Cannot apply {type(event).__name__}")

        self._check_continues_log(event)
        handler(event)

        self._version = event.version
        self._updated_at = event.at
        self._events.append(event)
        logger.debug(
            "Game %s applied %s v%d", self._id, type(event).__name__, event.version
        )

    def _check_continues_log(self, event: Event) -> None:
        """Ensure the event is the next one this game can accept."""
        if isinstance(event, GameStarted):
            if self._version != 0 or event.version != 1:
                raise EventVersionError(
                    f"GameStarted must be version 1 on an empty game "
                    f"(event v{event.version}, game v{self._version})"
                )
            return

        if self._grid is None:
            raise EventVersionError("Game has not started")
        if event.aggregate_id != self._id:
            raise EventVersionError(
                f"Event for game {event.aggregate_id} applied to game {self._id}"
            )
        if event.version != self._version + 1:
            raise EventVersionError(
                f"Expected version {self._version + 1}, got {event.version}"
            )
        if self._is_ended:
            raise EventError(f"Game {self._id} has already ended")

    def _on_game_started(self, event: GameStarted) -> None:
        self._id = event.aggregate_id
        self._name = event.name
        self._grid = event.grid.thaw()
        self._cell_count = self._grid.cell_count
        self._revealed_or_flagged_cell_count = sum(
            1 for _, cell in self._grid.cells() if cell.is_revealed_or_flagged
        )
        self._created_at = event.at

    def _on_cell_revealed(self, event: CellRevealed) -> None:
        self._grid.cell(event.coordinate).is_revealed = True
        self._revealed_or_flagged_cell_count += 1

    def _on_game_won(self, event: GameWon) -> None:
        self._is_ended = True
        self._outcome = GameOutcome.WON

    def _on_game_lost(self, event: GameLost) -> None:
        # Reveal everything; the counter ends equal to cell_count.
        self._is_ended = True
        self._outcome = GameOutcome.LOST
        for _, cell in self._grid.cells():
            if not cell.is_revealed_or_flagged:
                self._revealed_or_flagged_cell_count += 1
            cell.is_revealed = True

    def _emit(self, event_type, **payload) -> Event:
        """Create the next event for this game and apply it."""
        event = event_type(
            aggregate_id=self._id,
            version=self._version + 1,
            at=self._providers.now(),
            **payload,
        )
        self.apply(event)
        return event

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal_cell(self, name: str) -> None:
        """
        Reveal a cell. If it's mined, the game is lost.

        A cell with no adjacent mines also reveals its neighbors, spreading
        through the connected zero region. Revealing the last cell wins.

        Args:
            name: Cell name such as "B6".

        Raises:
            InvalidCellNameError: If the name cannot be decoded.
            OutOfBoundsError: If the cell is outside the grid.
            CellAlreadyRevealedError: If the cell is already revealed.
            GameOverError: If the game has already been won or lost.
            GameNotStartedError: If no GameStarted event has been applied.
        """
        self._require_started()
        coordinate = cell_name_to_coordinate(name)
        if not self._grid.contains(coordinate):
            raise OutOfBoundsError(
                f"Invalid cell {name} ({coordinate.x},{coordinate.y})."
            )
        if self._grid.cell(coordinate).is_revealed:
            raise CellAlreadyRevealedError(f"Cell {name} already revealed")
        if self._is_ended:
            raise GameOverError(f"Game {self._id} has already ended")

        self._emit(CellRevealed, interaction_cell_name=name, coordinate=coordinate)

        if self._lose_game_if_mined(coordinate):
            return
        self._reveal_neighbors_if_no_adjacent_mines(coordinate, name)
        self._win_game_if_last_cell()

    def _require_started(self) -> Grid:
        if self._grid is None:
            raise GameNotStartedError("Game has not started")
        return self._grid

    def _lose_game_if_mined(self, coordinate: Coordinate) -> bool:
        if not self._grid.cell(coordinate).is_mined:
            return False

        self._emit(GameLost)
        logger.info(
            "Game %s lost at %s", self._id, coordinate_to_cell_name(coordinate)
        )
        return True

    def _reveal_neighbors_if_no_adjacent_mines(
        self, coordinate: Coordinate, name: str
    ) -> int:
        """
        Breadth-first reveal of the zero region around a revealed cell.

        Returns:
            Number of cells revealed by the cascade.
        """
        if self._grid.cell(coordinate).adjacent_mines > 0:
            return 0

        width, height = self._grid.width, self._grid.height
        queue = deque(sorted(get_neighbors(coordinate, width, height)))
        revealed = 0
        while queue:
            neighbor = queue.popleft()
            cell = self._grid.cell(neighbor)
            # Reached twice via different paths; second arrival is a no-op.
            if cell.is_revealed or cell.is_mined:
                continue

            self._emit(CellRevealed, interaction_cell_name=name, coordinate=neighbor)
            revealed += 1

            if cell.adjacent_mines == 0:
                queue.extend(
                    next_coordinate
                    for next_coordinate in sorted(get_neighbors(neighbor, width, height))
                    if not self._grid.cell(next_coordinate).is_revealed
                    and not self._grid.cell(next_coordinate).is_mined
                )

        logger.debug("Reveal of %s cascaded to %d cells", name, revealed)
        return revealed

    def _win_game_if_last_cell(self) -> bool:
        if self._revealed_or_flagged_cell_count != self._cell_count:
            return False

        self._emit(GameWon)
        logger.info("Game %s won", self._id)
        return True

    def flag_cell(self) -> None:
        """Reserved; flagging is not implemented."""

    def undo_move(self) -> None:
        """Reserved; undo is not implemented."""

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    def is_complete(self) -> bool:
        """Check if the game has been won or lost."""
        return self._is_ended

    @property
    def id(self) -> str:
        return self._id

    @property
    def version(self) -> int:
        return self._version

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def width(self) -> int:
        return self._require_started().width

    @property
    def height(self) -> int:
        return self._require_started().height

    @property
    def grid(self) -> Grid:
        """Copy of the current grid; changes to it do not affect the game."""
        return self._require_started().copy()

    @property
    def cell_count(self) -> int:
        return self._cell_count

    @property
    def revealed_or_flagged_cell_count(self) -> int:
        return self._revealed_or_flagged_cell_count

    @property
    def is_ended(self) -> bool:
        return self._is_ended

    @property
    def outcome(self) -> GameOutcome:
        return self._outcome

    @property
    def is_won(self) -> bool:
        return self._outcome == GameOutcome.WON

    @property
    def is_lost(self) -> bool:
        return self._outcome == GameOutcome.LOST

    @property
    def created_at(self) -> Optional[datetime]:
        return self._created_at

    @property
    def updated_at(self) -> Optional[datetime]:
        return self._updated_at

    @property
    def events(self) -> Tuple[Event, ...]:
        """The event log, oldest first."""
        return tuple(self._events)

    def snapshot(self) -> GameSnapshot:
        """Capture the current state for comparison or display."""
        return GameSnapshot(
            id=self._id,
            version=self._version,
            name=self._name,
            grid=self._grid.copy() if self._grid is not None else None,
            cell_count=self._cell_count,
            revealed_or_flagged_cell_count=self._revealed_or_flagged_cell_count,
            is_ended=self._is_ended,
            outcome=self._outcome,
            created_at=self._created_at,
            updated_at=self._updated_at,
        )

    def observation(self) -> np.ndarray:
        """Player-visible grid; see Grid.to_observation()."""
        return self._require_started().to_observation()
