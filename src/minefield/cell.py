"""
Cell module for the Minefield game.

Represents a single grid position: whether it holds a mine, its visible
state, and the number of mines around it.
"""
from dataclasses import dataclass


# Observation values shared with Grid.to_observation()
HIDDEN = -1
FLAGGED = -2
REVEALED_MINE = 9


@dataclass
class Cell:
    """
    Represents a single cell in the Minefield grid.

    Attributes:
        is_mined: Whether this cell contains a mine.
        is_revealed: Whether this cell has been revealed.
        is_flagged: Whether this cell has been flagged.
        adjacent_mines: Count of mines in neighboring cells (0-8). Not
            meaningful for mined cells.
    """

    is_mined: bool = False
    is_revealed: bool = False
    is_flagged: bool = False
    adjacent_mines: int = 0

    @property
    def is_hidden(self) -> bool:
        """Check if cell is neither revealed nor flagged."""
        return not self.is_revealed and not self.is_flagged

    @property
    def is_revealed_or_flagged(self) -> bool:
        return self.is_revealed or self.is_flagged

    def to_observation(self) -> int:
        """
        Convert cell to its player-visible value.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if not self.is_revealed:
            return FLAGGED if self.is_flagged else HIDDEN
        if self.is_mined:
            return REVEALED_MINE
        return self.adjacent_mines
