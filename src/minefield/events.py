"""
Event types for the Minefield game aggregate.

Events are immutable facts. A game's state changes only by applying them,
and replaying a game's event log in order rebuilds that game exactly.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .coordinates import Coordinate
from .grid import Grid, GridLayout


@dataclass(frozen=True)
class Event:
    """
    Envelope shared by every event.

    Attributes:
        aggregate_id: Id of the game the event belongs to.
        version: Game version after the event is applied.
        at: When the event was created.
    """

    aggregate_id: str
    version: int
    at: datetime


@dataclass(frozen=True)
class GameStarted(Event):
    """
    A game began on the given grid.

    The grid is held as an immutable GridLayout; a Grid passed in is frozen
    on construction. Applying the event thaws a fresh copy for the game.
    """

    grid: GridLayout
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if isinstance(self.grid, Grid):
            object.__setattr__(self, "grid", self.grid.freeze())


@dataclass(frozen=True)
class CellRevealed(Event):
    """
    A cell was revealed.

    Attributes:
        interaction_cell_name: Name the player asked to reveal. Cells
            revealed by a cascade carry the name that started it.
        coordinate: The cell actually revealed.
    """

    interaction_cell_name: str
    coordinate: Coordinate


@dataclass(frozen=True)
class GameWon(Event):
    """Every cell is revealed or flagged."""


@dataclass(frozen=True)
class GameLost(Event):
    """A mined cell was revealed."""


@dataclass(frozen=True)
class CellFlagged(Event):
    """
    Reserved for flagging, which is not implemented.

    The game never emits this event and refuses to apply it.
    """
