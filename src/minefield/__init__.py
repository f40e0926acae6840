"""
Minefield game engine.

Event-sourced rules for a grid-based mine-clearing puzzle: grid generation,
cell-name decoding, cascading reveals, and win/loss detection.
"""
from .cell import Cell
from .coordinates import (
    OFF_GRID,
    Coordinate,
    cell_name_to_coordinate,
    column_key_to_int,
    coordinate_to_cell_name,
    get_neighbors,
    int_to_column_key,
)
from .errors import (
    CellAlreadyRevealedError,
    ConfigurationError,
    EventError,
    EventVersionError,
    GameNotStartedError,
    GameOverError,
    GridTooLargeError,
    GridTooSmallError,
    IdentifierUnavailableError,
    InvalidCellNameError,
    MinefieldError,
    MoveError,
    OutOfBoundsError,
    TooFewMinesError,
    TooManyMinesError,
    UnknownEventError,
)
from .events import CellFlagged, CellRevealed, Event, GameLost, GameStarted, GameWon
from .game import Game, GameOutcome, GameSnapshot
from .grid import (
    BEGINNER,
    EXPERT,
    INTERMEDIATE,
    Grid,
    GridConfig,
    GridLayout,
    generate_grid,
)
from .providers import Providers, SystemProviders
from .saved_games import GameInfo, list_saved_games

__all__ = [
    "Cell",
    "Coordinate",
    "OFF_GRID",
    "cell_name_to_coordinate",
    "column_key_to_int",
    "coordinate_to_cell_name",
    "get_neighbors",
    "int_to_column_key",
    "MinefieldError",
    "ConfigurationError",
    "GridTooSmallError",
    "GridTooLargeError",
    "TooFewMinesError",
    "TooManyMinesError",
    "MoveError",
    "InvalidCellNameError",
    "OutOfBoundsError",
    "CellAlreadyRevealedError",
    "GameOverError",
    "GameNotStartedError",
    "EventError",
    "EventVersionError",
    "UnknownEventError",
    "IdentifierUnavailableError",
    "Event",
    "GameStarted",
    "CellRevealed",
    "GameWon",
    "GameLost",
    "CellFlagged",
    "Game",
    "GameOutcome",
    "GameSnapshot",
    "Grid",
    "GridConfig",
    "GridLayout",
    "generate_grid",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "Providers",
    "SystemProviders",
    "GameInfo",
    "list_saved_games",
]
