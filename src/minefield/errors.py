"""
Exception types for the Minefield game engine.

Configuration errors are raised when a game cannot be created, move errors
when a single reveal is rejected. Both leave any existing game untouched.
"""


class MinefieldError(Exception):
    """Base class for all game engine errors."""


# ============================================================================
# Configuration Errors
# ============================================================================

class ConfigurationError(MinefieldError, ValueError):
    """Grid dimensions or mine count are not acceptable."""


class GridTooSmallError(ConfigurationError):
    """Width or height is below the minimum dimension."""


class GridTooLargeError(ConfigurationError):
    """Width or height is above the maximum dimension."""


class TooFewMinesError(ConfigurationError):
    """Fewer mines than the minimum were requested."""


class TooManyMinesError(ConfigurationError):
    """More mines than cells were requested."""


# ============================================================================
# Move Errors
# ============================================================================

class MoveError(MinefieldError, ValueError):
    """A move was rejected before any event was emitted."""


class InvalidCellNameError(MoveError):
    """Cell name is not letters followed by digits."""


class OutOfBoundsError(MoveError):
    """Cell name decodes to a coordinate outside the grid."""


class CellAlreadyRevealedError(MoveError):
    """Target cell is already revealed."""


class GameOverError(MoveError):
    """The game has already been won or lost."""


class GameNotStartedError(MoveError):
    """No GameStarted event has been applied yet."""


# ============================================================================
# Event Errors
# ============================================================================

class EventError(MinefieldError):
    """An event could not be applied to the aggregate."""


class EventVersionError(EventError):
    """Event version or aggregate id does not continue the log."""


class UnknownEventError(EventError):
    """Object is not one of the game's event types."""


class IdentifierUnavailableError(MinefieldError):
    """The identifier provider failed while creating a game."""
