"""
Saved game listing.

Games are not persisted yet, so there is never anything to list.
"""
from typing import List, NamedTuple


class GameInfo(NamedTuple):
    """Summary of a saved game."""

    id: str
    name: str


def list_saved_games() -> List[GameInfo]:
    """List previously saved games, most recent first."""
    return []
