"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import Game, Grid, GridConfig, Providers


# ============================================================================
# Providers
# ============================================================================

class FixedProviders(Providers):
    """Sequential ids and a clock that ticks one second per call."""

    def __init__(self, game_id: str = "00000000-0000-4000-8000-000000000001") -> None:
        self.game_id = game_id
        self.ids_issued = 0
        self.current = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def new_id(self) -> str:
        self.ids_issued += 1
        return self.game_id

    def now(self) -> datetime:
        self.current += timedelta(seconds=1)
        return self.current


@pytest.fixture
def providers() -> FixedProviders:
    """Deterministic id and clock."""
    return FixedProviders()


# ============================================================================
# Grid Fixtures
# ============================================================================

# 1  1  2  X  1
# 1  X  2  1  1
# 3  3  2  0  0
# X  X  1  1  1
# 2  2  1  1  X
EXAMPLE_MINES = [(3, 0), (1, 1), (0, 3), (1, 3), (4, 4)]

EXAMPLE_COUNTS = [
    [1, 1, 2, None, 1],
    [1, None, 2, 1, 1],
    [3, 3, 2, 0, 0],
    [None, None, 1, 1, 1],
    [2, 2, 1, 1, None],
]


@pytest.fixture
def example_grid() -> Grid:
    """5x5 grid with a known layout and a zero region at D3/E3."""
    return Grid.from_mines(5, 5, EXAMPLE_MINES)


@pytest.fixture
def example_game(example_grid: Grid, providers: FixedProviders) -> Game:
    """Game started on the example grid."""
    return Game.start(example_grid, name="Example", providers=providers)


@pytest.fixture
def single_mine_game(providers: FixedProviders) -> Game:
    """3x3 game with one mine in the top-left corner."""
    return Game.start(Grid.from_mines(3, 3, [(0, 0)]), providers=providers)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> GridConfig:
    """Create a valid grid configuration."""
    return GridConfig(9, 9, 10)
