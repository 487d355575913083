"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src and the project root (for main.py) to path for imports
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT / "src"))
sys.path.insert(0, str(ROOT))

from minesweeper import Board, BoardConfig, Cell, new_game


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a seeded 9x9 board with 10 mines."""
    return new_game(9, 9, 10, seed=1234)


@pytest.fixture
def corner_mine_board() -> Board:
    """3x3 board with a single mine in the top-left corner."""
    return Board.from_mines(3, 3, [(0, 0)])


@pytest.fixture
def two_mine_board() -> Board:
    """3x3 board with mines in opposite corners."""
    return Board.from_mines(3, 3, [(0, 0), (2, 2)])


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board.from_mines(5, 5, [])


@pytest.fixture
def wall_board() -> Board:
    """5x5 board with a full column of mines down the middle."""
    return Board.from_mines(5, 5, [(row, 2) for row in range(5)])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)


@pytest.fixture
def small_config() -> BoardConfig:
    """Small configuration for quick games."""
    return BoardConfig(4, 4, 2)
