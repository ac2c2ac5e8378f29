"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src and the project root to path for imports
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT / "src"))
sys.path.insert(0, str(ROOT))

from hexmines import Board, BoardConfig, Cell


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default easy board (10x12, 15 mines) with a fixed seed."""
    return Board(seed=1234)


@pytest.fixture
def empty_board() -> Board:
    """Create a 5x5 board with no mines for cascade testing."""
    return Board(BoardConfig(5, 5, 0))


@pytest.fixture
def strip_board() -> Board:
    """Create a 1x3 board with a single mine in the last column."""
    return Board.from_mines(1, 3, [(0, 2)])


@pytest.fixture
def wall_board() -> Board:
    """Create a 5x5 board with column 2 fully mined."""
    return Board.from_mines(5, 5, [(row, 2) for row in range(5)])


@pytest.fixture
def corner_mine_board() -> Board:
    """Create a 5x5 board with one mine in the bottom-right corner."""
    return Board.from_mines(5, 5, [(4, 4)])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def covered_cell() -> Cell:
    """Create a covered cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(has_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(10, 12, 15)


@pytest.fixture
def tiny_config() -> BoardConfig:
    """A 1x3 configuration with one mine, used for environment tests."""
    return BoardConfig(1, 3, 1)
