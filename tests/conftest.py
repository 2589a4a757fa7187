"""
Pytest configuration and shared fixtures.
"""
import random

import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import Board, BoardConfig, Cell, GameSession


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def default_session() -> GameSession:
    """A 9x9 session with 10 mines and a seeded random source."""
    return GameSession(9, 9, 10, rng=random.Random(1234))


@pytest.fixture
def corner_mine_session() -> GameSession:
    """3x3 board with its single mine forced at (2, 2)."""
    return GameSession.with_mines(BoardConfig(3, 3, 1), [(2, 2)])


@pytest.fixture
def two_mine_session() -> GameSession:
    """
    3x3 board with mines on the top corners.

        * 2 *
        1 2 1
        0 0 0
    """
    return GameSession.with_mines(BoardConfig(3, 3, 2), [(0, 0), (0, 2)])


@pytest.fixture
def rng() -> random.Random:
    return random.Random(42)


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def small_board() -> Board:
    """Create a small 3x3 board with 1 mine for testing."""
    return Board(BoardConfig(3, 3, 1))


@pytest.fixture
def wide_board() -> Board:
    """Board with 2 rows and 4 columns to catch transposed axes."""
    return Board(BoardConfig(width=4, height=2, num_mines=1))


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

