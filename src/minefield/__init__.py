"""
Minefield engine.

Grid-based mine puzzle engine: board state, deferred mine placement,
flood-fill reveal, chording, flags and win detection.
"""
from .cell import Cell, CellState, MINE
from .config import (
    BoardConfig,
    InvalidBombCount,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    CUSTOM,
    DIFFICULTIES,
)
from .board import Board, DIRECTIONS
from .session import GameSession, SessionPhase
from .environment import MinesweeperEnv

__version__ = "1.0.0"

__all__ = [
    "Cell",
    "CellState",
    "MINE",
    "BoardConfig",
    "InvalidBombCount",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "CUSTOM",
    "DIFFICULTIES",
    "Board",
    "DIRECTIONS",
    "GameSession",
    "SessionPhase",
    "MinesweeperEnv",
]
