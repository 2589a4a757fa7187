"""
Game session: the public API of the Minefield engine.

A session owns one board for its whole life. Mines are placed lazily on
the first reveal so the first click (and, when the board allows it, its
neighbors) is always safe. Restarting or changing difficulty means
creating a new session.
"""
import logging
import random
from enum import Enum, auto
from typing import Iterable, Optional

import numpy as np

from .board import Board, Position
from .cell import Cell
from .config import BoardConfig

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class SessionPhase(Enum):
    """Lifecycle of a session: mines are placed exactly once."""

    UNPLACED = auto()
    ACTIVE = auto()


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """
    Authoritative state of a single game.

    Coordinates follow the board convention: ``x`` is the row (bounded
    by ``height``), ``y`` the column (bounded by ``width``). Invalid
    coordinates are ignored by every operation.

    The player and timing attributes (``current_player``, ``best_player``,
    ``best_time_in_seconds``, ``current_time_in_seconds``) belong to the
    caller; the engine never reads them.
    """

    def __init__(
        self,
        width: int,
        height: int,
        bomb_count: int,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Create a session with an empty, unplaced board.

        Args:
            width: Number of columns.
            height: Number of rows.
            bomb_count: Mines to place, between 1 and width * height // 2.
            rng: Random source for mine placement.

        Raises:
            InvalidBombCount: If ``bomb_count`` is out of range.
            ValueError: If a dimension is not positive but the area is
                (both negative).
        """
        self.config = BoardConfig(width=width, height=height, num_mines=bomb_count)
        self.board = Board(self.config)
        self.phase = SessionPhase.UNPLACED
        self._rng = rng or random.Random()

        self.current_player = ""
        self.best_player = ""
        self.best_time_in_seconds = 0
        self.current_time_in_seconds = 0

    @classmethod
    def from_config(
        cls, config: BoardConfig, rng: Optional[random.Random] = None
    ) -> "GameSession":
        return cls(config.width, config.height, config.num_mines, rng=rng)

    @classmethod
    def with_mines(
        cls, config: BoardConfig, mine_positions: Iterable[Position]
    ) -> "GameSession":
        """Build an already-active session with mines at fixed positions."""
        session = cls.from_config(config)
        session.board.set_mines(mine_positions)
        session.phase = SessionPhase.ACTIVE
        return session

    # ========================================================================
    # Lifecycle
    # ========================================================================

    def place_mines(self, x: int, y: int) -> None:
        """Place mines around (x, y) unless they are already placed."""
        if self.phase is SessionPhase.ACTIVE:
            return
        self.board.place_mines((x, y), self._rng)
        self.phase = SessionPhase.ACTIVE
        logger.debug("Session active after first reveal at %s", (x, y))

    @property
    def is_initialized(self) -> bool:
        return self.phase is SessionPhase.ACTIVE

    # ========================================================================
    # Player Actions
    # ========================================================================

    def reveal(self, x: int, y: int) -> bool:
        """
        Reveal (x, y), placing mines first if this is the first reveal.

        The first reveal keeps (x, y) and its neighbors free of mines. On
        boards too crowded for that (fewer than ``bomb_count`` cells outside
        the 3x3 zone) only (x, y) itself is guaranteed safe.

        Returns:
            True if the revealed cell is a mine.
        """
        self.place_mines(x, y)
        return self.board.reveal(x, y)

    def chord_reveal(self, x: int, y: int) -> bool:
        """
        Reveal around a numbered cell whose flags match its number.

        Returns:
            True if any cell revealed by the chord is a mine.
        """
        return self.board.chord(x, y)

    def toggle_flag(self, x: int, y: int) -> bool:
        """
        Flag or unflag a hidden cell. Ignored before the first reveal.

        Returns:
            True if the flag changed.
        """
        if not self.is_initialized:
            return False
        return self.board.toggle_flag(x, y)

    def tap(self, x: int, y: int) -> bool:
        """Chord on a revealed numbered cell, reveal anywhere else."""
        if self.board.is_chordable(x, y):
            return self.chord_reveal(x, y)
        return self.reveal(x, y)

    def check_win(self) -> bool:
        """True once every non-mine cell is revealed. Flags do not matter."""
        return self.revealed_count == self.unrevealed_non_bomb_cells

    # ========================================================================
    # Queries
    # ========================================================================

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        return self.board.get_cell(x, y)

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def bomb_count(self) -> int:
        return self.config.num_mines

    @property
    def flag_count(self) -> int:
        return self.board.flags_placed

    @property
    def revealed_count(self) -> int:
        return self.board.cells_revealed

    @property
    def unrevealed_non_bomb_cells(self) -> int:
        """Cells that must be revealed to win: ``width * height - bombs``."""
        return self.config.safe_cells

    @property
    def remaining_mines(self) -> int:
        """Mines minus flags; negative when over-flagged."""
        return self.bomb_count - self.flag_count

    def get_observation(self) -> np.ndarray:
        return self.board.get_observation()

    def __repr__(self) -> str:
        return (
            f"GameSession(width={self.width}, height={self.height}, "
            f"bomb_count={self.bomb_count}, phase={self.phase.name}, "
            f"revealed={self.revealed_count}, flags={self.flag_count})"
        )
