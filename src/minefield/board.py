"""
Board module for the Minefield engine.

Implements the grid with mine placement, neighbor counts, flood-fill
revealing, chording and flag bookkeeping.

Coordinates are ``(x, y)`` where ``x`` is the ROW index (bounded by
height) and ``y`` is the COLUMN index (bounded by width). Callers iterate
``for x in range(height): for y in range(width)``.
"""
import logging
import random
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Set, Tuple

import numpy as np

from .cell import Cell
from .config import BoardConfig

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

# Row-major neighbor order: up-left, up, up-right, left, right,
# down-left, down, down-right.
DIRECTIONS: Tuple[Position, ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Grid of cells plus the counters derived from mutating it.

    Mines are placed at most once. The session phase that decides when
    lives in ``GameSession``.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _cells_revealed: int = 0
    _flags_placed: int = 0

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        self._init_grid()

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell() for _ in range(self.config.width)]
            for _ in range(self.config.height)
        ]

    def safe_zone(self, x: int, y: int) -> Set[Position]:
        """The anchor cell and its in-bounds neighbors."""
        return {(x, y), *self.get_neighbors(x, y)}

    def place_mines(
        self, anchor: Position, rng: Optional[random.Random] = None
    ) -> List[Position]:
        """
        Place mines randomly around a protected anchor cell.

        Mines are drawn without replacement from the cells outside the
        anchor's safe zone. When the board is too crowded for a 3x3 safe
        zone only the anchor itself is protected. Does nothing once the board
        holds mines.

        Args:
            anchor: (x, y) of the first revealed cell.
            rng: Random source, module-level ``random`` when omitted.

        Returns:
            The mine positions on the board.
        """
        existing = self.mine_positions()
        if existing:
            return existing

        rng = rng or random
        num_mines = self.config.num_mines
        safe = self.safe_zone(*anchor)
        positions = self._get_valid_mine_positions(safe)
        if len(positions) < num_mines:
            logger.warning(
                "Only %d cells outside the safe zone of %s for %d mines; "
                "protecting the first cell only",
                len(positions), anchor, num_mines,
            )
            positions = self._get_valid_mine_positions({anchor})

        mine_positions = rng.sample(positions, num_mines)
        self.set_mines(mine_positions)
        logger.debug(
            "Placed %d mines on %dx%d board, anchor %s",
            num_mines, self.config.height, self.config.width, anchor,
        )
        return mine_positions

    def set_mines(self, mine_positions: Iterable[Position]) -> None:
        """
        Put mines at explicit positions and compute neighbor counts.

        Raises:
            ValueError: If a position is out of bounds or the number of
                distinct positions differs from the configured mine count,
                or mines are already placed.
        """
        if self.mine_positions():
            raise ValueError("Mines are already placed")
        unique = set(mine_positions)
        for x, y in unique:
            if not self.is_valid_position(x, y):
                raise ValueError(f"Mine position {(x, y)} is out of bounds")
        if len(unique) != self.config.num_mines:
            raise ValueError(
                f"Expected {self.config.num_mines} mines, got {len(unique)}"
            )
        for x, y in unique:
            self._grid[x][y].is_mine = True
        self._calculate_adjacent_mines()

    def _get_valid_mine_positions(
        self, exclude: Set[Position]
    ) -> List[Position]:
        """All positions not in ``exclude``, in row-major order."""
        return [
            (x, y)
            for x in range(self.config.height)
            for y in range(self.config.width)
            if (x, y) not in exclude
        ]

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all cells."""
        for x in range(self.config.height):
            for y in range(self.config.width):
                cell = self._grid[x][y]
                if not cell.is_mine:
                    cell.adjacent_mines = self._count_adjacent_mines(x, y)

    def _count_adjacent_mines(self, x: int, y: int) -> int:
        return sum(
            1 for nx, ny in self.get_neighbors(x, y)
            if self._grid[nx][ny].is_mine
        )

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def get_neighbors(self, x: int, y: int) -> List[Position]:
        """
        Get in-bounds neighbors in ``DIRECTIONS`` order.

        Args:
            x: Row index of center cell.
            y: Column index of center cell.

        Returns:
            List of (x, y) tuples for valid neighbors.
        """
        neighbors = []
        for delta_x, delta_y in DIRECTIONS:
            nx = x + delta_x
            ny = y + delta_y
            if self.is_valid_position(nx, ny):
                neighbors.append((nx, ny))
        return neighbors

    def is_valid_position(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.config.height and 0 <= y < self.config.width

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, x: int, y: int) -> bool:
        """
        Reveal a cell and flood through zero-valued cells.

        Out-of-bounds, revealed and flagged targets are ignored. The
        flood fill uses an explicit stack; cells already revealed or
        flagged stop it.

        Args:
            x: Row index to reveal.
            y: Column index to reveal.

        Returns:
            True only if the target cell itself is a mine.
        """
        if not self.is_valid_position(x, y):
            return False
        cell = self._grid[x][y]
        if not self._reveal_cell(cell):
            return False
        if cell.is_mine:
            return True
        if cell.adjacent_mines == 0:
            self._flood_from(x, y)
        return False

    def _reveal_cell(self, cell: Cell) -> bool:
        if not cell.reveal():
            return False
        self._cells_revealed += 1
        return True

    def _flood_from(self, x: int, y: int) -> None:
        """Reveal the zero region containing (x, y) and its border."""
        stack = [(x, y)]
        while stack:
            cx, cy = stack.pop()
            # Reverse so neighbors are expanded in DIRECTIONS order.
            for nx, ny in reversed(self.get_neighbors(cx, cy)):
                neighbor = self._grid[nx][ny]
                if not self._reveal_cell(neighbor):
                    continue
                if not neighbor.is_mine and neighbor.adjacent_mines == 0:
                    stack.append((nx, ny))

    def chord(self, x: int, y: int) -> bool:
        """
        Reveal the hidden neighbors of a satisfied numbered cell.

        Only a revealed cell with a number 1-8 can be chorded, and only
        when its flagged neighbor count equals that number. Every
        qualifying neighbor is revealed even after a mine is hit.

        Returns:
            True if any neighbor revealed by the chord was a mine.
        """
        if not self._can_chord(x, y):
            return False

        hit_mine = False
        for nx, ny in self.get_neighbors(x, y):
            if self._grid[nx][ny].is_hidden:
                if self.reveal(nx, ny):
                    hit_mine = True
        return hit_mine

    def _can_chord(self, x: int, y: int) -> bool:
        if not self.is_valid_position(x, y):
            return False
        cell = self._grid[x][y]
        if not cell.is_revealed or not cell.is_numbered:
            return False
        return self.count_adjacent_flags(x, y) == cell.adjacent_mines

    def is_chordable(self, x: int, y: int) -> bool:
        """Whether (x, y) is a revealed numbered cell."""
        cell = self.get_cell(x, y)
        return cell is not None and cell.is_revealed and cell.is_numbered

    def count_adjacent_flags(self, x: int, y: int) -> int:
        """Count flagged cells adjacent to position."""
        return sum(
            1 for nx, ny in self.get_neighbors(x, y)
            if self._grid[nx][ny].is_flagged
        )

    def toggle_flag(self, x: int, y: int) -> bool:
        """
        Toggle flag on a cell.

        Returns:
            True if flag was toggled, False otherwise.
        """
        if not self.is_valid_position(x, y):
            return False
        cell = self._grid[x][y]
        if not cell.toggle_flag():
            return False
        self._flags_placed += 1 if cell.is_flagged else -1
        return True

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def cells_revealed(self) -> int:
        return self._cells_revealed

    @property
    def flags_placed(self) -> int:
        return self._flags_placed

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.is_valid_position(x, y):
            return None
        return self._grid[x][y]

    def mine_positions(self) -> List[Position]:
        """Positions of all mines, row-major."""
        return [
            (x, y)
            for x in range(self.config.height)
            for y in range(self.config.width)
            if self._grid[x][y].is_mine
        ]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array shaped (height, width) where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for x in range(self.config.height):
            for y in range(self.config.width):
                obs[x, y] = self._grid[x][y].to_observation()
        return obs

