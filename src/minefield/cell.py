"""
Cell module for the Minefield engine.

Content and visibility are stored separately. Content is fixed when mines
are placed: either a mine or the number of mines among the 8 neighbors.
Visibility changes with play and is exactly one of hidden, revealed or
flagged, so a flagged cell can never be revealed and a revealed cell can
never be flagged.

``value`` folds content into one int for callers choosing a glyph:
``MINE`` (-1) for a mine, 0-8 otherwise. A fresh cell is a hidden 0.
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

# ``Cell.value`` of a mine; numbers are never negative.
MINE = -1


class CellState(Enum):
    """Visibility of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    One square of the board.

    Attributes:
        is_mine: Set once by mine placement.
        adjacent_mines: Mines among the neighbors, computed at placement
            and never updated afterwards. Meaningless for a mine.
        state: Visibility.
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self) -> bool:
        """Uncover a hidden cell. Revealed and flagged cells are left alone."""
        if self.state is not CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """Flag a hidden cell or unflag a flagged one; False once revealed."""
        if self.state is CellState.REVEALED:
            return False
        self.state = (
            CellState.FLAGGED if self.state is CellState.HIDDEN
            else CellState.HIDDEN
        )
        return True

    @property
    def value(self) -> int:
        return MINE if self.is_mine else self.adjacent_mines

    @property
    def is_numbered(self) -> bool:
        """A safe cell touching a mine: the only kind that can be chorded."""
        return not self.is_mine and self.adjacent_mines > 0

    @property
    def is_hidden(self) -> bool:
        return self.state is CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        return self.state is CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        return self.state is CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Encode what a player can see of this cell.

        Hidden content never leaks: a hidden or flagged mine looks like any
        other hidden or flagged cell.

        Returns:
            -1 hidden, -2 flagged, 0-8 revealed number, 9 revealed mine.
        """
        if self.state is CellState.HIDDEN:
            return -1
        if self.state is CellState.FLAGGED:
            return -2
        return 9 if self.is_mine else self.adjacent_mines
