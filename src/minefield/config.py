"""
Board configuration and difficulty presets.
"""
from dataclasses import dataclass
from typing import Dict


# ============================================================================
# Errors
# ============================================================================

class InvalidBombCount(ValueError):
    """Raised when the mine count is outside [1, width * height // 2]."""

    def __init__(self, num_mines: int, max_mines: int) -> None:
        super().__init__(
            "Illegal number of bombs (must be between 1 and h * w / 2): "
            f"got {num_mines}, max {max_mines}"
        )
        self.num_mines = num_mines
        self.max_mines = max_mines


# ============================================================================
# Board Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Shape of a game.

    Attributes:
        width: Number of columns (bounds the ``y`` coordinate).
        height: Number of rows (bounds the ``x`` coordinate).
        num_mines: Total mines to place.
    """

    width: int = 20
    height: int = 28
    num_mines: int = 60

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        if not 1 <= self.num_mines <= self.max_mines:
            raise InvalidBombCount(self.num_mines, self.max_mines)
        # Negative x negative shapes have a positive area.
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")

    @property
    def max_mines(self) -> int:
        """Largest legal mine count: half the board, rounded down."""
        return self.width * self.height // 2

    @property
    def total_cells(self) -> int:
        return self.width * self.height

    @property
    def safe_cells(self) -> int:
        """Number of cells that must be revealed to win."""
        return self.total_cells - self.num_mines


# Preset difficulty levels
BEGINNER = BoardConfig(15, 25, 50)
INTERMEDIATE = BoardConfig(20, 28, 90)
EXPERT = BoardConfig(30, 50, 150)
CUSTOM = BoardConfig(20, 28, 60)

DIFFICULTIES: Dict[str, BoardConfig] = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
    "custom": CUSTOM,
}
