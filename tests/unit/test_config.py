"""
Unit tests for BoardConfig validation and presets.
"""
import pytest
from minefield import (
    BoardConfig,
    InvalidBombCount,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    CUSTOM,
    DIFFICULTIES,
)


class TestBoardConfig:
    """Test board configuration validation."""

    def test_valid_config_creation(self, valid_config: BoardConfig) -> None:
        """Valid configuration should be created successfully."""
        assert valid_config.width == 9
        assert valid_config.height == 9
        assert valid_config.num_mines == 10

    @pytest.mark.parametrize("width,height", [(0, 9), (9, 0), (0, 0), (-2, 5)])
    def test_zero_area_boards_reject_any_mine_count(
        self, width: int, height: int
    ) -> None:
        """No mine count fits a board without area."""
        with pytest.raises(InvalidBombCount, match="Illegal number of bombs"):
            BoardConfig(width, height, 1)

    def test_negative_dimensions_with_positive_area_raise(self) -> None:
        """-3 x -3 passes the mine check but is still not a board."""
        with pytest.raises(ValueError, match="dimensions must be positive"):
            BoardConfig(-3, -3, 1)

    @pytest.mark.parametrize("mines", [0, -1, 41, 100])
    def test_out_of_range_mines_raise(self, mines: int) -> None:
        """Mine counts outside [1, w*h // 2] are rejected."""
        with pytest.raises(InvalidBombCount, match="Illegal number of bombs"):
            BoardConfig(9, 9, mines)

    @pytest.mark.parametrize("mines", [1, 20, 40])
    def test_in_range_mines_accepted(self, mines: int) -> None:
        """Every count in [1, 81 // 2] is accepted."""
        assert BoardConfig(9, 9, mines).num_mines == mines

    def test_max_mines_uses_integer_division(self) -> None:
        """A 3x3 board allows 4 mines, not 4.5."""
        assert BoardConfig(3, 3, 4).max_mines == 4
        with pytest.raises(InvalidBombCount):
            BoardConfig(3, 3, 5)

    def test_single_cell_board_cannot_hold_a_mine(self) -> None:
        """1x1 has a maximum of zero mines, so no count is legal."""
        with pytest.raises(InvalidBombCount):
            BoardConfig(1, 1, 1)

    def test_invalid_bomb_count_is_value_error(self) -> None:
        """Callers catching ValueError also catch the mine count error."""
        with pytest.raises(ValueError):
            BoardConfig(2, 2, 3)

    def test_derived_counts(self) -> None:
        """Total and safe cell counts derive from the shape."""
        config = BoardConfig(width=4, height=2, num_mines=3)
        assert config.total_cells == 8
        assert config.safe_cells == 5


class TestPresets:
    """Test the difficulty presets."""

    def test_preset_shapes(self) -> None:
        assert (BEGINNER.width, BEGINNER.height, BEGINNER.num_mines) == (15, 25, 50)
        assert (INTERMEDIATE.width, INTERMEDIATE.height, INTERMEDIATE.num_mines) == (20, 28, 90)
        assert (EXPERT.width, EXPERT.height, EXPERT.num_mines) == (30, 50, 150)
        assert CUSTOM == BoardConfig()

    def test_lookup_by_name(self) -> None:
        assert set(DIFFICULTIES) == {"beginner", "intermediate", "expert", "custom"}
        assert DIFFICULTIES["expert"] is EXPERT
