"""
Random agent.

Serves as a baseline by tapping random hidden cells.
"""
from typing import Optional

import numpy as np

from .base_agent import BaseAgent


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent(BaseAgent):
    """
    Agent that taps hidden cells uniformly at random and never flags.
    """

    def __init__(
        self,
        board_height: int = 28,
        board_width: int = 20,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the random agent.

        Args:
            board_height: Number of rows in the board.
            board_width: Number of columns in the board.
            seed: Random seed for reproducibility.
        """
        super().__init__(board_height, board_width)
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select a random hidden cell to tap.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional mask from ``get_action_mask``.

        Returns:
            Tap action index.
        """
        candidates = self.get_hidden_cells(observation)
        if valid_actions is not None:
            candidates &= valid_actions[: self.total_cells]

        valid_indices = np.flatnonzero(candidates)

        if len(valid_indices) == 0:
            # Nothing left to tap; the environment treats this as a no-op
            return 0

        return int(self.rng.choice(valid_indices))
