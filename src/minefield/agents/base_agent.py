"""
Base agent interface.

Defines the abstract interface that all agents must implement.
"""
from abc import ABC, abstractmethod
from typing import Optional

import numpy as np


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for agents.

    Actions follow ``MinesweeperEnv``: indices below ``total_cells`` tap a
    cell, the rest toggle a flag.
    """

    def __init__(self, board_height: int, board_width: int) -> None:
        """
        Initialize the agent.

        Args:
            board_height: Number of rows in the board.
            board_width: Number of columns in the board.
        """
        self.board_height = board_height
        self.board_width = board_width
        self.total_cells = board_height * board_width

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional mask from ``get_action_mask``.

        Returns:
            Action index.
        """

    def get_hidden_cells(self, observation: np.ndarray) -> np.ndarray:
        """Boolean mask over cells, True where the cell is hidden."""
        return observation.flatten() == -1

    def reset(self) -> None:
        """Reset agent state for new episode."""
