"""
Gymnasium environment wrapper for the Minefield engine.

Drives a ``GameSession`` with the same gestures a touch UI uses: a tap
reveals (or chords a revealed number) and a long press toggles a flag.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .config import BoardConfig
from .session import GameSession


# ============================================================================
# Outcome Labels
# ============================================================================

PLAYING = "PLAYING"
WON = "WON"
LOST = "LOST"


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment around a ``GameSession``.

    Observation:
        2D int8 array shaped (height, width) where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete space of size 2 * width * height. Action i < cells taps
        cell (i // width, i % width); action i >= cells toggles the flag
        on cell i - cells.

    Rewards:
        - +1 for a tap that reveals at least one safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for an action with no effect
        - 0 for a flag change
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()

        self.config = config or BoardConfig()
        self.render_mode = render_mode
        self.session = GameSession.from_config(self.config)

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        self._total_cells = self.config.total_cells
        self.action_space = spaces.Discrete(2 * self._total_cells)

        self._steps = 0
        self._outcome = PLAYING

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game on a fresh session.

        Args:
            seed: Seeds mine placement for reproducible episodes.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        placement_seed = int(self.np_random.integers(2**32))
        self.session = GameSession.from_config(
            self.config, rng=random.Random(placement_seed)
        )
        self._steps = 0
        self._outcome = PLAYING

        return self.session.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Tap or flag index, see class docstring.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        action = int(action)
        self._steps += 1

        if action < self._total_cells:
            reward = self._tap(*self.action_to_position(action))
        else:
            x, y = self.action_to_position(action - self._total_cells)
            reward = 0.0 if self.session.toggle_flag(x, y) else -0.1

        terminated = self._outcome != PLAYING
        return (
            self.session.get_observation(),
            reward,
            terminated,
            False,
            self._get_info(),
        )

    def action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert a cell index to (x, y) board coordinates."""
        return action // self.config.width, action % self.config.width

    def _tap(self, x: int, y: int) -> float:
        revealed_before = self.session.revealed_count

        if self.session.tap(x, y):
            self._outcome = LOST
            return -10.0
        if self.session.check_win():
            self._outcome = WON
            return 10.0
        if self.session.revealed_count > revealed_before:
            return 1.0
        return -0.1

    def _get_info(self) -> Dict[str, Any]:
        return {
            "steps": self._steps,
            "revealed": self.session.revealed_count,
            "total_safe": self.session.unrevealed_non_bomb_cells,
            "flags": self.session.flag_count,
            "remaining_mines": self.session.remaining_mines,
            "game_state": self._outcome,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self._render_ansi()
        if self.render_mode == "human":
            print(self._render_ansi())
        return None

    def _render_ansi(self) -> str:
        return render_observation(self.session.get_observation())

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of candidate actions.

        Taps are allowed on hidden cells and revealed numbers (chords);
        flags on any unrevealed cell once mines are placed.

        Returns:
            Boolean array of size 2 * cells.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        board = self.session.board
        for x in range(self.config.height):
            for y in range(self.config.width):
                index = x * self.config.width + y
                cell = board.get_cell(x, y)
                if cell.is_hidden or board.is_chordable(x, y):
                    mask[index] = True
                if self.session.is_initialized and not cell.is_revealed:
                    mask[self._total_cells + index] = True
        return mask


def render_observation(obs: np.ndarray) -> str:
    """Render an observation array as rows of single characters."""
    lines = []
    for row in obs:
        row_str = ""
        for val in row:
            if val == -1:
                row_str += "."
            elif val == -2:
                row_str += "F"
            elif val == 9:
                row_str += "*"
            elif val == 0:
                row_str += " "
            else:
                row_str += str(val)
            row_str += " "
        lines.append(row_str)

    return "\n".join(lines)
