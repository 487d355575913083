"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard agent interface on top of the board engine.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig, new_game
from .render import render_ansi, status_line
from .view import FLAGGED_VALUE, HIDDEN_VALUE, MINE_VALUE


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine (only after a loss)

    Actions:
        Discrete action space of size 2 * rows * cols.
        Action i < rows * cols reveals cell (i // cols, i % cols).
        Action i >= rows * cols toggles the flag on cell i - rows * cols.

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - 0 for toggling a flag
        - -0.1 for an action that changes nothing
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.render_mode = render_mode
        self.board: Optional[Board] = None

        self.observation_space = spaces.Box(
            low=FLAGGED_VALUE,
            high=MINE_VALUE,
            shape=(self.config.rows, self.config.cols),
            dtype=np.int8,
        )

        # One reveal and one flag action per cell
        self._num_cells = self.config.total_cells
        self.action_space = spaces.Discrete(2 * self._num_cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new episode on a fresh board.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        board_seed = int(self.np_random.integers(2**31))
        self.board = new_game(
            self.config.rows,
            self.config.cols,
            self.config.num_mines,
            random_source=random.Random(board_seed),
        )
        self._steps = 0

        return self._get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to reveal, or cell index plus rows * cols to
                flag.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        if self.board is None:
            raise RuntimeError("Call reset() before step()")
        if not self.action_space.contains(action):
            raise ValueError(f"Invalid action {action!r}")

        is_flag, row, col = self._decode_action(int(action))
        self._steps += 1

        if is_flag:
            reward = self._flag_reward(row, col)
        else:
            reward = self._reveal_reward(row, col)

        terminated = not self.board.is_playing
        truncated = False

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, truncated, self._get_info()

    def _decode_action(self, action: int) -> Tuple[bool, int, int]:
        """Split a flat action into (is_flag, row, col)."""
        is_flag = action >= self._num_cells
        index = action - self._num_cells if is_flag else action
        return is_flag, index // self.config.cols, index % self.config.cols

    def _reveal_reward(self, row: int, col: int) -> float:
        """Reveal a cell and score the outcome."""
        result = self.board.reveal(row, col)
        if not result:
            return -0.1
        if self.board.is_won:
            return 10.0
        if self.board.is_lost:
            return -10.0
        return 1.0

    def _flag_reward(self, row: int, col: int) -> float:
        """Toggle a flag and score the outcome."""
        if not self.board.toggle_flag(row, col):
            return -0.1
        return 0.0

    def _get_observation(self) -> np.ndarray:
        return self.board.get_state().to_observation()

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.board.revealed_count,
            "total_safe": self.config.safe_cells,
            "game_state": self.board.game_state.name,
            "valid_actions": int(self.get_action_mask().sum()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.board is None:
            return None
        view = self.board.get_state()
        text = f"{status_line(view)}\n{render_ansi(view)}"
        if self.render_mode == "ansi":
            return text
        if self.render_mode == "human":
            print(text)
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that would change the board.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        if self.board is None or not self.board.is_playing:
            return mask
        obs = self._get_observation().reshape(-1)
        mask[: self._num_cells] = obs == HIDDEN_VALUE
        mask[self._num_cells:] = obs < 0
        return mask
