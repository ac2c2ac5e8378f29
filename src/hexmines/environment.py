"""
Gymnasium environment wrapper for Hex Mines.

Provides a standard RL interface for training and evaluating agents.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig
from .cell import CellState


# ============================================================================
# Hex Mines Environment
# ============================================================================

class HexMinesEnv(gym.Env):
    """
    Gymnasium environment for Hex Mines.

    Observation:
        2D array where:
        - -1 = covered cell
        - -2 = flagged cell
        - 0-6 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size rows * cols.
        Action i uncovers the cell at (i // cols, i % cols).

    Rewards:
        - +1 for uncovering a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already revealed/flagged)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Hex Mines environment.

        Args:
            config: Board configuration (default: easy 10x12 with 15 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.board = Board(self.config)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.rows, self.config.cols),
            dtype=np.int8,
        )

        # One action per cell
        self.action_space = spaces.Discrete(self.config.total_cells)

        self._steps = 0
        self._total_safe_cells = self.config.total_cells - self.config.num_mines

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new episode on a freshly built board.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        board_seed = int(self.np_random.integers(0, 2**31 - 1))
        self.board = Board(self.config, seed=board_seed)
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to uncover (row * cols + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col = self._action_to_position(int(action))
        self._steps += 1

        reward = self._calculate_reward(row, col)

        observation = self.board.get_observation()
        terminated = not self.board.is_playing
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        row = action // self.config.cols
        col = action % self.config.cols
        return row, col

    def _calculate_reward(self, row: int, col: int) -> float:
        """
        Uncover a cell and score the result.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            Reward value.
        """
        if not self.board.get_cell(row, col).is_covered:
            return -0.1

        state = self.board.uncover(row, col)

        if state == CellState.MINE:
            return -10.0
        if self.board.check_for_win():
            return 10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        obs = self.board.get_observation()
        revealed = int(np.count_nonzero((obs >= 0) & (obs != CellState.MINE.value)))

        return {
            "steps": self._steps,
            "revealed": revealed,
            "total_safe": self._total_safe_cells,
            "game_state": self.board.game_state.name,
            "flags_remaining": self.board.flags_remaining,
            "valid_actions": len(self.board.get_valid_actions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return str(self.board)
        if self.render_mode == "human":
            print(self.board)
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for row, col in self.board.get_valid_actions():
            mask[row * self.config.cols + col] = True
        return mask


# ============================================================================
# Vectorized Environment Factory
# ============================================================================

def make_vec_env(
    n_envs: int = 4,
    config: Optional[BoardConfig] = None,
) -> gym.vector.VectorEnv:
    """
    Create vectorized environment for parallel rollouts.

    Args:
        n_envs: Number of parallel environments.
        config: Board configuration.

    Returns:
        Vectorized environment.
    """
    def make_env() -> HexMinesEnv:
        return HexMinesEnv(config=config)

    return gym.vector.SyncVectorEnv([make_env for _ in range(n_envs)])
