"""
Board module for Hex Mines.

Implements the hexagonal game board with mine placement, hex adjacency,
cell uncovering with flood fill, flagging and win/lose evaluation.

The grid is a rectangular array in offset (brick) layout: odd columns sit
half a cell lower than even columns, so the six neighbors of a cell depend
on the parity of its column.
"""
import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

from .cell import Cell, CellState
from .errors import OutOfBoundsError

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


# (delta_row, delta_col) offsets of the six hex neighbors, by column parity
EVEN_COLUMN_OFFSETS = ((-1, -1), (-1, 0), (-1, 1), (0, -1), (1, 0), (0, 1))
ODD_COLUMN_OFFSETS = ((0, -1), (-1, 0), (0, 1), (1, -1), (1, 0), (1, 1))


@dataclass
class BoardConfig:
    """
    Configuration for a Hex Mines board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Total mines to place.
    """

    rows: int = 10
    cols: int = 12
    num_mines: int = 15

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.rows * self.cols - 1
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols


# Preset difficulty levels
EASY = BoardConfig(10, 12, 15)
HARD = BoardConfig(14, 16, 30)

DIFFICULTIES: Dict[str, BoardConfig] = {
    "easy": EASY,
    "hard": HARD,
}


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Hex Mines game board.

    Manages the grid of cells, mine placement, uncovering logic and
    win/lose evaluation. One board lives for exactly one game; start a
    new game by building a new board.

    Attributes:
        config: Dimensions and mine count.
        seed: Optional seed for a reproducible mine layout.
        mine_positions: Optional explicit mine layout, kept as a tuple.
            When given, its length must equal ``config.num_mines``.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    seed: Optional[int] = None
    mine_positions: Optional[Tuple[Tuple[int, int], ...]] = field(
        default=None, repr=False, compare=False
    )
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Build the grid and lay the mines after dataclass creation."""
        if self.mine_positions is not None:
            self.mine_positions = tuple(
                (int(row), int(col)) for row, col in self.mine_positions
            )
        self._rng = random.Random(self.seed)
        self._init_grid()
        if self.mine_positions is None:
            self._place_mines()
        else:
            self._place_given_mines(self.mine_positions)
        self._calculate_adjacent_mines()

    @classmethod
    def from_mines(
        cls, rows: int, cols: int, mines: Iterable[Tuple[int, int]]
    ) -> "Board":
        """
        Build a board with a known mine layout.

        Args:
            rows: Number of rows.
            cols: Number of columns.
            mines: (row, col) positions of every mine.

        Returns:
            Board with all cells covered and mines exactly at ``mines``.
        """
        positions = tuple(mines)
        config = BoardConfig(rows, cols, len(positions))
        return cls(config, mine_positions=positions)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell() for _ in range(self.config.cols)]
            for _ in range(self.config.rows)
        ]

    def _place_mines(self) -> None:
        """
        Place mines by rejection sampling.

        Draws uniformly random positions and mines each one not already
        mined until the requested count is reached. BoardConfig keeps
        ``num_mines`` below the cell count, so the loop terminates.
        """
        placed = 0
        draws = 0
        while placed < self.config.num_mines:
            row = self._rng.randrange(self.config.rows)
            col = self._rng.randrange(self.config.cols)
            draws += 1
            cell = self._grid[row][col]
            if not cell.has_mine:
                cell.has_mine = True
                placed += 1
        logger.debug(
            "Placed %d mines on %dx%d board in %d draws",
            placed, self.config.rows, self.config.cols, draws,
        )

    def _place_given_mines(self, positions: Iterable[Tuple[int, int]]) -> None:
        """Lay an explicit mine layout, rejecting bad positions."""
        placed = 0
        for row, col in positions:
            if not self._is_valid_position(row, col):
                raise ValueError(f"Mine position ({row}, {col}) is off the board")
            cell = self._grid[row][col]
            if cell.has_mine:
                raise ValueError(f"Duplicate mine position ({row}, {col})")
            cell.has_mine = True
            placed += 1
        if placed != self.config.num_mines:
            raise ValueError(
                f"Expected {self.config.num_mines} mine positions, got {placed}"
            )

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all cells."""
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                if not self._grid[row][col].has_mine:
                    count = self._count_adjacent_mines(row, col)
                    self._grid[row][col].adjacent_mines = count

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self.neighbors(row, col):
            if self._grid[neighbor_row][neighbor_col].has_mine:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, row: int, col: int) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions on the hex grid.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for in-bounds neighbors, at most six.
            Positions off the board are dropped; there is no wraparound.
        """
        offsets = EVEN_COLUMN_OFFSETS if col % 2 == 0 else ODD_COLUMN_OFFSETS
        neighbors = []
        for delta_row, delta_col in offsets:
            new_row = row + delta_row
            new_col = col + delta_col
            if self._is_valid_position(new_row, new_col):
                neighbors.append((new_row, new_col))
        return neighbors

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.rows and 0 <= col < self.config.cols

    def _check_position(self, row: int, col: int) -> None:
        if not self._is_valid_position(row, col):
            raise OutOfBoundsError(row, col, self.config.rows, self.config.cols)

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def uncover(self, row: int, col: int) -> CellState:
        """
        Uncover a cell at the given position.

        Flagged and already revealed cells are left alone. A mined cell
        shows a mine and every other mine-free cell is uncovered. A safe
        cell shows its neighbor mine count; a cell with no mined
        neighbors also uncovers all of its neighbors.

        Args:
            row: Row index to uncover.
            col: Column index to uncover.

        Returns:
            The cell's state after the call.

        Raises:
            OutOfBoundsError: If the position is not on the board.
        """
        self._check_position(row, col)
        cell = self._grid[row][col]
        if not cell.is_covered:
            return cell.state

        if cell.has_mine:
            cell.reveal()
            logger.info("Mine hit at (%d, %d)", row, col)
            self._reveal_safe_cells()
            return cell.state

        self._flood_fill(row, col)
        return cell.state

    def _flood_fill(self, row: int, col: int) -> int:
        """
        Uncover a safe cell, expanding through cells with no mined neighbors.

        Uses an explicit stack so large open boards cannot exhaust the
        call stack. Cells that are not covered stop the expansion.

        Returns:
            Number of cells uncovered.
        """
        revealed = 0
        pending = [(row, col)]
        while pending:
            cur_row, cur_col = pending.pop()
            cell = self._grid[cur_row][cur_col]
            if not cell.reveal():
                continue
            revealed += 1
            if cell.state == CellState.EMPTY:
                pending.extend(self.neighbors(cur_row, cur_col))
        if revealed > 1:
            logger.debug(
                "Cascade from (%d, %d) uncovered %d cells", row, col, revealed
            )
        return revealed

    def _reveal_safe_cells(self) -> None:
        """Uncover every mine-free cell; mined cells are left as they are."""
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                if not self._grid[row][col].has_mine:
                    self._flood_fill(row, col)

    def toggle_flag(self, row: int, col: int) -> None:
        """
        Toggle flag on a cell.

        Covered cells become flagged and flagged cells become covered;
        revealed cells are unchanged.

        Raises:
            OutOfBoundsError: If the position is not on the board.
        """
        self._check_position(row, col)
        self._grid[row][col].toggle_flag()

    def check_for_win(self) -> bool:
        """
        Check if all mine-free cells are revealed.

        Covered or flagged mines do not block a win.
        """
        for row in self._grid:
            for cell in row:
                if not cell.has_mine and not cell.is_revealed:
                    return False
        return True

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def cols(self) -> int:
        return self.config.cols

    @property
    def mine_count(self) -> int:
        return self.config.num_mines

    @property
    def game_state(self) -> GameState:
        """Derive the game state from the cells."""
        for row in self._grid:
            for cell in row:
                if cell.state == CellState.MINE:
                    return GameState.LOST
        if self.check_for_win():
            return GameState.WON
        return GameState.PLAYING

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self.game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self.game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self.game_state == GameState.LOST

    @property
    def flag_count(self) -> int:
        """Number of currently flagged cells."""
        return sum(cell.is_flagged for row in self._grid for cell in row)

    @property
    def flags_remaining(self) -> int:
        """Mines minus placed flags; negative when over-flagged."""
        return self.config.num_mines - self.flag_count

    def get_cell(self, row: int, col: int) -> Cell:
        """Get cell at position."""
        self._check_position(row, col)
        return self._grid[row][col]

    def state(self, row: int, col: int) -> CellState:
        """Get the visible state of a cell."""
        return self.get_cell(row, col).state

    def has_mine(self, row: int, col: int) -> bool:
        """Check whether a cell holds a mine."""
        return self.get_cell(row, col).has_mine

    def snapshot(self) -> Tuple[Tuple[CellState, ...], ...]:
        """Read-only copy of every cell's visible state, row by row."""
        return tuple(tuple(cell.state for cell in row) for row in self._grid)

    def mine_layout(self) -> np.ndarray:
        """Boolean array that is True where a mine sits."""
        return np.array(
            [[cell.has_mine for cell in row] for row in self._grid], dtype=bool
        )

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for ML agent.

        Returns:
            2D numpy array where:
                -1 = covered
                -2 = flagged
                0-6 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.config.rows, self.config.cols), dtype=np.int8)
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                obs[row, col] = self._grid[row][col].to_observation()
        return obs

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of cells that can be uncovered.

        Returns:
            List of (row, col) positions that are covered and unflagged.
        """
        actions = []
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                if self._grid[row][col].is_covered:
                    actions.append((row, col))
        return actions

    def __str__(self) -> str:
        """Render the board in brick layout, odd columns shifted right."""
        lines = []
        for row in self._grid:
            parts = []
            for col, cell in enumerate(row):
                if col % 2 == 1:
                    parts.append(" ")
                parts.append(cell.state.symbol + " ")
            lines.append("".join(parts))
        return "\n".join(lines) + "\n"
