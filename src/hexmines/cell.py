"""
Cell module for Hex Mines.

Represents individual cells on the hexagonal board: the closed set of
visible states a cell can be in, and whether it hides a mine.
"""
from enum import Enum
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """
    Possible visible states of a cell.

    Values double as observation codes for the ML environment:
        -1: Covered
        -2: Flagged
        0: Revealed, no mined neighbors
        1-6: Revealed, count of mined neighbors
        9: Revealed mine
    """

    COVERED = -1
    FLAGGED = -2
    EMPTY = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    MINE = 9

    @classmethod
    def for_count(cls, count: int) -> "CellState":
        """
        Get the revealed state for a mined-neighbor count.

        Args:
            count: Number of mined neighbors (0-6).

        Returns:
            EMPTY for 0, ONE..SIX otherwise.
        """
        if not 0 <= count <= 6:
            raise ValueError(f"Neighbor mine count out of range: {count}")
        return cls(count)

    @property
    def is_revealed(self) -> bool:
        """Check if this is one of the terminal revealed states."""
        return self not in (CellState.COVERED, CellState.FLAGGED)

    @property
    def mine_count(self) -> int:
        """Mined-neighbor count shown by a revealed safe cell (0 otherwise)."""
        if 1 <= self.value <= 6:
            return self.value
        return 0

    @property
    def symbol(self) -> str:
        """One-character glyph used by text rendering."""
        return _SYMBOLS.get(self, str(self.value))


_SYMBOLS = {
    CellState.COVERED: "c",
    CellState.FLAGGED: "F",
    CellState.EMPTY: ".",
    CellState.MINE: "M",
}


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the hex grid.

    Attributes:
        has_mine: Whether this cell contains a mine. Fixed once the
            board is built.
        adjacent_mines: Count of mines in neighboring cells (0-6).
        state: Current visible state.
    """

    has_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.COVERED

    @property
    def revealed_state(self) -> CellState:
        """State this cell shows once uncovered."""
        if self.has_mine:
            return CellState.MINE
        return CellState.for_count(self.adjacent_mines)

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was successfully revealed, False if already
            revealed or flagged.
        """
        if self.state != CellState.COVERED:
            return False
        self.state = self.revealed_state
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.state == CellState.COVERED:
            self.state = CellState.FLAGGED
            return True
        if self.state == CellState.FLAGGED:
            self.state = CellState.COVERED
            return True
        return False

    @property
    def is_covered(self) -> bool:
        """Check if cell is covered (and not flagged)."""
        return self.state == CellState.COVERED

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state.is_revealed

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """Convert cell to observation value for ML agent."""
        return self.state.value
