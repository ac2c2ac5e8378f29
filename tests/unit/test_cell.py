"""
Unit tests for Cell and CellState.

Tests the state enumeration, reveal/flag behavior and observation codes.
"""
import pytest
from hexmines import Cell, CellState


# ============================================================================
# CellState Tests
# ============================================================================

class TestCellState:
    """Test the closed enumeration of visible states."""

    def test_zero_count_is_empty(self) -> None:
        """A cell with no mined neighbors shows EMPTY."""
        assert CellState.for_count(0) == CellState.EMPTY

    @pytest.mark.parametrize("count", range(1, 7))
    def test_count_states_carry_their_count(self, count: int) -> None:
        """Count states report the neighbor mine count they stand for."""
        state = CellState.for_count(count)
        assert state.mine_count == count
        assert state.value == count

    @pytest.mark.parametrize("count", [-1, 7, 8])
    def test_count_out_of_range_raises(self, count: int) -> None:
        """A hex cell has at most six neighbors."""
        with pytest.raises(ValueError, match="out of range"):
            CellState.for_count(count)

    def test_covered_and_flagged_are_not_revealed(self) -> None:
        """Only EMPTY, counts and MINE are revealed states."""
        assert CellState.COVERED.is_revealed is False
        assert CellState.FLAGGED.is_revealed is False
        assert CellState.EMPTY.is_revealed is True
        assert CellState.THREE.is_revealed is True
        assert CellState.MINE.is_revealed is True

    def test_mine_has_no_neighbor_count(self) -> None:
        """Non-count states report a zero count."""
        assert CellState.MINE.mine_count == 0
        assert CellState.COVERED.mine_count == 0

    def test_symbols(self) -> None:
        """Each state renders as a single character."""
        assert CellState.COVERED.symbol == "c"
        assert CellState.FLAGGED.symbol == "F"
        assert CellState.EMPTY.symbol == "."
        assert CellState.FOUR.symbol == "4"
        assert CellState.MINE.symbol == "M"


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self) -> None:
        """New cell should not be a mine by default."""
        assert Cell().has_mine is False

    def test_default_cell_is_covered(self) -> None:
        """New cell should be covered by default."""
        cell = Cell()
        assert cell.state == CellState.COVERED
        assert cell.is_covered is True

    def test_default_cell_has_zero_adjacent_mines(self) -> None:
        """New cell should have 0 adjacent mines by default."""
        assert Cell().adjacent_mines == 0


# ============================================================================
# Cell Reveal Tests
# ============================================================================

class TestCellReveal:
    """Test cell reveal behavior."""

    def test_reveal_covered_cell_returns_true(self, covered_cell: Cell) -> None:
        """Revealing a covered cell should succeed."""
        assert covered_cell.reveal() is True

    def test_reveal_safe_cell_shows_count(self) -> None:
        """A revealed safe cell shows its neighbor mine count."""
        cell = Cell(adjacent_mines=3)
        cell.reveal()
        assert cell.state == CellState.THREE
        assert cell.is_revealed is True

    def test_reveal_isolated_cell_is_empty(self, covered_cell: Cell) -> None:
        """A revealed cell with no mined neighbors is EMPTY."""
        covered_cell.reveal()
        assert covered_cell.state == CellState.EMPTY

    def test_reveal_mine_shows_mine(self, mine_cell: Cell) -> None:
        """A mined cell can only be revealed as a mine."""
        mine_cell.adjacent_mines = 2
        mine_cell.reveal()
        assert mine_cell.state == CellState.MINE

    def test_reveal_already_revealed_returns_false(
        self, covered_cell: Cell
    ) -> None:
        """Revealing an already revealed cell should fail."""
        covered_cell.reveal()
        assert covered_cell.reveal() is False

    def test_reveal_flagged_cell_returns_false(self, covered_cell: Cell) -> None:
        """Cannot reveal a flagged cell."""
        covered_cell.toggle_flag()
        assert covered_cell.reveal() is False
        assert covered_cell.is_flagged is True


# ============================================================================
# Cell Flag Tests
# ============================================================================

class TestCellFlag:
    """Test cell flagging behavior."""

    def test_flag_changes_state_to_flagged(self, covered_cell: Cell) -> None:
        """Flagging a cell should change its state."""
        assert covered_cell.toggle_flag() is True
        assert covered_cell.state == CellState.FLAGGED

    def test_unflag_returns_to_covered(self, covered_cell: Cell) -> None:
        """Unflagging a cell should return it to covered."""
        covered_cell.toggle_flag()
        covered_cell.toggle_flag()
        assert covered_cell.is_covered is True

    def test_flag_revealed_cell_returns_false(self, covered_cell: Cell) -> None:
        """Cannot flag a revealed cell."""
        covered_cell.reveal()
        assert covered_cell.toggle_flag() is False
        assert covered_cell.state == CellState.EMPTY


# ============================================================================
# Cell Observation Tests
# ============================================================================

class TestCellObservation:
    """Test cell observation values for ML agent."""

    def test_covered_cell_observation_is_negative_one(
        self, covered_cell: Cell
    ) -> None:
        assert covered_cell.to_observation() == -1

    def test_flagged_cell_observation_is_negative_two(
        self, covered_cell: Cell
    ) -> None:
        covered_cell.toggle_flag()
        assert covered_cell.to_observation() == -2

    def test_revealed_mine_observation_is_nine(self, mine_cell: Cell) -> None:
        mine_cell.reveal()
        assert mine_cell.to_observation() == 9
