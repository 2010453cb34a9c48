"""
Unit tests for Cell class.

Tests cell state management, reveal/flag behavior, symbols and
observation conversion.
"""
import pytest
from minefield import Cell, CellState


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self) -> None:
        """New cell should not be a mine by default."""
        cell = Cell()
        assert cell.is_mine is False

    def test_default_cell_is_hidden(self) -> None:
        """New cell should be hidden by default."""
        cell = Cell()
        assert cell.state == CellState.HIDDEN
        assert cell.is_hidden is True

    def test_default_cell_has_zero_adjacent_mines(self) -> None:
        """New cell should have 0 adjacent mines by default."""
        cell = Cell()
        assert cell.adjacent_mines == 0

    def test_cell_keeps_its_position(self) -> None:
        """Cell should remember its own coordinates."""
        cell = Cell(row=3, col=7)
        assert (cell.row, cell.col) == (3, 7)


# ============================================================================
# Cell Reveal Tests
# ============================================================================

class TestCellReveal:
    """Test cell reveal behavior."""

    def test_reveal_hidden_cell_returns_true(self, hidden_cell: Cell) -> None:
        """Revealing a hidden cell should succeed."""
        assert hidden_cell.reveal() is True
        assert hidden_cell.is_revealed is True

    def test_reveal_already_revealed_returns_false(
        self, hidden_cell: Cell
    ) -> None:
        """Revealing an already revealed cell should fail."""
        hidden_cell.reveal()
        assert hidden_cell.reveal() is False

    def test_reveal_flagged_cell_returns_false(self, hidden_cell: Cell) -> None:
        """Cannot reveal a flagged cell."""
        hidden_cell.toggle_flag()
        assert hidden_cell.reveal() is False
        assert hidden_cell.is_flagged is True


# ============================================================================
# Cell Flag Tests
# ============================================================================

class TestCellFlag:
    """Test cell flagging behavior."""

    def test_flag_changes_state_to_flagged(self, hidden_cell: Cell) -> None:
        """Flagging a cell should change its state."""
        assert hidden_cell.toggle_flag() is True
        assert hidden_cell.state == CellState.FLAGGED

    def test_unflag_returns_to_hidden(self, hidden_cell: Cell) -> None:
        """Unflagging a cell should return it to hidden."""
        hidden_cell.toggle_flag()
        hidden_cell.toggle_flag()
        assert hidden_cell.is_hidden is True

    def test_flag_revealed_cell_returns_false(self, hidden_cell: Cell) -> None:
        """Cannot flag a revealed cell."""
        hidden_cell.reveal()
        assert hidden_cell.toggle_flag() is False
        assert hidden_cell.is_revealed is True

    def test_clear_flag_on_flagged_cell(self, hidden_cell: Cell) -> None:
        """clear_flag should drop an existing flag."""
        hidden_cell.toggle_flag()
        assert hidden_cell.clear_flag() is True
        assert hidden_cell.is_hidden is True

    def test_clear_flag_without_flag_is_noop(self, hidden_cell: Cell) -> None:
        """clear_flag on an unflagged cell changes nothing."""
        assert hidden_cell.clear_flag() is False
        assert hidden_cell.is_hidden is True


# ============================================================================
# Cell Symbol Tests
# ============================================================================

class TestCellSymbol:
    """Test the text symbol shared by renderer and save format."""

    def test_hidden_cell_symbol(self, hidden_cell: Cell) -> None:
        assert hidden_cell.symbol == "?"

    def test_flagged_cell_symbol(self, hidden_cell: Cell) -> None:
        hidden_cell.toggle_flag()
        assert hidden_cell.symbol == "F"

    def test_revealed_mine_symbol(self, mine_cell: Cell) -> None:
        mine_cell.reveal()
        assert mine_cell.symbol == "X"

    def test_hidden_mine_symbol_does_not_leak(self, mine_cell: Cell) -> None:
        """A hidden mine looks like any other hidden cell."""
        assert mine_cell.symbol == "?"

    @pytest.mark.parametrize("count", range(0, 9))
    def test_revealed_cell_symbol_is_count(self, count: int) -> None:
        cell = Cell(adjacent_mines=count)
        cell.reveal()
        assert cell.symbol == str(count)


# ============================================================================
# Cell Observation Tests
# ============================================================================

class TestCellObservation:
    """Test cell observation values."""

    def test_hidden_cell_observation_is_negative_one(
        self, hidden_cell: Cell
    ) -> None:
        assert hidden_cell.to_observation() == -1

    def test_flagged_cell_observation_is_negative_two(
        self, hidden_cell: Cell
    ) -> None:
        hidden_cell.toggle_flag()
        assert hidden_cell.to_observation() == -2

    def test_revealed_mine_observation_is_nine(self, mine_cell: Cell) -> None:
        mine_cell.reveal()
        assert mine_cell.to_observation() == 9
