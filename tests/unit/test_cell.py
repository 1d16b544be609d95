"""
Unit tests for Cell class.

Tests cell defaults, reveal/flag copies and display values.
"""
import pytest
from minefield import Cell


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self) -> None:
        """New cell should not be a mine by default."""
        assert Cell().has_mine is False

    def test_default_cell_is_hidden(self, hidden_cell: Cell) -> None:
        """New cell should be hidden by default."""
        assert hidden_cell.is_hidden is True
        assert hidden_cell.is_revealed is False
        assert hidden_cell.is_flagged is False

    def test_default_cell_has_no_count(self, hidden_cell: Cell) -> None:
        """Adjacent count is unset until the cell is revealed."""
        assert hidden_cell.adjacent_count is None

    def test_cell_is_immutable(self, hidden_cell: Cell) -> None:
        """Cells cannot be modified in place."""
        with pytest.raises(AttributeError):
            hidden_cell.revealed = True  # type: ignore[misc]


# ============================================================================
# Cell Reveal Tests
# ============================================================================

class TestCellOpened:
    """Test revealed copies of cells."""

    def test_opened_returns_revealed_copy(self, hidden_cell: Cell) -> None:
        """Opening should not touch the original cell."""
        opened = hidden_cell.opened(3)
        assert opened.is_revealed is True
        assert opened.adjacent_count == 3
        assert hidden_cell.is_revealed is False

    def test_opened_mine_has_no_count(self, mine_cell: Cell) -> None:
        """Mines never carry an adjacent count."""
        assert mine_cell.opened(2).adjacent_count is None

    def test_opened_clears_flag(self) -> None:
        """A revealed cell is never also flagged."""
        cell = Cell(flagged=True).opened(0)
        assert cell.is_flagged is False


# ============================================================================
# Cell Flag Tests
# ============================================================================

class TestCellFlag:
    """Test flag toggling."""

    def test_flag_hidden_cell(self, hidden_cell: Cell) -> None:
        """Toggling a hidden cell should flag it."""
        assert hidden_cell.flag_toggled().is_flagged is True

    def test_unflag_returns_to_hidden(self, hidden_cell: Cell) -> None:
        """Toggling twice should return to hidden."""
        assert hidden_cell.flag_toggled().flag_toggled().is_hidden is True

    def test_flag_revealed_cell_is_unchanged(self, hidden_cell: Cell) -> None:
        """Revealed cells cannot be flagged."""
        opened = hidden_cell.opened(1)
        assert opened.flag_toggled() is opened


# ============================================================================
# Observation and Display Tests
# ============================================================================

class TestCellDisplay:
    """Test observation codes and display text."""

    def test_hidden_observation(self, hidden_cell: Cell) -> None:
        assert hidden_cell.to_observation() == -1

    def test_flagged_observation(self, hidden_cell: Cell) -> None:
        assert hidden_cell.flag_toggled().to_observation() == -2

    def test_revealed_count_observation(self, hidden_cell: Cell) -> None:
        assert hidden_cell.opened(4).to_observation() == 4

    def test_revealed_mine_observation(self, mine_cell: Cell) -> None:
        assert mine_cell.opened().to_observation() == 9

    def test_hidden_mine_is_masked(self, mine_cell: Cell) -> None:
        """A hidden mine must not give itself away."""
        assert mine_cell.display_value() == ""
        assert mine_cell.to_observation() == -1

    def test_display_values(self, hidden_cell: Cell, mine_cell: Cell) -> None:
        """Display text for each kind of cell."""
        assert hidden_cell.flag_toggled().display_value() == "!"
        assert hidden_cell.opened(2).display_value() == "2"
        assert hidden_cell.opened(0).display_value() == ""
        assert mine_cell.opened().display_value() == "X"
