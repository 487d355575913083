"""
Unit tests for Cell class.

Tests cell state management and reveal/flag behavior.
"""
from minesweeper import Cell, CellState, GameState


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

    def test_mine_cell_creation(self, mine_cell: Cell) -> None:
        """Can create a cell that is a mine."""
        assert mine_cell.is_mine is True


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

    def test_expose_opens_flagged_cell(self, mine_cell: Cell) -> None:
        """Exposing bypasses the flag."""
        mine_cell.toggle_flag()
        assert mine_cell.expose() is True
        assert mine_cell.is_revealed is True

    def test_expose_revealed_cell_returns_false(self, hidden_cell: Cell) -> None:
        """Exposing an open cell changes nothing."""
        hidden_cell.reveal()
        assert hidden_cell.expose() is False


# ============================================================================
# Cell Flag Tests
# ============================================================================

class TestCellFlag:
    """Test cell flagging behavior."""

    def test_flag_hidden_cell(self, hidden_cell: Cell) -> None:
        """Flagging a hidden cell should succeed."""
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


# ============================================================================
# Game State Tests
# ============================================================================

class TestGameState:
    """Test game state display text."""

    def test_status_text(self) -> None:
        """Each state has a short lowercase label."""
        assert GameState.IN_PROGRESS.status_text == "in progress"
        assert GameState.WON.status_text == "won"
        assert GameState.LOST.status_text == "lost"
