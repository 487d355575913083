"""
Cell module for Minesweeper.

A cell carries its fixed content (mine or adjacent mine count) and its
mutable play state (hidden/revealed/flagged). Also defines the overall
game state.
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible play states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


class GameState(Enum):
    """Possible states of the game. WON and LOST are terminal."""

    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()

    @property
    def status_text(self) -> str:
        """Short display text: "in progress", "won" or "lost"."""
        return self.name.lower().replace("_", " ")


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    A single square of the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine. Fixed at generation.
        adjacent_mines: Count of mines in neighboring cells (0-8).
            Not consulted for mine cells.
        state: Current play state (hidden, revealed, or flagged).
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if the cell went from hidden to revealed, False if it was
            already revealed or is flagged.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def expose(self) -> bool:
        """
        Force the cell open, even when flagged.

        Used to show every mine once the game is lost.

        Returns:
            True if the state changed.
        """
        if self.state == CellState.REVEALED:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED
