"""
Read-only board snapshots for presentation layers.

A view never reveals where unopened mines are while the game is in
progress.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .cell import GameState
from .errors import OutOfBounds


# ============================================================================
# Observation Encoding
# ============================================================================

HIDDEN_VALUE = -1
FLAGGED_VALUE = -2
MINE_VALUE = 9


# ============================================================================
# Views
# ============================================================================

@dataclass(frozen=True)
class CellView:
    """
    What a player may know about one cell.

    Attributes:
        revealed: Whether the cell is open.
        flagged: Whether the cell carries a flag.
        is_mine: Mine flag, or None while it is not yet disclosable.
        adjacent_mines: Neighboring mine count, or None unless the cell is
            an open safe cell.
    """

    revealed: bool
    flagged: bool
    is_mine: Optional[bool] = None
    adjacent_mines: Optional[int] = None

    def to_observation(self) -> int:
        """
        Convert cell to an observation value.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine
        """
        if self.flagged:
            return FLAGGED_VALUE
        if not self.revealed:
            return HIDDEN_VALUE
        if self.is_mine:
            return MINE_VALUE
        return self.adjacent_mines


@dataclass(frozen=True)
class BoardView:
    """Immutable snapshot of a whole board."""

    rows: int
    cols: int
    num_mines: int
    game_state: GameState
    revealed_count: int
    cells: Tuple[Tuple[CellView, ...], ...]

    def cell(self, row: int, col: int) -> CellView:
        """Get the view of one cell."""
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise OutOfBounds(row, col, (self.rows, self.cols))
        return self.cells[row][col]

    @property
    def status_text(self) -> str:
        """Display text for the game state."""
        return self.game_state.status_text

    @property
    def is_over(self) -> bool:
        """Check if the game has ended."""
        return self.game_state != GameState.IN_PROGRESS

    @property
    def flag_count(self) -> int:
        """Number of flagged cells."""
        return sum(view.flagged for line in self.cells for view in line)

    @property
    def mines_remaining(self) -> int:
        """Mines minus flags. Can go negative when the player over-flags."""
        return self.num_mines - self.flag_count

    def to_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array of shape (rows, cols) using the values of
            ``CellView.to_observation``.
        """
        obs = np.full((self.rows, self.cols), HIDDEN_VALUE, dtype=np.int8)
        for row in range(self.rows):
            for col in range(self.cols):
                obs[row, col] = self.cells[row][col].to_observation()
        return obs
