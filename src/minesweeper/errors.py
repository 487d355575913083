"""
Error types raised by the Minesweeper engine.
"""
from typing import Tuple


class MinesweeperError(Exception):
    """Base class for all engine errors."""


class InvalidConfiguration(MinesweeperError, ValueError):
    """Board dimensions or mine count cannot form a playable board."""


class OutOfBounds(MinesweeperError, IndexError):
    """A coordinate lies outside the board."""

    def __init__(self, row: int, col: int, shape: Tuple[int, int]) -> None:
        self.row = row
        self.col = col
        self.shape = shape
        super().__init__(
            f"Position ({row}, {col}) is outside a {shape[0]}x{shape[1]} board"
        )
