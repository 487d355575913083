"""
Minesweeper game engine.

Provides board generation, reveal and flag commands, read-only views for
presentation, and a Gymnasium environment.
"""
from .errors import MinesweeperError, InvalidConfiguration, OutOfBounds
from .cell import Cell, CellState, GameState
from .board import Board, BoardConfig, RevealResult, new_game, place_mines
from .view import BoardView, CellView
from .session import GameSession
from .render import render_ansi, status_line
from .environment import MinesweeperEnv

__all__ = [
    "MinesweeperError",
    "InvalidConfiguration",
    "OutOfBounds",
    "Cell",
    "CellState",
    "GameState",
    "Board",
    "BoardConfig",
    "RevealResult",
    "new_game",
    "place_mines",
    "BoardView",
    "CellView",
    "GameSession",
    "render_ansi",
    "status_line",
    "MinesweeperEnv",
]
