"""
Game session module.

Keeps the configuration of the current game so a presentation layer can
restart with the same settings.
"""
import random
from typing import Optional

from .board import Board, BoardConfig, RevealResult, new_game
from .view import BoardView


class GameSession:
    """
    Owns the current board and replaces it on restart.

    Presentation code forwards clicks to ``reveal``/``toggle_flag``, calls
    ``restart`` for the restart button, and redraws from ``view``.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        random_source: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        """
        Start a session and deal its first board.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            random_source: Generator shared by every board of the session.
            seed: Seed for the default generator.
        """
        self.config = config or BoardConfig()
        self.random_source = random_source or random.Random(seed)
        self.games_played = 0
        self.board = self._deal()

    def _deal(self) -> Board:
        self.games_played += 1
        return new_game(
            self.config.rows,
            self.config.cols,
            self.config.num_mines,
            random_source=self.random_source,
        )

    def restart(self) -> Board:
        """Replace the board with a new one using the same configuration."""
        self.board = self._deal()
        return self.board

    def reveal(self, row: int, col: int) -> RevealResult:
        """Reveal a cell on the current board."""
        return self.board.reveal(row, col)

    def toggle_flag(self, row: int, col: int) -> bool:
        """Toggle a flag on the current board."""
        return self.board.toggle_flag(row, col)

    def view(self) -> BoardView:
        """Snapshot of the current board."""
        return self.board.get_state()
