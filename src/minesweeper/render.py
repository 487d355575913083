"""
Text rendering of board views.
"""
from .cell import GameState
from .view import BoardView, CellView


HEADLINES = {
    GameState.IN_PROGRESS: "Minesweeper",
    GameState.WON: "You Win!",
    GameState.LOST: "Game Over!",
}


def cell_symbol(view: CellView) -> str:
    """Single character for one cell."""
    if view.flagged:
        return "F"
    if not view.revealed:
        return "."
    if view.is_mine:
        return "*"
    if view.adjacent_mines == 0:
        return " "
    return str(view.adjacent_mines)


def status_line(view: BoardView) -> str:
    """Headline plus mine counter."""
    return f"{HEADLINES[view.game_state]}  (mines left: {view.mines_remaining})"


def render_ansi(view: BoardView, coordinates: bool = False) -> str:
    """
    Render board as ASCII string.

    Args:
        view: Snapshot to draw.
        coordinates: Prefix rows and columns with their indices.

    Returns:
        One line per row, cells separated by spaces.
    """
    width = len(str(view.rows - 1))
    lines = []
    if coordinates:
        header = " ".join(str(col % 10) for col in range(view.cols))
        lines.append(" " * (width + 1) + header)

    for row in range(view.rows):
        row_str = " ".join(cell_symbol(cell) for cell in view.cells[row])
        if coordinates:
            row_str = f"{row:>{width}} {row_str}"
        lines.append(row_str)

    return "\n".join(lines)
