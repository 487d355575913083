"""
Board module for Minesweeper.

Implements the game engine: mine placement, adjacency counts, reveal
propagation, flagging, and win/lose detection.
"""
import random
from collections import deque
from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Optional, Set, Tuple

from .cell import Cell, CellState, GameState
from .errors import InvalidConfiguration, OutOfBounds
from .view import BoardView, CellView

Position = Tuple[int, int]


# ============================================================================
# Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Grid height.
        cols: Grid width.
        num_mines: Total mines to place.
    """

    rows: int = 9
    cols: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values form a playable board."""
        if self.rows < 1 or self.cols < 1:
            raise InvalidConfiguration(
                f"Board dimensions must be positive, got {self.rows}x{self.cols}"
            )
        if self.num_mines < 0:
            raise InvalidConfiguration("Number of mines cannot be negative")
        max_mines = self.rows * self.cols - 1
        if self.num_mines > max_mines:
            raise InvalidConfiguration(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.rows * self.cols

    @property
    def safe_cells(self) -> int:
        """Number of cells that must be revealed to win."""
        return self.total_cells - self.num_mines


@dataclass(frozen=True)
class RevealResult:
    """
    Outcome of a reveal command.

    Attributes:
        game_state: Game state after the reveal.
        changed: Positions whose cell state changed, for incremental redraw.
    """

    game_state: GameState
    changed: FrozenSet[Position] = frozenset()

    def __bool__(self) -> bool:
        return bool(self.changed)


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Minesweeper game board.

    A board is built once per game with its mines already placed; restarting
    means building a new board.
    """

    def __init__(
        self,
        config: BoardConfig,
        mine_positions: Iterable[Position],
    ) -> None:
        """
        Build a board with a known mine layout.

        Prefer ``new_game`` for random boards and ``Board.from_mines`` for
        fixed layouts.

        Args:
            config: Validated board configuration.
            mine_positions: Exactly ``config.num_mines`` distinct positions.
        """
        self.config = config
        self._game_state = GameState.IN_PROGRESS
        self._cells_revealed = 0
        self._grid: List[List[Cell]] = [
            [Cell() for _ in range(config.cols)]
            for _ in range(config.rows)
        ]

        mines = set(mine_positions)
        if len(mines) != config.num_mines:
            raise InvalidConfiguration(
                f"Expected {config.num_mines} distinct mines, got {len(mines)}"
            )
        for row, col in mines:
            self._check_position(row, col)
            self._grid[row][col].is_mine = True
        self._calculate_adjacent_mines()

    @classmethod
    def from_mines(
        cls, rows: int, cols: int, mines: Iterable[Position]
    ) -> "Board":
        """
        Build a board with mines at the given positions.

        Raises:
            InvalidConfiguration: If the layout cannot form a valid board.
            OutOfBounds: If a mine lies outside the grid.
        """
        mines = set(mines)
        return cls(BoardConfig(rows, cols, len(mines)), mines)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all safe cells."""
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                if not self._grid[row][col].is_mine:
                    count = self._count_adjacent_mines(row, col)
                    self._grid[row][col].adjacent_mines = count

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self._get_neighbors(row, col):
            if self._grid[neighbor_row][neighbor_col].is_mine:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get in-bounds neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples, up to eight.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.rows and 0 <= col < self.config.cols

    def _check_position(self, row: int, col: int) -> None:
        if not self.is_valid_position(row, col):
            raise OutOfBounds(row, col, (self.config.rows, self.config.cols))

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> RevealResult:
        """
        Reveal a cell at the given position.

        Revealing a mine loses the game and exposes every mine. Revealing a
        cell with no adjacent mines floods outward through the connected
        empty region.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            The resulting game state and the positions that changed. The
            result is empty when the game is over or the cell is not hidden.

        Raises:
            OutOfBounds: If the position is outside the board.
        """
        self._check_position(row, col)
        if not self.is_playing:
            return RevealResult(self._game_state)

        cell = self._grid[row][col]
        if not cell.reveal():
            return RevealResult(self._game_state)

        self._cells_revealed += 1
        changed = {(row, col)}

        # Mine check must come before the win check.
        if cell.is_mine:
            self._game_state = GameState.LOST
            changed |= self._expose_mines()
            return RevealResult(self._game_state, frozenset(changed))

        if cell.adjacent_mines == 0:
            changed |= self._flood_fill(row, col)

        self._check_win_condition()
        return RevealResult(self._game_state, frozenset(changed))

    def _flood_fill(self, row: int, col: int) -> Set[Position]:
        """Reveal the empty region around an already revealed empty cell."""
        revealed = set()
        queue = deque([(row, col)])
        while queue:
            current_row, current_col = queue.popleft()
            for neighbor_row, neighbor_col in self._get_neighbors(
                current_row, current_col
            ):
                neighbor = self._grid[neighbor_row][neighbor_col]
                if neighbor.is_mine or not neighbor.reveal():
                    continue
                self._cells_revealed += 1
                revealed.add((neighbor_row, neighbor_col))
                if neighbor.adjacent_mines == 0:
                    queue.append((neighbor_row, neighbor_col))
        return revealed

    def _expose_mines(self) -> Set[Position]:
        """Open every mine. Does not count towards revealed cells."""
        exposed = set()
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                cell = self._grid[row][col]
                if cell.is_mine and cell.expose():
                    exposed.add((row, col))
        return exposed

    def _check_win_condition(self) -> None:
        """Check if all non-mine cells are revealed."""
        if self._cells_revealed == self.config.safe_cells:
            self._game_state = GameState.WON

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if flag was toggled, False if the game is over or the cell
            is already revealed.

        Raises:
            OutOfBounds: If the position is outside the board.
        """
        self._check_position(row, col)
        if not self.is_playing:
            return False
        return self._grid[row][col].toggle_flag()

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._game_state == GameState.IN_PROGRESS

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._game_state == GameState.LOST

    @property
    def revealed_count(self) -> int:
        """Cells revealed by play. Mines exposed on a loss are not counted."""
        return self._cells_revealed

    @property
    def flag_count(self) -> int:
        """Number of flagged cells."""
        return sum(cell.is_flagged for line in self._grid for cell in line)

    def get_cell(self, row: int, col: int) -> Cell:
        """
        Get the cell at a position.

        The returned cell is the live engine object; callers must not
        mutate it. Presentation code should use ``get_state`` instead.
        """
        self._check_position(row, col)
        return self._grid[row][col]

    def get_state(self) -> BoardView:
        """
        Take a read-only snapshot for presentation.

        Mine locations of unrevealed cells are withheld while the game is in
        progress.
        """
        game_over = not self.is_playing
        cells = tuple(
            tuple(self._view_cell(cell, game_over) for cell in line)
            for line in self._grid
        )
        return BoardView(
            rows=self.config.rows,
            cols=self.config.cols,
            num_mines=self.config.num_mines,
            game_state=self._game_state,
            revealed_count=self._cells_revealed,
            cells=cells,
        )

    @staticmethod
    def _view_cell(cell: Cell, game_over: bool) -> CellView:
        disclosed = cell.is_revealed or game_over
        return CellView(
            revealed=cell.is_revealed,
            flagged=cell.is_flagged,
            is_mine=cell.is_mine if disclosed else None,
            adjacent_mines=(
                cell.adjacent_mines
                if cell.is_revealed and not cell.is_mine
                else None
            ),
        )

    def get_hidden_positions(self) -> List[Position]:
        """
        Get positions that can still be revealed.

        Returns:
            List of (row, col) positions that are hidden and unflagged.
        """
        positions = []
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                if self._grid[row][col].state == CellState.HIDDEN:
                    positions.append((row, col))
        return positions


# ============================================================================
# Board Construction
# ============================================================================

def place_mines(
    config: BoardConfig, random_source: random.Random
) -> Set[Position]:
    """
    Choose distinct mine positions uniformly at random.

    Sparse boards use rejection sampling: while mines cover at most half of
    the grid, each draw succeeds with probability of at least one half, so
    fewer than two draws per mine are expected. Denser boards draw a sample
    of all positions instead, which is a partial Fisher-Yates shuffle and
    always finishes in O(rows * cols).

    Args:
        config: Validated board configuration.
        random_source: Generator providing ``randrange`` and ``sample``.

    Returns:
        Set of exactly ``config.num_mines`` positions.
    """
    if config.num_mines * 2 > config.total_cells:
        positions = [
            (row, col)
            for row in range(config.rows)
            for col in range(config.cols)
        ]
        return set(random_source.sample(positions, config.num_mines))

    mines: Set[Position] = set()
    while len(mines) < config.num_mines:
        row = random_source.randrange(config.rows)
        col = random_source.randrange(config.cols)
        mines.add((row, col))
    return mines


def new_game(
    rows: int,
    cols: int,
    mine_count: int,
    random_source: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> Board:
    """
    Start a new game on a freshly generated board.

    Args:
        rows: Grid height.
        cols: Grid width.
        mine_count: Number of mines, less than ``rows * cols``.
        random_source: Generator used for mine placement. Defaults to a new
            ``random.Random`` seeded with ``seed``.
        seed: Seed for the default generator. Ignored when
            ``random_source`` is given.

    Returns:
        A board in progress with no cells revealed.

    Raises:
        InvalidConfiguration: If the dimensions or mine count are invalid.
    """
    config = BoardConfig(rows, cols, mine_count)
    if random_source is None:
        random_source = random.Random(seed)
    return Board(config, place_mines(config, random_source))
