"""
Game state for TicTacToe.
Tracks the board, whose turn it is, the round result and the running score.

Every value in this module is immutable. The engine builds a new GameState
for each accepted move, so a snapshot handed to the UI never changes under it.
"""

from enum import Enum
from typing import Optional, List, Tuple, Sequence
from dataclasses import dataclass, field

import numpy as np

from ..config import GameConfig


BOARD_SIZE = GameConfig.BOARD_SIZE


class InvalidPositionError(IndexError):
    """Raised when a row or column falls outside the board."""

    def __init__(self, row: int, col: int):
        super().__init__(
            f"Invalid position ({row}, {col}). Must be 0-{BOARD_SIZE - 1}."
        )
        self.row = row
        self.col = col


def check_position(row: int, col: int):
    """Raise InvalidPositionError unless (row, col) is on the board."""
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        raise InvalidPositionError(row, col)


class Cell(Enum):
    """The value of a board cell. X and O double as the two players."""
    EMPTY = 0
    X = 1
    O = 2

    def opposite(self) -> "Cell":
        """Get the opposite player."""
        if self == Cell.EMPTY:
            raise ValueError("EMPTY has no opposite player")
        return Cell.O if self == Cell.X else Cell.X

    @property
    def symbol(self) -> str:
        """Single character used when drawing the board as text."""
        if self == Cell.X:
            return GameConfig.X_SYMBOL
        if self == Cell.O:
            return GameConfig.O_SYMBOL
        return GameConfig.EMPTY_SYMBOL


class LineType(Enum):
    """Direction of a winning line."""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DIAGONAL_TOP_LEFT = "diagonal_top_left"     # (0,0) -> (2,2)
    DIAGONAL_TOP_RIGHT = "diagonal_top_right"   # (0,2) -> (2,0)


class GameStatus(Enum):
    """Where the round is in its lifecycle."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAWN = "drawn"


@dataclass(frozen=True)
class WinningLine:
    """
    The three cells that won the round.

    Start and end are redundant with the type but let a renderer draw
    the strike-through directly.
    """
    type: LineType
    start_row: int
    start_col: int
    end_row: int
    end_col: int

    def cells(self) -> Tuple[Tuple[int, int], ...]:
        """
        Get the cells of the line, from start to end.

        Returns:
            Tuple of (row, col) positions.
        """
        row_step = int(np.sign(self.end_row - self.start_row))
        col_step = int(np.sign(self.end_col - self.start_col))
        return tuple(
            (self.start_row + i * row_step, self.start_col + i * col_step)
            for i in range(BOARD_SIZE)
        )


@dataclass(frozen=True)
class Move:
    """
    An accepted move.
    """
    player: Cell            # Who made the move
    row: int                # Row (0-2)
    col: int                # Column (0-2)
    move_number: int        # Position in the round, starting at 0


class Board:
    """
    A read-only 3x3 grid of cells.

    Backed by an int8 numpy array holding the Cell values. The array is
    flagged non-writeable, and place() returns a new Board instead of
    changing this one.
    """

    __slots__ = ("_grid",)

    def __init__(self, grid: Optional[np.ndarray] = None):
        """
        Initialize the board.

        Args:
            grid: Optional 3x3 array of cell values (0, 1, 2). The data is
                copied. Defaults to an empty board.
        """
        if grid is None:
            grid = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
        else:
            grid = np.asarray(grid)

        if grid.shape != (BOARD_SIZE, BOARD_SIZE):
            raise ValueError(
                f"Board must be {BOARD_SIZE}x{BOARD_SIZE}, got shape {grid.shape}"
            )

        valid_values = [cell.value for cell in Cell]
        if not np.isin(grid, valid_values).all():
            raise ValueError(f"Board cells must be one of {valid_values}")

        # Checked before the int8 cast, which would wrap 257 to 1
        grid = grid.astype(np.int8)
        grid.flags.writeable = False
        self._grid = grid

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Cell]]) -> "Board":
        """Build a board from nested Cell values, row by row."""
        return cls(np.array([[cell.value for cell in row] for row in rows]))

    def __getitem__(self, position: Tuple[int, int]) -> Cell:
        row, col = position
        check_position(row, col)
        return Cell(int(self._grid[row, col]))

    def place(self, row: int, col: int, mark: Cell) -> "Board":
        """
        Get a copy of this board with a mark placed.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).
            mark: X or O.

        Returns:
            The new board. This board is left untouched.
        """
        check_position(row, col)
        grid = self._grid.copy()
        grid[row, col] = mark.value
        return Board(grid)

    def mask(self, mark: Cell) -> np.ndarray:
        """Boolean array that is True wherever the cell holds `mark`."""
        return self._grid == mark.value

    def is_full(self) -> bool:
        """True if no cell is empty."""
        return not self.mask(Cell.EMPTY).any()

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples, in row-major order.
        """
        return [(int(row), int(col)) for row, col in np.argwhere(self.mask(Cell.EMPTY))]

    def rows(self) -> Tuple[Tuple[Cell, ...], ...]:
        """The board as nested tuples of Cell values."""
        return tuple(tuple(Cell(int(value)) for value in row) for row in self._grid)

    def to_array(self) -> np.ndarray:
        """Writable copy of the underlying cell values."""
        return self._grid.copy()

    def render(self) -> str:
        """Draw the board as text, with row and column indices."""
        lines = ["  " + " ".join(str(col) for col in range(BOARD_SIZE))]
        for index, row in enumerate(self.rows()):
            lines.append(f"{index} " + " ".join(cell.symbol for cell in row))
        return "\n".join(lines)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._grid, other._grid))

    def __hash__(self) -> int:
        return hash(self._grid.tobytes())

    def __repr__(self) -> str:
        return f"Board({self._grid.tolist()})"

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class GameState:
    """
    A snapshot of the TicTacToe game.

    Tracks:
    - The 3x3 board
    - Whose turn is next (kept as the last mover once the round is over)
    - The round result (game_over, winner, winning_line)
    - The running score, carried across rounds
    - The moves accepted so far this round

    winner is Cell.EMPTY both while the round is being played and after a
    draw. Use game_over (or status) to tell the two apart.
    """

    board: Board = field(default_factory=Board)
    current_player: Cell = Cell.X
    game_over: bool = False
    winner: Cell = Cell.EMPTY
    winning_line: Optional[WinningLine] = None
    score_x: int = 0
    score_o: int = 0
    moves: Tuple[Move, ...] = ()

    @property
    def status(self) -> GameStatus:
        """Where the round stands: in progress, won or drawn."""
        if not self.game_over:
            return GameStatus.IN_PROGRESS
        if self.winner == Cell.EMPTY:
            return GameStatus.DRAWN
        return GameStatus.WON

    @property
    def is_draw(self) -> bool:
        """True once the round has ended with no winner."""
        return self.status == GameStatus.DRAWN

    def score_for(self, player: Cell) -> int:
        """
        Get a player's running score.

        Args:
            player: X or O.

        Returns:
            Number of rounds that player has won.
        """
        if player == Cell.X:
            return self.score_x
        if player == Cell.O:
            return self.score_o
        raise ValueError("EMPTY has no score")

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """Empty cells of the current board, in row-major order."""
        return self.board.get_empty_cells()

    def render(self) -> str:
        """Draw the board plus the turn or result line."""
        lines = [self.board.render(), ""]

        status = self.status
        if status == GameStatus.WON:
            lines.append(f"{self.winner.symbol} WINS!")
        elif status == GameStatus.DRAWN:
            lines.append("It's a DRAW!")
        else:
            lines.append(f"Current turn: {self.current_player.symbol}")

        lines.append(f"Score  X: {self.score_x}  O: {self.score_o}")
        return "\n".join(lines)
