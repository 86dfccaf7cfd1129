"""Shared helpers for TicTacToe tests."""

from tictactoe.logic import Board, Cell, GameEngine

# X takes the top row on its third move
X_WINS_TOP_ROW = [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)]

# O takes the left column on its third move
O_WINS_LEFT_COLUMN = [(0, 1), (0, 0), (1, 1), (1, 0), (0, 2), (2, 0)]

# X takes the main diagonal
X_WINS_DIAGONAL = [(0, 0), (0, 1), (1, 1), (0, 2), (2, 2)]

# Nine moves, nobody completes a line
DRAW = [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (2, 0), (1, 2), (2, 2), (2, 1)]

# X completes the left column with the ninth move
X_WINS_ON_LAST_CELL = [(0, 0), (0, 1), (0, 2), (1, 1), (2, 1), (1, 2), (1, 0), (2, 2), (2, 0)]


def play(engine: GameEngine, moves):
    """Play a list of (row, col) moves, asserting each one is accepted."""
    for row, col in moves:
        assert engine.make_move(row, col), f"move ({row}, {col}) was rejected"
    return engine.get_state()


def board_from_text(*rows: str) -> Board:
    """Build a board from strings like "XO.", one per row."""
    lookup = {"X": Cell.X, "O": Cell.O, ".": Cell.EMPTY}
    return Board.from_rows([[lookup[ch] for ch in row] for row in rows])
