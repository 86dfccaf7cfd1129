"""
Win checker for TicTacToe.
Checks if a player has completed a line or if the round is a draw.
"""

from typing import Optional

import numpy as np

from .game_state import Board, Cell, LineType, WinningLine, BOARD_SIZE


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally).

    Lines are scanned in a fixed order: rows top to bottom, columns left
    to right, the main diagonal, then the anti-diagonal. The first
    complete line is the one reported.
    """

    def find_winning_line(self, board: Board, mark: Cell) -> Optional[WinningLine]:
        """
        Find a complete line of `mark`.

        Args:
            board: The board to check.
            mark: X or O. Only this player's cells are considered.

        Returns:
            The first complete line, or None.
        """
        if mark == Cell.EMPTY:
            raise ValueError("Cannot look for a winning line of EMPTY cells")

        owned = board.mask(mark)
        last = BOARD_SIZE - 1

        # Rows
        for row in range(BOARD_SIZE):
            if owned[row, :].all():
                return WinningLine(LineType.HORIZONTAL, row, 0, row, last)

        # Columns
        for col in range(BOARD_SIZE):
            if owned[:, col].all():
                return WinningLine(LineType.VERTICAL, 0, col, last, col)

        # Diagonals
        if np.diag(owned).all():
            return WinningLine(LineType.DIAGONAL_TOP_LEFT, 0, 0, last, last)

        if np.diag(np.fliplr(owned)).all():
            return WinningLine(LineType.DIAGONAL_TOP_RIGHT, 0, last, last, 0)

        return None

    def check_winner(self, board: Board) -> Cell:
        """
        Check if either player owns a complete line.

        Args:
            board: The board to check.

        Returns:
            The winning player, or Cell.EMPTY if nobody has a line.
        """
        for mark in (Cell.X, Cell.O):
            if self.find_winning_line(board, mark) is not None:
                return mark
        return Cell.EMPTY

    def check_draw(self, board: Board) -> bool:
        """
        Check if the board is a draw: every cell filled and no winner.

        Args:
            board: The board to check.

        Returns:
            True if the round is drawn.
        """
        return board.is_full() and self.check_winner(board) == Cell.EMPTY
