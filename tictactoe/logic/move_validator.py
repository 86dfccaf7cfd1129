"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from enum import Enum
from typing import Optional, Tuple, List
from dataclasses import dataclass

from .game_state import GameState, Cell, check_position


class RejectionReason(Enum):
    """Why a move was turned down."""
    GAME_OVER = "game_over"
    CELL_OCCUPIED = "cell_occupied"


@dataclass(frozen=True)
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    reason: Optional[RejectionReason] = None
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules, checked in this order:
    1. The round must not be over
    2. Can only place on empty cells

    Coordinates off the board are a caller bug, not a rejected move, and
    raise InvalidPositionError before either rule is looked at.
    """

    def validate_move(
        self,
        game_state: GameState,
        row: int,
        col: int
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            row: Row to place the mark (0-2).
            col: Column to place the mark (0-2).

        Returns:
            ValidationResult with is_valid, reason and error_message.

        Raises:
            InvalidPositionError: If row or col is outside the board.
        """
        check_position(row, col)

        if game_state.game_over:
            return ValidationResult(
                is_valid=False,
                reason=RejectionReason.GAME_OVER,
                error_message="Game is already over!"
            )

        occupant = game_state.board[row, col]
        if occupant != Cell.EMPTY:
            return ValidationResult(
                is_valid=False,
                reason=RejectionReason.CELL_OCCUPIED,
                error_message=f"Cell ({row}, {col}) is already occupied by {occupant.symbol}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState) -> List[Tuple[int, int]]:
        """
        Get all valid moves for the current player.

        Args:
            game_state: Current game state.

        Returns:
            List of (row, col) valid move positions. Empty once the round is over.
        """
        if game_state.game_over:
            return []

        return game_state.get_empty_cells()
