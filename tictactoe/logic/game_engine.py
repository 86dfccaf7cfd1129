"""
Game engine for TicTacToe.
Owns the current GameState and is the only way to move it forward.
"""

import threading
from dataclasses import replace

from ..logging_config import get_game_logger
from .game_state import GameState, Board, Cell, Move
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker

logger = get_game_logger(__name__)


class GameEngine:
    """
    Turn-based state machine for TicTacToe with a running score.

    The engine holds one GameState. Every accepted command builds a new
    snapshot and swaps it in, so a state returned by get_state() is never
    modified afterwards.

    Round lifecycle:
    1. IN_PROGRESS: X moves first, then players alternate
    2. WON or DRAWN: no more moves until reset_round() or reset_score()
    """

    def __init__(self):
        """Initialize the engine with an empty board and a 0-0 score."""
        self.validator = MoveValidator()
        self.win_checker = WinChecker()

        # Guards read-compute-publish of _state
        self._lock = threading.Lock()
        self._state = GameState()

    def get_state(self) -> GameState:
        """Get the current snapshot."""
        return self._state

    @property
    def state(self) -> GameState:
        return self._state

    def validate_move(self, row: int, col: int) -> ValidationResult:
        """
        Check a move against the current state without playing it.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            ValidationResult explaining why the move would be rejected, if it would.
        """
        return self.validator.validate_move(self._state, row, col)

    def make_move(self, row: int, col: int) -> bool:
        """
        Place the current player's mark at the given position.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            True if the move was accepted (including a move that ends the
            round), False if it was rejected. A rejected move leaves the
            state untouched.

        Raises:
            InvalidPositionError: If row or col is outside the board.
        """
        with self._lock:
            state = self._state

            result = self.validator.validate_move(state, row, col)
            if not result.is_valid:
                logger.debug(f"Rejected move ({row}, {col}): {result.error_message}")
                return False

            player = state.current_player
            board = state.board.place(row, col, player)
            moves = state.moves + (Move(player, row, col, len(state.moves)),)

            # Only the player who just moved can have completed a line
            winning_line = self.win_checker.find_winning_line(board, player)

            if winning_line is not None:
                new_state = replace(
                    state,
                    board=board,
                    moves=moves,
                    game_over=True,
                    winner=player,
                    winning_line=winning_line,
                    score_x=state.score_x + (1 if player == Cell.X else 0),
                    score_o=state.score_o + (1 if player == Cell.O else 0),
                )
                logger.info(
                    f"{player.symbol} wins with a {winning_line.type.value} line "
                    f"(score X {new_state.score_x} - O {new_state.score_o})"
                )
            elif board.is_full():
                new_state = replace(
                    state,
                    board=board,
                    moves=moves,
                    game_over=True,
                    winner=Cell.EMPTY,
                    winning_line=None,
                )
                logger.info("Round drawn")
            else:
                new_state = replace(
                    state,
                    board=board,
                    moves=moves,
                    current_player=player.opposite(),
                )
                logger.debug(f"{player.symbol} played ({row}, {col})")

            self._state = new_state
            return True

    def reset_round(self):
        """Clear the board for a new round, X to move. Scores are kept."""
        with self._lock:
            self._state = self._new_round(self._state)
        logger.info("New round started")

    def reset_score(self):
        """Zero both scores and start a new round."""
        with self._lock:
            self._state = self._new_round(replace(self._state, score_x=0, score_o=0))
        logger.info("Scores reset")

    @staticmethod
    def _new_round(state: GameState) -> GameState:
        return replace(
            state,
            board=Board(),
            current_player=Cell.X,
            game_over=False,
            winner=Cell.EMPTY,
            winning_line=None,
            moves=(),
        )
