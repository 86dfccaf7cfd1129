"""Tests for move validation."""

import pytest

from tictactoe.logic import (
    Cell, GameState, InvalidPositionError, MoveValidator, RejectionReason,
)
from tests.helpers import board_from_text


@pytest.fixture
def validator():
    return MoveValidator()


class TestValidateMove:
    """Test the move rules."""

    def test_empty_cell_is_valid(self, validator):
        result = validator.validate_move(GameState(), 1, 1)
        assert result.is_valid
        assert result.reason is None
        assert result.error_message is None

    def test_occupied_cell(self, validator):
        state = GameState(board=board_from_text("...", ".X.", "..."))
        result = validator.validate_move(state, 1, 1)

        assert not result.is_valid
        assert result.reason == RejectionReason.CELL_OCCUPIED
        assert "(1, 1)" in result.error_message

    def test_game_over_checked_before_occupancy(self, validator):
        state = GameState(
            board=board_from_text("XXX", "OO.", "..."),
            game_over=True,
            winner=Cell.X,
        )
        assert validator.validate_move(state, 0, 0).reason == RejectionReason.GAME_OVER
        assert validator.validate_move(state, 2, 2).reason == RejectionReason.GAME_OVER

    @pytest.mark.parametrize("row, col", [(-1, 1), (1, -1), (3, 0), (0, 3), (5, 5)])
    def test_out_of_range_raises(self, validator, row, col):
        with pytest.raises(InvalidPositionError):
            validator.validate_move(GameState(), row, col)

    def test_out_of_range_raises_even_after_game_over(self, validator):
        with pytest.raises(InvalidPositionError):
            validator.validate_move(GameState(game_over=True), 3, 3)


class TestValidMoves:
    """Test listing the playable cells."""

    def test_all_cells_on_new_board(self, validator):
        assert len(validator.get_valid_moves(GameState())) == 9

    def test_only_empty_cells(self, validator):
        state = GameState(board=board_from_text("XO.", "...", "..X"))
        moves = validator.get_valid_moves(state)
        assert (0, 0) not in moves
        assert (0, 2) in moves
        assert len(moves) == 6

    def test_none_after_game_over(self, validator):
        assert validator.get_valid_moves(GameState(game_over=True)) == []
