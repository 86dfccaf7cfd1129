"""
Logic module for TicTacToe.
Handles game state, rules, and scoring.
"""

from .game_state import (
    GameState, Board, Cell, LineType, GameStatus, WinningLine, Move,
    InvalidPositionError,
)
from .move_validator import MoveValidator, ValidationResult, RejectionReason
from .win_checker import WinChecker
from .game_engine import GameEngine
