"""
TicTacToe Game Engine
=====================
The rules and scoring of 3x3 tic-tac-toe, kept separate from any UI.

A presentation layer submits moves to the GameEngine and re-reads the
immutable GameState snapshot after every command to draw the board,
the scores and the turn indicator.
"""

__version__ = "1.0.0"
