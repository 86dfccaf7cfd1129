"""
Configuration for the TicTacToe game engine.
Board geometry, how cells are drawn as text, and logging defaults.
"""

import os


class GameConfig:
    """
    Configuration class for game settings.
    The engine only supports the classic 3x3 board.
    """
    
    # ==================== BOARD SETTINGS ====================
    BOARD_SIZE = 3
    
    # Text symbols for each cell value (used by Board rendering)
    EMPTY_SYMBOL = "."
    X_SYMBOL = "X"
    O_SYMBOL = "O"
    
    # ==================== LOGGING SETTINGS ====================
    # Override with TICTACTOE_LOG_LEVEL=DEBUG to trace every move
    LOG_LEVEL = os.getenv("TICTACTOE_LOG_LEVEL", "WARNING")
    LOG_FORMAT = "simple"  # key into LOG_FORMATS
    LOG_FORMATS = {
        "simple": "%(name)s - %(levelname)s - %(message)s",
        "detailed": "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
        "moves": "%(name)s: %(message)s",
    }
