"""
Logging setup for the TicTacToe engine.

The engine modules only ask for a logger; nothing is configured until an
entry point such as main.py calls setup_logging().
"""

import logging
import sys
from typing import Optional

from .config import GameConfig

PACKAGE_PREFIX = "tictactoe."


def setup_logging(level: Optional[str] = None, format_style: Optional[str] = None) -> None:
    """
    Send log records to stdout using one of the GameConfig formats.
    
    Args:
        level: Level name (DEBUG, INFO, ...). Defaults to GameConfig.LOG_LEVEL.
        format_style: Key into GameConfig.LOG_FORMATS. Defaults to
            GameConfig.LOG_FORMAT.
        
    Raises:
        ValueError: If the level or format style is unknown.
    """
    level_name = (level or GameConfig.LOG_LEVEL).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level_name}")
    
    style = format_style or GameConfig.LOG_FORMAT
    if style not in GameConfig.LOG_FORMATS:
        raise ValueError(
            f"Unknown log format '{style}'. Choose from: {', '.join(GameConfig.LOG_FORMATS)}"
        )
    
    # Replaces handlers left by an earlier call
    logging.basicConfig(
        level=numeric_level,
        format=GameConfig.LOG_FORMATS[style],
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True
    )


def get_game_logger(module_name: str) -> logging.Logger:
    """
    Get a logger named after the module, without the package prefix.
    
    'tictactoe.logic.game_engine' logs as 'logic.game_engine'.
    """
    if module_name.startswith(PACKAGE_PREFIX):
        module_name = module_name[len(PACKAGE_PREFIX):]
    return logging.getLogger(module_name)
