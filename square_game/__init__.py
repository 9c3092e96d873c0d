"""
Square Game - match two squares of the same color, lose on a mismatch.
"""

__version__ = "1.0.0"

from .game import CellIndexError, Game, GamePhase, GameSnapshot
from .config import *  # noqa: F401,F403

__all__ = ["CellIndexError", "Game", "GamePhase", "GameSnapshot"]
