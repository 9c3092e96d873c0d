"""
Session state for Square Game: score, in-process high score and phase.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from square_game.config import POINTS_PER_MATCH


class GamePhase(Enum):
    MENU = auto()
    PLAYING = auto()
    GAME_OVER = auto()


@dataclass
class Session:
    """Tracks the running score and the best score seen this process.

    The high score only ever grows; it is not written anywhere.
    """

    score: int = 0
    high_score: int = 0
    phase: GamePhase = GamePhase.MENU

    def add_match(self, points: int = POINTS_PER_MATCH) -> None:
        """Add *points* to the score and raise the high score to match."""
        self.score += points
        if self.score > self.high_score:
            self.high_score = self.score

    def reset(self, phase: GamePhase) -> None:
        """Zero the score and enter *phase* (high score persists)."""
        self.score = 0
        self.phase = phase

    @property
    def is_playing(self) -> bool:
        return self.phase == GamePhase.PLAYING
