"""
UI text utilities for Square Game.

Formats the game snapshot into the strings drawn on each screen.
"""

from __future__ import annotations

from square_game.game import GameSnapshot

TITLE: str = "Square Game"
HIGH_SCORE_TITLE: str = "High Score"
GUIDE_TITLE: str = "Guide"

GUIDE_LINES: tuple[str, ...] = (
    "Match two squares of the same color to increase your score.",
    "If you match incorrectly, the game is over!",
)

MENU_BUTTONS: tuple[str, ...] = ("Start", "High Score", "Guide")
GAME_OVER_BUTTONS: tuple[str, ...] = ("Restart", "Back to Menu")
OVERLAY_BUTTONS: tuple[str, ...] = ("Back to Menu",)


def format_score(snapshot: GameSnapshot) -> str:
    return f"Score: {snapshot.score}"


def format_game_over(snapshot: GameSnapshot) -> str:
    return f"Game Over! Score: {snapshot.score}"


def format_high_score(snapshot: GameSnapshot) -> str:
    """The bare number shown large on the high-score screen."""
    return str(snapshot.high_score)
