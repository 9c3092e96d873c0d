"""User interface text helpers."""

from .text import (
    GUIDE_LINES,
    format_game_over,
    format_high_score,
    format_score,
)

__all__ = [
    "GUIDE_LINES",
    "format_game_over",
    "format_high_score",
    "format_score",
]
