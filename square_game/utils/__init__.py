"""Utility functions and helpers."""

from .functions import (
    cell_at,
    cell_rect,
    index_to_row_col,
    is_valid_index,
    row_col_to_index,
)
from .input_handler import GameAction, InputEvent, dispatch

__all__ = [
    "cell_at",
    "cell_rect",
    "index_to_row_col",
    "is_valid_index",
    "row_col_to_index",
    "GameAction",
    "InputEvent",
    "dispatch",
]
