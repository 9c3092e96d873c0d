"""
Shared utility functions for Square Game.

Grid geometry helpers: index/row/column conversion, cell rectangles in
screen space, and pixel hit-testing for the presentation layer.
"""

from __future__ import annotations

from typing import Optional

from square_game.config import (
    BOARD_SIZE,
    CELL_SIZE,
    CELL_SPACING,
    GRID_COLUMNS,
    GRID_MARGIN,
    HEADER_HEIGHT,
)


# ── Index helpers ───────────────────────────────────────────────────────────


def is_valid_index(index: object) -> bool:
    """Return True if *index* addresses a cell on the board."""
    if isinstance(index, bool) or not isinstance(index, int):
        return False
    return 0 <= index < BOARD_SIZE


def index_to_row_col(index: int) -> tuple[int, int]:
    """Return the (row, col) of a cell index."""
    return divmod(index, GRID_COLUMNS)


def row_col_to_index(row: int, col: int) -> int:
    return row * GRID_COLUMNS + col


# ── Screen geometry ─────────────────────────────────────────────────────────


def cell_rect(index: int, scale: int = 1) -> tuple[int, int, int, int]:
    """Return the (x, y, width, height) of a cell in scaled screen pixels."""
    row, col = index_to_row_col(index)
    x = GRID_MARGIN + col * (CELL_SIZE + CELL_SPACING)
    y = HEADER_HEIGHT + row * (CELL_SIZE + CELL_SPACING)
    return (x * scale, y * scale, CELL_SIZE * scale, CELL_SIZE * scale)


def cell_at(x: int, y: int, scale: int = 1) -> Optional[int]:
    """Return the index of the cell under pixel (*x*, *y*), if any.

    Points that fall in the spacing between cells hit nothing.
    """
    for index in range(BOARD_SIZE):
        cx, cy, w, h = cell_rect(index, scale)
        if cx <= x < cx + w and cy <= y < cy + h:
            return index
    return None
