"""
Configuration constants for Square Game.

Rules constants drive the engine; the display section is only read by
the pygame front end in ``main.py``.
"""

# ---------------------------------------------------------------------------
# Board
# ---------------------------------------------------------------------------
BOARD_SIZE: int = 9     # cells, fixed for the lifetime of the process
GRID_COLUMNS: int = 3   # row = index // 3, col = index % 3
PAIR_SIZE: int = 2      # taps per evaluated turn

# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------
POINTS_PER_MATCH: int = 1

# ---------------------------------------------------------------------------
# Timing
# ---------------------------------------------------------------------------
RECOLOR_DELAY: float = 0.5  # seconds between a match and the pair's recolor
UPDATE_RATE: int = 60       # Hz – presentation loop frame rate

# ---------------------------------------------------------------------------
# Display (unscaled pixels)
# ---------------------------------------------------------------------------
CELL_SIZE: int = 100
CELL_SPACING: int = 10
GRID_MARGIN: int = 20
HEADER_HEIGHT: int = 90
FOOTER_HEIGHT: int = 170

GRID_WIDTH: int = GRID_COLUMNS * CELL_SIZE + (GRID_COLUMNS - 1) * CELL_SPACING
SCREEN_WIDTH: int = GRID_WIDTH + 2 * GRID_MARGIN
SCREEN_HEIGHT: int = HEADER_HEIGHT + GRID_WIDTH + FOOTER_HEIGHT

BUTTON_WIDTH: int = 200
BUTTON_HEIGHT: int = 40
BUTTON_SPACING: int = 20

# ---------------------------------------------------------------------------
# Colors (RGB)
# ---------------------------------------------------------------------------
BACKGROUND_RGB: tuple[int, int, int] = (255, 255, 255)
TEXT_RGB: tuple[int, int, int] = (0, 0, 0)
BORDER_RGB: tuple[int, int, int] = (0, 0, 0)
BUTTON_RGB: tuple[int, int, int] = (0, 122, 255)  # default tint of a text button

CELL_RGB: dict[str, tuple[int, int, int]] = {
    "red": (255, 59, 48),
    "yellow": (255, 204, 0),
    "blue": (0, 122, 255),
}

SELECTED_ALPHA: int = 128  # half opacity for cells in the current selection
