"""
Unit tests for the Square Game models.

Covers color draws, the fixed-size board, per-turn selection, session
scoring, the recolor scheduler, and grid geometry helpers.
"""

import random

import pytest

from square_game.config import (
    BOARD_SIZE,
    CELL_SIZE,
    CELL_SPACING,
    GRID_COLUMNS,
    GRID_MARGIN,
    HEADER_HEIGHT,
    POINTS_PER_MATCH,
    RECOLOR_DELAY,
)
from square_game.models.board import Board, Cell, Color, Selection, random_color
from square_game.models.recolor import PendingRecolor, RecolorScheduler
from square_game.models.session import GamePhase, Session
from square_game.utils.functions import (
    cell_at,
    cell_rect,
    index_to_row_col,
    is_valid_index,
    row_col_to_index,
)


# ── Colors ──────────────────────────────────────────────────────────────────


class TestColor:
    def test_three_colors(self):
        assert {c.value for c in Color} == {"red", "yellow", "blue"}

    def test_random_color_draws_all(self):
        rng = random.Random(1)
        seen = {random_color(rng) for _ in range(200)}
        assert seen == set(Color)


# ── Board ───────────────────────────────────────────────────────────────────


class TestBoard:
    def test_nine_cells(self):
        board = Board(rng=random.Random(0))
        assert len(board) == BOARD_SIZE
        assert len(board.colors) == BOARD_SIZE

    def test_seeded_boards_repeat(self):
        assert Board(rng=random.Random(5)).colors == Board(rng=random.Random(5)).colors

    def test_wrong_size_rejected(self):
        with pytest.raises(ValueError):
            Board(cells=[Cell(color=Color.RED)] * 4)

    def test_cell_ids_unique(self):
        board = Board()
        assert len({cell.cell_id for cell in board.cells}) == BOARD_SIZE

    def test_randomize_keeps_cells(self):
        board = Board(rng=random.Random(2))
        cells = list(board.cells)
        board.randomize()
        assert all(a is b for a, b in zip(cells, board.cells))
        assert all(isinstance(c, Color) for c in board.colors)

    def test_recolor_only_touches_one_cell(self):
        board = Board(rng=random.Random(3))
        before = board.colors
        color = board.recolor(4)
        assert board[4].color == color
        assert board.colors[:4] == before[:4]
        assert board.colors[5:] == before[5:]

    def test_same_color(self):
        cells = [Cell(color=Color.RED) for _ in range(BOARD_SIZE)]
        cells[8].color = Color.BLUE
        board = Board(cells=cells)
        assert board.same_color(0, 1)
        assert not board.same_color(0, 8)


# ── Selection ───────────────────────────────────────────────────────────────


class TestSelection:
    def test_starts_empty(self):
        assert len(Selection()) == 0

    def test_keeps_tap_order(self):
        sel = Selection()
        sel.add(7)
        sel.add(2)
        assert sel.pair() == (7, 2)
        assert sel.is_pair

    def test_rejects_duplicate(self):
        sel = Selection()
        assert sel.add(3) is True
        assert sel.add(3) is False
        assert len(sel) == 1

    def test_rejects_third(self):
        sel = Selection()
        sel.add(0)
        sel.add(1)
        assert sel.add(2) is False
        assert len(sel) == 2

    def test_clear(self):
        sel = Selection()
        sel.add(0)
        sel.clear()
        assert len(sel) == 0
        assert 0 not in sel


# ── Session ─────────────────────────────────────────────────────────────────


class TestSession:
    def test_defaults(self):
        session = Session()
        assert session.phase == GamePhase.MENU
        assert session.score == 0
        assert session.high_score == 0

    def test_add_match(self):
        session = Session()
        session.add_match()
        assert session.score == POINTS_PER_MATCH
        assert session.high_score == POINTS_PER_MATCH

    def test_high_score_not_lowered(self):
        session = Session(high_score=10)
        session.add_match()
        assert session.score == 1
        assert session.high_score == 10

    def test_reset_keeps_high_score(self):
        session = Session()
        for _ in range(4):
            session.add_match()
        session.reset(GamePhase.PLAYING)
        assert session.score == 0
        assert session.high_score == 4
        assert session.is_playing


# ── Recolor scheduler ───────────────────────────────────────────────────────


class TestRecolorScheduler:
    def test_default_delay(self):
        assert RecolorScheduler().delay == RECOLOR_DELAY == 0.5

    def test_schedule_sets_due(self):
        sched = RecolorScheduler(delay=0.5)
        entry = sched.schedule((1, 2), now=10.0)
        assert entry == PendingRecolor(due=10.5, indices=(1, 2))
        assert sched.pending_count == 1

    def test_pop_due_in_order(self):
        sched = RecolorScheduler(delay=1.0)
        first = sched.schedule((0, 1), now=0.0)
        second = sched.schedule((2, 3), now=0.5)
        late = sched.schedule((4, 5), now=5.0)
        assert sched.pop_due(1.5) == [first, second]
        assert sched.pending == [late]

    def test_nothing_due(self):
        sched = RecolorScheduler(delay=1.0)
        sched.schedule((0, 1), now=0.0)
        assert sched.pop_due(0.99) == []
        assert sched.pending_count == 1

    def test_zero_delay_due_immediately(self):
        sched = RecolorScheduler(delay=0.0)
        sched.schedule((0, 1), now=3.0)
        assert len(sched.pop_due(3.0)) == 1

    def test_negative_delay_rejected(self):
        with pytest.raises(ValueError):
            RecolorScheduler(delay=-0.1)


# ── Grid geometry ───────────────────────────────────────────────────────────


class TestGeometry:
    def test_valid_indices(self):
        assert all(is_valid_index(i) for i in range(BOARD_SIZE))
        assert not is_valid_index(-1)
        assert not is_valid_index(BOARD_SIZE)
        assert not is_valid_index(False)

    def test_row_col(self):
        assert index_to_row_col(0) == (0, 0)
        assert index_to_row_col(5) == (1, 2)
        assert index_to_row_col(8) == (2, 2)
        for i in range(BOARD_SIZE):
            assert row_col_to_index(*index_to_row_col(i)) == i

    def test_cell_rect_first(self):
        assert cell_rect(0) == (GRID_MARGIN, HEADER_HEIGHT, CELL_SIZE, CELL_SIZE)

    def test_cell_rect_scaled(self):
        x, y, w, h = cell_rect(4, scale=2)
        step = CELL_SIZE + CELL_SPACING
        assert (x, y) == ((GRID_MARGIN + step) * 2, (HEADER_HEIGHT + step) * 2)
        assert w == h == CELL_SIZE * 2

    def test_cell_at_centres(self):
        for i in range(BOARD_SIZE):
            x, y, w, h = cell_rect(i, scale=2)
            assert cell_at(x + w // 2, y + h // 2, scale=2) == i

    def test_cell_at_gap_and_outside(self):
        x, y, w, _ = cell_rect(0)
        assert cell_at(x + w + CELL_SPACING // 2, y + 1) is None
        assert cell_at(0, 0) is None

    def test_three_columns(self):
        assert GRID_COLUMNS == 3
