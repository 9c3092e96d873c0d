"""
Core game logic for Square Game.

Owns the board, the current selection and the session, turns player
intents into state changes, and publishes a read-only snapshot after
every change.  The presentation layer calls ``update`` once per frame
so that deferred recolors fire on the same thread as the intents.
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from blinker import Signal

from square_game.config import BOARD_SIZE, RECOLOR_DELAY
from square_game.models.board import Board, Color, Selection
from square_game.models.recolor import RecolorScheduler
from square_game.models.session import GamePhase, Session
from square_game.utils.functions import is_valid_index

logger = logging.getLogger(__name__)


class CellIndexError(IndexError):
    """A tap addressed a cell that is not on the board."""


# ── Snapshot ────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class GameSnapshot:
    """Everything the presentation layer needs to draw one frame."""

    phase: GamePhase
    colors: tuple[Color, ...]
    selection: tuple[int, ...]
    score: int
    high_score: int
    pending_recolors: int = 0

    def is_selected(self, index: int) -> bool:
        return index in self.selection


# ── Game ────────────────────────────────────────────────────────────────────


@dataclass
class Game:
    """Top-level game controller.

    Created once per process in the MENU phase with a random board.
    ``rng`` and ``clock`` can be injected to make play deterministic.
    """

    rng: random.Random = field(default_factory=random.Random, repr=False)
    clock: Callable[[], float] = field(default=time.monotonic, repr=False)
    recolor_delay: float = RECOLOR_DELAY

    # Subsystems
    board: Board = field(init=False)
    selection: Selection = field(init=False, default_factory=Selection)
    session: Session = field(init=False, default_factory=Session)
    recolors: RecolorScheduler = field(init=False)
    changed: Signal = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.board = Board(rng=self.rng)
        self.recolors = RecolorScheduler(delay=self.recolor_delay)
        self.changed = Signal("changed")

    # ── Queries ─────────────────────────────────────────────────────────

    @property
    def phase(self) -> GamePhase:
        return self.session.phase

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            phase=self.session.phase,
            colors=self.board.colors,
            selection=tuple(self.selection.indices),
            score=self.session.score,
            high_score=self.session.high_score,
            pending_recolors=self.recolors.pending_count,
        )

    def subscribe(self, receiver: Callable[..., None]) -> None:
        """Call *receiver(sender, snapshot=...)* after every state change."""
        self.changed.connect(receiver, weak=False)

    def _publish(self) -> None:
        self.changed.send(self, snapshot=self.snapshot())

    # ── Lifecycle ───────────────────────────────────────────────────────

    def _reset(self, phase: GamePhase) -> None:
        previous = self.session.phase
        self.session.reset(phase)
        self.selection.clear()
        self.board.randomize()
        logger.debug("phase %s -> %s", previous.name, phase.name)
        self._publish()

    def start(self) -> None:
        """Begin a fresh game on a newly randomized board."""
        self._reset(GamePhase.PLAYING)

    def restart(self) -> None:
        """Play again after a game over; identical to ``start``."""
        self._reset(GamePhase.PLAYING)

    def return_to_menu(self) -> None:
        """Abandon the current game and go back to the menu."""
        self._reset(GamePhase.MENU)

    # ── Player actions ──────────────────────────────────────────────────

    def tap(self, index: int) -> None:
        """Select the cell at *index*; the second tap of a pair is scored.

        Taps outside PLAYING and repeats of an already-selected cell are
        ignored.  An index that is not on the board raises CellIndexError.
        """
        if not is_valid_index(index):
            raise CellIndexError(
                f"cell index must be an int in [0, {BOARD_SIZE - 1}], got {index!r}"
            )
        if not self.session.is_playing:
            return
        if not self.selection.add(index):
            return

        if self.selection.is_pair:
            self._evaluate_pair()
        self._publish()

    def _evaluate_pair(self) -> None:
        first, second = self.selection.pair()
        if self.board.same_color(first, second):
            self.session.add_match()
            entry = self.recolors.schedule((first, second), self.clock())
            logger.debug(
                "match %d/%d, score %d, recolor due at %.3f",
                first, second, self.session.score, entry.due,
            )
        else:
            self.session.phase = GamePhase.GAME_OVER
            logger.debug(
                "mismatch %d/%d, game over with score %d",
                first, second, self.session.score,
            )
        self.selection.clear()

    # ── Per-frame update ────────────────────────────────────────────────

    def update(self, now: Optional[float] = None) -> GamePhase:
        """Fire every deferred recolor that has fallen due.

        Recolors apply whatever the current phase is.  Returns the
        current GamePhase after the update.
        """
        if now is None:
            now = self.clock()
        for entry in self.recolors.pop_due(now):
            for index in entry.indices:
                self.board.recolor(index)
            logger.debug("recolored cells %s", entry.indices)
            self._publish()
        return self.session.phase
