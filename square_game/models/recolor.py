"""
Deferred recoloring for Square Game.

A matched pair keeps its colors on screen for a short moment before it
is recolored.  Each match arms one ``PendingRecolor``; the scheduler
hands back every entry whose due time has passed, oldest first, when
the game loop polls it.  Entries cannot be cancelled and carry no
knowledge of phase or selection.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from square_game.config import RECOLOR_DELAY


@dataclass(frozen=True)
class PendingRecolor:
    due: float
    indices: tuple[int, ...]


@dataclass
class RecolorScheduler:
    """Queue of recolors waiting for their delay to elapse."""

    delay: float = RECOLOR_DELAY
    pending: list[PendingRecolor] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.delay < 0:
            raise ValueError(f"recolor delay must be >= 0, got {self.delay}")

    def schedule(self, indices: tuple[int, ...], now: float) -> PendingRecolor:
        """Arm a recolor of *indices* that falls due ``delay`` after *now*."""
        entry = PendingRecolor(due=now + self.delay, indices=tuple(indices))
        self.pending.append(entry)
        return entry

    def pop_due(self, now: float) -> list[PendingRecolor]:
        """Remove and return every entry due at or before *now*.

        Entries come back in the order they were scheduled.
        """
        due = [entry for entry in self.pending if entry.due <= now]
        if due:
            self.pending = [entry for entry in self.pending if entry.due > now]
        return due

    @property
    def pending_count(self) -> int:
        return len(self.pending)
