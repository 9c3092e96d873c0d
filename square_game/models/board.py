"""
Board model for Square Game.

Implements the colored cells, the fixed nine-cell board, and the
per-turn selection:

- Colors are drawn independently and uniformly per cell; no board is
  guaranteed to contain a matching pair
- Cells are recolored in place, so their identity stays stable
- A selection holds at most two distinct indices in tap order
"""

from __future__ import annotations

import random
import uuid
from dataclasses import dataclass, field
from enum import Enum

from square_game.config import BOARD_SIZE, PAIR_SIZE


# ── Color ───────────────────────────────────────────────────────────────────


class Color(Enum):
    RED = "red"
    YELLOW = "yellow"
    BLUE = "blue"


def random_color(rng: random.Random) -> Color:
    """Draw one Color uniformly at random."""
    return rng.choice(list(Color))


# ── Cell ────────────────────────────────────────────────────────────────────


@dataclass
class Cell:
    """One grid position.

    ``cell_id`` is an opaque key for the presentation layer; game logic
    never reads it.
    """

    color: Color
    cell_id: str = field(default_factory=lambda: uuid.uuid4().hex)


# ── Board ───────────────────────────────────────────────────────────────────


@dataclass
class Board:
    """Ordered sequence of exactly ``BOARD_SIZE`` cells."""

    rng: random.Random = field(default_factory=random.Random, repr=False)
    cells: list[Cell] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.cells:
            self.cells = [
                Cell(color=random_color(self.rng)) for _ in range(BOARD_SIZE)
            ]
        if len(self.cells) != BOARD_SIZE:
            raise ValueError(
                f"board needs exactly {BOARD_SIZE} cells, got {len(self.cells)}"
            )

    def __len__(self) -> int:
        return len(self.cells)

    def __getitem__(self, index: int) -> Cell:
        return self.cells[index]

    @property
    def colors(self) -> tuple[Color, ...]:
        return tuple(cell.color for cell in self.cells)

    def randomize(self) -> None:
        """Give every cell a fresh, independently drawn color."""
        for cell in self.cells:
            cell.color = random_color(self.rng)

    def recolor(self, index: int) -> Color:
        """Redraw the color of the cell at *index* and return it."""
        cell = self.cells[index]
        cell.color = random_color(self.rng)
        return cell.color

    def same_color(self, a: int, b: int) -> bool:
        return self.cells[a].color == self.cells[b].color


# ── Selection ───────────────────────────────────────────────────────────────


@dataclass
class Selection:
    """Indices chosen in the current, not-yet-evaluated turn."""

    indices: list[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.indices)

    def __contains__(self, index: object) -> bool:
        return index in self.indices

    def add(self, index: int) -> bool:
        """Append *index* unless it is already selected or the pair is full.

        Returns True if the selection changed.
        """
        if index in self.indices or self.is_pair:
            return False
        self.indices.append(index)
        return True

    @property
    def is_pair(self) -> bool:
        return len(self.indices) >= PAIR_SIZE

    def pair(self) -> tuple[int, int]:
        """Return the two selected indices in tap order."""
        first, second = self.indices
        return first, second

    def clear(self) -> None:
        self.indices.clear()
