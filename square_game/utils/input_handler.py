"""
Input handler for Square Game.

Maps player input events to game actions and routes them to the
engine.  Screen-only actions (high score, guide) are left to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from square_game.game import Game


class GameAction(Enum):
    """Actions the player can trigger."""
    START = auto()
    RESTART = auto()
    MENU = auto()
    TAP = auto()
    SHOW_HIGH_SCORE = auto()
    SHOW_GUIDE = auto()
    CLOSE_OVERLAY = auto()
    QUIT = auto()
    NONE = auto()


@dataclass
class InputEvent:
    """Abstract input event consumed by the game loop."""
    action: GameAction
    index: Optional[int] = None


def dispatch(game: Game, event: InputEvent) -> bool:
    """Apply *event* to *game* if it is an engine intent.

    Returns True if the event was routed to the engine.
    """
    if event.action == GameAction.START:
        game.start()
    elif event.action == GameAction.RESTART:
        game.restart()
    elif event.action == GameAction.MENU:
        game.return_to_menu()
    elif event.action == GameAction.TAP:
        if event.index is None:
            return False
        game.tap(event.index)
    else:
        return False
    return True
