from square_game.models.board import Board, Cell, Color, Selection, random_color
from square_game.models.recolor import PendingRecolor, RecolorScheduler
from square_game.models.session import GamePhase, Session

__all__ = [
    "Board", "Cell", "Color", "Selection", "random_color",
    "PendingRecolor", "RecolorScheduler",
    "GamePhase", "Session",
]
