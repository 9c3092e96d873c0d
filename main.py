"""
Main entry point for Square Game.

Initializes pygame, runs the 60Hz loop, and turns mouse and keyboard
input into engine intents.  All rules live in ``square_game.game``;
this module only draws the latest snapshot.

Usage:
    python square-game.py [OPTIONS]

Options:
    --fullscreen         Launch in fullscreen mode
    --scale N            Display scale multiplier (1-4, default: 2)
    --debug              Enable debug logging and overlays
    --seed N             Seed the color generator
    --recolor-delay S    Seconds before a matched pair is recolored
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

try:
    import pygame
except ImportError:
    pygame = None  # type: ignore[assignment]

from square_game.config import (
    BACKGROUND_RGB,
    BOARD_SIZE,
    BORDER_RGB,
    BUTTON_HEIGHT,
    BUTTON_RGB,
    BUTTON_SPACING,
    BUTTON_WIDTH,
    CELL_RGB,
    GRID_WIDTH,
    HEADER_HEIGHT,
    RECOLOR_DELAY,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SELECTED_ALPHA,
    TEXT_RGB,
    UPDATE_RATE,
)
from square_game.game import Game, GamePhase, GameSnapshot
from square_game.ui.text import (
    GAME_OVER_BUTTONS,
    GUIDE_LINES,
    GUIDE_TITLE,
    HIGH_SCORE_TITLE,
    MENU_BUTTONS,
    OVERLAY_BUTTONS,
    TITLE,
    format_game_over,
    format_high_score,
    format_score,
)
from square_game.utils.functions import cell_at, cell_rect
from square_game.utils.input_handler import GameAction, InputEvent, dispatch

logger = logging.getLogger(__name__)


# ── Constants ───────────────────────────────────────────────────────────────

FRAME_TIME: float = 1.0 / UPDATE_RATE          # ~16.67 ms

DEFAULT_SCALE: int = 2
MIN_SCALE: int = 1
MAX_SCALE: int = 4

# Keys by ``pygame.key.name``; digits tap cells in row-major order
KEY_ACTIONS: dict[str, GameAction] = {
    "return": GameAction.START,
    "m": GameAction.MENU,
    "h": GameAction.SHOW_HIGH_SCORE,
    "g": GameAction.SHOW_GUIDE,
    "escape": GameAction.CLOSE_OVERLAY,
}

BUTTON_ACTIONS: dict[str, GameAction] = {
    "Start": GameAction.START,
    "High Score": GameAction.SHOW_HIGH_SCORE,
    "Guide": GameAction.SHOW_GUIDE,
    "Restart": GameAction.RESTART,
    "Back to Menu": GameAction.MENU,
}


class Overlay(Enum):
    """Full-screen sheets shown over the menu."""
    HIGH_SCORE = auto()
    GUIDE = auto()


# ── Argument parsing ───────────────────────────────────────────────────────


def _non_negative_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return number


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Square Game – match two squares of the same color",
    )
    parser.add_argument(
        "--fullscreen", action="store_true",
        help="Launch in fullscreen mode",
    )
    parser.add_argument(
        "--scale", type=int, default=DEFAULT_SCALE,
        choices=range(MIN_SCALE, MAX_SCALE + 1),
        metavar="N",
        help=f"Display scale multiplier ({MIN_SCALE}-{MAX_SCALE}, default: {DEFAULT_SCALE})",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable debug logging and the FPS overlay",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        metavar="N",
        help="Seed the color generator (for reproducible boards)",
    )
    parser.add_argument(
        "--recolor-delay", type=_non_negative_float, default=RECOLOR_DELAY,
        metavar="S",
        help=f"Seconds before a matched pair is recolored (default: {RECOLOR_DELAY})",
    )
    return parser.parse_args(argv)


def configure_logging(debug: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# ── Layout ──────────────────────────────────────────────────────────────────


def button_rects(
    labels: tuple[str, ...], top: int, scale: int = 1,
) -> list[tuple[str, tuple[int, int, int, int]]]:
    """Stack *labels* as centred buttons starting at *top* (unscaled)."""
    x = (SCREEN_WIDTH - BUTTON_WIDTH) // 2
    rects = []
    for i, label in enumerate(labels):
        y = top + i * (BUTTON_HEIGHT + BUTTON_SPACING)
        rects.append(
            (label, (x * scale, y * scale, BUTTON_WIDTH * scale, BUTTON_HEIGHT * scale))
        )
    return rects


MENU_TOP: int = HEADER_HEIGHT + 60
GAME_OVER_TOP: int = HEADER_HEIGHT + GRID_WIDTH + 40
OVERLAY_TOP: int = SCREEN_HEIGHT - BUTTON_HEIGHT - 2 * BUTTON_SPACING


# ── Application ─────────────────────────────────────────────────────────────


@dataclass
class SquareGameApp:
    """Top-level application wrapper.

    Owns the pygame display, the game engine, and the main loop.
    """

    scale: int = DEFAULT_SCALE
    fullscreen: bool = False
    debug: bool = False
    seed: Optional[int] = None
    recolor_delay: float = RECOLOR_DELAY

    # Runtime state (initialized in ``init``)
    screen: object = field(default=None, repr=False)
    clock: object = field(default=None, repr=False)
    game: Game = field(init=False)
    snapshot: GameSnapshot = field(init=False)
    overlay: Optional[Overlay] = None
    running: bool = False

    # Performance tracking
    frame_times: list[float] = field(default_factory=list)
    fps: float = 0.0

    def __post_init__(self) -> None:
        self.game = Game(
            rng=random.Random(self.seed),
            recolor_delay=self.recolor_delay,
        )
        self.snapshot = self.game.snapshot()
        self.game.subscribe(self._on_change)

    def _on_change(self, sender: Game, snapshot: GameSnapshot) -> None:
        self.snapshot = snapshot

    # ── Initialisation ──────────────────────────────────────────────────

    def init(self) -> bool:
        """Initialise pygame and create the display surface.

        Returns True on success, False on failure.
        """
        if pygame is None:
            logger.error("pygame is required. Install with: pip install pygame")
            return False

        try:
            pygame.init()
        except Exception as exc:
            logger.error("Error initialising pygame: %s", exc)
            return False

        width = SCREEN_WIDTH * self.scale
        height = SCREEN_HEIGHT * self.scale

        flags = 0
        if self.fullscreen:
            flags |= pygame.FULLSCREEN

        try:
            self.screen = pygame.display.set_mode((width, height), flags)
        except Exception as exc:
            logger.error("Error creating display: %s", exc)
            pygame.quit()
            return False

        pygame.display.set_caption(TITLE)
        self.clock = pygame.time.Clock()
        logger.info("display %dx%d, seed=%s", width, height, self.seed)

        self.running = True
        return True

    # ── Main loop ───────────────────────────────────────────────────────

    def run(self) -> None:
        """Execute the main loop at 60 FPS."""
        if not self.running:
            return

        try:
            while self.running:
                frame_start = time.perf_counter()

                self._handle_events()
                self.game.update()
                self._render()

                self.clock.tick(UPDATE_RATE)

                elapsed = time.perf_counter() - frame_start
                self.frame_times.append(elapsed)
                if len(self.frame_times) > 60:
                    self.frame_times.pop(0)
                if self.frame_times:
                    avg = sum(self.frame_times) / len(self.frame_times)
                    self.fps = 1.0 / avg if avg > 0 else 0.0
        except KeyboardInterrupt:
            pass
        finally:
            self.shutdown()

    # ── Input mapping ───────────────────────────────────────────────────

    def _visible_buttons(self) -> list[tuple[str, tuple[int, int, int, int]]]:
        """Return the buttons on screen for the current phase and overlay."""
        phase = self.snapshot.phase
        if self.overlay is not None:
            return button_rects(OVERLAY_BUTTONS, OVERLAY_TOP, self.scale)
        if phase == GamePhase.MENU:
            return button_rects(MENU_BUTTONS, MENU_TOP, self.scale)
        if phase == GamePhase.GAME_OVER:
            return button_rects(GAME_OVER_BUTTONS, GAME_OVER_TOP, self.scale)
        return []

    def _click_to_event(self, x: int, y: int) -> InputEvent:
        """Map a left click in screen pixels to an InputEvent."""
        for label, (bx, by, bw, bh) in self._visible_buttons():
            if bx <= x < bx + bw and by <= y < by + bh:
                action = BUTTON_ACTIONS[label]
                if self.overlay is not None:
                    action = GameAction.CLOSE_OVERLAY
                return InputEvent(action)
        if self.overlay is None and self.snapshot.phase != GamePhase.MENU:
            index = cell_at(x, y, self.scale)
            if index is not None:
                return InputEvent(GameAction.TAP, index)
        return InputEvent(GameAction.NONE)

    def _key_to_event(self, key_name: str) -> InputEvent:
        """Map a ``pygame.key.name`` string to an InputEvent."""
        if key_name.isdigit() and 1 <= int(key_name) <= BOARD_SIZE:
            return InputEvent(GameAction.TAP, int(key_name) - 1)
        action = KEY_ACTIONS.get(key_name, GameAction.NONE)
        if action == GameAction.START and self.snapshot.phase == GamePhase.GAME_OVER:
            action = GameAction.RESTART
        elif action == GameAction.CLOSE_OVERLAY and self.overlay is None:
            action = GameAction.QUIT
        return InputEvent(action)

    def _apply(self, event: InputEvent) -> None:
        """Route *event* to the overlay state or the engine.

        Intents are filtered by what the current screen offers, so a
        stray key never starts a game from the wrong screen.
        """
        action = event.action
        phase = self.snapshot.phase

        if action == GameAction.QUIT:
            self.running = False
            return
        if action == GameAction.CLOSE_OVERLAY:
            self.overlay = None
            return
        if self.overlay is not None:
            return

        if action == GameAction.SHOW_HIGH_SCORE and phase == GamePhase.MENU:
            self.overlay = Overlay.HIGH_SCORE
        elif action == GameAction.SHOW_GUIDE and phase == GamePhase.MENU:
            self.overlay = Overlay.GUIDE
        elif action == GameAction.START and phase == GamePhase.MENU:
            dispatch(self.game, event)
        elif action in (GameAction.RESTART, GameAction.MENU) and phase == GamePhase.GAME_OVER:
            dispatch(self.game, event)
        elif action == GameAction.TAP and phase == GamePhase.PLAYING:
            dispatch(self.game, event)

    # ── Event handling ──────────────────────────────────────────────────

    def _handle_events(self) -> None:
        """Process pygame events.

        Keyboard controls:
            1-9    – tap a cell (row-major)
            Enter  – start / restart
            M      – back to menu (after a game over)
            H      – high score (menu)
            G      – guide (menu)
            ESC    – close the open sheet, otherwise exit

        Mouse controls:
            Left button – press a button or tap a cell
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                self._apply(self._key_to_event(pygame.key.name(event.key)))
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self._apply(self._click_to_event(*event.pos))

    # ── Rendering ───────────────────────────────────────────────────────

    def _font(self, size: int):
        return pygame.font.Font(None, size * self.scale)

    def _blit_centered(self, text: str, y: int, size: int = 28,
                       color: tuple[int, int, int] = TEXT_RGB) -> None:
        surf = self._font(size).render(text, True, color)
        x = (SCREEN_WIDTH * self.scale - surf.get_width()) // 2
        self.screen.blit(surf, (x, y * self.scale))

    def _render(self) -> None:
        """Execute the rendering pipeline."""
        if self.screen is None:
            return

        self.screen.fill(BACKGROUND_RGB)

        if self.overlay == Overlay.HIGH_SCORE:
            self._render_high_score()
        elif self.overlay == Overlay.GUIDE:
            self._render_guide()
        elif self.snapshot.phase == GamePhase.MENU:
            self._blit_centered(TITLE, 30, size=48)
        else:
            self._render_board()
            if self.snapshot.phase == GamePhase.GAME_OVER:
                self._render_game_over()

        self._render_buttons()
        if self.debug:
            self._render_debug()

        pygame.display.flip()

    def _render_board(self) -> None:
        snap = self.snapshot
        self._blit_centered(TITLE, 10, size=24)
        self._blit_centered(format_score(snap), 35, size=48)
        for index, color in enumerate(snap.colors):
            x, y, w, h = cell_rect(index, self.scale)
            cell = pygame.Surface((w, h), pygame.SRCALPHA)
            alpha = SELECTED_ALPHA if snap.is_selected(index) else 255
            cell.fill((*CELL_RGB[color.value], alpha))
            self.screen.blit(cell, (x, y))
            pygame.draw.rect(self.screen, BORDER_RGB, (x, y, w, h), 1)

    def _render_game_over(self) -> None:
        self._blit_centered(format_game_over(self.snapshot), HEADER_HEIGHT + GRID_WIDTH + 10)

    def _render_high_score(self) -> None:
        self._blit_centered(HIGH_SCORE_TITLE, 40, size=48)
        self._blit_centered(format_high_score(self.snapshot), 120, size=120)

    def _render_guide(self) -> None:
        self._blit_centered(GUIDE_TITLE, 40, size=48)
        for i, line in enumerate(GUIDE_LINES):
            self._blit_centered(line, 120 + i * 30, size=15)

    def _render_buttons(self) -> None:
        font = self._font(28)
        for label, (x, y, w, h) in self._visible_buttons():
            surf = font.render(label, True, BUTTON_RGB)
            self.screen.blit(
                surf,
                (x + (w - surf.get_width()) // 2, y + (h - surf.get_height()) // 2),
            )

    def _render_debug(self) -> None:
        """Draw debug overlays (FPS, pending recolors)."""
        font = pygame.font.Font(None, 20)
        texts = [
            f"FPS: {self.fps:.1f}",
            f"Phase: {self.snapshot.phase.name}",
            f"Pending recolors: {self.game.recolors.pending_count}",
        ]
        y = 5
        for text in texts:
            surface = font.render(text, True, (0, 160, 0))
            self.screen.blit(surface, (5, y))
            y += 18

    # ── Shutdown ────────────────────────────────────────────────────────

    def shutdown(self) -> None:
        """Clean up and quit pygame."""
        self.running = False
        if pygame is not None:
            try:
                pygame.quit()
            except Exception:
                logger.debug("pygame.quit failed", exc_info=True)


# ── Entry point ─────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Application entry point.  Returns exit code."""
    args = parse_args(argv)
    configure_logging(args.debug)

    app = SquareGameApp(
        scale=args.scale,
        fullscreen=args.fullscreen,
        debug=args.debug,
        seed=args.seed,
        recolor_delay=args.recolor_delay,
    )

    if not app.init():
        return 1

    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
