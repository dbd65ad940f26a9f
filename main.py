"""
Main entry point for Grid Invaders.

Sets up the display, runs the fixed-cadence driver loop, and manages the
application lifecycle.  The simulation ticks every 200 ms; rendering and
input run every frame.

Usage:
    python main.py [OPTIONS]

Options:
    --terminal           Play in the terminal (curses) instead of a window
    --scale N            Display scale multiplier (1-4, default: 2)
    --debug              Verbose logging and a debug overlay
    --log-file PATH      Write logs to PATH instead of stderr
"""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass, field
from typing import Optional

from loguru import logger

try:
    import pygame
except ImportError:
    pygame = None  # type: ignore[assignment]

from invaders.config import (
    COLOR_UI,
    MAX_SHOTS,
    PALETTE,
    RENDER_RATE,
    SCREEN_COLUMNS,
    SCREEN_ROWS,
)
from invaders.engine import TickClock, advance, apply_intent
from invaders.models.world import World
from invaders.ui.grid import render_grid
from invaders.utils.input_handler import Intent, IntentQueue, intent_for_pygame_key


# ── Constants ───────────────────────────────────────────────────────────────

CELL_WIDTH: int = 8    # pixels per grid column at scale 1
CELL_HEIGHT: int = 16  # pixels per grid row at scale 1
KEY_REPEAT_DELAY_MS: int = 150
KEY_REPEAT_INTERVAL_MS: int = 60

DEFAULT_SCALE: int = 2
MIN_SCALE: int = 1
MAX_SCALE: int = 4

BACKGROUND: tuple[int, int, int] = (0, 0, 0)
FOREGROUND: tuple[int, int, int] = (255, 255, 255)


# ── Argument parsing ───────────────────────────────────────────────────────


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Grid Invaders - defend against the descending swarm",
    )
    parser.add_argument(
        "--terminal", action="store_true",
        help="Play in the terminal using curses",
    )
    parser.add_argument(
        "--scale", type=int, default=DEFAULT_SCALE,
        choices=range(MIN_SCALE, MAX_SCALE + 1),
        metavar="N",
        help=f"Display scale multiplier ({MIN_SCALE}-{MAX_SCALE}, default: {DEFAULT_SCALE})",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable debug logging and overlay",
    )
    parser.add_argument(
        "--log-file", default=None,
        metavar="PATH",
        help="Write logs to PATH",
    )
    return parser.parse_args(argv)


def configure_logging(
    debug: bool = False,
    log_file: Optional[str] = None,
    terminal: bool = False,
) -> None:
    """Install the loguru sink for this run.

    While curses owns the terminal, stderr output would corrupt the
    screen, so only a file sink is installed in that case.
    """
    level = "DEBUG" if debug else "INFO"
    logger.remove()
    if log_file:
        logger.add(log_file, level=level)
    elif not terminal:
        logger.add(sys.stderr, level=level)


# ── Application ─────────────────────────────────────────────────────────────


@dataclass
class InvadersApp:
    """Top-level pygame application wrapper.

    Owns the display, the world snapshot and the driver loop.
    """

    scale: int = DEFAULT_SCALE
    debug: bool = False

    # Runtime state (initialized in ``init``)
    screen: object = field(default=None, repr=False)
    clock: object = field(default=None, repr=False)
    font: object = field(default=None, repr=False)
    world: World = field(default_factory=lambda: World.new(time.monotonic_ns()))
    ticks: TickClock = field(default_factory=lambda: TickClock(last=time.monotonic_ns()))
    intents: IntentQueue = field(default_factory=IntentQueue)
    running: bool = False
    tick_count: int = 0

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
            logger.error(f"Error initialising pygame: {exc}")
            return False

        width = SCREEN_COLUMNS * CELL_WIDTH * self.scale
        height = SCREEN_ROWS * CELL_HEIGHT * self.scale

        try:
            self.screen = pygame.display.set_mode((width, height))
        except Exception as exc:
            logger.error(f"Error creating display: {exc}")
            pygame.quit()
            return False

        pygame.display.set_caption("Grid Invaders")
        pygame.key.set_repeat(KEY_REPEAT_DELAY_MS, KEY_REPEAT_INTERVAL_MS)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("monospace", CELL_HEIGHT * self.scale, bold=True)

        now = time.monotonic_ns()
        self.world = World.new(now)
        self.ticks = TickClock(last=now)
        self.running = True
        logger.info(f"Display ready ({width}x{height}), scale {self.scale}")
        return True

    # ── Main loop ───────────────────────────────────────────────────────

    def run(self) -> None:
        """Execute the driver loop until the player quits."""
        if not self.running:
            return

        try:
            while self.running:
                self._update(time.monotonic_ns())
                self._render()
                self._handle_events()
                self.clock.tick(RENDER_RATE)
        except KeyboardInterrupt:
            pass
        finally:
            self.shutdown()

    # ── Event handling ──────────────────────────────────────────────────

    def _handle_events(self) -> None:
        """Collect pygame events and apply at most one intent.

        Keyboard controls:
            A / Left   – move left
            D / Right  – move right
            Space      – fire
            Q / ESC    – quit
        """
        if pygame is not None:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.intents.push(Intent.QUIT)
                elif event.type == pygame.KEYDOWN:
                    self.intents.push(intent_for_pygame_key(event.key))
        self.handle(self.intents.pop())

    def handle(self, intent: Intent) -> None:
        """Apply one intent; QUIT stops the loop even after game over."""
        if intent is Intent.QUIT:
            self.running = False
            self.intents.clear()
            return
        self.world = apply_intent(self.world, intent)

    # ── Game logic update ───────────────────────────────────────────────

    def _update(self, now: int) -> bool:
        """Advance the world if a tick is due.  Returns True if it ticked."""
        if not self.ticks.due(now):
            return False
        was_over = self.world.game_over
        self.world = advance(self.world, now)
        self.tick_count += 1
        if self.world.game_over and not was_over:
            logger.info(f"Game over after {self.tick_count} ticks, score {self.world.score}")
        return True

    # ── Rendering ───────────────────────────────────────────────────────

    def _render(self) -> None:
        """Blit the character grid to the window."""
        if self.screen is None:
            return

        self.screen.fill(BACKGROUND)
        cell_w = CELL_WIDTH * self.scale
        cell_h = CELL_HEIGHT * self.scale
        for y, row in enumerate(render_grid(self.world)):
            for x, cell in enumerate(row):
                if cell.char == " ":
                    continue
                color = PALETTE.get(cell.color, FOREGROUND)
                surface = self.font.render(cell.char, True, color)
                self.screen.blit(surface, (x * cell_w, y * cell_h))

        if self.debug:
            self._render_debug()

        pygame.display.flip()

    def _render_debug(self) -> None:
        """Draw debug overlays (FPS, entity counts)."""
        if pygame is None or self.screen is None:
            return
        font = pygame.font.Font(None, 20)
        texts = [
            f"FPS: {self.clock.get_fps():.1f}",
            f"Ticks: {self.tick_count}",
            f"Shots: {len(self.world.shots)}/{MAX_SHOTS}",
            f"Alien shots: {len(self.world.alien_shots)}",
            f"Aliens: {len(self.world.aliens)}",
        ]
        x = SCREEN_COLUMNS * CELL_WIDTH * self.scale - 140
        y = CELL_HEIGHT * self.scale + 5
        for text in texts:
            surface = font.render(text, True, PALETTE[COLOR_UI])
            self.screen.blit(surface, (x, y))
            y += 18

    # ── Shutdown ────────────────────────────────────────────────────────

    def shutdown(self) -> None:
        """Clean up and quit pygame."""
        self.running = False
        logger.info(f"Session ended with score {self.world.score}")
        if pygame is not None:
            try:
                pygame.quit()
            except Exception as exc:
                logger.debug(f"pygame.quit failed: {exc}")


# ── Entry point ─────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Application entry point.  Returns exit code."""
    args = parse_args(argv)
    configure_logging(args.debug, args.log_file, terminal=args.terminal)

    if args.terminal:
        from invaders.ui.terminal import TerminalFrontend

        return TerminalFrontend().run()

    app = InvadersApp(scale=args.scale, debug=args.debug)
    if not app.init():
        return 1

    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
