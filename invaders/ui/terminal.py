"""
Curses front-end for Grid Invaders.

Draws the character grid into the terminal and reads one key per
driver iteration.  ``getch`` blocks for at most ``INPUT_TIMEOUT_MS``,
which also paces the loop.
"""

from __future__ import annotations

import curses
import time
from dataclasses import dataclass, field
from typing import Any

from loguru import logger

from invaders.config import INPUT_TIMEOUT_MS, PALETTE
from invaders.engine import TickClock, advance, apply_intent
from invaders.models.world import World
from invaders.ui.grid import render_grid
from invaders.utils.input_handler import Intent


# palette RGB -> nearest curses colour
_CURSES_COLORS: dict[tuple[int, int, int], int] = {
    (255, 255, 0): curses.COLOR_YELLOW,
    (0, 255, 255): curses.COLOR_CYAN,
    (255, 0, 0): curses.COLOR_RED,
    (0, 255, 0): curses.COLOR_GREEN,
    (255, 0, 255): curses.COLOR_MAGENTA,
}


# getch codes, including the keypad arrows enabled in _setup
_CURSES_KEYS: dict[int, Intent] = {
    ord("q"): Intent.QUIT,
    ord("a"): Intent.MOVE_LEFT,
    curses.KEY_LEFT: Intent.MOVE_LEFT,
    ord("d"): Intent.MOVE_RIGHT,
    curses.KEY_RIGHT: Intent.MOVE_RIGHT,
    ord(" "): Intent.FIRE,
}


def intent_for_key(code: int) -> Intent:
    """Translate a curses ``getch`` result (-1 when idle)."""
    return _CURSES_KEYS.get(code, Intent.NONE)


@dataclass
class TerminalFrontend:
    """Runs the driver loop inside a curses screen."""

    world: World = field(default_factory=lambda: World.new(time.monotonic_ns()))
    clock: TickClock = field(default_factory=lambda: TickClock(last=time.monotonic_ns()))
    running: bool = False
    screen: Any = field(default=None, repr=False)

    def run(self) -> int:
        """Take over the terminal until the player quits.  Returns exit code."""
        try:
            curses.wrapper(self._main)
        except curses.error as exc:
            logger.error(f"Terminal error: {exc}")
            return 1
        except KeyboardInterrupt:
            pass
        logger.info(f"Session ended with score {self.world.score}")
        return 0

    # ── Setup ───────────────────────────────────────────────────────────

    def _setup(self, screen: Any) -> None:
        self.screen = screen
        curses.noecho()
        curses.curs_set(0)
        screen.timeout(INPUT_TIMEOUT_MS)
        screen.keypad(True)
        screen.leaveok(True)
        if curses.has_colors():
            curses.start_color()
            for pair, rgb in PALETTE.items():
                curses.init_pair(pair, _CURSES_COLORS.get(rgb, curses.COLOR_WHITE), curses.COLOR_BLACK)

    # ── Loop ────────────────────────────────────────────────────────────

    def _main(self, screen: Any) -> None:
        self._setup(screen)
        self.running = True
        while self.running:
            now = time.monotonic_ns()
            if self.clock.due(now):
                self.world = advance(self.world, now)
            self._draw()
            self.handle(intent_for_key(screen.getch()))

    def handle(self, intent: Intent) -> None:
        """Apply one intent; QUIT stops the loop even after game over."""
        if intent is Intent.QUIT:
            self.running = False
            return
        self.world = apply_intent(self.world, intent)

    def _draw(self) -> None:
        screen = self.screen
        screen.erase()
        max_y, max_x = screen.getmaxyx()
        for y, row in enumerate(render_grid(self.world)):
            if y >= max_y:
                break
            for x, cell in enumerate(row):
                # the bottom-right cell cannot be written without scrolling
                if x >= max_x or (y == max_y - 1 and x == max_x - 1):
                    break
                if cell.char == " ":
                    continue
                attr = curses.color_pair(cell.color) if cell.color and curses.has_colors() else 0
                screen.addstr(y, x, cell.char, attr)
        screen.refresh()
