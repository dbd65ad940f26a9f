"""
Input handler for Grid Invaders.

Defines the closed set of player intents and maps pygame key codes onto
it.  Anything unmapped becomes ``Intent.NONE``.  The curses key map
lives with the terminal front-end.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional


class Intent(Enum):
    """Actions the player can trigger."""
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    FIRE = auto()
    QUIT = auto()
    NONE = auto()


# Filled on first use so pygame is only imported by the window front-end
_PYGAME_KEYS: Optional[dict[int, Intent]] = None


def _pygame_keys() -> dict[int, Intent]:
    global _PYGAME_KEYS
    if _PYGAME_KEYS is None:
        import pygame

        _PYGAME_KEYS = {
            pygame.K_q: Intent.QUIT,
            pygame.K_ESCAPE: Intent.QUIT,
            pygame.K_a: Intent.MOVE_LEFT,
            pygame.K_LEFT: Intent.MOVE_LEFT,
            pygame.K_d: Intent.MOVE_RIGHT,
            pygame.K_RIGHT: Intent.MOVE_RIGHT,
            pygame.K_SPACE: Intent.FIRE,
        }
    return _PYGAME_KEYS


def intent_for_pygame_key(key: int) -> Intent:
    """Translate a pygame key constant."""
    return _pygame_keys().get(key, Intent.NONE)


@dataclass
class IntentQueue:
    """Buffers intents from an event stream.

    The driver consumes at most one intent per iteration; extra key
    presses wait for later iterations rather than being lost.
    """

    pending: deque[Intent] = field(default_factory=deque)

    def push(self, intent: Intent) -> None:
        if intent is not Intent.NONE:
            self.pending.append(intent)

    def pop(self) -> Intent:
        return self.pending.popleft() if self.pending else Intent.NONE

    def clear(self) -> None:
        self.pending.clear()
