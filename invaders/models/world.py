"""
World state for Grid Invaders.

Every entity is an immutable value; the engine produces a new ``World``
each tick instead of mutating the previous one.  Enemies and shots have
no identity beyond their position.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import Optional

from invaders.config import (
    INITIAL_LIVES,
    MAX_PLAYER_Y,
    PLAYER_START_X,
    SPRITE_HEIGHT,
    SPRITE_WIDTH,
)
from invaders.utils.functions import box_contains


# ── Swarm direction ─────────────────────────────────────────────────────────


class Direction(Enum):
    """Horizontal direction shared by the whole alien swarm."""
    LEFT = auto()
    RIGHT = auto()

    @property
    def dx(self) -> int:
        return -1 if self is Direction.LEFT else 1

    def flipped(self) -> Direction:
        return Direction.RIGHT if self is Direction.LEFT else Direction.LEFT


class GameOverCause(Enum):
    """Why the game ended.  Only used for display."""
    LIVES = auto()
    INVASION = auto()


# ── Entities ────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Player:
    """The player's vessel.  ``y`` never changes after spawn."""

    x: int
    y: int

    def covers(self, x: int, y: int) -> bool:
        return box_contains(self.x, self.y, SPRITE_WIDTH, SPRITE_HEIGHT, x, y)


@dataclass(frozen=True)
class Alien:
    """A single alien in the swarm."""

    x: int
    y: int

    def covers(self, x: int, y: int) -> bool:
        return box_contains(self.x, self.y, SPRITE_WIDTH, SPRITE_HEIGHT, x, y)


@dataclass(frozen=True)
class Shot:
    """A player projectile travelling up one cell per tick."""

    x: int
    y: int


@dataclass(frozen=True)
class AlienShot:
    """An alien projectile travelling down one cell per tick."""

    x: int
    y: int


# ── World ───────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class World:
    """Complete simulation snapshot.

    Collections are tuples so a snapshot can be handed to a renderer
    while the driver keeps the next one.  ``last_alien_shot`` is a
    monotonic timestamp in nanoseconds.
    """

    player: Player = field(default_factory=lambda: Player(PLAYER_START_X, MAX_PLAYER_Y))
    aliens: tuple[Alien, ...] = ()
    shots: tuple[Shot, ...] = ()
    alien_shots: tuple[AlienShot, ...] = ()
    direction: Direction = Direction.RIGHT
    last_alien_shot: int = 0
    score: int = 0
    lives: int = INITIAL_LIVES
    game_over: bool = False
    cause: Optional[GameOverCause] = None

    @classmethod
    def new(cls, now: int) -> World:
        """Create the start-of-game world with its first wave in place."""
        from invaders.models.wave import spawn_wave

        return spawn_wave(cls(last_alien_shot=now))

    def evolve(self, **changes) -> World:
        """Return a copy of this world with *changes* applied."""
        return replace(self, **changes)
