"""
Shared utility functions for Grid Invaders.

Box overlap, front-rank selection and the timing helpers the engine
uses to pick an alien shooter.
"""

from __future__ import annotations

from typing import Protocol, Sequence, TypeVar

from invaders.config import SPRITE_WIDTH


class Positioned(Protocol):
    x: int
    y: int


P = TypeVar("P", bound=Positioned)


# ── Collision ───────────────────────────────────────────────────────────────


def box_contains(
    left: int, top: int, width: int, height: int, x: int, y: int,
) -> bool:
    """Return True if cell (*x*, *y*) lies in the half-open box.

    The box spans ``[left, left + width)`` horizontally and
    ``[top, top + height)`` vertically.
    """
    return left <= x < left + width and top <= y < top + height


# ── Front rank ──────────────────────────────────────────────────────────────


def is_front_rank(alien: Positioned, swarm: Sequence[Positioned]) -> bool:
    """Return True if no other alien sits strictly below *alien*.

    "Below" means a greater y whose footprint ``[x, x + 3)`` contains
    ``alien.x``.
    """
    for other in swarm:
        if other.x <= alien.x < other.x + SPRITE_WIDTH and alien.y < other.y:
            return False
    return True


def front_rank(swarm: Sequence[P]) -> list[P]:
    """Return the aliens allowed to fire, in swarm order."""
    return [alien for alien in swarm if is_front_rank(alien, swarm)]


# ── Timing ──────────────────────────────────────────────────────────────────


def elapsed_ns(now: int, since: int) -> int:
    """Nanoseconds between two monotonic timestamps, never negative."""
    return max(now - since, 0)


def pick_shooter(candidates: Sequence[P], jitter_ns: int) -> P:
    """Pick one candidate using elapsed nanoseconds as a cheap jitter source.

    Deterministic for a given *jitter_ns*.  *candidates* must not be
    empty.
    """
    return candidates[jitter_ns % len(candidates)]
