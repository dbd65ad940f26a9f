"""
Wave spawner for Grid Invaders.

A wave is always the same rectangular formation; a fresh wave also
clears every live projectile so each level starts clean.
"""

from __future__ import annotations

from loguru import logger

from invaders.config import (
    ALIEN_COLS,
    ALIEN_ROWS,
    HORIZONTAL_SPACING,
    VERTICAL_SPACING,
    WAVE_OFFSET_X,
    WAVE_OFFSET_Y,
)
from invaders.models.world import Alien, World


def formation() -> tuple[Alien, ...]:
    """Return the starting formation, row-major."""
    return tuple(
        Alien(
            x=col * HORIZONTAL_SPACING + WAVE_OFFSET_X,
            y=row * VERTICAL_SPACING + WAVE_OFFSET_Y,
        )
        for row in range(ALIEN_ROWS)
        for col in range(ALIEN_COLS)
    )


def spawn_wave(world: World) -> World:
    """Replace the swarm with a new formation and clear all shots."""
    aliens = formation()
    logger.debug(f"Wave spawned: {len(aliens)} aliens (score {world.score})")
    return world.evolve(aliens=aliens, shots=(), alien_shots=())
