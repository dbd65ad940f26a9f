from invaders.models.world import (
    Alien,
    AlienShot,
    Direction,
    GameOverCause,
    Player,
    Shot,
    World,
)
from invaders.models.wave import formation, spawn_wave

__all__ = [
    "Alien", "AlienShot", "Direction", "GameOverCause",
    "Player", "Shot", "World",
    "formation", "spawn_wave",
]
