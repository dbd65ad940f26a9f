"""
Grid Invaders - fixed-timestep arcade simulation on a character grid
"""

__version__ = "1.0.0"

from .engine import TickClock, advance, apply_intent
from .models.world import World
from .config import *  # noqa: F401,F403

__all__ = ["TickClock", "World", "advance", "apply_intent"]
