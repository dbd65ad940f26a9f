"""Utility functions and helpers."""

from .functions import (
    box_contains,
    elapsed_ns,
    front_rank,
    is_front_rank,
    pick_shooter,
)
from .input_handler import Intent, IntentQueue, intent_for_pygame_key

__all__ = [
    "box_contains",
    "elapsed_ns",
    "front_rank",
    "is_front_rank",
    "pick_shooter",
    "Intent",
    "IntentQueue",
    "intent_for_pygame_key",
]
