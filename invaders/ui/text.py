"""
UI text utilities for Grid Invaders.

HUD and game-over strings shared by both front-ends.
"""

from __future__ import annotations

from invaders.models.world import GameOverCause, World


def status_line(world: World) -> str:
    return f"Score: {world.score} | Lives: {world.lives} | Press 'q' to quit"


def game_over_lines(world: World) -> tuple[str, str, str]:
    """Return the three overlay lines shown once the game has ended."""
    return (
        "GAME OVER!",
        f"Final Score: {world.score}",
        "Press 'q' to exit.",
    )


def cause_label(world: World) -> str:
    """Short description of why the game ended, empty while playing."""
    if world.cause is GameOverCause.LIVES:
        return "Out of lives"
    if world.cause is GameOverCause.INVASION:
        return "The swarm landed"
    return ""
