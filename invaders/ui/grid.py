"""
Character-grid projection of the world.

``render_grid`` is a pure function: it reads a ``World`` and returns the
cells a front-end should draw, leaving the world untouched.  Drawing
order matches the on-screen layering: HUD, shots, alien shots, aliens,
player, then the game-over overlay on top.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from invaders.config import (
    ALIEN_SHOT_GLYPH,
    ALIEN_SPRITE,
    COLOR_ALIEN,
    COLOR_ALIEN_SHOT,
    COLOR_GAMEOVER,
    COLOR_PLAYER,
    COLOR_SHOT,
    COLOR_UI,
    GAME_OVER_CAUSE_COLUMN,
    GAME_OVER_COLUMNS,
    GAME_OVER_ROW,
    PLAYER_SPRITE,
    SCREEN_COLUMNS,
    SCREEN_ROWS,
    SHOT_GLYPH,
)
from invaders.models.world import World
from invaders.ui.text import cause_label, game_over_lines, status_line


@dataclass(frozen=True)
class Cell:
    char: str
    color: Optional[int] = None


BLANK = Cell(" ")

Grid = list[list[Cell]]


def _blank_grid(width: int, height: int) -> Grid:
    return [[BLANK] * width for _ in range(height)]


def _put(grid: Grid, row: int, col: int, text: str, color: int) -> None:
    """Write *text* starting at (*row*, *col*), clipping at the edges."""
    if not 0 <= row < len(grid):
        return
    line = grid[row]
    for offset, char in enumerate(text):
        x = col + offset
        if 0 <= x < len(line):
            line[x] = Cell(char, color)


def _put_sprite(
    grid: Grid, x: int, y: int, sprite: Iterable[str], color: int,
) -> None:
    for i, line in enumerate(sprite):
        _put(grid, y + i, x, line, color)


def render_grid(
    world: World, width: int = SCREEN_COLUMNS, height: int = SCREEN_ROWS,
) -> Grid:
    """Project *world* onto a ``height`` x ``width`` grid of cells.

    The default size fits the full status line and the player's
    two-row sprite on the bottom board row.
    """
    grid = _blank_grid(width, height)

    _put(grid, 0, 0, status_line(world), COLOR_UI)

    for shot in world.shots:
        _put(grid, shot.y, shot.x, SHOT_GLYPH, COLOR_SHOT)
    for shot in world.alien_shots:
        _put(grid, shot.y, shot.x, ALIEN_SHOT_GLYPH, COLOR_ALIEN_SHOT)
    for alien in world.aliens:
        _put_sprite(grid, alien.x, alien.y, ALIEN_SPRITE, COLOR_ALIEN)

    if not world.game_over:
        _put_sprite(grid, world.player.x, world.player.y, PLAYER_SPRITE, COLOR_PLAYER)
        return grid

    lines = game_over_lines(world)
    for i, (line, col) in enumerate(zip(lines, GAME_OVER_COLUMNS)):
        _put(grid, GAME_OVER_ROW + i, col, line, COLOR_GAMEOVER)
    _put(
        grid, GAME_OVER_ROW + len(lines), GAME_OVER_CAUSE_COLUMN,
        cause_label(world), COLOR_GAMEOVER,
    )
    return grid


def rows_as_text(grid: Grid) -> list[str]:
    """Flatten a grid to plain strings, one per row."""
    return ["".join(cell.char for cell in row) for row in grid]
