"""
Tests for the grid projection, HUD text and key mapping.
"""

import curses

import pytest

from invaders.config import (
    COLOR_ALIEN,
    COLOR_GAMEOVER,
    COLOR_PLAYER,
    COLOR_UI,
    GAME_OVER_ROW,
    MAX_PLAYER_Y,
    PLAYER_START_X,
    SCREEN_COLUMNS,
    SCREEN_ROWS,
)
from invaders.models.world import AlienShot, GameOverCause, Shot, World
from invaders.ui.grid import render_grid, rows_as_text
from invaders.ui.terminal import intent_for_key
from invaders.ui.text import cause_label, game_over_lines, status_line
from invaders.utils import input_handler
from invaders.utils.input_handler import (
    Intent,
    IntentQueue,
    intent_for_pygame_key,
)


def cell_text(rows, row, col, length):
    return rows[row][col:col + length]


# ── Grid projection ─────────────────────────────────────────────────────────


class TestRenderGrid:
    def test_grid_size(self):
        grid = render_grid(World.new(0))
        assert len(grid) == SCREEN_ROWS
        assert all(len(row) == SCREEN_COLUMNS for row in grid)

    def test_status_line(self):
        rows = rows_as_text(render_grid(World.new(0)))
        assert rows[0].startswith("Score: 0 | Lives: 3 | Press 'q' to quit")

    def test_status_colour(self):
        grid = render_grid(World.new(0))
        assert grid[0][0].color == COLOR_UI

    def test_aliens_drawn(self):
        grid = render_grid(World.new(0))
        rows = rows_as_text(grid)
        assert cell_text(rows, 2, 2, 3) == "<O>"
        assert cell_text(rows, 3, 2, 3) == "/-\\"
        assert grid[2][2].color == COLOR_ALIEN

    def test_player_drawn(self):
        grid = render_grid(World.new(0))
        rows = rows_as_text(grid)
        assert cell_text(rows, MAX_PLAYER_Y, PLAYER_START_X, 3) == "/A\\"
        assert cell_text(rows, MAX_PLAYER_Y + 1, PLAYER_START_X, 3) == "==="
        assert grid[MAX_PLAYER_Y][PLAYER_START_X].color == COLOR_PLAYER

    def test_shots_drawn(self):
        world = World(shots=(Shot(5, 8),), alien_shots=(AlienShot(9, 12),))
        rows = rows_as_text(render_grid(world))
        assert rows[8][5] == "|"
        assert rows[12][9] == "v"

    def test_off_grid_glyphs_clipped(self):
        world = World(shots=(Shot(500, 8),), alien_shots=(AlienShot(3, 99),))
        rows = rows_as_text(render_grid(world))
        assert "|" not in "".join(rows[1:])

    def test_game_over_overlay(self):
        world = World(score=70, lives=0, game_over=True, cause=GameOverCause.LIVES)
        grid = render_grid(world)
        rows = rows_as_text(grid)
        assert cell_text(rows, GAME_OVER_ROW, 15, 10) == "GAME OVER!"
        assert cell_text(rows, GAME_OVER_ROW + 1, 10, 15) == "Final Score: 70"
        assert cell_text(rows, GAME_OVER_ROW + 2, 8, 18) == "Press 'q' to exit."
        assert cell_text(rows, GAME_OVER_ROW + 3, 10, 12) == "Out of lives"
        assert grid[GAME_OVER_ROW][15].color == COLOR_GAMEOVER

    def test_player_hidden_when_over(self):
        world = World(game_over=True, cause=GameOverCause.INVASION)
        rows = rows_as_text(render_grid(world))
        assert cell_text(rows, MAX_PLAYER_Y, PLAYER_START_X, 3) == "   "

    def test_render_does_not_change_world(self):
        world = World.new(0)
        before = world.evolve()
        render_grid(world)
        assert world == before


# ── HUD text ────────────────────────────────────────────────────────────────


class TestText:
    def test_status_line(self):
        assert status_line(World(score=30, lives=2)) == (
            "Score: 30 | Lives: 2 | Press 'q' to quit"
        )

    def test_game_over_lines(self):
        assert game_over_lines(World(score=40))[1] == "Final Score: 40"

    def test_cause_labels(self):
        assert cause_label(World()) == ""
        assert cause_label(World(cause=GameOverCause.LIVES)) == "Out of lives"
        assert cause_label(World(cause=GameOverCause.INVASION)) == "The swarm landed"


# ── Key mapping ─────────────────────────────────────────────────────────────


class TestKeys:
    @pytest.mark.parametrize("code, intent", [
        (ord("q"), Intent.QUIT),
        (ord("a"), Intent.MOVE_LEFT),
        (curses.KEY_LEFT, Intent.MOVE_LEFT),
        (ord("d"), Intent.MOVE_RIGHT),
        (curses.KEY_RIGHT, Intent.MOVE_RIGHT),
        (ord(" "), Intent.FIRE),
        (-1, Intent.NONE),
        (ord("z"), Intent.NONE),
    ])
    def test_curses_keys(self, code, intent):
        assert intent_for_key(code) is intent

    def test_pygame_keys(self):
        pygame = pytest.importorskip("pygame")
        assert intent_for_pygame_key(pygame.K_SPACE) is Intent.FIRE
        assert intent_for_pygame_key(pygame.K_LEFT) is Intent.MOVE_LEFT
        assert intent_for_pygame_key(pygame.K_d) is Intent.MOVE_RIGHT
        assert intent_for_pygame_key(pygame.K_ESCAPE) is Intent.QUIT
        assert intent_for_pygame_key(pygame.K_z) is Intent.NONE

    def test_pygame_key_map_built_once(self):
        pygame = pytest.importorskip("pygame")
        intent_for_pygame_key(pygame.K_a)
        cached = input_handler._PYGAME_KEYS
        assert cached is not None
        intent_for_pygame_key(pygame.K_d)
        assert input_handler._PYGAME_KEYS is cached


class TestIntentQueue:
    def test_empty_pops_none(self):
        assert IntentQueue().pop() is Intent.NONE

    def test_none_not_queued(self):
        queue = IntentQueue()
        queue.push(Intent.NONE)
        assert len(queue.pending) == 0

    def test_fifo_one_per_pop(self):
        queue = IntentQueue()
        queue.push(Intent.FIRE)
        queue.push(Intent.MOVE_LEFT)
        assert queue.pop() is Intent.FIRE
        assert queue.pop() is Intent.MOVE_LEFT
        assert queue.pop() is Intent.NONE

    def test_clear(self):
        queue = IntentQueue()
        queue.push(Intent.FIRE)
        queue.clear()
        assert queue.pop() is Intent.NONE
