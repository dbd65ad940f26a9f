"""
Tests for main.py – argument parsing, logging setup and the driver
loop without a display.
"""

import os
import subprocess
import sys

import pytest
from loguru import logger

from invaders.config import PLAYER_START_X, TICK_INTERVAL_NS
from invaders.engine import TickClock
from invaders.models.world import World
from invaders.ui.terminal import TerminalFrontend
from invaders.utils.input_handler import Intent
from main import DEFAULT_SCALE, InvadersApp, configure_logging, main, parse_args


# ── Argument parsing ───────────────────────────────────────────────────────


class TestParseArgs:
    def test_defaults(self):
        args = parse_args([])
        assert args.scale == DEFAULT_SCALE
        assert args.terminal is False
        assert args.debug is False
        assert args.log_file is None

    def test_terminal_flag(self):
        assert parse_args(["--terminal"]).terminal is True

    def test_scale_multiplier(self):
        for n in range(1, 5):
            assert parse_args(["--scale", str(n)]).scale == n

    def test_invalid_scale_rejected(self):
        with pytest.raises(SystemExit):
            parse_args(["--scale", "5"])

    def test_log_file(self):
        assert parse_args(["--log-file", "run.log"]).log_file == "run.log"


# ── Logging ─────────────────────────────────────────────────────────────────


class TestLogging:
    def teardown_method(self):
        logger.remove()
        logger.add(sys.stderr)

    def test_file_sink(self, tmp_path):
        path = tmp_path / "invaders.log"
        configure_logging(debug=True, log_file=str(path))
        World.new(0)
        logger.complete()
        assert "Wave spawned" in path.read_text()

    def test_info_level_hides_engine_debug(self, tmp_path):
        path = tmp_path / "invaders.log"
        configure_logging(debug=False, log_file=str(path))
        World.new(0)
        logger.complete()
        assert "Wave spawned" not in path.read_text()


# ── Application without pygame display ─────────────────────────────────────


class TestInvadersApp:
    def test_app_defaults(self):
        app = InvadersApp()
        assert app.scale == DEFAULT_SCALE
        assert app.running is False
        assert len(app.world.aliens) > 0

    def test_quit_stops_loop(self):
        app = InvadersApp()
        app.running = True
        app.handle(Intent.QUIT)
        assert app.running is False

    def test_quit_drops_pending_intents(self):
        app = InvadersApp()
        app.running = True
        app.intents.push(Intent.QUIT)
        app.intents.push(Intent.FIRE)
        app.handle(app.intents.pop())
        assert app.running is False
        assert app.intents.pop() is Intent.NONE
        assert app.world.shots == ()

    def test_quit_works_after_game_over(self):
        app = InvadersApp(world=World(game_over=True))
        app.running = True
        app.handle(Intent.QUIT)
        assert app.running is False

    def test_move_intent_reaches_world(self):
        app = InvadersApp()
        app.handle(Intent.MOVE_RIGHT)
        assert app.world.player.x == PLAYER_START_X + 1

    def test_one_intent_per_iteration(self):
        app = InvadersApp()
        app.intents.push(Intent.FIRE)
        app.intents.push(Intent.FIRE)
        app.handle(app.intents.pop())
        assert len(app.world.shots) == 1

    def test_update_waits_for_tick(self):
        app = InvadersApp(world=World.new(0), ticks=TickClock(last=0))
        assert app._update(TICK_INTERVAL_NS - 1) is False
        assert app.tick_count == 0
        assert app._update(TICK_INTERVAL_NS) is True
        assert app.tick_count == 1

    def test_update_advances_world(self):
        app = InvadersApp(world=World.new(0), ticks=TickClock(last=0))
        before = app.world.aliens
        app._update(TICK_INTERVAL_NS)
        assert app.world.aliens != before

    def test_render_without_screen_is_noop(self):
        app = InvadersApp()
        app._render()

    def test_run_without_init_returns(self):
        app = InvadersApp()
        app.run()
        assert app.running is False


class TestTerminalFrontend:
    def test_quit_stops_loop(self):
        front = TerminalFrontend()
        front.running = True
        front.handle(Intent.QUIT)
        assert front.running is False

    def test_fire_intent_reaches_world(self):
        front = TerminalFrontend()
        front.handle(Intent.FIRE)
        assert len(front.world.shots) == 1


class TestWithoutCurses:
    """The engine and the window front-end must load where curses is absent."""

    def test_imports_without_curses(self):
        root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
        code = (
            "import sys\n"
            "sys.modules['curses'] = None\n"
            "from invaders.engine import advance, apply_intent\n"
            "from invaders.models.world import World\n"
            "from invaders.ui import render_grid\n"
            "import main\n"
            "world = advance(World.new(0), 10**9)\n"
            "render_grid(world)\n"
        )
        result = subprocess.run(
            [sys.executable, "-c", code],
            cwd=root,
            env={**os.environ, "PYTHONPATH": root},
            capture_output=True,
            text=True,
        )
        assert result.returncode == 0, result.stderr


class TestEntryPoint:
    def test_init_failure_returns_one(self, monkeypatch):
        monkeypatch.setattr(InvadersApp, "init", lambda self: False)
        assert main(["--log-file", "/dev/null"]) == 1
        logger.remove()
        logger.add(sys.stderr)
