"""
Configuration constants for Grid Invaders.

The board is a fixed character grid.  All entities except projectiles
occupy a 3x2 cell box anchored at their top-left corner.
"""

# ---------------------------------------------------------------------------
# Board
# ---------------------------------------------------------------------------
MAX_PLAYER_X: int = 38  # last usable column
MAX_PLAYER_Y: int = 20  # the player's row, fixed after spawn
BOARD_WIDTH: int = MAX_PLAYER_X + 1
BOARD_HEIGHT: int = MAX_PLAYER_Y + 1

SPRITE_WIDTH: int = 3
SPRITE_HEIGHT: int = 2

# ---------------------------------------------------------------------------
# Player
# ---------------------------------------------------------------------------
PLAYER_START_X: int = MAX_PLAYER_X // 2
PLAYER_MAX_X: int = MAX_PLAYER_X - 2  # keeps the 3-wide sprite on the board
INITIAL_LIVES: int = 3
MAX_SHOTS: int = 10  # live player shots

# ---------------------------------------------------------------------------
# Alien formation
# ---------------------------------------------------------------------------
ALIEN_ROWS: int = 2
ALIEN_COLS: int = 6
HORIZONTAL_SPACING: int = 5
VERTICAL_SPACING: int = 4
WAVE_OFFSET_X: int = 2
WAVE_OFFSET_Y: int = 2

# Swarm reverses one cell before the player's hard clamp.
ALIEN_LEFT_LIMIT: int = 0
ALIEN_RIGHT_LIMIT: int = MAX_PLAYER_X - 1

# ---------------------------------------------------------------------------
# Projectiles
# ---------------------------------------------------------------------------
PLAYER_SHOT_MIN_Y: int = 1                 # discarded at or above this row
ALIEN_SHOT_MAX_Y: int = MAX_PLAYER_Y + 2   # discarded at or below this row

# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------
POINTS_PER_ALIEN: int = 10

# ---------------------------------------------------------------------------
# Timing (monotonic nanoseconds)
# ---------------------------------------------------------------------------
NS_PER_MS: int = 1_000_000
TICK_INTERVAL_NS: int = 200 * NS_PER_MS
ALIEN_FIRE_INTERVAL_NS: int = 750 * NS_PER_MS

RENDER_RATE: int = 30     # Hz, pygame frame pacing
INPUT_TIMEOUT_MS: int = 100  # curses getch timeout

# ---------------------------------------------------------------------------
# Sprites and glyphs
# ---------------------------------------------------------------------------
ALIEN_SPRITE: tuple[str, str] = ("<O>", "/-\\")
PLAYER_SPRITE: tuple[str, str] = ("/A\\", "===")
SHOT_GLYPH: str = "|"
ALIEN_SHOT_GLYPH: str = "v"

# Game-over overlay anchor: (row, column) for each line
GAME_OVER_ROW: int = MAX_PLAYER_Y // 2
GAME_OVER_COLUMNS: tuple[int, int, int] = (15, 10, 8)
GAME_OVER_CAUSE_COLUMN: int = 10

# Visible screen: the board plus room for the full status line
SCREEN_COLUMNS: int = 48
SCREEN_ROWS: int = BOARD_HEIGHT + 1

# ---------------------------------------------------------------------------
# Colours (pair index, RGB for pygame)
# ---------------------------------------------------------------------------
COLOR_UI: int = 1
COLOR_PLAYER: int = 2
COLOR_SHOT: int = 3
COLOR_ALIEN: int = 4
COLOR_GAMEOVER: int = 5
COLOR_ALIEN_SHOT: int = 6

PALETTE: dict[int, tuple[int, int, int]] = {
    COLOR_UI: (255, 255, 0),        # yellow
    COLOR_PLAYER: (0, 255, 255),    # cyan
    COLOR_SHOT: (255, 0, 0),        # red
    COLOR_ALIEN: (0, 255, 0),       # green
    COLOR_GAMEOVER: (255, 0, 0),    # red
    COLOR_ALIEN_SHOT: (255, 0, 255),  # magenta
}
