"""flappy/constants.py — Default tuning values for the simulation and app.

Units are pixels and frames; one frame is one simulation tick.
"""

# ---------------------------------------------------------------------------
# Viewport
# ---------------------------------------------------------------------------

SCREEN_WIDTH = 288
SCREEN_HEIGHT = 512
FPS = 60

# ---------------------------------------------------------------------------
# Bird
# ---------------------------------------------------------------------------

BIRD_START_X = 60           # fixed x during play
BIRD_WIDTH = 34
BIRD_HEIGHT = 24

# ---------------------------------------------------------------------------
# Physics (px/frame, px/frame^2)
# ---------------------------------------------------------------------------

GRAVITY = 0.4
JUMP_VELOCITY = -6.5        # negative is up
TERMINAL_VELOCITY = 9.0     # max downward speed
PIPE_SPEED = 2.0

# ---------------------------------------------------------------------------
# Pipe generator
# ---------------------------------------------------------------------------

PIPE_WIDTH = 52
GAP_HEIGHT = 120
MIN_GAP_Y = 120             # gap center bounds, inclusive
MAX_GAP_Y = 392
SPAWN_INTERVAL = 90         # frames between spawns

# ---------------------------------------------------------------------------
# Driver
# ---------------------------------------------------------------------------

MAX_CATCH_UP_TICKS = 5      # missed ticks replayed after a stall

# ---------------------------------------------------------------------------
# Colors (0xRRGGBB)
# ---------------------------------------------------------------------------

COLOR_BACKGROUND = 0x4EC0CA
COLOR_BIRD = 0xF8D838
COLOR_BIRD_ACCENT = 0xE86020
COLOR_PIPE = 0x58B830
COLOR_PIPE_EDGE = 0x2C6418
COLOR_TEXT = 0xFFFFFF
