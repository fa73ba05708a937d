GRID_ROWS = 10
GRID_COLS = 6
INITIAL_ROWS = 4

MIN_TILE_VALUE = 1
MAX_TILE_VALUE = 9

# Targets are rolled in [TARGET_BASE_MIN, TARGET_BASE_MAX] plus level // 2.
TARGET_BASE_MIN = 10
TARGET_BASE_MAX = 19

TIME_LIMIT = 10  # seconds per round in time mode
LEVEL_SCORE_STEP = 500

# ============================================================================
# LAYOUT
# ============================================================================
TILE_SIZE = 56
BOTTOM_MARGIN = 40
# Vertical band above the board reserved for score/target/timer.
HUD_HEIGHT = 150

# Board maximum footprint relative to window (percentage of window width/height).
BOARD_MAX_WIDTH_PCT = 0.60
BOARD_MAX_HEIGHT_PCT = 0.95

HUD_BUTTON_SIZE = 48
HUD_BUTTON_MARGIN = 16

# Gap drawn between neighbouring tiles.
TILE_PADDING = 6

WINDOW_WIDTH = 540
WINDOW_HEIGHT = 860
WINDOW_TITLE = "Sumburst"

# ============================================================================
# INPUT
# ============================================================================
# Arcade key symbols, kept here so input code need not import arcade.
KEY_ENTER = 65293
KEY_ESCAPE = 65307
KEY_SPACE = 32
KEY_P = 112
KEY_T = 116
