DEFAULT_ROWS = 5
DEFAULT_COLS = 5
DEFAULT_CHANCE_LIGHT_STARTS_ON = 0.25

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_TITLE = "Lights Out"

CELL_SIZE = 96
MIN_CELL_SIZE = 20
CELL_PADDING = 4

# Board maximum footprint relative to window (percentage of window width/height).
BOARD_MAX_WIDTH_PCT = 0.80
BOARD_MAX_HEIGHT_PCT = 0.80

# Cell palette
LIT_COLOR = (250, 210, 80)
UNLIT_COLOR = (40, 45, 70)
CELL_OUTLINE_COLOR = (90, 95, 120)
FOCUS_OUTLINE_COLOR = (120, 200, 255)
WIN_TEXT_COLOR = (250, 210, 80)
HINT_TEXT_COLOR = (200, 200, 200)

# Arcade key symbols, kept numeric so input handling does not import arcade.
KEY_UP = 65362
KEY_DOWN = 65364
KEY_LEFT = 65361
KEY_RIGHT = 65363
KEY_ENTER = 65293
KEY_NUM_ENTER = 65421
KEY_SPACE = 32
KEY_N = 110
KEY_R = 114

MOUSE_BUTTON_LEFT = 1
