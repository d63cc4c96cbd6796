import os

# ============================================================
# ===================== USER SETTINGS ========================
# ============================================================

WINDOW_WIDTH  = 1000
WINDOW_HEIGHT = 600
FPS           = 60

MIN_COUNT = 1
MAX_COUNT = 1000

MIN_VALUE = 1
MAX_VALUE = 1000

# Selecting an element at or below this value regenerates the sequence.
# generate_numbers() guarantees at least one such element.
LOW_VALUE_LIMIT = 30

# SWAP_DELAY — pause between two visible swaps, in seconds.
#   0.0 runs the sort flat out. 0.02 is slow enough to follow by eye
#   for a few dozen elements. Purely cosmetic: never changes the result.
SWAP_DELAY = float(os.getenv("NUMBER_SORTER_SWAP_DELAY", "0.02"))

# How long a toast message stays on screen, in milliseconds.
TOAST_MS = 4000

# ============================================================
# ========================= LAYOUT ===========================
# ============================================================

EL_WIDTH  = 60
EL_HEIGHT = 25
GAP       = 5
BORDER    = 100
BUTTON_WIDTH = 100

MAX_ELEMENTS_IN_COL = 10
MAX_NUMBER_OF_COLS  = 10

# ============================================================
# ========================= UI THEME =========================
# ============================================================

UI_BG        = (8,   8,  14)
UI_PANEL     = (14, 14,  22)
UI_PANEL2    = (22, 22,  36)
UI_BORDER    = (38,  38,  58)
UI_TEXT      = (215, 215, 228)
UI_SUBTEXT   = (105, 105, 130)
UI_DIM       = (60,  60,  80)
UI_ERROR     = (255, 90,  90)

NUMBER_COLOR = (30,  60, 200)
LOW_COLOR    = (40, 110, 230)
PIVOT_A_COLOR = (255, 60,  60)
PIVOT_B_COLOR = (255, 170, 40)
ACTION_COLOR = (40, 170,  80)
