# ============================================================
# ===================== USER SETTINGS ========================
# ============================================================

WINDOW_WIDTH   = 1100
WINDOW_HEIGHT  = 680
FPS            = 60

BACKGROUND_COLOR = (10, 0, 0)
HIGHLIGHT_COLOR  = (255, 255, 255)
TEXT_COLOR       = (215, 215, 228)
SUBTEXT_COLOR    = (140, 140, 160)

# Above this many bars only every k-th bar is drawn.
MAX_DRAWN_BARS = 1000

# ============================================================
# ========================== DATA ============================
# ============================================================

DEFAULT_SIZE      = 64
MIN_SIZE          = 2
MAX_SIZE          = 512
SIZE_STEP         = 8
DEFAULT_DATA_KIND = "random"

RANDOM_VALUE_LIMIT = 400   # random values fall in [0, RANDOM_VALUE_LIMIT)
PROGRESSION_STEP   = 4     # progression values are 0, 4, 8, ...

# ============================================================
# ========================== RUNS ============================
# ============================================================

DEFAULT_ALGORITHM = "bubble"

# SPEED divides every step delay. 2.0 plays twice as fast.
DEFAULT_SPEED = 1.0

# Bogo sort gives up after this many shuffles.
BOGO_ATTEMPT_CEILING = 2000

# Delay of the terminal DONE step, in milliseconds.
DONE_DELAY_MS = 200

# ============================================================
# ====================== SOUND SETTINGS ======================
# ============================================================
#
# TONE_VOLUME: peak amplitude of a cue in [0, 1].
# TONE_ATTACK / TONE_RELEASE: raised-cosine fade in / out, seconds.
#   env[t] = 0.5 * (1 - cos(pi * t / A)) on the way in, mirrored on the way out.
# TRIGGER_MIN_INTERVAL: cues closer together than this are dropped.

ENABLE_SOUND         = True
SAMPLE_RATE          = 44100
TONE_VOLUME          = 0.1
TONE_DURATION        = 0.05
TONE_ATTACK          = 0.004
TONE_RELEASE         = 0.015
TONE_OFFSET_HZ       = 100.0
DONE_TONE_HZ         = 800.0
HIGHLIGHT_TONE_HZ    = 440.0
LONG_TONE_DURATION   = 0.2
TRIGGER_MIN_INTERVAL = 0.02
