"""Constants used across the article features project."""

# --- Markedness ---

# Order matters: index i of a weight vector scales term i of the markedness sum
WEIGHT_NAMES = (
    'font_size',
    'font_weight',
    'font_style',
    'indentation',
    'contrast',
    'centered',
    'color_percentage',
    'background_color_percentage',
)

DEFAULT_WEIGHTS = (1000.0, 2.0, 0.5, 5.0, 0.0, 1.0, 0.5, 100.0)

# 0.5 is the difference between a whole area in italics and not in italics
MIN_MARKEDNESS_DIFFERENCE = 0.5

# --- Geometry heuristics ---

# Allowed left/right margin difference of a centered area (share of the mean margin)
CENTERING_THRESHOLD = 0.1

MAX_INDENT_LEVELS = 3

# Minimal vertical distance between two text lines in pixels
LINE_THRESHOLD = 5
LINE_START_POSITION = -10

# --- Text ---

PUNCTUATION_CHARS = frozenset(',.;:')

# --- Luminosity ---

GAMMA = 2.2
# BT.709 weights in parts per ten thousand (0.2126, 0.7152, 0.0722)
LUMINOSITY_COEFFICIENTS = (2126, 7152, 722)
LUMINOSITY_SCALE = 10000
CONTRAST_EPSILON = 0.05

# --- Dataset ---

SCHEMA_RESOURCE = 'articles_header.yaml'
NO_TAG_LEVEL = -1
