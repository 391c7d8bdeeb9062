"""
Simulation tuning knobs.
"""

# Environment
SCREEN_W, SCREEN_H = 980, 720
FPS = 60

# Root species template (world pixels)
ROOT_X, ROOT_Y = 0.0, 0.0
ROOT_SIZE = 30.0
ROOT_HSL = (0.0, 100.0, 50.0)
ROOT_BORDER_RADIUS = 0.0  # square
ROOT_EYE_SIZE = 0.15
ROOT_EYE_OFFSET = 0.25

# Random source (None = different tree every run)
SEED = None

# Mutation: color
HUE_SHIFT = 10.0
SATURATION_SHIFT = 5.0
LIGHTNESS_SHIFT = 5.0

# Mutation: body
SIZE_CHANGE_FACTOR = 0.2
BORDER_RADIUS_SHIFT = 8.0
DISCRETE_SHAPE = False
SHAPE_MUTATION_CHANCE = 0.3

# Mutation: eyes
EYE_CHANGE_FACTOR = 0.15

# Layout
VERTICAL_SPACING = 90.0
BASE_SPREAD = 120.0
SPREAD_GROWTH = 1.25

# Names
MIN_SYLLABLES = 2
MAX_SYLLABLES = 3
CLUSTER_CHANCE = 0.25
NAME_ATTEMPTS = 64

# Presentation
CLICK_SLOP = 4.0  # px of drag before a press turns into a pan
TOP_MARGIN = 70.0
