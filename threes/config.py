"""Engine constants and defaults."""

# Board side length (the board is always SIZE x SIZE)
SIZE = 4

# The two seed values and the ratio of the merge progression: 1, 2, 3, 6, 12, ...
SEED_VALUES = (1, 2)
RATIO = 2

# Parameter of the geometric distribution biasing the next tile
TILE_P = 0.5

# Per-value counts for the initial board (index is the cell value)
DEFAULT_BASE_COUNTS = (4, 2, 2, 2)

# Safety cap for simulated episodes
MAX_STEPS = 10000
