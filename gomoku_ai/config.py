"""
Configuration for the Gomoku (Gobang) engine
"""

# Default board dimension (square boards only)
DEFAULT_BOARD_SIZE = 19

# Stones in a row needed to win
NEED_TO_WIN = 5

# How far from a point the threat classifier looks along one axis
SEARCH_RADIUS = 4

# Maximum number of candidate moves searched per node
CANDIDATE_CAP = 20

# Player roles
BLACK = 1           # Black player (goes first)
WHITE = -1          # White player
EMPTY = 0           # Empty cell
OUT_OF_BOUNDS = 32  # Beyond the board edge (line buffers only, never stored)

# External (string) cell representation used by the surrounding application
ROLE_NAMES = {
    BLACK: 'black',
    WHITE: 'white',
}

# Axis directions: horizontal, vertical, diagonal \, diagonal /
ALL_DIRECTIONS = [(0, 1), (1, 0), (1, 1), (1, -1)]

# Tactical override added to an evaluation when a side has a one-move win
TACTICAL_BONUS = 100000

# Ordering priority of injected forced moves
DEFEND_PRIORITY = 200000
WIN_PRIORITY = 300000

# Iterative deepening stops once a score reaches this share of the FIVE cost
FORCED_WIN_RATIO = 0.9

# Score bounds for alpha-beta
MAX_SCORE = 1000000000


class ConfigError(ValueError):
    """Raised for invalid search settings or preset files."""
