"""
Game constants for the grid snake game.
"""

from .types import Cell, Direction

# Movement directions (canvas convention: y grows downwards)
STILL = Direction(0, 0)
UP = Direction(0, -1)
DOWN = Direction(0, 1)
LEFT = Direction(-1, 0)
RIGHT = Direction(1, 0)
VALID_DIRECTIONS = frozenset({STILL, UP, DOWN, LEFT, RIGHT})

# Board and starting layout
DEFAULT_TILE_COUNT = 20
INITIAL_SNAKE = (Cell(10, 10), Cell(9, 10), Cell(8, 10))

# Scoring and speed (tick interval in milliseconds)
FOOD_REWARD = 10
INITIAL_SPEED = 200
MIN_SPEED = 50
SPEED_STEP = 20
SPEED_MILESTONE = 50

# Step events
EVENT_RESET = "reset"
EVENT_ATE = "ate"
EVENT_MOVED = "moved"
EVENT_IDLE = "idle"

# Reset reasons
REASON_START = "start"
REASON_WALL = "wall"
REASON_SELF = "self"
REASON_BOARD_FULL = "board_full"
REASON_MANUAL = "manual"
