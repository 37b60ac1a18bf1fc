"""
Game constants for the snake simulation.
"""

from typing import Dict, Tuple

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# (0, 0) is the bottom-left cell, so UP increases y
DIRECTION_VECTORS: Dict[str, Tuple[int, int]] = {
    UP: (0, 1),
    DOWN: (0, -1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

# Segment roles
HEAD = "HEAD"
BODY = "BODY"
TAIL = "TAIL"

# Startup defaults
DEFAULT_GRID_WIDTH = 9
DEFAULT_GRID_HEIGHT = 9
DEFAULT_TICK_INTERVAL = 0.3  # seconds
DEFAULT_START_POSITION = (0, 0)
DEFAULT_DIRECTION = UP
