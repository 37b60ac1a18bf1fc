"""
Domain entities for the snake simulation.

This module contains the core simulation entities that are independent of
presentation concerns (rendering, keyboard devices, scheduling).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, DIRECTION_VECTORS,
    HEAD, BODY, TAIL,
)
from .board import Board
from .direction_state import DirectionState
from .food import Food, FoodSpawner
from .snake import Segment, Snake
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'DIRECTION_VECTORS',
    'HEAD', 'BODY', 'TAIL',
    'Board',
    'DirectionState',
    'Food', 'FoodSpawner',
    'Segment', 'Snake',
    'GameState',
]
