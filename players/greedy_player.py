"""
Greedy player - heads straight for the food.
"""

from domain.constants import DOWN, LEFT, RIGHT, UP
from domain.game_state import GameState
from .base import Player


class GreedyPlayer(Player):
    """
    Closes the horizontal gap to the food first, then the vertical one.
    Keeps the current heading when there is no food or the head is on it.
    """

    def get_move(self, game_state: GameState) -> str:
        if game_state.food is None:
            return game_state.direction

        head_x, head_y = game_state.head
        food_x, food_y = game_state.food

        if food_x > head_x:
            return RIGHT
        if food_x < head_x:
            return LEFT
        if food_y > head_y:
            return UP
        if food_y < head_y:
            return DOWN
        return game_state.direction
