"""
Random player implementation - picks random in-bounds moves.
"""

import random
from typing import List, Optional

from domain.constants import DIRECTION_VECTORS, VALID_MOVES
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    Picks a random direction that keeps the head on the board.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def get_move(self, game_state: GameState) -> str:
        head_x, head_y = game_state.head

        valid_moves: List[str] = []
        for move, (dx, dy) in sorted(DIRECTION_VECTORS.items()):
            new_x, new_y = head_x + dx, head_y + dy
            if (new_x < 0 or new_x >= game_state.width or
                new_y < 0 or new_y >= game_state.height):
                continue
            valid_moves.append(move)

        # 1x1 board, every move is blocked
        if not valid_moves:
            return self.rng.choice(sorted(VALID_MOVES))

        return self.rng.choice(valid_moves)
