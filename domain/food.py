"""
Food entity and the spawner that places it.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional, Tuple

from .board import Board

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Food:
    """A single food item on the board."""

    position: Tuple[int, int]


class FoodSpawner:
    """
    Picks a cell for the next food item.

    x and y are drawn independently and uniformly. The snake's body is not
    consulted, so food can land on an occupied cell.
    """

    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None):
        if rng is None:
            rng = random.Random(seed)
        self.rng = rng

    def spawn(self, board: Board) -> Food:
        x = self.rng.randrange(board.width)
        y = self.rng.randrange(board.height)
        logger.debug("Spawned food at %s", (x, y))
        return Food((x, y))
