"""
GameState entity - a snapshot of the simulation at a point in time.
"""

from typing import List, Optional, Tuple

from .constants import HEAD


class GameState:
    """
    A snapshot of the simulation after a specific tick.

    Attributes:
        tick_number: how many ticks have run (0 before the first tick)
        segments: list of ((x, y), role) from head to tail
        food: (x, y) of the food item, or None
        direction: heading that the next tick will read
        width, height: board dimensions
        apples_eaten: food items consumed so far
    """

    def __init__(
        self,
        tick_number: int,
        segments: List[Tuple[Tuple[int, int], str]],
        food: Optional[Tuple[int, int]],
        direction: str,
        width: int,
        height: int,
        apples_eaten: int = 0
    ):
        self.tick_number = tick_number
        self.segments = segments
        self.food = food
        self.direction = direction
        self.width = width
        self.height = height
        self.apples_eaten = apples_eaten

    @property
    def positions(self) -> List[Tuple[int, int]]:
        return [position for position, _ in self.segments]

    @property
    def head(self) -> Tuple[int, int]:
        return self.segments[0][0]

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        A = food
        H = snake head
        T = snake body and tail
        (0,0) is at bottom left, x-axis labels at bottom
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = 'A'

        # Draw the head last so it wins over food or body on the same cell
        for (x, y), role in reversed(self.segments):
            board[y][x] = 'H' if role == HEAD else 'T'

        result = []
        for y in range(self.height - 1, -1, -1):
            result.append(f"{y:2d} {' '.join(board[y])}")

        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))

        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_number}, food={self.food}, "
            f"length={len(self.segments)}, direction={self.direction}>"
        )
