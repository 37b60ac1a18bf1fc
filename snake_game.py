import logging
from typing import List, Optional, Tuple

from domain.board import Board
from domain.constants import DEFAULT_DIRECTION, DEFAULT_START_POSITION
from domain.direction_state import DirectionState
from domain.food import Food, FoodSpawner
from domain.game_state import GameState
from domain.snake import Snake

logger = logging.getLogger(__name__)


class SnakeGame:
    """
    Manages:
      - Board (width, height)
      - The snake's segment chain
      - Direction mailbox
      - Food and its spawner
      - Tick counter and optional snapshot history

    The game never schedules itself. Something outside calls tick() once
    per interval and set_direction() whenever input arrives.
    """
    def __init__(
        self,
        width: int,
        height: int,
        start: Tuple[int, int] = DEFAULT_START_POSITION,
        direction: str = DEFAULT_DIRECTION,
        spawner: Optional[FoodSpawner] = None,
        seed: Optional[int] = None,
        keep_history: bool = False
    ):
        self.board = Board(width, height)
        if not self.board.validate(start):
            raise ValueError(f"Start position {start} is outside {self.board}.")

        self.snake = Snake(start)
        self.direction = DirectionState(direction)
        self.spawner = spawner if spawner is not None else FoodSpawner(seed=seed)
        self.tick_number = 0
        self.apples_eaten = 0

        self.keep_history = keep_history
        self.history: List[GameState] = []

        self._food: Optional[Food] = self.spawner.spawn(self.board)
        logger.info(
            "Created %dx%d game, snake at %s heading %s, food at %s",
            width, height, start, direction, self._food.position
        )

    @property
    def width(self) -> int:
        return self.board.width

    @property
    def height(self) -> int:
        return self.board.height

    @property
    def food(self) -> Optional[Food]:
        return self._food

    def place_food(self, position: Tuple[int, int]):
        """
        Put the food item at a specific cell, replacing the current one.
        """
        position = tuple(position)
        if not self.board.validate(position):
            raise ValueError(f"Food out of bounds at {position}.")
        self._food = Food(position)

    def set_direction(self, direction: str):
        self.direction.set(direction)

    def segments(self) -> List[Tuple[Tuple[int, int], str]]:
        """Read-only (position, role) pairs from head to tail."""
        return self.snake.segments()

    def tick(self) -> bool:
        """
        Execute one tick:
          1) Advance the head in the current heading, gated by the board
          2) Eat-check against the new head position
          3) Drop the tail unless the eat-check staged growth

        A blocked advance ends the tick so the chain stays exactly as it
        was. Returns True if the head moved.
        """
        self.tick_number += 1

        moved = self._advance_head()
        if moved:
            self._eat_check()
            self._drop_tail()

        if self.keep_history:
            self.record_history()
        return moved

    def _advance_head(self) -> bool:
        direction = self.direction.current()
        moved = self.snake.advance_head(direction, self.board)
        if not moved:
            logger.debug("Tick %d: blocked moving %s", self.tick_number, direction)
        return moved

    def _eat_check(self) -> bool:
        if self._food is None:
            return False
        if self.snake.head.position != self._food.position:
            return False

        self.snake.mark_pending_growth()
        eaten = self._food
        self._food = None
        self.apples_eaten += 1
        # replace in the same tick so the board never goes without food
        self._food = self.spawner.spawn(self.board)
        logger.debug(
            "Tick %d: ate food at %s, new food at %s",
            self.tick_number, eaten.position, self._food.position
        )
        return True

    def _drop_tail(self) -> bool:
        return self.snake.drop_tail()

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            tick_number=self.tick_number,
            segments=self.snake.segments(),
            food=self._food.position if self._food is not None else None,
            direction=self.direction.current(),
            width=self.width,
            height=self.height,
            apples_eaten=self.apples_eaten
        )

    def record_history(self):
        self.history.append(self.get_current_state())

    def print_board(self):
        """
        Prints a visual representation of the current board state.
        """
        print("\n" + self.get_current_state().print_board() + "\n")
