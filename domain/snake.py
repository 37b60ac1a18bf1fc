"""
Snake entity for the game engine.

The body is an arena of segments addressed by stable index. Each segment
except the head records the index of the segment that replaces it when the
tail is dropped, so the chain can be walked from tail to head without live
references between segments.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .board import Board
from .constants import BODY, DIRECTION_VECTORS, HEAD, TAIL

logger = logging.getLogger(__name__)


@dataclass
class Segment:
    """
    One occupied cell of the snake.

    Attributes:
        position: (x, y) grid cell
        role: HEAD, BODY or TAIL
        successor_index: arena index of the segment that takes over this
            segment's role after the next tail drop
        pending_growth: set on the tail when food was eaten this tick
    """

    position: Tuple[int, int]
    role: str
    successor_index: Optional[int] = None
    pending_growth: bool = False


class Snake:
    """
    Represents a snake on the board.

    Attributes:
        head_index: arena index of the head segment
        tail_index: arena index of the tail segment; equal to head_index
            while the snake is a single cell
    """

    def __init__(self, start: Tuple[int, int]):
        self._arena: List[Optional[Segment]] = [Segment(tuple(start), HEAD)]
        self._free: List[int] = []
        self.head_index = 0
        self.tail_index = 0

    def _allocate(self, segment: Segment) -> int:
        if self._free:
            index = self._free.pop()
            self._arena[index] = segment
            return index
        self._arena.append(segment)
        return len(self._arena) - 1

    def _release(self, index: int) -> None:
        self._arena[index] = None
        self._free.append(index)

    def segment(self, index: int) -> Segment:
        segment = self._arena[index]
        if segment is None:
            raise IndexError(f"Segment slot {index} is free")
        return segment

    @property
    def head(self) -> Segment:
        return self.segment(self.head_index)

    @property
    def tail(self) -> Segment:
        return self.segment(self.tail_index)

    def advance_head(self, direction: str, board: Board) -> bool:
        """
        Move the head one cell in direction.

        Returns False without touching the chain when the next cell is off
        the board. Otherwise a new head segment is created and the old head
        is demoted; it stays the tail if it was the only segment.
        """
        dx, dy = DIRECTION_VECTORS[direction]
        hx, hy = self.head.position
        next_position = (hx + dx, hy + dy)

        if not board.validate(next_position):
            logger.debug("Head blocked at %s moving %s", (hx, hy), direction)
            return False

        new_index = self._allocate(Segment(next_position, HEAD))
        old_head = self.head
        old_head.successor_index = new_index
        old_head.role = TAIL if self.head_index == self.tail_index else BODY
        self.head_index = new_index
        return True

    def mark_pending_growth(self) -> None:
        self.tail.pending_growth = True

    def drop_tail(self) -> bool:
        """
        Retire the tail segment unless growth is pending.

        Returns True if a segment was removed. A pending growth flag is
        cleared here, so it never outlives the tick that set it.
        """
        tail = self.tail
        if tail.pending_growth:
            tail.pending_growth = False
            return False

        successor_index = tail.successor_index
        if successor_index is None:
            # single cell, nothing to retire
            return False

        successor = self.segment(successor_index)
        if successor_index != self.head_index:
            successor.role = TAIL
        self._release(self.tail_index)
        self.tail_index = successor_index
        return True

    def _indices_tail_to_head(self) -> List[int]:
        indices = [self.tail_index]
        while indices[-1] != self.head_index:
            indices.append(self.segment(indices[-1]).successor_index)
        return indices

    def segments(self) -> List[Tuple[Tuple[int, int], str]]:
        """Return (position, role) pairs from head to tail."""
        return [
            (self.segment(i).position, self.segment(i).role)
            for i in reversed(self._indices_tail_to_head())
        ]

    def positions(self) -> List[Tuple[int, int]]:
        """Return positions from head to tail."""
        return [position for position, _ in self.segments()]

    def __len__(self) -> int:
        return len(self._arena) - len(self._free)

    def __repr__(self):
        return f"<Snake length={len(self)} head={self.head.position}>"
