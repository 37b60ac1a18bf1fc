"""
Single-slot mailbox holding the snake's heading.
"""

from .constants import DEFAULT_DIRECTION, VALID_MOVES


class DirectionState:
    """
    Latest requested heading.

    Input producers overwrite the slot with set(); the tick reads it with
    current() once per tick. Reading does not drain the slot, so a heading
    persists until the next overwrite. Several writes between two ticks
    collapse to the last one.
    """

    def __init__(self, direction: str = DEFAULT_DIRECTION):
        self._direction = self._check(direction)

    @staticmethod
    def _check(direction: str) -> str:
        if direction not in VALID_MOVES:
            raise ValueError(
                f"Unknown direction '{direction}'. Expected one of {sorted(VALID_MOVES)}"
            )
        return direction

    def set(self, direction: str) -> None:
        self._direction = self._check(direction)

    def current(self) -> str:
        return self._direction

    def __repr__(self):
        return f"<DirectionState {self._direction}>"
