"""
Board entity - pure grid geometry.
"""

from typing import Iterator, Tuple


class Board:
    """
    Fixed-size grid measured in cells, not pixels.

    Attributes:
        width: number of columns
        height: number of rows
    """

    __slots__ = ("_width", "_height")

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(
                f"Board dimensions must be positive, got {width}x{height}."
            )
        self._width = width
        self._height = height

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def validate(self, position: Tuple[int, int]) -> bool:
        """Return True if position lies on the board."""
        x, y = position
        return 0 <= x < self._width and 0 <= y < self._height

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Iterate every cell, row by row from the bottom."""
        for y in range(self._height):
            for x in range(self._width):
                yield (x, y)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return (self._width, self._height) == (other._width, other._height)

    def __hash__(self):
        return hash((self._width, self._height))

    def __repr__(self):
        return f"<Board {self._width}x{self._height}>"
