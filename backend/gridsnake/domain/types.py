"""
Value types shared by the engine: grid cells and direction vectors.
"""

from typing import NamedTuple


class Cell(NamedTuple):
    """A grid coordinate. Compares equal to a plain ``(x, y)`` tuple."""

    x: int
    y: int


class Direction(NamedTuple):
    """A unit movement vector; ``(0, 0)`` means the snake is not moving yet."""

    dx: int
    dy: int

    @property
    def is_moving(self) -> bool:
        return self.dx != 0 or self.dy != 0

    def opposite(self) -> "Direction":
        return Direction(-self.dx, -self.dy)
