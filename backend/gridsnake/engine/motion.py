"""
Head movement and direction parsing.
"""

from typing import Any, Tuple

from gridsnake.domain.constants import VALID_DIRECTIONS
from gridsnake.domain.errors import InvalidDirection
from gridsnake.domain.types import Cell, Direction


def next_head(head: Tuple[int, int], direction: Tuple[int, int]) -> Cell:
    """Return the cell one step from ``head``. Not clamped to the board."""
    x, y = head
    dx, dy = direction
    return Cell(x + dx, y + dy)


def parse_direction(value: Any) -> Direction:
    """
    Coerce ``value`` into one of the legal direction vectors.

    Raises:
        InvalidDirection: if ``value`` is not a pair of integers forming
            one of (0,0), (0,-1), (0,1), (-1,0), (1,0).
    """
    try:
        dx, dy = value
    except (TypeError, ValueError) as exc:
        raise InvalidDirection(value) from exc

    if isinstance(dx, bool) or isinstance(dy, bool):
        raise InvalidDirection(value)
    if not isinstance(dx, int) or not isinstance(dy, int):
        raise InvalidDirection(value)

    direction = Direction(dx, dy)
    if direction not in VALID_DIRECTIONS:
        raise InvalidDirection(value)
    return direction
