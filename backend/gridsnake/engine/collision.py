"""
Collision rules: walls, the snake's own body, and food.
"""

from typing import Iterable, Optional, Tuple

from gridsnake.domain.constants import REASON_SELF, REASON_WALL


def _outside(head: Tuple[int, int], tile_count: int) -> bool:
    x, y = head
    return x < 0 or x >= tile_count or y < 0 or y >= tile_count


def collision_reason(
    head: Tuple[int, int],
    snake: Iterable[Tuple[int, int]],
    tile_count: int,
) -> Optional[str]:
    """
    Return 'wall' or 'self' when moving the head to ``head`` is fatal, else None.

    The body check runs against the snake as it is now, tail included,
    because the tail has not been popped yet when the move is judged.
    """
    if _outside(head, tile_count):
        return REASON_WALL
    if any(segment == head for segment in snake):
        return REASON_SELF
    return None


def is_fatal(
    head: Tuple[int, int],
    snake: Iterable[Tuple[int, int]],
    tile_count: int,
) -> bool:
    return collision_reason(head, snake, tile_count) is not None


def check_food_collision(head: Tuple[int, int], food: Tuple[int, int]) -> bool:
    return tuple(head) == tuple(food)
