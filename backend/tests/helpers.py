"""
Shared test doubles.
"""

from typing import Iterable, List, Tuple

from gridsnake.domain.types import Cell
from gridsnake.engine.food_placer import FoodPlacer


class QueuedFoodPlacer(FoodPlacer):
    """Hands out food cells from a fixed list, repeating the last one."""

    def __init__(self, cells: Iterable[Tuple[int, int]]):
        super().__init__()
        self.cells: List[Cell] = [Cell(x, y) for x, y in cells]
        self.calls = 0

    def place(self, snake, tile_count):
        self.calls += 1
        if len(self.cells) > 1:
            return self.cells.pop(0)
        return self.cells[0]
