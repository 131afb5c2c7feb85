"""
Food placement by rejection sampling.
"""

import logging
import random
from typing import Iterable, Optional, Tuple

from gridsnake.domain.errors import NoSpaceAvailable
from gridsnake.domain.types import Cell

logger = logging.getLogger(__name__)


class FoodPlacer:
    """
    Picks a uniformly random free cell for the next piece of food.

    Candidates are drawn from the whole board and rejected while they land
    on the snake. A full board is detected up front so the sampler never
    spins forever.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def place(self, snake: Iterable[Tuple[int, int]], tile_count: int) -> Cell:
        """
        Return a cell in ``[0, tile_count)^2`` that no snake segment occupies.

        Raises:
            NoSpaceAvailable: if the snake covers every cell of the board.
        """
        occupied = {
            (x, y) for x, y in snake
            if 0 <= x < tile_count and 0 <= y < tile_count
        }
        if len(occupied) >= tile_count * tile_count:
            raise NoSpaceAvailable(tile_count, len(occupied))

        attempts = 0
        while True:
            attempts += 1
            candidate = Cell(
                self.rng.randrange(tile_count),
                self.rng.randrange(tile_count),
            )
            if candidate not in occupied:
                logger.debug("Placed food at %s after %s attempt(s)", candidate, attempts)
                return candidate
