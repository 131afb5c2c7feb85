"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from gridsnake.domain.constants import UP, DOWN, LEFT, RIGHT
from gridsnake.domain.game_state import GameState
from gridsnake.domain.types import Direction
from gridsnake.engine.collision import is_fatal
from gridsnake.engine.motion import next_head
from .base import Player

MOVES = (UP, DOWN, LEFT, RIGHT)


class RandomPlayer(Player):
    """
    An autopilot that picks a direction avoiding walls, its own body and
    reversals. Useful for headless demo runs.
    """

    name = "random"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    @classmethod
    def build(cls, rng: Optional[random.Random] = None, script: Optional[str] = None) -> "RandomPlayer":
        return cls(rng)

    def get_move(self, game_state: GameState) -> Direction:
        current = game_state.direction
        candidates = [m for m in MOVES if not (current.is_moving and m == current.opposite())]

        valid_moves: List[Direction] = []
        for move in candidates:
            head = next_head(game_state.head, move)
            if not is_fatal(head, game_state.snake, game_state.tile_count):
                valid_moves.append(move)

        # If no valid moves, just return a random move (we'll die anyway)
        if not valid_moves:
            return self.rng.choice(candidates)

        return self.rng.choice(valid_moves)
