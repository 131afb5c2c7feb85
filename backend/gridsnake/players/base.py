"""
Base player interface for the game engine.
"""

import random
from typing import Optional

from gridsnake.domain.game_state import GameState
from gridsnake.domain.types import Direction


class Player:
    """
    Base class/interface for automated direction sources.

    A player is consulted once per tick, before the step, and may steer
    the snake by returning a direction. Returning None keeps the current one.
    """

    name = "player"

    @classmethod
    def build(cls, rng: Optional[random.Random] = None, script: Optional[str] = None) -> "Player":
        """Construct a player from command-line options."""
        return cls()

    def get_move(self, game_state: GameState) -> Optional[Direction]:
        """
        Return the direction to request for the coming step.

        Args:
            game_state: Current state of the game

        Returns:
            A Direction, or None to leave the direction unchanged.
        """
        raise NotImplementedError
