"""
Game rules for the grid snake game.

Each rule is a small component that can be tested on its own; the
GameStateMachine wires them together once per tick.
"""

from .motion import next_head, parse_direction
from .collision import is_fatal, check_food_collision, collision_reason
from .food_placer import FoodPlacer
from .score_speed import ScoreSpeedController, ScoreUpdate
from .state_machine import GameStateMachine

__all__ = [
    'next_head',
    'parse_direction',
    'is_fatal',
    'check_food_collision',
    'collision_reason',
    'FoodPlacer',
    'ScoreSpeedController',
    'ScoreUpdate',
    'GameStateMachine',
]
