"""
Domain entities for the grid snake game engine.

This module contains the core game entities that are independent of
rendering, input devices and timing.
"""

from .types import Cell, Direction
from .constants import (
    STILL, UP, DOWN, LEFT, RIGHT, VALID_DIRECTIONS,
    DEFAULT_TILE_COUNT, INITIAL_SNAKE, INITIAL_SPEED,
)
from .errors import SnakeGameError, NoSpaceAvailable, InvalidDirection
from .snake import Snake
from .game_state import GameState, StepResult

__all__ = [
    'Cell', 'Direction',
    'STILL', 'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_DIRECTIONS',
    'DEFAULT_TILE_COUNT', 'INITIAL_SNAKE', 'INITIAL_SPEED',
    'SnakeGameError', 'NoSpaceAvailable', 'InvalidDirection',
    'Snake',
    'GameState',
    'StepResult',
]
