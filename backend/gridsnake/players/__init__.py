"""
Player implementations for the grid snake game.

This module contains the direction sources that can steer the snake:
key bindings for human input plus automated players for headless runs.
"""

from .base import Player
from .keyboard import KEY_BINDINGS, direction_for_key, is_reset_key
from .random_player import RandomPlayer
from .scripted_player import ScriptedPlayer
from .variant_registry import get_player_class, list_variants, AVAILABLE_VARIANTS

__all__ = [
    'Player',
    'KEY_BINDINGS',
    'direction_for_key',
    'is_reset_key',
    'RandomPlayer',
    'ScriptedPlayer',
    'get_player_class',
    'list_variants',
    'AVAILABLE_VARIANTS',
]
