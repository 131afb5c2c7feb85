"""
Player variants selectable from the command line.

Each entry names the module holding the Player subclass so the class is
only imported when that variant is actually used.
"""

import importlib
from typing import Dict, List, NamedTuple, Optional, Type

from .base import Player


class PlayerVariant(NamedTuple):
    module: str
    class_name: str
    description: str


PLAYER_VARIANTS: Dict[str, PlayerVariant] = {
    "random": PlayerVariant(
        ".random_player", "RandomPlayer",
        "Autopilot picking random safe, non-reversing moves",
    ),
    "scripted": PlayerVariant(
        ".scripted_player", "ScriptedPlayer",
        "Replays --script key presses, one per tick",
    ),
}

DEFAULT_VARIANT = "random"
AVAILABLE_VARIANTS = list(PLAYER_VARIANTS)


def get_player_class(variant_key: Optional[str] = None) -> Type[Player]:
    """
    Resolve a variant key to its Player subclass. Blank keys mean 'random'.

    Raises:
        ValueError: If variant_key is not registered.
    """
    key = (variant_key or "").strip() or DEFAULT_VARIANT
    variant = PLAYER_VARIANTS.get(key)
    if variant is None:
        raise ValueError(
            f"Unknown player variant '{key}'. Available variants: {', '.join(AVAILABLE_VARIANTS)}"
        )
    module = importlib.import_module(variant.module, __package__)
    return getattr(module, variant.class_name)


def list_variants() -> List[Dict[str, str]]:
    return [{"key": key, "description": v.description} for key, v in PLAYER_VARIANTS.items()]
