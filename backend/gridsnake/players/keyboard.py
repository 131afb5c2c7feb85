"""
Key bindings for human input.

Arrow keys and WASD follow the browser key names; the plain words match
the on-screen touch buttons.
"""

from typing import Dict, Optional

from gridsnake.domain.constants import UP, DOWN, LEFT, RIGHT
from gridsnake.domain.types import Direction

KEY_BINDINGS: Dict[str, Direction] = {
    "ArrowUp": UP,
    "w": UP,
    "up": UP,
    "ArrowDown": DOWN,
    "s": DOWN,
    "down": DOWN,
    "ArrowLeft": LEFT,
    "a": LEFT,
    "left": LEFT,
    "ArrowRight": RIGHT,
    "d": RIGHT,
    "right": RIGHT,
}

RESET_KEYS = frozenset({"r", "restart"})


def direction_for_key(key: str) -> Optional[Direction]:
    """Return the direction bound to ``key``, or None if it is unbound."""
    if key in KEY_BINDINGS:
        return KEY_BINDINGS[key]
    return KEY_BINDINGS.get(key.lower())


def is_reset_key(key: str) -> bool:
    return key.lower() in RESET_KEYS
