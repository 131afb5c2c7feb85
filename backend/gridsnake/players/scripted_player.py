"""
Scripted player - replays a fixed sequence of key presses, one per tick.
"""

from typing import Iterable, Optional

from gridsnake.domain.errors import InvalidDirection
from gridsnake.domain.game_state import GameState
from gridsnake.domain.types import Direction
from .base import Player
from .keyboard import direction_for_key


class ScriptedPlayer(Player):
    """
    Plays back ``keys`` in order. A ``None`` or ``"-"`` entry leaves the
    direction alone for that tick; once the script runs out the player
    stops steering.
    """

    name = "scripted"

    def __init__(self, keys: Iterable[Optional[str]]):
        self.moves = []
        for key in keys:
            if key is None or key == "-":
                self.moves.append(None)
                continue
            direction = direction_for_key(key)
            if direction is None:
                raise InvalidDirection(key)
            self.moves.append(direction)
        self._cursor = 0

    @classmethod
    def build(cls, rng=None, script: Optional[str] = None) -> "ScriptedPlayer":
        if not script:
            raise ValueError("The scripted player needs --script (e.g. 'dddsss').")
        return cls.from_string(script)

    @classmethod
    def from_string(cls, script: str) -> "ScriptedPlayer":
        """Build from a compact script such as ``"dd-ssa"`` (WASD letters and '-')."""
        return cls(list(script.strip()))

    @property
    def finished(self) -> bool:
        return self._cursor >= len(self.moves)

    def get_move(self, game_state: GameState) -> Optional[Direction]:
        if self.finished:
            return None
        move = self.moves[self._cursor]
        self._cursor += 1
        return move
