"""
Single-consumer command queue between input handlers and the game loop.

Key presses and restart clicks may arrive from any thread; they are
queued here and drained exactly once per tick by the session.
"""

import logging
import queue
from dataclasses import dataclass
from typing import List, Union

from gridsnake.domain.errors import InvalidDirection
from gridsnake.domain.types import Direction
from gridsnake.engine.motion import parse_direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectionCommand:
    direction: Direction


@dataclass(frozen=True)
class ResetCommand:
    pass


Command = Union[DirectionCommand, ResetCommand]


class CommandQueue:
    """Thread-safe FIFO of pending commands."""

    def __init__(self):
        self._queue: "queue.SimpleQueue[Command]" = queue.SimpleQueue()

    def put_direction(self, dx, dy) -> bool:
        """
        Queue a direction change. Illegal vectors are dropped here so they
        never reach the engine.
        """
        try:
            direction = parse_direction((dx, dy))
        except InvalidDirection as exc:
            logger.debug("Dropped direction input: %s", exc)
            return False
        self._queue.put(DirectionCommand(direction))
        return True

    def put_reset(self) -> None:
        self._queue.put(ResetCommand())

    def drain(self) -> List[Command]:
        """Remove and return every queued command in arrival order."""
        commands: List[Command] = []
        while True:
            try:
                commands.append(self._queue.get_nowait())
            except queue.Empty:
                return commands
