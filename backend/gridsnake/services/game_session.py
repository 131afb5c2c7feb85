"""
GameSession - wires input, the state machine, rendering and the tick driver.

The session holds the only reference to the state machine. Input arrives
through the command queue; each tick drains it, steps the machine, hands
the new snapshot to the renderer and re-arms the driver when the speed
changed.
"""

import logging
import threading
from typing import Callable, Optional

from gridsnake.domain.constants import EVENT_RESET
from gridsnake.domain.game_state import GameState, StepResult
from gridsnake.engine.state_machine import GameStateMachine
from gridsnake.players.base import Player
from gridsnake.players.keyboard import direction_for_key, is_reset_key

from .command_queue import CommandQueue, DirectionCommand, ResetCommand
from .tick_driver import TickDriver

logger = logging.getLogger(__name__)

Renderer = Callable[[GameState], None]


class GameSession:
    def __init__(
        self,
        machine: Optional[GameStateMachine] = None,
        driver: Optional[TickDriver] = None,
        renderer: Optional[Renderer] = None,
        player: Optional[Player] = None,
        commands: Optional[CommandQueue] = None,
    ):
        self.machine = machine or GameStateMachine()
        self.driver = driver or TickDriver()
        self.renderer = renderer
        self.player = player
        self.commands = commands or CommandQueue()
        self.last_result: Optional[StepResult] = None
        self.resets = 0
        self._tick_lock = threading.Lock()

    @property
    def state(self) -> GameState:
        return self.machine.state

    # ------------------------------------------------------------------
    # Input entry points (safe to call from any thread)
    # ------------------------------------------------------------------
    def set_direction(self, dx, dy) -> bool:
        return self.commands.put_direction(dx, dy)

    def press_key(self, key: str) -> bool:
        """Translate a key or touch-button name into a queued command."""
        if is_reset_key(key):
            self.commands.put_reset()
            return True
        direction = direction_for_key(key)
        if direction is None:
            logger.debug("Ignoring unbound key %r", key)
            return False
        return self.commands.put_direction(*direction)

    def request_reset(self) -> None:
        self.commands.put_reset()

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------
    def tick(self) -> Optional[StepResult]:
        """
        Run one game tick. Returns None when another tick is still in flight.
        """
        if not self._tick_lock.acquire(blocking=False):
            logger.warning("Tick skipped: previous tick still running")
            return None
        try:
            for command in self.commands.drain():
                if isinstance(command, ResetCommand):
                    self._handle(self.machine.reset())
                elif isinstance(command, DirectionCommand):
                    self.machine.set_direction(*command.direction)

            if self.player is not None:
                move = self.player.get_move(self.machine.state)
                if move is not None:
                    self.machine.set_direction(*move)

            result = self.machine.step()
            self._handle(result)

            if self.renderer is not None:
                self.renderer(result.state)
            return result
        finally:
            self._tick_lock.release()

    def _handle(self, result: StepResult) -> None:
        self.last_result = result
        if result.event == EVENT_RESET:
            self.resets += 1
        if result.speed_changed and self.driver.running:
            self.driver.reschedule(result.new_interval)

    def start(self) -> None:
        if self.renderer is not None:
            self.renderer(self.machine.state)
        self.driver.start(self.machine.speed, self.tick)

    def stop(self) -> None:
        self.driver.stop()

    def run(self, max_ticks: Optional[int] = None) -> None:
        """Start the driver if needed and block until it stops."""
        if not self.driver.running:
            self.start()
        self.driver.run(max_ticks=max_ticks)
