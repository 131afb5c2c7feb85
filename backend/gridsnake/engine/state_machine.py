"""
GameStateMachine - advances the session one tick at a time.

Each step:
  1) compute the next head from the current direction
  2) on a wall or body hit, reset the whole session
  3) otherwise push the new head
  4) on food, score it, maybe speed up, and place fresh food
  5) otherwise pop the tail so the snake just slides forward
"""

import logging
import threading
from typing import Iterable, Optional, Tuple

from gridsnake.domain.constants import (
    DEFAULT_TILE_COUNT,
    EVENT_ATE,
    EVENT_IDLE,
    EVENT_MOVED,
    EVENT_RESET,
    INITIAL_SNAKE,
    INITIAL_SPEED,
    REASON_BOARD_FULL,
    REASON_MANUAL,
    REASON_START,
    STILL,
)
from gridsnake.domain.errors import InvalidDirection, NoSpaceAvailable
from gridsnake.domain.game_state import GameState, StepResult
from gridsnake.domain.snake import Snake
from gridsnake.domain.types import Direction

from .collision import check_food_collision, collision_reason
from .food_placer import FoodPlacer
from .motion import next_head, parse_direction
from .score_speed import ScoreSpeedController

logger = logging.getLogger(__name__)


class GameStateMachine:
    """
    Owns the mutable session (snake, food, direction, score, speed) and
    hands out immutable GameState snapshots.

    All access goes through an internal lock so a direction change coming
    from another thread is seen either entirely before or entirely after a
    step, never half-applied.
    """

    def __init__(
        self,
        tile_count: int = DEFAULT_TILE_COUNT,
        initial_snake: Iterable[Tuple[int, int]] = INITIAL_SNAKE,
        initial_speed: int = INITIAL_SPEED,
        food_placer: Optional[FoodPlacer] = None,
        score_speed: Optional[ScoreSpeedController] = None,
    ):
        self.initial_snake = tuple(initial_snake)
        self._validate_layout(tile_count, self.initial_snake, initial_speed)

        self.tile_count = tile_count
        self.initial_speed = initial_speed
        self.food_placer = food_placer or FoodPlacer()
        self.score_speed = score_speed or ScoreSpeedController()

        self._lock = threading.RLock()
        self._snake = Snake(self.initial_snake)
        self._direction = STILL
        self._heading = STILL
        self._score = 0
        self._speed = initial_speed
        self._food = None

        self._reset(REASON_START, previous_speed=initial_speed)

    @staticmethod
    def _validate_layout(tile_count: int, snake: Tuple[Tuple[int, int], ...], speed: int) -> None:
        if tile_count <= 0:
            raise ValueError(f"tile_count must be positive, got {tile_count}")
        if speed <= 0:
            raise ValueError(f"initial speed must be positive, got {speed}")
        for x, y in snake:
            if not (0 <= x < tile_count and 0 <= y < tile_count):
                raise ValueError(
                    f"Initial snake cell {(x, y)} is outside a {tile_count}x{tile_count} board."
                )
        if len(snake) >= tile_count * tile_count:
            raise ValueError("The initial snake leaves no room for food.")

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    @property
    def state(self) -> GameState:
        with self._lock:
            return GameState(
                snake=self._snake.cells(),
                food=self._food,
                direction=self._direction,
                score=self._score,
                speed=self._speed,
                tile_count=self.tile_count,
            )

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def speed(self) -> int:
        return self._speed

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------
    def set_direction(self, dx, dy) -> bool:
        """
        Commit a new direction unless it is illegal or reverses the snake.

        Returns True when the direction was accepted.
        """
        try:
            direction = parse_direction((dx, dy))
        except InvalidDirection as exc:
            logger.debug("Rejected direction input: %s", exc)
            return False

        with self._lock:
            if direction.is_moving and direction.opposite() in (self._direction, self._heading):
                logger.debug(
                    "Rejected reversal to %s (current %s, heading %s)",
                    direction, self._direction, self._heading,
                )
                return False
            self._direction = direction
            return True

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def reset(self) -> StepResult:
        """Restart the session, as a restart button would."""
        with self._lock:
            return self._reset(REASON_MANUAL, previous_speed=self._speed)

    def step(self) -> StepResult:
        with self._lock:
            direction = self._direction
            previous_speed = self._speed

            # A stationary snake would "move" onto its own head; wait for input instead
            if not direction.is_moving:
                return StepResult(event=EVENT_IDLE, state=self.state)

            head = next_head(self._snake.head, direction)
            reason = collision_reason(head, self._snake.positions, self.tile_count)
            if reason is not None:
                logger.info(
                    "Snake hit %s at %s with score %s; resetting.",
                    reason, head, self._score,
                )
                return self._reset(reason, previous_speed=previous_speed)

            self._snake.push_head(head)
            self._heading = direction

            if check_food_collision(head, self._food):
                update = self.score_speed.on_food_eaten(self._score, self._speed)
                self._score = update.score
                self._speed = update.speed
                if update.speed_changed:
                    logger.info(
                        "Score %s reached; tick interval %s -> %s ms",
                        update.score, previous_speed, update.speed,
                    )

                try:
                    self._food = self.food_placer.place(self._snake.positions, self.tile_count)
                except NoSpaceAvailable as exc:
                    logger.info("%s; resetting.", exc)
                    return self._reset(REASON_BOARD_FULL, previous_speed=previous_speed)

                return StepResult(
                    event=EVENT_ATE,
                    state=self.state,
                    speed_changed=update.speed_changed,
                    new_interval=update.speed if update.speed_changed else None,
                )

            self._snake.pop_tail()
            logger.debug("Snake moved to %s", head)
            return StepResult(event=EVENT_MOVED, state=self.state)

    def _reset(self, reason: str, previous_speed: int) -> StepResult:
        self._snake = Snake(self.initial_snake)
        self._direction = STILL
        self._heading = STILL
        self._score = 0
        self._speed = self.initial_speed
        self._food = self.food_placer.place(self._snake.positions, self.tile_count)

        speed_changed = self._speed != previous_speed
        if reason != REASON_START:
            logger.info("Session reset (%s)", reason)
        return StepResult(
            event=EVENT_RESET,
            state=self.state,
            speed_changed=speed_changed,
            new_interval=self._speed if speed_changed else None,
            reason=reason,
        )
