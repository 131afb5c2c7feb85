"""
Runtime configuration for the grid snake game.

Values come from the environment (optionally via a .env file) and fall
back to the classic defaults: a 20x20 board, 200 ms ticks, +10 per food
and a 20 ms speed-up every 50 points down to 50 ms.
"""

import logging
import os
import random
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

from gridsnake.domain.constants import (
    DEFAULT_TILE_COUNT,
    FOOD_REWARD,
    INITIAL_SPEED,
    MIN_SPEED,
    SPEED_MILESTONE,
    SPEED_STEP,
)
from gridsnake.engine.food_placer import FoodPlacer
from gridsnake.engine.score_speed import ScoreSpeedController
from gridsnake.engine.state_machine import GameStateMachine


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be an integer, got {raw!r}") from None


def _env_log_level(name: str, default: str) -> str:
    level = os.getenv(name, default).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Environment variable {name} must be a logging level name, got {level!r}")
    return level


@dataclass
class GameConfig:
    tile_count: int = DEFAULT_TILE_COUNT
    initial_speed: int = INITIAL_SPEED
    min_speed: int = MIN_SPEED
    speed_step: int = SPEED_STEP
    food_reward: int = FOOD_REWARD
    speed_milestone: int = SPEED_MILESTONE
    log_level: str = "INFO"
    seed: Optional[int] = None
    _seed_source: Optional[random.Random] = field(default=None, init=False, repr=False, compare=False)

    @classmethod
    def from_env(cls, load_env: bool = True) -> "GameConfig":
        if load_env:
            load_dotenv()
        return cls(
            tile_count=_env_int("SNAKE_TILE_COUNT", DEFAULT_TILE_COUNT),
            initial_speed=_env_int("SNAKE_INITIAL_SPEED_MS", INITIAL_SPEED),
            min_speed=_env_int("SNAKE_MIN_SPEED_MS", MIN_SPEED),
            speed_step=_env_int("SNAKE_SPEED_STEP_MS", SPEED_STEP),
            food_reward=_env_int("SNAKE_FOOD_REWARD", FOOD_REWARD),
            speed_milestone=_env_int("SNAKE_SPEED_MILESTONE", SPEED_MILESTONE),
            log_level=_env_log_level("SNAKE_LOG_LEVEL", "INFO"),
            seed=_env_int("SNAKE_SEED", None),
        )

    def rng(self) -> random.Random:
        """
        Return a fresh generator for one component.

        Every call draws its seed from a single source seeded with ``seed``,
        so components get independent streams that are still reproducible.
        """
        if self._seed_source is None:
            self._seed_source = random.Random(self.seed)
        return random.Random(self._seed_source.getrandbits(64))

    def build_machine(self) -> GameStateMachine:
        return GameStateMachine(
            tile_count=self.tile_count,
            initial_speed=self.initial_speed,
            food_placer=FoodPlacer(self.rng()),
            score_speed=ScoreSpeedController(
                reward=self.food_reward,
                milestone=self.speed_milestone,
                speed_step=self.speed_step,
                min_speed=self.min_speed,
            ),
        )
