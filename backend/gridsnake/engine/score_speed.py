"""
Score and tick-interval progression.
"""

from dataclasses import dataclass

from gridsnake.domain.constants import FOOD_REWARD, MIN_SPEED, SPEED_MILESTONE, SPEED_STEP


@dataclass(frozen=True)
class ScoreUpdate:
    score: int
    speed: int
    speed_changed: bool


class ScoreSpeedController:
    """
    Turns food-eaten events into score and speed changes.

    Speed is a tick interval in milliseconds, so a smaller value is a faster
    game. Every time the post-increment score lands on a milestone the
    interval shrinks by ``speed_step``, never below ``min_speed``.
    """

    def __init__(
        self,
        reward: int = FOOD_REWARD,
        milestone: int = SPEED_MILESTONE,
        speed_step: int = SPEED_STEP,
        min_speed: int = MIN_SPEED,
    ):
        if reward <= 0 or milestone <= 0:
            raise ValueError("reward and milestone must be positive")
        if speed_step < 0 or min_speed <= 0:
            raise ValueError("speed_step must be >= 0 and min_speed positive")
        self.reward = reward
        self.milestone = milestone
        self.speed_step = speed_step
        self.min_speed = min_speed

    def next_speed(self, score: int, speed: int) -> int:
        if score % self.milestone == 0:
            return max(self.min_speed, speed - self.speed_step)
        return speed

    def on_food_eaten(self, score: int, speed: int) -> ScoreUpdate:
        new_score = score + self.reward
        new_speed = self.next_speed(new_score, speed)
        return ScoreUpdate(
            score=new_score,
            speed=new_speed,
            speed_changed=new_speed != speed,
        )
