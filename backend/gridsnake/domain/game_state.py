"""
GameState entity - a snapshot of the game at a point in time.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .types import Cell, Direction


@dataclass(frozen=True)
class GameState:
    """
    An immutable snapshot of a running session.

    Attributes:
        snake: cells from head (index 0) to tail
        food: the single food cell, never on the snake
        direction: the direction the next step will use
        score: points collected since the last reset
        speed: tick interval in milliseconds
        tile_count: the board is tile_count x tile_count cells
    """

    snake: Tuple[Cell, ...]
    food: Cell
    direction: Direction
    score: int
    speed: int
    tile_count: int

    @property
    def head(self) -> Cell:
        return self.snake[0]

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        * = food
        H = snake head
        o = snake body
        Row 0 is printed first, matching the y-down screen layout.
        """
        board = [['.' for _ in range(self.tile_count)] for _ in range(self.tile_count)]

        fx, fy = self.food
        board[fy][fx] = '*'

        for idx, (x, y) in enumerate(self.snake):
            board[y][x] = 'H' if idx == 0 else 'o'

        result = [f"{y:2d} {' '.join(row)}" for y, row in enumerate(board)]
        result.append("   " + " ".join(str(x % 10) for x in range(self.tile_count)))
        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "snake": [list(cell) for cell in self.snake],
            "food": list(self.food),
            "direction": list(self.direction),
            "score": self.score,
            "speed": self.speed,
            "tile_count": self.tile_count,
        }

    def __repr__(self):
        return (
            f"<GameState head={self.head}, length={len(self.snake)}, food={self.food}, "
            f"score={self.score}, speed={self.speed}>"
        )


@dataclass(frozen=True)
class StepResult:
    """
    Outcome of one transition of the state machine.

    ``speed_changed`` tells the tick driver to cancel its pending timer and
    re-arm with ``new_interval``.
    """

    event: str
    state: GameState
    speed_changed: bool = False
    new_interval: Optional[int] = None
    reason: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {"event": self.event, "state": self.state.to_dict()}
        if self.speed_changed:
            data["speed_changed"] = True
            data["new_interval"] = self.new_interval
        if self.reason:
            data["reason"] = self.reason
        return data
