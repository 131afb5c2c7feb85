"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, Tuple

from .types import Cell


class Snake:
    """
    Represents the player's snake on the board.

    Attributes:
        positions: deque of Cell from head at index 0 to tail at the end
    """

    def __init__(self, positions: Iterable[Tuple[int, int]]):
        self.positions = deque(Cell(x, y) for x, y in positions)
        if not self.positions:
            raise ValueError("A snake needs at least one segment.")
        if len(set(self.positions)) != len(self.positions):
            raise ValueError(f"Snake segments must be distinct: {list(self.positions)}")

    @property
    def head(self) -> Cell:
        """Return the head position (first element)."""
        return self.positions[0]

    def push_head(self, cell: Cell) -> None:
        self.positions.appendleft(cell)

    def pop_tail(self) -> Cell:
        return self.positions.pop()

    def cells(self) -> Tuple[Cell, ...]:
        return tuple(self.positions)

    def __contains__(self, cell) -> bool:
        return cell in self.positions

    def __len__(self) -> int:
        return len(self.positions)

    def __repr__(self):
        return f"<Snake head={self.head} length={len(self)}>"
