"""
Exceptions raised by the game engine.
"""


class SnakeGameError(Exception):
    """Base class for game engine errors."""


class NoSpaceAvailable(SnakeGameError):
    """Raised when every cell of the grid is occupied and no food can be placed."""

    def __init__(self, tile_count: int, occupied: int):
        self.tile_count = tile_count
        self.occupied = occupied
        super().__init__(
            f"No free cell left on a {tile_count}x{tile_count} grid "
            f"({occupied} cells occupied)"
        )


class InvalidDirection(SnakeGameError, ValueError):
    """Raised when a direction is not one of the legal unit vectors."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid direction: {value!r}")
