from __future__ import annotations

import enum
from collections import namedtuple


class Status(enum.Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    GAME_OVER = "game_over"
    WON = "won"


State = namedtuple(
    "State",
    ["grid_size", "snake", "direction", "pending_direction", "food", "score", "speed", "status"],
)
# grid_size: int, side of the square grid
# snake: tuple[(x, y)], head is first element.
# direction / pending_direction: (dx, dy)
# food: (x, y), or None once the grid is full
# score: int
# speed: int, tick interval in ms
# status: Status

# Read-only view handed to the renderer.
Snapshot = namedtuple(
    "Snapshot",
    ["grid_size", "snake", "food", "score", "best_score", "status", "speed"],
)

UP = (0, -1)
DOWN = (0, 1)
LEFT = (-1, 0)
RIGHT = (1, 0)


class Intent(enum.Enum):
    """Normalized direction request from any input source."""

    UP = UP
    DOWN = DOWN
    LEFT = LEFT
    RIGHT = RIGHT

    @classmethod
    def parse(cls, value) -> Intent | None:
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.__members__.get(value.strip().upper())
        return None


def add_vectors(a: tuple[int, int], b: tuple[int, int]) -> tuple[int, int]:
    return (a[0] + b[0], a[1] + b[1])


def is_reversal(current: tuple[int, int], requested: tuple[int, int]) -> bool:
    return add_vectors(current, requested) == (0, 0)


def in_bounds(pos: tuple[int, int], grid_size: int) -> bool:
    x, y = pos
    return 0 <= x < grid_size and 0 <= y < grid_size


class Functor:
    """Tiny helper for chaining state transforms."""

    def __init__(self, value):
        self.value = value

    def map(self, func):
        return Functor(func(self.value))

    def get(self):
        return self.value
