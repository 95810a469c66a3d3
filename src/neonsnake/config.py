from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

GRID_SIZE = 20
INITIAL_SPEED = 250  # ms per tick
SPEED_STEP = 10
MIN_SPEED = 100
FOOD_SCORE = 10
MIN_GRID_SIZE = 5

SWIPE_MIN_DISTANCE = 30

WIDTH, HEIGHT = 480, 640
CONTROLS_HEIGHT = 160
BUTTON_SIZE = 44
BUTTON_GAP = 6
FPS = 60

BEST_SCORE_FILE = Path.home() / ".neonsnake_best_score"

# Colors
BACKGROUND = (10, 0, 21)
GRID_LINE = (40, 12, 64)
SNAKE = (0, 240, 255)
SNAKE_HEAD = (150, 250, 255)
FOOD = (255, 0, 255)
FOOD_CORE = (255, 255, 255)
GLOW_ALPHA = 60
PULSE_ALPHA = 90
TEXT = (240, 240, 240)
OVERLAY = (10, 0, 21, 200)
BUTTON = (60, 20, 100)
BUTTON_LABEL = (200, 160, 255)


@dataclass(frozen=True)
class Settings:
    """Rule constants for one engine."""

    grid_size: int = GRID_SIZE
    initial_speed: int = INITIAL_SPEED
    speed_step: int = SPEED_STEP
    min_speed: int = MIN_SPEED
    food_score: int = FOOD_SCORE

    def __post_init__(self) -> None:
        if self.grid_size < MIN_GRID_SIZE:
            raise ValueError(f"grid_size must be at least {MIN_GRID_SIZE}, got {self.grid_size}")
        if self.min_speed <= 0 or self.initial_speed <= 0:
            raise ValueError("tick intervals must be positive")
        if self.min_speed > self.initial_speed:
            raise ValueError(
                f"min_speed ({self.min_speed}) cannot exceed initial_speed ({self.initial_speed})"
            )
        if self.speed_step < 0:
            raise ValueError(f"speed_step must be non-negative, got {self.speed_step}")
        if self.food_score <= 0:
            raise ValueError(f"food_score must be positive, got {self.food_score}")
