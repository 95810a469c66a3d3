from __future__ import annotations

import pygame

from . import config
from .state import Intent

KEY_TO_INTENT = {
    pygame.K_UP: Intent.UP,
    pygame.K_w: Intent.UP,
    pygame.K_DOWN: Intent.DOWN,
    pygame.K_s: Intent.DOWN,
    pygame.K_LEFT: Intent.LEFT,
    pygame.K_a: Intent.LEFT,
    pygame.K_RIGHT: Intent.RIGHT,
    pygame.K_d: Intent.RIGHT,
}


def intent_for_key(key: int) -> Intent | None:
    return KEY_TO_INTENT.get(key)


def classify_swipe(dx: float, dy: float, min_distance: float = config.SWIPE_MIN_DISTANCE) -> Intent | None:
    """Pick the dominant axis of a drag; short drags are taps, not swipes."""
    if abs(dx) > abs(dy):
        if abs(dx) > min_distance:
            return Intent.RIGHT if dx > 0 else Intent.LEFT
    elif abs(dy) > min_distance:
        return Intent.DOWN if dy > 0 else Intent.UP
    return None


def intent_for_click(pos: tuple[int, int], buttons: dict[Intent, pygame.Rect]) -> Intent | None:
    for intent, rect in buttons.items():
        if rect.collidepoint(pos):
            return intent
    return None


class SwipeTracker:
    def __init__(self, min_distance: float = config.SWIPE_MIN_DISTANCE):
        self.min_distance = min_distance
        self.origin: tuple[float, float] | None = None

    def begin(self, pos: tuple[float, float]) -> None:
        self.origin = pos

    def finish(self, pos: tuple[float, float]) -> Intent | None:
        if self.origin is None:
            return None
        ox, oy = self.origin
        self.origin = None
        return classify_swipe(pos[0] - ox, pos[1] - oy, self.min_distance)


class Controls:
    """
    Turns raw pygame events into intents and forwards them to the engine.

    Keyboard arrows/WASD, clicks on the on-screen buttons, mouse drags and
    finger swipes all end up in engine.change_direction(). Mouse events that
    SDL synthesizes from touches are skipped so a swipe is not counted twice.
    """

    def __init__(self, engine, buttons: dict[Intent, pygame.Rect], window_size: tuple[int, int],
                 min_distance: float = config.SWIPE_MIN_DISTANCE):
        self.engine = engine
        self.buttons = buttons
        self.window_size = window_size
        self.mouse_swipe = SwipeTracker(min_distance)
        self.finger_swipe = SwipeTracker(min_distance)

    def resize(self, window_size: tuple[int, int], buttons: dict[Intent, pygame.Rect]) -> None:
        self.window_size = window_size
        self.buttons = buttons

    def reset(self) -> None:
        self.mouse_swipe.origin = None
        self.finger_swipe.origin = None

    def translate(self, event: pygame.event.Event) -> Intent | None:
        if event.type == pygame.KEYDOWN:
            return intent_for_key(event.key)

        if event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            if getattr(event, "touch", False) or event.button != 1:
                return None
            if event.type == pygame.MOUSEBUTTONDOWN:
                intent = intent_for_click(event.pos, self.buttons)
                if intent is None:
                    self.mouse_swipe.begin(event.pos)
                return intent
            return self.mouse_swipe.finish(event.pos)

        if event.type in (pygame.FINGERDOWN, pygame.FINGERUP):
            w, h = self.window_size
            pos = (round(event.x * w), round(event.y * h))
            if event.type == pygame.FINGERDOWN:
                intent = intent_for_click(pos, self.buttons)
                if intent is None:
                    self.finger_swipe.begin(pos)
                return intent
            return self.finger_swipe.finish(pos)

        return None

    def handle(self, event: pygame.event.Event) -> Intent | None:
        intent = self.translate(event)
        if intent is not None:
            self.engine.change_direction(intent)
        return intent
