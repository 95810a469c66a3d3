from __future__ import annotations

import logging
import random
from pathlib import Path

import pygame

from . import config
from .config import Settings
from .controls import Controls
from .engine import Engine
from .render import compute_layout, draw_state
from .scheduler import TICK, TickScheduler
from .scores import BestScoreStore
from .state import Status

logger = logging.getLogger(__name__)

START_KEYS = (pygame.K_SPACE, pygame.K_RETURN, pygame.K_r)


def is_press(event: pygame.event.Event) -> bool:
    if event.type == pygame.MOUSEBUTTONDOWN:
        return event.button == 1 and not getattr(event, "touch", False)
    return event.type == pygame.FINGERDOWN


def is_start_request(event: pygame.event.Event, pressed_while_idle: bool = False) -> bool:
    # A click or tap only counts when its press also landed on the idle screen,
    # so a d-pad press or swipe begun during play cannot restart on release.
    if event.type == pygame.KEYDOWN:
        return event.key in START_KEYS
    if event.type == pygame.MOUSEBUTTONUP:
        return pressed_while_idle and event.button == 1 and not getattr(event, "touch", False)
    if event.type == pygame.FINGERUP:
        return pressed_while_idle
    return False


class Game:
    """pygame window around one Engine: event pump, tick filtering and drawing."""

    def __init__(
        self,
        settings: Settings | None = None,
        window_size: tuple[int, int] = (config.WIDTH, config.HEIGHT),
        best_score_file: Path = config.BEST_SCORE_FILE,
        seed: int | None = None,
    ):
        pygame.init()
        self.screen = pygame.display.set_mode(window_size, pygame.RESIZABLE)
        pygame.display.set_caption("Neon Snake")
        self.font = pygame.font.Font(None, 30)
        self.clock = pygame.time.Clock()

        self.needs_redraw = True
        self.running = True
        self.pressed_while_idle = False

        self.scheduler = TickScheduler(TICK)
        self.engine = Engine(
            settings=settings,
            scheduler=self.scheduler,
            store=BestScoreStore(best_score_file),
            rng=random.Random(seed),
            on_redraw=self.request_redraw,
            on_game_over=self.request_redraw,
        )
        logger.info(f"Best score {self.engine.best_score} loaded from {best_score_file}")

        self.layout = compute_layout(*self.screen.get_size())
        self.controls = Controls(self.engine, self.layout.buttons, self.screen.get_size())

    def request_redraw(self, _snapshot=None) -> None:
        self.needs_redraw = True

    def process(self, events) -> None:
        for event in events:
            self.handle(event)
            if not self.running:
                break

    def handle(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN and event.key in (pygame.K_ESCAPE, pygame.K_q):
            self.running = False
        elif event.type == TICK:
            # Ticks from a timer that has since been re-armed or cancelled are dropped.
            if self.scheduler.is_current(event):
                self.engine.tick()
        elif event.type == pygame.VIDEORESIZE:
            self.layout = compute_layout(event.w, event.h)
            self.controls.resize((event.w, event.h), self.layout.buttons)
            self.needs_redraw = True
        elif event.type == pygame.WINDOWEXPOSED:
            self.needs_redraw = True
        elif self.engine.status is not Status.RUNNING:
            self.handle_idle(event)
        else:
            self.controls.handle(event)

    def handle_idle(self, event: pygame.event.Event) -> None:
        if is_press(event):
            self.pressed_while_idle = True
            return
        if is_start_request(event, self.pressed_while_idle):
            self.pressed_while_idle = False
            self.controls.reset()
            if self.engine.status is Status.NOT_STARTED:
                self.engine.start()
            else:
                self.engine.restart()
        elif event.type in (pygame.MOUSEBUTTONUP, pygame.FINGERUP):
            # Release of a press that began during play.
            self.pressed_while_idle = False
            self.controls.reset()

    def draw(self) -> None:
        # The food pulse animates, so a running game redraws every frame.
        if self.needs_redraw or self.engine.status is Status.RUNNING:
            draw_state(self.screen, self.layout, self.font, self.engine.snapshot(), pygame.time.get_ticks())
            self.needs_redraw = False

    def run(self) -> int:
        while self.running:
            self.process(pygame.event.get())
            self.draw()
            self.clock.tick(config.FPS)

        self.scheduler.cancel()
        pygame.quit()
        print("Final score:", self.engine.state.score, "Best:", self.engine.best_score)
        return 0


def main(
    settings: Settings | None = None,
    window_size: tuple[int, int] = (config.WIDTH, config.HEIGHT),
    best_score_file: Path = config.BEST_SCORE_FILE,
    seed: int | None = None,
) -> int:
    return Game(settings, window_size, best_score_file, seed).run()
