from __future__ import annotations

import logging
import random
from typing import Callable

from . import logic
from .config import Settings
from .scheduler import TickScheduler
from .scores import MemoryBestScoreStore
from .state import LEFT, Intent, Snapshot, State, Status

logger = logging.getLogger(__name__)


class Engine:
    """
    Owns one game session and drives it tick by tick.

    The rules themselves are pure functions in `logic`; the engine keeps the
    current State, re-arms the tick timer when the speed changes, persists
    the best score and notifies the presentation layer.

    Callbacks:
        on_redraw(snapshot): after every successful tick and after start/restart
        on_game_over(snapshot): once per session, when it ends (lost or won)
    """

    def __init__(
        self,
        settings: Settings | None = None,
        scheduler=None,
        store=None,
        rng: random.Random | None = None,
        on_redraw: Callable[[Snapshot], None] | None = None,
        on_game_over: Callable[[Snapshot], None] | None = None,
    ):
        self.settings = settings or Settings()
        self.scheduler = scheduler if scheduler is not None else TickScheduler()
        self.store = store if store is not None else MemoryBestScoreStore()
        self.rng = rng or random.Random()
        self.on_redraw = on_redraw
        self.on_game_over = on_game_over

        self.best_score = self.store.load()
        self.state = State(
            grid_size=self.settings.grid_size,
            snake=logic.initial_snake(self.settings.grid_size),
            direction=LEFT,
            pending_direction=LEFT,
            food=None,
            score=0,
            speed=self.settings.initial_speed,
            status=Status.NOT_STARTED,
        )

    @property
    def status(self) -> Status:
        return self.state.status

    def snapshot(self) -> Snapshot:
        s = self.state
        return Snapshot(
            grid_size=s.grid_size,
            snake=s.snake,
            food=s.food,
            score=s.score,
            best_score=self.best_score,
            status=s.status,
            speed=s.speed,
        )

    def start(self) -> None:
        # Never two tick streams: stop the old timer before arming a new one.
        self.scheduler.cancel()
        self.state = logic.new_game(self.settings, self.rng)
        logger.info(f"Game started on a {self.settings.grid_size}x{self.settings.grid_size} grid")
        self._redraw()
        self.scheduler.arm(self.state.speed)

    def restart(self) -> None:
        logger.info(f"Restarting after {self.state.status.value} with score {self.state.score}")
        self.start()

    def tick(self) -> None:
        prev = self.state
        if prev.status is not Status.RUNNING:
            return

        self.state = logic.game_tick(prev, self.settings, self.rng)

        if self.state.score != prev.score:
            self._record_score(self.state.score)

        if self.state.status is Status.GAME_OVER:
            self._finish()
            return

        if self.state.status is Status.WON:
            self._redraw()
            self._finish()
            return

        if self.state.speed != prev.speed:
            logger.info(f"Speed up: {prev.speed} ms -> {self.state.speed} ms per tick")
            self.scheduler.arm(self.state.speed)

        self._redraw()

    def change_direction(self, intent) -> bool:
        """Queue a direction for the next tick. Returns whether it was accepted."""
        parsed = Intent.parse(intent)
        if parsed is None:
            logger.debug(f"Ignoring unknown intent {intent!r}")
            return False
        updated = logic.change_direction(self.state, parsed.value)
        if updated is self.state:
            return False
        self.state = updated
        return True

    def end(self, won: bool = False) -> None:
        self.scheduler.cancel()
        if self.state.status is not Status.RUNNING:
            return
        self.state = self.state._replace(status=Status.WON if won else Status.GAME_OVER)
        self._finish()

    def _finish(self) -> None:
        self.scheduler.cancel()
        self._record_score(self.state.score)
        logger.info(f"Game over ({self.state.status.value}): score {self.state.score}, best {self.best_score}")
        if self.on_game_over is not None:
            self.on_game_over(self.snapshot())

    def _record_score(self, score: int) -> None:
        if score > self.best_score:
            self.best_score = score
            self.store.save(score)

    def _redraw(self) -> None:
        if self.on_redraw is not None:
            self.on_redraw(self.snapshot())
