from __future__ import annotations

import logging

import pygame

logger = logging.getLogger(__name__)

TICK = pygame.USEREVENT + 1


class TickScheduler:
    """Cancellable repeating timer that posts TICK events.

    pygame keeps one timer per event type, so re-arming replaces the old one.
    Cancelling also drops TICK events already queued at the old interval.
    Every arm/cancel bumps `generation` and each posted event carries the
    generation it was armed under, so ticks already pulled off the queue can
    be recognised as stale with is_current().
    """

    def __init__(self, event_type: int = TICK):
        self.event_type = event_type
        self.interval: int | None = None
        self.generation = 0

    @property
    def active(self) -> bool:
        return self.interval is not None

    def arm(self, interval_ms: int) -> None:
        self.cancel()
        self.generation += 1
        pygame.time.set_timer(pygame.event.Event(self.event_type, gen=self.generation), interval_ms)
        self.interval = interval_ms
        logger.debug(f"Tick timer armed at {interval_ms} ms (generation {self.generation})")

    def cancel(self) -> None:
        if self.interval is None:
            return
        self.generation += 1
        pygame.time.set_timer(self.event_type, 0)
        pygame.event.clear(self.event_type)
        self.interval = None

    def is_current(self, event: pygame.event.Event) -> bool:
        return self.active and getattr(event, "gen", None) == self.generation
