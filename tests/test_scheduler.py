"""
Tests for the pygame-backed tick timer. pygame's timer and queue are patched out.
"""

import pygame
import pytest

from neonsnake.scheduler import TICK, TickScheduler


def _record_timer(calls):
    def set_timer(event, ms):
        if isinstance(event, pygame.event.EventType):
            calls.append(("set_timer", event.type, event.gen, ms))
        else:
            calls.append(("set_timer", event, ms))

    return set_timer


@pytest.fixture
def pygame_calls(monkeypatch):
    calls = []
    monkeypatch.setattr(pygame.time, "set_timer", _record_timer(calls))
    monkeypatch.setattr(pygame.event, "clear", lambda event=None: calls.append(("clear", event)))
    return calls


class TestTickScheduler:
    """Tests for arming and cancelling the timer."""

    def test_arm(self, pygame_calls):
        """Arming an idle scheduler sets one timer tagged with its generation."""
        scheduler = TickScheduler()
        scheduler.arm(250)
        assert pygame_calls == [("set_timer", TICK, 1, 250)]
        assert scheduler.active
        assert scheduler.interval == 250

    def test_rearm_cancels_and_flushes_first(self, pygame_calls):
        """Re-arming stops the old timer and drops its queued ticks before the new one starts."""
        scheduler = TickScheduler()
        scheduler.arm(250)
        scheduler.arm(240)
        assert pygame_calls == [
            ("set_timer", TICK, 1, 250),
            ("set_timer", TICK, 0),
            ("clear", TICK),
            ("set_timer", TICK, 3, 240),
        ]
        assert scheduler.interval == 240

    def test_cancel(self, pygame_calls):
        """Cancelling disables the timer and flushes pending ticks."""
        scheduler = TickScheduler()
        scheduler.arm(100)
        scheduler.cancel()
        assert pygame_calls[-2:] == [("set_timer", TICK, 0), ("clear", TICK)]
        assert not scheduler.active

    def test_cancel_when_idle_is_noop(self, pygame_calls):
        """Nothing is sent to pygame when no timer is live."""
        TickScheduler().cancel()
        assert pygame_calls == []

    def test_custom_event_type(self, pygame_calls):
        """A different user event can be used."""
        scheduler = TickScheduler(pygame.USEREVENT + 5)
        scheduler.arm(10)
        assert pygame_calls == [("set_timer", pygame.USEREVENT + 5, 1, 10)]


class TestIsCurrent:
    """Tests for recognising ticks from an older timer."""

    def test_tick_from_live_timer(self, pygame_calls):
        """A tick tagged with the live generation is current."""
        scheduler = TickScheduler()
        scheduler.arm(250)
        assert scheduler.is_current(pygame.event.Event(TICK, gen=scheduler.generation))

    def test_tick_from_replaced_timer(self, pygame_calls):
        """Ticks armed before a re-arm are stale."""
        scheduler = TickScheduler()
        scheduler.arm(250)
        old = pygame.event.Event(TICK, gen=scheduler.generation)
        scheduler.arm(240)
        assert not scheduler.is_current(old)

    def test_tick_after_cancel(self, pygame_calls):
        """Nothing is current once the timer is cancelled."""
        scheduler = TickScheduler()
        scheduler.arm(250)
        gen = scheduler.generation
        scheduler.cancel()
        assert not scheduler.is_current(pygame.event.Event(TICK, gen=gen))

    def test_untagged_tick(self, pygame_calls):
        """A TICK without a generation is never current."""
        scheduler = TickScheduler()
        scheduler.arm(250)
        assert not scheduler.is_current(pygame.event.Event(TICK))
