import random

import pytest

from neonsnake.config import Settings
from neonsnake.engine import Engine
from neonsnake.scores import MemoryBestScoreStore


class FakeScheduler:
    """Records arm/cancel calls instead of talking to pygame."""

    def __init__(self):
        self.interval = None
        self.calls = []

    @property
    def active(self):
        return self.interval is not None

    def arm(self, interval_ms):
        self.cancel()
        self.calls.append(("arm", interval_ms))
        self.interval = interval_ms

    def cancel(self):
        if self.interval is None:
            return
        self.calls.append(("cancel",))
        self.interval = None

    @property
    def intervals(self):
        return [c[1] for c in self.calls if c[0] == "arm"]


class RecordingStore(MemoryBestScoreStore):
    """In-memory best-score store that remembers every save."""

    def __init__(self, value=0):
        super().__init__(value)
        self.saves = []

    def save(self, score):
        super().save(score)
        self.saves.append(score)


class Recorder:
    def __init__(self):
        self.snapshots = []

    def __call__(self, snapshot):
        self.snapshots.append(snapshot)

    @property
    def count(self):
        return len(self.snapshots)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def store():
    return RecordingStore()


@pytest.fixture
def make_store():
    return RecordingStore


@pytest.fixture
def redraws():
    return Recorder()


@pytest.fixture
def game_overs():
    return Recorder()


@pytest.fixture
def make_engine(scheduler, store, rng, redraws, game_overs):
    def factory(**kwargs):
        params = dict(
            settings=Settings(),
            scheduler=scheduler,
            store=store,
            rng=rng,
            on_redraw=redraws,
            on_game_over=game_overs,
        )
        params.update(kwargs)
        return Engine(**params)

    return factory


@pytest.fixture
def engine(make_engine):
    return make_engine()
