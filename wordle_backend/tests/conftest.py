"""
Pytest fixtures for the Wordle backend tests.
"""

from datetime import datetime, timedelta, timezone

import pytest

from .. import create_app
from ..config import TestingConfig
from ..services.game_service import GameService
from ..services.game_store import InMemoryGameStore
from ..services.word_source import WordSource

TEST_WORDS = {
    4: ["BOOK", "COOL", "GAME", "LAKE", "WORD"],
    5: ["ALLOY", "CRANE", "CRATE", "LOLLY", "SLATE", "TRACE", "PLANT", "GHOST", "SPEED", "ABIDE"],
    6: ["BRIDGE", "CASTLE", "PLANET", "SILVER"],
}


class FixedChoice:
    """Stand-in for random.Random that always picks a known target."""

    def __init__(self, target: str):
        self.target = target

    def choice(self, words):
        return self.target if self.target in words else words[0]


class FrozenClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start=None):
        self.now = start or datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self):
        return self.now

    def advance(self, seconds: int = 1):
        self.now = self.now + timedelta(seconds=seconds)
        return self.now


def make_words(target: str = "CRANE") -> WordSource:
    return WordSource(TEST_WORDS, rng=FixedChoice(target))


@pytest.fixture
def words() -> WordSource:
    """Word source whose 5-letter target is always CRANE."""
    return make_words("CRANE")


@pytest.fixture
def store() -> InMemoryGameStore:
    return InMemoryGameStore()


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock()


@pytest.fixture
def service(store, words, clock) -> GameService:
    return GameService(store, words, clock=clock)


@pytest.fixture
def app(store, words):
    return create_app(TestingConfig, store=store, words=words)


@pytest.fixture
def client(app):
    return app.test_client()
