"""Test fixtures for hush-jwt tests.

All tests are pure — engines run against a controllable clock, so expiry
can be checked without sleeping.
"""

import pytest

from hush_jwt import JWTConfig, TokenEngine

TEST_SECRET = "test-secret-with-at-least-32-bytes-of-entropy"
START_TIME = 1_700_000_000


class FakeClock:
    """Callable clock returning a settable Unix time."""

    def __init__(self, now: float = START_TIME):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def config():
    return JWTConfig(secret=TEST_SECRET, ttl=900)


@pytest.fixture
def engine(config, clock):
    return TokenEngine(config, clock=clock)
