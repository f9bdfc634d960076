"""
Shared fixtures: a controllable clock, a store wired to it and an API
client serving that store.
"""

import random
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from shortlinks.core.rate_limit import limiter
from shortlinks.main import create_app
from shortlinks.services.code_generator import CodeGenerator
from shortlinks.services.link_store import ShortLinkStore

START_TIME = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, start: datetime = START_TIME):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    return ShortLinkStore(
        generator=CodeGenerator(rng=random.Random(1234)),
        clock=clock,
    )


@pytest.fixture(autouse=True)
def reset_rate_limits():
    enabled = limiter.enabled
    limiter.reset()
    yield
    limiter.reset()
    limiter.enabled = enabled


@pytest.fixture
def app(store):
    return create_app(store=store)


@pytest.fixture
def client(app):
    return TestClient(app)
