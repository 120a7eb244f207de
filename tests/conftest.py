"""Shared fixtures for the test suite."""

from __future__ import annotations

import random
from datetime import datetime, timedelta, timezone

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from cardkernel.engine.engine import CardEngine
from cardkernel.engine.providers import QueueMilestones, StaticShield, StaticStreak, StaticUsage
from cardkernel.engine.router import get_engine
from cardkernel.engine.store import MemoryStore
from cardkernel.main import app


# ---------------------------------------------------------------------------
# Fake clock (no wall time in tests)
# ---------------------------------------------------------------------------

class FakeClock:
    """Settable clock. 2026-02-11 is a Wednesday."""

    def __init__(self, start: datetime | None = None):
        self._now = start or datetime(2026, 2, 11, 10, 0, tzinfo=timezone.utc)

    def now(self) -> datetime:
        return self._now

    def set(self, moment: datetime) -> None:
        self._now = moment

    def at(self, hour: int, minute: int = 0) -> None:
        self._now = self._now.replace(hour=hour, minute=minute, second=0, microsecond=0)

    def advance(self, seconds: float = 0.0, days: int = 0) -> None:
        self._now = self._now + timedelta(seconds=seconds, days=days)


class DroppedConnectionStore:
    """Non-SQL backend whose client raises its own error types."""

    def get(self, key):
        raise ConnectionError("connection reset")

    def set(self, key, value):
        raise RuntimeError("connection reset")


class FailingStore:
    """Reads nothing, refuses every write."""

    def __init__(self):
        self.attempts = 0

    def get(self, key):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    def set(self, key, value):
        self.attempts += 1
        raise SQLAlchemyError("disk full")


# ---------------------------------------------------------------------------
# Fixtures — every provider starts "inactive"
# ---------------------------------------------------------------------------

@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def streak():
    return StaticStreak()


@pytest.fixture()
def shield():
    return StaticShield()


@pytest.fixture()
def milestones():
    return QueueMilestones()


@pytest.fixture()
def usage():
    return StaticUsage()


@pytest.fixture()
def store():
    return MemoryStore()


@pytest.fixture()
def failing_store():
    return FailingStore()


@pytest.fixture()
def dropped_connection_store():
    return DroppedConnectionStore()


@pytest.fixture()
def make_engine(clock, streak, shield, milestones, usage, store):
    """Factory so tests can pick options (or a different store) per engine."""

    def _make(**overrides) -> CardEngine:
        kwargs = dict(
            streak=streak,
            shield=shield,
            milestones=milestones,
            usage=usage,
            store=store,
            clock=clock,
            rng=random.Random(1234),
        )
        kwargs.update(overrides)
        return CardEngine(**kwargs)

    return _make


@pytest.fixture()
def engine(make_engine):
    return make_engine()


@pytest.fixture()
def override_engine(engine):
    """Override the router dependency so no real database is touched."""
    app.dependency_overrides[get_engine] = lambda: engine
    yield engine
    app.dependency_overrides.clear()


@pytest.fixture()
async def client(override_engine):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
