"""Shared fixtures for the test suite."""

from __future__ import annotations

from datetime import date
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from tungsten.db import get_session
from tungsten.engine.assessment import default_answers
from tungsten.engine.models import Profile
from tungsten.engine.repository import MemoryStore, ProfileRepository, StoreError
from tungsten.engine.session import ProfileSession
from tungsten.main import app

FIXED_DAY = date(2026, 10, 17)


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------

def make_profile(**overrides: Any) -> Profile:
    """Metric profile from the reference scenario (male, 30, 178 cm, 86.2 → 81.6 kg)."""
    defaults: dict[str, Any] = dict(
        gender="male",
        age=30,
        unit_system="metric",
        height_cm=178,
        weight=86.2,
        goal_weight=81.6,
        activity_level="moderate",
        resting_hr=60,
        hrmax_override=0,
        cooper_meters=0,
    )
    defaults.update(overrides)
    return Profile(**defaults)


def make_answers(**overrides: int) -> dict[str, int]:
    answers = default_answers()
    answers.update(overrides)
    return answers


class FlakyStore(MemoryStore):
    """MemoryStore whose reads/writes can be switched to fail."""

    def __init__(self, records: dict[str, str] | None = None):
        super().__init__(records)
        self.fail_reads = False
        self.fail_writes = False

    def read(self, key: str) -> str | None:
        if self.fail_reads:
            raise StoreError("read disabled")
        return super().read(key)

    def write(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise StoreError("write disabled")
        super().write(key, value)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def store():
    return MemoryStore()


@pytest.fixture()
def repository(store):
    return ProfileRepository(store)


@pytest.fixture()
def session(repository):
    """Session over an in-memory store with the calendar pinned to FIXED_DAY."""
    return ProfileSession(repository, today=lambda: FIXED_DAY)


@pytest.fixture()
def override_session(session):
    """Override the FastAPI dependency so no real store is touched."""
    app.dependency_overrides[get_session] = lambda: session
    yield session
    app.dependency_overrides.clear()


@pytest.fixture()
async def client(override_session):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
