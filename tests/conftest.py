"""
Pytest fixtures for authkeys tests.

This module provides:
1. Test environment settings
2. A controllable clock and a seeded random source
3. A key builder wired to both
"""

import os
import random
from datetime import UTC, datetime, timedelta

import pytest

# Set environment variables BEFORE any imports that might load settings
os.environ.setdefault("AUTHKEYS_ENVIRONMENT", "testing")
os.environ.setdefault("AUTHKEYS_LOG_LEVEL", "DEBUG")

from authkeys.config import clear_settings_cache  # noqa: E402
from authkeys.services.key_builder import KeyBuilder  # noqa: E402

# Fixed "current time" used by the fake clock
FROZEN_NOW = datetime(2030, 6, 15, 12, 0, 0, tzinfo=UTC)


class FakeClock:
    """Clock that returns a controllable time and moves forward by ``step`` on each call."""

    def __init__(self, start: datetime = FROZEN_NOW, step: timedelta = timedelta(seconds=1)):
        self.now = start
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + self.step
        return current

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


@pytest.fixture(autouse=True)
def reset_settings():
    """Reload settings from the environment for every test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def clock() -> FakeClock:
    """Clock starting at FROZEN_NOW, one second per reading."""
    return FakeClock()


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def builder(clock, rng) -> KeyBuilder:
    """Key builder using the fake clock and seeded random source."""
    return KeyBuilder(clock=clock, rng=rng)


@pytest.fixture
def create_body():
    """Valid creation request body."""
    return {
        "description": "Indexing key for the products index",
        "actions": ["documents.add", "documents.get"],
        "indexes": ["products"],
        "expiresAt": "2040-01-01T00:00:00Z",
    }


@pytest.fixture
def frozen_now() -> datetime:
    """Start time of the ``clock`` fixture."""
    return FROZEN_NOW


@pytest.fixture
def make_clock():
    """Factory for additional fake clocks."""
    return FakeClock
