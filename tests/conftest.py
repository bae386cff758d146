# tests/conftest.py
"""
Pytest configuration and fixtures for typetour tests.
"""

import asyncio

import pytest

from typetour import TourConfig, UserFetcher


class RecordingSleep:
    """Stand-in for ``asyncio.sleep`` that records delays instead of waiting.

    Each call yields to the event loop once per ``tick`` seconds of the
    requested delay, so concurrent sleepers wake in order of their delays
    (equal delays wake in the order they started) without wall-clock waiting.
    """

    def __init__(self, tick=0.01):
        self.tick = tick
        self.calls = []

    async def __call__(self, seconds):
        self.calls.append(seconds)
        for _ in range(round(seconds / self.tick) + 1):
            await asyncio.sleep(0)


@pytest.fixture
def fake_sleep():
    """A sleep function that keeps delay ordering and remembers each delay."""
    return RecordingSleep()


@pytest.fixture
def fetcher(fake_sleep):
    """UserFetcher on default delays, driven by the recording sleep."""
    return UserFetcher(TourConfig(), sleep=fake_sleep)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: Slow tests that take significant time"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: Unit tests"
    )
