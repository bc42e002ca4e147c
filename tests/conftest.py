"""Shared test fixtures for all test modules."""

import pytest

from app.core.dependencies import coupon_list_cache, coupon_repository


@pytest.fixture(autouse=True)
def reset_store():
    """Restore the seeded store and an empty listing cache around each test."""
    coupon_repository.reset()
    coupon_list_cache.invalidate()
    yield
    coupon_repository.reset()
    coupon_list_cache.invalidate()


class FakeTimer:
    """Manually advanced clock for cache expiry tests."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_timer():
    return FakeTimer()
