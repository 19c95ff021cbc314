"""
Shared fixtures for cache tests.
"""

import pytest
from cacher import CacheFactory


class CountingLookup:
    """Lookup function that records every key it is asked for."""

    def __init__(self, suffix: str = "_v"):
        self.suffix = suffix
        self.calls = []

    def __call__(self, key: str) -> str:
        self.calls.append(key)
        return key + self.suffix

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture
def lookup():
    """Deterministic lookup: k -> k + '_v', with call tracking."""
    return CountingLookup()


@pytest.fixture
def factory():
    """Isolated factory with only the built-in strategies registered."""
    return CacheFactory()
