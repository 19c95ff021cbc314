"""
Custom exceptions raised by the cacher package.

Errors raised by a caller's lookup function are never wrapped; they reach
the caller of get() exactly as raised.
"""

from typing import Iterable


class CacherError(Exception):
    """Base class for errors raised by the cache package itself."""


class UnregisteredStrategyError(CacherError, KeyError):
    """
    Raised when a cache is requested for a strategy nobody registered.

    Subclasses KeyError so callers treating the registry as a mapping can
    catch it the usual way.
    """

    def __init__(self, identifier: str, available: Iterable[str] = ()):
        self.identifier = identifier
        self.available = sorted(available)
        super().__init__(
            f"Unknown cache strategy: {identifier!r}. "
            f"Available: {self.available}"
        )

    def __str__(self) -> str:
        # KeyError would otherwise repr() the whole message
        return self.args[0]


class InvalidCapacityError(CacherError, ValueError):
    """Raised when a cache is constructed with a negative capacity."""

    def __init__(self, capacity: int):
        self.capacity = capacity
        super().__init__(f"capacity must be >= 0, got {capacity}")
