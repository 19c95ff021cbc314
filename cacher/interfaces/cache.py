"""
Cache interface - unified contract for all read-through caching strategies.
"""

from abc import ABC, abstractmethod
from typing import Callable, Generic, TypeVar
from pydantic import BaseModel, computed_field

V = TypeVar("V")

# Caller-supplied source of truth consulted on a miss
LookupFn = Callable[[str], V]


class CacheStats(BaseModel):
    """Statistics about cache performance"""
    hits: int = 0
    misses: int = 0
    evictions: int = 0
    size: int = 0
    capacity: int = 0

    @computed_field
    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate"""
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0


class ICache(ABC, Generic[V]):
    """
    Unified read-through cache interface following Strategy Pattern.

    Every strategy is built from a fixed capacity and a lookup function,
    and is only ever mutated through get(): values are produced by the
    lookup, never supplied by the caller.

    Implementations are not synchronized. Callers sharing an instance
    across threads must serialize access themselves.
    """

    @abstractmethod
    def get(self, key: str) -> V:
        """
        Retrieve value for key, loading it through the lookup on a miss.

        Args:
            key: Cache key

        Returns:
            Cached or freshly looked-up value

        Raises:
            Whatever the lookup function raises, unmodified. Nothing is
            cached for the key in that case.
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """Number of entries currently cached."""
        pass

    @abstractmethod
    def capacity(self) -> int:
        """Fixed maximum number of entries, set at construction."""
        pass
