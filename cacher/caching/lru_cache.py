"""
LRU (Least Recently Used) read-through cache implementation.

Uses a composed OrderedDict for O(1) lookup, move-to-end on access and
eviction from the least recently used end.
"""

import logging
from typing import Any, List, Optional, OrderedDict as OrderedDictType
from collections import OrderedDict
from ..exceptions import InvalidCapacityError
from ..interfaces.cache import ICache, CacheStats, LookupFn, V

logger = logging.getLogger(__name__)


class LRUCache(ICache[V]):
    """
    Read-through LRU cache implementing the ICache interface.

    On a miss the lookup function is called and its result stored as the
    most recently used entry. Once an insertion pushes the cache over
    capacity, the least recently used entry is evicted.

    Features:
    - O(1) hit, miss, insert and evict
    - Lookup failures propagate untouched and leave no entry behind
    - Capacity 0 acts as a pass-through: nothing is ever retained
    - Not synchronized; serialize access when sharing between threads
    """

    def __init__(self, capacity: int, lookup: LookupFn):
        """
        Initialize LRU cache.

        Args:
            capacity: Maximum number of entries (>= 0)
            lookup: Function producing the value for a key on a miss

        Raises:
            InvalidCapacityError: If capacity is negative
            TypeError: If lookup is not callable
        """
        if capacity < 0:
            raise InvalidCapacityError(capacity)
        if not callable(lookup):
            raise TypeError(f"lookup must be callable, got {type(lookup).__name__}")

        self._cache: OrderedDictType[str, Any] = OrderedDict()
        self._capacity = capacity
        self._lookup = lookup

        # Statistics tracking
        self._stats = CacheStats(capacity=capacity)

    def get(self, key: str) -> V:
        """
        Retrieve value with LRU tracking, loading it on a miss.

        Args:
            key: Cache key

        Returns:
            Cached value, or the lookup's result for an uncached key
        """
        if key in self._cache:
            # Cache hit - move to end (most recently used)
            self._cache.move_to_end(key)
            self._stats.hits += 1
            return self._cache[key]

        self._stats.misses += 1
        value = self._lookup(key)

        # New entries land at the most recently used end
        self._cache[key] = value
        self._evict_overflow()
        return value

    def size(self) -> int:
        return len(self._cache)

    def capacity(self) -> int:
        return self._capacity

    def get_stats(self) -> CacheStats:
        """
        Get cache performance statistics.

        Returns:
            Snapshot of hits, misses, evictions, size, capacity and hit_rate
        """
        self._stats.size = len(self._cache)
        return self._stats.model_copy()

    def peek(self, key: str) -> Optional[V]:
        """
        Return the cached value without touching recency or the lookup.

        Args:
            key: Cache key

        Returns:
            Cached value or None if not cached. A cached value may itself
            be None; use ``key in cache`` to tell the two apart.
        """
        return self._cache.get(key)

    def get_lru_order(self) -> List[str]:
        """
        Get cached keys in LRU order (least recently used first).

        Useful for debugging and monitoring.
        """
        return list(self._cache.keys())

    def _evict_overflow(self) -> None:
        """
        Eviction hook run after every insertion.

        Entries are only added one at a time, so at most one eviction
        happens per insertion.
        """
        while len(self._cache) > self._capacity:
            evicted_key, _ = self._cache.popitem(last=False)
            self._stats.evictions += 1
            logger.debug(f"Evicted LRU entry: {evicted_key}")

    def __contains__(self, key: object) -> bool:
        return key in self._cache

    def __len__(self) -> int:
        return len(self._cache)

    def __repr__(self) -> str:
        return f"LRUCache(size={len(self._cache)}, capacity={self._capacity})"
