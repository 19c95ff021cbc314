"""
Read-through, capacity-bounded caches behind a pluggable strategy registry.

Typical use::

    from cacher import create

    cache = create("lru", 256, fetch_record)
    record = cache.get("user:42")

Importing this package registers the built-in strategies on the
process-wide factory. Caches and the registry are not thread-safe.
"""

from .caching import LRUCache
from .config import CacheSettings, settings
from .exceptions import CacherError, InvalidCapacityError, UnregisteredStrategyError
from .factory import (
    CacheFactory,
    CacheStrategy,
    create,
    create_from_settings,
    default_factory,
    is_registered,
    list_registered,
    register,
    unregister,
)
from .interfaces import ICache, CacheStats, LookupFn

__all__ = [
    "CacheFactory",
    "CacheSettings",
    "CacheStats",
    "CacheStrategy",
    "CacherError",
    "ICache",
    "InvalidCapacityError",
    "LRUCache",
    "LookupFn",
    "UnregisteredStrategyError",
    "create",
    "create_from_settings",
    "default_factory",
    "is_registered",
    "list_registered",
    "register",
    "settings",
    "unregister",
]
