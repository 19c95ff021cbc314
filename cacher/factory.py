"""
Cache factory - registry of caching strategies addressable by name.

Strategies are plain data: an identifier mapped to a constructor taking
(capacity, lookup). Callers ask for a cache by identifier and get back an
ICache without depending on the concrete class.

Lifecycle of the process-wide ``default_factory``:
1. Built-in strategies are registered when the factory is constructed,
   which happens on first import of this module.
2. Callers may register further strategies during start-up, before
   creating caches from them.
3. From then on the registry is read-mostly. It is not synchronized;
   registering concurrently with create() needs external locking.
"""

import logging
from enum import Enum
from typing import Callable, Dict, List, Optional, Union
from .caching import LRUCache
from .config import CacheSettings, settings as default_settings
from .exceptions import UnregisteredStrategyError
from .interfaces.cache import ICache, LookupFn

logger = logging.getLogger(__name__)

CacheConstructor = Callable[[int, LookupFn], ICache]


class CacheStrategy(str, Enum):
    """Built-in caching strategies."""
    LRU = "lru"


StrategyId = Union[CacheStrategy, str]


def normalize_identifier(identifier: StrategyId) -> str:
    """
    Normalize a strategy identifier to its registry key.

    Args:
        identifier: CacheStrategy member or free-form name

    Returns:
        The member's value, or the name with surrounding whitespace
        removed. Case is preserved: "Alpha" and "alpha" are distinct.
    """
    if isinstance(identifier, CacheStrategy):
        return identifier.value
    return str(identifier).strip()


class CacheFactory:
    """
    Registry mapping strategy identifiers to cache constructors.

    Re-registering an identifier replaces the previous constructor
    (last write wins). Unknown identifiers raise instead of returning None.
    """

    def __init__(self, include_builtins: bool = True):
        """
        Initialize factory.

        Args:
            include_builtins: Register the built-in strategies (default: True)
        """
        self._registry: Dict[str, CacheConstructor] = {}
        if include_builtins:
            self._register_builtins()

    def _register_builtins(self) -> None:
        """Register the strategies shipped with the package."""
        self.register(CacheStrategy.LRU, LRUCache)

    def register(self, identifier: StrategyId, constructor: CacheConstructor) -> None:
        """
        Register a caching strategy.

        Args:
            identifier: Name the strategy will be requested by
            constructor: Callable accepting (capacity, lookup) and
                         returning an ICache

        Raises:
            ValueError: If identifier is blank
            TypeError: If constructor is not callable
        """
        if not callable(constructor):
            raise TypeError(f"constructor for {identifier!r} must be callable")

        key = normalize_identifier(identifier)
        if not key:
            raise ValueError("strategy identifier must be a non-empty string")
        if key in self._registry:
            logger.warning(f"Overwriting existing cache strategy: {key}")
        self._registry[key] = constructor
        logger.debug(f"Registered cache strategy: {key}")

    def unregister(self, identifier: StrategyId) -> bool:
        """
        Remove a caching strategy.

        Returns:
            True if the identifier was found and removed, False otherwise
        """
        key = normalize_identifier(identifier)
        if key in self._registry:
            del self._registry[key]
            logger.debug(f"Unregistered cache strategy: {key}")
            return True
        return False

    def is_registered(self, identifier: StrategyId) -> bool:
        return normalize_identifier(identifier) in self._registry

    def list_registered(self) -> List[str]:
        """List registered strategy identifiers, sorted."""
        return sorted(self._registry)

    def create(self, identifier: StrategyId, capacity: int, lookup: LookupFn) -> ICache:
        """
        Create a new cache instance for a registered strategy.

        Args:
            identifier: Registered strategy name
            capacity: Maximum number of entries
            lookup: Function producing values on a miss

        Returns:
            New cache instance

        Raises:
            UnregisteredStrategyError: If no constructor is registered
        """
        key = normalize_identifier(identifier)
        constructor = self._registry.get(key)
        if constructor is None:
            requested = identifier.value if isinstance(identifier, CacheStrategy) else identifier
            raise UnregisteredStrategyError(requested, self._registry.keys())

        cache = constructor(capacity, lookup)
        logger.debug(f"Created {key} cache with capacity {capacity}")
        return cache

    def create_from_settings(
        self,
        lookup: LookupFn,
        settings: Optional[CacheSettings] = None,
    ) -> ICache:
        """
        Create a cache using the configured default strategy and capacity.

        Args:
            lookup: Function producing values on a miss
            settings: Settings to use (defaults to the environment-loaded ones)
        """
        settings = settings or default_settings
        return self.create(settings.default_strategy, settings.default_capacity, lookup)


# Process-wide registry; built-ins are registered here at import time
default_factory = CacheFactory()


def register(identifier: StrategyId, constructor: CacheConstructor) -> None:
    """Register a strategy on the process-wide factory."""
    default_factory.register(identifier, constructor)


def unregister(identifier: StrategyId) -> bool:
    """Remove a strategy from the process-wide factory."""
    return default_factory.unregister(identifier)


def is_registered(identifier: StrategyId) -> bool:
    """Check whether the process-wide factory knows a strategy."""
    return default_factory.is_registered(identifier)


def list_registered() -> List[str]:
    """List strategies on the process-wide factory, sorted."""
    return default_factory.list_registered()


def create(identifier: StrategyId, capacity: int, lookup: LookupFn) -> ICache:
    """Create a cache from the process-wide factory."""
    return default_factory.create(identifier, capacity, lookup)


def create_from_settings(
    lookup: LookupFn,
    settings: Optional[CacheSettings] = None,
    factory: Optional[CacheFactory] = None,
) -> ICache:
    """Create a cache from configured defaults, on the process-wide factory unless given one."""
    return (factory or default_factory).create_from_settings(lookup, settings)
