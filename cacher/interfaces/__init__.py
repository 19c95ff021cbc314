"""
Core interface abstractions following Dependency Inversion Principle.

Callers depend on ICache, never on a concrete strategy, so strategies
can be swapped through the factory by name.
"""

from .cache import ICache, CacheStats, LookupFn

__all__ = [
    "ICache",
    "CacheStats",
    "LookupFn",
]
