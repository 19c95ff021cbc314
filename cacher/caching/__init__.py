"""
Concrete caching strategies.

All strategies implement the ICache interface, making them
interchangeable through the factory.
"""

from .lru_cache import LRUCache

__all__ = [
    "LRUCache",
]
