"""
Cache module for the URL shortener.
Expiring in-memory cache behind a Strategy Pattern interface.
"""

from .strategies import CacheStrategy, KeyNotFoundError, NullCache
from .expiring import CacheEntry, ExpiringCache
from .rwlock import ReadWriteLock
from .factory import CacheBackend, CacheFactory

__all__ = [
    "CacheStrategy",
    "KeyNotFoundError",
    "NullCache",
    "CacheEntry",
    "ExpiringCache",
    "ReadWriteLock",
    "CacheBackend",
    "CacheFactory",
]
