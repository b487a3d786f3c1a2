"""
Cache strategies using Strategy Pattern.
Allows switching between cache backends (expiring in-memory, Null).
"""

from abc import ABC, abstractmethod
from typing import Tuple


class KeyNotFoundError(KeyError):
    """Raised by delete() when the key is not in the cache"""

    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Key not found: {self.key!r}"


class CacheStrategy(ABC):
    """
    Abstract base class for cache strategies.

    The service layer only talks to this interface, so the backend can be
    swapped (or disabled) through settings without touching service code.

    All methods are synchronous: backends are in-process and guard their
    own state, so callers may use them from any thread.
    """

    @abstractmethod
    def get(self, key: str) -> Tuple[str, bool]:
        """
        Get value from cache.

        Args:
            key: Cache key

        Returns:
            (value, True) on a hit, ("", False) on a miss
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str, ttl: float = 0) -> None:
        """
        Set value in cache.

        Args:
            key: Cache key
            value: Value to cache
            ttl: Time to live in seconds (0 = backend default)
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """
        Delete key from cache.

        Args:
            key: Cache key

        Raises:
            KeyNotFoundError: if the key is not cached
        """
        pass

    def exists(self, key: str) -> bool:
        """Check if key is cached and live"""
        return self.get(key)[1]

    @abstractmethod
    def clear(self) -> None:
        """Clear all cache entries"""
        pass

    def close(self) -> None:
        """Release background resources (no-op by default)"""

    def __bool__(self) -> bool:
        # A backend is present even when it holds no entries
        return True


class NullCache(CacheStrategy):
    """
    Null Object Pattern - cache that does nothing.

    Used for:
    - Testing (when you want to test without cache)
    - Disabling cache in certain environments

    Nothing is ever stored, so every lookup misses and every delete
    reports the key as missing.
    """

    def get(self, key: str) -> Tuple[str, bool]:
        """Always a miss"""
        return "", False

    def set(self, key: str, value: str, ttl: float = 0) -> None:
        """Pretends to set but does nothing"""

    def delete(self, key: str) -> None:
        raise KeyNotFoundError(key)

    def clear(self) -> None:
        """Pretends to clear but does nothing"""
