"""
Factory for creating cache instances.
Simple factory with singleton caching.
"""

import logging
from enum import Enum
from typing import Optional

from .strategies import CacheStrategy, NullCache
from .expiring import ExpiringCache
from urlgen.config import settings


logger = logging.getLogger(__name__)


class CacheBackend(Enum):
    """Available cache backends"""
    MEMORY = "memory"
    NULL = "null"


class CacheFactory:
    """
    Simple factory for creating cache instances.

    Uses Singleton Pattern - creates instance once, reuses it.
    Gets configuration from settings (not passed as parameters).
    """

    _instance: Optional[CacheStrategy] = None  # Single cached instance

    @classmethod
    def create(cls, backend: CacheBackend) -> CacheStrategy:
        """
        Create or return cached cache instance.

        Args:
            backend: Type of cache backend (from enum)

        Returns:
            Singleton cache instance
        """
        if cls._instance is not None:
            return cls._instance

        if backend == CacheBackend.MEMORY:
            cls._instance = ExpiringCache(
                default_expiration=settings.cache_default_expiration,
                cleanup_interval=settings.cache_cleanup_interval,
            )
            logger.info(
                "In-memory cache initialized (default_expiration=%ss, cleanup_interval=%ss)",
                settings.cache_default_expiration,
                settings.cache_cleanup_interval,
            )

        elif backend == CacheBackend.NULL:
            cls._instance = NullCache()
            logger.info("Null cache initialized")

        else:
            raise ValueError(f"Unknown cache backend: {backend}")

        return cls._instance

    @classmethod
    def clear_instance(cls):
        """Close and drop the cached instance (shutdown and tests)"""
        if cls._instance is not None:
            cls._instance.close()
        cls._instance = None
