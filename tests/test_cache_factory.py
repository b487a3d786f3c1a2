"""
Tests for cache backend selection.
"""

import pytest

from urlgen.cache.expiring import ExpiringCache
from urlgen.cache.factory import CacheBackend, CacheFactory
from urlgen.cache.strategies import KeyNotFoundError, NullCache


@pytest.fixture(autouse=True)
def fresh_factory():
    CacheFactory.clear_instance()
    yield
    CacheFactory.clear_instance()


class TestCacheFactory:
    """Test factory singleton behaviour"""

    def test_creates_memory_cache(self):
        cache = CacheFactory.create(CacheBackend.MEMORY)
        assert isinstance(cache, ExpiringCache)

    def test_creates_null_cache(self):
        cache = CacheFactory.create(CacheBackend.NULL)
        assert isinstance(cache, NullCache)

    def test_returns_singleton(self):
        first = CacheFactory.create(CacheBackend.MEMORY)
        second = CacheFactory.create(CacheBackend.MEMORY)
        assert first is second

    def test_clear_instance_closes_cache(self):
        cache = CacheFactory.create(CacheBackend.MEMORY)
        CacheFactory.clear_instance()

        assert not cache.sweeping
        assert CacheFactory.create(CacheBackend.MEMORY) is not cache

    def test_unknown_backend_name(self):
        with pytest.raises(ValueError):
            CacheBackend("redis")


class TestNullCache:
    """Test the do-nothing cache"""

    def test_never_stores(self):
        cache = NullCache()
        cache.set("a", "1")

        assert cache.get("a") == ("", False)
        assert not cache.exists("a")

    def test_delete_reports_missing(self):
        with pytest.raises(KeyNotFoundError):
            NullCache().delete("a")

    def test_empty_backends_are_truthy(self):
        """Callers may test for a configured cache with a plain truth check"""
        with ExpiringCache() as cache:
            assert len(cache) == 0
            assert bool(cache) is True
        assert bool(NullCache()) is True
