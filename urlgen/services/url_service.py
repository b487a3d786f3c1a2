import logging
from typing import Optional

from pydantic import HttpUrl

from urlgen.cache.strategies import CacheStrategy, KeyNotFoundError
from urlgen.config import settings
from urlgen.database.store import URLStore
from urlgen.models.url import URL
from urlgen.services.short_code_factory import ShortCodeFactory
from urlgen.services.short_code_strategies import ShortCodeStrategy


logger = logging.getLogger(__name__)


def cache_key(short_code: str) -> str:
    return f"url:{short_code}"


class URLService:
    """
    URL service: the cache in front of the store.

    Reads go cache first and fall back to the store, populating the cache
    on the way out (cache-aside). Writes go to the store, then the cache.
    Cache and store are injected so tests and settings can swap them.
    """

    def __init__(
        self,
        store: URLStore,
        cache: Optional[CacheStrategy] = None,
        short_code_strategy: Optional[ShortCodeStrategy] = None
    ):
        self.store = store
        self.cache = cache
        self.short_code_strategy = short_code_strategy or ShortCodeFactory.create_strategy()

    def create_short_url(self, long_url: HttpUrl) -> URL:
        """
        Create a short URL, or return the existing one for this long URL.

        Process:
        1. Look the long URL up in the store
        2. Otherwise insert a row to get its ID and generate the code from it
        3. Commit and cache the mapping
        """
        long_url = str(long_url)

        existing = self.store.get_row(long_url, is_short_url=False)
        if existing is not None and existing.short_code:
            self._cache_mapping(existing)
            return existing

        row = self.store.reserve_row(long_url)
        try:
            row.short_code = self.short_code_strategy.generate(row.id, self.store)
        except Exception:
            self.store.rollback()
            raise
        row = self.store.save_short_url(row)
        logger.info("Created short code %s for %s", row.short_code, row.long_url)

        self._cache_mapping(row)
        return row

    def get_url_by_short_code(self, short_code: str) -> Optional[URL]:
        """Row for a short code, straight from the store"""
        return self.store.get_row(short_code, is_short_url=True)

    def get_long_url_for_redirect(self, short_code: str) -> Optional[str]:
        """
        Long URL for a short code using Cache-Aside pattern.

        Flow:
        1. Check cache first
        2. On a miss, query the store
        3. Populate cache for next time
        """
        if self.cache is not None:
            cached_url, found = self.cache.get(cache_key(short_code))
            if found:
                return cached_url

        long_url, found = self.store.get(short_code)
        if not found:
            return None

        if self.cache is not None:
            self.cache.set(cache_key(short_code), long_url, ttl=settings.cache_ttl)

        return long_url

    def delete_url(self, short_code: str) -> bool:
        """Delete a short URL and drop it from the cache"""
        if not self.store.delete(short_code):
            return False

        if self.cache is not None:
            try:
                self.cache.delete(cache_key(short_code))
            except KeyNotFoundError:
                logger.debug("Short code %s was not cached", short_code)

        logger.info("Deleted short code %s", short_code)
        return True

    def _cache_mapping(self, row: URL):
        if self.cache is not None:
            self.cache.set(cache_key(row.short_code), row.long_url, ttl=settings.cache_ttl)
