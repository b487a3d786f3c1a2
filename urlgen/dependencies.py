"""
FastAPI dependencies for dependency injection.

The cache is a process-wide singleton: one mapping and one sweeper
shared by every request thread. Stores wrap the per-request session.
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from urlgen.cache.factory import CacheFactory, CacheBackend
from urlgen.cache.strategies import CacheStrategy
from urlgen.config import settings
from urlgen.database.connection import get_db
from urlgen.database.store import URLStore
from urlgen.services.url_service import URLService


@lru_cache()
def get_cache() -> CacheStrategy:
    """
    Get cache instance (singleton).

    Factory gets config from settings internally.
    """
    backend = CacheBackend(settings.cache_backend)
    return CacheFactory.create(backend)


def get_store(db: Session = Depends(get_db)) -> URLStore:
    return URLStore(db)


def get_url_service(
    store: URLStore = Depends(get_store),
    cache: CacheStrategy = Depends(get_cache)
) -> URLService:
    """URLService with store and cache injected"""
    return URLService(store=store, cache=cache)
