"""
In-process expiring key-value cache.

Entries carry an optional absolute expiry. Reads treat an expired entry as
missing without removing it; removal is done by delete() or by a background
sweeper thread that runs every ``cleanup_interval`` seconds.
"""

import logging
import threading
import time
import weakref
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from .rwlock import ReadWriteLock
from .strategies import CacheStrategy, KeyNotFoundError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    """A cached value with its creation time and optional expiry (clock seconds)"""
    value: str
    created_at: float
    expires_at: Optional[float] = None

    def is_expired(self, now: float) -> bool:
        return self.expires_at is not None and now > self.expires_at


class ExpiringCache(CacheStrategy):
    """
    Thread-safe string cache with time-based expiration.

    Args:
        default_expiration: TTL in seconds used when set() is called with ttl=0.
            A value <= 0 makes such entries never expire.
        cleanup_interval: Seconds between background sweeps. A value <= 0
            disables the sweeper; expired entries then stay stored until
            deleted, but are never returned by get().
        clock: Monotonic time source, in seconds.

    The sweeper is stopped by close(), by leaving a ``with`` block, or when
    the cache itself is garbage collected.
    """

    def __init__(
        self,
        default_expiration: float = 0,
        cleanup_interval: float = 0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.default_expiration = default_expiration
        self.cleanup_interval = cleanup_interval
        self._clock = clock
        self._lock = ReadWriteLock()
        self._entries: Dict[str, CacheEntry] = {}
        self._stop_event = threading.Event()
        self._sweeper: Optional[threading.Thread] = None

        if cleanup_interval > 0:
            self._start_sweeper()

    def set(self, key: str, value: str, ttl: float = 0) -> None:
        """Insert or overwrite ``key``. ttl=0 means use the default expiration."""
        if ttl == 0:
            ttl = self.default_expiration

        now = self._clock()
        expires_at = now + ttl if ttl > 0 else None

        with self._lock.write_lock():
            self._entries[key] = CacheEntry(value=value, created_at=now, expires_at=expires_at)

    def get(self, key: str) -> Tuple[str, bool]:
        """
        Look up ``key``.

        Returns:
            (value, True) on a hit, ("", False) if the key is absent or expired.
            Expired entries are left in place for the sweeper.
        """
        with self._lock.read_lock():
            entry = self._entries.get(key)
            if entry is None or entry.is_expired(self._clock()):
                return "", False
            return entry.value, True

    def delete(self, key: str) -> None:
        """
        Remove ``key`` from the cache.

        Raises:
            KeyNotFoundError: if the key is not stored
        """
        with self._lock.write_lock():
            if key not in self._entries:
                raise KeyNotFoundError(key)
            del self._entries[key]

    def clear(self) -> None:
        with self._lock.write_lock():
            self._entries.clear()

    def delete_expired(self) -> int:
        """
        Run one sweep and return the number of entries evicted.

        Expired keys are collected under the shared lock, then removed under
        the exclusive lock. Each key is checked again before removal so an
        entry refreshed by set() in between is kept.
        """
        keys = self._expired_keys()
        if not keys:
            return 0
        return self._clear_values(keys)

    def _expired_keys(self) -> List[str]:
        with self._lock.read_lock():
            now = self._clock()
            return [key for key, entry in self._entries.items() if entry.is_expired(now)]

    def _clear_values(self, keys: List[str]) -> int:
        removed = 0
        with self._lock.write_lock():
            now = self._clock()
            for key in keys:
                entry = self._entries.get(key)
                if entry is not None and entry.is_expired(now):
                    del self._entries[key]
                    removed += 1
        return removed

    # Sweeper lifecycle

    def _start_sweeper(self):
        self._sweeper = threading.Thread(
            target=_sweep_loop,
            args=(weakref.ref(self), self.cleanup_interval, self._stop_event),
            name="expiring-cache-sweeper",
            daemon=True,
        )
        # Wake the sweeper if the cache is collected without close()
        weakref.finalize(self, self._stop_event.set)
        self._sweeper.start()

    @property
    def sweeping(self) -> bool:
        """True while the background sweeper thread is alive"""
        return self._sweeper is not None and self._sweeper.is_alive()

    def close(self, timeout: Optional[float] = None) -> None:
        """Stop the background sweeper and wait for it to exit. Safe to call twice."""
        self._stop_event.set()
        if self._sweeper is not None and self._sweeper is not threading.current_thread():
            self._sweeper.join(timeout)

    def __enter__(self) -> "ExpiringCache":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def __len__(self) -> int:
        """Number of stored entries, including expired ones not yet swept"""
        with self._lock.read_lock():
            return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return self.exists(key)


def _sweep_loop(cache_ref: "weakref.ref[ExpiringCache]", interval: float, stop_event: threading.Event):
    """
    Body of the sweeper thread.

    Only a weak reference is held between ticks; the loop ends once the
    cache has been collected or the stop event is set.
    """
    logger.info("Cache sweeper started (interval=%ss)", interval)
    while not stop_event.wait(interval):
        cache = cache_ref()
        if cache is None:
            break
        removed = cache.delete_expired()
        del cache
        if removed:
            logger.debug("Cache sweeper evicted %d expired entries", removed)
    logger.info("Cache sweeper stopped")
