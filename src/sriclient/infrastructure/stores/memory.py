"""In-memory cache store implementation."""

import logging
import threading
import time
from collections.abc import Callable
from datetime import timedelta
from typing import Any

from cachetools import TLRUCache  # type: ignore[import-untyped]

from sriclient.core.entities.cache_entry import CacheEntry

logger = logging.getLogger(__name__)


def _entry_expiry(key: str, entry: CacheEntry, now: float) -> float:
    return now + entry.ttl.total_seconds()


class InMemoryCacheStore:
    """In-memory get-or-compute store with per-entry TTL.

    Suitable for single-process deployments. Uses cachetools
    ``TLRUCache`` so every entry expires ``ttl`` after insertion and
    the least recently used entry is evicted when the store is full.
    """

    def __init__(
        self,
        maxsize: int = 1000,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the in-memory cache store.

        Args:
            maxsize: Maximum number of items in the cache.
            timer: Clock used for expiry.
        """
        self._maxsize = maxsize
        self._cache: TLRUCache[str, CacheEntry] = TLRUCache(
            maxsize=maxsize,
            ttu=_entry_expiry,
            timer=timer,
        )
        self._lock = threading.Lock()

    def get(self, key: str, producer: Callable[[], str], ttl: timedelta) -> str:
        """Return the cached value, computing and storing it on a miss.

        The producer runs outside the lock, so concurrent misses for the
        same key may each call it.

        Args:
            key: The cache key.
            producer: Called on a miss.
            ttl: Time-to-live for a newly stored value.

        Returns:
            The cached or freshly produced value.
        """
        with self._lock:
            entry = self._cache.get(key)
        if entry is not None:
            return entry.value

        value = producer()
        entry = CacheEntry.create(key=key, value=value, ttl=ttl)
        with self._lock:
            self._cache[key] = entry
        logger.debug("Stored %s until %s", key, entry.expires_at.isoformat())
        return value

    def delete(self, key: str) -> bool:
        """Delete a cached value.

        Args:
            key: The cache key to delete.

        Returns:
            True if the key existed and was deleted, False otherwise.
        """
        with self._lock:
            try:
                del self._cache[key]
                return True
            except KeyError:
                return False

    def clear(self) -> None:
        """Clear all cached values."""
        with self._lock:
            self._cache.clear()

    def __contains__(self, key: Any) -> bool:
        with self._lock:
            return key in self._cache

    def __len__(self) -> int:
        """Return the number of items in the cache."""
        with self._lock:
            return len(self._cache)

    @property
    def maxsize(self) -> int:
        """Return the maximum size of the cache."""
        return self._maxsize
