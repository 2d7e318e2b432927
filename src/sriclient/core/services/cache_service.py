"""Cache service - get-or-fetch orchestration over a cache store."""

import logging
from collections.abc import Callable
from datetime import timedelta

from sriclient.core.interfaces.cache_store import ICacheStore

logger = logging.getLogger(__name__)


class CacheService:
    """Domain service resolving cache keys through a store.

    On a miss the fetch function runs inside the store's producer and
    its result is stored with the configured TTL. Store failures and
    fetch failures propagate unchanged.
    """

    def __init__(self, store: ICacheStore, ttl: timedelta) -> None:
        """Initialize the cache service.

        Args:
            store: The cache store to use.
            ttl: TTL applied to every stored value.
        """
        self._store = store
        self._ttl = ttl

        # Statistics
        self._hits = 0
        self._misses = 0

    @property
    def ttl(self) -> timedelta:
        """Get the TTL applied to stored values."""
        return self._ttl

    @property
    def stats(self) -> dict[str, int]:
        """Get cache statistics.

        Returns:
            Dictionary with hits, misses, and total requests.
        """
        return {
            "hits": self._hits,
            "misses": self._misses,
            "total": self._hits + self._misses,
        }

    def resolve(self, key: str, fetch: Callable[[], str]) -> str:
        """Return the value cached under ``key``, fetching it on a miss.

        Args:
            key: The cache key.
            fetch: Produces the raw value on a miss.

        Returns:
            The cached or freshly fetched value.

        Raises:
            CacheAccessError: If the store is unavailable.
        """
        missed = False

        def producer() -> str:
            nonlocal missed
            missed = True
            logger.debug("Cache miss: %s", key)
            return fetch()

        value = self._store.get(key, producer, self._ttl)

        if missed:
            self._misses += 1
        else:
            self._hits += 1
            logger.debug("Cache hit: %s", key)
        return value
