"""Cache store interface."""

from collections.abc import Callable
from datetime import timedelta
from typing import Protocol


class ICacheStore(Protocol):
    """Contract for get-or-compute cache stores.

    Stores own the lifecycle of cached entries: expiry, eviction and
    persistence. The client never invalidates entries itself.
    """

    def get(self, key: str, producer: Callable[[], str], ttl: timedelta) -> str:
        """Return the cached value, computing and storing it on a miss.

        Args:
            key: The cache key.
            producer: Called on a miss; its result is stored and returned.
            ttl: Time-to-live for a newly stored value.

        Returns:
            The cached or freshly produced value.

        Raises:
            CacheAccessError: If the underlying storage is unavailable.
        """
        ...

    def delete(self, key: str) -> bool:
        """Delete a cached value.

        Args:
            key: The cache key to delete.

        Returns:
            True if the key existed and was deleted, False otherwise.
        """
        ...

    def clear(self) -> None:
        """Clear all cached values."""
        ...
