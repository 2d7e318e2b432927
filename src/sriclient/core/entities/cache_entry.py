"""Cache entry entity."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone


@dataclass(frozen=True)
class CacheEntry:
    """Immutable cache entry value object.

    Holds the raw JSON response body stored under a cache key,
    together with its creation time and TTL.
    """

    key: str
    value: str
    created_at: datetime
    ttl: timedelta

    @property
    def expires_at(self) -> datetime:
        """Calculate expiration time.

        Returns:
            The datetime when this entry expires.
        """
        return self.created_at + self.ttl

    @property
    def is_expired(self) -> bool:
        """Check if entry has expired.

        Returns:
            True if the entry has expired, False otherwise.
        """
        return datetime.now(timezone.utc) >= self.expires_at

    @classmethod
    def create(cls, key: str, value: str, ttl: timedelta) -> "CacheEntry":
        """Factory method to create a new cache entry.

        Args:
            key: The cache key.
            value: The raw response body.
            ttl: Time-to-live.

        Returns:
            A new CacheEntry instance.
        """
        return cls(
            key=key,
            value=value,
            created_at=datetime.now(timezone.utc),
            ttl=ttl,
        )
