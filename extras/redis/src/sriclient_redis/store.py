"""Redis cache store implementation."""

import logging
from collections.abc import Callable
from datetime import timedelta
from typing import Optional

import redis

from sriclient.exceptions import CacheAccessError

logger = logging.getLogger(__name__)


class RedisCacheStore:
    """Redis cache store for distributed deployments.

    Values are stored with ``SETEX`` so Redis expires them. Any
    ``redis.RedisError`` raised while reading or writing surfaces as
    :class:`~sriclient.exceptions.CacheAccessError`; errors raised by
    the producer pass through unchanged.
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379",
        key_prefix: Optional[str] = "sriclient",
        client: Optional[redis.Redis] = None,
    ) -> None:
        """Initialize the Redis cache store.

        Args:
            redis_url: Redis connection URL.
            key_prefix: Prefix for all cache keys, or None for bare keys.
            client: Optional preconfigured Redis client.
        """
        self._redis: redis.Redis = client if client is not None else redis.from_url(redis_url)
        self._key_prefix = key_prefix

    def get(self, key: str, producer: Callable[[], str], ttl: timedelta) -> str:
        """Return the cached value, computing and storing it on a miss.

        Args:
            key: The cache key.
            producer: Called on a miss.
            ttl: Time-to-live for a newly stored value.

        Returns:
            The cached or freshly produced value.

        Raises:
            CacheAccessError: If Redis is unavailable.
        """
        prefixed_key = self._prefixed_key(key)

        try:
            cached = self._redis.get(prefixed_key)
        except redis.RedisError as e:
            raise CacheAccessError(f"Failed to read {prefixed_key}: {e}") from e

        if cached is not None:
            return cached.decode("utf-8") if isinstance(cached, bytes) else cached

        value = producer()

        try:
            self._redis.setex(prefixed_key, max(int(ttl.total_seconds()), 1), value)
        except redis.RedisError as e:
            raise CacheAccessError(f"Failed to write {prefixed_key}: {e}") from e

        logger.debug("Stored %s for %s", prefixed_key, ttl)
        return value

    def delete(self, key: str) -> bool:
        """Delete cached value.

        Args:
            key: The cache key to delete.

        Returns:
            True if the key existed and was deleted, False otherwise.
        """
        try:
            result = self._redis.delete(self._prefixed_key(key))
        except redis.RedisError as e:
            raise CacheAccessError(f"Failed to delete {key}: {e}") from e
        return result > 0

    def clear(self) -> None:
        """Clear all cached values with our prefix.

        Note: Without a prefix this clears every key in the Redis DB.
        """
        pattern = f"{self._key_prefix}:*" if self._key_prefix else "*"
        try:
            # SCAN instead of KEYS
            keys = list(self._redis.scan_iter(match=pattern, count=100))
            if keys:
                self._redis.delete(*keys)
        except redis.RedisError as e:
            raise CacheAccessError(f"Failed to clear {pattern}: {e}") from e

    def _prefixed_key(self, key: str) -> str:
        if not self._key_prefix or key.startswith(f"{self._key_prefix}:"):
            return key
        return f"{self._key_prefix}:{key}"

    def close(self) -> None:
        """Close the Redis connection."""
        self._redis.close()

    def __enter__(self) -> "RedisCacheStore":
        return self

    def __exit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        self.close()
