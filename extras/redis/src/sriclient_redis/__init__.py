"""Redis cache store for sriclient."""

from sriclient_redis.store import RedisCacheStore

__all__ = ["RedisCacheStore"]
