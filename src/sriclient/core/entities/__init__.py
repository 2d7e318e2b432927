"""Domain entities for sriclient."""

from sriclient.core.entities.cache_entry import CacheEntry
from sriclient.core.entities.cache_key import CacheKey
from sriclient.core.entities.client_config import ClientConfig
from sriclient.core.entities.operation import Operation

__all__ = [
    "CacheEntry",
    "CacheKey",
    "ClientConfig",
    "Operation",
]
