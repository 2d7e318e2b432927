"""Core domain layer for sriclient."""

from sriclient.core.entities import CacheEntry, CacheKey, ClientConfig, Operation
from sriclient.core.interfaces import (
    ICacheStore,
    IDecoder,
    IKeyBuilder,
    IParameterExtractor,
    ITransport,
)
from sriclient.core.services import CacheService, RequestBuilder

__all__ = [
    # Entities
    "CacheEntry",
    "CacheKey",
    "ClientConfig",
    "Operation",
    # Interfaces
    "ICacheStore",
    "IDecoder",
    "IKeyBuilder",
    "IParameterExtractor",
    "ITransport",
    # Services
    "CacheService",
    "RequestBuilder",
]
