"""Domain services for sriclient."""

from sriclient.core.services.cache_service import CacheService
from sriclient.core.services.request_builder import RequestBuilder

__all__ = [
    "CacheService",
    "RequestBuilder",
]
