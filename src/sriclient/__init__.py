"""sriclient - cached Python client for the SRI API.

A thin, synchronous client for the SRI strategy organizations and
activities API. REST responses are cached as raw JSON bodies under
deterministic keys derived from the call arguments; GraphQL queries
are sent uncached.

Example:
    from sriclient import SriClient, InMemoryCacheStore

    client = SriClient(
        "https://sri.example.sk",
        api_key="secret",
        cache=InMemoryCacheStore(maxsize=500),
        cache_ttl=600,
    )

    organizations = client.search_organizations(type=5, title="Trexima")
    organization = client.get_organization_by_crn("00151866")
    timeline = client.get_activities_timeline()

    result = client.get_graphql("{ organizations { id title } }")

Distributed cache with Redis (``pip install sriclient[redis]``):
    from sriclient_redis import RedisCacheStore

    client = SriClient.from_env(cache=RedisCacheStore("redis://localhost:6379"))
"""

from sriclient.client import SriClient
from sriclient.core.entities import CacheEntry, CacheKey, ClientConfig, Operation
from sriclient.core.interfaces import (
    ICacheStore,
    IDecoder,
    IKeyBuilder,
    IParameterExtractor,
    ITransport,
)
from sriclient.core.services import CacheService, RequestBuilder
from sriclient.exceptions import (
    CacheAccessError,
    ConfigurationError,
    DecodeError,
    GraphQLError,
    SriClientError,
    TransportError,
)
from sriclient.infrastructure import (
    DefaultKeyBuilder,
    HttpxTransport,
    InMemoryCacheStore,
    JsonDecoder,
    StaticParameterExtractor,
)
from sriclient.operations import OPERATIONS

__version__ = "2.0.0"

__all__ = [
    # Version
    "__version__",
    # Client
    "SriClient",
    "OPERATIONS",
    # Core entities
    "CacheEntry",
    "CacheKey",
    "ClientConfig",
    "Operation",
    # Core interfaces
    "ICacheStore",
    "IDecoder",
    "IKeyBuilder",
    "IParameterExtractor",
    "ITransport",
    # Core services
    "CacheService",
    "RequestBuilder",
    # Infrastructure implementations
    "DefaultKeyBuilder",
    "HttpxTransport",
    "InMemoryCacheStore",
    "JsonDecoder",
    "StaticParameterExtractor",
    # Exceptions
    "SriClientError",
    "ConfigurationError",
    "TransportError",
    "DecodeError",
    "GraphQLError",
    "CacheAccessError",
]
