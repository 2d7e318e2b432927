"""Infrastructure layer implementations for sriclient."""

from sriclient.infrastructure.decoders import JsonDecoder
from sriclient.infrastructure.extractors import StaticParameterExtractor
from sriclient.infrastructure.key_builders import DefaultKeyBuilder
from sriclient.infrastructure.stores import InMemoryCacheStore
from sriclient.infrastructure.transports import HttpxTransport

__all__ = [
    "DefaultKeyBuilder",
    "HttpxTransport",
    "InMemoryCacheStore",
    "JsonDecoder",
    "StaticParameterExtractor",
]
