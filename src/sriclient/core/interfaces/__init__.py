"""Core interfaces (Protocol classes) for sriclient."""

from sriclient.core.interfaces.cache_store import ICacheStore
from sriclient.core.interfaces.decoder import IDecoder
from sriclient.core.interfaces.key_builder import IKeyBuilder
from sriclient.core.interfaces.parameter_extractor import IParameterExtractor
from sriclient.core.interfaces.transport import ITransport

__all__ = [
    "ICacheStore",
    "IDecoder",
    "IKeyBuilder",
    "IParameterExtractor",
    "ITransport",
]
