"""Response decoder implementations."""

from sriclient.infrastructure.decoders.json import JsonDecoder

__all__ = ["JsonDecoder"]
