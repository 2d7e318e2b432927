"""Parameter extractor implementations."""

from sriclient.infrastructure.extractors.static import StaticParameterExtractor

__all__ = ["StaticParameterExtractor"]
