"""Cache store implementations."""

from sriclient.infrastructure.stores.memory import InMemoryCacheStore

__all__ = ["InMemoryCacheStore"]
