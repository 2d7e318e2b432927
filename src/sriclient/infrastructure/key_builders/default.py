"""Default key builder implementation."""

from collections.abc import Callable
from typing import Any

from sriclient.core.entities.cache_key import CacheKey
from sriclient.utils.hashing import crc32_hash


class DefaultKeyBuilder:
    """Default key builder using a hash of the canonical arguments.

    Keys have the form ``<namespace>-<hash>``. CRC32 is the default so
    that keys stay compatible with caches warmed by other clients of
    the same API; pass ``hash_func`` to use a stronger digest.
    """

    def __init__(self, hash_func: Callable[[str], str] = crc32_hash) -> None:
        """Initialize the key builder.

        Args:
            hash_func: Hashes the canonical encoding to a key suffix.
        """
        self._hash_func = hash_func

    def build(self, namespace: str, arguments: dict[str, Any] | None = None) -> str:
        """Build the cache key for an operation call.

        Args:
            namespace: The operation namespace.
            arguments: The operation arguments. ``None`` gives the bare
                namespace; an empty mapping is still hashed.

        Returns:
            The cache key string.
        """
        if arguments is None:
            return str(CacheKey(namespace=namespace))
        key = CacheKey.from_arguments(namespace, arguments, hash_func=self._hash_func)
        return str(key)

    def build_for_identifier(self, namespace: str, identifier: Any) -> str:
        """Build the cache key for a single resource lookup.

        Args:
            namespace: The operation namespace.
            identifier: The resource identifier.

        Returns:
            The cache key string.
        """
        key = CacheKey.from_identifier(namespace, identifier, hash_func=self._hash_func)
        return str(key)
