"""Cache key value object."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CacheKey:
    """Immutable cache key value object.

    A key is the operation namespace followed by a digest of the
    request arguments. Operations without arguments use the bare
    namespace.
    """

    namespace: str
    digest: str | None = None

    def __str__(self) -> str:
        """Return the full cache key string.

        Returns:
            ``<namespace>-<digest>``, or ``<namespace>`` without a digest.
        """
        if self.digest is None:
            return self.namespace
        return f"{self.namespace}-{self.digest}"

    @classmethod
    def from_arguments(
        cls,
        namespace: str,
        arguments: dict[str, Any],
        hash_func: Callable[[str], str] | None = None,
    ) -> "CacheKey":
        """Create a CacheKey from an argument mapping.

        The mapping is encoded as canonical JSON before hashing, so the
        order in which arguments were supplied does not matter.

        Args:
            namespace: Operation namespace.
            arguments: Operation arguments.
            hash_func: Optional custom hash function. Defaults to CRC32.

        Returns:
            A new CacheKey instance.
        """
        from sriclient.utils.hashing import canonical_json, crc32_hash

        hasher = hash_func or crc32_hash
        return cls(namespace=namespace, digest=hasher(canonical_json(arguments)))

    @classmethod
    def from_identifier(
        cls,
        namespace: str,
        identifier: Any,
        hash_func: Callable[[str], str] | None = None,
    ) -> "CacheKey":
        """Create a CacheKey from a single resource identifier."""
        from sriclient.utils.hashing import crc32_hash

        hasher = hash_func or crc32_hash
        return cls(namespace=namespace, digest=hasher(str(identifier)))
