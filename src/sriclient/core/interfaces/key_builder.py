"""Key builder interface."""

from typing import Any, Protocol


class IKeyBuilder(Protocol):
    """Contract for building cache keys from operation arguments.

    Keys must be deterministic: the same namespace and argument mapping
    always give the same key, whatever the argument order.
    """

    def build(self, namespace: str, arguments: dict[str, Any] | None = None) -> str:
        """Build the cache key for an operation call.

        Args:
            namespace: The operation namespace.
            arguments: The operation arguments, or None for operations
                that take no arguments.

        Returns:
            The cache key string.
        """
        ...

    def build_for_identifier(self, namespace: str, identifier: Any) -> str:
        """Build the cache key for a single resource lookup.

        Args:
            namespace: The operation namespace.
            identifier: The resource identifier from the request path.

        Returns:
            The cache key string.
        """
        ...
