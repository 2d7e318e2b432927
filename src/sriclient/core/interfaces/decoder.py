"""Decoder interface."""

from typing import Any, Protocol


class IDecoder(Protocol):
    """Contract for decoding raw response bodies."""

    def decode(self, data: str | bytes) -> Any:
        """Decode a response body.

        Args:
            data: The raw body.

        Returns:
            The decoded value (mapping, list, scalar or None).

        Raises:
            DecodeError: If the body cannot be decoded.
        """
        ...
