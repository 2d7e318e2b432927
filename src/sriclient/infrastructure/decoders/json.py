"""JSON decoder implementation."""

import json
from typing import Any

from sriclient.exceptions import DecodeError


class JsonDecoder:
    """Decodes JSON response bodies into Python values."""

    def __init__(self, encoding: str = "utf-8") -> None:
        """Initialize the JSON decoder.

        Args:
            encoding: Character encoding used for bytes input.
        """
        self._encoding = encoding

    def decode(self, data: str | bytes) -> Any:
        """Decode a JSON body.

        Args:
            data: The raw body.

        Returns:
            The decoded Python value.

        Raises:
            DecodeError: If the data is not valid JSON.
        """
        try:
            if isinstance(data, bytes):
                data = data.decode(self._encoding)
            return json.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DecodeError(f"Failed to decode JSON response: {e}") from e
