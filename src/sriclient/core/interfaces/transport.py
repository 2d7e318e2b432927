"""HTTP transport interface."""

from typing import Any, Protocol

import httpx


class ITransport(Protocol):
    """Contract for executing HTTP requests against the API."""

    def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        content: str | bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Send a request and return the response.

        Args:
            method: HTTP method.
            path: Path relative to the API URL.
            params: Query parameters.
            content: Raw request body.
            headers: Request headers.

        Returns:
            The HTTP response with its body read.

        Raises:
            TransportError: On network failure or a non-success status.
        """
        ...

    def close(self) -> None:
        """Release any underlying connections."""
        ...
