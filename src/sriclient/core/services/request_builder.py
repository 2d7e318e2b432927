"""Request builder - turns API calls into HTTP requests."""

import logging
from typing import Any

import httpx

from sriclient.core.entities.client_config import ClientConfig
from sriclient.core.interfaces.transport import ITransport

logger = logging.getLogger(__name__)


class RequestBuilder:
    """Sends requests with the fixed header set of the API.

    Query parameters and bodies are passed through unmodified. The
    response is returned as-is; status handling belongs to the
    transport.
    """

    def __init__(self, config: ClientConfig, transport: ITransport) -> None:
        """Initialize the request builder.

        Args:
            config: The client configuration.
            transport: The transport used to send requests.
        """
        self._config = config
        self._transport = transport

    @property
    def headers(self) -> dict[str, str]:
        """Headers sent with every request."""
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "Accept-Language": self._config.language,
            "X-Api-Key": self._config.api_key,
        }

    def make_request(
        self,
        path: str,
        query: dict[str, Any] | None = None,
        body: str | bytes | None = None,
        method: str = "GET",
    ) -> httpx.Response:
        """Perform a request on the API.

        Args:
            path: Resource path relative to the API URL.
            query: Optional query parameters.
            body: Optional raw request body.
            method: HTTP method.

        Returns:
            The raw HTTP response.

        Raises:
            TransportError: If the request fails.
        """
        logger.debug("%s %s params=%s", method, path, query)
        return self._transport.request(
            method,
            path,
            params=query,
            content=body,
            headers=self.headers,
        )

    def close(self) -> None:
        """Close the underlying transport."""
        self._transport.close()
