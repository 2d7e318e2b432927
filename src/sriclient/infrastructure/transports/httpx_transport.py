"""httpx-based transport implementation."""

import logging
from typing import Any

import httpx

from sriclient.exceptions import TransportError

logger = logging.getLogger(__name__)


class HttpxTransport:
    """Blocking transport backed by :class:`httpx.Client`.

    Paths are resolved against ``base_url``. Network failures and
    non-success responses raise :class:`TransportError`; nothing is
    retried. Timeouts are httpx defaults.

    Args:
        base_url: The API URL.
        client: Optional preconfigured client, e.g. one built on
            ``httpx.MockTransport`` in tests. Its ``base_url`` is used
            as-is.
    """

    def __init__(self, base_url: str, client: httpx.Client | None = None) -> None:
        self._client = client or httpx.Client(
            base_url=base_url.rstrip("/") + "/",
            follow_redirects=True,
        )

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

        Raises:
            TransportError: On network failure or a non-success status.
        """
        try:
            response = self._client.request(
                method,
                path,
                params=params,
                content=content,
                headers=headers,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.debug("%s %s failed with HTTP %s", method, path, status)
            raise TransportError(
                f"HTTP {status} for {method} {e.request.url}: {e.response.text[:200]}",
                status_code=status,
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(f"Request {method} {path} failed: {e}") from e
        return response

    def close(self) -> None:
        """Close the underlying httpx client."""
        self._client.close()
