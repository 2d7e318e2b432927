"""HTTP transport implementations."""

from sriclient.infrastructure.transports.httpx_transport import HttpxTransport

__all__ = ["HttpxTransport"]
