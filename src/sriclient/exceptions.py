"""Exceptions raised by sriclient."""

from typing import Any


class SriClientError(Exception):
    """Base class for all sriclient errors."""

    pass


class ConfigurationError(SriClientError):
    """Raised when client configuration is missing or invalid."""

    pass


class TransportError(SriClientError):
    """Raised when an HTTP request fails.

    Covers connection and protocol failures as well as responses
    with a non-success status code.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeError(SriClientError):
    """Raised when a response body is not valid JSON."""

    pass


class CacheAccessError(SriClientError):
    """Raised when the underlying cache store is unavailable."""

    pass


class GraphQLError(SriClientError):
    """Raised when a GraphQL response reports errors.

    Attributes:
        data: The partial ``data`` payload, or an empty dict.
        errors: The list of reported errors.
    """

    def __init__(self, data: dict[str, Any], errors: list[Any]) -> None:
        self.data = data
        self.errors = errors
        super().__init__(self._format_message(errors))

    @staticmethod
    def _format_message(errors: list[Any]) -> str:
        messages = [
            str(error.get("message")) if isinstance(error, dict) else str(error)
            for error in errors
        ]
        return "GraphQL request failed: " + "; ".join(messages)
