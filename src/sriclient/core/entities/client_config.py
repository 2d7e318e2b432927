"""Client configuration entity."""

import os
from dataclasses import dataclass
from datetime import timedelta

from sriclient.exceptions import ConfigurationError

DEFAULT_CACHE_TTL = 900  # seconds (15 min)
DEFAULT_LANGUAGE = "sk_SK"


@dataclass(frozen=True)
class ClientConfig:
    """Immutable client configuration.

    Created once when the client is constructed and applied to every
    request: the API key and language are sent as headers, the TTL is
    used for every cached entry.
    """

    api_url: str
    api_key: str
    cache_ttl: int = DEFAULT_CACHE_TTL
    language: str = DEFAULT_LANGUAGE

    def __post_init__(self) -> None:
        """Strip trailing slashes from the API URL."""
        object.__setattr__(self, "api_url", self.api_url.rstrip("/"))

    @property
    def ttl(self) -> timedelta:
        """Cache TTL as a timedelta."""
        return timedelta(seconds=self.cache_ttl)

    @classmethod
    def from_env(cls, prefix: str = "SRI_") -> "ClientConfig":
        """Build a configuration from environment variables.

        Reads ``<prefix>API_URL`` and ``<prefix>API_KEY`` (required),
        ``<prefix>CACHE_TTL`` and ``<prefix>LANGUAGE`` (optional).

        Args:
            prefix: Prefix of the environment variable names.

        Returns:
            A new ClientConfig instance.

        Raises:
            ConfigurationError: If a required variable is missing or the
                TTL is not a non-negative integer.
        """
        api_url = _require_env(f"{prefix}API_URL")
        api_key = _require_env(f"{prefix}API_KEY")

        raw_ttl = os.getenv(f"{prefix}CACHE_TTL")
        cache_ttl = DEFAULT_CACHE_TTL
        if raw_ttl is not None and raw_ttl.strip() != "":
            try:
                cache_ttl = int(raw_ttl)
            except ValueError as e:
                raise ConfigurationError(
                    f"{prefix}CACHE_TTL must be an integer, got {raw_ttl!r}"
                ) from e
            if cache_ttl < 0:
                raise ConfigurationError(f"{prefix}CACHE_TTL must not be negative")

        language = os.getenv(f"{prefix}LANGUAGE") or DEFAULT_LANGUAGE

        return cls(
            api_url=api_url,
            api_key=api_key,
            cache_ttl=cache_ttl,
            language=language,
        )


def _require_env(name: str) -> str:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        raise ConfigurationError(f"Missing required environment variable: {name}")
    return value
