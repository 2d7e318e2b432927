"""SRI API client.

Named accessor methods for the SRI REST and GraphQL API. REST results
are cached as raw JSON bodies under keys derived from the call
arguments, and decoded on every call.
"""

import logging
from typing import Any

import httpx

from sriclient.core.entities.client_config import (
    DEFAULT_CACHE_TTL,
    DEFAULT_LANGUAGE,
    ClientConfig,
)
from sriclient.core.entities.operation import Operation
from sriclient.core.interfaces.cache_store import ICacheStore
from sriclient.core.interfaces.decoder import IDecoder
from sriclient.core.interfaces.key_builder import IKeyBuilder
from sriclient.core.interfaces.parameter_extractor import IParameterExtractor
from sriclient.core.interfaces.transport import ITransport
from sriclient.core.services.cache_service import CacheService
from sriclient.core.services.request_builder import RequestBuilder
from sriclient.exceptions import GraphQLError
from sriclient.infrastructure.decoders.json import JsonDecoder
from sriclient.infrastructure.extractors.static import StaticParameterExtractor
from sriclient.infrastructure.key_builders.default import DefaultKeyBuilder
from sriclient.infrastructure.stores.memory import InMemoryCacheStore
from sriclient.infrastructure.transports.httpx_transport import HttpxTransport
from sriclient.operations import (
    GET_ACTIVITIES_BY_FOCUS,
    GET_ACTIVITIES_BY_SECTOR_COUNCIL,
    GET_ACTIVITIES_BY_YEAR,
    GET_ACTIVITIES_TIMELINE,
    GET_ACTIVITY_DETAIL,
    GET_ORGANIZATION_BY_CRN,
    GET_ORGANIZATION_BY_ID,
    GET_ORGANIZATION_CATEGORIES,
    GRAPHQL_PATH,
    SEARCH_ORGANIZATIONS,
)

logger = logging.getLogger(__name__)


class SriClient:
    """Client for making requests on the SRI API.

    Collaborators are injected: a cache store, a parameter extractor,
    a transport, a key builder and a decoder. Defaults are an in-memory
    store, the static operation table, an httpx transport, CRC32 keys
    and the JSON decoder.

    Failures are never retried or replaced by defaults:
    ``TransportError``, ``DecodeError``, ``GraphQLError`` and
    ``CacheAccessError`` reach the caller as raised.

    Example::

        with SriClient("https://sri.example.sk", api_key="secret") as client:
            organization = client.get_organization_by_crn("00151866")
            activities = client.get_activities_by_year(organization=organization["id"])
    """

    def __init__(
        self,
        api_url: str,
        api_key: str,
        parameter_extractor: IParameterExtractor | None = None,
        cache: ICacheStore | None = None,
        cache_ttl: int = DEFAULT_CACHE_TTL,
        language: str = DEFAULT_LANGUAGE,
        *,
        transport: ITransport | None = None,
        key_builder: IKeyBuilder | None = None,
        decoder: IDecoder | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_url: Base API URL. Trailing slashes are stripped.
            api_key: Sent as ``X-Api-Key`` with every request.
            parameter_extractor: Provides declared parameter names of
                operations.
            cache: Cache store for REST responses.
            cache_ttl: Seconds a response stays cached.
            language: Sent as ``Accept-Language`` with every request.
            transport: Transport used to send requests.
            key_builder: Builds cache keys from operation arguments.
            decoder: Decodes response bodies.
        """
        self._config = ClientConfig(
            api_url=api_url,
            api_key=api_key,
            cache_ttl=cache_ttl,
            language=language,
        )
        if parameter_extractor is None:
            parameter_extractor = StaticParameterExtractor()
        if cache is None:
            cache = InMemoryCacheStore()
        if transport is None:
            transport = HttpxTransport(self._config.api_url)

        self._parameter_extractor = parameter_extractor
        self._requests = RequestBuilder(self._config, transport)
        self._cache = CacheService(cache, self._config.ttl)
        self._key_builder = key_builder if key_builder is not None else DefaultKeyBuilder()
        self._decoder = decoder if decoder is not None else JsonDecoder()

    @classmethod
    def from_config(cls, config: ClientConfig, **collaborators: Any) -> "SriClient":
        """Create a client from a :class:`ClientConfig`.

        Args:
            config: The client configuration.
            **collaborators: Forwarded to the constructor (``cache``,
                ``transport``, ...).

        Returns:
            A new SriClient.
        """
        return cls(
            config.api_url,
            config.api_key,
            cache_ttl=config.cache_ttl,
            language=config.language,
            **collaborators,
        )

    @classmethod
    def from_env(cls, prefix: str = "SRI_", **collaborators: Any) -> "SriClient":
        """Create a client configured from ``SRI_*`` environment variables."""
        return cls.from_config(ClientConfig.from_env(prefix), **collaborators)

    @property
    def config(self) -> ClientConfig:
        """Get the client configuration."""
        return self._config

    @property
    def cache_stats(self) -> dict[str, int]:
        """Get cache hit and miss counts."""
        return self._cache.stats

    def close(self) -> None:
        """Close the underlying transport."""
        self._requests.close()

    def __enter__(self) -> "SriClient":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    # ------------------------------------------------------------------ #
    # Raw access
    # ------------------------------------------------------------------ #

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
        return self._requests.make_request(path, query=query, body=body, method=method)

    def json_decode(self, data: str | bytes) -> Any:
        """Decode a JSON body.

        Raises:
            DecodeError: If the data is not valid JSON.
        """
        return self._decoder.decode(data)

    def get_graphql(self, query: str) -> Any:
        """Perform a GraphQL request on the API.

        The query string is sent as the POST body. Responses are not
        cached.

        Args:
            query: The GraphQL query.

        Returns:
            The decoded response, including its ``data`` key.

        Raises:
            GraphQLError: If the response reports errors.
            TransportError: If the request fails.
            DecodeError: If the response is not valid JSON.
        """
        response = self.make_request(GRAPHQL_PATH, body=query, method="POST")
        result = self.json_decode(response.text)
        if isinstance(result, dict) and result.get("errors"):
            logger.warning("GraphQL request returned errors: %s", result["errors"])
            raise GraphQLError(result.get("data") or {}, result["errors"])
        return result

    # ------------------------------------------------------------------ #
    # Organizations
    # ------------------------------------------------------------------ #

    def search_organizations(
        self,
        type: int | None = None,
        group: int | None = None,
        title: str | None = None,
    ) -> Any:
        """Search in organizations.

        Args:
            type: Organization type id, sent as ``type.id``.
            group: Organization group id, sent as ``group.id``.
            title: Title to search for.

        Returns:
            The decoded list of organizations.
        """
        return self._fetch_cached(
            SEARCH_ORGANIZATIONS,
            {"type": type, "group": group, "title": title},
        )

    def get_organization_by_crn(self, crn: str) -> dict[str, Any] | None:
        """Get organization by company registration number (ICO).

        An empty ``crn`` returns None without touching the cache or the
        network.

        Returns:
            The first matching organization, or None.
        """
        if not crn:
            return None

        arguments = {"ico": crn}
        key = self._key_builder.build(GET_ORGANIZATION_BY_CRN.namespace, arguments)
        organizations = self._resolve(key, GET_ORGANIZATION_BY_CRN.resource_path(), arguments)

        if isinstance(organizations, list) and organizations:
            return organizations[0]
        return None

    def get_organization_by_id(self, id: int) -> Any:
        """Get organization by id."""
        key = self._key_builder.build_for_identifier(GET_ORGANIZATION_BY_ID.namespace, id)
        return self._resolve(key, GET_ORGANIZATION_BY_ID.resource_path(id))

    def get_organization_categories(
        self,
        level: int | None = None,
        parent: int | None = None,
    ) -> Any:
        """Get strategy organization categories.

        Args:
            level: Category level.
            parent: Parent category id, sent as ``parent.id``.
        """
        return self._fetch_cached(
            GET_ORGANIZATION_CATEGORIES,
            {"level": level, "parent": parent},
        )

    # ------------------------------------------------------------------ #
    # Activities
    # ------------------------------------------------------------------ #

    def get_activities_by_focus(self, organization: int | None = None) -> Any:
        """Get activities grouped by focuses."""
        return self._fetch_cached(GET_ACTIVITIES_BY_FOCUS, {"organization": organization})

    def get_activities_by_year(self, organization: int | None = None) -> Any:
        """Get activities grouped by years."""
        return self._fetch_cached(GET_ACTIVITIES_BY_YEAR, {"organization": organization})

    def get_activities_by_sector_council(self, organization: int | None = None) -> Any:
        """Get activities grouped by sector councils."""
        return self._fetch_cached(
            GET_ACTIVITIES_BY_SECTOR_COUNCIL,
            {"organization": organization},
        )

    def get_activities_timeline(self) -> Any:
        """Get activities timeline."""
        key = self._key_builder.build(GET_ACTIVITIES_TIMELINE.namespace)
        return self._resolve(key, GET_ACTIVITIES_TIMELINE.resource_path())

    def get_activity_detail(self, id: str) -> Any:
        """Get activity detail."""
        key = self._key_builder.build_for_identifier(GET_ACTIVITY_DETAIL.namespace, id)
        return self._resolve(key, GET_ACTIVITY_DETAIL.resource_path(id))

    # ------------------------------------------------------------------ #
    # Private helpers
    # ------------------------------------------------------------------ #

    def _fetch_cached(self, operation: Operation, supplied: dict[str, Any]) -> Any:
        """Resolve an operation whose query comes from its declared parameters."""
        parameter_names = self._parameter_extractor.extract(operation.name)
        arguments = operation.build_arguments(parameter_names, supplied)
        key = self._key_builder.build(operation.namespace, arguments)
        return self._resolve(key, operation.resource_path(), arguments)

    def _resolve(
        self,
        key: str,
        path: str,
        query: dict[str, Any] | None = None,
    ) -> Any:
        """Fetch ``path`` through the cache and decode the body."""

        def fetch() -> str:
            response = self.make_request(path, query=query or None)
            return response.text

        return self.json_decode(self._cache.resolve(key, fetch))
