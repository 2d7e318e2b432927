"""Pytest configuration for sriclient tests."""

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from sriclient import HttpxTransport, InMemoryCacheStore, SriClient

API_URL = "https://sri.example.sk"
API_KEY = "test-key"


class FakeApi:
    """Records requests and serves canned responses by method and path."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], httpx.Response] = {}

    def add(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        text: str | None = None,
        status_code: int = 200,
    ) -> None:
        if text is not None:
            response = httpx.Response(status_code, text=text)
        else:
            response = httpx.Response(status_code, json=json)
        self._routes[(method, path)] = response

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self._routes.get((request.method, request.url.path))
        if response is None:
            return httpx.Response(404, text="not found")
        return httpx.Response(
            response.status_code,
            content=response.content,
            headers=response.headers,
        )

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def api() -> FakeApi:
    """Create a fake API for testing."""
    return FakeApi()


@pytest.fixture
def transport(api: FakeApi) -> HttpxTransport:
    """Create a transport routed to the fake API."""
    http = httpx.Client(
        base_url=API_URL + "/",
        transport=httpx.MockTransport(api.handler),
    )
    return HttpxTransport(API_URL, client=http)


@pytest.fixture
def store() -> InMemoryCacheStore:
    """Create an in-memory store for testing."""
    return InMemoryCacheStore(maxsize=100)


@pytest.fixture
def make_client(
    transport: HttpxTransport, store: InMemoryCacheStore
) -> Callable[..., SriClient]:
    """Create a factory for clients wired to the fake API."""

    def factory(**kwargs: Any) -> SriClient:
        kwargs.setdefault("cache", store)
        return SriClient(API_URL, API_KEY, transport=transport, **kwargs)

    return factory


@pytest.fixture
def client(make_client: Callable[..., SriClient]) -> SriClient:
    """Create a client with default settings."""
    return make_client()
