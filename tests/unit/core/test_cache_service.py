"""Tests for CacheService."""

from datetime import timedelta

import pytest

from sriclient import CacheService, InMemoryCacheStore, TransportError


@pytest.fixture
def cache_service() -> CacheService:
    """Create a cache service for testing."""
    return CacheService(store=InMemoryCacheStore(maxsize=100), ttl=timedelta(minutes=5))


class TestCacheService:
    """Tests for CacheService."""

    def test_miss_fetches_and_stores(self, cache_service: CacheService) -> None:
        """Test that a miss calls fetch once and caches the result."""
        calls: list[str] = []

        def fetch() -> str:
            calls.append("fetch")
            return '{"id": 1}'

        assert cache_service.resolve("k", fetch) == '{"id": 1}'
        assert cache_service.resolve("k", fetch) == '{"id": 1}'
        assert calls == ["fetch"]

    def test_stats(self, cache_service: CacheService) -> None:
        """Test hit and miss counters."""
        cache_service.resolve("a", lambda: "1")
        cache_service.resolve("a", lambda: "1")
        cache_service.resolve("b", lambda: "2")

        assert cache_service.stats == {"hits": 1, "misses": 2, "total": 3}

    def test_fetch_error_propagates(self, cache_service: CacheService) -> None:
        """Test that fetch failures reach the caller unchanged."""

        def fetch() -> str:
            raise TransportError("down")

        with pytest.raises(TransportError):
            cache_service.resolve("k", fetch)

        assert cache_service.resolve("k", lambda: "later") == "later"

    def test_ttl(self, cache_service: CacheService) -> None:
        """Test the configured TTL."""
        assert cache_service.ttl == timedelta(minutes=5)
