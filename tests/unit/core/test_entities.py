"""Tests for core entities."""

from datetime import datetime, timedelta, timezone

import pytest

from sriclient import ConfigurationError
from sriclient.core.entities import CacheEntry, CacheKey, ClientConfig, Operation


class TestCacheEntry:
    """Tests for CacheEntry entity."""

    def test_create_cache_entry(self) -> None:
        """Test creating a cache entry with factory method."""
        entry = CacheEntry.create(key="k", value="[]", ttl=timedelta(minutes=5))

        assert entry.key == "k"
        assert entry.value == "[]"
        assert entry.ttl == timedelta(minutes=5)
        assert entry.expires_at == entry.created_at + timedelta(minutes=5)
        assert not entry.is_expired

    def test_cache_entry_is_expired(self) -> None:
        """Test is_expired property."""
        past_time = datetime.now(timezone.utc) - timedelta(hours=1)
        entry = CacheEntry(
            key="k",
            value="[]",
            created_at=past_time,
            ttl=timedelta(minutes=5),
        )

        assert entry.is_expired


class TestCacheKey:
    """Tests for CacheKey value object."""

    def test_str_with_digest(self) -> None:
        """Test key string with a digest."""
        assert str(CacheKey(namespace="get-organization", digest="123")) == (
            "get-organization-123"
        )

    def test_str_without_digest(self) -> None:
        """Test key string for a bare namespace."""
        assert str(CacheKey(namespace="get-activities-timeline")) == (
            "get-activities-timeline"
        )

    def test_from_arguments_ignores_order(self) -> None:
        """Test that argument order does not change the key."""
        key1 = CacheKey.from_arguments("ns", {"a": 1, "b": 2})
        key2 = CacheKey.from_arguments("ns", {"b": 2, "a": 1})

        assert key1 == key2

    def test_custom_hash_func(self) -> None:
        """Test a custom hash function."""
        key = CacheKey.from_identifier("ns", 5, hash_func=lambda text: f"<{text}>")

        assert str(key) == "ns-<5>"


class TestOperation:
    """Tests for Operation entity."""

    @pytest.fixture
    def operation(self) -> Operation:
        """Create an operation for testing."""
        return Operation(
            name="search",
            namespace="search",
            path="api/things/{id}",
            parameters=("type", "title"),
            relations={"type": "type.id"},
        )

    def test_build_arguments_renames_relations(self, operation: Operation) -> None:
        """Test that relation parameters use their dotted key."""
        arguments = operation.build_arguments(
            operation.parameters, {"type": 5, "title": "x"}
        )

        assert arguments == {"type.id": 5, "title": "x"}

    def test_build_arguments_drops_omitted_and_falsy(
        self, operation: Operation
    ) -> None:
        """Test that None, 0 and empty strings are dropped."""
        assert operation.build_arguments(
            operation.parameters, {"type": 0, "title": None}
        ) == {}
        assert operation.build_arguments(operation.parameters, {"title": ""}) == {}

    def test_build_arguments_only_declared(self, operation: Operation) -> None:
        """Test that undeclared names are ignored."""
        arguments = operation.build_arguments(("title",), {"type": 5, "title": "x"})

        assert arguments == {"title": "x"}

    def test_resource_path(self, operation: Operation) -> None:
        """Test filling in the path identifier."""
        assert operation.resource_path(7) == "api/things/7"


class TestClientConfig:
    """Tests for ClientConfig entity."""

    def test_defaults(self) -> None:
        """Test default TTL and language."""
        config = ClientConfig(api_url="https://sri.example.sk/", api_key="k")

        assert config.api_url == "https://sri.example.sk"
        assert config.cache_ttl == 900
        assert config.ttl == timedelta(minutes=15)
        assert config.language == "sk_SK"

    def test_immutable(self) -> None:
        """Test that the configuration cannot be changed."""
        config = ClientConfig(api_url="https://sri.example.sk", api_key="k")

        with pytest.raises(AttributeError):
            config.api_key = "other"  # type: ignore[misc]

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test loading from environment variables."""
        monkeypatch.setenv("SRI_API_URL", "https://sri.example.sk")
        monkeypatch.setenv("SRI_API_KEY", "secret")
        monkeypatch.setenv("SRI_LANGUAGE", "en_US")
        monkeypatch.delenv("SRI_CACHE_TTL", raising=False)

        config = ClientConfig.from_env()

        assert config.api_key == "secret"
        assert config.language == "en_US"
        assert config.cache_ttl == 900

    def test_from_env_missing_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that a missing API key is reported."""
        monkeypatch.setenv("SRI_API_URL", "https://sri.example.sk")
        monkeypatch.delenv("SRI_API_KEY", raising=False)

        with pytest.raises(ConfigurationError, match="SRI_API_KEY"):
            ClientConfig.from_env()

    @pytest.mark.parametrize("value", ["soon", "-1"])
    def test_from_env_invalid_ttl(
        self, monkeypatch: pytest.MonkeyPatch, value: str
    ) -> None:
        """Test that an invalid TTL is reported."""
        monkeypatch.setenv("SRI_API_URL", "https://sri.example.sk")
        monkeypatch.setenv("SRI_API_KEY", "secret")
        monkeypatch.setenv("SRI_CACHE_TTL", value)

        with pytest.raises(ConfigurationError, match="SRI_CACHE_TTL"):
            ClientConfig.from_env()
