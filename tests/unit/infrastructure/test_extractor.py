"""Tests for StaticParameterExtractor."""

import pytest

from sriclient import OPERATIONS, Operation
from sriclient.infrastructure.extractors.static import StaticParameterExtractor


class TestStaticParameterExtractor:
    """Tests for StaticParameterExtractor."""

    def test_default_table(self) -> None:
        """Test lookups in the client's operation table."""
        extractor = StaticParameterExtractor()

        assert extractor.extract("search_organizations") == ["type", "group", "title"]
        assert extractor.extract("get_organization_categories") == ["level", "parent"]
        assert extractor.extract("get_activities_by_year") == ["organization"]
        assert extractor.extract("get_activities_timeline") == []

    def test_custom_table(self) -> None:
        """Test lookups in a custom table."""
        operation = Operation(name="things", namespace="things", path="api/things", parameters=("q",))
        extractor = StaticParameterExtractor({"things": operation})

        assert extractor.extract("things") == ["q"]

    def test_unknown_operation(self) -> None:
        """Test that unknown operations raise KeyError."""
        with pytest.raises(KeyError, match="nope"):
            StaticParameterExtractor().extract("nope")

    def test_table_namespaces(self) -> None:
        """Test the namespaces shared with other API clients."""
        namespaces = {name: operation.namespace for name, operation in OPERATIONS.items()}

        assert namespaces["search_organizations"] == "search-organization"
        assert namespaces["get_organization_by_crn"] == "search-organization"
        assert namespaces["get_organization_by_id"] == "get-organization"
        assert namespaces["get_activities_by_focus"] == "activities-by-focus"
        assert namespaces["get_activities_by_year"] == "activities-by-year"
        assert namespaces["get_activities_by_sector_council"] == "activities-by-sector-council"
        assert namespaces["get_activities_timeline"] == "get-activities-timeline"
        assert namespaces["get_activity_detail"] == "get-activities-timeline"
