"""Tests for the Jira field catalog models."""

import pytest

from mcp_jira.models.jira.field import CustomFieldMap, JiraField
from tests.utils.factories import JiraFieldFactory


@pytest.fixture
def catalog() -> list[JiraField]:
    return [JiraField.from_api_response(f) for f in JiraFieldFactory.catalog()]


class TestJiraField:
    def test_from_api_response(self):
        jira_field = JiraField.from_api_response(
            JiraFieldFactory.create(
                "customfield_10001", "Story Points", custom=True, schema_type="number"
            )
        )
        assert jira_field.id == "customfield_10001"
        assert jira_field.name == "Story Points"
        assert jira_field.custom is True
        assert jira_field.schema_type == "number"

    def test_without_schema(self):
        jira_field = JiraField.from_api_response(
            JiraFieldFactory.create("labels", "Labels", schema_type=None)
        )
        assert jira_field.schema_type is None
        assert jira_field.custom is False

    def test_empty_payload(self):
        assert JiraField.from_api_response({}).id == ""


class TestCustomFieldMap:
    def test_only_custom_fields_are_mapped(self, catalog):
        field_map = CustomFieldMap.from_catalog(catalog)

        assert dict(field_map.by_name) == {
            "Story Points": "customfield_10001",
            "Team": "customfield_10002",
        }
        assert len(field_map) == 2
        assert "Summary" not in field_map

    def test_single_custom_field_catalog(self):
        fields = [
            JiraField(id="summary", name="Summary"),
            JiraField(id="customfield_10001", name="Story Points", custom=True),
        ]
        field_map = CustomFieldMap.from_catalog(fields)
        assert dict(field_map.by_name) == {"Story Points": "customfield_10001"}

    def test_map_is_read_only(self, catalog):
        field_map = CustomFieldMap.from_catalog(catalog)
        with pytest.raises(TypeError):
            field_map.by_name["Other"] = "customfield_1"  # type: ignore[index]

    def test_empty_map(self):
        field_map = CustomFieldMap()
        assert len(field_map) == 0
        assert field_map.detail_fields() == {}

    def test_highlighted_and_missing(self, catalog):
        field_map = CustomFieldMap.from_catalog(catalog, ["Team", "Nope"])

        assert field_map.highlighted == ("Team",)
        assert field_map.missing == ("Nope",)
        assert field_map.detail_fields() == {"Team": "customfield_10002"}

    def test_detail_fields_when_no_configured_name_exists(self, catalog):
        field_map = CustomFieldMap.from_catalog(catalog, ["Sprint Goal"])

        assert field_map.highlighted == ()
        assert field_map.missing == ("Sprint Goal",)
        assert field_map.detail_fields() == {}

    def test_detail_fields_default_to_all(self, catalog):
        field_map = CustomFieldMap.from_catalog(catalog)
        assert field_map.detail_fields() == {
            "Story Points": "customfield_10001",
            "Team": "customfield_10002",
        }

    def test_resolve(self, catalog):
        field_map = CustomFieldMap.from_catalog(catalog)
        assert field_map.resolve("Story Points") == "customfield_10001"
        assert field_map.resolve("priority") == "priority"

    def test_resolve_fields(self, catalog):
        field_map = CustomFieldMap.from_catalog(catalog)

        payload, described = field_map.resolve_fields(
            {"Story Points": 5, "priority": {"name": "High"}}
        )

        assert payload == {"customfield_10001": 5, "priority": {"name": "High"}}
        assert described == ["Story Points (customfield_10001)", "priority"]

    def test_resolve_fields_skips_keys(self, catalog):
        field_map = CustomFieldMap.from_catalog(catalog)

        payload, described = field_map.resolve_fields(
            {"summary": "x", "Team": {"value": "A"}}, skip=("summary",)
        )

        assert payload == {"customfield_10002": {"value": "A"}}
        assert described == ["Team (customfield_10002)"]
