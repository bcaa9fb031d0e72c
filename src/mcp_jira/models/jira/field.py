"""
Jira field catalog models.

This module provides the ``JiraField`` model for entries of the field catalog
and ``CustomFieldMap``, the read-only name to id table used to translate
human field names in create and update requests.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from ..base import EMPTY_STRING, ApiModel

logger = logging.getLogger("mcp-jira.models")


class JiraField(ApiModel):
    """
    Model representing an entry of the Jira field catalog.
    """

    id: str = EMPTY_STRING
    name: str = EMPTY_STRING
    custom: bool = False
    schema_type: str | None = None
    description: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraField":
        """
        Create a JiraField from a Jira API response.

        Args:
            data: One element of the ``GET /field`` response

        Returns:
            A JiraField instance
        """
        if not data or not isinstance(data, dict):
            return cls()

        schema = data.get("schema")
        schema_type = schema.get("type") if isinstance(schema, dict) else None
        description = data.get("description")

        return cls(
            id=str(data.get("id") or EMPTY_STRING),
            name=str(data.get("name") or EMPTY_STRING),
            custom=bool(data.get("custom", False)),
            schema_type=schema_type,
            description=description if isinstance(description, str) else None,
        )


def _frozen(mapping: Mapping[str, str] | None = None) -> Mapping[str, str]:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True)
class CustomFieldMap:
    """
    Read-only mapping of custom field names to field ids.

    Built once at startup from the field catalog and handed to every tool
    through the application context. ``highlighted`` holds the configured
    field names (``JIRA_CUSTOM_FIELDS``) that exist in the catalog;
    ``missing`` holds the configured names that do not.
    """

    by_name: Mapping[str, str] = field(default_factory=_frozen)
    highlighted: tuple[str, ...] = ()
    missing: tuple[str, ...] = ()

    @classmethod
    def from_catalog(
        cls, fields: Iterable[JiraField], highlighted: Iterable[str] = ()
    ) -> "CustomFieldMap":
        """Build the map from catalog entries, keeping named custom fields only."""
        by_name: dict[str, str] = {}
        for jira_field in fields:
            if jira_field.custom and jira_field.name and jira_field.id:
                by_name[jira_field.name] = jira_field.id

        found: list[str] = []
        missing: list[str] = []
        for name in highlighted:
            (found if name in by_name else missing).append(name)

        return cls(
            by_name=_frozen(by_name),
            highlighted=tuple(found),
            missing=tuple(missing),
        )

    def __len__(self) -> int:
        return len(self.by_name)

    def __contains__(self, name: object) -> bool:
        return name in self.by_name

    def resolve(self, name: str) -> str:
        """Return the field id for a custom field name, or the name unchanged."""
        return self.by_name.get(name, name)

    def detail_fields(self) -> dict[str, str]:
        """
        Custom fields fetched and shown with ticket details, as name to id.

        When field names were configured only the ones found in the catalog
        are used, even if none were found. Otherwise every known custom field.
        """
        if self.highlighted or self.missing:
            return {name: self.by_name[name] for name in self.highlighted}
        return dict(self.by_name)

    def resolve_fields(
        self, fields: Mapping[str, Any], skip: Iterable[str] = ()
    ) -> tuple[dict[str, Any], list[str]]:
        """
        Translate a ``{name: value}`` mapping into a Jira fields payload.

        Args:
            fields: Field values keyed by custom field name or field id
            skip: Keys that must not be sent (they are logged and dropped)

        Returns:
            The payload keyed by field id, and a description of each sent key
            (``"Story Points (customfield_10016)"`` for resolved names)
        """
        skipped = set(skip)
        payload: dict[str, Any] = {}
        described: list[str] = []
        for key, value in fields.items():
            if key in skipped:
                logger.warning(
                    f"Ignoring core field '{key}' in additional fields; "
                    "use the dedicated argument instead"
                )
                continue
            field_id = self.resolve(key)
            payload[field_id] = value
            described.append(f"{key} ({field_id})" if field_id != key else key)
        return payload, described
