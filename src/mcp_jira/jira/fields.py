"""Module for Jira field operations."""

import logging
from collections.abc import Iterable

from ..models.jira import CustomFieldMap, JiraField
from ..utils.decorators import handle_auth_errors
from .client import JiraClient

logger = logging.getLogger("mcp-jira.jira")


class FieldsMixin(JiraClient):
    """Mixin for Jira field operations.

    Field ids in Jira differ across instances for custom fields, so the
    catalog is read once at startup to translate human field names.
    """

    @handle_auth_errors("Jira API")
    def get_fields(self) -> list[JiraField]:
        """
        Get all available fields from Jira.

        Returns:
            List of JiraField models, standard and custom
        """
        response = self._get_api3("field")
        if not isinstance(response, list):
            msg = f"Unexpected return value type from field catalog: {type(response)}"
            logger.error(msg)
            raise TypeError(msg)
        return [JiraField.from_api_response(item) for item in response]

    def load_custom_field_map(self, highlighted: Iterable[str] = ()) -> CustomFieldMap:
        """
        Build the custom field map from the catalog.

        A failure to read the catalog is logged and yields an empty map, so
        the server stays usable for standard fields.

        Args:
            highlighted: Configured custom field names to show in ticket details

        Returns:
            CustomFieldMap for the instance
        """
        highlighted = tuple(highlighted)
        try:
            fields = self.get_fields()
        except Exception as e:
            logger.error(f"Failed to load Jira field catalog: {e}")
            return CustomFieldMap.from_catalog([], highlighted)

        field_map = CustomFieldMap.from_catalog(fields, highlighted)
        logger.info(f"Mapped {len(field_map)} custom fields")
        if highlighted:
            logger.info(f"Configured custom fields: {', '.join(highlighted)}")
        for name in field_map.missing:
            logger.warning(f"Configured custom field '{name}' was not found in Jira")
        return field_map
