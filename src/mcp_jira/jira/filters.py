"""Module for Jira saved filter operations."""

import logging

from ..models.jira import JiraFilter
from ..utils.decorators import handle_auth_errors
from .client import JiraClient

logger = logging.getLogger("mcp-jira.jira")

FILTER_PAGE_SIZE = 50


class FiltersMixin(JiraClient):
    """Mixin for Jira saved filter operations."""

    @handle_auth_errors("Jira API")
    def get_filters(self, page_size: int = FILTER_PAGE_SIZE) -> list[JiraFilter]:
        """
        Get every filter visible to the user, following pagination.

        Returns:
            List of JiraFilter models including their JQL and view URL
        """
        filters: list[JiraFilter] = []
        start_at = 0
        while True:
            response = self._expect_dict(
                self._get_api3(
                    "filter/search",
                    params={
                        "expand": "jql,viewUrl",
                        "startAt": start_at,
                        "maxResults": page_size,
                    },
                ),
                "filter search",
            )
            values = response.get("values") or []
            filters.extend(JiraFilter.from_api_response(value) for value in values)

            # A missing isLast is treated as the last page
            if response.get("isLast", True) or len(values) < page_size:
                break
            start_at += len(values)

        logger.debug(f"Fetched {len(filters)} filters")
        return filters
