"""
Jira search result models.

This module provides Pydantic models for Jira search (JQL) results.
"""

import logging
from typing import Any

from pydantic import Field

from ..base import ApiModel
from .issue import JiraIssue

logger = logging.getLogger("mcp-jira.models")


class JiraSearchResult(ApiModel):
    """
    Model representing one page of a Jira search (JQL) result.

    The enhanced search API pages with tokens and does not return a total, so
    ``total`` is filled from the approximate count endpoint and stays None
    when that count is unavailable.
    """

    total: int | None = None
    start_at: int = 0
    max_results: int = 0
    issues: list[JiraIssue] = Field(default_factory=list)

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraSearchResult":
        """
        Create a JiraSearchResult from a search response.

        Args:
            data: A dict with ``issues`` and optionally ``total``, ``startAt``
                and ``maxResults``

        Returns:
            A JiraSearchResult instance
        """
        if not data:
            return cls()

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        issues = []
        issues_data = data.get("issues", [])
        if isinstance(issues_data, list):
            for issue_data in issues_data:
                if issue_data:
                    issues.append(JiraIssue.from_api_response(issue_data))

        raw_total = data.get("total")
        try:
            total = int(raw_total) if raw_total is not None else None
        except (ValueError, TypeError):
            total = None

        return cls(
            total=total,
            start_at=int(data.get("startAt") or 0),
            max_results=int(data.get("maxResults") or 0),
            issues=issues,
        )
