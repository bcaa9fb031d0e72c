"""
Common Jira entity models.

This module provides Pydantic models for small Jira entities that appear
inside other payloads: users, statuses and issue types.
"""

import logging
from typing import Any

from ..base import EMPTY_STRING, ApiModel

logger = logging.getLogger("mcp-jira.models")


class JiraUser(ApiModel):
    """
    Model representing a Jira user.
    """

    account_id: str | None = None
    display_name: str | None = None
    email: str | None = None
    active: bool = True

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraUser":
        """
        Create a JiraUser from a Jira API response.

        Args:
            data: The user data from the Jira API

        Returns:
            A JiraUser instance
        """
        if not data or not isinstance(data, dict):
            return cls()

        return cls(
            account_id=data.get("accountId"),
            display_name=data.get("displayName"),
            email=data.get("emailAddress"),
            # Only an explicit False marks a user inactive
            active=data.get("active") is not False,
        )


class JiraStatus(ApiModel):
    """
    Model representing a Jira issue status with its category.
    """

    name: str = EMPTY_STRING
    category: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraStatus":
        if not data or not isinstance(data, dict):
            return cls()

        category = data.get("statusCategory")
        return cls(
            name=data.get("name") or EMPTY_STRING,
            category=category.get("name") if isinstance(category, dict) else None,
        )


class JiraIssueType(ApiModel):
    """
    Model representing a Jira issue type.
    """

    id: str | None = None
    name: str = EMPTY_STRING
    subtask: bool = False

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraIssueType":
        if not data or not isinstance(data, dict):
            return cls()

        issue_type_id = data.get("id")
        return cls(
            id=str(issue_type_id) if issue_type_id is not None else None,
            name=data.get("name") or EMPTY_STRING,
            subtask=bool(data.get("subtask", False)),
        )
