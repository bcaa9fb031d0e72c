"""
Jira comment models.

This module provides Pydantic models for Jira comments.
"""

import logging
from typing import Any

from ..base import EMPTY_STRING, UNKNOWN, ApiModel
from .common import JiraUser

logger = logging.getLogger("mcp-jira.models")


class JiraComment(ApiModel):
    """
    Model representing a Jira issue comment.

    The body is kept as the raw ADF document returned by the v3 API.
    """

    id: str = EMPTY_STRING
    body: Any = None
    created: str = EMPTY_STRING
    author: JiraUser | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraComment":
        """
        Create a JiraComment from a Jira API response.

        Args:
            data: The comment data from the Jira API

        Returns:
            A JiraComment instance
        """
        if not data:
            return cls()

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        author_data = data.get("author")
        author = JiraUser.from_api_response(author_data) if author_data else None

        comment_id = data.get("id")
        return cls(
            id=str(comment_id) if comment_id is not None else EMPTY_STRING,
            body=data.get("body"),
            created=data.get("created") or EMPTY_STRING,
            author=author,
        )

    @property
    def author_name(self) -> str:
        if self.author and self.author.display_name:
            return self.author.display_name
        return UNKNOWN
