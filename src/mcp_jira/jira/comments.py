"""Module for Jira comment operations."""

import logging

from ..models.jira import JiraComment, text_to_adf
from ..utils.decorators import handle_auth_errors
from .client import JiraClient

logger = logging.getLogger("mcp-jira.jira")


class CommentsMixin(JiraClient):
    """Mixin for Jira comment operations."""

    @handle_auth_errors("Jira API")
    def add_comment(self, issue_key: str, comment: str) -> JiraComment:
        """
        Add a plain-text comment to an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            comment: Comment text, sent as a one-paragraph ADF document

        Returns:
            The created comment
        """
        response = self._post_api3(
            f"issue/{issue_key}/comment", data={"body": text_to_adf(comment)}
        )
        return JiraComment.from_api_response(response if isinstance(response, dict) else {})
