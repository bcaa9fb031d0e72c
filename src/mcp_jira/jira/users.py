"""Module for Jira user operations."""

import logging

from ..models.jira import JiraUser
from ..utils.decorators import handle_auth_errors
from .client import JiraClient

logger = logging.getLogger("mcp-jira.jira")


class UsersMixin(JiraClient):
    """Mixin for Jira user operations."""

    @handle_auth_errors("Jira API")
    def find_users(
        self, query: str = "", start_at: int = 0, max_results: int = 50
    ) -> list[JiraUser]:
        """
        Search users by display name, email or other attributes.

        Args:
            query: Search string; an empty string matches every user
            start_at: Index of the first user to return
            max_results: Maximum number of users to return

        Returns:
            List of JiraUser models
        """
        response = self._get_api3(
            "user/search",
            params={"query": query, "startAt": start_at, "maxResults": max_results},
        )
        if not isinstance(response, list):
            msg = f"Unexpected return value type from user search: {type(response)}"
            logger.error(msg)
            raise TypeError(msg)
        return [JiraUser.from_api_response(user) for user in response]

    @handle_auth_errors("Jira API")
    def assign_issue(self, issue_key: str, account_id: str) -> None:
        """
        Assign an issue to a user.

        Args:
            issue_key: The issue key
            account_id: Account id of the assignee
        """
        self._put_api3(f"issue/{issue_key}/assignee", data={"accountId": account_id})
        logger.info(f"Assigned {issue_key} to {account_id}")
