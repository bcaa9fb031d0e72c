"""Module for Jira issue link operations."""

import logging

from ..models.jira import JiraIssueLinkType
from ..utils.decorators import handle_auth_errors
from .client import JiraClient

logger = logging.getLogger("mcp-jira.jira")


class LinksMixin(JiraClient):
    """Mixin for Jira issue link operations."""

    @handle_auth_errors("Jira API")
    def get_issue_link_types(self) -> list[JiraIssueLinkType]:
        """
        Get all available issue link types.

        Returns:
            List of JiraIssueLinkType objects

        Raises:
            MCPJiraAuthenticationError: If authentication fails
                with the Jira API (401/403)
        """
        response = self._expect_dict(self._get_api3("issueLinkType"), "issue link types")
        return [
            JiraIssueLinkType.from_api_response(link_type)
            for link_type in response.get("issueLinkTypes", [])
        ]

    @handle_auth_errors("Jira API")
    def create_issue_link(
        self, link_type: str, inward_issue_key: str, outward_issue_key: str
    ) -> None:
        """
        Create a link between two issues.

        Args:
            link_type: Name of the link type (e.g. "Relates")
            inward_issue_key: Key of the inward issue
            outward_issue_key: Key of the outward issue
        """
        self._post_api3(
            "issueLink",
            data={
                "type": {"name": link_type},
                "inwardIssue": {"key": inward_issue_key},
                "outwardIssue": {"key": outward_issue_key},
            },
        )
        logger.info(
            f"Linked {outward_issue_key} -> {inward_issue_key} with '{link_type}'"
        )
