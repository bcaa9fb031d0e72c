"""Module for Jira transition operations."""

import logging

from ..models.jira import JiraTransition
from ..utils.decorators import handle_auth_errors
from .client import JiraClient

logger = logging.getLogger("mcp-jira.jira")


class TransitionsMixin(JiraClient):
    """Mixin for Jira transition operations."""

    @handle_auth_errors("Jira API")
    def get_transitions(self, issue_key: str) -> list[JiraTransition]:
        """
        Get the workflow transitions available on an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            List of JiraTransition models
        """
        response = self._expect_dict(
            self._get_api3(f"issue/{issue_key}/transitions"), "get transitions"
        )
        return [
            JiraTransition.from_api_response(transition)
            for transition in response.get("transitions", [])
            if isinstance(transition, dict)
        ]

    @handle_auth_errors("Jira API")
    def transition_issue(self, issue_key: str, transition_id: str) -> None:
        """
        Move an issue through a workflow transition.

        Args:
            issue_key: The issue key
            transition_id: Id of the transition to perform
        """
        self._post_api3(
            f"issue/{issue_key}/transitions",
            data={"transition": {"id": transition_id}},
        )
        logger.info(f"Transitioned {issue_key} with transition {transition_id}")
