"""Module for Jira issue operations."""

import logging
from collections.abc import Iterable
from typing import Any

from requests.exceptions import HTTPError

from ..models.jira import JiraIssue, JiraIssueType
from ..utils.decorators import handle_auth_errors
from .client import JiraClient

logger = logging.getLogger("mcp-jira.jira")


class IssuesMixin(JiraClient):
    """Mixin for Jira issue operations."""

    @handle_auth_errors("Jira API")
    def get_issue(
        self,
        issue_key: str,
        fields: Iterable[str],
        custom_field_ids: Iterable[str] = (),
    ) -> JiraIssue:
        """
        Get a Jira issue by key.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            fields: Standard fields to fetch
            custom_field_ids: Custom field ids to fetch and keep on the model

        Returns:
            JiraIssue model
        """
        custom_field_ids = list(custom_field_ids)
        requested = [*fields, *custom_field_ids]
        response = self._expect_dict(
            self._get_api3(f"issue/{issue_key}", params={"fields": ",".join(requested)}),
            "get issue",
        )
        return JiraIssue.from_api_response(response, custom_field_ids=custom_field_ids)

    @handle_auth_errors("Jira API")
    def get_issue_labels(self, issue_key: str) -> list[str]:
        """Get the labels currently set on an issue."""
        return self.get_issue(issue_key, fields=["labels"]).labels

    @handle_auth_errors("Jira API")
    def edit_issue(self, issue_key: str, fields: dict[str, Any]) -> None:
        """
        Update fields of an issue.

        Args:
            issue_key: The issue key
            fields: Field values keyed by field id
        """
        logger.debug(f"Editing {issue_key} fields: {list(fields)}")
        self._put_api3(f"issue/{issue_key}", data={"fields": fields})

    @handle_auth_errors("Jira API")
    def create_issue(self, fields: dict[str, Any]) -> str:
        """
        Create an issue.

        Args:
            fields: Complete fields payload, including project and issuetype

        Returns:
            The key of the created issue
        """
        response = self._expect_dict(
            self._post_api3("issue", data={"fields": fields}), "create issue"
        )
        issue_key = response.get("key")
        if not issue_key:
            msg = f"Jira did not return a key for the created issue: {response}"
            raise ValueError(msg)
        logger.info(f"Created issue {issue_key}")
        return issue_key

    @handle_auth_errors("Jira API")
    def get_project(self, project_key: str) -> dict[str, Any] | None:
        """
        Get a project by key.

        Returns:
            The project payload, or None if the project does not exist
        """
        try:
            response = self._get_api3(f"project/{project_key}")
        except HTTPError as http_err:
            if http_err.response is not None and http_err.response.status_code == 404:
                logger.info(f"Project {project_key} not found")
                return None
            raise
        return response if isinstance(response, dict) else None

    @handle_auth_errors("Jira API")
    def get_create_issue_types(self, project_id_or_key: str) -> list[JiraIssueType]:
        """
        Get the issue types that can be created in a project.

        Args:
            project_id_or_key: Project id or key

        Returns:
            List of JiraIssueType models
        """
        response = self._expect_dict(
            self._get_api3(
                f"issue/createmeta/{project_id_or_key}/issuetypes",
                params={"maxResults": 200},
            ),
            "create meta",
        )
        issue_types = response.get("issueTypes")
        if issue_types is None:
            issue_types = response.get("values") or []
        return [JiraIssueType.from_api_response(item) for item in issue_types]
