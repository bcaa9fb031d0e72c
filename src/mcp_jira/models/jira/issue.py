"""
Jira issue models.

This module provides the ``JiraIssue`` model built from the v3 issue payload.
Rich-text fields (description, comment bodies) are kept as raw ADF and only
flattened at display time.
"""

import logging
from collections.abc import Iterable
from typing import Any

from pydantic import Field

from ..base import EMPTY_STRING, UNASSIGNED, ApiModel
from .comment import JiraComment
from .common import JiraIssueType, JiraStatus, JiraUser
from .link import JiraLinkedIssue

logger = logging.getLogger("mcp-jira.models")

# Standard fields requested by ticket details
DETAIL_FIELDS = (
    "summary",
    "status",
    "assignee",
    "description",
    "created",
    "updated",
    "issuelinks",
    "comment",
    "parent",
    "issuetype",
    "subtasks",
    "labels",
)


class JiraIssue(ApiModel):
    """
    Model representing a Jira issue.
    """

    id: str = EMPTY_STRING
    key: str = EMPTY_STRING
    summary: str = EMPTY_STRING
    description: Any = None
    status: JiraStatus | None = None
    issue_type: JiraIssueType | None = None
    assignee: JiraUser | None = None
    labels: list[str] = Field(default_factory=list)
    parent: JiraLinkedIssue | None = None
    linked_issues: list[JiraLinkedIssue] = Field(default_factory=list)
    subtasks: list[JiraLinkedIssue] = Field(default_factory=list)
    comments: list[JiraComment] = Field(default_factory=list)
    created: str = EMPTY_STRING
    updated: str = EMPTY_STRING
    project_id: str | None = None
    project_key: str | None = None
    custom_fields: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraIssue":
        """
        Create a JiraIssue from a Jira API response.

        Args:
            data: The issue data from the Jira API
            **kwargs: ``custom_field_ids`` selects which raw custom field
                values to keep, keyed by field id

        Returns:
            A JiraIssue instance
        """
        if not data:
            return cls()

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        fields = data.get("fields") or {}
        if not isinstance(fields, dict):
            fields = {}

        custom_field_ids: Iterable[str] = kwargs.get("custom_field_ids") or ()

        comment_data = fields.get("comment")
        raw_comments = (
            comment_data.get("comments", []) if isinstance(comment_data, dict) else []
        )

        linked_issues = [
            linked
            for linked in (
                JiraLinkedIssue.from_issue_link(link)
                for link in fields.get("issuelinks") or []
            )
            if linked is not None
        ]

        project = fields.get("project")
        labels = fields.get("labels")

        issue_id = data.get("id")
        return cls(
            id=str(issue_id) if issue_id is not None else EMPTY_STRING,
            key=data.get("key") or EMPTY_STRING,
            summary=fields.get("summary") or EMPTY_STRING,
            description=fields.get("description"),
            status=JiraStatus.from_api_response(fields["status"])
            if fields.get("status")
            else None,
            issue_type=JiraIssueType.from_api_response(fields["issuetype"])
            if fields.get("issuetype")
            else None,
            assignee=JiraUser.from_api_response(fields["assignee"])
            if fields.get("assignee")
            else None,
            labels=[label for label in labels if isinstance(label, str)]
            if isinstance(labels, list)
            else [],
            parent=JiraLinkedIssue.from_api_response(fields["parent"])
            if fields.get("parent")
            else None,
            linked_issues=linked_issues,
            subtasks=[
                JiraLinkedIssue.from_api_response(subtask)
                for subtask in fields.get("subtasks") or []
            ],
            comments=[JiraComment.from_api_response(c) for c in raw_comments],
            created=fields.get("created") or EMPTY_STRING,
            updated=fields.get("updated") or EMPTY_STRING,
            project_id=str(project["id"])
            if isinstance(project, dict) and project.get("id") is not None
            else None,
            project_key=project.get("key") if isinstance(project, dict) else None,
            custom_fields={
                field_id: fields.get(field_id) for field_id in custom_field_ids
            },
        )

    @property
    def assignee_name(self) -> str:
        if self.assignee and self.assignee.display_name:
            return self.assignee.display_name
        return UNASSIGNED

    @property
    def status_name(self) -> str:
        return self.status.name if self.status else EMPTY_STRING

    @property
    def issue_type_name(self) -> str:
        return self.issue_type.name if self.issue_type else EMPTY_STRING
