"""
Jira issue link models.
"""

from typing import Any

from ..base import EMPTY_STRING, ApiModel
from .common import JiraIssueType, JiraStatus


class JiraIssueLinkType(ApiModel):
    """
    Model representing a Jira issue link type (e.g. "Relates", "Blocks").
    """

    id: str = EMPTY_STRING
    name: str = EMPTY_STRING
    inward: str = EMPTY_STRING
    outward: str = EMPTY_STRING

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraIssueLinkType":
        if not data or not isinstance(data, dict):
            return cls()

        return cls(
            id=str(data.get("id") or EMPTY_STRING),
            name=data.get("name") or EMPTY_STRING,
            inward=data.get("inward") or EMPTY_STRING,
            outward=data.get("outward") or EMPTY_STRING,
        )

    def matches(self, relationship: str) -> bool:
        """Return True if the name or either direction equals relationship."""
        wanted = relationship.lower()
        return wanted in (self.name.lower(), self.inward.lower(), self.outward.lower())


class JiraLinkedIssue(ApiModel):
    """
    Model representing an issue referenced from another issue: a linked
    issue, a sub-task or the parent.
    """

    key: str = EMPTY_STRING
    summary: str = EMPTY_STRING
    issue_type: JiraIssueType | None = None
    status: JiraStatus | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraLinkedIssue":
        if not data or not isinstance(data, dict):
            return cls()

        fields = data.get("fields") or {}
        return cls(
            key=data.get("key") or EMPTY_STRING,
            summary=fields.get("summary") or EMPTY_STRING,
            issue_type=JiraIssueType.from_api_response(fields.get("issuetype"))
            if fields.get("issuetype")
            else None,
            status=JiraStatus.from_api_response(fields.get("status"))
            if fields.get("status")
            else None,
        )

    @classmethod
    def from_issue_link(cls, link: dict[str, Any]) -> "JiraLinkedIssue | None":
        """Extract the other end of an ``issuelinks`` entry."""
        if not isinstance(link, dict):
            return None
        other = link.get("inwardIssue") or link.get("outwardIssue")
        return cls.from_api_response(other) if other else None
