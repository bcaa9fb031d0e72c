"""
Pydantic models for Jira API responses.
"""

from .base import ApiModel
from .jira import (
    CustomFieldMap,
    JiraComment,
    JiraField,
    JiraFilter,
    JiraIssue,
    JiraIssueLinkType,
    JiraIssueType,
    JiraLinkedIssue,
    JiraSearchResult,
    JiraStatus,
    JiraTransition,
    JiraUser,
)

__all__ = [
    "ApiModel",
    "CustomFieldMap",
    "JiraComment",
    "JiraField",
    "JiraFilter",
    "JiraIssue",
    "JiraIssueLinkType",
    "JiraIssueType",
    "JiraLinkedIssue",
    "JiraSearchResult",
    "JiraStatus",
    "JiraTransition",
    "JiraUser",
]
