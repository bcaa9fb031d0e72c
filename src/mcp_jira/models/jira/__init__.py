"""
Jira data models for the MCP Jira server.

This package provides Pydantic models for Jira API data structures,
organized by entity type.
"""

from .adf import adf_to_text, text_to_adf
from .comment import JiraComment
from .common import JiraIssueType, JiraStatus, JiraUser
from .field import CustomFieldMap, JiraField
from .field_value import format_field_value, has_meaningful_value, parse_field_value
from .filter import JiraFilter
from .issue import DETAIL_FIELDS, JiraIssue
from .link import JiraIssueLinkType, JiraLinkedIssue
from .search import JiraSearchResult
from .workflow import JiraTransition

__all__ = [
    "DETAIL_FIELDS",
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
    "adf_to_text",
    "format_field_value",
    "has_meaningful_value",
    "parse_field_value",
    "text_to_adf",
]
