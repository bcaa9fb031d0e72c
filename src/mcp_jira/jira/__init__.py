"""Jira API module for the MCP Jira server.

This module provides the Jira client, composed from per-resource mixins.
"""

from .client import JiraClient
from .comments import CommentsMixin
from .config import JiraConfig
from .fields import FieldsMixin
from .filters import FiltersMixin
from .issues import IssuesMixin
from .links import LinksMixin
from .search import SearchMixin
from .transitions import TransitionsMixin
from .users import UsersMixin


class JiraFetcher(
    IssuesMixin,
    SearchMixin,
    CommentsMixin,
    LinksMixin,
    TransitionsMixin,
    UsersMixin,
    FieldsMixin,
    FiltersMixin,
):
    """
    The main Jira client class providing access to all Jira operations.

    This class inherits from multiple mixins that provide specific functionality:
    - IssuesMixin: Issue read, create and edit operations
    - SearchMixin: JQL search operations
    - CommentsMixin: Comment operations
    - LinksMixin: Issue link operations
    - TransitionsMixin: Workflow transition operations
    - UsersMixin: User search and assignment
    - FieldsMixin: Field catalog and custom field mapping
    - FiltersMixin: Saved filter listing
    """

    pass


__all__ = ["JiraClient", "JiraConfig", "JiraFetcher"]
