"""Application context shared by all tool handlers."""

from dataclasses import dataclass, field

from .jira import JiraFetcher
from .jira.config import JiraConfig
from .models.jira import CustomFieldMap


@dataclass(frozen=True)
class AppContext:
    """Application context for MCP Jira.

    Built once by the server lifespan and never mutated. ``jira`` is None
    when the Jira configuration is missing or invalid.
    """

    jira: JiraFetcher | None = None
    config: JiraConfig | None = None
    custom_fields: CustomFieldMap = field(default_factory=CustomFieldMap)
