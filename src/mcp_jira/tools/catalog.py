"""Read-only catalog tools: fields, transitions, users and filters."""

import logging
from typing import Any

from ..context import AppContext
from ..models.jira import JiraField, JiraUser
from .arguments import optional_bool, optional_int, optional_string, require_string
from .response import ToolResponse, fail, format_jira_error, respond

logger = logging.getLogger("mcp-jira.tools")

USER_PAGE_SIZE = 100
HIGHLIGHT_MARK = "✓"
ENTRY_SEPARATOR = "\n\n---\n\n"


def _field_line(field: JiraField, marked: bool = False) -> str:
    mark = f" {HIGHLIGHT_MARK}" if marked else ""
    details = f"Type: {field.schema_type}" if field.schema_type else "No description available"
    return f"{field.name}{mark} ({field.id}): {details}"


def list_issue_fields(ctx: AppContext, arguments: dict[str, Any]) -> ToolResponse:
    include_custom_only = optional_bool(arguments, "includeCustomOnly")

    fields = ctx.jira.get_fields()
    custom = [f for f in fields if f.custom]
    standard = [] if include_custom_only else [f for f in fields if not f.custom]
    if not custom and not standard:
        return respond("No fields found")

    sections = []
    if standard:
        sections.append(
            f"Standard Fields ({len(standard)}):\n"
            + "\n".join(_field_line(f) for f in standard)
        )
    if custom:
        # Marked fields are the ones get-ticket-details fetches
        detail_ids = set(ctx.custom_fields.detail_fields().values())
        sections.append(
            f"Custom Fields ({len(custom)}):\n"
            + "\n".join(_field_line(f, f.id in detail_ids) for f in custom)
        )

    text = "\n\n".join(sections)
    if custom:
        text += f"\n\n{HIGHLIGHT_MARK} = Configured for automatic fetching with issue details"
    return respond(text)


def list_issue_transitions(ctx: AppContext, arguments: dict[str, Any]) -> ToolResponse:
    issue_key = require_string(arguments, "issueKey")
    try:
        transitions = ctx.jira.get_transitions(issue_key)
    except Exception as e:
        prefix = f"Error listing transitions for {issue_key}"
        logger.error(f"{prefix}: {e}")
        return fail(format_jira_error(prefix, e))

    if not transitions:
        return respond(f"No available transitions found for issue {issue_key}.")

    lines = []
    for transition in transitions:
        status = transition.to_status
        lines.append(
            f'ID: {transition.id}, Name: "{transition.name}" '
            f"(To Status: {status.name if status and status.name else 'N/A'} - "
            f"{status.category if status and status.category else 'N/A'})"
        )
    return respond(f"Available transitions for {issue_key}:\n" + "\n".join(lines))


def _user_entry(user: JiraUser) -> str:
    return (
        f"Account ID: {user.account_id}\n"
        f"Display Name: {user.display_name or 'N/A'}\n"
        f"Email: {user.email or 'N/A'}"
    )


def list_users(ctx: AppContext, arguments: dict[str, Any]) -> ToolResponse:
    max_results = optional_int(arguments, "maxResults", default=50, minimum=1, maximum=1000)
    query = optional_string(arguments, "query", default="")

    users: list[JiraUser] = []
    while len(users) < max_results:
        page_size = min(USER_PAGE_SIZE, max_results - len(users))
        page = ctx.jira.find_users(query=query, start_at=len(users), max_results=page_size)
        users.extend(page)
        if len(page) < page_size:
            break

    if not users:
        return respond("No users found.")

    active = [user for user in users if user.active]
    return respond(
        f"Active Atlassian users found: {len(active)} (filtered from {len(users)} total)\n\n"
        + ENTRY_SEPARATOR.join(_user_entry(user) for user in active)
    )


def list_jira_filters(ctx: AppContext, arguments: dict[str, Any]) -> ToolResponse:
    filters = ctx.jira.get_filters()
    if not filters:
        return respond("No filters found.")

    entries = ENTRY_SEPARATOR.join(
        f"ID: {jira_filter.id}\n"
        f"Name: {jira_filter.name}\n"
        f"JQL: {jira_filter.jql or 'JQL not available'}\n"
        f"View URL: {jira_filter.view_url}"
        for jira_filter in filters
    )
    return respond(f"Total filters found: {len(filters)}\n\n{entries}")
