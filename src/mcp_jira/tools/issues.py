"""Issue tools: search, details, creation and editing."""

import logging
from typing import Any

from ..context import AppContext
from ..exceptions import ToolInputError
from ..models.jira import (
    DETAIL_FIELDS,
    JiraIssue,
    JiraIssueType,
    JiraLinkedIssue,
    adf_to_text,
    format_field_value,
    has_meaningful_value,
    text_to_adf,
)
from ..utils.date import parse_date
from .arguments import (
    optional_int,
    optional_object,
    optional_string,
    require_object,
    require_string,
)
from .lookup import resolve_assignee_field
from .response import ToolResponse, respond

logger = logging.getLogger("mcp-jira.tools")

STATUS_CATEGORIES = ("To Do", "In Progress", "Done")
SEARCH_FIELDS = ("summary", "status", "issuetype", "assignee", "updated")
LIST_FIELDS = ("summary", "status", "issuetype", "assignee")
LIST_LIMIT = 100
CORE_FIELDS = ("summary", "description", "project", "issuetype", "parent")
RELATES_TO = "relates to"


def build_search_jql(
    project_key: str | None, issue_type: str | None, status_category: str | None
) -> str:
    """Combine the optional search filters into a JQL query."""
    parts = []
    if project_key:
        parts.append(f"project = {project_key}")
    if issue_type:
        parts.append(f'issuetype = "{issue_type}"')
    if status_category:
        if status_category not in STATUS_CATEGORIES:
            raise ToolInputError(
                f"Error: statusCategory must be one of: {', '.join(STATUS_CATEGORIES)}"
            )
        parts.append(f'statusCategory = "{status_category}"')
    if not parts:
        return "ORDER BY updated DESC"
    return f"{' AND '.join(parts)} ORDER BY updated DESC"


def _search_line(issue: JiraIssue) -> str:
    category = issue.status.category if issue.status and issue.status.category else "Unknown"
    return (
        f"{issue.key}: {issue.summary or 'No summary'} "
        f"[{issue.issue_type_name or 'Unknown type'}, "
        f"{issue.status_name or 'No status'} ({category}), "
        f"Assignee: {issue.assignee_name}, "
        f"Updated: {parse_date(issue.updated) or 'Unknown'}]"
    )


def search_issues(ctx: AppContext, arguments: dict[str, Any]) -> ToolResponse:
    max_results = optional_int(arguments, "maxResults", default=20, minimum=1, maximum=100)
    start_at = optional_int(arguments, "startAt", default=0, minimum=0)

    jql = optional_string(arguments, "jql")
    if jql:
        logger.info(f"Using custom JQL query: {jql}")
    else:
        jql = build_search_jql(
            optional_string(arguments, "projectKey"),
            optional_string(arguments, "issueType"),
            optional_string(arguments, "statusCategory"),
        )
    logger.info(f"Executing JQL query: {jql}")

    result = ctx.jira.search_issues(
        jql,
        fields=SEARCH_FIELDS,
        start_at=start_at,
        max_results=max_results,
        with_total=True,
    )
    if not result.issues:
        return respond("No issues found matching the criteria")

    end_index = start_at + len(result.issues)
    if result.total is not None:
        header = f"Showing results {start_at + 1}-{end_index} of {result.total}"
        has_next = end_index < result.total
    else:
        header = f"Showing results {start_at + 1}-{end_index}"
        has_next = len(result.issues) == max_results

    if start_at > 0:
        header += f"\nPrevious page: Use startAt={max(0, start_at - max_results)}"
    if has_next:
        header += f"\nNext page: Use startAt={start_at + max_results}"

    lines = "\n".join(_search_line(issue) for issue in result.issues)
    return respond(f"{header}\n\n{lines}")


def list_sprint_tickets(ctx: AppContext, arguments: dict[str, Any]) -> ToolResponse:
    project_key = require_string(arguments, "projectKey")
    result = ctx.jira.search_issues(
        f"project = {project_key} AND sprint in openSprints()",
        fields=LIST_FIELDS,
        max_results=LIST_LIMIT,
    )
    if not result.issues:
        return respond("No issues found")

    return respond(
        "\n".join(
            f"{issue.key}: {issue.summary} ({issue.status_name}) "
            f"[Assignee: {issue.assignee_name}]"
            for issue in result.issues
        )
    )


def list_child_issues(ctx: AppContext, arguments: dict[str, Any]) -> ToolResponse:
    parent_key = require_string(arguments, "parentKey")
    result = ctx.jira.search_issues(
        f"parent = {parent_key} ORDER BY created ASC",
        fields=LIST_FIELDS,
        max_results=LIST_LIMIT,
    )
    if not result.issues:
        return respond("No child issues found")

    return respond(
        "\n".join(
            f"{issue.key}: {issue.summary} ({issue.status_name}) "
            f"[Type: {issue.issue_type_name}, Assignee: {issue.assignee_name}]"
            for issue in result.issues
        )
    )


def _reference_line(issue: JiraLinkedIssue) -> str:
    issue_type = issue.issue_type.name if issue.issue_type else "Unknown type"
    status = issue.status.name if issue.status else "Unknown status"
    return f"{issue.key} {issue.summary or 'No summary'} [{issue_type}, {status}]"


def _comment_block(issue: JiraIssue) -> str:
    if not issue.comments:
        return "No comments"

    blocks = []
    for comment in issue.comments:
        created = parse_date(comment.created) or "Unknown date"
        if isinstance(comment.body, str):
            body = comment.body
        elif isinstance(comment.body, dict):
            body = adf_to_text(comment.body)
        else:
            body = "No content"
        blocks.append(f"[{created}] {comment.author_name}:\n{body}")
    return "\n\n".join(blocks)


def render_ticket_details(ctx: AppContext, issue: JiraIssue) -> str:
    """Render the multi-section ticket report."""
    parent = (
        f"{issue.parent.key} "
        f"({issue.parent.issue_type.name if issue.parent.issue_type else 'Unknown type'})"
        f" - {issue.parent.summary or 'No summary'}"
        if issue.parent
        else "No parent"
    )
    linked = "\n".join(_reference_line(linked) for linked in issue.linked_issues)
    subtasks = "\n".join(_reference_line(subtask) for subtask in issue.subtasks)

    custom_lines = [
        f"{name}: {format_field_value(issue.custom_fields.get(field_id))}"
        for name, field_id in ctx.custom_fields.detail_fields().items()
        if has_meaningful_value(issue.custom_fields.get(field_id))
    ]
    custom_section = "Custom Fields:\n" + "\n".join(custom_lines) if custom_lines else ""

    lines = [
        f"Key: {issue.key}",
        f"URL: {ctx.config.browse_url(issue.key)}",
        f"Title: {issue.summary or 'No summary'}",
        f"Type: {issue.issue_type_name or 'Unknown type'}",
        f"Status: {issue.status_name or 'No status'}",
        f"Assignee: {issue.assignee_name}",
        f"Labels: {', '.join(issue.labels) if issue.labels else 'No labels'}",
        f"Parent: {parent}",
        "Description:",
        adf_to_text(issue.description),
        "Related Issues:",
        f"{linked or 'No linked issues'}\n\n{subtasks or 'No sub-tasks'}",
        f"Created: {parse_date(issue.created) or 'Unknown'}",
        f"Updated: {parse_date(issue.updated) or 'Unknown'}",
        "",
        custom_section,
        "",
        "Comments:",
        _comment_block(issue),
    ]
    return "\n".join(lines).strip()


def get_ticket_details(ctx: AppContext, arguments: dict[str, Any]) -> ToolResponse:
    issue_key = require_string(arguments, "issueKey")
    issue = ctx.jira.get_issue(
        issue_key,
        fields=DETAIL_FIELDS,
        custom_field_ids=ctx.custom_fields.detail_fields().values(),
    )
    return respond(render_ticket_details(ctx, issue))


def add_comment(ctx: AppContext, arguments: dict[str, Any]) -> ToolResponse:
    issue_key = require_string(arguments, "issueKey")
    comment = require_string(arguments, "comment")
    ctx.jira.add_comment(issue_key, comment)
    return respond(f"Successfully added comment to {issue_key}")


def update_description(ctx: AppContext, arguments: dict[str, Any]) -> ToolResponse:
    issue_key = require_string(arguments, "issueKey")
    description = require_string(arguments, "description")
    ctx.jira.edit_issue(issue_key, {"description": text_to_adf(description)})
    return respond(f"Successfully updated description of {issue_key}")


def update_issue(ctx: AppContext, arguments: dict[str, Any]) -> ToolResponse:
    issue_key = require_string(arguments, "issueKey")
    fields = require_object(arguments, "fields")
    if "description" in fields:
        raise ToolInputError(
            "Error: The 'description' field cannot be updated using this method. "
            "Please use the 'update-description' method instead."
        )

    fields = resolve_assignee_field(ctx.jira, fields)
    payload, described = ctx.custom_fields.resolve_fields(fields)
    if not payload:
        return respond(f"No fields were updated for {issue_key}")

    ctx.jira.edit_issue(issue_key, payload)
    return respond(
        f"Request sent to Jira to update issue {issue_key}. "
        f"Fields in request: {', '.join(described)}"
    )


def _pick_issue_type(
    available: list[JiraIssueType], requested: str, fallback: str
) -> str:
    names = [issue_type.name for issue_type in available if issue_type.name]
    if requested in names:
        return requested
    if names:
        logger.info(f"Issue type '{requested}' not available, using '{names[0]}'")
        return names[0]
    return fallback


def create_sub_ticket(ctx: AppContext, arguments: dict[str, Any]) -> ToolResponse:
    parent_key = require_string(arguments, "parentKey")
    summary = require_string(arguments, "summary")
    description = optional_string(arguments, "description")
    requested_type = optional_string(arguments, "issueType", default="Sub-task")

    parent = ctx.jira.get_issue(parent_key, fields=["project", "issuetype"])
    if not parent.project_id:
        raise ValueError(f"Could not determine project of parent issue {parent_key}")

    subtask_types = [
        issue_type
        for issue_type in ctx.jira.get_create_issue_types(parent.project_id)
        if issue_type.subtask
    ]
    issue_type = _pick_issue_type(subtask_types, requested_type, "Sub-task")

    fields: dict[str, Any] = {
        "summary": summary,
        "parent": {"key": parent_key},
        "project": {"id": parent.project_id},
        "issuetype": {"name": issue_type},
    }
    if description:
        fields["description"] = text_to_adf(description)

    new_key = ctx.jira.create_issue(fields)
    return respond(f"Successfully created sub-ticket {new_key} for parent {parent_key}")


def create_ticket(ctx: AppContext, arguments: dict[str, Any]) -> ToolResponse:
    if optional_string(arguments, "parentKey"):
        return create_sub_ticket(ctx, arguments)

    project_key = require_string(arguments, "projectKey")
    summary = require_string(arguments, "summary")
    description = optional_string(arguments, "description")
    requested_type = optional_string(arguments, "issueType", default="Task")
    extra_fields = optional_object(arguments, "fields")

    project = ctx.jira.get_project(project_key)
    if project is None:
        raise ToolInputError(f"Project {project_key} not found")

    standard_types = [
        issue_type
        for issue_type in ctx.jira.get_create_issue_types(str(project.get("id") or project_key))
        if not issue_type.subtask
    ]
    issue_type = _pick_issue_type(standard_types, requested_type, "Task")

    extra_fields = resolve_assignee_field(ctx.jira, extra_fields)
    payload, described = ctx.custom_fields.resolve_fields(extra_fields, skip=CORE_FIELDS)

    fields: dict[str, Any] = {
        **payload,
        "project": {"key": project_key},
        "summary": summary,
        "issuetype": {"name": issue_type},
    }
    if description:
        fields["description"] = text_to_adf(description)

    new_key = ctx.jira.create_issue(fields)
    message = f"Successfully created ticket {new_key} in project {project_key}"
    if described:
        message += f" with additional fields: {', '.join(described)}"
    return respond(message)


def link_tickets(ctx: AppContext, arguments: dict[str, Any]) -> ToolResponse:
    source_key = require_string(arguments, "sourceIssueKey")
    target_key = require_string(arguments, "targetIssueKey")

    link_type = next(
        (lt for lt in ctx.jira.get_issue_link_types() if lt.matches(RELATES_TO)),
        None,
    )
    if link_type is None:
        raise ValueError("Could not find 'relates to' link type")

    ctx.jira.create_issue_link(
        link_type.name, inward_issue_key=target_key, outward_issue_key=source_key
    )
    return respond(
        f'Successfully linked {source_key} to {target_key} with relationship "{link_type.name}"'
    )
