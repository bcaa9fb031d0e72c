"""The tools exposed by the server."""

from typing import Any

from . import catalog, issues, workflow
from .registry import (
    ToolRegistry,
    ToolSpec,
    boolean_param,
    integer_param,
    string_array_param,
    string_param,
)

USER_FIELD_HINT = (
    'For user fields (like assignee), use objects with accountId: {"accountId": "user-account-id"}, '
    'or {"name": "Display Name"} for the assignee to have it looked up. '
    'For arrays of users, use [{"accountId": "id1"}, {"accountId": "id2"}]. '
    'For option fields, use {"value": "option-name"} or {"id": "option-id"}.'
)

FIELD_VALUE_SCHEMA: dict[str, Any] = {
    "anyOf": [
        {"type": "string", "description": "Simple text value"},
        {"type": "number", "description": "Numeric value"},
        {"type": "boolean", "description": "Boolean value"},
        {"type": "object", "description": "Complex field value", "additionalProperties": True},
        {"type": "array", "description": "Array of values (e.g., multiple users, labels)"},
    ]
}


def fields_param(description: str) -> dict[str, Any]:
    return {
        "type": "object",
        "description": f"{description} {USER_FIELD_HINT}",
        "additionalProperties": FIELD_VALUE_SCHEMA,
    }


TOOL_SPECS = (
    ToolSpec(
        name="search-issues",
        description=(
            "Search for issues with optional filters for project, issue type, and "
            "status category, or using a custom JQL query"
        ),
        handler=issues.search_issues,
        error_prefix="Error searching for issues",
        properties={
            "jql": string_param(
                "Optional custom JQL query. If provided, other filter parameters will be ignored"
            ),
            "projectKey": string_param("Optional project key to filter issues by project"),
            "issueType": string_param(
                "Optional issue type to filter issues (e.g., 'Bug', 'Task', 'Story')"
            ),
            "statusCategory": {
                "type": "string",
                "enum": list(issues.STATUS_CATEGORIES),
                "description": "Optional status category to filter issues",
            },
            "maxResults": integer_param(
                "Optional maximum number of results to return (default: 20, max: 100)",
                minimum=1,
                maximum=100,
            ),
            "startAt": integer_param(
                "Optional pagination offset, the index of the first issue to return "
                "(0-based, default: 0)",
                minimum=0,
            ),
        },
    ),
    ToolSpec(
        name="add-labels",
        description="Add labels to multiple issues without replacing existing ones",
        handler=workflow.add_labels,
        error_prefix="Error adding labels",
        properties={
            "issueKeys": string_array_param("List of issue keys to add labels to"),
            "labels": string_array_param("List of labels to add to the issues"),
        },
        required=("issueKeys", "labels"),
    ),
    ToolSpec(
        name="link-tickets",
        description="Link two tickets with a 'relates to' relationship",
        handler=issues.link_tickets,
        error_prefix="Error linking tickets",
        properties={
            "sourceIssueKey": string_param("Key of the issue the link starts from"),
            "targetIssueKey": string_param("Key of the issue to link to"),
        },
        required=("sourceIssueKey", "targetIssueKey"),
    ),
    ToolSpec(
        name="list-sprint-tickets",
        description="Get all tickets in the active sprint",
        handler=issues.list_sprint_tickets,
        error_prefix="Error listing sprint tickets",
        properties={"projectKey": string_param("Project key (e.g., 'PROJ')")},
        required=("projectKey",),
    ),
    ToolSpec(
        name="get-ticket-details",
        description="Get detailed information about a specific ticket",
        handler=issues.get_ticket_details,
        error_prefix="Error getting ticket details",
        properties={"issueKey": string_param("Issue key (e.g., 'PROJ-123')")},
        required=("issueKey",),
    ),
    ToolSpec(
        name="add-comment",
        description="Add a comment to a specific ticket",
        handler=issues.add_comment,
        error_prefix="Error adding comment",
        properties={
            "issueKey": string_param("Issue key (e.g., 'PROJ-123')"),
            "comment": string_param("Comment text"),
        },
        required=("issueKey", "comment"),
    ),
    ToolSpec(
        name="update-description",
        description="Update the description of a specific ticket",
        handler=issues.update_description,
        error_prefix="Error updating description",
        properties={
            "issueKey": string_param("Issue key (e.g., 'PROJ-123')"),
            "description": string_param("New description text"),
        },
        required=("issueKey", "description"),
    ),
    ToolSpec(
        name="list-child-issues",
        description="Get all child issues of a parent ticket",
        handler=issues.list_child_issues,
        error_prefix="Error listing child issues",
        properties={"parentKey": string_param("Key of the parent issue")},
        required=("parentKey",),
    ),
    ToolSpec(
        name="create-sub-ticket",
        description="Create a sub-ticket (child issue) for a parent ticket",
        handler=issues.create_sub_ticket,
        error_prefix="Error creating sub-ticket",
        properties={
            "parentKey": string_param("Key of the parent issue"),
            "summary": string_param("Summary of the sub-ticket"),
            "description": string_param("Optional description of the sub-ticket"),
            "issueType": string_param(
                "The name of the sub-task issue type (default: 'Sub-task')"
            ),
        },
        required=("parentKey", "summary"),
    ),
    ToolSpec(
        name="create-ticket",
        description="Create a new ticket (regular issue or sub-task) with optional custom fields",
        handler=issues.create_ticket,
        error_prefix="Error creating ticket",
        properties={
            "projectKey": string_param("Project key (e.g., 'PROJ')"),
            "summary": string_param("Summary of the ticket"),
            "description": string_param("Optional description of the ticket"),
            "issueType": string_param(
                "The name of the issue type (e.g., 'Task', 'Bug'; default: 'Task')"
            ),
            "parentKey": string_param(
                "Optional parent issue key. If provided, creates a sub-task."
            ),
            "fields": fields_param(
                "Optional object of additional field names and their values, standard "
                "or custom. summary, description, project, issuetype and parent are "
                "handled separately and are ignored here."
            ),
        },
        required=("projectKey", "summary"),
    ),
    ToolSpec(
        name="update-issue",
        description=(
            "Update fields of a specific ticket, including custom fields. "
            "Use the list-users tool to find account IDs and update-description "
            "for the description."
        ),
        handler=issues.update_issue,
        error_prefix="Error updating issue",
        properties={
            "issueKey": string_param("Issue key (e.g., 'PROJ-123')"),
            "fields": fields_param(
                "Object containing field names and their values, standard or custom."
            ),
        },
        required=("issueKey", "fields"),
    ),
    ToolSpec(
        name="list-issue-fields",
        description="List all available issue fields in Jira, including custom fields",
        handler=catalog.list_issue_fields,
        error_prefix="Error listing issue fields",
        properties={
            "includeCustomOnly": boolean_param(
                "Optional. If true, only custom fields will be returned. Default: false"
            ),
        },
    ),
    ToolSpec(
        name="transition-issues",
        description="Transition multiple issues to a new status using a transition ID",
        handler=workflow.transition_issues,
        error_prefix="Error transitioning issues",
        properties={
            "issueKeys": string_array_param("List of issue keys to transition"),
            "transitionId": string_param(
                "The ID of the transition to perform (e.g., '5'), or its name "
                "(e.g., 'Resolve Issue')"
            ),
        },
        required=("issueKeys", "transitionId"),
    ),
    ToolSpec(
        name="list-issue-transitions",
        description="List available transitions for a specific issue.",
        handler=catalog.list_issue_transitions,
        error_prefix="Error listing transitions",
        properties={"issueKey": string_param("Issue key (e.g., 'PROJ-123')")},
        required=("issueKey",),
    ),
    ToolSpec(
        name="assign-issue",
        description="Assign an issue to a user by their display name.",
        handler=workflow.assign_issue,
        error_prefix="Error assigning issues",
        properties={
            "issueKeys": string_array_param(
                "List of issue keys to assign (e.g., ['EDU-123', 'EDU-124'])."
            ),
            "assigneeDisplayName": string_param(
                "The display name of the user to assign the issues to (e.g., 'John Doe')."
            ),
        },
        required=("issueKeys", "assigneeDisplayName"),
    ),
    ToolSpec(
        name="list-jira-filters",
        description="List all Jira filters.",
        handler=catalog.list_jira_filters,
        error_prefix="Error fetching Jira filters",
    ),
    ToolSpec(
        name="list-users",
        description="List all users in Jira with their account ID, email, and display name",
        handler=catalog.list_users,
        error_prefix="Error fetching users",
        properties={
            "query": string_param(
                "Optional search string matched against display name and email"
            ),
            "maxResults": integer_param(
                "Optional maximum number of results to return (default: 50, max: 1000)",
                minimum=1,
                maximum=1000,
            ),
        },
    ),
)

registry = ToolRegistry(TOOL_SPECS)
