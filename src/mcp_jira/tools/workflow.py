"""Multi-issue tools: labels, transitions and assignment."""

import logging
from typing import Any

from ..context import AppContext
from ..jira import JiraFetcher
from .arguments import require_string, require_string_list
from .batch import run_batch
from .lookup import find_assignee
from .response import ToolResponse

logger = logging.getLogger("mcp-jira.tools")

ISSUE_KEYS_MESSAGE = "Error: issueKeys must be a non-empty array of issue keys"


def merge_labels(current: list[str], added: list[str]) -> list[str]:
    """Append new labels to the current ones, keeping order and dropping repeats."""
    return list(dict.fromkeys([*current, *added]))


def add_labels(ctx: AppContext, arguments: dict[str, Any]) -> ToolResponse:
    issue_keys = require_string_list(arguments, "issueKeys", ISSUE_KEYS_MESSAGE)
    labels = require_string_list(
        arguments, "labels", "Error: labels must be a non-empty array of label strings"
    )

    def label_issue(issue_key: str) -> str:
        merged = merge_labels(ctx.jira.get_issue_labels(issue_key), labels)
        ctx.jira.edit_issue(issue_key, {"labels": merged})
        return f"labels now {', '.join(merged)}"

    outcome = run_batch(issue_keys, label_issue)
    return outcome.to_response(
        lambda done, total: f"Successfully added labels to {done} of {total} issues:",
        lambda failed: f"Failed to add labels to {failed} issues:",
    )


def resolve_transition_id(jira: JiraFetcher, issue_key: str, transition: str) -> str:
    """
    Return the transition id to use for an issue.

    Numeric values are ids already; anything else is matched against the
    names of the issue's available transitions, ignoring case.
    """
    if transition.isdigit():
        return transition

    for candidate in jira.get_transitions(issue_key):
        if candidate.name.casefold() == transition.casefold():
            return candidate.id
    raise ValueError(f"No transition named '{transition}' is available")


def transition_issues(ctx: AppContext, arguments: dict[str, Any]) -> ToolResponse:
    issue_keys = require_string_list(arguments, "issueKeys", ISSUE_KEYS_MESSAGE)
    transition = require_string(
        arguments, "transitionId", "Error: transitionId must be a non-empty string"
    )

    def transition_issue(issue_key: str) -> str:
        transition_id = resolve_transition_id(ctx.jira, issue_key, transition)
        ctx.jira.transition_issue(issue_key, transition_id)
        return f"transitioned with transition {transition_id}"

    outcome = run_batch(issue_keys, transition_issue)
    return outcome.to_response(
        lambda done, total: f"Successfully transitioned {done} of {total} issues:",
        lambda failed: f"Failed to transition {failed} issues:",
    )


def assign_issue(ctx: AppContext, arguments: dict[str, Any]) -> ToolResponse:
    issue_keys = require_string_list(arguments, "issueKeys", ISSUE_KEYS_MESSAGE)
    display_name = require_string(
        arguments,
        "assigneeDisplayName",
        "Error: assigneeDisplayName must be a non-empty string",
    )

    user = find_assignee(ctx.jira, display_name)
    name = user.display_name or display_name

    def assign(issue_key: str) -> str:
        ctx.jira.assign_issue(issue_key, user.account_id)
        return f"assigned to {name}"

    outcome = run_batch(issue_keys, assign)
    return outcome.to_response(
        lambda done, total: f"Successfully assigned {done} of {total} issues to {name}:",
        lambda failed: f"Failed to assign {failed} issues:",
    )
