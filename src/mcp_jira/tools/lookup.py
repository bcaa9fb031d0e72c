"""User lookups shared by the assignment tools."""

import logging
from typing import Any

from ..exceptions import ToolInputError
from ..jira import JiraFetcher
from ..models.jira import JiraUser

logger = logging.getLogger("mcp-jira.tools")


def _candidate_lines(users: list[JiraUser]) -> str:
    return "\n".join(
        f" - {user.display_name or 'N/A'} (AccountId: {user.account_id or 'N/A'})"
        for user in users
    )


def find_assignee(jira: JiraFetcher, display_name: str) -> JiraUser:
    """
    Find the single user matching a display name.

    When the search returns several users, a unique case-insensitive exact
    display-name match wins.

    Raises:
        ToolInputError: If no user or more than one user matches
    """
    users = jira.find_users(query=display_name)
    if not users:
        raise ToolInputError(f'Error: No user found with display name "{display_name}".')

    if len(users) > 1:
        exact = [
            user
            for user in users
            if (user.display_name or "").casefold() == display_name.casefold()
        ]
        if len(exact) != 1:
            raise ToolInputError(
                f'Error: Multiple users found with display name "{display_name}":\n'
                f"{_candidate_lines(users)}\n"
                "Please be more specific or use the accountId."
            )
        users = exact

    user = users[0]
    if not user.account_id:
        raise ToolInputError(
            f'Error: Found user "{user.display_name}" has no accountId.'
        )
    return user


def resolve_assignee_field(jira: JiraFetcher, fields: dict[str, Any]) -> dict[str, Any]:
    """
    Replace ``{"assignee": {"name": ...}}`` with the matching ``accountId``.

    An assignee that already has an ``accountId`` keeps it and loses ``name``.

    Returns:
        A copy of fields with the assignee resolved

    Raises:
        ToolInputError: If the name matches no user or several users
    """
    assignee = fields.get("assignee")
    if not isinstance(assignee, dict) or "name" not in assignee:
        return dict(fields)

    resolved = dict(fields)
    if assignee.get("accountId"):
        resolved["assignee"] = {"accountId": assignee["accountId"]}
        return resolved

    name = str(assignee["name"])
    users = jira.find_users(query=name)
    if not users:
        raise ToolInputError(
            f'Error: Assignee lookup failed. No user found with display name "{name}".'
        )
    if len(users) > 1:
        raise ToolInputError(
            f'Error: Assignee lookup failed. Multiple users found with display name "{name}":\n'
            f"{_candidate_lines(users)}\n"
            "Please use accountId for assignee."
        )
    if not users[0].account_id:
        raise ToolInputError(
            f'Error: Assignee lookup failed. User "{name}" has no accountId.'
        )

    logger.info(f"Resolved assignee '{name}' to account {users[0].account_id}")
    resolved["assignee"] = {"accountId": users[0].account_id}
    return resolved
