"""
Jira saved filter models.
"""

from typing import Any

from ..base import EMPTY_STRING, ApiModel


class JiraFilter(ApiModel):
    """
    Model representing a saved Jira filter.
    """

    id: str = EMPTY_STRING
    name: str = EMPTY_STRING
    jql: str | None = None
    view_url: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraFilter":
        if not data or not isinstance(data, dict):
            return cls()

        filter_id = data.get("id")
        return cls(
            id=str(filter_id) if filter_id is not None else EMPTY_STRING,
            name=data.get("name") or EMPTY_STRING,
            jql=data.get("jql"),
            view_url=data.get("viewUrl"),
        )
