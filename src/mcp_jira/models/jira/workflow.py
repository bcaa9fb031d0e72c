"""
Jira workflow transition models.
"""

from typing import Any

from ..base import EMPTY_STRING, ApiModel
from .common import JiraStatus


class JiraTransition(ApiModel):
    """
    Model representing a transition available on an issue.
    """

    id: str = EMPTY_STRING
    name: str = EMPTY_STRING
    to_status: JiraStatus | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraTransition":
        if not data or not isinstance(data, dict):
            return cls()

        to_data = data.get("to")
        transition_id = data.get("id")
        return cls(
            id=str(transition_id) if transition_id is not None else EMPTY_STRING,
            name=data.get("name") or EMPTY_STRING,
            to_status=JiraStatus.from_api_response(to_data)
            if isinstance(to_data, dict)
            else None,
        )
