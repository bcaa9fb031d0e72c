"""
Base models for Jira API data.

All Jira record models derive from ``ApiModel``, which fixes the conversion
contract: build from a raw API payload with ``from_api_response``.
"""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict

EMPTY_STRING = ""
UNASSIGNED = "Unassigned"
UNKNOWN = "Unknown"


class ApiModel(BaseModel):
    """Base class for models built from Jira API responses."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> Self:
        """Create an instance from a raw API response."""
        raise NotImplementedError
