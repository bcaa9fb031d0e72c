"""Tool response envelope and error formatting."""

import json
from dataclasses import dataclass

from mcp.types import CallToolResult, TextContent


@dataclass(frozen=True)
class ToolResponse:
    """Text result of a tool call with its error flag."""

    text: str
    is_error: bool = False

    def to_result(self) -> CallToolResult:
        return CallToolResult(
            content=[TextContent(type="text", text=self.text)],
            isError=self.is_error,
        )


def respond(text: str) -> ToolResponse:
    return ToolResponse(text=text)


def fail(text: str) -> ToolResponse:
    return ToolResponse(text=text, is_error=True)


def _response_payload(error: BaseException) -> str | None:
    """Extract the body of the HTTP response attached to an error, if any."""
    for candidate in (error, error.__cause__):
        response = getattr(candidate, "response", None)
        if response is None:
            continue
        try:
            return json.dumps(response.json(), indent=2)
        except ValueError:
            text = getattr(response, "text", None)
            return text if isinstance(text, str) and text else None
    return None


def describe_error(error: BaseException) -> str:
    """
    Describe an error together with the Jira response body it carries.

    When the error has an HTTP response, its body is appended under
    ``Response data:`` so that field validation errors reported by Jira
    reach the caller.
    """
    payload = _response_payload(error)
    if payload:
        return f"{error}\n\nResponse data:\n{payload}"
    return str(error)


def format_jira_error(prefix: str, error: BaseException) -> str:
    """Describe a failed Jira call as ``"<prefix>: <error>"`` plus its response body."""
    return f"{prefix}: {describe_error(error)}"
