"""MCP tool definitions and handlers for Jira."""

from .definitions import TOOL_SPECS, registry
from .registry import ToolRegistry, ToolSpec
from .response import ToolResponse, fail, format_jira_error, respond

__all__ = [
    "TOOL_SPECS",
    "ToolRegistry",
    "ToolResponse",
    "ToolSpec",
    "fail",
    "format_jira_error",
    "registry",
    "respond",
]
