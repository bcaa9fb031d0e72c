"""Validation helpers for tool arguments.

Each helper raises ``ToolInputError`` before any Jira call is made.
"""

import logging
from typing import Any

from ..exceptions import ToolInputError

logger = logging.getLogger("mcp-jira.tools")


def require_string(arguments: dict[str, Any], name: str, message: str | None = None) -> str:
    value = arguments.get(name)
    if not isinstance(value, str) or not value.strip():
        raise ToolInputError(message or f"Error: {name} must be a non-empty string")
    return value.strip()


def optional_string(arguments: dict[str, Any], name: str, default: str | None = None) -> str | None:
    value = arguments.get(name)
    if value is None:
        return default
    if not isinstance(value, str):
        raise ToolInputError(f"Error: {name} must be a string")
    return value.strip() or default


def require_string_list(
    arguments: dict[str, Any], name: str, message: str | None = None
) -> list[str]:
    """Require a non-empty array of non-empty strings."""
    value = arguments.get(name)
    if (
        not isinstance(value, list)
        or not value
        or not all(isinstance(item, str) and item.strip() for item in value)
    ):
        raise ToolInputError(message or f"Error: {name} must be a non-empty array of strings")
    return [item.strip() for item in value]


def require_object(arguments: dict[str, Any], name: str) -> dict[str, Any]:
    value = arguments.get(name)
    if not isinstance(value, dict) or not value:
        raise ToolInputError(f"Error: {name} must be a non-empty object")
    return value


def optional_object(arguments: dict[str, Any], name: str) -> dict[str, Any]:
    value = arguments.get(name)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ToolInputError(f"Error: {name} must be an object")
    return value


def optional_int(
    arguments: dict[str, Any],
    name: str,
    default: int,
    minimum: int,
    maximum: int | None = None,
) -> int:
    """
    Read an integer argument and clamp it into range.

    Clamped values are logged rather than rejected.
    """
    value = arguments.get(name)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise ToolInputError(f"Error: {name} must be a number")

    clamped = max(minimum, int(value))
    if maximum is not None:
        clamped = min(clamped, maximum)
    if clamped != value:
        logger.info(f"Adjusted {name} from {value} to {clamped}")
    return clamped


def optional_bool(arguments: dict[str, Any], name: str, default: bool = False) -> bool:
    value = arguments.get(name)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ToolInputError(f"Error: {name} must be a boolean")
    return value
