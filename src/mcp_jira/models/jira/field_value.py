"""
Typed view of Jira field values.

Jira returns field values as loosely typed JSON: strings, numbers, user
objects, option objects, ADF documents, and arrays of any of these. Raw values
are classified once by ``parse_field_value`` into a closed union, and the
display formatter and the "is this field set" check match over that union.
"""

import json
from typing import Any, Literal

from pydantic import BaseModel

from .adf import adf_to_text, is_adf_document

NOT_SET = "Not set"
MEANINGFUL_KEYS = ("value", "name", "displayName", "key", "id")
MAX_VALUE_DEPTH = 32


class ScalarValue(BaseModel):
    kind: Literal["scalar"] = "scalar"
    value: str | int | float | bool


class UserValue(BaseModel):
    """A user reference (assignee, reporter, user pickers)."""

    kind: Literal["user"] = "user"
    display_name: str
    account_id: str | None = None


class OptionValue(BaseModel):
    """A select-list option, version, component or similar named reference."""

    kind: Literal["option"] = "option"
    label: Any
    raw: dict[str, Any]


class DocumentValue(BaseModel):
    kind: Literal["document"] = "document"
    document: dict[str, Any]


class ObjectValue(BaseModel):
    """Any other JSON object; shown as a structural dump."""

    kind: Literal["object"] = "object"
    raw: dict[str, Any]


class ListValue(BaseModel):
    kind: Literal["list"] = "list"
    items: list["FieldValue | None"]


FieldValue = (
    ScalarValue | UserValue | OptionValue | DocumentValue | ObjectValue | ListValue
)

ListValue.model_rebuild()


def parse_field_value(raw: Any, level: int = 0) -> FieldValue | None:
    """
    Classify a raw Jira field value.

    Args:
        raw: Field value as found in the issue's ``fields`` payload
        level: Nesting level of ``raw``; values nested deeper than
            ``MAX_VALUE_DEPTH`` are treated as not set

    Returns:
        The typed value, or None when the field is not set
    """
    if raw is None or level > MAX_VALUE_DEPTH:
        return None
    if isinstance(raw, str | int | float | bool):
        return ScalarValue(value=raw)
    if isinstance(raw, list | tuple):
        return ListValue(items=[parse_field_value(item, level + 1) for item in raw])
    if isinstance(raw, dict):
        if is_adf_document(raw):
            return DocumentValue(document=raw)
        if raw.get("displayName"):
            return UserValue(
                display_name=str(raw["displayName"]),
                account_id=raw.get("accountId"),
            )
        for key in ("value", "name"):
            if key in raw:
                return OptionValue(label=raw[key], raw=raw)
        return ObjectValue(raw=raw)
    return ScalarValue(value=str(raw))


def _dump(raw: dict[str, Any]) -> str:
    try:
        return json.dumps(raw, default=str)
    except (RecursionError, ValueError):
        return "{...}"


def _format(value: FieldValue | None, level: int) -> str:
    match value:
        case None:
            return NOT_SET
        case DocumentValue(document=document):
            return adf_to_text(document)
        case UserValue(display_name=display_name):
            return display_name
        case OptionValue(label=str() as label):
            return label
        case OptionValue(label=label):
            return _format(parse_field_value(label, level + 1), level + 1)
        case ListValue(items=items):
            return ", ".join(_format(item, level + 1) for item in items)
        case ObjectValue(raw=raw):
            return _dump(raw)
        case ScalarValue(value=scalar):
            return str(scalar)


def format_field_value(raw: Any) -> str:
    """Format a raw Jira field value for display."""
    return _format(parse_field_value(raw), 0)


def _is_meaningful(value: FieldValue | None, level: int) -> bool:
    match value:
        case None:
            return False
        case ScalarValue(value=str() as text):
            return bool(text.strip())
        case ScalarValue():
            # Numbers and booleans count as set, including 0 and False
            return True
        case DocumentValue(document=document):
            return bool(adf_to_text(document).strip())
        case UserValue(display_name=display_name):
            return bool(display_name.strip())
        case ListValue(items=items):
            return any(_is_meaningful(item, level + 1) for item in items)
        case OptionValue(raw=raw) | ObjectValue(raw=raw):
            return any(
                _is_meaningful(parse_field_value(raw[key], level + 1), level + 1)
                for key in MEANINGFUL_KEYS
                if key in raw
            )
    return False


def has_meaningful_value(raw: Any) -> bool:
    """Return True if a raw Jira field value is worth displaying."""
    return _is_meaningful(parse_field_value(raw), 0)
