"""Declarative tool registry."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from mcp.types import Tool

from .response import ToolResponse

if TYPE_CHECKING:
    from ..context import AppContext

ToolHandler = Callable[["AppContext", dict[str, Any]], ToolResponse]


@dataclass(frozen=True)
class ToolSpec:
    """Name, description and input schema of a tool plus its handler.

    ``error_prefix`` starts the message reported when the handler raises.
    """

    name: str
    description: str
    handler: ToolHandler
    error_prefix: str
    properties: dict[str, Any] = field(default_factory=dict)
    required: tuple[str, ...] = ()

    def to_tool(self) -> Tool:
        return Tool(
            name=self.name,
            description=self.description,
            inputSchema={
                "type": "object",
                "properties": self.properties,
                "required": list(self.required),
            },
        )


class ToolRegistry:
    """Ordered, immutable collection of tool specs keyed by name."""

    def __init__(self, specs: Iterable[ToolSpec]) -> None:
        self._specs: dict[str, ToolSpec] = {}
        for spec in specs:
            if spec.name in self._specs:
                raise ValueError(f"Duplicate tool name: {spec.name}")
            self._specs[spec.name] = spec

    def __len__(self) -> int:
        return len(self._specs)

    def __contains__(self, name: object) -> bool:
        return name in self._specs

    def get(self, name: str) -> ToolSpec | None:
        return self._specs.get(name)

    def names(self) -> list[str]:
        return list(self._specs)

    def list_tools(self) -> list[Tool]:
        return [spec.to_tool() for spec in self._specs.values()]


def string_param(description: str) -> dict[str, Any]:
    return {"type": "string", "description": description}


def integer_param(description: str, minimum: int | None = None, maximum: int | None = None) -> dict[str, Any]:
    schema: dict[str, Any] = {"type": "integer", "description": description}
    if minimum is not None:
        schema["minimum"] = minimum
    if maximum is not None:
        schema["maximum"] = maximum
    return schema


def boolean_param(description: str) -> dict[str, Any]:
    return {"type": "boolean", "description": description}


def string_array_param(description: str) -> dict[str, Any]:
    return {"type": "array", "items": {"type": "string"}, "description": description}


def object_param(description: str) -> dict[str, Any]:
    return {"type": "object", "description": description, "additionalProperties": True}
