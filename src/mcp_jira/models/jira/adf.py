"""
Atlassian Document Format (ADF) helpers.

Jira Cloud returns rich-text fields (descriptions, comment bodies, some custom
fields) as ADF trees. ``adf_to_text`` flattens such a tree to plain text for
chat display and ``text_to_adf`` wraps plain text into the single-paragraph
document Jira accepts on write.
"""

from typing import Any

NO_DESCRIPTION = "No description"
BULLET = "• "
INDENT = "  "
MAX_ADF_DEPTH = 64


def text_to_adf(text: str) -> dict[str, Any]:
    """Wrap plain text into a one-paragraph ADF document."""
    return {
        "type": "doc",
        "version": 1,
        "content": [
            {
                "type": "paragraph",
                "content": [{"type": "text", "text": text}],
            }
        ],
    }


def is_adf_document(value: Any) -> bool:
    """Return True if value looks like the root node of an ADF document."""
    return isinstance(value, dict) and value.get("type") == "doc"


def _children(node: dict[str, Any]) -> list[Any]:
    content = node.get("content")
    return content if isinstance(content, list) else []


def _leaf_text(node: Any) -> str:
    if isinstance(node, dict):
        text = node.get("text")
        if isinstance(text, str):
            return text
    return ""


def adf_to_text(node: Any, depth: int = 0) -> str:
    """
    Render an ADF node as indented plain text.

    Headings and paragraphs end with a newline, list items are prefixed with
    a bullet and indented two spaces per nesting level. Unknown nodes are
    treated as containers. The function never raises: malformed nodes render
    as empty text, and anything nested more than ``MAX_ADF_DEPTH`` nodes
    below the starting node is cut off.

    Args:
        node: An ADF node, a plain string, or None
        depth: Starting indentation level

    Returns:
        The flattened text, or "No description" when node is None
    """
    if node is None:
        return NO_DESCRIPTION
    return _render(node, depth, 0)


def _render(node: Any, depth: int, level: int) -> str:
    # depth drives indentation and only grows inside list items; level counts
    # every node on the path from the root
    if node is None or level > MAX_ADF_DEPTH:
        return ""

    indent = INDENT * depth

    if isinstance(node, str):
        return indent + node
    if not isinstance(node, dict):
        return ""

    node_type = node.get("type")
    children = _children(node)

    if node_type == "heading":
        text = _leaf_text(children[0]) if children else ""
        return f"{indent}{text}\n"

    if node_type == "paragraph":
        text = "".join(_leaf_text(child) for child in children).strip()
        return f"{indent}{text}\n" if text else ""

    if node_type == "listItem":
        text = "".join(_render(child, depth + 1, level + 1) for child in children)
        return f"{indent}{BULLET}{text.strip()}\n"

    if isinstance(node.get("content"), list):
        return "".join(_render(child, depth, level + 1) for child in children)

    text = _leaf_text(node)
    return indent + text if text else ""
