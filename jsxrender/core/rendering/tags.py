"""
Tag Classifiers
===============

Pure predicates used by the resolver and renderer to decide how a node is
treated.
"""

from typing import Any

from jsxrender.models.schemas import Element, MalformedNodeError, NodeKind

# HTML5 void elements
SELF_CLOSING_TAGS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)


def is_self_closing(tag: Any) -> bool:
    """Return True for void elements, which never have children or a closing tag."""
    return isinstance(tag, str) and tag in SELF_CLOSING_TAGS


def is_empty(node: Any) -> bool:
    """Return True for values that render to nothing."""
    return node is None or isinstance(node, bool)


def node_kind(node: Any) -> NodeKind:
    """
    Classify a tree node.

    Raises:
        MalformedNodeError: If the value is not empty, primitive or an Element
    """
    if is_empty(node):
        return NodeKind.EMPTY
    if isinstance(node, (str, int, float)):
        return NodeKind.TEXT
    if isinstance(node, Element):
        return NodeKind.ELEMENT
    raise MalformedNodeError(
        f"Node must be an Element, a string, a number or an empty value, "
        f"got {type(node).__name__}: {node!r}"
    )
