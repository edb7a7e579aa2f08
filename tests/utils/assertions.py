"""
Test Assertions
===============

Custom assertion helpers for testing UI tree resolution and rendering.
"""

from typing import Any

from jsxrender.core.rendering.tags import node_kind
from jsxrender.models.schemas import Element, NodeKind, TagKind

__all__ = [
    "assert_pure_tree",
    "assert_balanced_tags",
    "assert_no_trailing_whitespace",
]


def assert_pure_tree(node: Any) -> None:
    """Assert that a tree contains no component tags."""
    if node_kind(node) is not NodeKind.ELEMENT:
        return

    assert isinstance(node, Element)
    assert node.kind is not TagKind.COMPONENT, f"Unresolved component: {node.tag!r}"
    assert isinstance(node.props["children"], list)
    for child in node.children:
        assert_pure_tree(child)


def assert_balanced_tags(html: str, tag: str) -> None:
    """Assert that every opening ``tag`` has a matching closing tag."""
    opened = html.count(f"<{tag}>") + html.count(f"<{tag} ")
    closed = html.count(f"</{tag}>")
    assert opened == closed, f"<{tag}> opened {opened} times but closed {closed} times"


def assert_no_trailing_whitespace(html: str) -> None:
    """Assert that no rendered line ends in spaces."""
    for number, line in enumerate(html.split("\n"), start=1):
        assert line == line.rstrip(" "), f"Line {number} has trailing spaces: {line!r}"
