"""
Unit Tests for Tag Classifiers
==============================
"""

import pytest

from jsxrender import Fragment, h
from jsxrender.core.rendering.tags import (
    SELF_CLOSING_TAGS,
    is_empty,
    is_self_closing,
    node_kind,
)
from jsxrender.models.schemas import MalformedNodeError, NodeKind

VOID_ELEMENTS = [
    "area", "base", "br", "col", "embed", "hr", "img",
    "input", "link", "meta", "param", "source", "track", "wbr",
]


class TestSelfClosing:
    """Test void element detection."""

    @pytest.mark.parametrize("tag", VOID_ELEMENTS)
    def test_void_elements(self, tag):
        assert is_self_closing(tag) is True

    @pytest.mark.parametrize("tag", ["div", "span", "textarea", "pre", "IMG", "image", ""])
    def test_other_tags(self, tag):
        assert is_self_closing(tag) is False

    def test_set_is_closed(self):
        """Test the void element set is exactly the HTML5 list."""
        assert SELF_CLOSING_TAGS == frozenset(VOID_ELEMENTS)

    def test_non_string_tags(self):
        """Test fragment markers and components are never void."""
        assert is_self_closing(Fragment) is False
        assert is_self_closing(lambda props: None) is False


class TestEmpty:
    """Test empty node detection."""

    @pytest.mark.parametrize("node", [None, True, False])
    def test_empty_values(self, node):
        assert is_empty(node) is True

    @pytest.mark.parametrize("node", ["", 0, 0.0, "false", h("div")])
    def test_non_empty_values(self, node):
        assert is_empty(node) is False


class TestNodeKind:
    """Test node classification."""

    @pytest.mark.parametrize(
        "node, kind",
        [
            (None, NodeKind.EMPTY),
            (True, NodeKind.EMPTY),
            (False, NodeKind.EMPTY),
            ("text", NodeKind.TEXT),
            ("", NodeKind.TEXT),
            (0, NodeKind.TEXT),
            (3.14, NodeKind.TEXT),
            (h("p"), NodeKind.ELEMENT),
            (h(Fragment), NodeKind.ELEMENT),
        ],
    )
    def test_classification(self, node, kind):
        assert node_kind(node) is kind

    @pytest.mark.parametrize(
        "node",
        [
            {"tag": "div", "props": {"children": []}},
            ["a", "b"],
            object(),
            b"bytes",
        ],
    )
    def test_malformed_nodes(self, node):
        """Test values outside the node shapes are rejected."""
        with pytest.raises(MalformedNodeError):
            node_kind(node)

    def test_malformed_error_is_type_error(self):
        with pytest.raises(TypeError):
            node_kind({"tag": "div"})
