"""
HTML Generator
==============

Serialize resolved UI trees into HTML markup.
Decides per element between inline and indented block layout, escapes text
content and handles void, ``pre``, ``textarea`` and fragment tags.
"""

import asyncio
from typing import Any, List, Mapping, Optional, Tuple, Union

from jsxrender.config.logging import get_logger
from jsxrender.models.schemas import (
    Element,
    FormatPolicy,
    MalformedNodeError,
    Node,
    NodeKind,
    RenderOptions,
    TagKind,
)
from jsxrender.core.rendering.entities import encode, render_attrs, to_text
from jsxrender.core.rendering.resolver import resolve
from jsxrender.core.rendering.tags import is_empty, is_self_closing, node_kind

logger = get_logger(__name__)


class HTMLGenerator:
    """Synchronous renderer for trees that contain no component tags."""

    def __init__(self, policy: Optional[FormatPolicy] = None) -> None:
        self.policy = policy if policy is not None else RenderOptions.from_settings().to_policy()

    def render(self, node: Node, pad: str = "") -> str:
        """
        Render a resolved node.

        Args:
            node: Resolved tree node
            pad: Indentation prefix for this node

        Returns:
            HTML string for the node

        Raises:
            MalformedNodeError: If the tree is not a resolved tree
        """
        kind = node_kind(node)
        if kind is NodeKind.EMPTY:
            return ""
        if kind is NodeKind.TEXT:
            return pad + encode(to_text(node))

        if node.kind is TagKind.COMPONENT:
            raise MalformedNodeError(
                f"Unresolved component {node.tag!r} reached the renderer; resolve the tree first"
            )
        if node.kind is TagKind.FRAGMENT:
            return self._render_fragment(node, pad)
        if is_self_closing(node.tag):
            return f"{pad}<{node.tag}{render_attrs(node.props)} />"
        if node.tag == "textarea":
            return self._render_textarea(node, pad)

        inner_html, block_format = self._render_inner(node, pad)
        if block_format:
            inner_html = f"{self.policy.newline}{inner_html}{self.policy.newline}{pad}"

        return f"{pad}<{node.tag}{render_attrs(node.props)}>{inner_html}</{node.tag}>"

    def _render_inner(self, element: Element, pad: str) -> Tuple[str, bool]:
        """Render element content and report whether it needs block layout."""
        tab = self.policy.tab

        raw_html = self._raw_html(element)
        if raw_html is not None:
            return pad + tab + raw_html, True

        children = self._visible_children(element)

        # only text
        if all(node_kind(child) is NodeKind.TEXT for child in children):
            inner_html = encode("".join(to_text(child) for child in children))
            block_format = (
                element.tag != "pre"
                and len(inner_html) > self.policy.max_inline_content_width
            )
            if block_format:
                inner_html = pad + tab + inner_html
            return inner_html, block_format

        # pre keeps its children flush so whitespace survives
        block_format = element.tag != "pre"
        child_pad = pad + tab if block_format else ""
        inner_html = self.policy.newline.join(self.render(child, child_pad) for child in children)
        return inner_html, block_format

    def _render_fragment(self, element: Element, pad: str) -> str:
        """Render fragment children at the fragment's own indentation."""
        raw_html = self._raw_html(element)
        if raw_html is not None:
            return pad + raw_html

        children = self._visible_children(element)

        # adjacent text stays one run, as it would inside a wrapper
        if children and all(node_kind(child) is NodeKind.TEXT for child in children):
            return pad + encode("".join(to_text(child) for child in children))

        return self.policy.newline.join(self.render(child, pad) for child in children)

    def _render_textarea(self, element: Element, pad: str) -> str:
        """Render textarea content from ``value`` or children, without escaping."""
        attributes = {key: value for key, value in element.props.items() if key != "value"}
        value = element.props.get("value")

        if is_empty(value):
            content = "".join(self._render_raw(child) for child in element.children)
        else:
            content = to_text(value)

        return f"{pad}<textarea{render_attrs(attributes)}>{content}</textarea>"

    def _render_raw(self, node: Node) -> str:
        kind = node_kind(node)
        if kind is NodeKind.EMPTY:
            return ""
        if kind is NodeKind.TEXT:
            return to_text(node)
        compact = FormatPolicy(max_inline_content_width=self.policy.max_inline_content_width)
        return HTMLGenerator(compact).render(node)

    @staticmethod
    def _visible_children(element: Element) -> List[Any]:
        return [child for child in element.children if not is_empty(child)]

    @staticmethod
    def _raw_html(element: Element) -> Optional[str]:
        """
        Extract ``dangerouslySetInnerHTML.__html``.

        Returns:
            The raw markup, or None when absent or empty

        Raises:
            MalformedNodeError: If the prop is not a mapping or ``__html`` is not a string
        """
        inner = element.props.get("dangerouslySetInnerHTML")
        if inner is None:
            return None
        if not isinstance(inner, Mapping):
            raise MalformedNodeError(
                f"dangerouslySetInnerHTML must be a mapping with '__html', got {type(inner).__name__}"
            )

        raw_html = inner.get("__html")
        if raw_html is None or raw_html == "":
            return None
        if not isinstance(raw_html, str):
            raise MalformedNodeError(
                f"dangerouslySetInnerHTML.__html must be a string, got {type(raw_html).__name__}"
            )
        return raw_html


def render(node: Node, pad: str = "", policy: Optional[FormatPolicy] = None) -> str:
    """
    Render a resolved tree synchronously.

    Args:
        node: Tree without component tags
        pad: Indentation prefix of the top-level node
        policy: Formatting policy, defaults to the configured render options

    Returns:
        HTML string
    """
    return HTMLGenerator(policy).render(node, pad)


async def render_jsx(
    jsx: Any,
    options: Union[RenderOptions, Mapping[str, Any], None] = None,
    **overrides: Any,
) -> str:
    """
    Resolve a UI tree and render it to HTML.

    Defaults are pretty-printing on, a 40 character inline width, a four
    space indent and ``\\n`` line breaks; each may be overridden through
    ``options`` or keyword arguments.

    Args:
        jsx: Tree node, possibly containing component tags
        options: RenderOptions instance or mapping of option values
        **overrides: Individual option values

    Returns:
        Rendered HTML string, without a trailing newline

    Raises:
        pydantic.ValidationError: If an option is unknown or invalid
        MalformedNodeError: If a value in the tree is not a node
        Exception: Whatever a component raises, unchanged
    """
    render_options = RenderOptions.merge(options, **overrides)
    resolved = await resolve(jsx)
    html = render(resolved, "", render_options.to_policy())

    logger.debug("HTML rendering completed", html_length=len(html), pretty=render_options.pretty)
    return html


def render_jsx_sync(
    jsx: Any,
    options: Union[RenderOptions, Mapping[str, Any], None] = None,
    **overrides: Any,
) -> str:
    """Run ``render_jsx`` on a fresh event loop for callers outside async code."""
    return asyncio.run(render_jsx(jsx, options, **overrides))
