"""
Tree Resolver
=============

Expand component tags into a pure tree of text-tagged elements, fragments
and primitives. Components may be plain functions or coroutine functions
and may return further components, sequences, primitives or empty values.
"""

import asyncio
import inspect
from typing import Any

from jsxrender.config.logging import get_logger
from jsxrender.models.schemas import Element, Fragment, Node, NodeKind, TagKind
from jsxrender.core.rendering.tags import node_kind

logger = get_logger(__name__)


async def resolve(node: Any) -> Node:
    """
    Resolve every component in a tree.

    Sibling children are resolved concurrently and reassembled in their
    original order. The input tree is left untouched; elements whose
    children change are returned as new ``Element`` instances.

    Args:
        node: Tree node, possibly containing component tags

    Returns:
        Equivalent node with no component tags left

    Raises:
        MalformedNodeError: If a value in the tree is not a node
        Exception: Whatever a component raises, unchanged
    """
    if node_kind(node) is not NodeKind.ELEMENT:
        return node

    if node.kind is TagKind.COMPONENT:
        return await resolve(await _call_component(node))

    if not node.children:
        return node

    children = await asyncio.gather(*(resolve(child) for child in node.children))
    return node.with_children(children)


async def _call_component(element: Element) -> Any:
    """Invoke a component with a copy of its props and await the result if needed."""
    component = element.tag
    logger.debug("Invoking component", component=getattr(component, "__name__", repr(component)))

    result = component(dict(element.props))
    if inspect.isawaitable(result):
        result = await result

    # A component returning several nodes contributes no wrapper of its own
    if isinstance(result, (list, tuple)):
        return Element(tag=Fragment, props={"children": result})
    return result
