"""
Tree Builder
============

Construction helper that assembles element descriptors the way tree
literals would, flattening variadic children into ``props["children"]``.
"""

from typing import Any, Mapping, Optional

from jsxrender.models.schemas import Element, Fragment, Tag

__all__ = ["Fragment", "h"]


def h(tag: Tag, props: Optional[Mapping[str, Any]] = None, *children: Any) -> Element:
    """
    Build an element.

    Args:
        tag: Tag name, ``Fragment`` or a component callable
        props: Attributes and component arguments; any ``children`` entry is replaced
        *children: Child nodes; lists and tuples are spliced in one level deep

    Returns:
        Element descriptor

    Example:
        menu = h("ul", {"class": "menu"}, [h("li", None, "one"), h("li", None, "two")])
    """
    return Element(tag=tag, props={**(props or {}), "children": list(children)})
