"""
Entities and Attributes
=======================

Escaping of reserved characters and serialization of props into an HTML
attribute string.
"""

import math
import re
from typing import Any, List, Mapping, Optional

from jsxrender.models.schemas import MalformedNodeError

HTML_ENTITIES = {
    "<": "&lt;",
    ">": "&gt;",
    "&": "&amp;",
    '"': "&quot;",
}

_ENTITY_PATTERN = re.compile(r'[<>&"]')
_UPPERCASE_PATTERN = re.compile(r"([A-Z])")
_VENDOR_PREFIX = re.compile(r"^-(?:webkit|moz|ms|o)-")

# Props that never become attributes
RESERVED_PROPS = frozenset({"children", "dangerouslySetInnerHTML"})

# CSS properties whose numeric values take no unit
UNITLESS_PROPERTIES = frozenset(
    {
        "animation-iteration-count",
        "aspect-ratio",
        "border-image-outset",
        "border-image-slice",
        "border-image-width",
        "box-flex",
        "box-flex-group",
        "box-ordinal-group",
        "column-count",
        "columns",
        "flex",
        "flex-grow",
        "flex-negative",
        "flex-order",
        "flex-positive",
        "flex-shrink",
        "font-weight",
        "grid-area",
        "grid-column",
        "grid-column-end",
        "grid-column-span",
        "grid-column-start",
        "grid-row",
        "grid-row-end",
        "grid-row-span",
        "grid-row-start",
        "line-clamp",
        "line-height",
        "opacity",
        "order",
        "orphans",
        "scale",
        "tab-size",
        "widows",
        "z-index",
        "zoom",
        # SVG presentation attributes
        "fill-opacity",
        "flood-opacity",
        "stop-opacity",
        "stroke-dasharray",
        "stroke-dashoffset",
        "stroke-miterlimit",
        "stroke-opacity",
        "stroke-width",
    }
)


def encode(text: str) -> str:
    """Escape ``<``, ``>``, ``&`` and ``"`` as named entities."""
    return _ENTITY_PATTERN.sub(lambda match: HTML_ENTITIES[match.group(0)], text)


def escape_attribute_value(value: str) -> str:
    """Escape every double quote so the value can sit inside ``"..."``."""
    return value.replace('"', HTML_ENTITIES['"'])


def to_text(value: Any) -> str:
    """
    String form of a primitive.

    Integral floats drop the trailing ``.0``; non-finite floats print as
    ``NaN``, ``Infinity`` and ``-Infinity``.
    """
    if isinstance(value, float) and not math.isfinite(value):
        if math.isnan(value):
            return "NaN"
        return "Infinity" if value > 0 else "-Infinity"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def kebab(name: str) -> str:
    """Convert camelCase to kebab-case."""
    return _UPPERCASE_PATTERN.sub(r"-\1", name).lower()


def _css_value(name: str, value: Any) -> str:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if value != 0 and _VENDOR_PREFIX.sub("", name) not in UNITLESS_PROPERTIES:
            return f"{to_text(value)}px"
    return to_text(value)


def css(style: Mapping[str, Any]) -> str:
    """Join a CSS property mapping into ``prop: value; prop: value``."""
    declarations: List[str] = []
    for prop, value in style.items():
        if value is None or value is False:
            continue
        name = kebab(prop)
        declarations.append(f"{name}: {_css_value(name, value)}")
    return "; ".join(declarations)


def render_attrs(props: Optional[Mapping[str, Any]] = None) -> str:
    """
    Render props as an HTML attribute string.

    Args:
        props: Element props, ``None`` is treated as empty

    Returns:
        Attributes each preceded by a space, or an empty string

    Raises:
        MalformedNodeError: If ``style`` is neither a mapping nor a string
    """
    if not props:
        return ""

    parts: List[str] = []
    for key, value in props.items():
        if key in RESERVED_PROPS or value is None or value is False:
            continue

        if key == "style":
            if isinstance(value, str):
                declarations = value
            elif isinstance(value, Mapping):
                declarations = css(value)
            else:
                raise MalformedNodeError(
                    f"style must be a mapping or a string, got {type(value).__name__}"
                )
            if declarations:
                parts.append(f' style="{escape_attribute_value(declarations)}"')
        elif value is True:
            parts.append(f" {key}")
        else:
            parts.append(f' {key}="{escape_attribute_value(to_text(value))}"')

    return "".join(parts)
