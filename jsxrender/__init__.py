"""
jsxrender
=========

Render declarative UI trees to HTML text on the server or at build time.

This package provides:
- Element descriptors and the ``h`` construction helper
- Asynchronous resolution of component functions into a pure tree
- A deterministic, pretty-printing HTML serializer
"""

from jsxrender.core.dsl.builder import h
from jsxrender.core.rendering.html_generator import (
    HTMLGenerator,
    render,
    render_jsx,
    render_jsx_sync,
)
from jsxrender.core.rendering.resolver import resolve
from jsxrender.models.schemas import (
    Element,
    Fragment,
    MalformedNodeError,
    RenderOptions,
)

__version__ = "1.0.0"

__all__ = [
    "Element",
    "Fragment",
    "HTMLGenerator",
    "MalformedNodeError",
    "RenderOptions",
    "h",
    "render",
    "render_jsx",
    "render_jsx_sync",
    "resolve",
]
