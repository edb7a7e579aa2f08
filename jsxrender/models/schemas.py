"""
Pydantic Models and Schemas
===========================

Core data models for UI trees and render options.

A node in a tree is one of:
- an empty value (``None``, ``True`` or ``False``), which renders to nothing
- a primitive leaf (``str``, ``int`` or ``float``)
- an ``Element`` carrying a tag and a props mapping
"""

from typing import Optional, List, Dict, Any, Union, Callable, Mapping
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from jsxrender.config.settings import get_settings


class MalformedNodeError(TypeError):
    """Exception raised when a value cannot be treated as a tree node."""

    pass


# Enums
class Marker(Enum):
    """Reserved tag values that are not element names."""
    FRAGMENT = "fragment"


Fragment = Marker.FRAGMENT


class TagKind(str, Enum):
    """Variants of an element tag."""
    TEXT = "text"
    COMPONENT = "component"
    FRAGMENT = "fragment"


class NodeKind(str, Enum):
    """Variants of a tree node."""
    EMPTY = "empty"
    TEXT = "text"
    ELEMENT = "element"


Component = Callable[[Dict[str, Any]], Any]
Tag = Union[str, Marker, Component]


def flatten_children(children: Any) -> List[Any]:
    """Collapse one level of nested sequences into a single children list."""
    if children is None:
        return []
    if not isinstance(children, (list, tuple)):
        return [children]

    flat: List[Any] = []
    for child in children:
        if isinstance(child, (list, tuple)):
            flat.extend(child)
        else:
            flat.append(child)
    return flat


class Element(BaseModel):
    """Element descriptor: a tag plus props that always hold ``children``."""
    tag: Tag = Field(..., description="Tag name, Fragment marker or component callable")
    props: Dict[str, Any] = Field(
        default_factory=dict, validate_default=True, description="Attributes and children"
    )

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @field_validator("props", mode="before")
    @classmethod
    def normalize_children(cls, v: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """Copy props and make sure ``children`` is a flat list."""
        props = dict(v or {})
        props["children"] = flatten_children(props.get("children"))
        return props

    @property
    def kind(self) -> TagKind:
        if self.tag is Fragment:
            return TagKind.FRAGMENT
        if isinstance(self.tag, str):
            return TagKind.TEXT
        return TagKind.COMPONENT

    @property
    def children(self) -> List[Any]:
        return self.props["children"]

    def with_children(self, children: List[Any]) -> "Element":
        """Return a copy of this element with ``children`` replaced."""
        return type(self)(tag=self.tag, props={**self.props, "children": list(children)})


Node = Union[None, bool, str, int, float, Element]


class FormatPolicy(BaseModel):
    """Resolved formatting policy consumed by the renderer."""
    max_inline_content_width: int = Field(40, ge=0)
    tab: str = ""
    newline: str = ""

    model_config = ConfigDict(frozen=True)


class RenderOptions(BaseModel):
    """Caller-facing render options."""
    pretty: bool = Field(True, description="Indent nested elements on separate lines")
    max_inline_content_width: int = Field(
        40,
        ge=0,
        alias="maxInlineContentWidth",
        description="Longest encoded text kept on the same line as its tags",
    )
    tab: str = Field("    ", description="Indent unit")
    newline: str = Field("\n", description="Line separator")

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    @classmethod
    def from_settings(cls) -> "RenderOptions":
        """Build options from the configured defaults."""
        settings = get_settings()
        return cls(
            pretty=settings.default_pretty,
            max_inline_content_width=settings.default_max_inline_content_width,
            tab=settings.default_tab,
            newline=settings.default_newline,
        )

    @classmethod
    def merge(
        cls,
        options: Union["RenderOptions", Mapping[str, Any], None] = None,
        **overrides: Any,
    ) -> "RenderOptions":
        """
        Combine defaults, an options object or mapping, and keyword overrides.

        Later sources win field by field. Mapping keys and overrides may use
        either field names or their camelCase aliases.

        Raises:
            pydantic.ValidationError: If an option is unknown or invalid
        """
        if isinstance(options, RenderOptions):
            data = options.model_dump()
            sources: List[Mapping[str, Any]] = [overrides]
        else:
            data = cls.from_settings().model_dump()
            sources = [options or {}, overrides]

        aliases = {
            field.alias: name for name, field in cls.model_fields.items() if field.alias
        }
        for source in sources:
            for key, value in source.items():
                data[aliases.get(key, key)] = value

        return cls.model_validate(data)

    def to_policy(self) -> FormatPolicy:
        """Collapse indentation and line breaks when pretty-printing is off."""
        return FormatPolicy(
            max_inline_content_width=self.max_inline_content_width,
            tab=self.tab if self.pretty else "",
            newline=self.newline if self.pretty else "",
        )
