"""Factory helpers for building nodes, and the set of void tags."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from . import element as _element
from .node import Comment, Text

# Tags that never have content; rendered as `<tag/>` while they have no children.
VOID_TAGS = frozenset(
    {
        "area",
        "base",
        "basefont",
        "bgsound",
        "br",
        "col",
        "command",
        "embed",
        "frame",
        "hr",
        "image",
        "img",
        "input",
        "isindex",
        "keygen",
        "link",
        "menuitem",
        "meta",
        "nextid",
        "param",
        "source",
        "track",
        "wbr",
    }
)


def comment(text: str) -> Comment:
    return Comment(text)


def text(text: str) -> Text:
    return Text(text)


def element(tag_name: str, attrs: Optional[Mapping[str, Any]] = None) -> "_element.Element":
    """Create an element; a missing attribute map is treated as empty."""
    return _element.Element(tag_name, {} if attrs is None else attrs)


__all__ = ["VOID_TAGS", "comment", "element", "text"]
