"""Build HTML documents as a tree of nodes and serialize them to a string."""

from . import html
from .element import Element
from .errors import HtmlBuilderError, InvalidArgumentError, StructureError
from .html import VOID_TAGS
from .node import Comment, Node, RawHtml, Text

__all__ = [
    "Comment",
    "Element",
    "HtmlBuilderError",
    "InvalidArgumentError",
    "Node",
    "RawHtml",
    "StructureError",
    "Text",
    "VOID_TAGS",
    "html",
]
