"""Pydantic models describing a node tree as data, e.g. loaded from YAML."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Dict, List, Literal, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from . import html
from .io_utils import read_yaml
from .node import Node, RawHtml


class TextSpec(BaseModel):
    """Text content; escaped on output."""

    kind: Literal["text"] = "text"
    text: str = Field(..., description="Plain text payload.")

    model_config = ConfigDict(extra="forbid")


class RawHtmlSpec(BaseModel):
    """Trusted markup inserted verbatim."""

    kind: Literal["raw"] = "raw"
    html: str = Field(..., description="Pre-rendered HTML fragment.")

    model_config = ConfigDict(extra="forbid")


class CommentSpec(BaseModel):
    kind: Literal["comment"] = "comment"
    text: str = Field(..., description="Comment body, written without escaping.")

    model_config = ConfigDict(extra="forbid")


class ElementSpec(BaseModel):
    """An element with attributes and nested children."""

    kind: Literal["element"] = "element"
    tag: str = Field(..., min_length=1, description="Tag name, e.g. 'p' or 'input'.")
    attrs: Dict[str, Union[bool, int, float, str, None]] = Field(
        default_factory=dict,
        description="Attributes in order; true renders a bare boolean attribute, false omits it.",
    )
    classes: List[str] = Field(
        default_factory=list, description="Class tokens added after attrs are applied."
    )
    children: List[Union[str, "NodeSpec"]] = Field(
        default_factory=list,
        description="Child nodes; a bare string is shorthand for a text node.",
    )

    model_config = ConfigDict(extra="forbid")


NodeSpec = Annotated[
    Union[ElementSpec, TextSpec, RawHtmlSpec, CommentSpec],
    Field(discriminator="kind"),
]

ElementSpec.model_rebuild()


class Document(BaseModel):
    """Top-level tree document."""

    root: NodeSpec = Field(..., description="Root node of the tree.")

    model_config = ConfigDict(extra="forbid")


def build_node(spec: Union[str, ElementSpec, TextSpec, RawHtmlSpec, CommentSpec]) -> Node:
    """Construct a live node tree from its model."""
    if isinstance(spec, str):
        return html.text(spec)
    if isinstance(spec, TextSpec):
        return html.text(spec.text)
    if isinstance(spec, RawHtmlSpec):
        return RawHtml(spec.html)
    if isinstance(spec, CommentSpec):
        return html.comment(spec.text)
    attrs = {name: value for name, value in spec.attrs.items() if value is not False}
    el = html.element(spec.tag, attrs)
    for name in spec.classes:
        el.add_class(name)
    for child in spec.children:
        el.append(build_node(child))
    return el


def parse_document(data: object) -> Document:
    return Document.model_validate(data)


def load_document(path: Path) -> Document:
    """Read and validate a YAML tree document.

    Raises SystemExit with a readable message when the file is missing or invalid.
    """
    if not path.exists():
        raise SystemExit(f"Document not found: {path}")
    try:
        data = read_yaml(path)
    except yaml.YAMLError as exc:
        raise SystemExit(f"Invalid document {path}: {exc}") from exc
    try:
        return parse_document(data)
    except ValidationError as exc:
        raise SystemExit(f"Invalid document {path}: {exc}") from exc


def render_document(document: Document, *, doctype: bool = False) -> str:
    output = build_node(document.root).to_html()
    if doctype:
        output = "<!doctype html>\n" + output
    return output


__all__ = [
    "CommentSpec",
    "Document",
    "ElementSpec",
    "NodeSpec",
    "RawHtmlSpec",
    "TextSpec",
    "build_node",
    "load_document",
    "parse_document",
    "render_document",
]
