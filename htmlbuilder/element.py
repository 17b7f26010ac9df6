"""The Element node: tag name, attributes and the fluent building API."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Union

from . import html as factory
from .errors import InvalidArgumentError
from .escaping import attribute_name, escape_attribute
from .node import Node, RawHtml, Text

AttrValue = Union[str, bool, None]


def _require_name(name: Any) -> str:
    if not isinstance(name, str):
        raise InvalidArgumentError(f"attribute name must be a str, got {type(name).__name__}")
    return name


def _require_content(content: Any) -> Union[str, Node]:
    if not isinstance(content, (str, Node)):
        raise InvalidArgumentError(f"expected a str or a Node, got {type(content).__name__}")
    return content


class Element(Node):
    """An HTML element.

    Mutators return the element itself, so calls can be chained:

        Element("ul").append(Element("li").set_text("a")).add_class("menu")

    Attributes are kept in insertion order. A value of True (or None) renders
    as a bare attribute name.
    """

    def __init__(self, tag_name: str, attributes: Optional[Mapping[str, Any]] = None) -> None:
        super().__init__()
        if not isinstance(tag_name, str) or not tag_name:
            raise InvalidArgumentError(f"tag name must be a non-empty str, got {tag_name!r}")
        if attributes is not None and not isinstance(attributes, Mapping):
            raise InvalidArgumentError(
                f"attributes must be a mapping, got {type(attributes).__name__}"
            )
        self.tag_name = tag_name
        self._attributes: Dict[str, Any] = {}
        for name, value in (attributes or {}).items():
            self._attributes[_require_name(name)] = value

    # Attributes.

    def attrs(self) -> Dict[str, Any]:
        """Return a copy of all attributes in insertion order."""
        return dict(self._attributes)

    def attr(self, name: str) -> Any:
        """Return the value of attribute `name`, or None when it is not set."""
        return self._attributes.get(_require_name(name))

    def has_attr(self, name: str) -> bool:
        return _require_name(name) in self._attributes

    def set_attr(self, name: str, value: AttrValue) -> Element:
        self._attributes[_require_name(name)] = value
        return self

    def remove_attr(self, name: str) -> Element:
        self._attributes.pop(_require_name(name), None)
        return self

    # Boolean properties.

    def prop(self, name: str) -> bool:
        """True iff attribute `name` is present and its value is exactly True."""
        return self._attributes.get(_require_name(name)) is True

    def set_prop(self, name: str, state: bool) -> Element:
        """Set attribute `name` to True, or remove it when `state` is False."""
        _require_name(name)
        if not isinstance(state, bool):
            raise InvalidArgumentError(f"property state must be a bool, got {type(state).__name__}")
        if state:
            self._attributes[name] = True
        else:
            self._attributes.pop(name, None)
        return self

    def props(self) -> List[str]:
        """Return the names of all attributes whose value is exactly True."""
        return [name for name, value in self._attributes.items() if value is True]

    # Children.

    def _child_from(self, tag_name_or_node: Union[str, Node], attrs: Optional[Mapping[str, Any]]) -> Node:
        content = _require_content(tag_name_or_node)
        if isinstance(content, Node):
            if attrs is not None:
                raise InvalidArgumentError("attrs can only be given together with a tag name")
            return content
        return factory.element(content, attrs)

    def append(self, tag_name_or_node: Union[str, Node], attrs: Optional[Mapping[str, Any]] = None) -> Element:
        """Append a node, or a new element built from a tag name and `attrs`."""
        self.add_child(self._child_from(tag_name_or_node, attrs))
        return self

    def append_to(self, target: Element) -> Element:
        """Append this element to `target`. Returns this element, not the target."""
        if not isinstance(target, Element):
            raise InvalidArgumentError(f"target must be an Element, got {type(target).__name__}")
        target.append(self)
        return self

    def prepend(self, tag_name_or_node: Union[str, Node], attrs: Optional[Mapping[str, Any]] = None) -> Element:
        """Insert a node, or a new element built from a tag name and `attrs`, as the first child."""
        self.insert_child_at(0, self._child_from(tag_name_or_node, attrs))
        return self

    def prepend_to(self, target: Element) -> Element:
        if not isinstance(target, Element):
            raise InvalidArgumentError(f"target must be an Element, got {type(target).__name__}")
        target.prepend(self)
        return self

    def _replace_children(self, node: Node) -> None:
        # Validate before clearing so a rejected node leaves the element untouched.
        self._check_insertable(node, replacing=True)
        self.remove_all_children()
        self.add_child(node)

    # Content accessors.

    def html(self) -> str:
        """Return the serialized children of this element."""
        return self.child_nodes_to_html()

    def set_html(self, content: Union[str, Node]) -> Element:
        """Replace all children: a str is inserted verbatim as RawHtml, a Node as itself."""
        content = _require_content(content)
        self._replace_children(RawHtml(content) if isinstance(content, str) else content)
        return self

    def text(self) -> str:
        """Return the text of all Text descendants in document order, unescaped."""
        parts: List[str] = []
        # An Element is never a Text; the check keeps text() valid on any node type.
        if isinstance(self, Text):
            parts.append(self.text)
        for node in self.descendants():
            if isinstance(node, Text):
                parts.append(node.text)
        return "".join(parts)

    def set_text(self, content: Union[str, Node]) -> Element:
        """Replace all children: a str becomes one Text node, a Node is inserted as is."""
        content = _require_content(content)
        self._replace_children(Text(content) if isinstance(content, str) else content)
        return self

    # Class list.

    def _classes(self) -> List[str]:
        value = self._attributes.get("class")
        if not isinstance(value, str):
            return []
        return [token.strip() for token in value.split(" ")]

    def add_class(self, name: str) -> Element:
        """Append `name` to the class attribute. Duplicates are kept."""
        classes = self._classes()
        classes.append(name)
        self._attributes["class"] = " ".join(classes)
        return self

    def has_class(self, name: str) -> bool:
        return name in self._classes()

    def remove_class(self, name: str) -> Element:
        """Remove the first occurrence of `name`; drop the attribute if nothing is left."""
        classes = self._classes()
        if name in classes:
            classes.remove(name)
        value = " ".join(classes).strip()
        if value:
            self._attributes["class"] = value
        else:
            self._attributes.pop("class", None)
        return self

    def toggle_class(self, name: str, state: Optional[bool] = None) -> Element:
        """Flip membership of `name`, or force it to `state` when given."""
        present = self.has_class(name)
        if state is None:
            state = not present
        if present and not state:
            self.remove_class(name)
        elif not present and state:
            self.add_class(name)
        return self

    # Tag name.

    def get_tag_name(self) -> str:
        return self.tag_name

    def switch_tag_name(self, value: str) -> Element:
        self.tag_name = value
        return self

    # Serialization.

    def attributes_to_html(self) -> str:
        parts: List[str] = []
        for name, value in self._attributes.items():
            key = attribute_name(name)
            if value is True or value is None:
                parts.append(key)
            else:
                # A stored False renders as an empty value.
                text = "" if value is False else str(value)
                parts.append(f'{key}="{escape_attribute(text)}"')
        return " ".join(parts)

    def to_html(self) -> str:
        attrs = self.attributes_to_html()
        if attrs:
            attrs = " " + attrs
        if not self._children and self.tag_name in factory.VOID_TAGS:
            return f"<{self.tag_name}{attrs}/>"
        return f"<{self.tag_name}{attrs}>{self.child_nodes_to_html()}</{self.tag_name}>"

    def __repr__(self) -> str:
        return f"Element({self.tag_name!r}, {self._attributes!r})"


__all__ = ["AttrValue", "Element"]
