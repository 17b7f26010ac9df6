"""Node tree model: child ownership and the leaf node variants."""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from .errors import InvalidArgumentError, StructureError
from .escaping import escape_text


class Node:
    """Base class of the node tree.

    A node owns an ordered list of children, and every child records the node
    that owns it in `parent`. A node can belong to one parent at a time; call
    `detach()` before attaching it somewhere else. Subclasses implement
    `to_html()`.
    """

    # Leaf variants set this to False and refuse children.
    accepts_children = True

    def __init__(self) -> None:
        self.parent: Optional[Node] = None
        self._children: List[Node] = []

    @property
    def children(self) -> Tuple[Node, ...]:
        return tuple(self._children)

    def get_children(self) -> Tuple[Node, ...]:
        """Return the current children in order."""
        return self.children

    def add_child(self, node: Node) -> Node:
        """Append `node` as the last child."""
        return self.insert_child_at(len(self._children), node)

    def insert_child_at(self, index: int, node: Node) -> Node:
        """Insert `node` before position `index`; index 0 prepends."""
        self._check_insertable(node)
        if not 0 <= index <= len(self._children):
            raise IndexError(f"child index out of range: {index}")
        self._children.insert(index, node)
        node.parent = self
        return self

    def remove_child_at(self, index: int) -> Node:
        """Remove the child at `index` and return it, detached."""
        if not 0 <= index < len(self._children):
            raise IndexError(f"child index out of range: {index}")
        node = self._children.pop(index)
        node.parent = None
        return node

    def remove_all_children(self) -> Node:
        while self._children:
            self.remove_child_at(0)
        return self

    def detach(self) -> Node:
        """Remove this node from its parent, if it has one."""
        if self.parent is not None:
            parent = self.parent
            parent.remove_child_at(parent._children.index(self))
        return self

    def ancestors(self) -> Iterator[Node]:
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def descendants(self) -> Iterator[Node]:
        """Yield all descendants in document order (pre-order, depth first)."""
        for child in self._children:
            yield child
            yield from child.descendants()

    def _check_insertable(self, node: Node, *, replacing: bool = False) -> None:
        """Raise unless `node` can become a child of this node.

        With `replacing`, a node already owned by this node is accepted, since
        all children are removed before it is inserted.
        """
        if not isinstance(node, Node):
            raise InvalidArgumentError(f"expected a Node, got {type(node).__name__}")
        if not self.accepts_children:
            raise StructureError(f"{type(self).__name__} nodes cannot have children")
        if node.parent is not None and not (replacing and node.parent is self):
            raise StructureError("node already has a parent; detach it first")
        if node is self or any(ancestor is node for ancestor in self.ancestors()):
            raise StructureError("inserting a node into its own subtree would create a cycle")

    def child_nodes_to_html(self) -> str:
        return "".join(child.to_html() for child in self._children)

    def to_html(self) -> str:
        raise NotImplementedError

    def __html__(self) -> str:
        # markupsafe / jinja2 protocol: the node is already markup.
        return self.to_html()

    def __str__(self) -> str:
        return self.to_html()


class Text(Node):
    """Text content, escaped when serialized."""

    accepts_children = False

    def __init__(self, text: str = "") -> None:
        super().__init__()
        if not isinstance(text, str):
            raise InvalidArgumentError(f"Text expects a str, got {type(text).__name__}")
        self.text = text

    def to_html(self) -> str:
        return escape_text(self.text)

    def __repr__(self) -> str:
        return f"Text({self.text!r})"


class RawHtml(Node):
    """Pre-rendered markup, emitted verbatim. The caller is responsible for its validity."""

    accepts_children = False

    def __init__(self, html: str = "") -> None:
        super().__init__()
        if not isinstance(html, str):
            raise InvalidArgumentError(f"RawHtml expects a str, got {type(html).__name__}")
        self.html = html

    def to_html(self) -> str:
        return self.html

    def __repr__(self) -> str:
        return f"RawHtml({self.html!r})"


class Comment(Node):
    """An HTML comment. The content is not escaped; avoid `--` in it."""

    accepts_children = False

    def __init__(self, text: str) -> None:
        super().__init__()
        if not isinstance(text, str):
            raise InvalidArgumentError(
                f"Comment expects a str, got {type(text).__name__}; convert it with str() first"
            )
        self.text = text

    def to_html(self) -> str:
        return f"<!--{self.text}-->"

    def __repr__(self) -> str:
        return f"Comment({self.text!r})"


__all__ = ["Comment", "Node", "RawHtml", "Text"]
