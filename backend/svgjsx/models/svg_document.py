"""Parsed SVG document model.

A Document owns one root Element. Elements own their children exclusively;
``parent`` is a back-reference kept only so a node can detach itself.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

SVG_ROOT_TAG = "svg"


@dataclass
class Node:
    parent: Element | None = field(default=None, repr=False, compare=False, kw_only=True)

    def detach(self) -> None:
        """Remove this node from its parent. No-op for a detached node."""
        if self.parent is not None:
            self.parent.remove(self)


@dataclass
class Text(Node):
    value: str = ""


@dataclass
class Comment(Node):
    value: str = ""


@dataclass
class Element(Node):
    tag: str = ""
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)

    def append(self, child: Node) -> Node:
        child.detach()
        child.parent = self
        self.children.append(child)
        return child

    def remove(self, child: Node) -> None:
        # Identity, not equality: two structurally equal siblings are distinct nodes.
        for i, existing in enumerate(self.children):
            if existing is child:
                del self.children[i]
                child.parent = None
                return
        raise ValueError(f"<{child!r}> is not a child of <{self.tag}>")

    def get(self, name: str, default: str | None = None) -> str | None:
        return self.attributes.get(name, default)

    def iter(self, tag: str | None = None) -> Iterator[Element]:
        """Yield this element and its element descendants in document order."""
        if tag is None or self.tag == tag:
            yield self
        for child in list(self.children):
            if isinstance(child, Element):
                yield from child.iter(tag)

    def iter_nodes(self) -> Iterator[Node]:
        """Yield every descendant node (elements, text, comments) in document order."""
        for child in list(self.children):
            yield child
            if isinstance(child, Element):
                yield from child.iter_nodes()

    def element_children(self) -> list[Element]:
        return [c for c in self.children if isinstance(c, Element)]

    def text_content(self) -> str:
        return "".join(n.value for n in self.iter_nodes() if isinstance(n, Text))

    def ancestors(self) -> Iterator[Element]:
        node = self.parent
        while node is not None:
            yield node
            node = node.parent


@dataclass
class Document:
    """Represents a parsed SVG file."""

    root: Element

    def iter(self, tag: str | None = None) -> Iterator[Element]:
        return self.root.iter(tag)

    @property
    def element_count(self) -> int:
        return sum(1 for _ in self.root.iter())
