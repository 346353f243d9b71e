"""Write canonical SVG text from a Document."""

from __future__ import annotations

from svgjsx.models.svg_document import Comment, Document, Element, Node, Text

# \r in text and \n \r \t in attributes would be normalized away on reparse
_TEXT_ESCAPES = str.maketrans({"&": "&amp;", "<": "&lt;", ">": "&gt;", "\r": "&#13;"})
_ATTR_ESCAPES = str.maketrans(
    {"&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&quot;", "\n": "&#10;", "\r": "&#13;", "\t": "&#9;"}
)


def escape_text(value: str) -> str:
    return value.translate(_TEXT_ESCAPES)


def escape_attribute(value: str) -> str:
    return value.translate(_ATTR_ESCAPES)


def serialize_svg(node: Document | Node) -> str:
    """Serialize a Document (or any subtree) to canonical SVG markup.

    Output has no XML declaration and no whitespace that is not in the tree,
    so parse → serialize is a fixed point.
    """
    if isinstance(node, Document):
        node = node.root
    parts: list[str] = []
    _write(node, parts, sort_attributes=False)
    return "".join(parts)


def canonical_form(element: Element) -> str:
    """Serialization with attributes sorted by name, for structural equality."""
    parts: list[str] = []
    _write(element, parts, sort_attributes=True)
    return "".join(parts)


def _write(node: Node, parts: list[str], *, sort_attributes: bool) -> None:
    if isinstance(node, Text):
        parts.append(escape_text(node.value))
        return
    if isinstance(node, Comment):
        parts.append(f"<!--{node.value}-->")
        return
    if not isinstance(node, Element):
        raise TypeError(f"Cannot serialize {type(node).__name__}")

    items = sorted(node.attributes.items()) if sort_attributes else node.attributes.items()
    parts.append(f"<{node.tag}")
    for name, value in items:
        parts.append(f' {name}="{escape_attribute(value)}"')

    if not node.children:
        parts.append("/>")
        return

    parts.append(">")
    for child in node.children:
        _write(child, parts, sort_attributes=sort_attributes)
    parts.append(f"</{node.tag}>")
