"""Render a Document tree as JSX markup."""

from __future__ import annotations

import json

from svgjsx.codegen.attributes import is_identifier, style_object
from svgjsx.codegen.formatter import SPACE_EXPRESSION
from svgjsx.models.svg_document import Comment, Element, Node, Text

_JSX_TEXT_SPECIALS = frozenset("{}<>&")
# Elements whose whitespace between children is rendered text
TEXT_CONTENT_TAGS = frozenset({"text", "tspan", "textPath"})


class JsxExpression(str):
    """Attribute value emitted as ``name={...}`` rather than a string literal."""


def quote_literal(value: str, *, normalize: bool) -> str:
    """Quote a JSX attribute string.

    With ``normalize`` every value is double-quoted. Otherwise a value holding
    double but no single quotes keeps them by switching to single quotes.
    """
    value = value.replace("&", "&amp;")
    if not normalize and '"' in value and "'" not in value:
        return f"'{value}'"
    return '"' + value.replace('"', "&quot;") + '"'


def class_expression(value: str, styles: bool) -> JsxExpression | str:
    """``class`` value → literal, or CSS-module lookups when a stylesheet exists."""
    if not styles:
        return value
    refs = [f"styles.{n}" if is_identifier(n) else f"styles[{json.dumps(n)}]" for n in value.split()]
    if len(refs) == 1:
        return JsxExpression(refs[0])
    return JsxExpression("[" + ", ".join(refs) + '].join(" ")')


def _template_literal(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")
    return "{`" + escaped + "`}"


def _is_word_gap(node: Text) -> bool:
    """Whitespace between two siblings inside a text-content element."""
    parent = node.parent
    if parent is None or parent.tag not in TEXT_CONTENT_TAGS:
        return False
    siblings = parent.children
    index = next(i for i, child in enumerate(siblings) if child is node)
    return 0 < index < len(siblings) - 1


def _render_text(node: Text) -> str:
    text = node.value
    if not text.strip():
        return SPACE_EXPRESSION if _is_word_gap(node) else ""
    if any(ch in _JSX_TEXT_SPECIALS for ch in text):
        return "{" + json.dumps(text) + "}"
    return text


def _render_attribute(name: str, value: str, normalize_quoting: bool) -> str:
    if isinstance(value, JsxExpression):
        return f"{name}={{{value}}}"
    if name == "style":
        return f"style={{{style_object(value)}}}"
    return f"{name}={quote_literal(value, normalize=normalize_quoting)}"


def render_jsx(
    node: Node,
    *,
    normalize_quoting: bool = True,
    spread: str | None = None,
) -> str:
    """Render a subtree as compact single-line JSX.

    ``spread`` names a props object spread onto the top element (``{...props}``).
    Attribute names must already be in their React spelling.
    """
    parts: list[str] = []
    _write(node, parts, normalize_quoting, spread)
    return "".join(parts)


def _write(node: Node, parts: list[str], normalize_quoting: bool, spread: str | None) -> None:
    if isinstance(node, Text):
        parent = node.parent
        if parent is not None and parent.tag == "style":
            if node.value.strip():
                parts.append(_template_literal(node.value))
            return
        parts.append(_render_text(node))
        return
    if isinstance(node, Comment):
        parts.append("{/*" + node.value.replace("*/", "* /") + "*/}")
        return
    if not isinstance(node, Element):
        raise TypeError(f"Cannot render {type(node).__name__}")

    parts.append(f"<{node.tag}")
    for name, value in node.attributes.items():
        parts.append(" " + _render_attribute(name, value, normalize_quoting))
    if spread:
        parts.append(f" {{...{spread}}}")

    children: list[str] = []
    for child in node.children:
        _write(child, children, normalize_quoting, None)
    if not any(children):
        parts.append(" />")
        return
    parts.append(">")
    parts.extend(children)
    parts.append(f"</{node.tag}>")
