"""SVG parser — facade over the expat XML parser.

Converts raw SVG string → Document. Namespace processing is off so prefixed
names (``xlink:href``, ``xmlns:xlink``) survive verbatim, and attributes keep
their source order.
"""

from __future__ import annotations

import logging
from xml.parsers import expat

from svgjsx.errors import ParseError, StructuralError
from svgjsx.models.svg_document import SVG_ROOT_TAG, Comment, Document, Element, Text

logger = logging.getLogger(__name__)


class _TreeBuilder:
    """expat callback target that assembles Element/Text/Comment nodes."""

    def __init__(self) -> None:
        self.root: Element | None = None
        self._stack: list[Element] = []
        self._text: list[str] = []

    def start(self, tag: str, attrs: list[str]) -> None:
        self._flush_text()
        # ordered_attributes delivers [name1, value1, name2, value2, ...]
        element = Element(tag=tag, attributes=dict(zip(attrs[::2], attrs[1::2])))
        if self._stack:
            self._stack[-1].append(element)
        elif self.root is None:
            self.root = element
        self._stack.append(element)

    def end(self, tag: str) -> None:
        self._flush_text()
        self._stack.pop()

    def data(self, text: str) -> None:
        if self._stack:
            self._text.append(text)

    def comment(self, text: str) -> None:
        if self._stack:
            self._flush_text()
            self._stack[-1].append(Comment(value=text))

    def _flush_text(self) -> None:
        if self._text and self._stack:
            self._stack[-1].append(Text(value="".join(self._text)))
        self._text = []


def parse_markup(svg_text: str) -> Document:
    """Parse markup into a Document without SVG-specific validation."""
    if not svg_text or not svg_text.strip():
        raise ParseError("SVG content is empty")

    builder = _TreeBuilder()
    parser = expat.ParserCreate()
    parser.ordered_attributes = True
    parser.SetParamEntityParsing(expat.XML_PARAM_ENTITY_PARSING_NEVER)
    parser.StartElementHandler = builder.start
    parser.EndElementHandler = builder.end
    parser.CharacterDataHandler = builder.data
    parser.CommentHandler = builder.comment

    try:
        parser.Parse(svg_text.strip(), True)
    except expat.ExpatError as e:
        raise ParseError(f"{expat.ErrorString(e.code)} at line {e.lineno}, column {e.offset}") from e

    if builder.root is None:
        raise ParseError("No root element found")
    return Document(root=builder.root)


def validate_svg(document: Document) -> None:
    """Check the minimal structural requirements of an SVG document."""
    root = document.root
    if root.tag != SVG_ROOT_TAG:
        raise StructuralError(f"Root element is <{root.tag}>, expected <{SVG_ROOT_TAG}>")

    has_viewbox = "viewBox" in root.attributes
    has_size = "width" in root.attributes and "height" in root.attributes
    if not has_viewbox and not has_size:
        raise StructuralError("SVG missing required viewBox or width/height attributes")


def parse_svg(svg_text: str) -> Document:
    """Parse raw SVG string into a validated Document."""
    document = parse_markup(svg_text)
    validate_svg(document)
    logger.info("Parsed SVG: %d elements", document.element_count)
    return document
