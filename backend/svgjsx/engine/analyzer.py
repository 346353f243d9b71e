"""Structural analyzer — read-only queries over a Document.

Nothing here is cached: cleaning passes mutate the tree between calls, so
every query walks the current state.
"""

from __future__ import annotations

from svgjsx.models.results import SvgMetrics
from svgjsx.models.svg_document import Document, Element
from svgjsx.svg.serializer import serialize_svg

# Attributes whose value may be a url(#id) reference
REFERENCE_ATTRIBUTES = (
    "fill",
    "stroke",
    "filter",
    "clip-path",
    "mask",
    "marker-start",
    "marker-mid",
    "marker-end",
    "href",
    "xlink:href",
)
LINK_ATTRIBUTES = ("href", "xlink:href")

VENDOR_PREFIXES = ("figma:", "inkscape:", "sodipodi:", "sketch:", "serif:", "i:")


def parse_reference(value: str) -> str | None:
    """Return the id targeted by ``url(#id)`` (quotes allowed), else None."""
    value = value.strip()
    if not (value.startswith("url(") and value.endswith(")")):
        return None
    inner = value[4:-1].strip().strip("'\"")
    if inner.startswith("#") and len(inner) > 1:
        return inner[1:]
    return None


def element_references(element: Element) -> set[str]:
    refs: set[str] = set()
    for name in REFERENCE_ATTRIBUTES:
        value = element.attributes.get(name)
        if not value:
            continue
        target = parse_reference(value)
        if target is None and name in LINK_ATTRIBUTES and value.startswith("#") and len(value) > 1:
            target = value[1:]
        if target is not None:
            refs.add(target)
    return refs


def referenced_ids(document: Document) -> set[str]:
    """Ids targeted by a reference anywhere in the current tree."""
    refs: set[str] = set()
    for element in document.iter():
        refs |= element_references(element)
    return refs


def is_vendor_attribute(name: str) -> bool:
    return name.startswith(VENDOR_PREFIXES)


def analyze_svg(document: Document, source: str | None = None) -> SvgMetrics:
    """Compute element counts and flags for a Document.

    ``file_size`` is the UTF-8 size of ``source`` when given (the caller's raw
    input), otherwise of the serialized tree.
    """
    metrics = SvgMetrics()
    for element in document.iter():
        metrics.element_count += 1
        if element.tag == "path":
            metrics.path_count += 1
        elif element.tag == "g":
            metrics.group_count += 1
        elif element.tag == "defs":
            metrics.defs_count += 1
        elif element.tag == "style":
            metrics.style_count += 1
        if "style" in element.attributes:
            metrics.has_inline_styles = True
        if any(is_vendor_attribute(name) for name in element.attributes):
            metrics.has_vendor_attributes = True

    text = source if source is not None else serialize_svg(document)
    metrics.file_size = len(text.encode("utf-8"))
    return metrics
