"""Editor-metadata stripping applied before code generation.

Removes what design tools leave behind and a component never needs: comments,
<metadata>, editor-namespaced elements and attributes, ``data-*`` attributes,
empty groups and empty <defs>.
"""

from __future__ import annotations

import logging

from svgjsx.models.svg_document import Comment, Document, Element, Text

logger = logging.getLogger(__name__)

EDITOR_PREFIXES = ("figma:", "inkscape:", "sodipodi:", "sketch:")
_REMOVABLE_TAGS = frozenset({"metadata"})


def _is_editor_name(name: str) -> bool:
    if name.startswith("xmlns:"):
        # namespace declarations, e.g. xmlns:inkscape
        return f"{name[len('xmlns:'):]}:" in EDITOR_PREFIXES
    return name.startswith(EDITOR_PREFIXES)


def _is_empty(element: Element) -> bool:
    return all(isinstance(c, Text) and not c.value.strip() for c in element.children)


def strip_editor_metadata(document: Document) -> int:
    """Strip editor leftovers in place. Returns the number of nodes and attributes removed."""
    removed = 0

    for node in list(document.root.iter_nodes()):
        if isinstance(node, Comment):
            node.detach()
            removed += 1
        elif isinstance(node, Element) and (node.tag in _REMOVABLE_TAGS or _is_editor_name(node.tag)):
            if node.parent is not None:
                node.detach()
                removed += 1

    for element in document.iter():
        for name in list(element.attributes):
            if name.startswith("data-") or _is_editor_name(name):
                del element.attributes[name]
                removed += 1

    # Innermost first, so a group holding only empty groups empties out too.
    for element in reversed(list(document.iter())):
        if element is document.root or element.tag not in ("g", "defs"):
            continue
        if _is_empty(element):
            element.detach()
            removed += 1

    logger.debug("Editor metadata stripped: %d items", removed)
    return removed
