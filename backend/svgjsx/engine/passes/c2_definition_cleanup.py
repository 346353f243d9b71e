"""C2 — Unused-Definition Cleanup.

Remove identified elements under <defs> that nothing references. A definition
is kept when any id inside its subtree is referenced, so removal never leaves
a dangling reference behind. Runs to a fixed point: dropping one definition can
orphan another that only it referenced (e.g. a gradient chained via href).
"""

from __future__ import annotations

from svgjsx.engine.analyzer import referenced_ids
from svgjsx.engine.registry import cleaning_pass
from svgjsx.models.options import CleaningOptions
from svgjsx.models.svg_document import Document, Element


def _definition_candidates(document: Document) -> list[Element]:
    candidates: list[Element] = []
    for defs in document.iter("defs"):
        for element in defs.iter():
            if element is not defs and element.get("id"):
                candidates.append(element)
    return candidates


def _attached(element: Element, root: Element) -> bool:
    top = element
    while top.parent is not None:
        top = top.parent
    return top is root


def _sweep(document: Document) -> int:
    used = referenced_ids(document)
    removed = 0
    for element in _definition_candidates(document):
        if not _attached(element, document.root):
            continue
        if any(e.get("id") in used for e in element.iter()):
            continue
        element.detach()
        removed += 1
    return removed


@cleaning_pass(
    id="C2",
    order=2,
    option="cleanup_definitions",
    description="Cleaned up {count} unused definitions",
    removes_elements=True,
)
def cleanup_definitions(document: Document, options: CleaningOptions) -> int:
    total = 0
    while True:
        removed = _sweep(document)
        if removed == 0:
            return total
        total += removed
