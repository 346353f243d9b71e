"""C1 — Duplicate Elimination.

Drop every element whose canonical form (tag, sorted attributes, serialized
subtree) already appeared earlier in document order. The first occurrence
always wins, wherever the later copy sits in the tree.

Removing a duplicate changes the canonical form of its ancestors, so sweeps
repeat until one removes nothing. Each sweep is O(n) serializations of O(n)
average size, which turns superlinear on deeply nested duplicates.
"""

from __future__ import annotations

from svgjsx.engine.registry import cleaning_pass
from svgjsx.models.options import CleaningOptions
from svgjsx.models.svg_document import Document, Element
from svgjsx.svg.serializer import canonical_form


def _sweep(document: Document) -> int:
    seen: set[str] = set()
    removed = 0
    stack: list[Element] = [document.root]
    while stack:
        element = stack.pop()
        form = canonical_form(element)
        if form in seen and element.parent is not None:
            element.detach()
            removed += 1
            continue
        seen.add(form)
        # reversed so the stack pops children in document order
        stack.extend(reversed(element.element_children()))
    return removed


@cleaning_pass(
    id="C1",
    order=1,
    option="remove_duplicates",
    description="Removed {count} duplicate elements",
    removes_elements=True,
)
def remove_duplicates(document: Document, options: CleaningOptions) -> int:
    total = 0
    while True:
        removed = _sweep(document)
        if removed == 0:
            return total
        total += removed
