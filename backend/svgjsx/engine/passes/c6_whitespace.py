"""C6 — Whitespace Normalization.

Trim every text node; text nodes left empty are removed. Comments are not text.
"""

from __future__ import annotations

from svgjsx.engine.registry import cleaning_pass
from svgjsx.models.options import CleaningOptions
from svgjsx.models.svg_document import Document, Text


@cleaning_pass(
    id="C6",
    order=6,
    option="normalize_whitespace",
    description="Normalized whitespace in {count} text nodes",
)
def normalize_whitespace(document: Document, options: CleaningOptions) -> int:
    changed = 0
    for node in list(document.root.iter_nodes()):
        if not isinstance(node, Text):
            continue
        trimmed = node.value.strip()
        if trimmed == node.value:
            continue
        changed += 1
        if trimmed:
            node.value = trimmed
        else:
            node.detach()
    return changed
