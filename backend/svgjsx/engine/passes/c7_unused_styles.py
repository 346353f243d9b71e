"""C7 — Unused-Style Removal: drop <style> blocks with no content."""

from __future__ import annotations

from svgjsx.engine.registry import cleaning_pass
from svgjsx.models.options import CleaningOptions
from svgjsx.models.svg_document import Document


@cleaning_pass(
    id="C7",
    order=7,
    option="remove_unused_styles",
    description="Removed {count} unused styles",
    removes_elements=True,
)
def remove_unused_styles(document: Document, options: CleaningOptions) -> int:
    removed = 0
    for style in list(document.iter("style")):
        if style.parent is not None and not style.text_content().strip():
            style.detach()
            removed += 1
    return removed
