"""C4 — Path Simplification.

Syntactic cleanup of ``d`` attributes via the path-data tokenizer. Paths whose
data cannot be tokenized are skipped untouched.
"""

from __future__ import annotations

import logging

from svgjsx.engine.registry import cleaning_pass
from svgjsx.models.options import CleaningOptions
from svgjsx.models.svg_document import Document
from svgjsx.svg.path_data import PathDataError, simplify_path

logger = logging.getLogger(__name__)


@cleaning_pass(
    id="C4",
    order=4,
    option="simplify_paths",
    description="Simplified {count} paths",
)
def simplify_paths(document: Document, options: CleaningOptions) -> int:
    simplified = 0
    for path in document.iter("path"):
        d = path.get("d")
        if not d:
            continue
        try:
            new_d = simplify_path(d)
        except PathDataError as e:
            logger.debug("Skipping malformed path data: %s", e)
            continue
        if new_d != d:
            path.attributes["d"] = new_d
            simplified += 1
    return simplified
