"""Cleaning pipeline — runs the enabled passes in fixed order over one Document."""

from __future__ import annotations

import logging
import time

from svgjsx.engine.registry import PassRegistry, get_registry, load_passes
from svgjsx.models.options import CleaningOptions
from svgjsx.models.results import CleaningResult
from svgjsx.models.svg_document import Document
from svgjsx.svg.parser import parse_svg
from svgjsx.svg.serializer import serialize_svg

logger = logging.getLogger(__name__)


def size_reduction(original_length: int, cleaned_length: int) -> float:
    """Percentage shrink; negative when the output grew."""
    if original_length <= 0:
        return 0.0
    return (original_length - cleaned_length) / original_length * 100


class CleaningPipeline:
    """Orchestrates the cleaning passes."""

    def __init__(self, registry: PassRegistry | None = None) -> None:
        self.registry = registry or get_registry()

    def run(self, svg_text: str, options: CleaningOptions) -> CleaningResult:
        """Parse, clean and re-serialize SVG text."""
        document = parse_svg(svg_text)
        return self.run_on_document(document, options, original_length=len(svg_text))

    def run_on_document(
        self,
        document: Document,
        options: CleaningOptions,
        original_length: int | None = None,
    ) -> CleaningResult:
        """Clean a parsed Document in place.

        ``original_length`` is the length of the caller's source text; when
        omitted the Document's own serialization before cleaning is used.
        """
        start = time.perf_counter()
        if original_length is None:
            original_length = len(serialize_svg(document))

        specs = self.registry.enabled(options)
        logger.info("Cleaning: %d passes enabled", len(specs))

        optimizations: list[str] = []
        removed_elements = 0
        for spec in specs:
            t0 = time.perf_counter()
            try:
                count = spec.fn(document, options)
            except Exception as e:
                # A failing pass degrades to "no effect"; it never aborts cleaning.
                logger.warning("  %s FAILED: %s", spec.id, e)
                continue
            elapsed = (time.perf_counter() - t0) * 1000
            logger.debug("  %s affected %d items in %.1fms", spec.id, count, elapsed)
            if count <= 0:
                continue
            optimizations.append(spec.describe(count))
            if spec.removes_elements:
                removed_elements += count

        cleaned_svg = serialize_svg(document)
        result = CleaningResult(
            cleaned_svg=cleaned_svg,
            removed_elements=removed_elements,
            size_reduction=size_reduction(original_length, len(cleaned_svg)),
            optimizations=optimizations,
        )
        logger.info(
            "Cleaning complete: %d elements removed, %.1f%% smaller in %.0fms",
            removed_elements,
            result.size_reduction,
            (time.perf_counter() - start) * 1000,
        )
        return result


def create_pipeline(registry: PassRegistry | None = None) -> CleaningPipeline:
    """Factory function for a pipeline over the registered passes."""
    if registry is None:
        load_passes()
    return CleaningPipeline(registry=registry)
