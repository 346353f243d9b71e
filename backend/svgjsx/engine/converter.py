"""Conversion orchestrator — limits, optional worker offload, clean → generate."""

from __future__ import annotations

import logging
import time

from svgjsx.codegen.generator import generate_component
from svgjsx.config import Settings, settings as default_settings
from svgjsx.engine.analyzer import analyze_svg
from svgjsx.engine.pipeline import create_pipeline
from svgjsx.engine.worker import WorkerDispatcher
from svgjsx.errors import ResourceLimitError, error_from_kind
from svgjsx.models.options import CleaningOptions, GenerationOptions
from svgjsx.models.results import CleaningResult, ConversionResult, SvgMetrics
from svgjsx.svg.optimizer import strip_editor_metadata
from svgjsx.svg.parser import parse_svg
from svgjsx.utils.memory import memory_limit_reached

logger = logging.getLogger(__name__)


def run_pipeline(
    svg_text: str,
    cleaning: CleaningOptions,
    generation: GenerationOptions,
) -> ConversionResult:
    """parse → metrics → clean → pre-optimize → generate, in the current process."""
    document = parse_svg(svg_text)
    metrics = analyze_svg(document, source=svg_text)

    cleaning_result = None
    if cleaning.any_enabled:
        cleaning_result = create_pipeline().run_on_document(document, cleaning, original_length=len(svg_text))
        for line in cleaning_result.optimizations:
            logger.debug("  %s", line)

    if generation.pre_optimize:
        strip_editor_metadata(document)

    artifact = generate_component(document, generation)
    return ConversionResult(artifact=artifact, metrics=metrics, cleaning=cleaning_result)


class Converter:
    """Entry point for callers: enforces resource policy and picks where to run."""

    def __init__(
        self,
        settings: Settings | None = None,
        dispatcher: WorkerDispatcher | None = None,
    ) -> None:
        self.settings = settings or default_settings
        self.dispatcher = dispatcher or WorkerDispatcher(timeout=self.settings.worker_timeout)

    def check_limits(self, svg_text: str) -> int:
        """Raise ResourceLimitError when the input or process memory is over budget."""
        size = len(svg_text.encode("utf-8"))
        if size > self.settings.max_file_size:
            raise ResourceLimitError(
                f"SVG size {size:,} bytes exceeds {self.settings.max_file_size:,} byte limit"
            )
        if memory_limit_reached(self.settings.memory_limit_mb):
            raise ResourceLimitError(
                f"Memory usage above {self.settings.memory_limit_mb:.0f} MB. Please try with a smaller file."
            )
        return size

    def should_offload(self, size: int) -> bool:
        return self.settings.enable_workers and size > self.settings.max_file_size * self.settings.worker_threshold

    def convert(
        self,
        svg_text: str,
        cleaning: CleaningOptions | None = None,
        generation: GenerationOptions | None = None,
    ) -> ConversionResult:
        cleaning = cleaning or CleaningOptions()
        generation = generation or GenerationOptions()
        start = time.perf_counter()
        size = self.check_limits(svg_text)

        if self.should_offload(size):
            logger.info("Offloading %d byte conversion to worker", size)
            reply = self.dispatcher.execute(
                {
                    "svg": svg_text,
                    "cleaning": cleaning.model_dump(),
                    "generation": generation.model_dump(),
                }
            )
            if not reply["success"]:
                raise error_from_kind(reply["kind"], reply["error"])
            result = ConversionResult.model_validate(reply["result"])
            result.offloaded = True
        else:
            result = run_pipeline(svg_text, cleaning, generation)

        result.processing_time_ms = round((time.perf_counter() - start) * 1000, 1)
        logger.info("Conversion complete in %.0fms (offloaded=%s)", result.processing_time_ms, result.offloaded)
        return result

    def clean(self, svg_text: str, cleaning: CleaningOptions | None = None) -> CleaningResult:
        self.check_limits(svg_text)
        return create_pipeline().run(svg_text, cleaning or CleaningOptions())

    def analyze(self, svg_text: str) -> SvgMetrics:
        self.check_limits(svg_text)
        return analyze_svg(parse_svg(svg_text), source=svg_text)

    def terminate(self) -> None:
        self.dispatcher.terminate()
