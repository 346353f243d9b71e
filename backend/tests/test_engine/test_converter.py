"""Tests for the conversion orchestrator and worker offload."""

from __future__ import annotations

import pytest

from svgjsx.codegen.generator import generate_component
from svgjsx.config import Settings
from svgjsx.engine.converter import Converter, run_pipeline
from svgjsx.engine.worker import WorkerDispatcher, handle_request
from svgjsx.errors import ParseError, ResourceLimitError, StructuralError
from svgjsx.models.options import CleaningOptions, GenerationOptions
from svgjsx.models.results import ConversionResult
from svgjsx.svg.parser import parse_svg
from svgjsx.svg.serializer import serialize_svg
from tests.conftest import EXPORTED_SVG, SMILEY_SVG


class InProcessDispatcher:
    """Stands in for the worker pool; records requests and answers in-process."""

    def __init__(self, reply=None):
        self.requests = []
        self.reply = reply
        self.terminated = False

    def execute(self, request):
        self.requests.append(request)
        return self.reply if self.reply is not None else handle_request(request)

    def terminate(self):
        self.terminated = True


def _settings(**overrides) -> Settings:
    values = {"max_file_size": 1_000_000, "memory_limit_mb": 1e9, "enable_workers": False}
    values.update(overrides)
    return Settings(**values)


# ---------------------------------------------------------------------------
# run_pipeline
# ---------------------------------------------------------------------------


class TestRunPipeline:
    def test_smiley(self):
        result = run_pipeline(SMILEY_SVG, CleaningOptions(), GenerationOptions())
        assert result.metrics.element_count == 5
        assert result.cleaning is not None
        component = result.artifact.component
        assert "const SvgIcon: React.FC<SvgIconProps>" in component
        assert "export default memo(SvgIcon);" in component
        assert component.count("<circle") == 3
        assert result.artifact.stylesheet is None

    def test_metrics_describe_input(self, exported_svg):
        result = run_pipeline(exported_svg, CleaningOptions(), GenerationOptions())
        assert result.metrics.element_count == 11
        assert result.metrics.file_size == len(exported_svg.encode("utf-8"))

    def test_cleaning_skipped_when_all_disabled(self):
        result = run_pipeline(SMILEY_SVG, CleaningOptions.none(), GenerationOptions())
        assert result.cleaning is None

    def test_pre_optimize_strips_editor_data(self):
        component = run_pipeline(EXPORTED_SVG, CleaningOptions(), GenerationOptions()).artifact.component
        assert "inkscape" not in component
        assert "data-name" not in component
        assert "Generator" not in component

    def test_pre_optimize_off(self):
        options = GenerationOptions(pre_optimize=False)
        component = run_pipeline(EXPORTED_SVG, CleaningOptions(), options).artifact.component
        assert 'data-name="layer"' in component

    def test_errors_propagate(self):
        with pytest.raises(ParseError):
            run_pipeline("<svg><g></svg>", CleaningOptions(), GenerationOptions())
        with pytest.raises(StructuralError):
            run_pipeline("<svg/>", CleaningOptions(), GenerationOptions())


# ---------------------------------------------------------------------------
# Converter
# ---------------------------------------------------------------------------


class TestConverter:
    def test_convert_in_process(self):
        dispatcher = InProcessDispatcher()
        converter = Converter(settings=_settings(), dispatcher=dispatcher)
        result = converter.convert(SMILEY_SVG)
        assert result.offloaded is False
        assert result.processing_time_ms >= 0
        assert dispatcher.requests == []

    def test_size_limit(self):
        converter = Converter(settings=_settings(max_file_size=100), dispatcher=InProcessDispatcher())
        with pytest.raises(ResourceLimitError, match="exceeds"):
            converter.convert(SMILEY_SVG)
        with pytest.raises(ResourceLimitError):
            converter.clean(SMILEY_SVG)
        with pytest.raises(ResourceLimitError):
            converter.analyze(SMILEY_SVG)

    def test_size_limit_counts_bytes(self):
        svg = '<svg viewBox="0 0 1 1"><text>ééééé</text></svg>'
        converter = Converter(settings=_settings(max_file_size=len(svg) + 2), dispatcher=InProcessDispatcher())
        with pytest.raises(ResourceLimitError):
            converter.analyze(svg)

    def test_memory_limit(self):
        converter = Converter(settings=_settings(memory_limit_mb=0.0), dispatcher=InProcessDispatcher())
        with pytest.raises(ResourceLimitError, match="Memory"):
            converter.convert(SMILEY_SVG)

    def test_offload_above_threshold(self):
        dispatcher = InProcessDispatcher()
        converter = Converter(
            settings=_settings(enable_workers=True, worker_threshold=0.0),
            dispatcher=dispatcher,
        )
        result = converter.convert(SMILEY_SVG, generation=GenerationOptions(component_name="Smile"))
        assert result.offloaded is True
        assert "const Smile" in result.artifact.component
        assert len(dispatcher.requests) == 1
        assert dispatcher.requests[0]["generation"]["component_name"] == "Smile"

    def test_offload_matches_in_process(self):
        local = Converter(settings=_settings(), dispatcher=InProcessDispatcher()).convert(EXPORTED_SVG)
        remote = Converter(
            settings=_settings(enable_workers=True, worker_threshold=0.0),
            dispatcher=InProcessDispatcher(),
        ).convert(EXPORTED_SVG)
        assert remote.artifact == local.artifact
        assert remote.cleaning == local.cleaning

    def test_workers_disabled(self):
        dispatcher = InProcessDispatcher()
        converter = Converter(settings=_settings(enable_workers=False, worker_threshold=0.0), dispatcher=dispatcher)
        assert converter.convert(SMILEY_SVG).offloaded is False
        assert dispatcher.requests == []

    def test_worker_error_is_reraised(self):
        dispatcher = InProcessDispatcher(reply={"success": False, "kind": "structural", "error": "no svg"})
        converter = Converter(settings=_settings(enable_workers=True, worker_threshold=0.0), dispatcher=dispatcher)
        with pytest.raises(StructuralError, match="no svg"):
            converter.convert(SMILEY_SVG)

    def test_clean(self):
        converter = Converter(settings=_settings(), dispatcher=InProcessDispatcher())
        result = converter.clean('<svg viewBox="0 0 1 1"><rect/><rect/></svg>')
        assert result.cleaned_svg == '<svg viewBox="0 0 1 1"><rect/></svg>'

    def test_analyze(self):
        converter = Converter(settings=_settings(), dispatcher=InProcessDispatcher())
        assert converter.analyze(SMILEY_SVG).path_count == 1

    def test_terminate(self):
        dispatcher = InProcessDispatcher()
        Converter(settings=_settings(), dispatcher=dispatcher).terminate()
        assert dispatcher.terminated is True

    def test_input_document_unchanged_by_generation(self):
        doc = parse_svg(EXPORTED_SVG)
        before = serialize_svg(doc)
        generate_component(doc, GenerationOptions())
        assert serialize_svg(doc) == before


# ---------------------------------------------------------------------------
# Worker
# ---------------------------------------------------------------------------


class TestWorker:
    def test_handle_request_success(self):
        reply = handle_request({"svg": SMILEY_SVG, "cleaning": {}, "generation": {"emitTypeAnnotations": False}})
        assert reply["success"] is True
        result = ConversionResult.model_validate(reply["result"])
        assert "React.FC" not in result.artifact.component

    def test_handle_request_error(self):
        reply = handle_request({"svg": "not svg"})
        assert reply == {"success": False, "kind": "parse", "error": reply["error"]}
        assert reply["error"]

    def test_handle_request_never_raises(self):
        reply = handle_request({"svg": SMILEY_SVG, "cleaning": {"precision": 99}})
        assert reply["success"] is False
        assert reply["kind"] == "generation"

    def test_dispatcher_round_trip(self):
        dispatcher = WorkerDispatcher(timeout=60)
        try:
            reply = dispatcher.execute({"svg": SMILEY_SVG, "cleaning": {}, "generation": {}})
        finally:
            dispatcher.terminate()
        assert reply["success"] is True
        assert "SvgIcon" in reply["result"]["artifact"]["component"]

    def test_dispatcher_timeout(self):
        dispatcher = WorkerDispatcher(timeout=0.001)
        reply = dispatcher.execute({"svg": SMILEY_SVG})
        assert reply["success"] is False
        assert reply["kind"] == "resource_limit"
        assert dispatcher._pool is None
