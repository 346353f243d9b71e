"""svgjsx cleaning engine."""

from svgjsx.engine.registry import cleaning_pass, get_registry, load_passes
from svgjsx.engine.pipeline import CleaningPipeline, create_pipeline

__all__ = [
    "cleaning_pass",
    "get_registry",
    "load_passes",
    "CleaningPipeline",
    "create_pipeline",
]
