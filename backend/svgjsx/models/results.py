"""Pipeline output models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SvgMetrics(BaseModel):
    element_count: int = 0
    path_count: int = 0
    group_count: int = 0
    defs_count: int = 0
    style_count: int = 0
    has_inline_styles: bool = False
    has_vendor_attributes: bool = False
    file_size: int = Field(default=0, description="Size in bytes (UTF-8)")


class CleaningResult(BaseModel):
    cleaned_svg: str
    removed_elements: int = 0
    # May be negative: cleaning can grow the output.
    size_reduction: float = 0.0
    optimizations: list[str] = Field(default_factory=list)


class GeneratedArtifact(BaseModel):
    component: str
    stylesheet: str | None = None


class ConversionResult(BaseModel):
    artifact: GeneratedArtifact
    metrics: SvgMetrics
    cleaning: CleaningResult | None = None
    processing_time_ms: float = 0.0
    offloaded: bool = False
