"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from svgjsx.models.options import CleaningOptions, GenerationOptions


class AnalyzeRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")


class CleanRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    options: CleaningOptions = Field(default_factory=CleaningOptions, description="Cleaning passes to run")


class ConvertRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    cleaning: CleaningOptions = Field(default_factory=CleaningOptions, description="Cleaning passes to run")
    generation: GenerationOptions = Field(
        default_factory=GenerationOptions,
        description="Code generation flags and component name",
    )
