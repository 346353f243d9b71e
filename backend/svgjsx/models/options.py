"""Option records for cleaning and code generation."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEFAULT_COMPONENT_NAME = "SvgIcon"


class CleaningOptions(BaseModel):
    """Which cleaning passes run. Immutable; accepts snake_case or camelCase keys."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    remove_duplicates: bool = True
    cleanup_definitions: bool = True
    optimize_precision: bool = True
    simplify_paths: bool = True
    optimize_colors: bool = True
    normalize_whitespace: bool = True
    remove_unused_styles: bool = True
    # Lossy: erases independent fill-rule / z-order behaviour of overlapping paths.
    merge_paths: bool = False
    precision: int = Field(default=2, ge=0, le=4, description="Fractional digits kept by precision optimization")

    @classmethod
    def none(cls) -> CleaningOptions:
        """All passes disabled."""
        return cls(
            remove_duplicates=False,
            cleanup_definitions=False,
            optimize_precision=False,
            simplify_paths=False,
            optimize_colors=False,
            normalize_whitespace=False,
            remove_unused_styles=False,
            merge_paths=False,
        )

    @property
    def any_enabled(self) -> bool:
        return any(v for k, v in self.model_dump().items() if k != "precision")


class GenerationOptions(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    strip_identifiers: bool = True
    normalize_quoting: bool = True
    wrap_in_memoization: bool = True
    emit_type_annotations: bool = True
    strip_comments: bool = True
    pretty_print: bool = True
    extract_stylesheet: bool = True
    pre_optimize: bool = True
    component_name: str = Field(default=DEFAULT_COMPONENT_NAME, description="Name of the generated component")
