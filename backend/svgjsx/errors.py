"""svgjsx exception hierarchy.

Every failure that reaches a caller is one of the four kinds below. Callers can
catch SvgJsxError for any of them, or a subclass for targeted handling.
"""

from __future__ import annotations


class SvgJsxError(Exception):
    """Base exception for all conversion errors."""

    kind = "error"
    summary = "Conversion failed"

    @property
    def detail(self) -> str:
        return str(self.args[0]) if self.args else ""

    def __str__(self) -> str:
        return f"{self.summary}: {self.detail}" if self.detail else self.summary


class ParseError(SvgJsxError):
    """Input is not well-formed markup (unbalanced tags, bad character data)."""

    kind = "parse"
    summary = "Invalid SVG markup"


class StructuralError(SvgJsxError):
    """Markup is well-formed but is not a supported SVG document."""

    kind = "structural"
    summary = "Unsupported SVG document"


class ResourceLimitError(SvgJsxError):
    """Input exceeds the configured size limit, or memory usage is too high."""

    kind = "resource_limit"
    summary = "Input too large to process"


class GenerationError(SvgJsxError):
    """Internal invariant violation while generating component code."""

    kind = "generation"
    summary = "Code generation failed"


ERROR_KINDS: dict[str, type[SvgJsxError]] = {
    cls.kind: cls for cls in (ParseError, StructuralError, ResourceLimitError, GenerationError)
}


def error_from_kind(kind: str, message: str) -> SvgJsxError:
    """Rebuild an error received as a (kind, message) pair from a worker."""
    return ERROR_KINDS.get(kind, GenerationError)(message)
