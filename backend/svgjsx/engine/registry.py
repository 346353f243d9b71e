"""Cleaning-pass registry — every pass is a standalone function registered via decorator.

Usage:
    @cleaning_pass(id="C3", order=3, option="optimize_precision",
                   description="Optimized precision in {count} attributes")
    def optimize_precision(document: Document, options: CleaningOptions) -> int:
        ...
        return changed

A pass mutates the Document in place and returns how many items it affected.
Adding a new pass = creating one file in ``engine/passes`` with the decorator.
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from svgjsx.models.options import CleaningOptions
    from svgjsx.models.svg_document import Document

logger = logging.getLogger(__name__)

PassFn = Callable[["Document", "CleaningOptions"], int]


@dataclass
class PassSpec:
    id: str
    order: int
    option: str
    fn: PassFn
    description: str = ""
    # True when the count is a number of detached elements
    removes_elements: bool = False

    def enabled(self, options: CleaningOptions) -> bool:
        return bool(getattr(options, self.option))

    def describe(self, count: int) -> str:
        return self.description.format(count=count)


class PassRegistry:
    """Registry of cleaning passes, kept in execution order."""

    def __init__(self) -> None:
        self._passes: dict[str, PassSpec] = {}

    def register(self, spec: PassSpec) -> None:
        if spec.id in self._passes:
            raise ValueError(f"Duplicate pass ID: {spec.id}")
        if any(p.order == spec.order for p in self._passes.values()):
            raise ValueError(f"Duplicate pass order {spec.order} for {spec.id}")
        self._passes[spec.id] = spec
        logger.debug("Registered pass %s (%s)", spec.id, spec.option)

    def get(self, pass_id: str) -> PassSpec:
        return self._passes[pass_id]

    def all(self) -> list[PassSpec]:
        return sorted(self._passes.values(), key=lambda s: s.order)

    def enabled(self, options: CleaningOptions) -> list[PassSpec]:
        return [s for s in self.all() if s.enabled(options)]

    @property
    def count(self) -> int:
        return len(self._passes)


# Module-level singleton
_registry = PassRegistry()


def get_registry() -> PassRegistry:
    return _registry


def cleaning_pass(
    *,
    id: str,
    order: int,
    option: str,
    description: str = "",
    removes_elements: bool = False,
):
    """Decorator to register a cleaning pass function."""

    def decorator(fn: PassFn):
        spec = PassSpec(
            id=id,
            order=order,
            option=option,
            fn=fn,
            description=description,
            removes_elements=removes_elements,
        )
        _registry.register(spec)
        return fn

    return decorator


def load_passes() -> None:
    """Import all pass modules so @cleaning_pass decorators fire."""
    package = importlib.import_module("svgjsx.engine.passes")
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{package.__name__}.{module_name}")
