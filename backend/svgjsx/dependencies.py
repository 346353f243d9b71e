"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache

from svgjsx.config import Settings, settings
from svgjsx.engine.converter import Converter


def get_settings() -> Settings:
    return settings


@lru_cache(maxsize=1)
def get_converter() -> Converter:
    """Process-wide converter; owns the (lazily started) worker process."""
    return Converter(get_settings())
