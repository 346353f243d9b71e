"""Process memory probe (read-only)."""

from __future__ import annotations

import psutil


def memory_usage_mb() -> float:
    """Resident set size of the current process, in MiB."""
    return psutil.Process().memory_info().rss / (1024 * 1024)


def memory_limit_reached(limit_mb: float) -> bool:
    return memory_usage_mb() > limit_mb
