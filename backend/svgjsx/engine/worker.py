"""Off-process execution of a whole conversion.

One request dict in, one reply dict out; nothing streams in between:

    request = {"svg": str, "cleaning": {...}, "generation": {...}}
    reply   = {"success": True, "result": {...}}
            | {"success": False, "kind": "parse" | ..., "error": str}

Cancellation is coarse: terminate() kills the worker process and whatever it
was doing is lost.
"""

from __future__ import annotations

import logging
import multiprocessing
from multiprocessing.pool import Pool
from typing import Any

from svgjsx.errors import GenerationError, SvgJsxError

logger = logging.getLogger(__name__)


def handle_request(request: dict[str, Any]) -> dict[str, Any]:
    """Worker entry point. Never raises: every outcome is a reply dict."""
    from svgjsx.engine.converter import run_pipeline
    from svgjsx.models.options import CleaningOptions, GenerationOptions

    try:
        result = run_pipeline(
            request["svg"],
            CleaningOptions.model_validate(request.get("cleaning", {})),
            GenerationOptions.model_validate(request.get("generation", {})),
        )
    except SvgJsxError as e:
        return {"success": False, "kind": e.kind, "error": e.detail}
    except Exception as e:
        logger.exception("Worker conversion failed")
        return {"success": False, "kind": GenerationError.kind, "error": str(e)}
    return {"success": True, "result": result.model_dump()}


class WorkerDispatcher:
    """Runs requests in a single spawned worker process, created lazily."""

    def __init__(self, timeout: float = 120.0) -> None:
        self.timeout = timeout
        self._pool: Pool | None = None

    def _ensure_pool(self) -> Pool:
        if self._pool is None:
            self._pool = multiprocessing.get_context("spawn").Pool(processes=1)
        return self._pool

    def execute(self, request: dict[str, Any]) -> dict[str, Any]:
        pending = self._ensure_pool().apply_async(handle_request, (request,))
        try:
            return pending.get(timeout=self.timeout)
        except multiprocessing.TimeoutError:
            logger.warning("Worker timed out after %.0fs; terminating", self.timeout)
            self.terminate()
            return {"success": False, "kind": "resource_limit", "error": f"Worker timed out after {self.timeout:.0f}s"}

    def terminate(self) -> None:
        """Kill the worker. In-flight work is abandoned without cleanup."""
        if self._pool is not None:
            self._pool.terminate()
            self._pool.join()
            self._pool = None
