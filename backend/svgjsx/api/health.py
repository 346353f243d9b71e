"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from svgjsx import __version__
from svgjsx.engine.registry import get_registry
from svgjsx.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        passes_registered=get_registry().count,
    )
