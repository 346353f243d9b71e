"""FastAPI app factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from svgjsx import __version__
from svgjsx.config import settings
from svgjsx.errors import SvgJsxError
from svgjsx.models.responses import ErrorResponse

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)
logger = logging.getLogger(__name__)

# HTTP status per error kind
ERROR_STATUS = {
    "parse": 400,
    "structural": 422,
    "resource_limit": 413,
    "generation": 500,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    from svgjsx.dependencies import get_converter

    get_converter().terminate()


async def svgjsx_error_handler(request: Request, exc: SvgJsxError) -> JSONResponse:
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=ERROR_STATUS.get(exc.kind, 500),
        content=ErrorResponse(error=exc.kind, message=str(exc)).model_dump(),
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title="svgjsx",
        description="SVG cleaning and React component generation",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all pass modules to trigger registration
    from svgjsx.engine.registry import load_passes

    load_passes()

    app.add_exception_handler(SvgJsxError, svgjsx_error_handler)

    from svgjsx.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
