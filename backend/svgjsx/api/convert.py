"""POST /api/analyze, /api/clean, /api/convert."""

from __future__ import annotations

import asyncio

from fastapi import APIRouter, Depends

from svgjsx.dependencies import get_converter
from svgjsx.engine.converter import Converter
from svgjsx.models.requests import AnalyzeRequest, CleanRequest, ConvertRequest
from svgjsx.models.responses import ErrorResponse
from svgjsx.models.results import CleaningResult, ConversionResult, SvgMetrics

router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid SVG markup"},
    413: {"model": ErrorResponse, "description": "Input too large"},
    422: {"model": ErrorResponse, "description": "Unsupported SVG document"},
}


@router.post("/analyze", response_model=SvgMetrics, responses=ERROR_RESPONSES)
async def analyze(req: AnalyzeRequest, converter: Converter = Depends(get_converter)) -> SvgMetrics:
    return await asyncio.get_running_loop().run_in_executor(None, converter.analyze, req.svg)


@router.post("/clean", response_model=CleaningResult, responses=ERROR_RESPONSES)
async def clean(req: CleanRequest, converter: Converter = Depends(get_converter)) -> CleaningResult:
    return await asyncio.get_running_loop().run_in_executor(None, converter.clean, req.svg, req.options)


@router.post("/convert", response_model=ConversionResult, responses=ERROR_RESPONSES)
async def convert(req: ConvertRequest, converter: Converter = Depends(get_converter)) -> ConversionResult:
    # Sync pipeline in a thread so the event loop stays free
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, converter.convert, req.svg, req.cleaning, req.generation)
