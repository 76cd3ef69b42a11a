"""FastAPI application for the document text analytics system.

This module exposes a small HTTP API around ProcessingPipeline.

Usage (from project root, after `pip install .[server]`):

    uvicorn doctext_analytics.api.app:app --reload

Then send a multipart/form-data POST request with a ``file`` field to
/api/convert or /api/analyze, or a JSON body to /api/analyze-text.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

from fastapi import Depends, FastAPI, File, HTTPException, UploadFile
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .. import __version__
from ..analytics.serialization import AnalysisSerializer
from ..converters.exceptions import (
    ConversionError,
    ConverterError,
    EncodingError,
    FileReadError,
    UnsupportedFileTypeError,
)
from ..pipeline import PipelineConfig, PipelineResult, ProcessingPipeline

logger = logging.getLogger(__name__)

app = FastAPI(title="Document Text Analytics API", version=__version__)

ERROR_STATUS_CODES: Dict[str, int] = {
    ConversionError.__name__: 422,
    EncodingError.__name__: 422,
    UnsupportedFileTypeError.__name__: 415,
    FileReadError.__name__: 400,
}


class AnalyzeTextRequest(BaseModel):
    text: str
    include_business: bool = True


def _get_strict_file_types_from_env() -> bool:
    """Determine whether unknown extensions are rejected.

    Uses DOCTEXT_STRICT_FILE_TYPES environment variable. Accepted truthy values:
    "1", "true", "yes", "y" (case-insensitive). If not set, defaults to False.
    """
    value = os.getenv("DOCTEXT_STRICT_FILE_TYPES")
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "y"}


@lru_cache(maxsize=1)
def get_pipeline() -> ProcessingPipeline:
    """Shared pipeline; the spaCy model is loaded once on first use."""
    config = PipelineConfig(
        strict_file_types=_get_strict_file_types_from_env(),
        config_dir=os.getenv("DOCTEXT_CONFIG_DIR"),
    )
    return ProcessingPipeline(config=config)


def _status_for(error_type: str) -> int:
    return ERROR_STATUS_CODES.get(error_type, 500)


def _error_response(error: Dict[str, Any]) -> JSONResponse:
    return JSONResponse(
        status_code=_status_for(error.get("error_type", "")),
        content={"detail": error},
    )


def _result_payload(result: PipelineResult) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "success": result.success,
        "processing_time": result.processing_time,
        "errors": result.errors,
        "warnings": result.warnings,
    }
    if result.conversion is not None:
        payload["conversion"] = AnalysisSerializer.conversion_to_dict(result.conversion)
    if result.extracted_data is not None:
        payload["extracted_data"] = AnalysisSerializer.extracted_data_to_dict(
            result.extracted_data
        )
    payload["business_analysis"] = (
        AnalysisSerializer.business_analysis_to_dict(result.business_analysis)
        if result.business_analysis is not None
        else None
    )
    return payload


@app.get("/health")
async def health() -> Dict[str, str]:
    return {"status": "ok", "version": __version__}


@app.post("/api/convert")
async def convert_document(
    file: UploadFile = File(..., description="Document to convert (.docx/.pdf/.md/text)"),
    pipeline: ProcessingPipeline = Depends(get_pipeline),
):
    """Convert an uploaded document to plain text."""
    filename = file.filename or ""
    data = await file.read()

    try:
        conversion = pipeline.convert_bytes(data, Path(filename).suffix, source_name=filename)
    except ConverterError as exc:
        logger.error(f"Conversion of '{filename}' failed: {exc}")
        raise HTTPException(
            status_code=_status_for(exc.__class__.__name__),
            detail=exc.to_dict(),
        ) from exc

    payload = AnalysisSerializer.conversion_to_dict(conversion)
    payload["filename"] = filename
    return payload


@app.post("/api/analyze")
async def analyze_document(
    file: UploadFile = File(..., description="Document to analyze (.docx/.pdf/.md/text)"),
    include_business: bool = True,
    pipeline: ProcessingPipeline = Depends(get_pipeline),
):
    """Convert an uploaded document and run text analytics over it."""
    filename = file.filename or ""
    data = await file.read()

    result = pipeline.process_bytes(
        data,
        Path(filename).suffix,
        source_name=filename,
        include_business=include_business,
    )
    if not result.success:
        return _error_response(result.metadata.get("error", {}))

    payload = _result_payload(result)
    payload["filename"] = filename
    return payload


@app.post("/api/analyze-text")
async def analyze_text(
    request: AnalyzeTextRequest,
    pipeline: ProcessingPipeline = Depends(get_pipeline),
):
    """Run text analytics over a raw text body."""
    result = pipeline.analyze_text(request.text, include_business=request.include_business)
    return _result_payload(result)
