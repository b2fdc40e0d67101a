"""
Traianus — FastAPI Server
=========================

RESTful API for strict Roman numeral parsing.

Endpoints:
    POST /parse             Parse a single numeral
    POST /parse/batch       Parse a list of numerals
    POST /parse/file        Upload a text file, one numeral per line
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Config (environment or .env):
    TRAIANUS_LOG_LEVEL      Logging level (default WARNING)
    TRAIANUS_MAX_BATCH      Max numerals per batch/file request (default 1000)
"""

from __future__ import annotations

import asyncio
import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException, UploadFile
from pydantic import BaseModel, Field

from traianus import MAX_VALUE, __version__
from traianus.models import BatchReport, ParseError, ParseOutcome, Status
from traianus.pipeline import NumeralPipeline

# ─── Load .env if available ──────────────────────────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass

logger = logging.getLogger(__name__)

MAX_BATCH = int(os.environ.get("TRAIANUS_MAX_BATCH", "1000"))
MAX_FILE_BYTES = 1_048_576
MAX_NUMERAL_LENGTH = 64


# ─── Application Lifespan (pre-warm pipeline) ───────────────────────

_pipeline: NumeralPipeline | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and create the shared pipeline on startup."""
    global _pipeline  # noqa: PLW0603
    logging.basicConfig(level=os.environ.get("TRAIANUS_LOG_LEVEL", "WARNING").upper())
    _pipeline = NumeralPipeline()
    yield
    _pipeline = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Traianus API",
    description=(
        "Strict Roman numeral parsing. Accepts only the canonical spelling "
        "of each number from 0 to 3999 and explains every rejection."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ParseRequest(BaseModel):
    """Request body for the /parse endpoint."""

    numeral: str = Field(
        ...,
        max_length=MAX_NUMERAL_LENGTH,
        description="The Roman numeral to parse. The empty string parses to 0.",
        json_schema_extra={"example": "MCMXCIV"},
    )


class BatchRequest(BaseModel):
    """Request body for the /parse/batch endpoint."""

    numerals: list[str] = Field(
        ...,
        description="Numerals to parse, reported in the same order.",
        json_schema_extra={"example": ["MMXXIV", "IIII", "XIZI"]},
    )


class ParseResponse(BaseModel):
    """Verdict for a single numeral."""

    numeral: str
    is_valid: bool
    status: Status
    value: Optional[int] = None
    error: Optional[ParseError] = None

    model_config = {"json_schema_extra": {"example": {
        "numeral": "XIZI",
        "is_valid": False,
        "status": "INVALID",
        "value": None,
        "error": {
            "code": "INVALID_CHARACTER",
            "message": "Invalid character: Z",
            "details": {"character": "Z", "position": 2},
        },
    }}}


class BatchResponse(BaseModel):
    """Verdicts for many numerals."""

    total: int
    valid_count: int
    invalid_count: int
    results: list[ParseResponse]


class HealthResponse(BaseModel):
    status: str
    version: str
    max_value: int


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_pipeline() -> NumeralPipeline:
    if _pipeline is None:
        raise HTTPException(status_code=503, detail="Pipeline not initialised")
    return _pipeline


def _build_response(outcome: ParseOutcome) -> ParseResponse:
    return ParseResponse(
        numeral=outcome.numeral,
        is_valid=outcome.is_valid,
        status=outcome.status,
        value=outcome.value,
        error=outcome.error,
    )


def _build_batch_response(report: BatchReport) -> BatchResponse:
    return BatchResponse(
        total=report.total,
        valid_count=report.valid_count,
        invalid_count=report.invalid_count,
        results=[_build_response(o) for o in report.outcomes],
    )


def _check_batch_size(count: int) -> None:
    if count > MAX_BATCH:
        raise HTTPException(
            status_code=413,
            detail=f"Too many numerals ({count}); max {MAX_BATCH} per request",
        )


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/parse",
    summary="Parse a single Roman numeral",
    tags=["Parsing"],
    responses={503: {"description": "Pipeline not yet initialised"}},
)
def parse_numeral(request: ParseRequest) -> ParseResponse:
    """Parse one numeral.

    A malformed numeral is **not** an HTTP error: the response is 200 with
    `is_valid: false` and an `error` explaining the rejection.
    """
    pipeline = _get_pipeline()
    return _build_response(pipeline.run(request.numeral))


@app.post(
    "/parse/batch",
    summary="Parse a list of Roman numerals",
    tags=["Parsing"],
    responses={
        413: {"description": "Too many numerals in one request"},
        503: {"description": "Pipeline not yet initialised"},
    },
)
def parse_batch(request: BatchRequest) -> BatchResponse:
    """Parse every numeral in the list; results keep the request order."""
    _check_batch_size(len(request.numerals))
    pipeline = _get_pipeline()
    return _build_batch_response(pipeline.run_batch(request.numerals))


@app.post(
    "/parse/file",
    summary="Parse numerals from an uploaded text file",
    tags=["Parsing"],
    responses={
        413: {"description": "File too large (max 1 MB) or too many numerals"},
        400: {"description": "File is not valid UTF-8 text"},
        503: {"description": "Pipeline not yet initialised"},
    },
)
async def parse_file(file: UploadFile) -> BatchResponse:
    """Upload a `.txt` file with one numeral per line. Blank lines are skipped."""
    if file.size and file.size > MAX_FILE_BYTES:
        raise HTTPException(status_code=413, detail="File too large (max 1 MB)")

    content = await file.read()
    if len(content) > MAX_FILE_BYTES:
        raise HTTPException(status_code=413, detail="File too large (max 1 MB)")

    try:
        blob = content.decode("utf-8")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="File must be UTF-8 encoded text")

    _check_batch_size(sum(1 for line in blob.splitlines() if line.strip()))

    pipeline = _get_pipeline()
    report = await asyncio.to_thread(pipeline.parse_lines, blob)
    logger.info("Parsed uploaded file %r: %d numeral(s)", file.filename, report.total)
    return _build_batch_response(report)


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Pipeline not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and version info."""
    _get_pipeline()
    return HealthResponse(status="healthy", version=__version__, max_value=MAX_VALUE)
