"""
Number Converter — FastAPI Server
==================================

RESTful API around convert_number.

Endpoints:
    POST /convert           Convert one input
    POST /convert/batch     Convert up to 100 inputs in order
    GET  /examples          The example inputs, converted
    GET  /currencies        Recognized currency symbols, in scan order
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production
    uvicorn api:app --log-level debug     # Per-conversion logging

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
    http://localhost:8000/redoc            # ReDoc (alternative)
"""

from __future__ import annotations

from dotenv import load_dotenv
from fastapi import FastAPI
from pydantic import BaseModel, Field

from number_converter import __version__
from number_converter.converter import EXAMPLE_INPUTS, convert_many, convert_number
from number_converter.currency import CURRENCIES
from number_converter.models import ConversionResult, CurrencyInfo
from number_converter.shorthand import format_grouped

load_dotenv()


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Number Converter API",
    description=(
        "Convert shorthand numbers like $1.5K or €2.5M into the full value, "
        "a compact shorthand form and an English-words spelling."
    ),
    version=__version__,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ConvertRequest(BaseModel):
    """Request body for the /convert endpoint."""

    input: str = Field(
        ...,
        max_length=256,
        description="A number as a human would type it.",
        json_schema_extra={"example": "$1.5K"},
    )


class BatchConvertRequest(BaseModel):
    """Request body for the /convert/batch endpoint."""

    inputs: list[str] = Field(
        ...,
        min_length=1,
        max_length=100,
        json_schema_extra={"example": ["$1.5K", "€2.5M", "42"]},
    )


class ConvertResponse(ConversionResult):
    """API-facing result (inherits all fields from ConversionResult)."""

    formatted_value: str = Field(description="numeric_value with en-US thousands grouping")

    model_config = {"json_schema_extra": {"example": {
        "original_input": "$1.5K",
        "numeric_value": "1500",
        "shorthand_form": "$1.5K",
        "words_form": "one thousand five hundred dollars",
        "currency": "$",
        "is_valid": True,
        "error_code": None,
        "formatted_value": "1,500",
    }}}


class BatchConvertResponse(BaseModel):
    results: list[ConvertResponse]
    valid_count: int


class HealthResponse(BaseModel):
    status: str
    version: str


# ─── Helpers ─────────────────────────────────────────────────────────


def _build_response(result: ConversionResult) -> ConvertResponse:
    """Attach the display-only grouped value to a ConversionResult."""
    return ConvertResponse(
        **result.model_dump(),
        formatted_value=format_grouped(result.numeric_value),
    )


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post("/convert", summary="Convert one input", tags=["Conversion"])
def convert(request: ConvertRequest) -> ConvertResponse:
    """Convert a single input.

    Never fails for string input: unparseable values come back with
    **is_valid** `false` and an **error_code** explaining why.
    """
    return _build_response(convert_number(request.input))


@app.post("/convert/batch", summary="Convert several inputs", tags=["Conversion"])
def convert_batch(request: BatchConvertRequest) -> BatchConvertResponse:
    """Convert each input independently; results keep the request order."""
    results = [_build_response(r) for r in convert_many(request.inputs)]
    return BatchConvertResponse(
        results=results,
        valid_count=sum(1 for r in results if r.is_valid),
    )


@app.get("/examples", summary="Example conversions", tags=["Conversion"])
def examples() -> list[ConvertResponse]:
    """The example inputs offered to users, already converted."""
    return [_build_response(r) for r in convert_many(EXAMPLE_INPUTS)]


@app.get("/currencies", summary="Recognized currencies", tags=["Conversion"])
def currencies() -> list[CurrencyInfo]:
    """Currency symbols in scan order. When an input holds several, the first listed wins."""
    return list(CURRENCIES)


@app.get("/health", summary="Health check", tags=["System"])
def health_check() -> HealthResponse:
    """Returns service status and version."""
    return HealthResponse(status="healthy", version=__version__)
