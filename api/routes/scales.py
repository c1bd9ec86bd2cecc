"""
api/routes/scales.py — Scale calculation endpoints.

Endpoints:
    GET  /scales/types      — Supported scale types, accidentals and symbol styles
    POST /scales/calculate  — Notes, step pattern, chord tones and triads of a scale

No LLM, no database — pure music theory computation.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from api.schemas.scales import ScaleCalculateRequest, ScaleCalculateResponse, ScaleTypesResponse
from core.config import VALID_SYMBOL_STYLES, CalculatorConfig
from core.scale_calc import ScaleCalcError, calculate_scale, scale_type_names
from core.scale_calc.notes import UNICODE_SYMBOLS
from infrastructure.metrics import LatencyTimer, record_calculation

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/scales", tags=["scales"])


# ---------------------------------------------------------------------------
# GET /scales/types
# ---------------------------------------------------------------------------


@router.get("/types", response_model=ScaleTypesResponse)
def list_scale_types() -> ScaleTypesResponse:
    """Return the scale types and accidentals accepted by /scales/calculate."""
    return ScaleTypesResponse(
        scale_types=list(scale_type_names()),
        accidentals=list(UNICODE_SYMBOLS.values()),
        symbol_styles=sorted(VALID_SYMBOL_STYLES),
    )


# ---------------------------------------------------------------------------
# POST /scales/calculate
# ---------------------------------------------------------------------------


@router.post("/calculate", response_model=ScaleCalculateResponse)
def calculate(request: ScaleCalculateRequest) -> ScaleCalculateResponse:
    """Calculate a scale from a root letter, accidental and scale type.

    Args:
        request: ScaleCalculateRequest with root, accidental, scale_type,
            symbols and show_naturals.

    Returns:
        ScaleCalculateResponse with the five output rows.

    Raises:
        422: Unknown accidental, or a root/scale combination whose degrees
            cannot be spelled with at most a double flat or sharp.
    """
    config = CalculatorConfig(symbols=request.symbols, show_naturals=request.show_naturals)
    timer = LatencyTimer()
    try:
        with timer:
            report = calculate_scale(
                request.root,
                request.accidental,
                request.scale_type,
                config=config,
            )
    except ScaleCalcError as exc:
        logger.warning(
            "Rejected %s%s %s: %s", request.root, request.accidental, request.scale_type, exc
        )
        record_calculation(
            scale_type=request.scale_type, status="rejected", latency_seconds=timer.elapsed
        )
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    record_calculation(
        scale_type=report.scale_type, status="success", latency_seconds=timer.elapsed
    )
    return ScaleCalculateResponse(
        root=report.root,
        scale_type=report.scale_type,
        label=report.label,
        steps=list(report.steps),
        notes=list(report.notes),
        thirds=list(report.thirds),
        fifths=list(report.fifths),
        chords=list(report.chords),
        chord_qualities=list(report.chord_qualities),
    )
