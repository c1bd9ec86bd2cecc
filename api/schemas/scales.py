"""
api/schemas/scales.py — Pydantic request/response schemas for scale endpoints.

Covers:
    /scales/types      — ScaleTypesResponse
    /scales/calculate  — ScaleCalculateRequest / ScaleCalculateResponse
"""

from pydantic import BaseModel, Field, field_validator

from core.config import VALID_SYMBOL_STYLES
from core.scale_calc.patterns import canonical_scale_type, scale_type_names
from core.scale_calc.types import NATURAL_LETTERS

# ---------------------------------------------------------------------------
# /scales/types
# ---------------------------------------------------------------------------


class ScaleTypesResponse(BaseModel):
    """Response body for GET /scales/types."""

    scale_types: list[str]
    accidentals: list[str]
    symbol_styles: list[str]


# ---------------------------------------------------------------------------
# /scales/calculate
# ---------------------------------------------------------------------------


class ScaleCalculateRequest(BaseModel):
    """Request body for POST /scales/calculate."""

    root: str = Field(
        ...,
        min_length=1,
        max_length=1,
        description="Root letter A–G (case-insensitive).",
    )
    accidental: str = Field(
        default="♮",
        max_length=20,
        description="Root accidental: ♭♭ ♭ ♮ ♯ x, bb b # x, or a name such as 'flat'.",
    )
    scale_type: str = Field(
        default="Major",
        max_length=40,
        description=f"Scale type. Options: {', '.join(scale_type_names())}.",
    )
    symbols: str = Field(
        default="unicode",
        description="Accidental symbol style for the response: 'unicode' or 'ascii'.",
    )
    show_naturals: bool = Field(
        default=False,
        description="If True, keep natural signs on unaltered notes.",
    )

    @field_validator("root")
    @classmethod
    def validate_root(cls, v: str) -> str:
        letter = v.strip().upper()
        if letter not in NATURAL_LETTERS:
            raise ValueError(f"root must be one of: {', '.join(NATURAL_LETTERS)}")
        return letter

    @field_validator("scale_type")
    @classmethod
    def validate_scale_type(cls, v: str) -> str:
        return canonical_scale_type(v)

    @field_validator("symbols")
    @classmethod
    def validate_symbols(cls, v: str) -> str:
        if v not in VALID_SYMBOL_STYLES:
            raise ValueError(f"symbols must be one of: {', '.join(sorted(VALID_SYMBOL_STYLES))}")
        return v


class ScaleCalculateResponse(BaseModel):
    """Response body for POST /scales/calculate."""

    root: str
    scale_type: str
    label: str
    steps: list[str] = Field(..., min_length=7, max_length=7)
    notes: list[str] = Field(..., min_length=8, max_length=8)
    thirds: list[str] = Field(..., min_length=8, max_length=8)
    fifths: list[str] = Field(..., min_length=8, max_length=8)
    chords: list[str] = Field(..., min_length=8, max_length=8)
    chord_qualities: list[str] = Field(..., min_length=8, max_length=8)
