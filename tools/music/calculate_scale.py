"""
calculate_scale tool — spell a scale and its triads from a root and scale type.

Pure computation: no LLM, no DB, no I/O.
Given a root letter, an accidental and a scale type, returns:
  - The 8 note names, root to root
  - The step pattern between adjacent notes (e.g. M2, m2, A2)
  - The third and fifth above each degree
  - The triad on each degree (e.g. "E♭ Min")
"""

from typing import Any

from core.config import VALID_SYMBOL_STYLES, CalculatorConfig
from core.scale_calc import calculate_scale, scale_type_names
from core.scale_calc.types import NATURAL_LETTERS
from tools.base import MusicalTool, ToolParameter, ToolResult


class CalculateScale(MusicalTool):
    """
    Calculate a scale's notes, step pattern, chord tones and triads.

    100% deterministic — no LLM, no database, works offline.
    """

    @property
    def name(self) -> str:
        return "calculate_scale"

    @property
    def description(self) -> str:
        return (
            "Spell a one-octave scale from a root letter, accidental and scale type. "
            "Returns the 8 note names, the interval between each pair of adjacent notes, "
            "the third and fifth above every degree, and the triad quality on every degree. "
            f"Supported scale types: {', '.join(scale_type_names())}."
        )

    @property
    def parameters(self) -> list[ToolParameter]:
        return [
            ToolParameter(
                name="root",
                type=str,
                description="Root letter A–G.",
                choices=NATURAL_LETTERS,
            ),
            ToolParameter(
                name="accidental",
                type=str,
                description="Root accidental (♭♭ ♭ ♮ ♯ x, bb b # x, or 'flat', 'sharp', ...).",
                required=False,
                default="♮",
            ),
            ToolParameter(
                name="scale_type",
                type=str,
                description=f"Scale type. Options: {', '.join(scale_type_names())}.",
                required=False,
                default="Major",
            ),
            ToolParameter(
                name="symbols",
                type=str,
                description="Symbol style for the result: 'unicode' or 'ascii'.",
                required=False,
                default="unicode",
                choices=tuple(sorted(VALID_SYMBOL_STYLES)),
            ),
        ]

    def execute(self, **kwargs: Any) -> ToolResult:
        """
        Calculate the scale for the given root + accidental + scale type.

        Returns:
            ToolResult with the five output rows and the chord qualities.
        """
        root: str = kwargs["root"]
        accidental: str = kwargs.get("accidental") or "♮"
        scale_type: str = kwargs.get("scale_type") or "Major"
        symbols: str = kwargs.get("symbols") or "unicode"

        report = calculate_scale(
            root, accidental, scale_type, config=CalculatorConfig(symbols=symbols)
        )

        return ToolResult(
            success=True,
            data={
                "key": report.label,
                "root": report.root,
                "scale_type": report.scale_type,
                "steps": list(report.steps),
                "notes": list(report.notes),
                "thirds": list(report.thirds),
                "fifths": list(report.fifths),
                "chords": list(report.chords),
                "chord_qualities": list(report.chord_qualities),
            },
            metadata={
                "symbols": symbols,
                "scale_length": len(report.notes),
            },
        )
