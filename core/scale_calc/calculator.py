"""
core/scale_calc/calculator.py — One full scale calculation, from inputs to display rows.

Pipeline (all on one fresh Scale):
    build_scale → resolve_accidentals → step_pattern / build_chords
    → strip_naturals → display strings

Any failure raises a ScaleCalcError subclass before anything is rendered,
so callers never see a partial report.
"""

from __future__ import annotations

import logging

from core.config import DEFAULT_CONFIG, CalculatorConfig
from core.scale_calc.builder import build_scale, resolve_accidentals
from core.scale_calc.chords import build_chords, chord_tones
from core.scale_calc.errors import InvalidRootLetterError
from core.scale_calc.formatting import display_form, format_chord, format_interval, strip_naturals
from core.scale_calc.intervals import step_pattern
from core.scale_calc.notes import parse_accidental
from core.scale_calc.patterns import NATURAL_STEPS, pattern_for
from core.scale_calc.types import Accidental, Note, Scale, ScaleReport

logger = logging.getLogger(__name__)


def spell_scale(root: Note, scale_type: str) -> Scale:
    """Build and resolve a scale without any display processing.

    Args:
        root:       Root note with its accidental
        scale_type: Scale type name

    Returns:
        Scale whose 8 notes all carry an accidental

    Raises:
        UnknownScaleTypeError: If scale_type is not supported
        AccidentalOutOfRangeError: If a degree cannot be spelled
    """
    target = pattern_for(scale_type)
    scale = build_scale(root, scale_type)
    resolve_accidentals(scale, NATURAL_STEPS, target)
    return scale


def calculate_scale(
    root_letter: str,
    accidental: str | Accidental = Accidental.NATURAL,
    scale_type: str = "Major",
    config: CalculatorConfig = DEFAULT_CONFIG,
) -> ScaleReport:
    """Calculate a scale and render its five output rows.

    Args:
        root_letter: Root letter "A"–"G" (case-insensitive)
        accidental:  Accidental of the root, as an Accidental or any
                     spelling parse_accidental() accepts. Default natural.
        scale_type:  One of the supported scale type names
        config:      Display configuration

    Returns:
        ScaleReport with steps, notes, thirds, fifths and chords

    Raises:
        ScaleCalcError: Any invalid input or unspellable result

    Examples:
        >>> report = calculate_scale("A", "", "Harmonic Minor")
        >>> report.notes
        ('A', 'B', 'C', 'D', 'E', 'F', 'G♯', 'A')
        >>> report.chord_qualities[:3]
        ('Min', 'Dim', 'Aug')
    """
    letter = root_letter.strip().upper()
    if len(letter) != 1:
        raise InvalidRootLetterError(
            f"Root must be a single letter A–G, got {root_letter!r}"
        )
    if not isinstance(accidental, Accidental):
        accidental = parse_accidental(accidental)
    root = Note(letter=letter, accidental=accidental)

    scale = spell_scale(root, scale_type)
    intervals = step_pattern(scale)
    chords = build_chords(scale)
    thirds = chord_tones(scale, 3)
    fifths = chord_tones(scale, 5)

    if not config.show_naturals:
        strip_naturals(scale)

    report = ScaleReport(
        root=display_form(scale.root, config),
        scale_type=scale.scale_type,
        steps=tuple(format_interval(iv) for iv in intervals),
        notes=tuple(display_form(n, config) for n in scale),
        thirds=tuple(display_form(n, config) for n in thirds),
        fifths=tuple(display_form(n, config) for n in fifths),
        chords=tuple(format_chord(c, config) for c in chords),
        chord_qualities=tuple(c.quality for c in chords),
    )
    logger.debug("Calculated %s: %s", report.label, " ".join(report.notes))
    return report
