"""
core/scale_calc/ — Pure scale calculation engine.

Exports:
    Types:      Accidental, Note, Scale, Interval, Chord, ScaleReport
    Errors:     ScaleCalcError and its subclasses
    Notes:      position_of, wrap_position_of, parse_accidental, parse_note
    Patterns:   NATURAL_STEPS, SCALE_TYPES, pattern_for, scale_type_names
    Builder:    build_scale, resolve_accidentals
    Intervals:  interval_class, interval_distance, interval_quality, step_pattern
    Chords:     triad_quality, build_chords, chord_tones
    Formatting: display_form, strip_naturals
    Calculator: calculate_scale, spell_scale
"""

from core.scale_calc.builder import build_scale, resolve_accidentals
from core.scale_calc.calculator import calculate_scale, spell_scale
from core.scale_calc.chords import build_chords, chord_tones, triad_quality
from core.scale_calc.errors import (
    AccidentalOutOfRangeError,
    InvalidAccidentalError,
    InvalidRootLetterError,
    ScaleCalcError,
    UnknownScaleTypeError,
    UnrepresentableIntervalError,
    UnsupportedChordShapeError,
)
from core.scale_calc.formatting import display_form, strip_naturals
from core.scale_calc.intervals import (
    analyze_interval,
    interval_class,
    interval_distance,
    interval_quality,
    step_pattern,
)
from core.scale_calc.notes import parse_accidental, parse_note, position_of, wrap_position_of
from core.scale_calc.patterns import NATURAL_STEPS, SCALE_TYPES, pattern_for, scale_type_names
from core.scale_calc.types import Accidental, Chord, Interval, Note, Scale, ScaleReport

__all__ = [
    # Types
    "Accidental",
    "Note",
    "Scale",
    "Interval",
    "Chord",
    "ScaleReport",
    # Errors
    "ScaleCalcError",
    "InvalidRootLetterError",
    "InvalidAccidentalError",
    "UnknownScaleTypeError",
    "AccidentalOutOfRangeError",
    "UnrepresentableIntervalError",
    "UnsupportedChordShapeError",
    # Notes
    "position_of",
    "wrap_position_of",
    "parse_accidental",
    "parse_note",
    # Patterns
    "NATURAL_STEPS",
    "SCALE_TYPES",
    "pattern_for",
    "scale_type_names",
    # Builder
    "build_scale",
    "resolve_accidentals",
    # Intervals
    "interval_class",
    "interval_distance",
    "interval_quality",
    "analyze_interval",
    "step_pattern",
    # Chords
    "triad_quality",
    "build_chords",
    "chord_tones",
    # Formatting
    "display_form",
    "strip_naturals",
    # Calculator
    "calculate_scale",
    "spell_scale",
]
