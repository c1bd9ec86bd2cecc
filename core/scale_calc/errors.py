"""
core/scale_calc/errors.py — Exception taxonomy for the scale calculator.

Every error subclasses ValueError so callers that already guard against bad
input with ``except ValueError`` keep working. Adapters (API, tools, CLI)
catch ScaleCalcError and translate it to their own failure shape.
"""

from __future__ import annotations


class ScaleCalcError(ValueError):
    """Base class for all scale calculation failures."""


class InvalidRootLetterError(ScaleCalcError):
    """The note letter is not one of A–G."""


class InvalidAccidentalError(ScaleCalcError):
    """The accidental symbol or name is not recognized."""


class UnknownScaleTypeError(ScaleCalcError):
    """The scale type is not one of the supported names."""


class AccidentalOutOfRangeError(ScaleCalcError):
    """A resolved scale degree would need more than a double flat or sharp."""


class UnrepresentableIntervalError(ScaleCalcError):
    """The half-step distance has no quality for its interval class."""


class UnsupportedChordShapeError(ScaleCalcError):
    """The pair of stacked-third qualities does not form a known triad."""
