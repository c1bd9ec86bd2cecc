"""
core/scale_calc/patterns.py — Half-step patterns for the natural letters and the scale types.

Every pattern has 14 entries: the 7 in-octave steps followed by the same 7
again, so a walk that starts on any letter can read 7 steps ahead without
modular index arithmetic.

Exports:
    NATURAL_STEPS       half-steps A→B, B→C, … G→A, doubled
    SCALE_TYPES         scale type name → 14-entry pattern
    pattern_for(name) → tuple[int, ...]
    canonical_scale_type(name) → str
    scale_type_names() → tuple[str, ...]
"""

from __future__ import annotations

from core.scale_calc.errors import UnknownScaleTypeError

STEPS_PER_OCTAVE = 7

NATURAL_STEPS: tuple[int, ...] = (2, 1, 2, 2, 1, 2, 2, 2, 1, 2, 2, 1, 2, 2)


def _doubled(*steps: int) -> tuple[int, ...]:
    """Repeat a one-octave pattern once for lookahead past the octave."""
    if len(steps) != STEPS_PER_OCTAVE or sum(steps) != 12:
        raise ValueError(f"Scale pattern must be 7 steps summing to 12, got {steps}")
    return steps * 2


# Insertion order is the display order of the scale type list
SCALE_TYPES: dict[str, tuple[int, ...]] = {
    "Major": _doubled(2, 2, 1, 2, 2, 2, 1),
    "Natural Minor": _doubled(2, 1, 2, 2, 1, 2, 2),
    "Harmonic Minor": _doubled(2, 1, 2, 2, 1, 3, 1),
    "Dorian": _doubled(2, 1, 2, 2, 2, 1, 2),
    "Phrygian": _doubled(1, 2, 2, 2, 1, 2, 2),
    "Lydian": _doubled(2, 2, 2, 1, 2, 2, 1),
    "Mixolydian": _doubled(2, 2, 1, 2, 2, 1, 2),
    "Aeolian": _doubled(2, 1, 2, 2, 1, 2, 2),
    "Locrian": _doubled(1, 2, 2, 1, 2, 2, 2),
}

# Lookup key: lower-case, words separated by single spaces
_NORMALIZED_NAMES: dict[str, str] = {name.lower(): name for name in SCALE_TYPES}


def scale_type_names() -> tuple[str, ...]:
    """Return the supported scale type names in display order."""
    return tuple(SCALE_TYPES)


def canonical_scale_type(name: str) -> str:
    """Resolve a scale type spelling to its canonical name.

    Matching ignores case, surrounding whitespace, and treats "_" and "-" as
    spaces, so "natural_minor" and "HARMONIC MINOR" are accepted.

    Raises:
        UnknownScaleTypeError: If the name matches no supported scale type
    """
    key = " ".join(name.replace("_", " ").replace("-", " ").split()).lower()
    if key not in _NORMALIZED_NAMES:
        raise UnknownScaleTypeError(
            f"Unknown scale type {name!r}. Valid: {list(SCALE_TYPES)}"
        )
    return _NORMALIZED_NAMES[key]


def pattern_for(name: str) -> tuple[int, ...]:
    """Return the 14-entry half-step pattern for a scale type.

    Args:
        name: Scale type name, e.g. "Dorian" or "harmonic minor"

    Returns:
        Tuple of 14 half-step counts

    Raises:
        UnknownScaleTypeError: If name is not a supported scale type

    Examples:
        >>> pattern_for("Major")[:7]
        (2, 2, 1, 2, 2, 2, 1)
    """
    return SCALE_TYPES[canonical_scale_type(name)]
