"""
core/scale_calc/chords.py — Triads stacked in thirds on each scale degree.

The scale holds 8 notes but index 7 repeats index 0, so chord tones are
taken modulo 7: the third of degree 6 is degree 1, not degree 8.
"""

from __future__ import annotations

from core.scale_calc.errors import UnsupportedChordShapeError
from core.scale_calc.intervals import interval_quality
from core.scale_calc.types import SCALE_LENGTH, Chord, Note, Scale

# (root→third quality, third→fifth quality) → triad quality
TRIAD_SHAPES: dict[tuple[str, str], str] = {
    ("M", "M"): "Aug",
    ("M", "m"): "Maj",
    ("m", "M"): "Min",
    ("m", "m"): "Dim",
}

_DISTINCT_DEGREES = SCALE_LENGTH - 1


def triad_quality(lower_third: str, upper_third: str) -> str:
    """Classify a triad from the qualities of its two stacked thirds.

    Args:
        lower_third: Quality of root → third ("M" or "m")
        upper_third: Quality of third → fifth ("M" or "m")

    Returns:
        "Aug", "Maj", "Min" or "Dim"

    Raises:
        UnsupportedChordShapeError: For any other pair of qualities
    """
    shape = TRIAD_SHAPES.get((lower_third, upper_third))
    if shape is None:
        raise UnsupportedChordShapeError(
            f"No triad is built from a {lower_third!r} third under a {upper_third!r} third. "
            f"Valid: {sorted(TRIAD_SHAPES)}"
        )
    return shape


def chord_tones(scale: Scale, tone: int) -> tuple[Note, ...]:
    """Return the given chord tone above each of the 8 scale degrees.

    Args:
        scale: Resolved 8-note scale
        tone:  1 for roots, 3 for thirds, 5 for fifths

    Examples:
        For A natural minor, tone=3 gives C D E F G A B C.
    """
    if tone < 1:
        raise ValueError(f"Chord tone must be >= 1, got {tone}")
    shift = tone - 1
    return tuple(scale[(i + shift) % _DISTINCT_DEGREES] for i in range(SCALE_LENGTH))


def build_chords(scale: Scale) -> tuple[Chord, ...]:
    """Build the triad on every degree of a resolved scale.

    Returns:
        8 Chord objects, the last repeating the first an octave up

    Raises:
        UnrepresentableIntervalError: If a third cannot be named
        UnsupportedChordShapeError: If a pair of thirds forms no triad
    """
    thirds = chord_tones(scale, 3)
    fifths = chord_tones(scale, 5)
    chords: list[Chord] = []
    for i in range(SCALE_LENGTH):
        root = scale[i]
        quality = triad_quality(
            interval_quality(root, thirds[i]),
            interval_quality(thirds[i], fifths[i]),
        )
        chords.append(Chord(root_index=i, root=root, quality=quality))
    return tuple(chords)
