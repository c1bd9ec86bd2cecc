"""
core/scale_calc/intervals.py — Interval class, half-step distance and quality between spelled notes.

Class comes from the letters alone (C→E is a 3rd whatever the
accidentals). Distance counts natural half-steps between the letters and
then applies both accidentals. Quality compares that distance with the
canonical perfect or major size for the class.

Exports:
    PERFECT_QUALITIES   ("d", "P", "A")
    MAJOR_QUALITIES     ("d", "m", "M", "A")

    interval_class(n1, n2) → 1..7
    interval_distance(n1, n2, steps) → int
    interval_quality(n1, n2) → str
    analyze_interval(n1, n2) → Interval
    step_pattern(scale) → tuple[Interval, ...]
"""

from __future__ import annotations

from collections.abc import Sequence

from core.scale_calc.errors import UnrepresentableIntervalError
from core.scale_calc.notes import position_of, wrap_position_of
from core.scale_calc.patterns import NATURAL_STEPS
from core.scale_calc.types import Interval, Note

PERFECT_QUALITIES: tuple[str, ...] = ("d", "P", "A")
MAJOR_QUALITIES: tuple[str, ...] = ("d", "m", "M", "A")

# Interval class → half-steps of the perfect (unison, 4th, 5th) interval
PERFECT_DISTANCES: dict[int, int] = {1: 0, 4: 5, 5: 7}

# Interval class → half-steps of the major (2nd, 3rd, 6th, 7th) interval
MAJOR_DISTANCES: dict[int, int] = {2: 2, 3: 4, 6: 9, 7: 11}


def _letter_span(n1: Note, n2: Note) -> tuple[int, int]:
    """Positions of both letters, with n2 moved up an octave when it wraps."""
    low = position_of(n1.letter)
    high = position_of(n2.letter)
    if high < low:
        high = wrap_position_of(n2.letter)
    return low, high


def interval_class(n1: Note, n2: Note) -> int:
    """Return the inclusive letter distance from n1 up to n2.

    Examples:
        >>> interval_class(Note("C"), Note("E"))
        3
        >>> interval_class(Note("G"), Note("A"))
        2
    """
    low, high = _letter_span(n1, n2)
    return 1 + high - low


def interval_distance(n1: Note, n2: Note, steps: Sequence[int] = NATURAL_STEPS) -> int:
    """Return the half-steps from n1 up to n2.

    Sums the natural steps between the two letters, then widens the result
    for a lowered n1 or a raised n2 and narrows it for the inverse.

    Args:
        n1:    Lower note
        n2:    Upper note (within the following octave)
        steps: 14-entry natural step pattern

    Returns:
        Half-step count; may be negative for heavily altered unisons
    """
    low, high = _letter_span(n1, n2)
    distance = sum(steps[low + k] for k in range(high - low))
    return distance - n1.offset + n2.offset


def interval_quality(n1: Note, n2: Note) -> str:
    """Return the quality of the interval from n1 up to n2.

    Returns:
        One of "d", "m", "M", "P", "A"

    Raises:
        UnrepresentableIntervalError: If the distance is too far from the
            canonical size of its class to be named
    """
    iclass = interval_class(n1, n2)
    distance = interval_distance(n1, n2)
    if iclass in PERFECT_DISTANCES:
        qualities = PERFECT_QUALITIES
        index = distance - PERFECT_DISTANCES[iclass] + 1
    else:
        qualities = MAJOR_QUALITIES
        index = distance - MAJOR_DISTANCES[iclass] + 2
    if not (0 <= index < len(qualities)):
        raise UnrepresentableIntervalError(
            f"No quality for a {iclass}-class interval of {distance} half-steps "
            f"({n1.letter}{n1.offset:+d} → {n2.letter}{n2.offset:+d})"
        )
    return qualities[index]


def analyze_interval(n1: Note, n2: Note) -> Interval:
    """Return class and quality of the interval from n1 up to n2."""
    return Interval(interval_class=interval_class(n1, n2), quality=interval_quality(n1, n2))


def step_pattern(scale: Sequence[Note]) -> tuple[Interval, ...]:
    """Return the intervals between each pair of adjacent scale notes.

    An 8-note scale yields 7 intervals, e.g. C Major gives
    M2 M2 m2 M2 M2 M2 m2.
    """
    return tuple(analyze_interval(scale[i], scale[i + 1]) for i in range(len(scale) - 1))
