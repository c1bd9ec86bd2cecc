"""
core/scale_calc/builder.py — Scale letter population and accidental resolution.

A scale is built in two passes over the same Scale object:

1. build_scale() lays out the 7 natural letters from the root, plus the
   root again an octave up. Only the root carries an accidental.
2. resolve_accidentals() walks the natural step pattern from the root's
   position alongside the requested scale-type pattern. Each difference is
   the extra half-steps a degree needs; the running total is that degree's
   accidental.

Worked example, A Phrygian: A→B is 2 half-steps naturally but Phrygian
asks for 1, so the running offset drops to -1 and B becomes B♭. C follows
B by 1 half-step naturally but Phrygian asks for 2, so the offset returns
to 0 and C stays natural.
"""

from __future__ import annotations

from core.scale_calc.errors import AccidentalOutOfRangeError
from core.scale_calc.notes import DOUBLED_LETTERS, position_of
from core.scale_calc.patterns import canonical_scale_type
from core.scale_calc.types import SCALE_LENGTH, Accidental, Note, Scale


def build_scale(root: Note, scale_type: str) -> Scale:
    """Lay out the 8 letters of a scale starting at root.

    Entry 0 is the root unchanged. Entries 1–7 are the following natural
    letters, cyclically, with a natural accidental until resolved; entry 7
    repeats the root letter.

    Args:
        root:       Root note with the user-chosen accidental
        scale_type: Scale type name (normalised to its canonical spelling)

    Returns:
        A fresh Scale of 8 notes

    Raises:
        UnknownScaleTypeError: If scale_type is not supported
    """
    canonical = canonical_scale_type(scale_type)
    start = position_of(root.letter)
    notes = [root]
    for i in range(1, SCALE_LENGTH):
        notes.append(Note(letter=DOUBLED_LETTERS[start + i], accidental=Accidental.NATURAL))
    return Scale(scale_type=canonical, notes=notes)


def resolve_accidentals(
    scale: Scale,
    natural_steps: tuple[int, ...],
    target_steps: tuple[int, ...],
) -> None:
    """Stamp every non-root degree of scale with its accidental, in place.

    natural_steps is read from the root's absolute letter position, so it
    gives the half-steps a scale of bare letters would have from this root.
    target_steps is always read from 0. The cumulative difference, starting
    from the root's own offset, is each degree's accidental offset.

    Args:
        scale:         Scale from build_scale(); entries 1–7 are replaced
        natural_steps: 14-entry natural letter pattern (NATURAL_STEPS)
        target_steps:  14-entry pattern of the requested scale type

    Raises:
        AccidentalOutOfRangeError: If a degree would need more than a
            double flat or double sharp
    """
    base = position_of(scale[0].letter)
    offset = scale[0].offset
    for i in range(1, SCALE_LENGTH):
        offset += target_steps[i - 1] - natural_steps[base + i - 1]
        try:
            accidental = Accidental.from_offset(offset)
        except KeyError:
            raise AccidentalOutOfRangeError(
                f"Degree {i + 1} ({scale[i].letter}) of {scale[0].letter} "
                f"{scale.scale_type} needs an accidental offset of {offset:+d}; "
                "only -2 to +2 can be spelled"
            ) from None
        scale[i] = Note(letter=scale[i].letter, accidental=accidental)
