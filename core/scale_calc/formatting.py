"""
core/scale_calc/formatting.py — Display strings for notes, intervals and chords.
"""

from __future__ import annotations

from core.config import DEFAULT_CONFIG, CalculatorConfig
from core.scale_calc.notes import accidental_symbol
from core.scale_calc.types import Accidental, Chord, Interval, Note, Scale


def display_form(note: Note, config: CalculatorConfig = DEFAULT_CONFIG) -> str:
    """Render a note for display.

    A natural or absent accidental renders as the bare letter unless the
    config keeps natural signs; anything else renders as letter + symbol.

    Examples:
        >>> display_form(Note("G", Accidental.SHARP))
        'G♯'
        >>> display_form(Note("C"))
        'C'
    """
    if note.accidental is None:
        return note.letter
    if note.accidental is Accidental.NATURAL and not config.show_naturals:
        return note.letter
    return note.letter + accidental_symbol(note.accidental, config.symbols)


def strip_naturals(scale: Scale) -> None:
    """Drop the natural accidental from every unaltered note, in place."""
    for i, note in enumerate(scale):
        if note.accidental is Accidental.NATURAL:
            scale[i] = Note(letter=note.letter, accidental=None)


def format_interval(interval: Interval) -> str:
    return interval.label


def format_chord(chord: Chord, config: CalculatorConfig = DEFAULT_CONFIG) -> str:
    """Render a chord as '<note> <quality>', e.g. 'E♭ Min'."""
    return f"{display_form(chord.root, config)} {chord.quality}"
