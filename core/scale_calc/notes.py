"""
core/scale_calc/notes.py — Letter positions, accidental symbols and note parsing.

Positions follow the fixed letter cycle A, B, C, D, E, F, G. Lookups that
must not wrap (a step sum crossing G→A, or the second octave of a
lookahead) use the wrap position, which is the same index shifted by 7.

Exports:
    NATURAL_LETTERS     the 7-letter cycle
    DOUBLED_LETTERS     the cycle repeated once, for lookahead without modulo
    SYMBOL_TABLES       accidental → display symbol, per symbol style

    position_of(letter) → 0..6
    wrap_position_of(letter) → 7..13
    accidental_symbol(accidental, style) → str
    parse_accidental(text) → Accidental
    parse_note(text) → Note
"""

from __future__ import annotations

from core.scale_calc.errors import InvalidAccidentalError, InvalidRootLetterError
from core.scale_calc.types import NATURAL_LETTERS, Accidental, Note

DOUBLED_LETTERS: tuple[str, ...] = NATURAL_LETTERS * 2

# ---------------------------------------------------------------------------
# Accidental symbols
# ---------------------------------------------------------------------------

UNICODE_SYMBOLS: dict[Accidental, str] = {
    Accidental.DOUBLE_FLAT: "♭♭",
    Accidental.FLAT: "♭",
    Accidental.NATURAL: "♮",
    Accidental.SHARP: "♯",
    Accidental.DOUBLE_SHARP: "x",
}

ASCII_SYMBOLS: dict[Accidental, str] = {
    Accidental.DOUBLE_FLAT: "bb",
    Accidental.FLAT: "b",
    Accidental.NATURAL: "n",
    Accidental.SHARP: "#",
    Accidental.DOUBLE_SHARP: "x",
}

SYMBOL_TABLES: dict[str, dict[Accidental, str]] = {
    "unicode": UNICODE_SYMBOLS,
    "ascii": ASCII_SYMBOLS,
}

# Input spellings → accidental. Symbols are matched case-sensitively first
# ("b" is a flat), then names are matched lower-cased.
_ACCIDENTAL_ALIASES: dict[str, Accidental] = {
    "": Accidental.NATURAL,
    "𝄫": Accidental.DOUBLE_FLAT,
    "##": Accidental.DOUBLE_SHARP,
    "♯♯": Accidental.DOUBLE_SHARP,
    "𝄪": Accidental.DOUBLE_SHARP,
}
for _table in SYMBOL_TABLES.values():
    for _accidental, _symbol in _table.items():
        _ACCIDENTAL_ALIASES[_symbol] = _accidental
for _accidental in Accidental:
    _ACCIDENTAL_ALIASES[_accidental.value] = _accidental
    _ACCIDENTAL_ALIASES[_accidental.value.replace("-", " ")] = _accidental
    _ACCIDENTAL_ALIASES[_accidental.value.replace("-", "_")] = _accidental


# ---------------------------------------------------------------------------
# Positions
# ---------------------------------------------------------------------------


def position_of(letter: str) -> int:
    """Return the index of a letter in the A–G cycle.

    Args:
        letter: Natural letter, e.g. "C"

    Returns:
        Position 0 (A) through 6 (G)

    Raises:
        InvalidRootLetterError: If letter is not A–G
    """
    try:
        return NATURAL_LETTERS.index(letter)
    except ValueError:
        raise InvalidRootLetterError(
            f"Unknown note letter {letter!r}. Valid: {list(NATURAL_LETTERS)}"
        ) from None


def wrap_position_of(letter: str) -> int:
    """Return the position of a letter in the second copy of the cycle (7–13)."""
    return position_of(letter) + len(NATURAL_LETTERS)


# ---------------------------------------------------------------------------
# Symbols and parsing
# ---------------------------------------------------------------------------


def accidental_symbol(accidental: Accidental, style: str = "unicode") -> str:
    """Return the display symbol for an accidental in the given style."""
    if style not in SYMBOL_TABLES:
        raise ValueError(f"Unknown symbol style {style!r}. Valid: {sorted(SYMBOL_TABLES)}")
    return SYMBOL_TABLES[style][accidental]


def parse_accidental(text: str) -> Accidental:
    """Parse an accidental from a symbol or a name.

    Accepts both symbol styles ("♭", "b", "♯", "#", "x", "♭♭", "bb", "♮",
    "n"), an empty string for natural, and names such as "flat" or
    "double-sharp".

    Raises:
        InvalidAccidentalError: If text is not a known spelling
    """
    cleaned = text.strip()
    accidental = _ACCIDENTAL_ALIASES.get(cleaned)
    if accidental is None:
        accidental = _ACCIDENTAL_ALIASES.get(cleaned.lower())
    if accidental is None:
        valid = [UNICODE_SYMBOLS[a] for a in Accidental] + [a.value for a in Accidental]
        raise InvalidAccidentalError(f"Unknown accidental {text!r}. Valid: {valid}")
    return accidental


def parse_note(text: str) -> Note:
    """Parse a note name such as "E♭", "Eb", "f#", "Bx" or "C".

    The first character is the letter (case-insensitive), the remainder the
    accidental. A bare letter is a natural.

    Examples:
        >>> parse_note("Eb")
        Note(letter='E', accidental=<Accidental.FLAT: 'flat'>)
        >>> parse_note("G♯").accidental
        <Accidental.SHARP: 'sharp'>
    """
    cleaned = text.strip()
    if not cleaned:
        raise InvalidRootLetterError("Note name must not be empty")
    letter = cleaned[0].upper()
    position_of(letter)
    return Note(letter=letter, accidental=parse_accidental(cleaned[1:]))
