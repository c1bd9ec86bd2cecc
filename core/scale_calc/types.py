"""
core/scale_calc/types.py — Value objects for the scale calculator.

Note, Interval, Chord and ScaleReport are frozen dataclasses: safe to hash,
compare and return from the API. Scale is the one mutable object; it lives
for a single calculation and is filled in place phase by phase
(letters → accidentals → natural stripping).

Types:
    Accidental   — half-step modifier (double flat … double sharp)
    Note         — a letter plus an optional accidental
    Scale        — 8 notes, root through root an octave up
    Interval     — interval class + quality, e.g. M2
    Chord        — a triad on one scale degree
    ScaleReport  — the five display sequences of one calculation
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from core.scale_calc.errors import InvalidRootLetterError

#: Natural letters in the fixed cycle used for every position lookup
NATURAL_LETTERS: tuple[str, ...] = ("A", "B", "C", "D", "E", "F", "G")

#: Notes in a one-octave scale including the repeated root
SCALE_LENGTH = 8

INTERVAL_QUALITIES: frozenset[str] = frozenset({"d", "m", "M", "P", "A"})
TRIAD_QUALITIES: frozenset[str] = frozenset({"Aug", "Maj", "Min", "Dim"})


# ---------------------------------------------------------------------------
# Accidental
# ---------------------------------------------------------------------------


class Accidental(str, Enum):
    """Half-step modifier applied to a natural letter."""

    DOUBLE_FLAT = "double-flat"
    FLAT = "flat"
    NATURAL = "natural"
    SHARP = "sharp"
    DOUBLE_SHARP = "double-sharp"

    @property
    def offset(self) -> int:
        """Signed half-step offset: -2 for a double flat … +2 for a double sharp."""
        return _ACCIDENTAL_OFFSETS[self]

    @classmethod
    def from_offset(cls, offset: int) -> Accidental:
        """Return the accidental for a signed offset.

        Raises:
            KeyError: If offset is outside [-2, +2]
        """
        return _OFFSET_ACCIDENTALS[offset]


_ACCIDENTAL_OFFSETS: dict[Accidental, int] = {
    Accidental.DOUBLE_FLAT: -2,
    Accidental.FLAT: -1,
    Accidental.NATURAL: 0,
    Accidental.SHARP: 1,
    Accidental.DOUBLE_SHARP: 2,
}
_OFFSET_ACCIDENTALS: dict[int, Accidental] = {v: k for k, v in _ACCIDENTAL_OFFSETS.items()}


# ---------------------------------------------------------------------------
# Note
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Note:
    """A spelled note.

    Attributes:
        letter:     Natural letter "A"–"G"
        accidental: Accidental, or None once a natural has been stripped
                    for display
    """

    letter: str
    accidental: Accidental | None = Accidental.NATURAL

    @property
    def offset(self) -> int:
        """Half-step offset of the accidental (absent counts as natural)."""
        return self.accidental.offset if self.accidental is not None else 0

    @property
    def is_natural(self) -> bool:
        return self.accidental is None or self.accidental is Accidental.NATURAL

    def __post_init__(self) -> None:
        if self.letter not in NATURAL_LETTERS:
            raise InvalidRootLetterError(
                f"Unknown note letter {self.letter!r}. Valid: {list(NATURAL_LETTERS)}"
            )


# ---------------------------------------------------------------------------
# Scale
# ---------------------------------------------------------------------------


@dataclass
class Scale:
    """An 8-note scale: index 0 is the root, index 7 the root an octave up.

    Attributes:
        scale_type: Canonical scale type name, e.g. "Dorian"
        notes:      Exactly 8 notes; mutated in place while the scale is built
    """

    scale_type: str
    notes: list[Note] = field(default_factory=list)

    @property
    def root(self) -> Note:
        return self.notes[0]

    @property
    def letters(self) -> tuple[str, ...]:
        return tuple(n.letter for n in self.notes)

    def __getitem__(self, index: int) -> Note:
        return self.notes[index]

    def __setitem__(self, index: int, note: Note) -> None:
        self.notes[index] = note

    def __len__(self) -> int:
        return len(self.notes)

    def __iter__(self):
        return iter(self.notes)


# ---------------------------------------------------------------------------
# Interval
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Interval:
    """A diatonic interval between two spelled notes.

    Examples:
        Interval(interval_class=2, quality="M")  # major second, "M2"
        Interval(interval_class=5, quality="P")  # perfect fifth, "P5"
    """

    interval_class: int  # 1 (unison) … 7 (seventh)
    quality: str  # d | m | M | P | A

    @property
    def label(self) -> str:
        """Quality followed by class, e.g. 'M2', 'A2', 'P5'."""
        return f"{self.quality}{self.interval_class}"

    def __post_init__(self) -> None:
        if not (1 <= self.interval_class <= 7):
            raise ValueError(
                f"Interval.interval_class must be in [1, 7], got {self.interval_class}"
            )
        if self.quality not in INTERVAL_QUALITIES:
            raise ValueError(
                f"Interval.quality must be one of {sorted(INTERVAL_QUALITIES)}, "
                f"got {self.quality!r}"
            )


# ---------------------------------------------------------------------------
# Chord
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Chord:
    """A triad stacked in thirds on one scale degree.

    Attributes:
        root_index: Position of the chord root in the scale (0–7)
        root:       The chord root note
        quality:    "Aug", "Maj", "Min" or "Dim"
    """

    root_index: int
    root: Note
    quality: str

    def __post_init__(self) -> None:
        if not (0 <= self.root_index < SCALE_LENGTH):
            raise ValueError(
                f"Chord.root_index must be in [0, {SCALE_LENGTH - 1}], got {self.root_index}"
            )
        if self.quality not in TRIAD_QUALITIES:
            raise ValueError(
                f"Chord.quality must be one of {sorted(TRIAD_QUALITIES)}, got {self.quality!r}"
            )


# ---------------------------------------------------------------------------
# ScaleReport
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ScaleReport:
    """The rendered result of one calculation.

    Attributes:
        root:            Display name of the root, e.g. "E♭"
        scale_type:      Canonical scale type name
        steps:           7 interval labels between adjacent notes, e.g. "M2"
        notes:           8 note display names
        thirds:          8 third-tone display names (scale rotated by 2)
        fifths:          8 fifth-tone display names (scale rotated by 4)
        chords:          8 chord names, e.g. "E♭ Min"
        chord_qualities: 8 triad qualities in degree order
    """

    root: str
    scale_type: str
    steps: tuple[str, ...]
    notes: tuple[str, ...]
    thirds: tuple[str, ...]
    fifths: tuple[str, ...]
    chords: tuple[str, ...]
    chord_qualities: tuple[str, ...]

    @property
    def label(self) -> str:
        """Human-readable label, e.g. 'E♭ Dorian'."""
        return f"{self.root} {self.scale_type}"

    def rows(self) -> dict[str, tuple[str, ...]]:
        """The five output rows in display order."""
        return {
            "steps": self.steps,
            "notes": self.notes,
            "thirds": self.thirds,
            "fifths": self.fifths,
            "chords": self.chords,
        }

    def __post_init__(self) -> None:
        if len(self.steps) != SCALE_LENGTH - 1:
            raise ValueError(
                f"ScaleReport.steps must have {SCALE_LENGTH - 1} labels, got {len(self.steps)}"
            )
        for name in ("notes", "thirds", "fifths", "chords", "chord_qualities"):
            if len(getattr(self, name)) != SCALE_LENGTH:
                raise ValueError(
                    f"ScaleReport.{name} must have {SCALE_LENGTH} entries, "
                    f"got {len(getattr(self, name))}"
                )
