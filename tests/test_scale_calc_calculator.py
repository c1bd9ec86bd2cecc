"""
Tests for core/scale_calc/calculator.py — the full calculation pipeline.

Scenarios:
    - A Harmonic Minor: notes, chords, chord tones
    - E♭ Dorian: spelled notes, step labels, chord names
    - C Major: canonical step pattern
    - Input normalisation (lower-case letter, accidental spellings, scale names)
    - Error propagation with no partial output
"""

import logging

import pytest

from core.config import ASCII_CONFIG, VERBOSE_CONFIG
from core.scale_calc import (
    AccidentalOutOfRangeError,
    InvalidAccidentalError,
    InvalidRootLetterError,
    ScaleCalcError,
    UnknownScaleTypeError,
    calculate_scale,
    spell_scale,
)
from core.scale_calc.types import Accidental, Note, ScaleReport


class TestHarmonicMinor:
    def test_notes(self):
        report = calculate_scale("A", "♮", "Harmonic Minor")
        assert report.notes == ("A", "B", "C", "D", "E", "F", "G♯", "A")

    def test_chord_qualities(self):
        report = calculate_scale("A", "♮", "Harmonic Minor")
        assert report.chord_qualities[:7] == ("Min", "Dim", "Aug", "Min", "Maj", "Maj", "Dim")

    def test_chord_names(self):
        report = calculate_scale("A", "♮", "Harmonic Minor")
        assert report.chords[2] == "C Aug"
        assert report.chords[6] == "G♯ Dim"

    def test_chord_tones(self):
        report = calculate_scale("A", "♮", "Harmonic Minor")
        assert report.thirds == ("C", "D", "E", "F", "G♯", "A", "B", "C")
        assert report.fifths == ("E", "F", "G♯", "A", "B", "C", "D", "E")

    def test_steps(self):
        report = calculate_scale("A", "♮", "Harmonic Minor")
        assert report.steps == ("M2", "m2", "M2", "M2", "m2", "A2", "m2")


class TestEFlatDorian:
    def test_notes(self):
        report = calculate_scale("E", "♭", "Dorian")
        assert report.notes == ("E♭", "F", "G♭", "A♭", "B♭", "C", "D♭", "E♭")

    def test_steps(self):
        report = calculate_scale("E", "♭", "Dorian")
        assert report.steps == ("M2", "m2", "M2", "M2", "M2", "m2", "M2")

    def test_chords(self):
        report = calculate_scale("E", "♭", "Dorian")
        assert report.chords == (
            "E♭ Min",
            "F Min",
            "G♭ Maj",
            "A♭ Maj",
            "B♭ Min",
            "C Dim",
            "D♭ Maj",
            "E♭ Min",
        )

    def test_root_and_label(self):
        report = calculate_scale("E", "♭", "Dorian")
        assert report.root == "E♭"
        assert report.label == "E♭ Dorian"

    def test_ascii_config(self):
        report = calculate_scale("E", "b", "Dorian", config=ASCII_CONFIG)
        assert report.notes == ("Eb", "F", "Gb", "Ab", "Bb", "C", "Db", "Eb")


class TestCMajor:
    def test_canonical_step_pattern(self):
        assert calculate_scale("C").steps == ("M2", "M2", "m2", "M2", "M2", "M2", "m2")

    def test_defaults_are_natural_major(self):
        report = calculate_scale("C")
        assert report.scale_type == "Major"
        assert report.notes == ("C", "D", "E", "F", "G", "A", "B", "C")

    def test_show_naturals(self):
        report = calculate_scale("C", config=VERBOSE_CONFIG)
        assert report.notes[0] == "C♮"
        assert report.chords[0] == "C♮ Maj"

    def test_returns_scale_report(self):
        assert isinstance(calculate_scale("C"), ScaleReport)


class TestInputNormalisation:
    def test_lowercase_root(self):
        assert calculate_scale("g").root == "G"

    def test_accidental_enum_accepted(self):
        report = calculate_scale("B", Accidental.FLAT, "Major")
        assert report.notes[3] == "E♭"

    def test_accidental_name_accepted(self):
        assert calculate_scale("F", "sharp", "Major").root == "F♯"

    def test_scale_type_spelling(self):
        assert calculate_scale("A", "", "natural_minor").scale_type == "Natural Minor"

    def test_double_sharp_root(self):
        report = calculate_scale("C", "x", "Major")
        assert report.notes == ("Cx", "Dx", "Ex", "Fx", "Gx", "Ax", "Bx", "Cx")


class TestErrors:
    def test_invalid_letter(self):
        with pytest.raises(InvalidRootLetterError):
            calculate_scale("H")

    def test_multi_character_root(self):
        with pytest.raises(InvalidRootLetterError, match="single letter"):
            calculate_scale("Eb")

    def test_empty_root(self):
        with pytest.raises(InvalidRootLetterError):
            calculate_scale("")

    def test_invalid_accidental(self):
        with pytest.raises(InvalidAccidentalError):
            calculate_scale("C", "?")

    def test_unknown_scale_type(self):
        with pytest.raises(UnknownScaleTypeError):
            calculate_scale("C", "", "Blues")

    def test_out_of_range(self):
        with pytest.raises(AccidentalOutOfRangeError):
            calculate_scale("F", "♭♭", "Locrian")

    def test_all_errors_share_base(self):
        for args in (("H",), ("C", "?"), ("C", "", "Blues"), ("F", "bb", "Locrian")):
            with pytest.raises(ScaleCalcError):
                calculate_scale(*args)


class TestSpellScale:
    def test_keeps_natural_accidentals(self):
        scale = spell_scale(Note("C"), "Major")
        assert all(n.accidental is Accidental.NATURAL for n in scale)

    def test_fresh_scale_per_call(self):
        assert spell_scale(Note("C"), "Major") is not spell_scale(Note("C"), "Major")


class TestLogging:
    def test_debug_log_per_calculation(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="core.scale_calc.calculator"):
            calculate_scale("D", "", "Mixolydian")
        assert any("D Mixolydian" in r.getMessage() for r in caplog.records)
