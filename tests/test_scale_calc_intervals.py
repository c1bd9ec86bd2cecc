"""
Tests for core/scale_calc/intervals.py — interval class, distance and quality.
"""

import pytest

from core.scale_calc.calculator import spell_scale
from core.scale_calc.errors import UnrepresentableIntervalError
from core.scale_calc.intervals import (
    analyze_interval,
    interval_class,
    interval_distance,
    interval_quality,
    step_pattern,
)
from core.scale_calc.types import Accidental, Interval, Note

FLAT = Accidental.FLAT
SHARP = Accidental.SHARP
DOUBLE_FLAT = Accidental.DOUBLE_FLAT
DOUBLE_SHARP = Accidental.DOUBLE_SHARP

# ---------------------------------------------------------------------------
# interval_class
# ---------------------------------------------------------------------------


class TestIntervalClass:
    def test_unison(self):
        assert interval_class(Note("C"), Note("C")) == 1

    def test_c_to_e_is_third(self):
        assert interval_class(Note("C"), Note("E")) == 3

    def test_wraps_g_to_a(self):
        assert interval_class(Note("G"), Note("A")) == 2

    def test_b_to_a_is_seventh(self):
        assert interval_class(Note("B"), Note("A")) == 7

    def test_ignores_accidentals(self):
        assert interval_class(Note("C", SHARP), Note("E", FLAT)) == 3


# ---------------------------------------------------------------------------
# interval_distance
# ---------------------------------------------------------------------------


class TestIntervalDistance:
    def test_natural_half_step(self):
        assert interval_distance(Note("B"), Note("C")) == 1
        assert interval_distance(Note("E"), Note("F")) == 1

    def test_natural_whole_step(self):
        assert interval_distance(Note("C"), Note("D")) == 2

    def test_across_wraparound(self):
        # G A B C
        assert interval_distance(Note("G"), Note("C")) == 5

    def test_lowered_lower_note_widens(self):
        assert interval_distance(Note("E", FLAT), Note("G")) == 4

    def test_raised_upper_note_widens(self):
        assert interval_distance(Note("F"), Note("G", SHARP)) == 3

    def test_raised_lower_note_narrows(self):
        assert interval_distance(Note("C", SHARP), Note("E")) == 3

    def test_lowered_upper_note_narrows(self):
        assert interval_distance(Note("C"), Note("E", FLAT)) == 3

    def test_double_accidentals_count_twice(self):
        assert interval_distance(Note("C"), Note("E", DOUBLE_FLAT)) == 2
        assert interval_distance(Note("C", DOUBLE_FLAT), Note("E")) == 6

    def test_unison_can_go_negative(self):
        assert interval_distance(Note("C", SHARP), Note("C")) == -1

    def test_absent_accidental_counts_as_natural(self):
        assert interval_distance(Note("C", None), Note("E", None)) == 4


# ---------------------------------------------------------------------------
# interval_quality
# ---------------------------------------------------------------------------


class TestIntervalQuality:
    @pytest.mark.parametrize(
        "n1, n2, expected",
        [
            (Note("C"), Note("C"), "P"),
            (Note("C"), Note("C", SHARP), "A"),
            (Note("C", SHARP), Note("C"), "d"),
            (Note("C"), Note("D"), "M"),
            (Note("B"), Note("C"), "m"),
            (Note("F"), Note("G", SHARP), "A"),
            (Note("C"), Note("E"), "M"),
            (Note("C"), Note("E", FLAT), "m"),
            (Note("C"), Note("E", DOUBLE_FLAT), "d"),
            (Note("C"), Note("F"), "P"),
            (Note("C"), Note("F", SHARP), "A"),
            (Note("C"), Note("G"), "P"),
            (Note("B"), Note("F"), "d"),
            (Note("C"), Note("A"), "M"),
            (Note("C"), Note("B"), "M"),
            (Note("C"), Note("B", FLAT), "m"),
        ],
    )
    def test_quality(self, n1, n2, expected):
        assert interval_quality(n1, n2) == expected

    def test_doubly_diminished_unison_unrepresentable(self):
        with pytest.raises(UnrepresentableIntervalError):
            interval_quality(Note("C", SHARP), Note("C", FLAT))

    def test_doubly_augmented_third_unrepresentable(self):
        with pytest.raises(UnrepresentableIntervalError, match="3-class"):
            interval_quality(Note("C"), Note("E", DOUBLE_SHARP))

    def test_doubly_diminished_fifth_unrepresentable(self):
        with pytest.raises(UnrepresentableIntervalError):
            interval_quality(Note("C", SHARP), Note("G", FLAT))


# ---------------------------------------------------------------------------
# analyze_interval / step_pattern
# ---------------------------------------------------------------------------


class TestStepPattern:
    def test_analyze_interval(self):
        assert analyze_interval(Note("C"), Note("E")) == Interval(interval_class=3, quality="M")

    def test_c_major_canonical_pattern(self, c_major):
        labels = [iv.label for iv in step_pattern(c_major)]
        assert labels == ["M2", "M2", "m2", "M2", "M2", "M2", "m2"]

    def test_harmonic_minor_has_augmented_second(self, a_harmonic_minor):
        labels = [iv.label for iv in step_pattern(a_harmonic_minor)]
        assert labels == ["M2", "m2", "M2", "M2", "m2", "A2", "m2"]

    def test_seven_intervals_for_eight_notes(self, c_major):
        assert len(step_pattern(c_major)) == 7

    def test_every_step_is_a_second(self):
        scale = spell_scale(Note("D", FLAT), "Locrian")
        assert all(iv.interval_class == 2 for iv in step_pattern(scale))

    def test_e_flat_dorian(self):
        scale = spell_scale(Note("E", FLAT), "Dorian")
        labels = [iv.label for iv in step_pattern(scale)]
        assert labels == ["M2", "m2", "M2", "M2", "M2", "m2", "M2"]
