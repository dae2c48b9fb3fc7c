"""
Tests for core pitch primitives.

Tests cover:
- LetterName, PitchClass, Note (pitch.py)
- IntervalQuality, Interval (interval.py)
"""

import pytest

from chuk_mcp_pitch.constants import IntervalQualityType, IntervalType
from chuk_mcp_pitch.core import (
    LETTER_NAMES,
    Interval,
    IntervalQuality,
    LetterName,
    Note,
    PitchClass,
)
from chuk_mcp_pitch.errors import (
    IncompatibleQualityError,
    InvalidQualityCombinationError,
    PitchError,
    UnknownLetterNameError,
)


class TestLetterName:
    """Tests for the letter name registry."""

    def test_values(self) -> None:
        """Letters carry diatonic values 1-7 and their natural chromatic values."""
        assert [ln.diatonic_value for ln in LETTER_NAMES.values()] == [1, 2, 3, 4, 5, 6, 7]
        assert [ln.chromatic_value for ln in LETTER_NAMES.values()] == [0, 2, 4, 5, 7, 9, 11]

    def test_singletons(self) -> None:
        assert LETTER_NAMES["G"] is LetterName.G
        assert LetterName.from_diatonic_value(5) is LetterName.G

    def test_from_diatonic_value_wraps(self) -> None:
        """Any integer resolves to a letter."""
        assert LetterName.from_diatonic_value(8) is LetterName.C
        assert LetterName.from_diatonic_value(0) is LetterName.B
        assert LetterName.from_diatonic_value(-6) is LetterName.C

    def test_from_name(self) -> None:
        assert LetterName.from_name("g") is LetterName.G
        assert LetterName.from_name(" A ") is LetterName.A

    def test_from_name_unknown(self) -> None:
        with pytest.raises(UnknownLetterNameError):
            LetterName.from_name("H")
        with pytest.raises(ValueError):
            LetterName.from_name("C#")


class TestPitchClass:
    """Tests for PitchClass."""

    def test_natural(self) -> None:
        pc = PitchClass(LetterName.C)
        assert pc.chromatic_offset == 0
        assert pc.diatonic_value == 1
        assert pc.chromatic_value == 0

    def test_sharp(self) -> None:
        """G# has G's letter and one more semitone."""
        pc = PitchClass(LetterName.G, 1)
        assert pc.diatonic_value == 5
        assert pc.chromatic_value == 8

    def test_flat(self) -> None:
        pc = PitchClass(LetterName.A, -1)
        assert pc.diatonic_value == 6
        assert pc.chromatic_value == 8

    def test_enharmonics_stay_distinct(self) -> None:
        assert PitchClass(LetterName.G, 1) != PitchClass(LetterName.A, -1)

    def test_from_diatonic_value(self) -> None:
        assert PitchClass.from_diatonic_value(3) == PitchClass(LetterName.E)
        assert PitchClass.from_diatonic_value(11, -1) == PitchClass(LetterName.F, -1)

    def test_from_values(self) -> None:
        """The offset is solved from the letter's natural value."""
        assert PitchClass.from_values(5, 8) == PitchClass(LetterName.G, 1)
        assert PitchClass.from_values(6, 8) == PitchClass(LetterName.A, -1)
        assert PitchClass.from_values(7, 12) == PitchClass(LetterName.B, 1)
        assert PitchClass.from_values(1, -1) == PitchClass(LetterName.C, -1)

    def test_str(self) -> None:
        assert str(PitchClass(LetterName.C)) == "C"
        assert str(PitchClass(LetterName.G, 1)) == "G#"
        assert str(PitchClass(LetterName.B, -2)) == "Bbb"


class TestNote:
    """Tests for Note."""

    def test_default_octave(self) -> None:
        assert Note(PitchClass(LetterName.C)).octave == 4

    def test_c4(self, c4: Note) -> None:
        """C4 is 4 octaves above diatonic 1 / chromatic 0."""
        assert c4.diatonic_value == 29
        assert c4.chromatic_value == 48

    def test_g_sharp5(self, g_sharp5: Note) -> None:
        assert g_sharp5.diatonic_value == 40
        assert g_sharp5.chromatic_value == 68

    def test_negative_octave(self) -> None:
        note = Note(PitchClass(LetterName.B), -1)
        assert note.diatonic_value == 0
        assert note.chromatic_value == -1

    def test_from_values(self, c4: Note, g_sharp5: Note) -> None:
        assert Note.from_values(29, 48) == c4
        assert Note.from_values(40, 68) == g_sharp5

    def test_from_values_keeps_letter_octave(self) -> None:
        """B#3 sounds like C4 but is still spelled in octave 3."""
        note = Note.from_values(28, 48)
        assert note == Note(PitchClass(LetterName.B, 1), 3)

    def test_from_values_below_zero(self) -> None:
        assert Note.from_values(0, -1) == Note(PitchClass(LetterName.B), -1)
        assert Note.from_values(-6, -12) == Note(PitchClass(LetterName.C), -1)

    def test_above(self, c4: Note) -> None:
        assert c4.above(Interval.M3) == Note(PitchClass(LetterName.E))
        assert c4.above(Interval.m3) == Note(PitchClass(LetterName.E, -1))
        assert c4.above(Interval.P8) == Note(PitchClass(LetterName.C), 5)

    def test_above_respects_spelling(self, c4: Note) -> None:
        """A4 and d5 land on the same key but different letters."""
        assert c4.above(Interval.A4) == Note(PitchClass(LetterName.F, 1))
        assert c4.above(Interval.d5) == Note(PitchClass(LetterName.G, -1))

    def test_above_unison_is_identity(self, g_sharp5: Note) -> None:
        assert g_sharp5.above(Interval.UNISON) == g_sharp5

    def test_below(self, c4: Note) -> None:
        assert c4.below(Interval.m3) == Note(PitchClass(LetterName.A), 3)
        e4 = Note(PitchClass(LetterName.E))
        assert e4.below(Interval.M3) == c4

    def test_operators(self, c4: Note, g_sharp5: Note) -> None:
        """+/- mirror above, below and difference."""
        assert c4 + Interval.M3 == c4.above(Interval.M3)
        assert c4 - Interval.M3 == c4.below(Interval.M3)
        assert g_sharp5 - c4 == Note.difference(c4, g_sharp5)

    def test_str(self, c4: Note, g_sharp5: Note) -> None:
        assert str(c4) == "C4"
        assert str(g_sharp5) == "G#5"


class TestNoteDifference:
    """Tests for the interval between two notes."""

    def test_augmented_twelfth(self, c4: Note, g_sharp5: Note) -> None:
        """C4 -> G#5 is an augmented 12th (20 semitones)."""
        interval = Note.difference(c4, g_sharp5)
        assert interval.number == 12
        assert interval.chromatic_value == 20
        assert interval.chromatic_offset == 1
        assert interval.quality == IntervalQuality.AUGMENTED
        assert interval.type is IntervalType.PERFECT

    def test_instance_form(self, c4: Note, g_sharp5: Note) -> None:
        assert c4.difference(g_sharp5) == Note.difference(c4, g_sharp5)

    def test_descending(self, c4: Note, g_sharp5: Note) -> None:
        """Going down yields a number below 1."""
        interval = g_sharp5.difference(c4)
        assert interval.number == -10
        assert interval.chromatic_value == -20
        assert interval.normalize() == c4.difference(g_sharp5)

    def test_step_down(self, c4: Note) -> None:
        """C4 -> B3 normalizes to a minor second."""
        b3 = Note(PitchClass(LetterName.B), 3)
        interval = c4.difference(b3)
        assert interval.number == 0
        assert interval.chromatic_value == -1
        assert interval.normalize() == Interval.m2

    def test_unison(self, c4: Note) -> None:
        assert c4.difference(c4) == Interval.UNISON

    def test_round_trip(self, c4: Note, g_sharp5: Note) -> None:
        assert c4.above(c4.difference(g_sharp5)) == g_sharp5


class TestIntervalQuality:
    """Tests for IntervalQuality."""

    def test_base_qualities(self) -> None:
        assert IntervalQuality.PERFECT.type is IntervalQualityType.PERFECT
        assert IntervalQuality.AUGMENTED.coefficient == 1
        assert IntervalQuality.MINOR.type is IntervalQualityType.MINOR

    def test_string_type(self) -> None:
        assert IntervalQuality("augmented", 2).type is IntervalQualityType.AUGMENTED

    def test_coefficient_ignored_for_unaltered(self) -> None:
        """Only augmented/diminished keep their coefficient."""
        assert IntervalQuality(IntervalQualityType.MAJOR, 3) == IntervalQuality.MAJOR
        assert IntervalQuality(IntervalQualityType.AUGMENTED, 3).coefficient == 3

    def test_invalid_coefficient(self) -> None:
        with pytest.raises(ValueError):
            IntervalQuality(IntervalQualityType.AUGMENTED, 0)
        with pytest.raises(ValueError):
            IntervalQuality(IntervalQualityType.DIMINISHED, -2)

    def test_unknown_type(self) -> None:
        with pytest.raises(ValueError):
            IntervalQuality("dominant")

    def test_perfect_family_offsets(self) -> None:
        new = IntervalQuality.new_quality_with_offset
        assert new(IntervalType.PERFECT, 0) == IntervalQuality.PERFECT
        assert new(IntervalType.PERFECT, 1) == IntervalQuality.AUGMENTED
        assert new(IntervalType.PERFECT, 3) == IntervalQuality(IntervalQualityType.AUGMENTED, 3)
        assert new(IntervalType.PERFECT, -1) == IntervalQuality.DIMINISHED
        assert new(IntervalType.PERFECT, -2) == IntervalQuality(IntervalQualityType.DIMINISHED, 2)

    def test_major_family_offsets(self) -> None:
        """Minor takes the first step down, so diminished starts at -2."""
        new = IntervalQuality.new_quality_with_offset
        assert new(IntervalType.MAJOR, 0) == IntervalQuality.MAJOR
        assert new(IntervalType.MAJOR, 2) == IntervalQuality(IntervalQualityType.AUGMENTED, 2)
        assert new(IntervalType.MAJOR, -1) == IntervalQuality.MINOR
        assert new(IntervalType.MAJOR, -2) == IntervalQuality.DIMINISHED
        assert new(IntervalType.MAJOR, -3) == IntervalQuality(IntervalQualityType.DIMINISHED, 2)

    def test_invalid_combination(self) -> None:
        with pytest.raises(InvalidQualityCombinationError):
            IntervalQuality.new_quality_with_offset("dominant", 0)  # type: ignore[arg-type]

    def test_symbol(self) -> None:
        assert IntervalQuality.PERFECT.symbol == "P"
        assert IntervalQuality.MAJOR.symbol == "M"
        assert IntervalQuality.MINOR.symbol == "m"
        assert IntervalQuality(IntervalQualityType.AUGMENTED, 2).symbol == "AA"
        assert IntervalQuality(IntervalQualityType.DIMINISHED, 3).symbol == "ddd"


class TestInterval:
    """Tests for Interval."""

    def test_named_intervals(self) -> None:
        """Named intervals have correct sizes."""
        assert Interval.UNISON.semitones == 0
        assert Interval.m3.semitones == 3
        assert Interval.M3.semitones == 4
        assert Interval.A4.semitones == 6
        assert Interval.d5.semitones == 6
        assert Interval.P5.semitones == 7
        assert Interval.OCTAVE.semitones == 12

    def test_short_aliases(self) -> None:
        assert Interval.P1 == Interval.UNISON
        assert Interval.P8 == Interval.OCTAVE

    def test_type(self) -> None:
        assert Interval.natural(1).type is IntervalType.PERFECT
        assert Interval.natural(4).type is IntervalType.PERFECT
        assert Interval.natural(12).type is IntervalType.PERFECT
        assert Interval.natural(3).type is IntervalType.MAJOR
        assert Interval.natural(9).type is IntervalType.MAJOR

    def test_natural(self) -> None:
        assert Interval.natural(5) == Interval.P5
        assert Interval.natural(6) == Interval.M6

    def test_interval_class(self) -> None:
        assert Interval.natural(12).interval_class == 5
        assert Interval.natural(8).interval_class == 1

    def test_chromatic_offset(self) -> None:
        assert Interval.M3.chromatic_offset == 0
        assert Interval.m3.chromatic_offset == -1
        assert Interval.A4.chromatic_offset == 1
        assert Interval(7, IntervalQuality.DIMINISHED).chromatic_offset == -2
        dd7 = Interval(7, IntervalQuality(IntervalQualityType.DIMINISHED, 2))
        assert dd7.chromatic_offset == -3
        assert dd7.chromatic_value == 8

    def test_compound(self) -> None:
        a12 = Interval(12, IntervalQuality.AUGMENTED)
        assert a12.chromatic_value == 20
        assert a12.is_compound
        assert not Interval.P8.is_compound

    def test_incompatible_quality(self) -> None:
        """Perfect intervals can't be major/minor and vice versa."""
        with pytest.raises(IncompatibleQualityError):
            Interval(3, IntervalQuality.PERFECT)
        with pytest.raises(IncompatibleQualityError):
            Interval(5, IntervalQuality.MINOR)
        with pytest.raises(PitchError):
            Interval(11, IntervalQuality.MAJOR)

    def test_from_chromatic_value(self) -> None:
        assert Interval.from_chromatic_value(3, 3) == Interval.m3
        assert Interval.from_chromatic_value(12, 20) == Interval(12, IntervalQuality.AUGMENTED)
        assert Interval.from_chromatic_value(2, 0) == Interval(2, IntervalQuality.DIMINISHED)

    def test_with_chromatic_value(self) -> None:
        """Re-deriving the quality returns a new interval."""
        m3 = Interval.M3.with_chromatic_value(3)
        assert m3 == Interval.m3
        assert Interval.M3.quality == IntervalQuality.MAJOR

    def test_add(self) -> None:
        assert Interval.add(Interval.M3, Interval.m3) == Interval.P5
        assert Interval.M3.add(Interval.M3) == Interval(5, IntervalQuality.AUGMENTED)
        assert Interval.P5 + Interval.P4 == Interval.P8
        assert Interval.P8 + Interval.M3 == Interval.natural(10)

    def test_add_unison(self) -> None:
        assert Interval.m6 + Interval.UNISON == Interval.m6

    def test_subtract(self) -> None:
        assert Interval.subtract(Interval.P5, Interval.M3) == Interval.m3
        assert Interval.P8 - Interval.P5 == Interval.P4

    def test_subtract_below_unison(self) -> None:
        """M3 - P5 is a descending minor third."""
        result = Interval.M3 - Interval.P5
        assert result.number == -1
        assert result.chromatic_value == -3
        assert result.normalize() == Interval.m3

    def test_reduce(self) -> None:
        assert Interval.natural(10).reduce() == Interval.M3
        assert Interval.P8.reduce() == Interval.P1
        assert Interval.natural(15).reduce() == Interval.P1
        assert Interval.M3.reduce() == Interval.M3

    def test_normalize(self) -> None:
        assert Interval.P1.normalize() == Interval.P1
        assert Interval.M6.normalize() == Interval.M6
        assert Interval(0, IntervalQuality.MAJOR).normalize() == Interval.m2

    def test_invert(self) -> None:
        """Inversion pairs sum to nine."""
        assert Interval.M3.invert() == Interval.m6
        assert Interval.m6.invert() == Interval.M3
        assert Interval.P5.invert() == Interval.P4
        assert Interval.A4.invert() == Interval.d5
        assert Interval.M2.invert() == Interval.m7
        assert Interval.m7.invert() == Interval.M2
        assert Interval.P1.invert() == Interval.P8
        assert Interval.P8.invert() == Interval.P1

    def test_str(self) -> None:
        assert str(Interval.M3) == "M3"
        assert str(Interval(12, IntervalQuality.AUGMENTED)) == "A12"
        assert str(Interval(-1, IntervalQuality.MAJOR)) == "M-1"

    def test_hashable(self) -> None:
        """Intervals are hashable for use in sets."""
        intervals = {Interval.UNISON, Interval.M3, Interval.P5, Interval.natural(3)}
        assert len(intervals) == 3
        assert Interval.M3 in intervals


class TestScenarios:
    """Worked examples from C4 and G#5."""

    def test_augmented_twelfth_reduces_to_augmented_fifth(
        self, c4: Note, g_sharp5: Note
    ) -> None:
        interval = Note.difference(c4, g_sharp5)
        assert str(interval) == "A12"

        reduced = interval.reduce()
        assert reduced.number == 5
        assert reduced.interval_class == 5
        assert reduced.chromatic_value == 8
        assert reduced.quality == IntervalQuality.AUGMENTED
        assert str(reduced) == "A5"
