"""
Pitch primitives - LetterName, PitchClass and Note.

These are the foundational spelled-pitch types.
LetterName is one of the 7 natural letters (C-B), fixed at import time.
PitchClass is a letter plus a chromatic offset (sharps > 0, flats < 0).
Note is a pitch class placed in an octave.

Every type carries two coordinates: a diatonic value (which letter, 1-based)
and a chromatic value (which semitone, 0-based). Keeping both is what lets
G# and Ab stay distinct while sounding the same.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from chuk_mcp_pitch.constants import DEFAULT_OCTAVE, ErrorMessages
from chuk_mcp_pitch.errors import UnknownLetterNameError

from .interval import Interval
from .numeric import (
    CHROMATIC_OCTAVE_SIZE,
    DIATONIC_OCTAVE_SIZE,
    chromatic_value_of,
    diatonic_add,
    diatonic_class,
    diatonic_octave,
    diatonic_subtract,
)


@dataclass(frozen=True)
class LetterName:
    """
    One of the 7 natural letters.

    Don't construct these - use the singletons (LetterName.C ... LetterName.B)
    or look them up with from_diatonic_value / from_name.
    """

    letter: str
    diatonic_value: int

    C: ClassVar[LetterName]
    D: ClassVar[LetterName]
    E: ClassVar[LetterName]
    F: ClassVar[LetterName]
    G: ClassVar[LetterName]
    A: ClassVar[LetterName]
    B: ClassVar[LetterName]

    @property
    def chromatic_value(self) -> int:
        return chromatic_value_of(self.diatonic_value)

    @classmethod
    def from_diatonic_value(cls, value: int) -> LetterName:
        """Letter at a diatonic value's class (any integer is valid)."""
        return _BY_DIATONIC_CLASS[diatonic_class(value)]

    @classmethod
    def from_name(cls, name: str) -> LetterName:
        """Look up a letter by its name ('C', 'g', ...)."""
        letter = name.strip().upper() if isinstance(name, str) else name
        if letter not in LETTER_NAMES:
            raise UnknownLetterNameError(ErrorMessages.UNKNOWN_LETTER.format(letter=name))
        return LETTER_NAMES[letter]

    def __str__(self) -> str:
        return self.letter

    def __repr__(self) -> str:
        return f"LetterName.{self.letter}"


LetterName.C = LetterName("C", 1)
LetterName.D = LetterName("D", 2)
LetterName.E = LetterName("E", 3)
LetterName.F = LetterName("F", 4)
LetterName.G = LetterName("G", 5)
LetterName.A = LetterName("A", 6)
LetterName.B = LetterName("B", 7)

# Registry by letter
LETTER_NAMES: dict[str, LetterName] = {
    "C": LetterName.C,
    "D": LetterName.D,
    "E": LetterName.E,
    "F": LetterName.F,
    "G": LetterName.G,
    "A": LetterName.A,
    "B": LetterName.B,
}

# Reverse lookup by diatonic class
_BY_DIATONIC_CLASS: dict[int, LetterName] = {
    letter.diatonic_value: letter for letter in LETTER_NAMES.values()
}


@dataclass(frozen=True)
class PitchClass:
    """
    A letter name plus an alteration, independent of octave.

    chromatic_offset is how sharp or flat: 1 = sharp, 2 = double sharp,
    -1 = flat, and so on.

    Examples:
        PitchClass(LetterName.G, 1) = G#
        PitchClass(LetterName.A, -1) = Ab
    """

    letter_name: LetterName
    chromatic_offset: int = 0

    @property
    def diatonic_value(self) -> int:
        return self.letter_name.diatonic_value

    @property
    def chromatic_value(self) -> int:
        return self.letter_name.chromatic_value + self.chromatic_offset

    @classmethod
    def from_diatonic_value(cls, value: int, offset: int = 0) -> PitchClass:
        return cls(LetterName.from_diatonic_value(value), offset)

    @classmethod
    def from_values(cls, diatonic_value: int, chromatic_value: int) -> PitchClass:
        """
        Spell a pitch class from its two coordinates.

        The letter comes from the diatonic value; the offset is whatever
        makes the letter land on the requested chromatic value.

        from_values(5, 8) = G#
        from_values(6, 8) = Ab
        """
        offset = chromatic_value - chromatic_value_of(diatonic_value)
        return cls.from_diatonic_value(diatonic_value, offset)

    def __str__(self) -> str:
        offset = self.chromatic_offset
        accidental = "#" * offset if offset > 0 else "b" * -offset
        return f"{self.letter_name.letter}{accidental}"


@dataclass(frozen=True)
class Note:
    """
    A pitch class in a specific octave.

    Octave 0 spans diatonic values 1-7 and chromatic values 0-11, so
    C4 has diatonic value 29 and chromatic value 48.
    """

    pitch_class: PitchClass
    octave: int = DEFAULT_OCTAVE

    @property
    def diatonic_value(self) -> int:
        return self.pitch_class.diatonic_value + self.octave * DIATONIC_OCTAVE_SIZE

    @property
    def chromatic_value(self) -> int:
        return self.pitch_class.chromatic_value + self.octave * CHROMATIC_OCTAVE_SIZE

    @classmethod
    def from_values(cls, diatonic_value: int, chromatic_value: int) -> Note:
        """
        Spell a note from absolute coordinates.

        The octave comes from the diatonic value, so B#3 stays B#3 even
        though it sounds like C4.
        """
        octave = diatonic_octave(diatonic_value)
        target_pitch_class_chromatic_value = chromatic_value - octave * CHROMATIC_OCTAVE_SIZE
        pitch_class = PitchClass.from_values(
            diatonic_class(diatonic_value), target_pitch_class_chromatic_value
        )
        return cls(pitch_class, octave)

    def above(self, interval: Interval) -> Note:
        """Transpose up by an interval."""
        return Note.from_values(
            diatonic_add(self.diatonic_value, interval.number),
            self.chromatic_value + interval.chromatic_value,
        )

    def below(self, interval: Interval) -> Note:
        """Transpose down by an interval."""
        return Note.from_values(
            diatonic_subtract(self.diatonic_value, interval.number),
            self.chromatic_value - interval.chromatic_value,
        )

    def difference(self, other: Note) -> Interval:
        """
        Interval leading from this note to another.

        Usable as Note.difference(a, b) or a.difference(b); either way the
        result takes a to b. When b is below a the number is 1 or less -
        call normalize() on the result for the ascending form.
        """
        return Interval.from_chromatic_value(
            diatonic_subtract(other.diatonic_value, self.diatonic_value),
            other.chromatic_value - self.chromatic_value,
        )

    def __add__(self, interval: Interval) -> Note:
        if not isinstance(interval, Interval):
            return NotImplemented
        return self.above(interval)

    def __sub__(self, other: Interval | Note) -> Note | Interval:
        """note - interval transposes down; note_b - note_a is the interval a -> b."""
        if isinstance(other, Interval):
            return self.below(other)
        if isinstance(other, Note):
            return other.difference(self)
        return NotImplemented

    def __str__(self) -> str:
        return f"{self.pitch_class}{self.octave}"
