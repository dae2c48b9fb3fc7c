"""
Interval primitives - IntervalQuality and Interval.

An interval is a diatonic number (1 = unison, 8 = octave) plus a quality.
Its semitone size is never stored: it is derived from the natural size of
the number plus the deviation the quality implies.

    Interval(3, IntervalQuality.MAJOR).chromatic_value == 4
    Interval(12, IntervalQuality.AUGMENTED).chromatic_value == 20

All arithmetic works on (diatonic number, chromatic size) pairs and then
re-derives the quality through Interval.from_chromatic_value, so
enharmonic spelling falls out of the numbers rather than a lookup table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from chuk_mcp_pitch.constants import (
    ALLOWED_QUALITY_TYPES,
    PERFECT_INTERVAL_CLASSES,
    ErrorMessages,
    IntervalQualityType,
    IntervalType,
)
from chuk_mcp_pitch.errors import IncompatibleQualityError, InvalidQualityCombinationError

from .numeric import (
    chromatic_class,
    chromatic_normalize,
    chromatic_value_of,
    diatonic_add,
    diatonic_class,
    diatonic_normalize,
    diatonic_subtract,
)

_ALTERED = (IntervalQualityType.AUGMENTED, IntervalQualityType.DIMINISHED)


@dataclass(frozen=True)
class IntervalQuality:
    """
    Perfect, major, minor, augmented or diminished.

    The coefficient counts repeated alteration and only means something for
    augmented/diminished qualities (2 = doubly augmented, etc.). For the
    other quality types it is always 1.

    Immutable and hashable.
    """

    type: IntervalQualityType
    coefficient: int = 1

    # Base qualities (defined after class)
    PERFECT: ClassVar[IntervalQuality]
    AUGMENTED: ClassVar[IntervalQuality]
    DIMINISHED: ClassVar[IntervalQuality]
    MAJOR: ClassVar[IntervalQuality]
    MINOR: ClassVar[IntervalQuality]

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", IntervalQualityType(self.type))
        coefficient = self.coefficient
        if isinstance(coefficient, bool) or not isinstance(coefficient, int) or coefficient < 1:
            raise ValueError(ErrorMessages.INVALID_COEFFICIENT.format(coefficient=self.coefficient))
        if self.type not in _ALTERED:
            object.__setattr__(self, "coefficient", 1)

    @classmethod
    def new_quality_with_offset(cls, interval_type: IntervalType, offset: int) -> IntervalQuality:
        """
        Canonical quality for a semitone deviation from the natural size.

        Args:
            interval_type: The family of the interval (perfect or major)
            offset: Signed semitones away from the perfect/major size

        Returns:
            The quality, e.g. (MAJOR, -1) -> minor, (MAJOR, -2) -> diminished,
            (PERFECT, -2) -> doubly diminished

        Raises:
            InvalidQualityCombinationError: for an unknown interval type
        """
        match interval_type, offset:
            case IntervalType.PERFECT, 0:
                return cls.PERFECT
            case IntervalType.PERFECT, n if n > 0:
                return cls(IntervalQualityType.AUGMENTED, n)
            case IntervalType.PERFECT, n if n < 0:
                return cls(IntervalQualityType.DIMINISHED, -n)
            case IntervalType.MAJOR, 0:
                return cls.MAJOR
            case IntervalType.MAJOR, n if n > 0:
                return cls(IntervalQualityType.AUGMENTED, n)
            case IntervalType.MAJOR, -1:
                return cls.MINOR
            case IntervalType.MAJOR, n if n < -1:
                return cls(IntervalQualityType.DIMINISHED, -n - 1)
            case _:
                raise InvalidQualityCombinationError(
                    ErrorMessages.INVALID_QUALITY_COMBINATION.format(
                        interval_type=interval_type, offset=offset
                    )
                )

    @property
    def symbol(self) -> str:
        """Short symbol: P, M, m, A, AA, d, dd, ..."""
        match self.type:
            case IntervalQualityType.PERFECT:
                return "P"
            case IntervalQualityType.MAJOR:
                return "M"
            case IntervalQualityType.MINOR:
                return "m"
            case IntervalQualityType.AUGMENTED:
                return "A" * self.coefficient
            case _:
                return "d" * self.coefficient

    def __str__(self) -> str:
        if self.type in _ALTERED and self.coefficient > 1:
            return f"{self.type.value} x{self.coefficient}"
        return self.type.value


IntervalQuality.PERFECT = IntervalQuality(IntervalQualityType.PERFECT)
IntervalQuality.AUGMENTED = IntervalQuality(IntervalQualityType.AUGMENTED)
IntervalQuality.DIMINISHED = IntervalQuality(IntervalQualityType.DIMINISHED)
IntervalQuality.MAJOR = IntervalQuality(IntervalQualityType.MAJOR)
IntervalQuality.MINOR = IntervalQuality(IntervalQualityType.MINOR)


def interval_type_of(number: int) -> IntervalType:
    """Family of an interval number: perfect for 1/4/5 classes, major otherwise."""
    if diatonic_class(number) in PERFECT_INTERVAL_CLASSES:
        return IntervalType.PERFECT
    return IntervalType.MAJOR


@dataclass(frozen=True)
class Interval:
    """
    Distance between notes as a diatonic number plus a quality.

    The number is 1-based (1 = unison, 3 = third, 12 = twelfth). Results
    of subtraction or descending note differences may carry a number of 0
    or below; normalize() brings those back to a forward-facing form.

    Immutable and hashable.
    """

    number: int
    quality: IntervalQuality

    # Named intervals (class constants)
    UNISON: ClassVar[Interval]
    OCTAVE: ClassVar[Interval]

    # Short aliases
    P1: ClassVar[Interval]
    m2: ClassVar[Interval]
    M2: ClassVar[Interval]
    m3: ClassVar[Interval]
    M3: ClassVar[Interval]
    P4: ClassVar[Interval]
    A4: ClassVar[Interval]
    d5: ClassVar[Interval]
    P5: ClassVar[Interval]
    m6: ClassVar[Interval]
    M6: ClassVar[Interval]
    m7: ClassVar[Interval]
    M7: ClassVar[Interval]
    P8: ClassVar[Interval]

    def __post_init__(self) -> None:
        allowed = ALLOWED_QUALITY_TYPES[self.type]
        if self.quality.type not in allowed:
            raise IncompatibleQualityError(
                ErrorMessages.INCOMPATIBLE_QUALITY.format(
                    quality=self.quality.type.value,
                    number=self.number,
                    interval_type=self.type.value,
                    allowed=", ".join(sorted(q.value for q in allowed)),
                )
            )

    @classmethod
    def natural(cls, number: int) -> Interval:
        """The perfect or major interval for a number."""
        if interval_type_of(number) is IntervalType.PERFECT:
            return cls(number, IntervalQuality.PERFECT)
        return cls(number, IntervalQuality.MAJOR)

    @classmethod
    def from_chromatic_value(cls, number: int, target_chromatic_value: int) -> Interval:
        """
        Build an interval whose quality makes it span the given semitones.

        This is the factory behind all interval arithmetic.

        Args:
            number: Diatonic number of the interval
            target_chromatic_value: Semitone size to match

        Returns:
            A new Interval
        """
        offset = target_chromatic_value - chromatic_value_of(number)
        quality = IntervalQuality.new_quality_with_offset(interval_type_of(number), offset)
        return cls(number, quality)

    def with_chromatic_value(self, target_chromatic_value: int) -> Interval:
        """Same number, quality re-derived to span the given semitones."""
        return Interval.from_chromatic_value(self.number, target_chromatic_value)

    @property
    def interval_class(self) -> int:
        """Number reduced into 1-7."""
        return diatonic_class(self.number)

    @property
    def type(self) -> IntervalType:
        return interval_type_of(self.number)

    @property
    def chromatic_offset(self) -> int:
        """Semitones away from the perfect/major interval of the same number."""
        quality = self.quality
        match self.type, quality.type:
            case IntervalType.PERFECT, IntervalQualityType.PERFECT:
                return 0
            case IntervalType.PERFECT, IntervalQualityType.AUGMENTED:
                return quality.coefficient
            case IntervalType.PERFECT, IntervalQualityType.DIMINISHED:
                return -quality.coefficient
            case IntervalType.MAJOR, IntervalQualityType.MAJOR:
                return 0
            case IntervalType.MAJOR, IntervalQualityType.MINOR:
                return -1
            case IntervalType.MAJOR, IntervalQualityType.AUGMENTED:
                return quality.coefficient
            case IntervalType.MAJOR, IntervalQualityType.DIMINISHED:
                return -(quality.coefficient + 1)
            case interval_type, quality_type:
                raise IncompatibleQualityError(
                    ErrorMessages.INCOMPATIBLE_QUALITY.format(
                        quality=quality_type.value,
                        number=self.number,
                        interval_type=interval_type.value,
                        allowed=", ".join(
                            sorted(q.value for q in ALLOWED_QUALITY_TYPES[interval_type])
                        ),
                    )
                )

    @property
    def chromatic_value(self) -> int:
        """Size in semitones."""
        return chromatic_value_of(self.number) + self.chromatic_offset

    @property
    def semitones(self) -> int:
        return self.chromatic_value

    @property
    def is_compound(self) -> bool:
        """Whether the interval spans more than an octave."""
        return self.number > 8

    def add(self, other: Interval) -> Interval:
        """
        Stack two intervals.

        Usable as Interval.add(a, b) or a.add(b). M3 + m3 = P5.
        """
        return Interval.from_chromatic_value(
            diatonic_add(self.number, other.number),
            self.chromatic_value + other.chromatic_value,
        )

    def subtract(self, other: Interval) -> Interval:
        """
        Remove one interval from another.

        Usable as Interval.subtract(a, b) or a.subtract(b). P5 - M3 = m3.
        """
        return Interval.from_chromatic_value(
            diatonic_subtract(self.number, other.number),
            self.chromatic_value - other.chromatic_value,
        )

    def reduce(self) -> Interval:
        """
        Collapse a compound interval into one octave.

        A12 -> A5, M10 -> M3, P8 -> P1.
        """
        return Interval.from_chromatic_value(
            self.interval_class, chromatic_class(self.chromatic_value)
        )

    def normalize(self) -> Interval:
        """
        Force both components forward-facing.

        The diatonic number is reflected about 1 and the semitone size is
        made non-negative, then the quality is re-derived. Direction is
        discarded: the result of a descending note difference becomes the
        matching ascending interval.
        """
        return Interval.from_chromatic_value(
            diatonic_normalize(self.number), chromatic_normalize(self.chromatic_value)
        )

    def invert(self) -> Interval:
        """
        Invert the interval within an octave.

        M3 -> m6
        P5 -> P4
        A4 -> d5
        """
        return self.subtract(Interval.OCTAVE).normalize()

    def __add__(self, other: Interval) -> Interval:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Interval) -> Interval:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.subtract(other)

    def __str__(self) -> str:
        """Short name like M3, P5, A12, dd7."""
        return f"{self.quality.symbol}{self.number}"


# Initialize class constants after class is defined
Interval.UNISON = Interval(1, IntervalQuality.PERFECT)
Interval.OCTAVE = Interval(8, IntervalQuality.PERFECT)

# Short aliases
Interval.P1 = Interval.UNISON
Interval.m2 = Interval(2, IntervalQuality.MINOR)
Interval.M2 = Interval(2, IntervalQuality.MAJOR)
Interval.m3 = Interval(3, IntervalQuality.MINOR)
Interval.M3 = Interval(3, IntervalQuality.MAJOR)
Interval.P4 = Interval(4, IntervalQuality.PERFECT)
Interval.A4 = Interval(4, IntervalQuality.AUGMENTED)
Interval.d5 = Interval(5, IntervalQuality.DIMINISHED)
Interval.P5 = Interval(5, IntervalQuality.PERFECT)
Interval.m6 = Interval(6, IntervalQuality.MINOR)
Interval.M6 = Interval(6, IntervalQuality.MAJOR)
Interval.m7 = Interval(7, IntervalQuality.MINOR)
Interval.M7 = Interval(7, IntervalQuality.MAJOR)
Interval.P8 = Interval.OCTAVE
