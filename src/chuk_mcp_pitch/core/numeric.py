"""
Numeric primitives - diatonic and chromatic number systems.

Diatonic values are 1-based scale-degree counts (1 = C, 8 = the C an
octave up). Chromatic values are 0-based semitone counts. Both are
unbounded: zero and negative values sit below the reference octave.

Everything here is a pure function over integers.
"""

from __future__ import annotations

DIATONIC_OCTAVE_SIZE = 7
CHROMATIC_OCTAVE_SIZE = 12

# Diatonic class -> chromatic class for the natural (major scale) skeleton.
# Every quality/offset computation is measured against this table.
CHROMATIC_CLASSES: dict[int, int] = {
    1: 0,
    2: 2,
    3: 4,
    4: 5,
    5: 7,
    6: 9,
    7: 11,
}


def mod(n: int, m: int) -> int:
    """Modulo with a non-negative result for any n (m must be positive)."""
    if m <= 0:
        raise ValueError(f"Modulus must be positive, got {m}")
    return n % m


def diatonic_class(value: int) -> int:
    """
    Reduce a diatonic value into 1-7.

    Examples:
        diatonic_class(8) == 1
        diatonic_class(0) == 7
        diatonic_class(-6) == 1
    """
    return mod(value - 1, DIATONIC_OCTAVE_SIZE) + 1


def chromatic_class(value: int) -> int:
    """Reduce a chromatic value into 0-11."""
    return mod(value, CHROMATIC_OCTAVE_SIZE)


def diatonic_octave(value: int) -> int:
    """Octave containing a diatonic value (octave 0 spans 1-7)."""
    return (value - 1) // DIATONIC_OCTAVE_SIZE


def chromatic_octave(value: int) -> int:
    """Octave containing a chromatic value (octave 0 spans 0-11)."""
    return value // CHROMATIC_OCTAVE_SIZE


def chromatic_value_of(diatonic_value: int) -> int:
    """
    Natural (unaltered) chromatic value of a diatonic value.

    chromatic_value_of(5) == 7   (G)
    chromatic_value_of(12) == 19 (the G an octave up)
    """
    octave = diatonic_octave(diatonic_value)
    return octave * CHROMATIC_OCTAVE_SIZE + CHROMATIC_CLASSES[diatonic_class(diatonic_value)]


def diatonic_add(a: int, b: int) -> int:
    """Add 1-based diatonic numbers (adding a unison is identity)."""
    return a + b - 1


def diatonic_subtract(a: int, b: int) -> int:
    """Subtract 1-based diatonic numbers (subtracting a unison is identity)."""
    return a - b + 1


def diatonic_normalize(value: int) -> int:
    """Reflect diatonic values below 1 back up; 1 is a fixed point."""
    return abs(value - 1) + 1


def chromatic_normalize(value: int) -> int:
    return abs(value)
