"""
Constants and enums for the pitch system.

No magic strings - use enums and Literal types for constrained values.
"""

from enum import Enum
from typing import Literal


class IntervalType(str, Enum):
    """
    Interval family, decided by the interval class alone.

    Unisons, fourths and fifths are perfect-family; seconds, thirds,
    sixths and sevenths are major-family.
    """

    PERFECT = "perfect"
    MAJOR = "major"


class IntervalQualityType(str, Enum):
    """Interval quality taxonomy."""

    PERFECT = "perfect"
    AUGMENTED = "augmented"
    DIMINISHED = "diminished"
    MAJOR = "major"
    MINOR = "minor"


# Qualities each interval family accepts
ALLOWED_QUALITY_TYPES: dict[IntervalType, frozenset[IntervalQualityType]] = {
    IntervalType.PERFECT: frozenset(
        {
            IntervalQualityType.PERFECT,
            IntervalQualityType.AUGMENTED,
            IntervalQualityType.DIMINISHED,
        }
    ),
    IntervalType.MAJOR: frozenset(
        {
            IntervalQualityType.MAJOR,
            IntervalQualityType.MINOR,
            IntervalQualityType.AUGMENTED,
            IntervalQualityType.DIMINISHED,
        }
    ),
}

# Interval classes of the perfect family (everything else is major-family)
PERFECT_INTERVAL_CLASSES: frozenset[int] = frozenset({1, 4, 5})

# Default octave for new notes (octave 0 spans diatonic values 1-7)
DEFAULT_OCTAVE = 4

# Server defaults
SERVER_NAME = "chuk-mcp-pitch"
DEFAULT_TRANSPORT = "stdio"
DEFAULT_HTTP_PORT = 8000

# Schema versions - frozen for v1
SchemaVersion = Literal[
    "note/v1",
    "interval/v1",
]


class ErrorMessages:
    """Standardized error messages."""

    UNKNOWN_LETTER = "Unknown letter name: '{letter}'. Expected one of C, D, E, F, G, A, B."
    INVALID_COEFFICIENT = "Quality coefficient must be a positive integer, got {coefficient}."
    INVALID_QUALITY_COMBINATION = (
        "No interval quality for interval type '{interval_type}' with offset {offset}."
    )
    INCOMPATIBLE_QUALITY = (
        "Quality '{quality}' is not valid for interval {number} ({interval_type} family). "
        "Allowed: {allowed}."
    )
    UNKNOWN_KIND = "Unknown export kind: '{kind}'. Expected 'note' or 'interval'."
