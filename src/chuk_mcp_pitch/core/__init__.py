"""
Core pitch primitives - the Radix layer.

These are the mathematical invariants that everything else composes on:
- numeric: diatonic/chromatic conversion and 1-based interval arithmetic
- LetterName: The 7 natural letters (C-B)
- PitchClass: A letter plus sharps/flats
- Note: A pitch class in an octave
- IntervalQuality: Perfect/major/minor/augmented/diminished
- Interval: Diatonic number plus quality
"""

from chuk_mcp_pitch.core.interval import Interval, IntervalQuality, interval_type_of
from chuk_mcp_pitch.core.pitch import LETTER_NAMES, LetterName, Note, PitchClass

__all__ = [
    # Pitch
    "LETTER_NAMES",
    "LetterName",
    "PitchClass",
    "Note",
    # Interval
    "IntervalQuality",
    "Interval",
    "interval_type_of",
]
