"""
Pydantic models for the pitch system.

This module provides:
- PitchClassModel: Letter plus offset
- NoteModel: Letter, offset and octave
- IntervalQualityModel: Quality type plus coefficient
- IntervalModel: Interval number plus quality
"""

from chuk_mcp_pitch.models.pitch import (
    IntervalModel,
    IntervalQualityModel,
    NoteModel,
    PitchClassModel,
)

__all__ = [
    "IntervalModel",
    "IntervalQualityModel",
    "NoteModel",
    "PitchClassModel",
]
