"""
Pitch models - the serialization layer.

The core types are plain frozen dataclasses with derived values computed
on access. These pydantic models are the wire shapes for tools and
exports: they validate incoming arguments and carry the derived values
out alongside the stored ones.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_pitch.constants import (
    DEFAULT_OCTAVE,
    ErrorMessages,
    IntervalQualityType,
    SchemaVersion,
)
from chuk_mcp_pitch.core.interval import Interval, IntervalQuality
from chuk_mcp_pitch.core.pitch import LETTER_NAMES, LetterName, Note, PitchClass


def _normalize_letter(v: str) -> str:
    letter = v.strip().upper()
    if letter not in LETTER_NAMES:
        raise ValueError(ErrorMessages.UNKNOWN_LETTER.format(letter=v))
    return letter


class PitchClassModel(BaseModel):
    """A letter plus sharps/flats."""

    letter: str = Field(..., description="Letter name (C, D, E, F, G, A, B)")
    offset: int = Field(0, description="Chromatic offset: +1 sharp, -1 flat, etc.")

    model_config = {"frozen": True}

    @field_validator("letter")
    @classmethod
    def validate_letter(cls, v: str) -> str:
        return _normalize_letter(v)

    @classmethod
    def from_core(cls, pitch_class: PitchClass) -> PitchClassModel:
        return cls(letter=pitch_class.letter_name.letter, offset=pitch_class.chromatic_offset)

    def to_core(self) -> PitchClass:
        return PitchClass(LetterName.from_name(self.letter), self.offset)


class NoteModel(BaseModel):
    """
    A note as letter, offset and octave.

    Example:
        NoteModel(letter="G", offset=1, octave=5) -> G#5
    """

    letter: str = Field(..., description="Letter name (C, D, E, F, G, A, B)")
    offset: int = Field(0, description="Chromatic offset: +1 sharp, -1 flat, etc.")
    octave: int = Field(DEFAULT_OCTAVE, description="Octave number (octave 0 spans C0-B0)")

    model_config = {"frozen": True}

    @field_validator("letter")
    @classmethod
    def validate_letter(cls, v: str) -> str:
        return _normalize_letter(v)

    @classmethod
    def from_core(cls, note: Note) -> NoteModel:
        return cls(
            letter=note.pitch_class.letter_name.letter,
            offset=note.pitch_class.chromatic_offset,
            octave=note.octave,
        )

    def to_core(self) -> Note:
        return Note(PitchClassModel(letter=self.letter, offset=self.offset).to_core(), self.octave)

    def to_yaml_dict(self) -> dict[str, Any]:
        """
        Convert to a YAML-friendly dict.

        Stored fields first, then the derived coordinates.
        """
        note = self.to_core()
        schema: SchemaVersion = "note/v1"
        return {
            "schema": schema,
            "name": str(note),
            "letter": self.letter,
            "offset": self.offset,
            "octave": self.octave,
            "diatonic_value": note.diatonic_value,
            "chromatic_value": note.chromatic_value,
        }


class IntervalQualityModel(BaseModel):
    """An interval quality with its alteration depth."""

    type: IntervalQualityType = Field(..., description="Quality type")
    coefficient: int = Field(1, ge=1, description="Augmented/diminished depth (2 = doubly)")

    model_config = {"frozen": True}

    @classmethod
    def from_core(cls, quality: IntervalQuality) -> IntervalQualityModel:
        return cls(type=quality.type, coefficient=quality.coefficient)

    def to_core(self) -> IntervalQuality:
        return IntervalQuality(self.type, self.coefficient)


class IntervalModel(BaseModel):
    """
    An interval as number plus quality.

    Example:
        IntervalModel(number=12, quality=IntervalQualityModel(type="augmented")) -> A12
    """

    number: int = Field(..., description="Diatonic number (1 = unison, 8 = octave)")
    quality: IntervalQualityModel = Field(..., description="Interval quality")

    model_config = {"frozen": True}

    @classmethod
    def from_core(cls, interval: Interval) -> IntervalModel:
        return cls(number=interval.number, quality=IntervalQualityModel.from_core(interval.quality))

    def to_core(self) -> Interval:
        return Interval(self.number, self.quality.to_core())

    def to_yaml_dict(self) -> dict[str, Any]:
        """
        Convert to a YAML-friendly dict.

        Stored fields first, then the derived values.
        """
        interval = self.to_core()
        schema: SchemaVersion = "interval/v1"
        return {
            "schema": schema,
            "name": str(interval),
            "number": self.number,
            "quality": {
                "type": self.quality.type.value,
                "coefficient": self.quality.coefficient,
            },
            "interval_class": interval.interval_class,
            "type": interval.type.value,
            "chromatic_offset": interval.chromatic_offset,
            "chromatic_value": interval.chromatic_value,
            "compound": interval.is_compound,
        }
