"""
Note tools - MCP tools for spelled notes.

Tools for describing notes, transposing them by intervals and measuring
the interval between two notes.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_pitch.constants import DEFAULT_OCTAVE
from chuk_mcp_pitch.core import Note
from chuk_mcp_pitch.models import IntervalModel, IntervalQualityModel, NoteModel

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _note_payload(note: Note) -> dict[str, Any]:
    return NoteModel.from_core(note).to_yaml_dict()


def register_note_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register note tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_describe_note(
        letter: str,
        offset: int = 0,
        octave: int = DEFAULT_OCTAVE,
    ) -> str:
        """
        Describe a note and its diatonic/chromatic coordinates.

        Args:
            letter: Letter name (C, D, E, F, G, A, B)
            offset: Sharps (positive) or flats (negative)
            octave: Octave number (C4 has diatonic value 29, chromatic value 48)

        Returns:
            JSON string with the note's name and values

        Example:
            pitch_describe_note(letter="G", offset=1, octave=5)
        """
        try:
            note = NoteModel(letter=letter, offset=offset, octave=octave).to_core()
            return json.dumps({"status": "success", "note": _note_payload(note)})
        except Exception as e:
            logger.exception("Failed to describe note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_describe_note"] = pitch_describe_note

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_note_above(
        letter: str,
        number: int,
        quality: str,
        offset: int = 0,
        octave: int = DEFAULT_OCTAVE,
        coefficient: int = 1,
    ) -> str:
        """
        Transpose a note up by an interval.

        Args:
            letter: Letter name of the starting note
            number: Interval number (1 = unison, 3 = third, 8 = octave)
            quality: Interval quality ('perfect', 'major', 'minor', 'augmented', 'diminished')
            offset: Sharps/flats of the starting note
            octave: Octave of the starting note
            coefficient: Depth for augmented/diminished (2 = doubly)

        Returns:
            JSON string with the resulting note

        Example:
            pitch_note_above(letter="C", number=3, quality="major")
        """
        try:
            note = NoteModel(letter=letter, offset=offset, octave=octave).to_core()
            interval = IntervalModel(
                number=number,
                quality=IntervalQualityModel(type=quality, coefficient=coefficient),
            ).to_core()
            result = note.above(interval)
            logger.debug(f"{note} + {interval} = {result}")
            return json.dumps(
                {
                    "status": "success",
                    "note": _note_payload(result),
                    "interval": str(interval),
                }
            )
        except Exception as e:
            logger.exception("Failed to transpose note up")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_note_above"] = pitch_note_above

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_note_below(
        letter: str,
        number: int,
        quality: str,
        offset: int = 0,
        octave: int = DEFAULT_OCTAVE,
        coefficient: int = 1,
    ) -> str:
        """
        Transpose a note down by an interval.

        Args:
            letter: Letter name of the starting note
            number: Interval number (1 = unison, 3 = third, 8 = octave)
            quality: Interval quality ('perfect', 'major', 'minor', 'augmented', 'diminished')
            offset: Sharps/flats of the starting note
            octave: Octave of the starting note
            coefficient: Depth for augmented/diminished (2 = doubly)

        Returns:
            JSON string with the resulting note

        Example:
            pitch_note_below(letter="E", number=3, quality="major")
        """
        try:
            note = NoteModel(letter=letter, offset=offset, octave=octave).to_core()
            interval = IntervalModel(
                number=number,
                quality=IntervalQualityModel(type=quality, coefficient=coefficient),
            ).to_core()
            result = note.below(interval)
            logger.debug(f"{note} - {interval} = {result}")
            return json.dumps(
                {
                    "status": "success",
                    "note": _note_payload(result),
                    "interval": str(interval),
                }
            )
        except Exception as e:
            logger.exception("Failed to transpose note down")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_note_below"] = pitch_note_below

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_note_difference(
        from_letter: str,
        to_letter: str,
        from_offset: int = 0,
        from_octave: int = DEFAULT_OCTAVE,
        to_offset: int = 0,
        to_octave: int = DEFAULT_OCTAVE,
        normalize: bool = False,
    ) -> str:
        """
        Get the interval leading from one note to another.

        When the second note is below the first, the raw interval has a
        number of 1 or less. Pass normalize=True for the ascending form.

        Args:
            from_letter: Letter name of the first note
            to_letter: Letter name of the second note
            from_offset: Sharps/flats of the first note
            from_octave: Octave of the first note
            to_offset: Sharps/flats of the second note
            to_octave: Octave of the second note
            normalize: Return the forward-facing interval

        Returns:
            JSON string with the interval

        Example:
            pitch_note_difference(from_letter="C", to_letter="G", to_offset=1, to_octave=5)
        """
        try:
            a = NoteModel(letter=from_letter, offset=from_offset, octave=from_octave).to_core()
            b = NoteModel(letter=to_letter, offset=to_offset, octave=to_octave).to_core()
            interval = a.difference(b)
            if normalize:
                interval = interval.normalize()
            return json.dumps(
                {
                    "status": "success",
                    "from": str(a),
                    "to": str(b),
                    "interval": IntervalModel.from_core(interval).to_yaml_dict(),
                }
            )
        except Exception as e:
            logger.exception("Failed to compute note difference")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_note_difference"] = pitch_note_difference

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_note_from_values(diatonic_value: int, chromatic_value: int) -> str:
        """
        Spell a note from absolute diatonic and chromatic values.

        The diatonic value picks the letter and octave; the chromatic value
        decides the sharps or flats.

        Args:
            diatonic_value: 1-based diatonic position (29 = C4)
            chromatic_value: 0-based semitone position (48 = C4)

        Returns:
            JSON string with the spelled note

        Example:
            pitch_note_from_values(diatonic_value=40, chromatic_value=68)
        """
        try:
            note = Note.from_values(diatonic_value, chromatic_value)
            return json.dumps({"status": "success", "note": _note_payload(note)})
        except Exception as e:
            logger.exception("Failed to spell note from values")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_note_from_values"] = pitch_note_from_values

    return tools
