"""
Interval tools - MCP tools for interval arithmetic.

Tools for describing, combining, reducing, normalizing and inverting
intervals, plus YAML export of notes and intervals.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_pitch.constants import DEFAULT_OCTAVE, ErrorMessages
from chuk_mcp_pitch.core import Interval
from chuk_mcp_pitch.models import IntervalModel, IntervalQualityModel, NoteModel

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _interval(number: int, quality: str, coefficient: int = 1) -> Interval:
    return IntervalModel(
        number=number,
        quality=IntervalQualityModel(type=quality, coefficient=coefficient),
    ).to_core()


def _interval_payload(interval: Interval) -> dict[str, Any]:
    return IntervalModel.from_core(interval).to_yaml_dict()


def register_interval_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register interval tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_describe_interval(number: int, quality: str, coefficient: int = 1) -> str:
        """
        Describe an interval: family, semitone size and offset.

        Args:
            number: Interval number (1 = unison, 3 = third, 12 = twelfth)
            quality: 'perfect', 'major', 'minor', 'augmented' or 'diminished'
            coefficient: Depth for augmented/diminished (2 = doubly)

        Returns:
            JSON string with interval details

        Example:
            pitch_describe_interval(number=12, quality="augmented")
        """
        try:
            interval = _interval(number, quality, coefficient)
            return json.dumps({"status": "success", "interval": _interval_payload(interval)})
        except Exception as e:
            logger.exception("Failed to describe interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_describe_interval"] = pitch_describe_interval

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_interval_add(
        number_a: int,
        quality_a: str,
        number_b: int,
        quality_b: str,
        coefficient_a: int = 1,
        coefficient_b: int = 1,
    ) -> str:
        """
        Stack two intervals.

        Args:
            number_a: Number of the first interval
            quality_a: Quality of the first interval
            number_b: Number of the second interval
            quality_b: Quality of the second interval
            coefficient_a: Augmented/diminished depth of the first interval
            coefficient_b: Augmented/diminished depth of the second interval

        Returns:
            JSON string with the combined interval

        Example:
            pitch_interval_add(number_a=3, quality_a="major", number_b=3, quality_b="minor")
        """
        try:
            a = _interval(number_a, quality_a, coefficient_a)
            b = _interval(number_b, quality_b, coefficient_b)
            return json.dumps({"status": "success", "interval": _interval_payload(a + b)})
        except Exception as e:
            logger.exception("Failed to add intervals")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_interval_add"] = pitch_interval_add

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_interval_subtract(
        number_a: int,
        quality_a: str,
        number_b: int,
        quality_b: str,
        coefficient_a: int = 1,
        coefficient_b: int = 1,
    ) -> str:
        """
        Subtract the second interval from the first.

        Args:
            number_a: Number of the first interval
            quality_a: Quality of the first interval
            number_b: Number of the second interval
            quality_b: Quality of the second interval
            coefficient_a: Augmented/diminished depth of the first interval
            coefficient_b: Augmented/diminished depth of the second interval

        Returns:
            JSON string with the difference

        Example:
            pitch_interval_subtract(number_a=5, quality_a="perfect", number_b=3, quality_b="major")
        """
        try:
            a = _interval(number_a, quality_a, coefficient_a)
            b = _interval(number_b, quality_b, coefficient_b)
            return json.dumps({"status": "success", "interval": _interval_payload(a - b)})
        except Exception as e:
            logger.exception("Failed to subtract intervals")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_interval_subtract"] = pitch_interval_subtract

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_interval_reduce(number: int, quality: str, coefficient: int = 1) -> str:
        """
        Collapse a compound interval into a single octave.

        Example:
            pitch_interval_reduce(number=12, quality="augmented")  # -> A5
        """
        try:
            interval = _interval(number, quality, coefficient)
            return json.dumps(
                {"status": "success", "interval": _interval_payload(interval.reduce())}
            )
        except Exception as e:
            logger.exception("Failed to reduce interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_interval_reduce"] = pitch_interval_reduce

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_interval_normalize(number: int, quality: str, coefficient: int = 1) -> str:
        """
        Turn a descending (number below 1) interval into its ascending form.

        Example:
            pitch_interval_normalize(number=-2, quality="major")
        """
        try:
            interval = _interval(number, quality, coefficient)
            return json.dumps(
                {"status": "success", "interval": _interval_payload(interval.normalize())}
            )
        except Exception as e:
            logger.exception("Failed to normalize interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_interval_normalize"] = pitch_interval_normalize

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_interval_invert(number: int, quality: str, coefficient: int = 1) -> str:
        """
        Invert an interval within the octave (M3 -> m6, P5 -> P4).

        Example:
            pitch_interval_invert(number=3, quality="major")
        """
        try:
            interval = _interval(number, quality, coefficient)
            return json.dumps(
                {"status": "success", "interval": _interval_payload(interval.invert())}
            )
        except Exception as e:
            logger.exception("Failed to invert interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_interval_invert"] = pitch_interval_invert

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_interval_from_semitones(number: int, semitones: int) -> str:
        """
        Find the quality that makes an interval number span some semitones.

        Args:
            number: Interval number
            semitones: Target size in semitones

        Returns:
            JSON string with the interval

        Example:
            pitch_interval_from_semitones(number=12, semitones=20)  # -> A12
        """
        try:
            interval = Interval.from_chromatic_value(number, semitones)
            return json.dumps({"status": "success", "interval": _interval_payload(interval)})
        except Exception as e:
            logger.exception("Failed to build interval from semitones")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_interval_from_semitones"] = pitch_interval_from_semitones

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_export_yaml(
        kind: str,
        letter: str | None = None,
        offset: int = 0,
        octave: int = DEFAULT_OCTAVE,
        number: int | None = None,
        quality: str | None = None,
        coefficient: int = 1,
    ) -> str:
        """
        Export a note or an interval as YAML.

        Args:
            kind: 'note' or 'interval'
            letter: Letter name (notes)
            offset: Sharps/flats (notes)
            octave: Octave (notes)
            number: Interval number (intervals)
            quality: Interval quality (intervals)
            coefficient: Augmented/diminished depth (intervals)

        Returns:
            JSON string with the YAML content

        Example:
            pitch_export_yaml(kind="interval", number=6, quality="minor")
        """
        try:
            import yaml

            if kind == "note":
                if letter is None:
                    raise ValueError("letter is required for kind 'note'")
                yaml_dict = NoteModel(letter=letter, offset=offset, octave=octave).to_yaml_dict()
            elif kind == "interval":
                if number is None or quality is None:
                    raise ValueError("number and quality are required for kind 'interval'")
                yaml_dict = _interval_payload(_interval(number, quality, coefficient))
            else:
                raise ValueError(ErrorMessages.UNKNOWN_KIND.format(kind=kind))

            yaml_content = yaml.safe_dump(yaml_dict, default_flow_style=False, sort_keys=False)

            return json.dumps(
                {
                    "status": "success",
                    "yaml": yaml_content,
                }
            )
        except Exception as e:
            logger.exception("Failed to export YAML")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_export_yaml"] = pitch_export_yaml

    return tools
