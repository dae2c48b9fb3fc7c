#!/usr/bin/env python3
"""
Async Pitch MCP Server using chuk-mcp-server

This server exposes spelled-pitch arithmetic as MCP tools. Notes keep
their letter spelling (G# is not Ab), and intervals keep their diatonic
number (an augmented fourth is not a diminished fifth).

The server provides tools for:
- Describing notes and spelling them from diatonic/chromatic values
- Transposing notes up and down by intervals
- Measuring the interval between two notes
- Adding, subtracting, reducing, normalizing and inverting intervals
- Exporting notes and intervals as YAML
"""

import logging

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_pitch.constants import SERVER_NAME
from chuk_mcp_pitch.tools import register_interval_tools, register_note_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer(SERVER_NAME)

# Register all tools
note_tools = register_note_tools(mcp)
interval_tools = register_interval_tools(mcp)

# Export tool functions for direct access
pitch_describe_note = note_tools["pitch_describe_note"]
pitch_note_above = note_tools["pitch_note_above"]
pitch_note_below = note_tools["pitch_note_below"]
pitch_note_difference = note_tools["pitch_note_difference"]
pitch_note_from_values = note_tools["pitch_note_from_values"]

pitch_describe_interval = interval_tools["pitch_describe_interval"]
pitch_interval_add = interval_tools["pitch_interval_add"]
pitch_interval_subtract = interval_tools["pitch_interval_subtract"]
pitch_interval_reduce = interval_tools["pitch_interval_reduce"]
pitch_interval_normalize = interval_tools["pitch_interval_normalize"]
pitch_interval_invert = interval_tools["pitch_interval_invert"]
pitch_interval_from_semitones = interval_tools["pitch_interval_from_semitones"]
pitch_export_yaml = interval_tools["pitch_export_yaml"]

logger.info("CHUK Pitch MCP Server initialized")
logger.info(f"  Tools: {len(note_tools) + len(interval_tools)}")
