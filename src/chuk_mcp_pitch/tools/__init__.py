"""
MCP tool implementations.

Tools are organized by domain:
- notes - Describing, transposing and comparing notes
- intervals - Interval arithmetic and YAML export
"""

from chuk_mcp_pitch.tools.intervals import register_interval_tools
from chuk_mcp_pitch.tools.notes import register_note_tools

__all__ = [
    "register_interval_tools",
    "register_note_tools",
]
