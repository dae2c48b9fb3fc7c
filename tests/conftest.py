"""
Pytest configuration and shared fixtures.
"""

import pytest

from chuk_mcp_pitch.core import LetterName, Note, PitchClass


class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def mcp() -> MockMCPServer:
    """A mock server to register tools against."""
    return MockMCPServer("test")


@pytest.fixture
def c4() -> Note:
    """Middle C (diatonic 29, chromatic 48)."""
    return Note(PitchClass(LetterName.C))


@pytest.fixture
def g_sharp5() -> Note:
    """G#5 (diatonic 40, chromatic 68)."""
    return Note(PitchClass(LetterName.G, 1), 5)
