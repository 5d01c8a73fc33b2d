"""
MCP tool implementations.

Tools are organized by domain:
- theory - Notes, intervals, scales, chords, keys
- fretboard - Tunings, note maps, CAGED voicings, improv guide
"""

from chuk_mcp_guitar.tools.fretboard import register_fretboard_tools
from chuk_mcp_guitar.tools.theory import register_theory_tools

__all__ = [
    "register_fretboard_tools",
    "register_theory_tools",
]
