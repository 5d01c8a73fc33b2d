"""
Improvisation layer - per-key soloing data built from the harmonic field.
"""

from chuk_mcp_guitar.improv.guide import COMMON_PROGRESSIONS, ChordScale, ImprovGuide, Progression

__all__ = [
    "COMMON_PROGRESSIONS",
    "ChordScale",
    "ImprovGuide",
    "Progression",
]
