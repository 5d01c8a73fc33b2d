"""
Pydantic models for the fretboard layer.

This module provides:
- Voicing: A CAGED chord shape placed on the neck
- FretCell: One fret on one string
- StringRow: All cells along a string
- FretboardMap: Target notes mapped across the neck
"""

from chuk_mcp_guitar.models.fretboard import FretboardMap, FretCell, StringRow, Voicing

__all__ = [
    "FretboardMap",
    "FretCell",
    "StringRow",
    "Voicing",
]
