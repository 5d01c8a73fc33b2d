"""
Fretboard layer - tunings, note maps and CAGED chord voicings.

Takes chords and notes from the core layer and places them on a
six-string neck. Everything returned is plain data for a renderer.
"""

from chuk_mcp_guitar.fretboard.caged import (
    CAGED_SHAPES,
    SHAPE_FAMILIES,
    CAGEDVoicingGenerator,
    ShapeTemplate,
)
from chuk_mcp_guitar.fretboard.mapper import FretboardMapper
from chuk_mcp_guitar.fretboard.tuning import TUNINGS, Tuning, TuningLoader

__all__ = [
    "CAGED_SHAPES",
    "SHAPE_FAMILIES",
    "CAGEDVoicingGenerator",
    "FretboardMapper",
    "ShapeTemplate",
    "TUNINGS",
    "Tuning",
    "TuningLoader",
]
