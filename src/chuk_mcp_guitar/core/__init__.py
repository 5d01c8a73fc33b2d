"""
Core music theory primitives.

These are the mathematical invariants that everything else composes on:
- PitchClass: The 12 chromatic pitch classes (0-11)
- Note: A spelled pitch class (C# and Db are equal, spelled differently)
- Interval: Distance between pitches in semitones, with name and quality
- ScaleType / Scale: Interval formulas and their application to a root
- ChordType / Chord: Chord formulas, symbol parsing and scale suggestions
- HarmonicField: Diatonic chords, numerals, functions and modes of a key
"""

from chuk_mcp_guitar.core.chord import Chord, ChordType, parse_chord_symbol
from chuk_mcp_guitar.core.harmony import DegreeInfo, HarmonicField, KeyCandidate
from chuk_mcp_guitar.core.pitch import Interval, Note, PitchClass
from chuk_mcp_guitar.core.scale import Scale, ScaleType

__all__ = [
    # Pitch
    "PitchClass",
    "Note",
    "Interval",
    # Scale
    "ScaleType",
    "Scale",
    # Chord
    "ChordType",
    "Chord",
    "parse_chord_symbol",
    # Harmony
    "HarmonicField",
    "DegreeInfo",
    "KeyCandidate",
]
