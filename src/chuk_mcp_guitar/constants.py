"""
Constants and enums for the guitar theory system.

No magic strings - use enums for constrained values.
"""

from enum import Enum


class IntervalQuality(str, Enum):
    """Quality tag of a simple interval."""

    PERFECT = "perfect"
    MAJOR = "major"
    MINOR = "minor"
    AUGMENTED = "augmented"


class ChordCategory(str, Enum):
    """
    Coarse chord family used for display and scale suggestions.

    Every chord type belongs to exactly one category.
    """

    MAJOR = "major"
    MINOR = "minor"
    DOMINANT = "dominant"
    DIMINISHED = "diminished"
    OTHER = "other"


class HarmonicMode(str, Enum):
    """Modes a harmonic field can be built on."""

    MAJOR = "major"
    MINOR = "minor"


class CagedShape(str, Enum):
    """The five movable CAGED shapes."""

    E = "E"
    A = "A"
    G = "G"
    C = "C"
    D = "D"


class ShapeQuality(str, Enum):
    """Which template family a voicing was built from."""

    MAJOR = "major"
    MINOR = "minor"


# Number of strings every tuning carries
STRING_COUNT = 6

# Default number of frets for fretboard maps
DEFAULT_FRET_COUNT = 15

# Default search window for voicings near a fret
DEFAULT_FRET_RANGE = 3


class ErrorMessages:
    """Standardized error messages."""

    INVALID_NOTE = "Invalid note: '{name}'. Expected one of {valid}."
    INVALID_CHORD_SYMBOL = "Invalid chord symbol: '{symbol}'. Expected a root A-G with optional # or b."
    UNKNOWN_CHORD_SUFFIX = "Unknown chord suffix: '{suffix}' in '{symbol}'. Valid suffixes: {valid}."
    UNKNOWN_CHORD_TYPE = "Unknown chord type: '{chord_type}'. Valid types: {valid}."
    UNKNOWN_SCALE_TYPE = "Unknown scale type: '{scale_type}'. Valid types: {valid}."
    UNKNOWN_TUNING = "Unknown tuning: '{name}'. Available: {valid}."
    INVALID_TUNING = "Invalid tuning '{name}': {reason}."
    UNKNOWN_INTERVAL = "Unknown interval: '{short}'. Valid symbols: {valid}."
    INVALID_HARMONIC_MODE = "Invalid harmonic mode: '{mode}'. Mode must be 'major' or 'minor'."
    DEGREE_OUT_OF_RANGE = "Degree must be between 1 and {maximum}, got {degree}."
    UNKNOWN_CAGED_SHAPE = "Unknown CAGED shape: '{shape}'. Valid shapes: {valid}."
