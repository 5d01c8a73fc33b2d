"""
Error types raised by the theory and fretboard engine.

All errors derive from TheoryError, which is a ValueError, so callers
that only care about bad input can catch ValueError.
"""

from __future__ import annotations


class TheoryError(ValueError):
    """Base class for all engine errors."""


class InvalidNoteError(TheoryError):
    """Note name is not in the sharp or flat spelling tables."""


class InvalidChordSymbolError(TheoryError):
    """Chord symbol does not start with a valid root."""


class UnknownChordSuffixError(TheoryError):
    """Chord symbol root is valid but the suffix is not recognised."""


class UnknownChordTypeError(TheoryError):
    """Chord type is not in the formula table."""


class UnknownScaleTypeError(TheoryError):
    """Scale type is not in the formula table."""


class UnknownIntervalError(TheoryError):
    """Interval short symbol is not recognised."""


class UnknownTuningError(TheoryError):
    """Tuning name is not a preset or a loaded custom tuning."""


class InvalidTuningError(TheoryError):
    """Custom tuning definition is malformed."""


class InvalidHarmonicModeError(TheoryError):
    """Harmonic field mode is neither major nor minor."""


class DegreeOutOfRangeError(TheoryError):
    """Degree argument is outside the valid range."""


class UnknownShapeError(TheoryError):
    """Shape name is not one of the five CAGED shapes."""
