"""
Harmony primitives - HarmonicField, DegreeInfo, KeyCandidate.

A harmonic field is the set of diatonic chords built on the seven degrees
of a major or natural minor scale. Each degree carries a triad, a tetrad,
a Roman numeral, a harmonic function and the diatonic mode rooted there.

Everything is table-driven: per-mode triad, tetrad, function and mode
tables indexed by degree.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from chuk_mcp_guitar.constants import ErrorMessages, HarmonicMode
from chuk_mcp_guitar.core.chord import Chord, ChordType
from chuk_mcp_guitar.core.pitch import Note, PitchClass
from chuk_mcp_guitar.core.scale import Scale, ScaleType
from chuk_mcp_guitar.errors import DegreeOutOfRangeError, InvalidHarmonicModeError

TRIAD_TYPES: dict[HarmonicMode, tuple[ChordType, ...]] = {
    HarmonicMode.MAJOR: (
        ChordType.MAJOR,
        ChordType.MINOR,
        ChordType.MINOR,
        ChordType.MAJOR,
        ChordType.MAJOR,
        ChordType.MINOR,
        ChordType.DIM,
    ),
    HarmonicMode.MINOR: (
        ChordType.MINOR,
        ChordType.DIM,
        ChordType.MAJOR,
        ChordType.MINOR,
        ChordType.MINOR,
        ChordType.MAJOR,
        ChordType.MAJOR,
    ),
}

TETRAD_TYPES: dict[HarmonicMode, tuple[ChordType, ...]] = {
    HarmonicMode.MAJOR: (
        ChordType.MAJ7,
        ChordType.MIN7,
        ChordType.MIN7,
        ChordType.MAJ7,
        ChordType.DOM7,
        ChordType.MIN7,
        ChordType.MIN7B5,
    ),
    HarmonicMode.MINOR: (
        ChordType.MIN7,
        ChordType.MIN7B5,
        ChordType.MAJ7,
        ChordType.MIN7,
        ChordType.MIN7,
        ChordType.MAJ7,
        ChordType.DOM7,
    ),
}

FUNCTIONS: dict[HarmonicMode, tuple[str, ...]] = {
    HarmonicMode.MAJOR: (
        "Tonic",
        "Subdominant",
        "Tonic (mediant)",
        "Subdominant",
        "Dominant",
        "Tonic (relative)",
        "Dominant",
    ),
    HarmonicMode.MINOR: (
        "Tonic",
        "Subdominant",
        "Tonic (relative)",
        "Subdominant",
        "Dominant",
        "Subdominant (submediant)",
        "Dominant (subtonic)",
    ),
}

MODES_BY_DEGREE: dict[HarmonicMode, tuple[ScaleType, ...]] = {
    HarmonicMode.MAJOR: (
        ScaleType.IONIAN,
        ScaleType.DORIAN,
        ScaleType.PHRYGIAN,
        ScaleType.LYDIAN,
        ScaleType.MIXOLYDIAN,
        ScaleType.AEOLIAN,
        ScaleType.LOCRIAN,
    ),
    HarmonicMode.MINOR: (
        ScaleType.AEOLIAN,
        ScaleType.LOCRIAN,
        ScaleType.IONIAN,
        ScaleType.DORIAN,
        ScaleType.PHRYGIAN,
        ScaleType.LYDIAN,
        ScaleType.MIXOLYDIAN,
    ),
}

ROMAN_NUMERALS: tuple[str, ...] = ("I", "II", "III", "IV", "V", "VI", "VII")

# Chord types written with a lowercase numeral
_LOWERCASE_TYPES = frozenset({ChordType.MINOR, ChordType.MIN7, ChordType.MIN7B5, ChordType.DIM})

_PARENT_SCALES: dict[HarmonicMode, ScaleType] = {
    HarmonicMode.MAJOR: ScaleType.MAJOR,
    HarmonicMode.MINOR: ScaleType.MINOR,
}


def parse_mode(mode: HarmonicMode | str) -> HarmonicMode:
    """Parse 'major' / 'minor' into a HarmonicMode."""
    if isinstance(mode, HarmonicMode):
        return mode
    try:
        return HarmonicMode(str(mode).strip().lower())
    except ValueError:
        raise InvalidHarmonicModeError(
            ErrorMessages.INVALID_HARMONIC_MODE.format(mode=mode)
        ) from None


@dataclass(frozen=True)
class DegreeInfo:
    """Everything the harmonic field knows about one scale degree."""

    degree: int
    numeral: str
    triad: Chord
    tetrad: Chord
    function: str
    scale_note: Note
    mode: Scale


@dataclass(frozen=True)
class KeyCandidate:
    """A key suggested by identify_key, with the number of matching chords."""

    key: str  # e.g. "C Major"
    root: Note
    mode: HarmonicMode
    matches: int
    field: HarmonicField


@dataclass(frozen=True, init=False)
class HarmonicField:
    """
    The diatonic chords of a major or natural minor key.

    Examples:
        HarmonicField("C", "major").triads() -> C Dm Em F G Am Bdim
        HarmonicField("A", "minor").tetrads() -> Am7 Bm7b5 Cmaj7 Dm7 Em7 Fmaj7 G7
    """

    root: Note
    mode: HarmonicMode
    scale: Scale = field(repr=False, compare=False)

    def __init__(self, root: Note | str, mode: HarmonicMode | str = HarmonicMode.MAJOR) -> None:
        resolved_root = root if isinstance(root, Note) else Note(root)
        resolved_mode = parse_mode(mode)
        object.__setattr__(self, "root", resolved_root)
        object.__setattr__(self, "mode", resolved_mode)
        object.__setattr__(self, "scale", Scale(resolved_root, _PARENT_SCALES[resolved_mode]))

    def triads(self) -> list[Chord]:
        """The seven diatonic triads, degree 1 first."""
        return [
            Chord(note, chord_type)
            for note, chord_type in zip(self.scale.notes(), TRIAD_TYPES[self.mode], strict=True)
        ]

    def tetrads(self) -> list[Chord]:
        """The seven diatonic seventh chords, degree 1 first."""
        return [
            Chord(note, chord_type)
            for note, chord_type in zip(self.scale.notes(), TETRAD_TYPES[self.mode], strict=True)
        ]

    def degree(self, n: int) -> DegreeInfo:
        """
        Get the full record for a scale degree.

        Args:
            n: Degree 1-7

        Returns:
            DegreeInfo with numeral, triad, tetrad, function, note and mode
        """
        self._check_degree(n)
        note = self.scale.degree(n)
        return DegreeInfo(
            degree=n,
            numeral=self.roman_numeral(n),
            triad=Chord(note, TRIAD_TYPES[self.mode][n - 1]),
            tetrad=Chord(note, TETRAD_TYPES[self.mode][n - 1]),
            function=FUNCTIONS[self.mode][n - 1],
            scale_note=note,
            mode=self.mode_for_degree(n),
        )

    def mode_for_degree(self, n: int) -> Scale:
        """
        The diatonic mode rooted on degree n.

        All seven modes share the parent scale's pitch classes; only the
        tonal centre moves.
        """
        self._check_degree(n)
        return Scale(self.scale.degree(n), MODES_BY_DEGREE[self.mode][n - 1])

    def roman_numeral(self, n: int) -> str:
        """Roman numeral for degree n: case follows the triad quality, ° marks diminished."""
        self._check_degree(n)
        chord_type = TRIAD_TYPES[self.mode][n - 1]
        numeral = ROMAN_NUMERALS[n - 1]

        if chord_type in _LOWERCASE_TYPES:
            numeral = numeral.lower()
        if chord_type == ChordType.DIM:
            numeral += "°"
        return numeral

    def chords_data(self) -> list[DegreeInfo]:
        """DegreeInfo for degrees 1 through 7."""
        return [self.degree(n) for n in range(1, 8)]

    def diatonic_chords(self) -> list[Chord]:
        """The 14 diatonic chords: seven triads then seven tetrads."""
        return self.triads() + self.tetrads()

    @property
    def key_name(self) -> str:
        """Readable key label like 'C Major' or 'A Minor'."""
        return f"{self.root} {self.mode.value.capitalize()}"

    def __str__(self) -> str:
        return f"Harmonic field of {self.key_name}"

    @staticmethod
    def _check_degree(n: int) -> None:
        if not 1 <= n <= 7:
            raise DegreeOutOfRangeError(ErrorMessages.DEGREE_OUT_OF_RANGE.format(maximum=7, degree=n))

    @classmethod
    def identify_key(cls, chord_symbols: Iterable[str | Chord]) -> list[KeyCandidate]:
        """
        Guess the key of a chord progression.

        Every root (C first, chromatic) in major then minor is scored by how
        many input chords appear among its 14 diatonic chords, matching on
        root pitch class and chord type. Borrowed or substituted chords do
        not count.

        Args:
            chord_symbols: Chord symbols (or Chords) in the progression

        Returns:
            Keys with at least one match, most matches first; ties keep
            the search order.
        """
        chords = [c if isinstance(c, Chord) else Chord(c) for c in chord_symbols]
        candidates: list[KeyCandidate] = []

        for root in Note.all():
            for mode in HarmonicMode:
                harmonic_field = cls(root, mode)
                diatonic: set[tuple[PitchClass, ChordType]] = {
                    (chord.root.pitch_class, chord.chord_type)
                    for chord in harmonic_field.diatonic_chords()
                }
                matches = sum(
                    1 for chord in chords if (chord.root.pitch_class, chord.chord_type) in diatonic
                )
                if matches > 0:
                    candidates.append(
                        KeyCandidate(
                            key=harmonic_field.key_name,
                            root=root,
                            mode=mode,
                            matches=matches,
                            field=harmonic_field,
                        )
                    )

        return sorted(candidates, key=lambda c: -c.matches)
