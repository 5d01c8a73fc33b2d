"""
Pitch primitives - PitchClass, Note and Interval.

These are the foundational types for all pitch-related operations.
PitchClass represents the 12 chromatic pitches (octave-independent).
Note is a spelled pitch class: C# and Db are different spellings of the
same identity. Interval represents the distance between pitches in semitones.
"""

from __future__ import annotations

from enum import IntEnum
from functools import total_ordering
from typing import ClassVar

from chuk_mcp_guitar.constants import ErrorMessages, IntervalQuality
from chuk_mcp_guitar.errors import InvalidNoteError, UnknownIntervalError

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: list[str] = [
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
]
_FLAT_NAMES: list[str] = [
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
]

_ENHARMONICS: dict[str, str] = {
    "C#": "Db",
    "Db": "C#",
    "D#": "Eb",
    "Eb": "D#",
    "F#": "Gb",
    "Gb": "F#",
    "G#": "Ab",
    "Ab": "G#",
    "A#": "Bb",
    "Bb": "A#",
}


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).

    Spelling is carried by Note, not by the pitch class.
    Internally, we use sharp names (Cs, Ds, etc.).
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % 12)

    def interval_to(self, other: PitchClass) -> Interval:
        """Get the interval from this pitch class to another (ascending)."""
        return Interval((other.value - self.value) % 12)

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name."""
        names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
        return names[self.value]

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """Parse a pitch class from a string like 'C', 'C#', 'Db'."""
        return Note(name).pitch_class


def _normalize_name(name: object) -> str:
    """Capitalize the letter, keep the accidental as written."""
    if not isinstance(name, str):
        raise InvalidNoteError(
            ErrorMessages.INVALID_NOTE.format(name=name, valid=", ".join(_SHARP_NAMES))
        )
    name = name.strip()
    if not name:
        return name
    return name[0].upper() + name[1:]


class Note:
    """
    A spelled pitch class.

    The name is always one of the 12 sharp spellings or the 12 flat
    spellings. Equality and hashing use the pitch class, so
    Note("C#") == Note("Db").

    Immutable and hashable.
    """

    __slots__ = ("_name",)
    _name: str

    def __init__(self, name: str) -> None:
        """Create a note from a name like 'C', 'c#' or 'Bb'."""
        normalized = _normalize_name(name)
        if normalized not in _SHARP_NAMES and normalized not in _FLAT_NAMES:
            raise InvalidNoteError(
                ErrorMessages.INVALID_NOTE.format(name=name, valid=", ".join(_SHARP_NAMES))
            )
        object.__setattr__(self, "_name", normalized)

    def __setattr__(self, key: str, value: object) -> None:
        raise AttributeError("Note is immutable")

    @property
    def name(self) -> str:
        """The spelling this note was created with (normalized)."""
        return self._name

    @property
    def pitch_class(self) -> PitchClass:
        """The canonical pitch class identity."""
        if self._name in _SHARP_NAMES:
            return PitchClass(_SHARP_NAMES.index(self._name))
        return PitchClass(_FLAT_NAMES.index(self._name))

    def semitone_value(self) -> int:
        """Semitones above C (0-11)."""
        return self.pitch_class.value

    def add(self, semitones: int) -> Note:
        """
        Transpose by a number of semitones.

        The result is always sharp-spelled; callers re-spell with
        display_name() when a flat context applies.
        """
        return Note(_SHARP_NAMES[(self.semitone_value() + semitones) % 12])

    def distance_to(self, other: Note | str) -> int:
        """Ascending distance in semitones from this note to another (0-11)."""
        if isinstance(other, str):
            other = Note(other)
        return (other.semitone_value() - self.semitone_value()) % 12

    def enharmonic(self) -> Note:
        """
        Get the alternate accidental spelling.

        Naturals have no alternate spelling and return themselves.
        """
        alternate = _ENHARMONICS.get(self._name)
        return Note(alternate) if alternate else self

    def display_name(self, prefer_flats: bool = False) -> str:
        """Name in the requested spelling, independent of this note's own spelling."""
        return self.pitch_class.spell(prefer_flats=prefer_flats)

    @property
    def is_natural(self) -> bool:
        return len(self._name) == 1

    @property
    def is_sharp(self) -> bool:
        return "#" in self._name

    @property
    def is_flat(self) -> bool:
        return "b" in self._name

    def __add__(self, semitones: int) -> Note:
        if not isinstance(semitones, int):
            return NotImplemented
        return self.add(semitones)

    def __sub__(self, other: int | Note) -> Note | int:
        """Transpose down by an int, or get the semitone difference to another note."""
        if isinstance(other, Note):
            return (self.semitone_value() - other.semitone_value()) % 12
        if isinstance(other, int):
            return self.add(-other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self.semitone_value() == other.semitone_value()

    def __hash__(self) -> int:
        return hash(self.semitone_value())

    def __repr__(self) -> str:
        return f"Note({self._name!r})"

    def __str__(self) -> str:
        return self._name

    @classmethod
    def parse(cls, name: str) -> Note:
        """Parse a note from a string like 'C', 'C#', 'Db'."""
        return cls(name)

    @classmethod
    def all(cls, prefer_flats: bool = False) -> list[Note]:
        """All 12 notes from C, spelled with sharps or flats."""
        names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
        return [cls(name) for name in names]


# Fixed interval table: name, short symbol, quality
_INTERVAL_TABLE: list[tuple[str, str, IntervalQuality]] = [
    ("Unison", "1", IntervalQuality.PERFECT),
    ("Minor second", "b2", IntervalQuality.MINOR),
    ("Major second", "2", IntervalQuality.MAJOR),
    ("Minor third", "b3", IntervalQuality.MINOR),
    ("Major third", "3", IntervalQuality.MAJOR),
    ("Perfect fourth", "4", IntervalQuality.PERFECT),
    ("Tritone", "b5", IntervalQuality.AUGMENTED),
    ("Perfect fifth", "5", IntervalQuality.PERFECT),
    ("Minor sixth", "b6", IntervalQuality.MINOR),
    ("Major sixth", "6", IntervalQuality.MAJOR),
    ("Minor seventh", "b7", IntervalQuality.MINOR),
    ("Major seventh", "7", IntervalQuality.MAJOR),
]

_CONSONANT_SEMITONES: frozenset[int] = frozenset({0, 3, 4, 5, 7, 8, 9})

# Ear-training references, one per interval
_SONG_EXAMPLES: list[str] = [
    "same note repeated",
    "Jaws theme - first two notes",
    "Happy Birthday - 'Hap-' to 'py'",
    "Smoke on the Water - start of the riff",
    "When the Saints Go Marching In - first two notes",
    "Here Comes the Bride - first notes",
    "The Simpsons - 'The Simp...'",
    "Star Wars - main theme opening",
    "Love Story - main theme",
    "My Way - 'And now...'",
    "Star Trek theme - first notes",
    "Take On Me - 'Take on...' in the chorus",
]


@total_ordering
class Interval:
    """
    Distance between pitches in semitones, reduced to one octave.

    This is the fundamental building block - scales are interval patterns,
    chords are interval stacks. Name, symbol, quality and consonance are
    derived from the semitone count through a fixed table.

    Immutable and hashable.
    """

    __slots__ = ("_semitones",)
    _semitones: int

    # Named intervals (class constants)
    UNISON: ClassVar[Interval]
    MINOR_SECOND: ClassVar[Interval]
    MAJOR_SECOND: ClassVar[Interval]
    MINOR_THIRD: ClassVar[Interval]
    MAJOR_THIRD: ClassVar[Interval]
    PERFECT_FOURTH: ClassVar[Interval]
    TRITONE: ClassVar[Interval]
    PERFECT_FIFTH: ClassVar[Interval]
    MINOR_SIXTH: ClassVar[Interval]
    MAJOR_SIXTH: ClassVar[Interval]
    MINOR_SEVENTH: ClassVar[Interval]
    MAJOR_SEVENTH: ClassVar[Interval]

    # Short aliases
    P1: ClassVar[Interval]
    m2: ClassVar[Interval]
    M2: ClassVar[Interval]
    m3: ClassVar[Interval]
    M3: ClassVar[Interval]
    P4: ClassVar[Interval]
    TT: ClassVar[Interval]
    P5: ClassVar[Interval]
    m6: ClassVar[Interval]
    M6: ClassVar[Interval]
    m7: ClassVar[Interval]
    M7: ClassVar[Interval]

    def __init__(self, semitones: int) -> None:
        """Create an interval; values outside 0-11 wrap around the octave."""
        object.__setattr__(self, "_semitones", semitones % 12)

    @property
    def semitones(self) -> int:
        """Number of semitones in this interval (0-11)."""
        return self._semitones

    @property
    def name(self) -> str:
        return _INTERVAL_TABLE[self._semitones][0]

    @property
    def short_name(self) -> str:
        """Scale-degree style symbol, e.g. 'b3'."""
        return _INTERVAL_TABLE[self._semitones][1]

    @property
    def quality(self) -> IntervalQuality:
        return _INTERVAL_TABLE[self._semitones][2]

    @property
    def is_consonant(self) -> bool:
        return self._semitones in _CONSONANT_SEMITONES

    @property
    def is_dissonant(self) -> bool:
        return not self.is_consonant

    @property
    def song_example(self) -> str:
        """A well-known melody that opens with this interval."""
        return _SONG_EXAMPLES[self._semitones]

    @property
    def step_label(self) -> str:
        if self._semitones == 1:
            return "half step"
        if self._semitones == 2:
            return "whole step"
        return f"{self._semitones} semitones"

    def invert(self) -> Interval:
        """
        Invert the interval within an octave.

        M3 (4) -> m6 (8)
        P5 (7) -> P4 (5)
        """
        return Interval(12 - self._semitones)

    def __add__(self, other: Interval) -> Interval:
        """Add two intervals (wraps at the octave)."""
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self._semitones + other._semitones)

    def __sub__(self, other: Interval) -> Interval:
        """Subtract an interval from another (wraps at the octave)."""
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self._semitones - other._semitones)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones == other._semitones)

    def __lt__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones < other._semitones)

    def __hash__(self) -> int:
        return hash(self._semitones)

    def __repr__(self) -> str:
        return f"Interval({self._semitones})"

    def __str__(self) -> str:
        return self.short_name

    @classmethod
    def between(cls, first: Note | str, second: Note | str) -> Interval:
        """Ascending interval from one note to another."""
        if isinstance(first, str):
            first = Note(first)
        return cls(first.distance_to(second))

    @classmethod
    def from_short(cls, short: str) -> Interval:
        """Look up an interval by its short symbol ('b3', '5', ...)."""
        for semitones, (_, symbol, _) in enumerate(_INTERVAL_TABLE):
            if symbol == short:
                return cls(semitones)
        raise UnknownIntervalError(
            ErrorMessages.UNKNOWN_INTERVAL.format(
                short=short, valid=", ".join(row[1] for row in _INTERVAL_TABLE)
            )
        )

    @classmethod
    def all(cls) -> list[Interval]:
        """All 12 simple intervals, unison first."""
        return [cls(semitones) for semitones in range(12)]


# Initialize class constants after class is defined
Interval.UNISON = Interval(0)
Interval.MINOR_SECOND = Interval(1)
Interval.MAJOR_SECOND = Interval(2)
Interval.MINOR_THIRD = Interval(3)
Interval.MAJOR_THIRD = Interval(4)
Interval.PERFECT_FOURTH = Interval(5)
Interval.TRITONE = Interval(6)
Interval.PERFECT_FIFTH = Interval(7)
Interval.MINOR_SIXTH = Interval(8)
Interval.MAJOR_SIXTH = Interval(9)
Interval.MINOR_SEVENTH = Interval(10)
Interval.MAJOR_SEVENTH = Interval(11)

# Short aliases
Interval.P1 = Interval.UNISON
Interval.m2 = Interval.MINOR_SECOND
Interval.M2 = Interval.MAJOR_SECOND
Interval.m3 = Interval.MINOR_THIRD
Interval.M3 = Interval.MAJOR_THIRD
Interval.P4 = Interval.PERFECT_FOURTH
Interval.TT = Interval.TRITONE
Interval.P5 = Interval.PERFECT_FIFTH
Interval.m6 = Interval.MINOR_SIXTH
Interval.M6 = Interval.MAJOR_SIXTH
Interval.m7 = Interval.MINOR_SEVENTH
Interval.M7 = Interval.MAJOR_SEVENTH


# Roots that conventionally use flats. The minor-key entries never equal a
# bare note name; they are kept so the table matches the published key list.
FLAT_KEYS: frozenset[str] = frozenset(
    {"F", "Bb", "Eb", "Ab", "Db", "Gb", "Dm", "Gm", "Cm", "Fm", "Bbm", "Ebm"}
)


def prefers_flats(root: Note) -> bool:
    """Whether notes built on this root should be spelled with flats."""
    return root.name in FLAT_KEYS or root.is_flat


def spell_from_root(root: Note, offsets: tuple[int, ...]) -> list[Note]:
    """
    Transpose a root by each offset and spell the results for the root's key.

    Args:
        root: The root note
        offsets: Semitone offsets from the root (may exceed 12)

    Returns:
        One Note per offset, in offset order
    """
    use_flats = prefers_flats(root)
    return [Note(root.add(offset).display_name(prefer_flats=use_flats)) for offset in offsets]
