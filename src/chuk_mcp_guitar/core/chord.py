"""
Chord primitives - ChordType and Chord.

Chords are interval formulas from a root. A chord type is a tag that maps
through fixed tables to its formula, symbol suffix, description, category
and compatible scales. Chord symbols like 'Am7' or 'F#m7b5' are parsed by a
small tokenizer: a root (letter plus optional accidental) and a suffix.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from chuk_mcp_guitar.constants import ChordCategory, ErrorMessages
from chuk_mcp_guitar.core.pitch import Interval, Note, PitchClass, spell_from_root
from chuk_mcp_guitar.core.scale import Scale, ScaleType
from chuk_mcp_guitar.errors import (
    InvalidChordSymbolError,
    InvalidNoteError,
    UnknownChordSuffixError,
    UnknownChordTypeError,
)


class ChordType(str, Enum):
    """Known chord types."""

    MAJOR = "major"
    MINOR = "minor"
    DIM = "dim"
    AUG = "aug"
    SUS2 = "sus2"
    SUS4 = "sus4"
    MAJ7 = "maj7"
    MIN7 = "min7"
    DOM7 = "dom7"
    DIM7 = "dim7"
    MIN7B5 = "min7b5"
    AUG7 = "aug7"
    MAJ9 = "maj9"
    MIN9 = "min9"
    DOM9 = "dom9"

    @property
    def formula(self) -> tuple[int, ...]:
        """Semitone offsets from the root, ascending (9ths use 14)."""
        return CHORD_FORMULAS[self]

    @property
    def suffix(self) -> str:
        """Symbol suffix appended to the root name."""
        return CHORD_SUFFIXES[self]

    @property
    def description(self) -> str:
        return CHORD_DESCRIPTIONS[self]

    @property
    def category(self) -> ChordCategory:
        return CHORD_CATEGORIES[self]

    @classmethod
    def parse(cls, value: ChordType | str) -> ChordType:
        """Parse a chord type name like 'maj7' or 'dom7'."""
        if isinstance(value, ChordType):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnknownChordTypeError(
                ErrorMessages.UNKNOWN_CHORD_TYPE.format(
                    chord_type=value, valid=", ".join(t.value for t in cls)
                )
            ) from None


CHORD_FORMULAS: dict[ChordType, tuple[int, ...]] = {
    ChordType.MAJOR: (0, 4, 7),
    ChordType.MINOR: (0, 3, 7),
    ChordType.DIM: (0, 3, 6),
    ChordType.AUG: (0, 4, 8),
    ChordType.SUS2: (0, 2, 7),
    ChordType.SUS4: (0, 5, 7),
    ChordType.MAJ7: (0, 4, 7, 11),
    ChordType.MIN7: (0, 3, 7, 10),
    ChordType.DOM7: (0, 4, 7, 10),
    ChordType.DIM7: (0, 3, 6, 9),
    ChordType.MIN7B5: (0, 3, 6, 10),
    ChordType.AUG7: (0, 4, 8, 10),
    ChordType.MAJ9: (0, 4, 7, 11, 14),
    ChordType.MIN9: (0, 3, 7, 10, 14),
    ChordType.DOM9: (0, 4, 7, 10, 14),
}

CHORD_SUFFIXES: dict[ChordType, str] = {
    ChordType.MAJOR: "",
    ChordType.MINOR: "m",
    ChordType.DIM: "dim",
    ChordType.AUG: "aug",
    ChordType.SUS2: "sus2",
    ChordType.SUS4: "sus4",
    ChordType.MAJ7: "maj7",
    ChordType.MIN7: "m7",
    ChordType.DOM7: "7",
    ChordType.DIM7: "dim7",
    ChordType.MIN7B5: "m7b5",
    ChordType.AUG7: "aug7",
    ChordType.MAJ9: "maj9",
    ChordType.MIN9: "m9",
    ChordType.DOM9: "9",
}

CHORD_DESCRIPTIONS: dict[ChordType, str] = {
    ChordType.MAJOR: "Major - happy, stable",
    ChordType.MINOR: "Minor - sad, melancholic",
    ChordType.DIM: "Diminished - tense, unstable",
    ChordType.AUG: "Augmented - mysterious, suspenseful",
    ChordType.SUS2: "Suspended 2nd - open, neither major nor minor",
    ChordType.SUS4: "Suspended 4th - tension that wants to resolve",
    ChordType.MAJ7: "Major 7th - sophisticated, jazz/bossa",
    ChordType.MIN7: "Minor 7th - smooth, jazz",
    ChordType.DOM7: "Dominant 7th - tension, wants to resolve",
    ChordType.DIM7: "Diminished 7th - very tense, symmetrical",
    ChordType.MIN7B5: "Half-diminished - the ii of a minor key, jazz",
    ChordType.AUG7: "Augmented 7th - altered dominant",
    ChordType.MAJ9: "Major 9th - sophisticated, neo-soul",
    ChordType.MIN9: "Minor 9th - smooth, R&B/jazz",
    ChordType.DOM9: "Dominant 9th - funky, groovy",
}

CHORD_CATEGORIES: dict[ChordType, ChordCategory] = {
    ChordType.MAJOR: ChordCategory.MAJOR,
    ChordType.MAJ7: ChordCategory.MAJOR,
    ChordType.MAJ9: ChordCategory.MAJOR,
    ChordType.MINOR: ChordCategory.MINOR,
    ChordType.MIN7: ChordCategory.MINOR,
    ChordType.MIN9: ChordCategory.MINOR,
    ChordType.MIN7B5: ChordCategory.MINOR,
    ChordType.DOM7: ChordCategory.DOMINANT,
    ChordType.DOM9: ChordCategory.DOMINANT,
    ChordType.DIM: ChordCategory.DIMINISHED,
    ChordType.DIM7: ChordCategory.DIMINISHED,
    ChordType.AUG: ChordCategory.OTHER,
    ChordType.AUG7: ChordCategory.OTHER,
    ChordType.SUS2: ChordCategory.OTHER,
    ChordType.SUS4: ChordCategory.OTHER,
}

# Static compatibility table, not derived from note-set intersection
SUGGESTED_SCALES: dict[ChordType, tuple[ScaleType, ...]] = {
    ChordType.MAJOR: (
        ScaleType.MAJOR,
        ScaleType.LYDIAN,
        ScaleType.PENTATONIC_MAJOR,
        ScaleType.IONIAN,
    ),
    ChordType.MINOR: (
        ScaleType.MINOR,
        ScaleType.DORIAN,
        ScaleType.PENTATONIC_MINOR,
        ScaleType.BLUES,
        ScaleType.AEOLIAN,
    ),
    ChordType.DOM7: (ScaleType.MIXOLYDIAN, ScaleType.PENTATONIC_MINOR, ScaleType.BLUES),
    ChordType.DIM: (ScaleType.LOCRIAN,),
    ChordType.MIN7B5: (ScaleType.LOCRIAN,),
    ChordType.SUS4: (ScaleType.MIXOLYDIAN, ScaleType.PENTATONIC_MAJOR),
    ChordType.AUG: (ScaleType.MELODIC_MINOR,),
}
SUGGESTED_SCALES[ChordType.MAJ7] = SUGGESTED_SCALES[ChordType.MAJOR]
SUGGESTED_SCALES[ChordType.MAJ9] = SUGGESTED_SCALES[ChordType.MAJOR]
SUGGESTED_SCALES[ChordType.MIN7] = SUGGESTED_SCALES[ChordType.MINOR]
SUGGESTED_SCALES[ChordType.MIN9] = SUGGESTED_SCALES[ChordType.MINOR]
SUGGESTED_SCALES[ChordType.DOM9] = SUGGESTED_SCALES[ChordType.DOM7]
SUGGESTED_SCALES[ChordType.DIM7] = SUGGESTED_SCALES[ChordType.DIM]
SUGGESTED_SCALES[ChordType.SUS2] = SUGGESTED_SCALES[ChordType.SUS4]
SUGGESTED_SCALES[ChordType.AUG7] = SUGGESTED_SCALES[ChordType.AUG]

# Suffixes accepted when parsing symbols (aliases included)
SYMBOL_SUFFIXES: dict[str, ChordType] = {
    "m": ChordType.MINOR,
    "m7": ChordType.MIN7,
    "m9": ChordType.MIN9,
    "7": ChordType.DOM7,
    "9": ChordType.DOM9,
    "maj7": ChordType.MAJ7,
    "maj9": ChordType.MAJ9,
    "min7": ChordType.MIN7,
    "min9": ChordType.MIN9,
    "dim": ChordType.DIM,
    "dim7": ChordType.DIM7,
    "aug": ChordType.AUG,
    "aug7": ChordType.AUG7,
    "m7b5": ChordType.MIN7B5,
    "sus2": ChordType.SUS2,
    "sus4": ChordType.SUS4,
    "dom7": ChordType.DOM7,
    "dom9": ChordType.DOM9,
}

_ROOT_LETTERS = "ABCDEFG"
_ACCIDENTALS = "#b"


def parse_chord_symbol(symbol: str) -> tuple[Note, ChordType]:
    """
    Split a chord symbol into root note and chord type.

    Grammar:
        root   := [A-G] [#|b]?
        suffix := one of SYMBOL_SUFFIXES, or empty for a major triad

    Args:
        symbol: Chord symbol like 'C', 'Am7', 'Bbmaj7', 'F#m7b5'

    Returns:
        (root, chord_type)

    Raises:
        InvalidChordSymbolError: The root is missing or not a valid note
        UnknownChordSuffixError: The suffix is not recognised
    """
    text = symbol.strip() if isinstance(symbol, str) else ""
    if not text or text[0] not in _ROOT_LETTERS:
        raise InvalidChordSymbolError(ErrorMessages.INVALID_CHORD_SYMBOL.format(symbol=symbol))

    root_length = 2 if len(text) > 1 and text[1] in _ACCIDENTALS else 1
    root_name, suffix = text[:root_length], text[root_length:]

    try:
        root = Note(root_name)
    except InvalidNoteError as e:
        # Letters like Cb or E# exist in neither spelling table
        raise InvalidChordSymbolError(
            ErrorMessages.INVALID_CHORD_SYMBOL.format(symbol=symbol)
        ) from e

    if not suffix:
        return root, ChordType.MAJOR

    chord_type = SYMBOL_SUFFIXES.get(suffix)
    if chord_type is None:
        raise UnknownChordSuffixError(
            ErrorMessages.UNKNOWN_CHORD_SUFFIX.format(
                suffix=suffix, symbol=symbol, valid=", ".join(SYMBOL_SUFFIXES)
            )
        )
    return root, chord_type


@dataclass(frozen=True, init=False)
class Chord:
    """
    A concrete chord with a root note and type.

    Build it from a symbol or from an explicit root and type:
        Chord("G7")
        Chord("G", ChordType.DOM7)
        Chord(Note("G"), "dom7")

    Two chords are equal when root pitch class and type match.
    """

    root: Note
    chord_type: ChordType

    def __init__(
        self,
        root_or_symbol: Note | str,
        chord_type: ChordType | str | None = None,
    ) -> None:
        if chord_type is None:
            if isinstance(root_or_symbol, Note):
                root, resolved_type = root_or_symbol, ChordType.MAJOR
            else:
                root, resolved_type = parse_chord_symbol(root_or_symbol)
        else:
            root = root_or_symbol if isinstance(root_or_symbol, Note) else Note(root_or_symbol)
            resolved_type = ChordType.parse(chord_type)

        object.__setattr__(self, "root", root)
        object.__setattr__(self, "chord_type", resolved_type)

    @property
    def formula(self) -> tuple[int, ...]:
        return self.chord_type.formula

    @property
    def suffix(self) -> str:
        return self.chord_type.suffix

    @property
    def symbol(self) -> str:
        """Root as spelled plus the type suffix, e.g. 'Bbmaj7'."""
        return f"{self.root}{self.suffix}"

    @property
    def description(self) -> str:
        return self.chord_type.description

    @property
    def category(self) -> ChordCategory:
        return self.chord_type.category

    @property
    def is_major(self) -> bool:
        return self.category == ChordCategory.MAJOR

    @property
    def is_minor(self) -> bool:
        return self.category == ChordCategory.MINOR

    @property
    def is_dominant(self) -> bool:
        return self.category == ChordCategory.DOMINANT

    @property
    def is_diminished(self) -> bool:
        return self.category == ChordCategory.DIMINISHED

    @property
    def is_triad(self) -> bool:
        return len(self.formula) == 3

    @property
    def is_tetrad(self) -> bool:
        return len(self.formula) == 4

    def notes(self) -> list[Note]:
        """Chord tones in formula order, spelled for the root's key."""
        return spell_from_root(self.root, self.formula)

    def note_names(self) -> list[str]:
        return [note.name for note in self.notes()]

    def pitch_classes(self) -> frozenset[PitchClass]:
        return frozenset(note.pitch_class for note in self.notes())

    def intervals(self) -> list[Interval]:
        """Chord intervals reduced to one octave (a 9th reads as '2')."""
        return [Interval(semitones) for semitones in self.formula]

    def interval_names(self) -> list[str]:
        return [interval.short_name for interval in self.intervals()]

    def suggested_scales(self) -> list[Scale]:
        """Scales that work over this chord, rooted on the chord root."""
        return [Scale(self.root, scale_type) for scale_type in SUGGESTED_SCALES[self.chord_type]]

    def __str__(self) -> str:
        return self.symbol

    @classmethod
    def parse(cls, symbol: str) -> Chord:
        """Parse a chord from a symbol like 'Am7'."""
        return cls(symbol)

    @staticmethod
    def available_types() -> list[ChordType]:
        return list(ChordType)
