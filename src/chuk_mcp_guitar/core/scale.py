"""
Scale primitives - ScaleType and Scale.

Scales are interval formulas from a root. A scale type is a tag that maps
through fixed tables to its formula, description and step pattern.
A Scale is a scale type applied to a root note.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from chuk_mcp_guitar.constants import ErrorMessages
from chuk_mcp_guitar.core.pitch import Interval, Note, PitchClass, spell_from_root
from chuk_mcp_guitar.errors import DegreeOutOfRangeError, UnknownScaleTypeError


class ScaleType(str, Enum):
    """Known scale types. Order matters: it is the search order of find_matching."""

    MAJOR = "major"
    MINOR = "minor"
    HARMONIC_MINOR = "harmonic_minor"
    MELODIC_MINOR = "melodic_minor"
    PENTATONIC_MAJOR = "pentatonic_major"
    PENTATONIC_MINOR = "pentatonic_minor"
    BLUES = "blues"
    # Diatonic modes
    IONIAN = "ionian"
    DORIAN = "dorian"
    PHRYGIAN = "phrygian"
    LYDIAN = "lydian"
    MIXOLYDIAN = "mixolydian"
    AEOLIAN = "aeolian"
    LOCRIAN = "locrian"

    @property
    def formula(self) -> tuple[int, ...]:
        """Semitone offsets from the root, ascending."""
        return SCALE_FORMULAS[self]

    @property
    def description(self) -> str:
        return SCALE_DESCRIPTIONS[self]

    @property
    def step_pattern(self) -> str | None:
        """Whole/half step pattern (W, H, WH) or None for the modes."""
        return SCALE_STEP_PATTERNS.get(self)

    @classmethod
    def parse(cls, value: ScaleType | str) -> ScaleType:
        """Parse a scale type from a string like 'major' or 'Pentatonic Minor'."""
        if isinstance(value, ScaleType):
            return value
        key = str(value).strip().lower().replace(" ", "_").replace("-", "_")
        try:
            return cls(key)
        except ValueError:
            raise UnknownScaleTypeError(
                ErrorMessages.UNKNOWN_SCALE_TYPE.format(
                    scale_type=value, valid=", ".join(t.value for t in cls)
                )
            ) from None


SCALE_FORMULAS: dict[ScaleType, tuple[int, ...]] = {
    ScaleType.MAJOR: (0, 2, 4, 5, 7, 9, 11),
    ScaleType.MINOR: (0, 2, 3, 5, 7, 8, 10),
    ScaleType.HARMONIC_MINOR: (0, 2, 3, 5, 7, 8, 11),
    ScaleType.MELODIC_MINOR: (0, 2, 3, 5, 7, 9, 11),
    ScaleType.PENTATONIC_MAJOR: (0, 2, 4, 7, 9),
    ScaleType.PENTATONIC_MINOR: (0, 3, 5, 7, 10),
    ScaleType.BLUES: (0, 3, 5, 6, 7, 10),
    ScaleType.IONIAN: (0, 2, 4, 5, 7, 9, 11),
    ScaleType.DORIAN: (0, 2, 3, 5, 7, 9, 10),
    ScaleType.PHRYGIAN: (0, 1, 3, 5, 7, 8, 10),
    ScaleType.LYDIAN: (0, 2, 4, 6, 7, 9, 11),
    ScaleType.MIXOLYDIAN: (0, 2, 4, 5, 7, 9, 10),
    ScaleType.AEOLIAN: (0, 2, 3, 5, 7, 8, 10),
    ScaleType.LOCRIAN: (0, 1, 3, 5, 6, 8, 10),
}

SCALE_DESCRIPTIONS: dict[ScaleType, str] = {
    ScaleType.MAJOR: "Major scale (Ionian) - bright, happy",
    ScaleType.MINOR: "Natural minor scale (Aeolian) - sad, melancholic",
    ScaleType.HARMONIC_MINOR: "Harmonic minor - classical/eastern flavour, makes V7 work",
    ScaleType.MELODIC_MINOR: "Melodic minor - smooth, jazz",
    ScaleType.PENTATONIC_MAJOR: "Major pentatonic - country, pop, the safe choice",
    ScaleType.PENTATONIC_MINOR: "Minor pentatonic - rock, blues, the improviser's favourite",
    ScaleType.BLUES: "Blues - minor pentatonic plus the blue note (b5)",
    ScaleType.IONIAN: "Ionian (= major) - the foundation, bright sound",
    ScaleType.DORIAN: "Dorian - minor with a major 6th, Santana/jazz-funk sound",
    ScaleType.PHRYGIAN: "Phrygian - Spanish/flamenco sound, tense",
    ScaleType.LYDIAN: "Lydian - major with #4, dreamy/ethereal",
    ScaleType.MIXOLYDIAN: "Mixolydian - major with b7, blues/rock/dominant sound",
    ScaleType.AEOLIAN: "Aeolian (= natural minor) - sad, melancholic",
    ScaleType.LOCRIAN: "Locrian - unstable, used over m7b5",
}

SCALE_STEP_PATTERNS: dict[ScaleType, str] = {
    ScaleType.MAJOR: "W W H W W W H",
    ScaleType.MINOR: "W H W W H W W",
    ScaleType.HARMONIC_MINOR: "W H W W H WH H",
    ScaleType.MELODIC_MINOR: "W H W W W W H",
    ScaleType.PENTATONIC_MAJOR: "W W WH W WH",
    ScaleType.PENTATONIC_MINOR: "WH W W WH W",
    ScaleType.BLUES: "WH W H H WH W",
}


def _as_note(value: Note | str) -> Note:
    return value if isinstance(value, Note) else Note(value)


@dataclass(frozen=True, init=False)
class Scale:
    """
    A root note plus a scale type.

    Notes are spelled with flats when the root is a conventional flat key
    or is itself flat-spelled, with sharps otherwise.

    Examples:
        Scale("C", "major").note_names() == ["C", "D", "E", "F", "G", "A", "B"]
        Scale("F", ScaleType.MAJOR).note_names()[3] == "Bb"
    """

    root: Note
    scale_type: ScaleType
    _notes: tuple[Note, ...] = field(repr=False, compare=False)

    def __init__(self, root: Note | str, scale_type: ScaleType | str = ScaleType.MAJOR) -> None:
        resolved_root = _as_note(root)
        resolved_type = ScaleType.parse(scale_type)
        object.__setattr__(self, "root", resolved_root)
        object.__setattr__(self, "scale_type", resolved_type)
        object.__setattr__(
            self, "_notes", tuple(spell_from_root(resolved_root, resolved_type.formula))
        )

    @property
    def formula(self) -> tuple[int, ...]:
        return self.scale_type.formula

    @property
    def description(self) -> str:
        return self.scale_type.description

    @property
    def step_pattern(self) -> str | None:
        return self.scale_type.step_pattern

    @property
    def name(self) -> str:
        """Readable name like 'A pentatonic minor'."""
        return f"{self.root} {self.scale_type.value.replace('_', ' ')}"

    def notes(self) -> list[Note]:
        """Scale notes in degree order."""
        return list(self._notes)

    def note_names(self) -> list[str]:
        return [note.name for note in self._notes]

    def pitch_classes(self) -> frozenset[PitchClass]:
        """The scale's pitch-class set, independent of spelling and order."""
        return frozenset(note.pitch_class for note in self._notes)

    def intervals(self) -> list[Interval]:
        return [Interval(semitones) for semitones in self.formula]

    def degree(self, n: int) -> Note:
        """
        Get the nth note of the scale.

        Args:
            n: 1-indexed degree, 1 to the number of notes

        Returns:
            The note at that degree
        """
        if not 1 <= n <= len(self._notes):
            raise DegreeOutOfRangeError(
                ErrorMessages.DEGREE_OUT_OF_RANGE.format(maximum=len(self._notes), degree=n)
            )
        return self._notes[n - 1]

    def includes(self, note: Note | str) -> bool:
        """Whether the scale contains the note's pitch class."""
        return _as_note(note) in self._notes

    def __len__(self) -> int:
        return len(self._notes)

    def __str__(self) -> str:
        return f"{self.name}: {' - '.join(self.note_names())}"

    @classmethod
    def find_matching(
        cls,
        notes: Iterable[Note | str],
        root: Note | str | None = None,
    ) -> list[Scale]:
        """
        Find every scale that contains all the given notes.

        Tries each root (or only the given one) against every scale type,
        roots in chromatic order from C, types in table order.

        Args:
            notes: Notes that must all be present
            root: Restrict the search to this root

        Returns:
            Matching scales
        """
        wanted = [_as_note(n) for n in notes]
        roots = [_as_note(root)] if root is not None else Note.all()

        results: list[Scale] = []
        for candidate_root in roots:
            for scale_type in ScaleType:
                scale = cls(candidate_root, scale_type)
                if all(scale.includes(note) for note in wanted):
                    results.append(scale)
        return results

    @staticmethod
    def available_types() -> list[ScaleType]:
        return list(ScaleType)
