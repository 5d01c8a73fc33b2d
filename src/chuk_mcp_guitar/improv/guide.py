"""
Improvisation guide - a key's cheat sheet as data.

Bundles what a player needs to solo over a key: common progressions
resolved to chords, the scale that fits each diatonic chord, the
"safe" pentatonic choices, a pentatonic fretboard map and the tonic's
CAGED voicings.
"""

from __future__ import annotations

from dataclasses import dataclass

from chuk_mcp_guitar.constants import DEFAULT_FRET_COUNT, HarmonicMode
from chuk_mcp_guitar.core.chord import Chord
from chuk_mcp_guitar.core.harmony import HarmonicField
from chuk_mcp_guitar.core.pitch import Note
from chuk_mcp_guitar.core.scale import Scale, ScaleType
from chuk_mcp_guitar.fretboard.caged import CAGEDVoicingGenerator
from chuk_mcp_guitar.fretboard.mapper import FretboardMapper
from chuk_mcp_guitar.fretboard.tuning import Tuning
from chuk_mcp_guitar.models.fretboard import FretboardMap, Voicing

# (name, degrees, style) per mode
COMMON_PROGRESSIONS: dict[HarmonicMode, tuple[tuple[str, tuple[int, ...], str], ...]] = {
    HarmonicMode.MAJOR: (
        ("I - IV - V", (1, 4, 5), "rock, folk, blues"),
        ("I - V - vi - IV", (1, 5, 6, 4), "pop (the most used progression)"),
        ("ii - V - I", (2, 5, 1), "jazz (the core jazz cadence)"),
        ("I - vi - IV - V", (1, 6, 4, 5), "50s, doo-wop"),
        ("I - IV - vi - V", (1, 4, 6, 5), "pop/rock"),
        ("vi - IV - I - V", (6, 4, 1, 5), "emotional pop"),
    ),
    HarmonicMode.MINOR: (
        ("i - iv - v", (1, 4, 5), "minor rock"),
        ("i - VI - III - VII", (1, 6, 3, 7), "minor pop, Andalusian"),
        ("i - iv - VII - III", (1, 4, 7, 3), "minor ballad"),
        ("i - VII - VI - VII", (1, 7, 6, 7), "flamenco, metal"),
    ),
}


@dataclass(frozen=True)
class Progression:
    """A named progression resolved to the triads of one key."""

    name: str
    degrees: tuple[int, ...]
    style: str
    chords: tuple[Chord, ...]

    @property
    def symbols(self) -> list[str]:
        return [chord.symbol for chord in self.chords]


@dataclass(frozen=True)
class ChordScale:
    """The triad, seventh chord and mode that go with one degree."""

    degree: int
    triad: Chord
    tetrad: Chord
    mode: Scale


class ImprovGuide:
    """
    Improvisation data for a major or natural minor key.

    Examples:
        guide = ImprovGuide("A", "minor")
        [s.name for s in guide.safe_scales()]
        -> ["A pentatonic minor", "A blues", "C pentatonic major"]
    """

    def __init__(self, root: Note | str, mode: HarmonicMode | str = HarmonicMode.MAJOR):
        self.field = HarmonicField(root, mode)

    @property
    def root(self) -> Note:
        return self.field.root

    @property
    def mode(self) -> HarmonicMode:
        return self.field.mode

    @property
    def key_name(self) -> str:
        return self.field.key_name

    def common_progressions(self) -> list[Progression]:
        """The mode's stock progressions with their chords in this key."""
        triads = self.field.triads()
        return [
            Progression(
                name=name,
                degrees=degrees,
                style=style,
                chords=tuple(triads[d - 1] for d in degrees),
            )
            for name, degrees, style in COMMON_PROGRESSIONS[self.mode]
        ]

    def safe_scales(self) -> list[Scale]:
        """
        Scales that work over every chord of the key.

        Major keys: root pentatonic major, then the relative minor's
        (degree 6) pentatonic minor. Minor keys: root pentatonic minor,
        root blues, then the relative major's (degree 3) pentatonic major.
        """
        scale = self.field.scale
        if self.mode == HarmonicMode.MAJOR:
            return [
                Scale(self.root, ScaleType.PENTATONIC_MAJOR),
                Scale(scale.degree(6), ScaleType.PENTATONIC_MINOR),
            ]
        return [
            Scale(self.root, ScaleType.PENTATONIC_MINOR),
            Scale(self.root, ScaleType.BLUES),
            Scale(scale.degree(3), ScaleType.PENTATONIC_MAJOR),
        ]

    def chord_scales(self) -> list[ChordScale]:
        """Triad, tetrad and mode for each degree, degree 1 first."""
        return [
            ChordScale(degree=info.degree, triad=info.triad, tetrad=info.tetrad, mode=info.mode)
            for info in self.field.chords_data()
        ]

    def pentatonic(self) -> Scale:
        """Root pentatonic matching the key's mode."""
        if self.mode == HarmonicMode.MAJOR:
            return Scale(self.root, ScaleType.PENTATONIC_MAJOR)
        return Scale(self.root, ScaleType.PENTATONIC_MINOR)

    def pentatonic_map(
        self,
        tuning: Tuning | str = "standard",
        fret_count: int = DEFAULT_FRET_COUNT,
    ) -> FretboardMap:
        """The root pentatonic mapped across the neck."""
        return FretboardMapper().map_scale(tuning, self.pentatonic(), fret_count=fret_count)

    def tonic_voicings(self, tuning: Tuning | str | None = None) -> list[Voicing]:
        """CAGED voicings of the degree 1 triad."""
        return CAGEDVoicingGenerator(tuning).voicings(self.field.degree(1).triad)

    def __repr__(self) -> str:
        return f"ImprovGuide({str(self.root)!r}, {self.mode.value!r})"
