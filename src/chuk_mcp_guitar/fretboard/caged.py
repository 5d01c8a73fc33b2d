"""
CAGED voicings - movable barre-chord shapes for any chord.

Each of the five shapes (E, A, G, C, D) is an open-position chord whose
fingering can be slid up the neck. For a target root the shape is shifted
by

    barre = (root - open(root string) - root_offset) mod 12

where root_offset is the fret the root sits on in the open template
(3 for the G and C shapes, 0 otherwise). Every sounded string moves up by
the barre; muted strings stay muted.

Templates are standard-tuning fingerings and the barre is measured against
standard tuning. In another tuning each sounded string is shifted by how
far it sits below its standard pitch, so every string still sounds the
note it would in standard tuning.
"""

from __future__ import annotations

from dataclasses import dataclass

from chuk_mcp_guitar.constants import DEFAULT_FRET_RANGE, CagedShape, ErrorMessages, ShapeQuality
from chuk_mcp_guitar.core.chord import Chord, ChordType
from chuk_mcp_guitar.errors import UnknownShapeError
from chuk_mcp_guitar.fretboard.tuning import Tuning
from chuk_mcp_guitar.models.fretboard import Voicing


@dataclass(frozen=True)
class ShapeTemplate:
    """
    An open-position chord shape.

    Frets are low E string first; None marks a muted string.
    root_string is the index of the string carrying the shape's tonic.
    """

    shape: CagedShape
    quality: ShapeQuality
    frets: tuple[int | None, ...]
    root_string: int
    root_offset: int


def _template(
    shape: CagedShape,
    major: tuple[int | None, ...],
    minor: tuple[int | None, ...],
    root_string: int,
    root_offset: int,
) -> dict[ShapeQuality, ShapeTemplate]:
    return {
        ShapeQuality.MAJOR: ShapeTemplate(shape, ShapeQuality.MAJOR, major, root_string, root_offset),
        ShapeQuality.MINOR: ShapeTemplate(shape, ShapeQuality.MINOR, minor, root_string, root_offset),
    }


# Iteration order E, A, G, C, D is the tie-break when two shapes share a position
CAGED_SHAPES: dict[CagedShape, dict[ShapeQuality, ShapeTemplate]] = {
    CagedShape.E: _template(CagedShape.E, (0, 2, 2, 1, 0, 0), (0, 2, 2, 0, 0, 0), 0, 0),
    CagedShape.A: _template(CagedShape.A, (None, 0, 2, 2, 2, 0), (None, 0, 2, 2, 1, 0), 1, 0),
    CagedShape.G: _template(CagedShape.G, (3, 2, 0, 0, 0, 3), (3, 1, 0, 0, 3, 3), 0, 3),
    CagedShape.C: _template(CagedShape.C, (None, 3, 2, 0, 1, 0), (None, 3, 1, 0, 1, 3), 1, 3),
    CagedShape.D: _template(CagedShape.D, (None, None, 0, 2, 3, 2), (None, None, 0, 2, 3, 1), 2, 0),
}

# Chord types with a template family; anything else gets no voicings
SHAPE_FAMILIES: dict[ChordType, ShapeQuality] = {
    ChordType.MAJOR: ShapeQuality.MAJOR,
    ChordType.MAJ7: ShapeQuality.MAJOR,
    ChordType.DOM7: ShapeQuality.MAJOR,
    ChordType.MINOR: ShapeQuality.MINOR,
    ChordType.MIN7: ShapeQuality.MINOR,
    ChordType.MIN7B5: ShapeQuality.MINOR,
}

STANDARD_OPEN_VALUES: tuple[int, ...] = Tuning().open_values


def barre_fret(root_value: int, open_value: int, root_offset: int) -> int:
    """Fret a template must shift by to put its tonic on root_value (0-11)."""
    return (root_value - open_value - root_offset) % 12


def parse_shape(shape: CagedShape | str) -> CagedShape:
    """Parse a shape name like 'E' or 'c'."""
    if isinstance(shape, CagedShape):
        return shape
    try:
        return CagedShape(str(shape).strip().upper())
    except ValueError:
        raise UnknownShapeError(
            ErrorMessages.UNKNOWN_CAGED_SHAPE.format(
                shape=shape, valid=", ".join(s.value for s in CagedShape)
            )
        ) from None


def min_sounded_fret(frets: list[int | None]) -> int:
    """Lowest fretted (non-zero) note, or 0 when every sounded string is open."""
    return min((fret for fret in frets if fret), default=0)


class CAGEDVoicingGenerator:
    """
    Computes the CAGED voicings of a chord.

    Templates are standard-tuning fingerings. For another six-string
    tuning the fingerings are re-fretted string by string so the voicing
    sounds the same notes.
    """

    def __init__(self, tuning: Tuning | str | None = None):
        """
        Initialize the generator.

        Args:
            tuning: Tuning or preset name (default standard)
        """
        if tuning is None:
            tuning = Tuning()
        elif isinstance(tuning, str):
            tuning = Tuning(tuning)
        self.tuning = tuning

    @staticmethod
    def shape_quality(chord: Chord) -> ShapeQuality | None:
        """Template family for a chord, or None when it has no shapes."""
        return SHAPE_FAMILIES.get(chord.chord_type)

    def voicings(self, chord: Chord | str) -> list[Voicing]:
        """
        All CAGED voicings for a chord, lowest neck position first.

        Voicings at the same position keep E, A, G, C, D order.
        Half-diminished chords use the minor shapes. Chords with no template
        family (diminished, augmented, suspended, 9ths) return an empty list.
        """
        chord = chord if isinstance(chord, Chord) else Chord(chord)
        quality = self.shape_quality(chord)
        if quality is None:
            return []

        results = [self._place(chord, shapes[quality]) for shapes in CAGED_SHAPES.values()]
        return sorted(results, key=lambda v: v.min_fret)

    def voicing_for_shape(self, chord: Chord | str, shape: CagedShape | str) -> Voicing | None:
        """The voicing for one shape, or None when the chord has no shapes."""
        shape = parse_shape(shape)
        for voicing in self.voicings(chord):
            if voicing.shape == shape:
                return voicing
        return None

    def voicings_near(
        self,
        chord: Chord | str,
        fret: int,
        fret_range: int = DEFAULT_FRET_RANGE,
    ) -> list[Voicing]:
        """
        Voicings whose lowest fretted note is within fret_range of fret.

        Args:
            chord: Chord or symbol
            fret: Neck position to search around
            fret_range: Maximum distance, inclusive

        Returns:
            Matching voicings in position order
        """
        return [v for v in self.voicings(chord) if abs(v.min_fret - fret) <= fret_range]

    def _place(self, chord: Chord, template: ShapeTemplate) -> Voicing:
        open_values = self.tuning.open_values
        root_value = chord.root.semitone_value()

        barre = barre_fret(
            root_value, STANDARD_OPEN_VALUES[template.root_string], template.root_offset
        )
        frets = [
            None if fret is None else fret + barre + (standard - tuned) % 12
            for fret, standard, tuned in zip(
                template.frets, STANDARD_OPEN_VALUES, open_values, strict=True
            )
        ]
        sounded = [fret for fret in frets if fret is not None]
        if min(sounded) >= 12:
            frets = [None if fret is None else fret - 12 for fret in frets]

        return Voicing(
            shape=template.shape,
            frets=frets,
            barre_fret=barre,
            min_fret=min_sounded_fret(frets),
            is_open=all(fret == open_fret for fret, open_fret in zip(frets, template.frets)),
            root_strings=self._root_strings(frets, root_value),
            quality=template.quality,
        )

    def _root_strings(self, frets: list[int | None], root_value: int) -> list[int]:
        """String indices whose sounded note is the chord root."""
        open_values = self.tuning.open_values
        return [
            index
            for index, fret in enumerate(frets)
            if fret is not None and (open_values[index] + fret) % 12 == root_value
        ]
