"""
Fretboard mapper - finds target notes on every string and fret.

The mapper does not draw anything. It returns a FretboardMap record with
one cell per string and fret, flagged as target and/or root, plus the
spelling (sharps or flats) the caller should display.
"""

from __future__ import annotations

from collections.abc import Iterable

from chuk_mcp_guitar.constants import DEFAULT_FRET_COUNT
from chuk_mcp_guitar.core.chord import Chord
from chuk_mcp_guitar.core.pitch import Note, PitchClass
from chuk_mcp_guitar.core.scale import Scale
from chuk_mcp_guitar.fretboard.tuning import Tuning
from chuk_mcp_guitar.models.fretboard import FretboardMap, FretCell, StringRow


class FretboardMapper:
    """Maps pitch classes onto a string/fret grid."""

    def map(
        self,
        tuning: Tuning | str,
        notes: Iterable[Note | str],
        root: Note | str | None = None,
        fret_count: int = DEFAULT_FRET_COUNT,
    ) -> FretboardMap:
        """
        Map target notes across the neck.

        Args:
            tuning: Tuning or preset name
            notes: Notes to mark
            root: Note to flag as root (defaults to the first note)
            fret_count: Highest fret to include (0 = open strings only)

        Returns:
            FretboardMap with every fret 0..fret_count on every string
        """
        if fret_count < 0:
            raise ValueError(f"fret_count must be >= 0, got {fret_count}")

        if isinstance(tuning, str):
            tuning = Tuning(tuning)
        targets = [n if isinstance(n, Note) else Note(n) for n in notes]
        if root is None:
            if not targets:
                raise ValueError("At least one note or a root is required")
            root_note = targets[0]
        else:
            root_note = root if isinstance(root, Note) else Note(root)

        target_classes = {note.pitch_class for note in targets}
        prefer_flats = root_note.is_flat

        rows = [
            StringRow(
                index=index,
                open_note=open_note.name,
                cells=[
                    self._cell(open_note, fret, target_classes, root_note.pitch_class, prefer_flats)
                    for fret in range(fret_count + 1)
                ],
            )
            for index, open_note in enumerate(tuning.string_notes)
        ]

        return FretboardMap(
            tuning=tuning.name,
            fret_count=fret_count,
            prefer_flats=prefer_flats,
            root=root_note.name,
            notes=[note.name for note in targets],
            strings=rows,
        )

    def map_scale(
        self,
        tuning: Tuning | str,
        scale: Scale,
        fret_count: int = DEFAULT_FRET_COUNT,
    ) -> FretboardMap:
        """Map a scale's notes with its root flagged."""
        return self.map(tuning, scale.notes(), root=scale.root, fret_count=fret_count)

    def map_chord(
        self,
        tuning: Tuning | str,
        chord: Chord,
        fret_count: int = DEFAULT_FRET_COUNT,
    ) -> FretboardMap:
        """Map a chord's tones with its root flagged."""
        return self.map(tuning, chord.notes(), root=chord.root, fret_count=fret_count)

    @staticmethod
    def _cell(
        open_note: Note,
        fret: int,
        targets: set[PitchClass],
        root: PitchClass,
        prefer_flats: bool,
    ) -> FretCell:
        pitch_class = open_note.pitch_class.transpose(fret)
        is_target = pitch_class in targets
        return FretCell(
            fret=fret,
            pitch_class=pitch_class.value,
            note=pitch_class.spell(prefer_flats=prefer_flats),
            is_target=is_target,
            is_root=is_target and pitch_class == root,
        )
