"""
Fretboard records - plain data handed to renderers.

These are the outputs of the fretboard layer: a voicing for one CAGED
shape, and a note map of the whole neck. They carry no behaviour beyond
small lookups; drawing them is the caller's job.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from chuk_mcp_guitar.constants import CagedShape, ShapeQuality
from chuk_mcp_guitar.core.pitch import Note


class Voicing(BaseModel):
    """
    One movable chord shape placed on the neck.

    Frets are listed low E string first; None marks a muted string.
    """

    shape: CagedShape = Field(..., description="CAGED shape the voicing is built from")
    frets: list[int | None] = Field(..., description="Fret per string, None = muted")
    barre_fret: int = Field(..., ge=0, le=11, description="Fret the shape is shifted by")
    min_fret: int = Field(..., ge=0, description="Lowest non-zero sounded fret, 0 if none")
    is_open: bool = Field(..., description="Frets match the open-position template")
    root_strings: list[int] = Field(
        default_factory=list, description="String indices sounding the chord root (0 = low E)"
    )
    quality: ShapeQuality = Field(..., description="Template family used")

    model_config = {"frozen": True}

    @property
    def sounded_strings(self) -> tuple[int, ...]:
        """Indices of strings that are played."""
        return tuple(i for i, fret in enumerate(self.frets) if fret is not None)

    @property
    def max_fret(self) -> int:
        """Highest sounded fret, 0 if everything is open or muted."""
        return max((fret for fret in self.frets if fret is not None), default=0)


class FretCell(BaseModel):
    """One fret on one string."""

    fret: int = Field(..., ge=0)
    pitch_class: int = Field(..., ge=0, le=11)
    note: str = Field(..., description="Display spelling of the note at this fret")
    is_target: bool = Field(False, description="Note belongs to the requested set")
    is_root: bool = Field(False, description="Note is the requested root")

    model_config = {"frozen": True}


class StringRow(BaseModel):
    """All cells along one string, nut first."""

    index: int = Field(..., ge=0, description="String index in tuning order (0 = lowest)")
    open_note: str = Field(..., description="Open-string note name")
    cells: list[FretCell] = Field(default_factory=list)

    model_config = {"frozen": True}


class FretboardMap(BaseModel):
    """
    A set of target notes mapped across the neck for one tuning.

    Strings are in tuning order, lowest first. Renderers that draw the
    high string on top should reverse them.
    """

    tuning: str = Field(..., description="Tuning name")
    fret_count: int = Field(..., ge=0, description="Highest fret mapped")
    prefer_flats: bool = Field(False, description="Display spelling uses flats")
    root: str = Field(..., description="Root note name")
    notes: list[str] = Field(default_factory=list, description="Target note names as given")
    strings: list[StringRow] = Field(default_factory=list)

    model_config = {"frozen": True}

    def target_cells(self) -> list[tuple[int, FretCell]]:
        """(string index, cell) for every cell holding a target note."""
        return [(row.index, cell) for row in self.strings for cell in row.cells if cell.is_target]

    def positions_of(self, note: Note | str | int) -> list[tuple[int, int]]:
        """(string index, fret) for every occurrence of a note or pitch class."""
        if isinstance(note, str):
            note = Note(note)
        pitch_class = note.semitone_value() if isinstance(note, Note) else note
        return [
            (row.index, cell.fret)
            for row in self.strings
            for cell in row.cells
            if cell.pitch_class == pitch_class % 12
        ]
