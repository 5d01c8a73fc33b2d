"""
Fretboard tools - MCP tools for tunings, note maps and chord voicings.

Tools for listing tunings, mapping notes across the neck, computing
CAGED voicings and building an improvisation guide for a key.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_guitar.constants import DEFAULT_FRET_COUNT, DEFAULT_FRET_RANGE
from chuk_mcp_guitar.core import Chord, Scale
from chuk_mcp_guitar.fretboard import CAGEDVoicingGenerator, FretboardMapper, TuningLoader
from chuk_mcp_guitar.improv import ImprovGuide
from chuk_mcp_guitar.tools.theory import chord_to_dict, scale_to_dict

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_fretboard_tools(mcp: ChukMCPServer, tuning_loader: TuningLoader) -> dict[str, Any]:
    """
    Register fretboard tools with the MCP server.

    Args:
        mcp: The MCP server instance
        tuning_loader: Resolves preset and project tunings

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}
    mapper = FretboardMapper()

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_list_tunings() -> str:
        """
        List available tunings.

        Returns the preset tunings plus any YAML tunings found in the
        project's tunings/ directory.

        Returns:
            JSON string with tuning names and string notes (low to high)

        Example:
            fretboard_list_tunings()
        """
        try:
            tunings = tuning_loader.list_tunings()
            return json.dumps(
                {
                    "status": "success",
                    "tunings": [
                        {
                            "name": t.name,
                            "strings": [note.name for note in t.string_notes],
                            "description": t.description,
                        }
                        for t in tunings
                    ],
                    "count": len(tunings),
                }
            )
        except Exception as e:
            logger.exception("Failed to list tunings")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_list_tunings"] = fretboard_list_tunings

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_map(
        root: str,
        scale_type: str | None = None,
        chord: str | None = None,
        notes: list[str] | None = None,
        tuning: str = "standard",
        fret_count: int = DEFAULT_FRET_COUNT,
    ) -> str:
        """
        Map notes across the fretboard.

        Give exactly one source of notes: a scale type (rooted on root),
        a chord symbol, or an explicit list of notes.

        Args:
            root: Root note to flag
            scale_type: Scale to map, e.g. "pentatonic_minor"
            chord: Chord symbol to map, e.g. "Am7"
            notes: Explicit notes to map
            tuning: Tuning name
            fret_count: Highest fret to include

        Returns:
            JSON string with one row per string (low to high) and the
            target positions

        Example:
            fretboard_map(root="A", scale_type="pentatonic_minor", fret_count=12)
        """
        try:
            sources = [s for s in (scale_type, chord, notes) if s is not None]
            if len(sources) != 1:
                return json.dumps(
                    {
                        "status": "error",
                        "message": "Provide exactly one of scale_type, chord or notes",
                    }
                )

            resolved_tuning = tuning_loader.get_tuning(tuning)
            if scale_type is not None:
                fretboard = mapper.map_scale(resolved_tuning, Scale(root, scale_type), fret_count)
            elif chord is not None:
                fretboard = mapper.map_chord(resolved_tuning, Chord(chord), fret_count)
            else:
                fretboard = mapper.map(resolved_tuning, notes or [], root=root, fret_count=fret_count)

            return json.dumps(
                {
                    "status": "success",
                    "fretboard": fretboard.model_dump(),
                    "targets": [
                        {"string": string, "fret": cell.fret, "note": cell.note, "root": cell.is_root}
                        for string, cell in fretboard.target_cells()
                    ],
                }
            )
        except Exception as e:
            logger.exception("Failed to map fretboard")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_map"] = fretboard_map

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_chord_voicings(
        chord: str,
        tuning: str = "standard",
        near_fret: int | None = None,
        fret_range: int = DEFAULT_FRET_RANGE,
    ) -> str:
        """
        Compute CAGED voicings for a chord.

        Voicings come back lowest neck position first. Chord types
        without CAGED shapes (dim, aug, sus, 9ths...) return an empty list.

        Args:
            chord: Chord symbol
            tuning: Tuning name
            near_fret: Only keep voicings positioned near this fret
            fret_range: Distance allowed from near_fret

        Returns:
            JSON string with voicings (frets low E first, null = muted)

        Example:
            fretboard_chord_voicings(chord="C")
            fretboard_chord_voicings(chord="Am", near_fret=5)
        """
        try:
            parsed = Chord(chord)
            generator = CAGEDVoicingGenerator(tuning_loader.get_tuning(tuning))
            if near_fret is None:
                voicings = generator.voicings(parsed)
            else:
                voicings = generator.voicings_near(parsed, near_fret, fret_range)

            return json.dumps(
                {
                    "status": "success",
                    "chord": chord_to_dict(parsed),
                    "voicings": [v.model_dump(mode="json") for v in voicings],
                    "count": len(voicings),
                }
            )
        except Exception as e:
            logger.exception("Failed to compute voicings")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_chord_voicings"] = fretboard_chord_voicings

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_improv_guide(root: str, mode: str = "major", tuning: str = "standard") -> str:
        """
        Build an improvisation guide for a key.

        Includes the chord scales per degree, safe pentatonic choices,
        common progressions in the key and the tonic's CAGED voicings.

        Args:
            root: Key root
            mode: "major" or "minor"
            tuning: Tuning name used for the voicings

        Returns:
            JSON string with the guide

        Example:
            fretboard_improv_guide(root="A", mode="minor")
        """
        try:
            guide = ImprovGuide(root, mode)
            resolved_tuning = tuning_loader.get_tuning(tuning)

            return json.dumps(
                {
                    "status": "success",
                    "key": guide.key_name,
                    "chord_scales": [
                        {
                            "degree": cs.degree,
                            "triad": cs.triad.symbol,
                            "tetrad": cs.tetrad.symbol,
                            "mode": cs.mode.name,
                            "notes": cs.mode.note_names(),
                        }
                        for cs in guide.chord_scales()
                    ],
                    "safe_scales": [scale_to_dict(s) for s in guide.safe_scales()],
                    "progressions": [
                        {"name": p.name, "style": p.style, "chords": p.symbols}
                        for p in guide.common_progressions()
                    ],
                    "tonic_voicings": [
                        v.model_dump(mode="json") for v in guide.tonic_voicings(resolved_tuning)
                    ],
                }
            )
        except Exception as e:
            logger.exception("Failed to build improv guide")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_improv_guide"] = fretboard_improv_guide

    return tools
