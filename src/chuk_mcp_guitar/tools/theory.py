"""
Theory tools - MCP tools for notes, intervals, scales, chords and keys.

Thin wrappers over chuk_mcp_guitar.core: every tool parses its inputs,
calls the engine and returns a JSON string.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_guitar.core import Chord, HarmonicField, Interval, Note, Scale

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def scale_to_dict(scale: Scale) -> dict[str, Any]:
    """Serializable summary of a scale."""
    return {
        "name": scale.name,
        "root": scale.root.name,
        "type": scale.scale_type.value,
        "description": scale.description,
        "notes": scale.note_names(),
        "intervals": [str(i) for i in scale.intervals()],
        "step_pattern": scale.step_pattern,
    }


def chord_to_dict(chord: Chord) -> dict[str, Any]:
    """Serializable summary of a chord."""
    return {
        "symbol": chord.symbol,
        "root": chord.root.name,
        "type": chord.chord_type.value,
        "description": chord.description,
        "category": chord.category.value,
        "notes": chord.note_names(),
        "intervals": chord.interval_names(),
    }


def register_theory_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register music theory tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_note_info(note: str) -> str:
        """
        Describe a note: pitch class, spelling and enharmonic.

        Args:
            note: Note name like "C#", "bb" or "F"

        Returns:
            JSON string with note details

        Example:
            theory_note_info(note="Db")
        """
        try:
            n = Note(note)
            return json.dumps(
                {
                    "status": "success",
                    "note": {
                        "name": n.name,
                        "pitch_class": n.semitone_value(),
                        "sharp_name": n.display_name(prefer_flats=False),
                        "flat_name": n.display_name(prefer_flats=True),
                        "enharmonic": n.enharmonic().name,
                        "is_natural": n.is_natural,
                    },
                }
            )
        except Exception as e:
            logger.exception("Failed to describe note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_note_info"] = theory_note_info

    @mcp.tool  # type: ignore[arg-type]
    async def theory_interval(from_note: str, to_note: str) -> str:
        """
        Name the ascending interval between two notes.

        Args:
            from_note: Lower note
            to_note: Upper note

        Returns:
            JSON string with interval name, symbol, size and quality

        Example:
            theory_interval(from_note="C", to_note="G")
        """
        try:
            interval = Interval.between(from_note, to_note)
            return json.dumps(
                {
                    "status": "success",
                    "interval": {
                        "name": interval.name,
                        "short_name": interval.short_name,
                        "semitones": interval.semitones,
                        "quality": interval.quality.value,
                        "consonant": interval.is_consonant,
                        "steps": interval.step_label,
                        "inversion": interval.invert().name,
                        "song_example": interval.song_example,
                    },
                }
            )
        except Exception as e:
            logger.exception("Failed to compute interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_interval"] = theory_interval

    @mcp.tool  # type: ignore[arg-type]
    async def theory_scale(root: str, scale_type: str = "major") -> str:
        """
        Spell a scale.

        Args:
            root: Scale root like "A" or "Eb"
            scale_type: Scale type (major, minor, pentatonic_minor, blues, dorian...)

        Returns:
            JSON string with the scale's notes and intervals

        Example:
            theory_scale(root="A", scale_type="pentatonic_minor")
        """
        try:
            scale = Scale(root, scale_type)
            return json.dumps({"status": "success", "scale": scale_to_dict(scale)})
        except Exception as e:
            logger.exception("Failed to build scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_scale"] = theory_scale

    @mcp.tool  # type: ignore[arg-type]
    async def theory_find_scales(notes: list[str], root: str | None = None) -> str:
        """
        Find scales containing all the given notes.

        Args:
            notes: Notes that must be in the scale
            root: Optional root to restrict the search

        Returns:
            JSON string with matching scales

        Example:
            theory_find_scales(notes=["A", "C", "E", "G"], root="A")
        """
        try:
            scales = Scale.find_matching(notes, root=root)
            return json.dumps(
                {
                    "status": "success",
                    "scales": [{"name": s.name, "notes": s.note_names()} for s in scales],
                    "count": len(scales),
                }
            )
        except Exception as e:
            logger.exception("Failed to find scales")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_find_scales"] = theory_find_scales

    @mcp.tool  # type: ignore[arg-type]
    async def theory_chord(symbol: str) -> str:
        """
        Parse a chord symbol and list its notes and suggested scales.

        Args:
            symbol: Chord symbol like "Am7", "F#", "Bbmaj7" or "Bm7b5"

        Returns:
            JSON string with chord tones, intervals and scale suggestions

        Example:
            theory_chord(symbol="G7")
        """
        try:
            chord = Chord(symbol)
            data = chord_to_dict(chord)
            data["suggested_scales"] = [
                {"name": s.name, "notes": s.note_names()} for s in chord.suggested_scales()
            ]
            return json.dumps({"status": "success", "chord": data})
        except Exception as e:
            logger.exception("Failed to parse chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_chord"] = theory_chord

    @mcp.tool  # type: ignore[arg-type]
    async def theory_harmonic_field(root: str, mode: str = "major") -> str:
        """
        List the diatonic chords of a key.

        Each degree includes its Roman numeral, triad, seventh chord,
        harmonic function and the mode built on it.

        Args:
            root: Key root
            mode: "major" or "minor"

        Returns:
            JSON string with one entry per degree

        Example:
            theory_harmonic_field(root="A", mode="minor")
        """
        try:
            harmonic_field = HarmonicField(root, mode)
            return json.dumps(
                {
                    "status": "success",
                    "key": harmonic_field.key_name,
                    "scale": harmonic_field.scale.note_names(),
                    "degrees": [
                        {
                            "degree": info.degree,
                            "numeral": info.numeral,
                            "triad": info.triad.symbol,
                            "tetrad": info.tetrad.symbol,
                            "function": info.function,
                            "note": info.scale_note.name,
                            "mode": info.mode.name,
                        }
                        for info in harmonic_field.chords_data()
                    ],
                }
            )
        except Exception as e:
            logger.exception("Failed to build harmonic field")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_harmonic_field"] = theory_harmonic_field

    @mcp.tool  # type: ignore[arg-type]
    async def theory_identify_key(chords: list[str], limit: int = 3) -> str:
        """
        Guess the key of a chord progression.

        Keys are ranked by how many of the chords are diatonic to them.

        Args:
            chords: Chord symbols in the progression
            limit: Maximum number of candidates to return

        Returns:
            JSON string with ranked key candidates

        Example:
            theory_identify_key(chords=["Am", "F", "C", "G"])
        """
        try:
            candidates = HarmonicField.identify_key(chords)[:limit]
            return json.dumps(
                {
                    "status": "success",
                    "candidates": [
                        {
                            "key": c.key,
                            "root": c.root.name,
                            "mode": c.mode.value,
                            "matches": c.matches,
                            "total": len(chords),
                        }
                        for c in candidates
                    ],
                }
            )
        except Exception as e:
            logger.exception("Failed to identify key")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_identify_key"] = theory_identify_key

    return tools
