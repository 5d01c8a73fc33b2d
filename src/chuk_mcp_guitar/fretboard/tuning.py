"""
Tunings - named open-string note sequences.

Presets are fixed and shipped with the package. Custom tunings can be
loaded from YAML files in a project directory:

    # tunings/open_e.yaml
    name: open_e
    description: Slide-friendly open E major
    strings: [E, B, E, G#, B, E]

Strings are always listed low to high (sixth string first).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import yaml

from chuk_mcp_guitar.constants import STRING_COUNT, ErrorMessages
from chuk_mcp_guitar.core.pitch import Note
from chuk_mcp_guitar.errors import InvalidNoteError, InvalidTuningError, UnknownTuningError

logger = logging.getLogger(__name__)

# Preset tunings, low string first
TUNINGS: dict[str, tuple[str, ...]] = {
    "standard": ("E", "A", "D", "G", "B", "E"),
    "drop_d": ("D", "A", "D", "G", "B", "E"),
    "open_g": ("D", "G", "D", "G", "B", "D"),
    "open_d": ("D", "A", "D", "F#", "A", "D"),
    "dadgad": ("D", "A", "D", "G", "A", "D"),
    "half_down": ("Eb", "Ab", "Db", "Gb", "Bb", "Eb"),
}


def normalize_tuning_name(name: str) -> str:
    """'Drop D' / 'drop-d' -> 'drop_d'."""
    return str(name).strip().lower().replace(" ", "_").replace("-", "_")


class Tuning:
    """
    A named sequence of six open-string notes, low string first.

    Tuning("standard") looks up a preset. Passing strings builds a custom
    tuning without touching the preset table.

    Immutable.
    """

    __slots__ = ("_name", "_strings", "_description")

    def __init__(
        self,
        name: str = "standard",
        strings: Sequence[Note | str] | None = None,
        description: str = "",
    ) -> None:
        key = normalize_tuning_name(name)
        if strings is None:
            if key not in TUNINGS:
                raise UnknownTuningError(
                    ErrorMessages.UNKNOWN_TUNING.format(name=name, valid=", ".join(TUNINGS))
                )
            strings = TUNINGS[key]

        object.__setattr__(self, "_name", key)
        object.__setattr__(self, "_strings", _parse_strings(key, strings))
        object.__setattr__(self, "_description", description)

    def __setattr__(self, key: str, value: object) -> None:
        raise AttributeError("Tuning is immutable")

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def string_notes(self) -> tuple[Note, ...]:
        """Open-string notes, low string first."""
        return self._strings

    @property
    def string_count(self) -> int:
        return len(self._strings)

    @property
    def open_values(self) -> tuple[int, ...]:
        """Open-string pitch classes as ints, low string first."""
        return tuple(note.semitone_value() for note in self._strings)

    def strings_high_to_low(self) -> tuple[Note, ...]:
        """Open-string notes in the order most diagrams draw them, high string first."""
        return tuple(reversed(self._strings))

    @property
    def display_name(self) -> str:
        """Readable label like 'Drop d (D A D G B E)'."""
        label = self._name.replace("_", " ").capitalize()
        return f"{label} ({' '.join(note.name for note in self._strings)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuning):
            return NotImplemented
        return self._name == other._name and self._strings == other._strings

    def __hash__(self) -> int:
        return hash((self._name, self._strings))

    def __repr__(self) -> str:
        return f"Tuning({self._name!r})"

    def __str__(self) -> str:
        return self.display_name

    @staticmethod
    def available() -> list[str]:
        """Preset tuning names."""
        return list(TUNINGS)


def _parse_strings(name: str, strings: Sequence[Note | str]) -> tuple[Note, ...]:
    if len(strings) != STRING_COUNT:
        raise InvalidTuningError(
            ErrorMessages.INVALID_TUNING.format(
                name=name, reason=f"expected {STRING_COUNT} strings, got {len(strings)}"
            )
        )
    try:
        return tuple(s if isinstance(s, Note) else Note(s) for s in strings)
    except InvalidNoteError as e:
        raise InvalidTuningError(ErrorMessages.INVALID_TUNING.format(name=name, reason=e)) from e


class TuningLoader:
    """
    Discovers and loads tunings.

    Presets are always available. Custom tunings are loaded from YAML files
    in the project directory and override presets with the same name.
    """

    def __init__(self, project_path: Path | None = None):
        """
        Initialize the tuning loader.

        Args:
            project_path: Directory holding custom tuning YAML files
        """
        self.project_path = project_path
        self._cache: dict[str, Tuning] | None = None

    def list_tunings(self) -> list[Tuning]:
        """All presets followed by custom tunings; a custom tuning replaces its preset."""
        tunings = {name: Tuning(name) for name in TUNINGS}
        tunings.update(self._custom_tunings())
        return list(tunings.values())

    def get_tuning(self, name: str) -> Tuning:
        """
        Get a tuning by name.

        Project tunings take precedence over presets.

        Args:
            name: Tuning name

        Returns:
            The tuning

        Raises:
            UnknownTuningError: No preset or custom tuning has this name
        """
        key = normalize_tuning_name(name)
        custom = self._custom_tunings()
        if key in custom:
            return custom[key]
        if key in TUNINGS:
            return Tuning(key)

        valid = list(TUNINGS) + [n for n in custom if n not in TUNINGS]
        raise UnknownTuningError(ErrorMessages.UNKNOWN_TUNING.format(name=name, valid=", ".join(valid)))

    def clear_cache(self) -> None:
        """Forget loaded custom tunings so the next lookup re-reads the directory."""
        self._cache = None

    def _custom_tunings(self) -> dict[str, Tuning]:
        if self._cache is not None:
            return self._cache

        tunings: dict[str, Tuning] = {}
        if self.project_path and self.project_path.exists():
            for path in sorted(self.project_path.glob("*.yaml")):
                tuning = self._load_tuning_file(path)
                if tuning:
                    tunings[tuning.name] = tuning

        logger.debug("Loaded %d custom tunings from %s", len(tunings), self.project_path)
        self._cache = tunings
        return tunings

    def _load_tuning_file(self, path: Path) -> Tuning | None:
        """Load a tuning from a YAML file, or None if it cannot be used."""
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
            return self._parse_tuning(data, default_name=path.stem)
        except (OSError, UnicodeDecodeError, yaml.YAMLError, InvalidTuningError, TypeError) as e:
            logger.warning("Skipping tuning file %s: %s", path, e)
            return None

    def _parse_tuning(self, data: dict[str, Any], default_name: str) -> Tuning:
        """Parse a tuning from YAML data."""
        if not isinstance(data, dict):
            raise TypeError("tuning file must contain a mapping")

        strings = data.get("strings")
        if not isinstance(strings, list):
            raise InvalidTuningError(
                ErrorMessages.INVALID_TUNING.format(name=default_name, reason="missing 'strings' list")
            )

        return Tuning(
            name=data.get("name", default_name),
            strings=[str(s) for s in strings],
            description=data.get("description", ""),
        )
