"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def tunings_dir(temp_dir: Path) -> Path:
    """A project tunings directory holding one custom tuning."""
    path = temp_dir / "tunings"
    path.mkdir()
    (path / "open_e.yaml").write_text(
        "name: open_e\n"
        "description: Slide-friendly open E major\n"
        "strings: [E, B, E, G#, B, E]\n"
    )
    return path
