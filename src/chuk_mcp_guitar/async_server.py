#!/usr/bin/env python3
"""
Async Guitar MCP Server using chuk-mcp-server

This server exposes a music theory engine and a six-string fretboard
model as MCP tools. All results are plain JSON data; rendering is left
to the client.

The server provides tools for:
- Notes, intervals, scales and chords
- Harmonic fields and key identification
- Mapping notes across the neck in any tuning
- CAGED chord voicings
- Per-key improvisation guides
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_guitar.fretboard import TuningLoader
from chuk_mcp_guitar.tools import register_fretboard_tools, register_theory_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-guitar")

# Paths - custom tunings live in the project's tunings/ directory
BASE_PATH = Path.cwd()
TUNINGS_DIR = BASE_PATH / "tunings"

tuning_loader = TuningLoader(project_path=TUNINGS_DIR)

# Register all tools
theory_tools = register_theory_tools(mcp)
fretboard_tools = register_fretboard_tools(mcp, tuning_loader)

# Export tool functions for direct access
theory_note_info = theory_tools["theory_note_info"]
theory_interval = theory_tools["theory_interval"]
theory_scale = theory_tools["theory_scale"]
theory_find_scales = theory_tools["theory_find_scales"]
theory_chord = theory_tools["theory_chord"]
theory_harmonic_field = theory_tools["theory_harmonic_field"]
theory_identify_key = theory_tools["theory_identify_key"]

fretboard_list_tunings = fretboard_tools["fretboard_list_tunings"]
fretboard_map = fretboard_tools["fretboard_map"]
fretboard_chord_voicings = fretboard_tools["fretboard_chord_voicings"]
fretboard_improv_guide = fretboard_tools["fretboard_improv_guide"]

logger.info("CHUK Guitar MCP Server initialized")
logger.info(f"  Tunings dir: {TUNINGS_DIR}")
