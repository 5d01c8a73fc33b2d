#!/usr/bin/env python3
"""
Example: CAGED voicings and an improvisation guide.

Walks a key from harmonic field to chord voicings: lists the diatonic
chords, the CAGED shapes of each major and minor triad, and the safe
scales to solo with.

Usage:
    python examples/caged_voicings.py [ROOT] [major|minor]
"""

import sys

from chuk_mcp_guitar.core import HarmonicField
from chuk_mcp_guitar.fretboard import CAGEDVoicingGenerator
from chuk_mcp_guitar.improv import ImprovGuide


def format_frets(frets: list[int | None]) -> str:
    return " ".join("x" if fret is None else str(fret) for fret in frets)


def main() -> None:
    """Demonstrate voicings for every chord in a key."""
    root = sys.argv[1] if len(sys.argv) > 1 else "G"
    mode = sys.argv[2] if len(sys.argv) > 2 else "major"

    harmonic_field = HarmonicField(root, mode)
    print(f"CHUK Guitar - {harmonic_field.key_name}")
    print("=" * 40)
    print()

    generator = CAGEDVoicingGenerator()
    for info in harmonic_field.chords_data():
        print(f"{info.numeral:>5}  {info.triad.symbol:<6} {info.tetrad.symbol:<8} {info.mode.name}")
        voicings = generator.voicings(info.triad)
        if not voicings:
            print("         (no CAGED shapes)")
        for voicing in voicings:
            print(f"         {voicing.shape.value} shape @ {voicing.min_fret:>2}: {format_frets(voicing.frets)}")
    print()

    guide = ImprovGuide(root, mode)
    print("Safe scales:")
    for scale in guide.safe_scales():
        print(f"  {scale.name}: {' '.join(scale.note_names())}")
    print()

    print("Common progressions:")
    for progression in guide.common_progressions():
        print(f"  {progression.name:<20} {' - '.join(progression.symbols):<22} {progression.style}")


if __name__ == "__main__":
    main()
