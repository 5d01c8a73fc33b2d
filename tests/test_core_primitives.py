"""
Tests for core music primitives.

Tests cover:
- PitchClass, Note and Interval (pitch.py)
- ScaleType and Scale (scale.py)
- ChordType, Chord and symbol parsing (chord.py)
"""

import pytest

from chuk_mcp_guitar.constants import ChordCategory, IntervalQuality
from chuk_mcp_guitar.core import (
    Chord,
    ChordType,
    Interval,
    Note,
    PitchClass,
    Scale,
    ScaleType,
    parse_chord_symbol,
)
from chuk_mcp_guitar.errors import (
    DegreeOutOfRangeError,
    InvalidChordSymbolError,
    InvalidNoteError,
    TheoryError,
    UnknownChordSuffixError,
    UnknownChordTypeError,
    UnknownIntervalError,
    UnknownScaleTypeError,
)


class TestPitchClass:
    """Tests for PitchClass enum."""

    def test_pitch_values(self) -> None:
        """Pitch classes have correct values."""
        assert PitchClass.C == 0
        assert PitchClass.E == 4
        assert PitchClass.A == 9
        assert PitchClass.B == 11

    def test_transpose_wraps(self) -> None:
        """Transposing wraps around the octave in both directions."""
        assert PitchClass.B.transpose(1) == PitchClass.C
        assert PitchClass.C.transpose(-1) == PitchClass.B
        assert PitchClass.A.transpose(3) == PitchClass.C

    def test_parse(self) -> None:
        """Parse pitch class from either spelling."""
        assert PitchClass.parse("C#") == PitchClass.Cs
        assert PitchClass.parse("Db") == PitchClass.Cs

    def test_spell(self) -> None:
        """Spelling follows the flat preference."""
        assert PitchClass.As.spell() == "A#"
        assert PitchClass.As.spell(prefer_flats=True) == "Bb"

    def test_interval_to(self) -> None:
        """Interval between pitch classes is ascending."""
        assert PitchClass.G.interval_to(PitchClass.C) == Interval.PERFECT_FOURTH


class TestNote:
    """Tests for Note."""

    def test_normalizes_first_letter(self) -> None:
        """Only the letter is upper-cased."""
        assert Note("c#").name == "C#"
        assert Note("bb").name == "Bb"
        assert Note(" e ").name == "E"

    def test_invalid_names(self) -> None:
        """Unknown spellings raise InvalidNoteError."""
        for name in ["", "H", "Cb", "E#", "C##", "CB"]:
            with pytest.raises(InvalidNoteError):
                Note(name)

    def test_non_string_rejected(self) -> None:
        """Non-string input is an invalid note."""
        with pytest.raises(InvalidNoteError):
            Note(3)  # type: ignore[arg-type]

    def test_invalid_note_is_value_error(self) -> None:
        """Errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            Note("X")
        assert issubclass(InvalidNoteError, TheoryError)

    def test_semitone_value(self) -> None:
        """Semitone values count from C."""
        assert Note("C").semitone_value() == 0
        assert Note("Db").semitone_value() == 1
        assert Note("B").semitone_value() == 11

    def test_enharmonic_equality(self) -> None:
        """C# and Db are the same note."""
        assert Note("C#") == Note("Db")
        assert hash(Note("C#")) == hash(Note("Db"))
        assert len({Note("A#"), Note("Bb"), Note("B")}) == 2

    def test_add_returns_sharps(self) -> None:
        """Transposition always spells with sharps."""
        assert Note("C").add(1).name == "C#"
        assert Note("Bb").add(2).name == "C"
        assert Note("Eb").add(0).name == "D#"
        assert Note("C").add(-1).name == "B"

    def test_operators(self) -> None:
        """+ and - transpose; note minus note gives semitones."""
        assert (Note("A") + 3).name == "C"
        assert (Note("C") - 1).name == "B"
        assert Note("E") - Note("C") == 4
        assert Note("C") - Note("E") == 8

    def test_distance_to(self) -> None:
        """Distance is ascending, 0-11."""
        assert Note("C").distance_to("G") == 7
        assert Note("G").distance_to(Note("C")) == 5
        assert Note("A").distance_to("A") == 0

    def test_enharmonic(self) -> None:
        """Alternate spelling for accidentals, identity for naturals."""
        assert Note("C#").enharmonic().name == "Db"
        assert Note("Bb").enharmonic().name == "A#"
        assert Note("E").enharmonic().name == "E"

    def test_double_enharmonic_round_trips(self) -> None:
        """Respelling twice returns the original spelling."""
        for note in Note.all() + Note.all(prefer_flats=True):
            assert note.enharmonic().enharmonic().name == note.name
            assert note.enharmonic() == note

    def test_display_name(self) -> None:
        """Display spelling is independent of the note's own spelling."""
        assert Note("C#").display_name(prefer_flats=True) == "Db"
        assert Note("Db").display_name() == "C#"

    def test_accidental_flags(self) -> None:
        """Natural, sharp and flat flags."""
        assert Note("B").is_natural
        assert not Note("B").is_flat
        assert Note("Bb").is_flat
        assert Note("F#").is_sharp

    def test_immutable(self) -> None:
        """Notes cannot be modified."""
        note = Note("C")
        with pytest.raises(AttributeError):
            note.name = "D"  # type: ignore[misc]

    def test_all(self) -> None:
        """All twelve notes from C."""
        assert [n.name for n in Note.all()][:3] == ["C", "C#", "D"]
        assert [n.name for n in Note.all(prefer_flats=True)][:4] == ["C", "Db", "D", "Eb"]

    def test_repr_and_str(self) -> None:
        """repr shows the constructor, str the name."""
        assert repr(Note("C#")) == "Note('C#')"
        assert str(Note("Bb")) == "Bb"


class TestInterval:
    """Tests for Interval."""

    def test_reduced_to_octave(self) -> None:
        """Semitones are stored modulo 12."""
        assert Interval(14).semitones == 2
        assert Interval(12) == Interval.UNISON
        assert Interval(-1).semitones == 11

    def test_names(self) -> None:
        """Names and short symbols come from the table."""
        assert Interval(7).name == "Perfect fifth"
        assert Interval(3).short_name == "b3"
        assert Interval(6).name == "Tritone"
        assert str(Interval(10)) == "b7"

    def test_quality(self) -> None:
        """Quality per interval."""
        assert Interval(0).quality == IntervalQuality.PERFECT
        assert Interval(4).quality == IntervalQuality.MAJOR
        assert Interval(8).quality == IntervalQuality.MINOR
        assert Interval(6).quality == IntervalQuality.AUGMENTED

    def test_consonance(self) -> None:
        """Consonant set is {0, 3, 4, 5, 7, 8, 9}."""
        consonant = [i.semitones for i in Interval.all() if i.is_consonant]
        assert consonant == [0, 3, 4, 5, 7, 8, 9]
        assert Interval(6).is_dissonant

    def test_invert(self) -> None:
        """Inversion sums to an octave; unison inverts to itself."""
        assert Interval(3).invert() == Interval(9)
        assert Interval(7).invert() == Interval(5)
        assert Interval(0).invert() == Interval(0)

    def test_arithmetic(self) -> None:
        """Adding intervals wraps at the octave."""
        assert Interval.MAJOR_THIRD + Interval.MINOR_THIRD == Interval.PERFECT_FIFTH
        assert Interval.PERFECT_FIFTH + Interval.PERFECT_FIFTH == Interval.MAJOR_SECOND
        assert Interval.MAJOR_THIRD - Interval.PERFECT_FIFTH == Interval.MAJOR_SIXTH

    def test_ordering(self) -> None:
        """Intervals order by size."""
        assert Interval.MINOR_SECOND < Interval.MAJOR_SECOND
        assert max(Interval.all()) == Interval.MAJOR_SEVENTH

    def test_between(self) -> None:
        """Interval between two notes."""
        assert Interval.between("C", "E") == Interval.M3
        assert Interval.between("E", "C") == Interval.m6

    def test_from_short(self) -> None:
        """Look up by symbol."""
        assert Interval.from_short("b7") == Interval.m7
        with pytest.raises(UnknownIntervalError):
            Interval.from_short("#9")

    def test_step_label(self) -> None:
        """Half and whole steps are named."""
        assert Interval(1).step_label == "half step"
        assert Interval(2).step_label == "whole step"
        assert Interval(5).step_label == "5 semitones"

    def test_song_example(self) -> None:
        """Each interval has an ear-training reference."""
        assert all(i.song_example for i in Interval.all())


class TestScaleType:
    """Tests for ScaleType."""

    def test_parse_variants(self) -> None:
        """Case, spaces and dashes are normalized."""
        assert ScaleType.parse("Pentatonic Minor") == ScaleType.PENTATONIC_MINOR
        assert ScaleType.parse("harmonic-minor") == ScaleType.HARMONIC_MINOR

    def test_parse_unknown(self) -> None:
        """Unknown types list the valid ones."""
        with pytest.raises(UnknownScaleTypeError, match="dorian"):
            ScaleType.parse("bebop")

    def test_formulas_start_at_root(self) -> None:
        """Every formula starts at 0 and ascends."""
        for scale_type in ScaleType:
            formula = scale_type.formula
            assert formula[0] == 0
            assert list(formula) == sorted(set(formula))

    def test_step_patterns(self) -> None:
        """Step patterns exist for non-modal types."""
        assert ScaleType.MAJOR.step_pattern == "W W H W W W H"
        assert ScaleType.DORIAN.step_pattern is None


class TestScale:
    """Tests for Scale."""

    def test_c_major(self) -> None:
        """C major is all naturals."""
        assert Scale("C", "major").note_names() == ["C", "D", "E", "F", "G", "A", "B"]

    def test_f_major_uses_flats(self) -> None:
        """F is a flat key."""
        assert Scale("F", ScaleType.MAJOR).note_names() == ["F", "G", "A", "Bb", "C", "D", "E"]

    def test_flat_root_uses_flats(self) -> None:
        """A flat-spelled root spells with flats."""
        assert Scale("Eb", "major").note_names() == ["Eb", "F", "G", "Ab", "Bb", "C", "D"]

    def test_sharp_keys(self) -> None:
        """Other roots spell with sharps."""
        assert Scale("E", "major").note_names() == ["E", "F#", "G#", "A", "B", "C#", "D#"]

    def test_blues(self) -> None:
        """A blues has the blue note."""
        assert Scale("A", "blues").note_names() == ["A", "C", "D", "D#", "E", "G"]

    def test_pentatonic_minor(self) -> None:
        """A minor pentatonic."""
        assert Scale("A", "pentatonic_minor").note_names() == ["A", "C", "D", "E", "G"]

    def test_relative_minor(self) -> None:
        """A minor shares its notes with C major."""
        a_minor = Scale("A", "minor")
        c_major = Scale("C", "major")
        assert a_minor.pitch_classes() == c_major.pitch_classes()
        assert a_minor.note_names() == ["A", "B", "C", "D", "E", "F", "G"]

    def test_relative_pentatonics(self) -> None:
        """A minor pentatonic shares its notes with C major pentatonic."""
        a_minor = Scale("A", "pentatonic_minor")
        c_major = Scale("C", "pentatonic_major")
        assert a_minor.pitch_classes() == c_major.pitch_classes()
        assert sorted(a_minor.note_names()) == sorted(c_major.note_names())

    def test_degree(self) -> None:
        """Degrees are 1-indexed."""
        scale = Scale("G", "major")
        assert scale.degree(1).name == "G"
        assert scale.degree(7).name == "F#"
        with pytest.raises(DegreeOutOfRangeError):
            scale.degree(8)
        with pytest.raises(DegreeOutOfRangeError):
            Scale("A", "pentatonic_minor").degree(6)

    def test_includes(self) -> None:
        """Membership is by pitch class."""
        scale = Scale("F", "major")
        assert scale.includes("Bb")
        assert scale.includes("A#")
        assert not scale.includes("B")

    def test_modes_share_pitch_classes(self) -> None:
        """D dorian has the same notes as C major."""
        assert Scale("D", "dorian").pitch_classes() == Scale("C", "major").pitch_classes()

    def test_intervals(self) -> None:
        """Intervals follow the formula."""
        assert [str(i) for i in Scale("C", "minor").intervals()] == [
            "1",
            "2",
            "b3",
            "4",
            "5",
            "b6",
            "b7",
        ]

    def test_name_and_len(self) -> None:
        """Readable name and note count."""
        scale = Scale("A", "pentatonic_minor")
        assert scale.name == "A pentatonic minor"
        assert len(scale) == 5

    def test_equality(self) -> None:
        """Scales compare on root and type."""
        assert Scale("C#", "major") == Scale("Db", "major")
        assert Scale("C", "major") != Scale("C", "ionian")

    def test_find_matching_with_root(self) -> None:
        """Only scales on the given root containing every note."""
        names = [s.name for s in Scale.find_matching(["A", "C", "E", "G"], root="A")]
        assert "A minor" in names
        assert "A pentatonic minor" in names
        assert "A dorian" in names
        assert "A major" not in names

    def test_find_matching_all_roots(self) -> None:
        """Search covers every root, C first."""
        results = Scale.find_matching(["C", "E", "G", "B"])
        assert results[0].name == "C major"
        assert all(s.includes("B") for s in results)


class TestChordSymbolParsing:
    """Tests for parse_chord_symbol."""

    def test_plain_root_is_major(self) -> None:
        """No suffix means a major triad."""
        root, chord_type = parse_chord_symbol("C")
        assert root.name == "C"
        assert chord_type == ChordType.MAJOR

    def test_suffixes(self) -> None:
        """Known suffixes and aliases."""
        assert parse_chord_symbol("Am7")[1] == ChordType.MIN7
        assert parse_chord_symbol("Amin7")[1] == ChordType.MIN7
        assert parse_chord_symbol("F#m7b5")[1] == ChordType.MIN7B5
        assert parse_chord_symbol("Bbmaj7") == (Note("Bb"), ChordType.MAJ7)
        assert parse_chord_symbol("G7")[1] == ChordType.DOM7

    def test_bad_root(self) -> None:
        """Missing or lowercase root is invalid."""
        for symbol in ["", "H7", "am", "7"]:
            with pytest.raises(InvalidChordSymbolError):
                parse_chord_symbol(symbol)

    def test_root_not_in_tables(self) -> None:
        """Cb and E# are not valid roots."""
        with pytest.raises(InvalidChordSymbolError):
            parse_chord_symbol("Cb")
        with pytest.raises(InvalidChordSymbolError):
            parse_chord_symbol("E#m")

    def test_unknown_suffix(self) -> None:
        """Unknown suffixes are reported with the valid list."""
        with pytest.raises(UnknownChordSuffixError, match="m7b5"):
            parse_chord_symbol("Cmaj13")


class TestChord:
    """Tests for Chord."""

    def test_from_symbol(self) -> None:
        """Build from a symbol."""
        chord = Chord("Am7")
        assert chord.root.name == "A"
        assert chord.chord_type == ChordType.MIN7
        assert chord.note_names() == ["A", "C", "E", "G"]

    def test_from_root_and_type(self) -> None:
        """Build from root and type."""
        assert Chord("G", ChordType.DOM7) == Chord("G7")
        assert Chord(Note("G"), "dom7").symbol == "G7"
        assert Chord(Note("D")).chord_type == ChordType.MAJOR

    def test_unknown_type(self) -> None:
        """Unknown type names raise."""
        with pytest.raises(UnknownChordTypeError):
            Chord("C", "mystery")

    def test_flat_key_spelling(self) -> None:
        """Flat roots spell chord tones with flats."""
        assert Chord("Bb").note_names() == ["Bb", "D", "F"]
        assert Chord("F7").note_names() == ["F", "A", "C", "Eb"]
        assert Chord("Ebm").note_names() == ["Eb", "Gb", "Bb"]

    def test_sharp_spelling(self) -> None:
        """Other roots spell chord tones with sharps."""
        assert Chord("E").note_names() == ["E", "G#", "B"]
        assert Chord("Bm7b5").note_names() == ["B", "D", "F", "A"]

    def test_ninths_wrap(self) -> None:
        """The 9th is reduced to one octave."""
        chord = Chord("Cmaj9")
        assert chord.note_names() == ["C", "E", "G", "B", "D"]
        assert chord.interval_names() == ["1", "3", "5", "7", "2"]

    def test_symbol_keeps_spelling(self) -> None:
        """Symbol uses the root as written."""
        assert Chord("Dbmaj7").symbol == "Dbmaj7"
        assert Chord("C#", "major").symbol == "C#"

    def test_categories(self) -> None:
        """Category predicates."""
        assert Chord("Cmaj7").is_major
        assert Chord("Am7").is_minor
        assert Chord("Bm7b5").category == ChordCategory.MINOR
        assert Chord("G9").is_dominant
        assert Chord("Bdim7").is_diminished
        assert Chord("Csus4").category == ChordCategory.OTHER

    def test_triad_tetrad(self) -> None:
        """Triads have three notes, tetrads four."""
        assert Chord("C").is_triad
        assert Chord("C7").is_tetrad
        assert not Chord("C9").is_tetrad

    def test_suggested_scales(self) -> None:
        """Suggestions are rooted on the chord root."""
        names = [s.name for s in Chord("Am").suggested_scales()]
        assert names == [
            "A minor",
            "A dorian",
            "A pentatonic minor",
            "A blues",
            "A aeolian",
        ]
        assert [s.name for s in Chord("G7").suggested_scales()][0] == "G mixolydian"
        assert [s.name for s in Chord("Bm7b5").suggested_scales()] == ["B locrian"]

    def test_suggested_scales_for_every_type(self) -> None:
        """Every chord type has at least one suggestion."""
        for chord_type in ChordType:
            assert Chord("C", chord_type).suggested_scales()

    def test_equality_ignores_spelling(self) -> None:
        """Equal on root pitch class and type."""
        assert Chord("C#m") == Chord("Dbm")
        assert Chord("C") != Chord("Cm")
