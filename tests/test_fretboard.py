"""
Tests for fretboard generation and position lookup.
"""

import pytest

from pitchcraft import (
    STANDARD_GUITAR_TUNING,
    STANDARD_MANDOLIN_TUNING,
    STANDARD_UKULELE_TUNING,
    Fretboard,
    FretPosition,
    Note,
)
from pitchcraft.errors import TypeMismatch

GUITAR_10_FRETS = [
    ["E2", "F2", "F#2", "G2", "G#2", "A2", "A#2", "B2", "C3", "C#3"],
    ["A2", "A#2", "B2", "C3", "C#3", "D3", "D#3", "E3", "F3", "F#3"],
    ["D3", "D#3", "E3", "F3", "F#3", "G3", "G#3", "A3", "A#3", "B3"],
    ["G3", "G#3", "A3", "A#3", "B3", "C4", "C#4", "D4", "D#4", "E4"],
    ["B3", "C4", "C#4", "D4", "D#4", "E4", "F4", "F#4", "G4", "G#4"],
    ["E4", "F4", "F#4", "G4", "G#4", "A4", "A#4", "B4", "C5", "C#5"],
]


class TestFretboard:
    """Tests for Fretboard construction."""

    def test_standard_guitar(self, guitar_fretboard: Fretboard) -> None:
        """Creates a fretboard with 6 strings and 10 frets."""
        assert guitar_fretboard.note_names == GUITAR_10_FRETS
        assert len(guitar_fretboard.strings) == 6
        assert len(guitar_fretboard.strings[0]) == 10
        assert guitar_fretboard.num_frets == 10
        assert guitar_fretboard.strings[0][0].name == "E2"
        assert guitar_fretboard.strings[0][9].name == "C#3"

    def test_default_fret_count(self) -> None:
        board = Fretboard(STANDARD_GUITAR_TUNING)
        assert board.num_frets == 24
        assert all(len(row) == 24 for row in board.strings)
        assert board.strings[0][-1].name == "D#4"

    def test_tuning_order_preserved(self) -> None:
        """Re-entrant ukulele tuning keeps the high G first."""
        board = Fretboard(STANDARD_UKULELE_TUNING, 5)
        assert [row[0].name for row in board.strings] == ["G4", "C4", "E4", "A4"]
        assert board.strings[0][4].name == "B4"

    def test_mandolin(self) -> None:
        board = Fretboard(STANDARD_MANDOLIN_TUNING, 13)
        assert [row[-1].name for row in board.strings] == ["G4", "D5", "A5", "E6"]

    def test_open_strings_only(self) -> None:
        board = Fretboard(STANDARD_GUITAR_TUNING, 1)
        assert board.strings == tuple((note,) for note in STANDARD_GUITAR_TUNING)

    def test_empty_tuning(self) -> None:
        assert Fretboard([], 12).strings == ()

    def test_list_tuning(self) -> None:
        """Any sequence of Notes works as a tuning."""
        board = Fretboard([Note("D2"), Note("A2")], 3)
        assert board.note_names == [["D2", "D#2", "E2"], ["A2", "A#2", "B2"]]

    def test_invalid_fret_count(self) -> None:
        with pytest.raises(ValueError):
            Fretboard(STANDARD_GUITAR_TUNING, 0)

    def test_tuning_must_be_notes(self) -> None:
        with pytest.raises(TypeMismatch):
            Fretboard(["E2", "A2"], 10)  # type: ignore[list-item]


class TestFretboardLookup:
    """Tests for note_at and find."""

    def test_note_at(self, guitar_fretboard: Fretboard) -> None:
        assert guitar_fretboard.note_at(1, 5) == Note("D3")
        assert guitar_fretboard.note_at(5, 0) == Note("E4")

    def test_note_at_out_of_range(self, guitar_fretboard: Fretboard) -> None:
        with pytest.raises(IndexError):
            guitar_fretboard.note_at(0, 10)
        with pytest.raises(IndexError):
            guitar_fretboard.note_at(6, 0)

    def test_find(self, guitar_fretboard: Fretboard) -> None:
        assert guitar_fretboard.find(Note("E4")) == [
            FretPosition(3, 9),
            FretPosition(4, 5),
            FretPosition(5, 0),
        ]

    def test_find_enharmonic(self, guitar_fretboard: Fretboard) -> None:
        """Flat spellings find their sharp-spelled frets."""
        assert guitar_fretboard.find(Note("Gb2")) == [FretPosition(0, 2)]

    def test_find_missing(self, guitar_fretboard: Fretboard) -> None:
        assert guitar_fretboard.find(Note("C8")) == []

    def test_find_requires_note(self, guitar_fretboard: Fretboard) -> None:
        with pytest.raises(TypeMismatch):
            guitar_fretboard.find("E4")  # type: ignore[arg-type]

    def test_position_str(self) -> None:
        assert str(FretPosition(2, 7)) == "string 2 fret 7"
