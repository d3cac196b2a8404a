"""
Fretboard - the notes under every fret of a fretted instrument.

Each string is built by chaining minor-second intervals from its open note,
so fret k is always fret k-1 one semitone up.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from pitchcraft.constants import DEFAULT_NUM_FRETS, ErrorMessages
from pitchcraft.core.interval import Interval, IntervalName
from pitchcraft.core.note import Note
from pitchcraft.errors import TypeMismatch

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FretPosition:
    """A location on the fretboard as a string and fret combination."""

    string: int  # 0-based index into the tuning
    fret: int  # 0 = open string

    def __str__(self) -> str:
        return f"string {self.string} fret {self.fret}"


def build_string(open_note: Note, num_frets: int) -> tuple[Note, ...]:
    """Notes from the open string up, ``num_frets`` long."""
    notes = [open_note]
    for _ in range(1, num_frets):
        notes.append(Interval(notes[-1], IntervalName.MINOR_2ND).interval_note)
    return tuple(notes)


@dataclass(frozen=True)
class Fretboard:
    """
    One row of Notes per open string.

    Tuning order is kept as given: ``strings[0]`` belongs to ``tuning[0]``.
    ``num_frets`` counts the open string, so each row is that long.

    Examples:
        board = Fretboard(STANDARD_GUITAR_TUNING, 10)
        board.strings[0][1].name  -> 'F2'
        board.find(Note("E4"))  -> [FretPosition(0, ...), ...]
    """

    tuning: Sequence[Note]
    num_frets: int = DEFAULT_NUM_FRETS
    strings: tuple[tuple[Note, ...], ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        tuning = tuple(self.tuning)
        for open_note in tuning:
            if not isinstance(open_note, Note):
                raise TypeMismatch(
                    ErrorMessages.NOT_A_NOTE.format(type_name=type(open_note).__name__)
                )
        if self.num_frets < 1:
            raise ValueError(ErrorMessages.INVALID_FRET_COUNT.format(num_frets=self.num_frets))

        logger.debug(
            "Building fretboard: %s, %d frets", " ".join(n.name for n in tuning), self.num_frets
        )
        object.__setattr__(self, "tuning", tuning)
        object.__setattr__(
            self, "strings", tuple(build_string(note, self.num_frets) for note in tuning)
        )

    def note_at(self, string: int, fret: int) -> Note:
        """The note at a string/fret position."""
        if not 0 <= fret < self.num_frets:
            raise IndexError(f"Fret {fret} is outside 0-{self.num_frets - 1}")
        return self.strings[string][fret]

    def find(self, note: Note) -> list[FretPosition]:
        """
        Every position that sounds ``note``.

        Matches by pitch and octave, so Bb3 and A#3 find the same frets.
        """
        if not isinstance(note, Note):
            raise TypeMismatch(ErrorMessages.NOT_A_NOTE.format(type_name=type(note).__name__))
        return [
            FretPosition(string_index, fret)
            for string_index, row in enumerate(self.strings)
            for fret, fret_note in enumerate(row)
            if fret_note.chromatic_index == note.chromatic_index
            and fret_note.octave == note.octave
        ]

    @property
    def note_names(self) -> list[list[str]]:
        return [[note.name for note in row] for row in self.strings]
