"""
Note - a single pitch in scientific pitch notation.

A Note is parsed once from a name like 'C#4' and derives everything else
(chromatic index, frequency, enharmonic spelling) at construction.
"""

from __future__ import annotations

import logging
import re
from dataclasses import InitVar, dataclass, field

from pitchcraft.constants import (
    A4_FREQUENCY,
    FLAT,
    FLAT_TO_SHARP,
    MAX_OCTAVE,
    MIN_OCTAVE,
    REFERENCE_OCTAVE,
    SEMITONES_PER_OCTAVE,
    SHARP_TO_FLAT,
    ErrorMessages,
)
from pitchcraft.core.pitch import MAX_ACCIDENTALS, accidental_offset, note_index
from pitchcraft.errors import InvalidNoteName, InvalidOctave, MusicTheoryError, Result

logger = logging.getLogger(__name__)

# Letter, any run of accidental symbols (validated separately), octave
_NOTE_PATTERN = re.compile(r"^([A-Ga-g])([#b]*)([0-9]+)$")

A_INDEX = note_index("A")


def parse_note_name(name: str) -> tuple[str, str, int]:
    """
    Split a note name into pitch class, accidental and octave.

    Args:
        name: Scientific pitch name, e.g. 'C4', 'f#2', 'Ebb5'

    Returns:
        (pitch_class, accidental, octave) with the letter uppercased

    Raises:
        InvalidNoteName: the grammar does not match, including a run of
            more than three sharps or flats
        InvalidAccidental: the accidental mixes '#' and 'b'
        InvalidOctave: the octave is outside 0-9
    """
    if not isinstance(name, str):
        raise InvalidNoteName(ErrorMessages.INVALID_NOTE_NAME.format(name=name))

    match = _NOTE_PATTERN.fullmatch(name)
    if not match:
        raise InvalidNoteName(ErrorMessages.INVALID_NOTE_NAME.format(name=name))

    letter, accidental, octave_str = match.groups()
    if len(set(accidental)) == 1 and len(accidental) > MAX_ACCIDENTALS:
        raise InvalidNoteName(ErrorMessages.INVALID_NOTE_NAME.format(name=name))
    accidental_offset(accidental)

    octave = int(octave_str)
    if not MIN_OCTAVE <= octave <= MAX_OCTAVE:
        raise InvalidOctave(ErrorMessages.INVALID_OCTAVE.format(octave=octave))

    return letter.upper(), accidental, octave


def chromatic_index(pitch_class: str, offset: int = 0) -> int:
    """Index of a natural pitch class shifted by an accidental offset (0-11)."""
    return note_index(pitch_class, offset)


def frequency(index: int, octave: int) -> float:
    """
    Equal-tempered frequency in Hz, rounded to 2 decimal places.

    A4 = 440 Hz. The octave boundary is at C, so C4 is 261.63 Hz.
    """
    n = index - A_INDEX + (octave - REFERENCE_OCTAVE) * SEMITONES_PER_OCTAVE
    return round(A4_FREQUENCY * 2 ** (n / SEMITONES_PER_OCTAVE), 2)


@dataclass(frozen=True)
class Note:
    """
    A pitch in scientific pitch notation.

    Immutable and hashable. Two Notes built from the same name compare equal.

    Single sharps and flats get an enharmonic spelling and a companion Note
    for it; the companion is built with ``include_enharmonic=False`` so the
    chain stops after one level. Double and triple accidentals get none.

    Examples:
        Note("A4").freq == 440.0
        Note("Bb3").enharmonic_spelling == "A#"
        Note("c#4").name == "C#4"
    """

    name: str
    include_enharmonic: InitVar[bool] = True

    pitch_class: str = field(init=False)
    accidental: str = field(init=False)
    octave: int = field(init=False)
    chromatic_index: int = field(init=False)
    freq: float = field(init=False)
    enharmonic_spelling: str | None = field(init=False, default=None)
    enharmonic_note: Note | None = field(init=False, default=None, compare=False)

    def __post_init__(self, include_enharmonic: bool) -> None:
        pitch_class, accidental, octave = parse_note_name(self.name)
        index = chromatic_index(pitch_class, accidental_offset(accidental))

        object.__setattr__(self, "name", f"{pitch_class}{accidental}{octave}")
        object.__setattr__(self, "pitch_class", pitch_class)
        object.__setattr__(self, "accidental", accidental)
        object.__setattr__(self, "octave", octave)
        object.__setattr__(self, "chromatic_index", index)
        object.__setattr__(self, "freq", frequency(index, octave))

        if len(accidental) == 1:
            table = FLAT_TO_SHARP if accidental == FLAT else SHARP_TO_FLAT
            spelling = table[pitch_class + accidental]
            object.__setattr__(self, "enharmonic_spelling", spelling)
            if include_enharmonic:
                object.__setattr__(
                    self, "enharmonic_note", Note(f"{spelling}{octave}", include_enharmonic=False)
                )

    @classmethod
    def try_parse(cls, name: str) -> Result[Note]:
        """
        Build a Note without raising.

        Failures are logged and returned as an error Result, so callers can
        substitute a default or abort as they see fit.
        """
        try:
            return Result.success(cls(name))
        except MusicTheoryError as e:
            logger.warning("Note construction failed: %s", e)
            return Result.failure(e)

    @property
    def spelled(self) -> str:
        """Octave-independent spelling, e.g. 'Bb'."""
        return self.pitch_class + self.accidental

    @property
    def midi(self) -> int:
        """MIDI note number. C4 = 60."""
        return self.chromatic_index + (self.octave + 1) * SEMITONES_PER_OCTAVE

    def is_enharmonic_with(self, other: Note) -> bool:
        """True if both notes name the same pitch class (A# and Bb)."""
        return self.chromatic_index == other.chromatic_index

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Note({self.name!r})"
