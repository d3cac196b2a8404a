"""
Pitch-class primitives - the 12-tone row and accidental arithmetic.

PitchClass represents the 12 chromatic pitches (octave-independent).
Everything else in the library resolves note names to an index in this row.
"""

from __future__ import annotations

from enum import IntEnum

from pitchcraft.constants import (
    CHROMATIC_NAMES,
    FLAT,
    SEMITONES_PER_OCTAVE,
    SHARP,
    SHARP_TO_FLAT,
    ErrorMessages,
)
from pitchcraft.errors import InvalidAccidental, InvalidBaseNote

MAX_ACCIDENTALS = 3


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).

    Internally, we use sharp names (Cs, Ds, etc.).
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % SEMITONES_PER_OCTAVE)

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name."""
        name = CHROMATIC_NAMES[self.value]
        if prefer_flats:
            return SHARP_TO_FLAT.get(name, name)
        return name

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """Parse a pitch class from a string like 'C', 'C#', 'Db', 'Ebb'."""
        name = name.strip()
        if not name:
            raise InvalidBaseNote(ErrorMessages.INVALID_BASE_NOTE.format(note=name))
        return cls(note_index(name[0].upper(), accidental_offset(name[1:])))


def accidental_offset(accidental: str | None) -> int:
    """
    Semitone offset of an accidental string.

    '#' -> +1, 'bb' -> -2, '' -> 0. Mixed or unknown symbols raise
    InvalidAccidental.
    """
    if not accidental:
        return 0
    if len(accidental) > MAX_ACCIDENTALS:
        raise InvalidAccidental(ErrorMessages.INVALID_ACCIDENTAL.format(accidental=accidental))
    if set(accidental) == {SHARP}:
        return len(accidental)
    if set(accidental) == {FLAT}:
        return -len(accidental)
    raise InvalidAccidental(ErrorMessages.INVALID_ACCIDENTAL.format(accidental=accidental))


def note_index(base: str, offset: int = 0) -> int:
    """
    Chromatic index of a sharp-biased name plus an offset, reduced to 0-11.

    Args:
        base: A name from the 12-tone row ('C', 'C#', ... 'B')
        offset: Semitones to add (negative for flats)

    Returns:
        Index in the range 0-11
    """
    try:
        index = CHROMATIC_NAMES.index(base)
    except ValueError:
        raise InvalidBaseNote(ErrorMessages.INVALID_BASE_NOTE.format(note=base)) from None
    return (index + offset) % SEMITONES_PER_OCTAVE


def spell_index(index: int, use_flats: bool = False) -> str:
    """Name for a chromatic index, preferring the flat spelling when asked."""
    return PitchClass(index % SEMITONES_PER_OCTAVE).spell(prefer_flats=use_flats)
