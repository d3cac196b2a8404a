"""
Scale primitives - ScaleType, Scale and key-signature helpers.

Scales are interval formulas from a root. Every formula is measured from the
root (cumulative), so a major scale is M2 M3 P4 P5 M6 M7.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from pitchcraft.constants import FLAT_KEYS, SHARP_KEYS, ErrorMessages, KeyAccidentals
from pitchcraft.core.interval import Direction, Interval, IntervalName
from pitchcraft.core.note import Note
from pitchcraft.errors import InvalidBaseNote, TypeMismatch


class ScaleType(str, Enum):
    """Named scale formulas."""

    MAJOR = "major"
    MINOR = "minor"
    HARMONIC_MINOR = "harmonic minor"
    MELODIC_MINOR = "melodic minor"
    MAJOR_PENTATONIC = "major pentatonic"
    MINOR_PENTATONIC = "minor pentatonic"
    BLUES = "blues"
    MAJOR_BLUES = "major blues"
    MINOR_BLUES = "minor blues"
    CHROMATIC = "chromatic"
    WHOLE_TONE = "whole tone"

    @property
    def formula(self) -> tuple[IntervalName, ...]:
        return SCALE_FORMULAS[self]

    @property
    def display_name(self) -> str:
        return self.value.title()


_M2 = IntervalName.MAJOR_2ND
_m2 = IntervalName.MINOR_2ND
_M3 = IntervalName.MAJOR_3RD
_m3 = IntervalName.MINOR_3RD
_P4 = IntervalName.PERFECT_4TH
_A4 = IntervalName.AUGMENTED_4TH
_d5 = IntervalName.DIMINISHED_5TH
_P5 = IntervalName.PERFECT_5TH
_m6 = IntervalName.MINOR_6TH
_M6 = IntervalName.MAJOR_6TH
_m7 = IntervalName.MINOR_7TH
_M7 = IntervalName.MAJOR_7TH

SCALE_FORMULAS = MappingProxyType(
    {
        ScaleType.MAJOR: (_M2, _M3, _P4, _P5, _M6, _M7),
        ScaleType.MINOR: (_M2, _m3, _P4, _P5, _m6, _m7),
        ScaleType.HARMONIC_MINOR: (_M2, _m3, _P4, _P5, _m6, _M7),
        ScaleType.MELODIC_MINOR: (_M2, _m3, _P4, _P5, _M6, _M7),
        ScaleType.MAJOR_PENTATONIC: (_M2, _M3, _P5, _M6),
        ScaleType.MINOR_PENTATONIC: (_m3, _P4, _P5, _m7),
        ScaleType.BLUES: (_M3, _P4, _A4, _P5, _m7),
        ScaleType.MAJOR_BLUES: (_M2, _m3, _P4, _P5, _M6),
        ScaleType.MINOR_BLUES: (_m3, _P4, _d5, _P5, _m7),
        ScaleType.CHROMATIC: (_m2, _M2, _m3, _M3, _P4, _A4, _P5, _m6, _M6, _m7, _M7),
        # Augmented 5th and 6th are spelled with their enharmonic m6 and m7
        ScaleType.WHOLE_TONE: (_M2, _M3, _A4, _m6, _m7),
    }
)


@dataclass(frozen=True)
class Scale:
    """
    A root Note plus one Note per formula step, ascending.

    Flat spelling is chosen once from the root (F, Bb, Eb, Ab, Db, Gb and Cb
    use flats) and applied to every interval.

    Examples:
        Scale(Note("C4"), ScaleType.MAJOR).note_names
            -> ['C4', 'D4', 'E4', 'F4', 'G4', 'A4', 'B4']
        Scale(Note("F4"), "major").note_names[3]  -> 'Bb4'
    """

    root: Note
    scale_type: ScaleType

    name: str = field(init=False)
    use_flats: bool = field(init=False)
    intervals: tuple[Interval, ...] = field(init=False)
    notes: tuple[Note, ...] = field(init=False)

    def __post_init__(self) -> None:
        if not isinstance(self.root, Note):
            raise TypeMismatch(ErrorMessages.NOT_A_NOTE.format(type_name=type(self.root).__name__))

        scale_type = ScaleType(self.scale_type)
        use_flats = self.root.spelled in FLAT_KEYS
        intervals = tuple(
            Interval(self.root, step, Direction.UP, use_flats)  # type: ignore[arg-type]
            for step in scale_type.formula
        )

        object.__setattr__(self, "scale_type", scale_type)
        object.__setattr__(self, "name", scale_type.display_name)
        object.__setattr__(self, "use_flats", use_flats)
        object.__setattr__(self, "intervals", intervals)
        object.__setattr__(self, "notes", (self.root, *(i.interval_note for i in intervals)))

    def has_note(self, note: Note) -> bool:
        """True if the scale contains the note's spelling, in any octave."""
        return self.get_scale_degree(note) != -1

    def get_scale_degree(self, note: Note) -> int:
        """
        1-based degree of the first scale note spelled like ``note``.

        Comparison is by spelling (pitch class + accidental), so C4 and C6
        are the same degree but Bb and A# are not.

        Returns:
            Scale degree, or -1 if the note is not in the scale
        """
        if not isinstance(note, Note):
            raise TypeMismatch(ErrorMessages.NOT_A_NOTE.format(type_name=type(note).__name__))
        for degree, scale_note in enumerate(self.notes, start=1):
            if scale_note.spelled == note.spelled:
                return degree
        return -1

    @property
    def note_names(self) -> list[str]:
        return [note.name for note in self.notes]

    def __contains__(self, note: object) -> bool:
        return isinstance(note, Note) and self.has_note(note)

    def __len__(self) -> int:
        return len(self.notes)

    def __str__(self) -> str:
        return f"{self.root.spelled} {self.name}"


def major_scale(root: Note) -> Scale:
    return Scale(root, ScaleType.MAJOR)


def minor_scale(root: Note) -> Scale:
    return Scale(root, ScaleType.MINOR)


def chromatic_scale(root: Note) -> Scale:
    return Scale(root, ScaleType.CHROMATIC)


def uses_sharps_or_flats(root_name: str) -> KeyAccidentals:
    """
    Which accidentals the major key on ``root_name`` uses.

    Args:
        root_name: Key root without octave, e.g. 'G', 'Bb'

    Returns:
        'none' for C, 'sharps' or 'flats' otherwise

    Raises:
        InvalidBaseNote: the root is not one of the 15 conventional major keys
    """
    if root_name == "C":
        return "none"
    if root_name in SHARP_KEYS:
        return "sharps"
    if root_name in FLAT_KEYS:
        return "flats"
    raise InvalidBaseNote(ErrorMessages.INVALID_BASE_NOTE.format(note=root_name))


def major_scales(octave: int = 4) -> dict[str, Scale]:
    """Major scale for each of the 15 conventional keys, keyed by root."""
    roots = ("C", *SHARP_KEYS, *FLAT_KEYS)
    return {root: major_scale(Note(f"{root}{octave}")) for root in roots}
