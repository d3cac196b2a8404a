"""
pitchcraft - notes, intervals, scales, chords and fretboards.

    from pitchcraft import Note, Scale, ScaleType

    Scale(Note("C4"), ScaleType.MAJOR).note_names
    # ['C4', 'D4', 'E4', 'F4', 'G4', 'A4', 'B4']
"""

from pitchcraft.core import (
    Chord,
    ChordQuality,
    Direction,
    Fretboard,
    FretPosition,
    Interval,
    IntervalName,
    Note,
    PitchClass,
    Scale,
    ScaleType,
    chromatic_scale,
    interval_names,
    major_scale,
    major_scales,
    minor_scale,
    uses_sharps_or_flats,
)
from pitchcraft.errors import (
    InvalidAccidental,
    InvalidBaseNote,
    InvalidIntervalDistance,
    InvalidNoteName,
    InvalidOctave,
    MusicTheoryError,
    Result,
    TypeMismatch,
)
from pitchcraft.tunings import (
    STANDARD_GUITAR_TUNING,
    STANDARD_MANDOLIN_TUNING,
    STANDARD_UKULELE_TUNING,
    Tuning,
    TuningLoader,
)

__all__ = [
    "Chord",
    "ChordQuality",
    "Direction",
    "Fretboard",
    "FretPosition",
    "Interval",
    "IntervalName",
    "Note",
    "PitchClass",
    "Scale",
    "ScaleType",
    "chromatic_scale",
    "interval_names",
    "major_scale",
    "major_scales",
    "minor_scale",
    "uses_sharps_or_flats",
    # Errors
    "InvalidAccidental",
    "InvalidBaseNote",
    "InvalidIntervalDistance",
    "InvalidNoteName",
    "InvalidOctave",
    "MusicTheoryError",
    "Result",
    "TypeMismatch",
    # Tunings
    "STANDARD_GUITAR_TUNING",
    "STANDARD_MANDOLIN_TUNING",
    "STANDARD_UKULELE_TUNING",
    "Tuning",
    "TuningLoader",
]
