"""
Core music primitives.

These build strictly upward, each on the ones before it:
- PitchClass: The 12 chromatic pitch classes (0-11)
- Note: A pitch in scientific pitch notation, with frequency
- Interval: A named semitone distance applied to a root Note
- Chord: A root plus a list of Intervals
- Scale: A root plus a named interval formula
- Fretboard: Half-step chains from each open string
"""

from pitchcraft.core.chord import CHORD_FORMULAS, Chord, ChordQuality
from pitchcraft.core.fretboard import Fretboard, FretPosition
from pitchcraft.core.interval import (
    INTERVAL_SEMITONES,
    INTERVAL_SHORTHANDS,
    Direction,
    Interval,
    IntervalName,
    interval_names,
    resolve_interval,
)
from pitchcraft.core.note import Note, chromatic_index, frequency, parse_note_name
from pitchcraft.core.pitch import PitchClass, accidental_offset, note_index
from pitchcraft.core.scale import (
    SCALE_FORMULAS,
    Scale,
    ScaleType,
    chromatic_scale,
    major_scale,
    major_scales,
    minor_scale,
    uses_sharps_or_flats,
)

__all__ = [
    # Pitch
    "PitchClass",
    "accidental_offset",
    "note_index",
    # Note
    "Note",
    "chromatic_index",
    "frequency",
    "parse_note_name",
    # Interval
    "Direction",
    "Interval",
    "IntervalName",
    "INTERVAL_SEMITONES",
    "INTERVAL_SHORTHANDS",
    "interval_names",
    "resolve_interval",
    # Chord
    "Chord",
    "ChordQuality",
    "CHORD_FORMULAS",
    # Scale
    "Scale",
    "ScaleType",
    "SCALE_FORMULAS",
    "chromatic_scale",
    "major_scale",
    "major_scales",
    "minor_scale",
    "uses_sharps_or_flats",
    # Fretboard
    "Fretboard",
    "FretPosition",
]
