"""
Constants and lookup tables for the theory layer.

No magic strings - the note, interval and key tables live here and are
never mutated after import.
"""

from types import MappingProxyType
from typing import Literal

# Reference tuning
A4_FREQUENCY = 440.0
REFERENCE_OCTAVE = 4
SEMITONES_PER_OCTAVE = 12

# Valid octave range for scientific pitch notation
MIN_OCTAVE = 0
MAX_OCTAVE = 9

DEFAULT_NUM_FRETS = 24

# Sharp-biased spelling of the 12-tone row (index == chromatic index)
CHROMATIC_NAMES: tuple[str, ...] = (
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
)

SHARP = "#"
FLAT = "b"

# Single-accidental enharmonic pairs, including the white-key edge cases
SHARP_TO_FLAT = MappingProxyType(
    {
        "C#": "Db",
        "D#": "Eb",
        "F#": "Gb",
        "G#": "Ab",
        "A#": "Bb",
        "B#": "C",
        "E#": "F",
    }
)

FLAT_TO_SHARP = MappingProxyType(
    {
        "Cb": "B",
        "Db": "C#",
        "Eb": "D#",
        "Gb": "F#",
        "Ab": "G#",
        "Bb": "A#",
        "Fb": "E",
    }
)

# Major keys by accidental type, in circle-of-fifths order
SHARP_KEYS: tuple[str, ...] = ("G", "D", "A", "E", "B", "F#", "C#")
FLAT_KEYS: tuple[str, ...] = ("F", "Bb", "Eb", "Ab", "Db", "Gb", "Cb")

KeyAccidentals = Literal["none", "sharps", "flats"]


class ErrorMessages:
    """Standardized error messages."""

    INVALID_NOTE_NAME = (
        "Invalid note name: {name!r}. Expected a letter A-G, an optional accidental "
        "and an octave like 'C#4'."
    )
    INVALID_OCTAVE = "Invalid octave: {octave}. Must be between 0 and 9."
    INVALID_ACCIDENTAL = "Invalid accidental: {accidental!r}. Use up to three '#' or 'b', not both."
    INVALID_BASE_NOTE = "Invalid base note: {note!r}."
    INVALID_INTERVAL_DISTANCE = "Invalid interval distance: {distance!r}."
    NOT_A_NOTE = "Expected a Note, got {type_name}."
    INVALID_FRET_COUNT = "Fret count must be at least 1, got {num_frets}."
