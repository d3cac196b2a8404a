"""
Chord primitives - ChordQuality and Chord.

Chords are stacks of intervals measured from the root. A chord quality is a
named formula; a Chord is that formula (or any interval list) applied to a
concrete root Note.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from pitchcraft.constants import ErrorMessages
from pitchcraft.core.interval import Direction, Interval, IntervalName
from pitchcraft.core.note import Note
from pitchcraft.errors import TypeMismatch


class ChordQuality(str, Enum):
    """Named chord formulas."""

    MAJOR = "major"
    MINOR = "minor"
    AUGMENTED = "augmented"
    DIMINISHED = "diminished"
    SUS2 = "sus2"
    SUS4 = "sus4"
    MAJOR_SEVENTH = "major seventh"
    MINOR_SEVENTH = "minor seventh"
    DOMINANT_SEVENTH = "dominant seventh"
    HALF_DIMINISHED_SEVENTH = "half diminished seventh"
    DIMINISHED_SEVENTH = "diminished seventh"
    MAJOR_NINTH = "major ninth"
    MINOR_NINTH = "minor ninth"

    @property
    def formula(self) -> tuple[IntervalName, ...]:
        return CHORD_FORMULAS[self]


# Intervals above the root, in voicing order. Ninths are voiced as a 2nd
# inside the octave since the interval table stops at 12 semitones.
CHORD_FORMULAS = MappingProxyType(
    {
        ChordQuality.MAJOR: (IntervalName.MAJOR_3RD, IntervalName.PERFECT_5TH),
        ChordQuality.MINOR: (IntervalName.MINOR_3RD, IntervalName.PERFECT_5TH),
        ChordQuality.AUGMENTED: (IntervalName.MAJOR_3RD, IntervalName.MINOR_6TH),
        ChordQuality.DIMINISHED: (IntervalName.MINOR_3RD, IntervalName.DIMINISHED_5TH),
        ChordQuality.SUS2: (IntervalName.MAJOR_2ND, IntervalName.PERFECT_5TH),
        ChordQuality.SUS4: (IntervalName.PERFECT_4TH, IntervalName.PERFECT_5TH),
        ChordQuality.MAJOR_SEVENTH: (
            IntervalName.MAJOR_3RD,
            IntervalName.PERFECT_5TH,
            IntervalName.MAJOR_7TH,
        ),
        ChordQuality.MINOR_SEVENTH: (
            IntervalName.MINOR_3RD,
            IntervalName.PERFECT_5TH,
            IntervalName.MINOR_7TH,
        ),
        ChordQuality.DOMINANT_SEVENTH: (
            IntervalName.MAJOR_3RD,
            IntervalName.PERFECT_5TH,
            IntervalName.MINOR_7TH,
        ),
        ChordQuality.HALF_DIMINISHED_SEVENTH: (
            IntervalName.MINOR_3RD,
            IntervalName.DIMINISHED_5TH,
            IntervalName.MINOR_7TH,
        ),
        ChordQuality.DIMINISHED_SEVENTH: (
            IntervalName.MINOR_3RD,
            IntervalName.DIMINISHED_5TH,
            IntervalName.MAJOR_6TH,
        ),
        ChordQuality.MAJOR_NINTH: (
            IntervalName.MAJOR_3RD,
            IntervalName.PERFECT_5TH,
            IntervalName.MAJOR_7TH,
            IntervalName.MAJOR_2ND,
        ),
        ChordQuality.MINOR_NINTH: (
            IntervalName.MINOR_3RD,
            IntervalName.PERFECT_5TH,
            IntervalName.MINOR_7TH,
            IntervalName.MAJOR_2ND,
        ),
    }
)


@dataclass(frozen=True)
class Chord:
    """
    A root Note followed by one Note per Interval.

    Interval order is kept exactly as given: no sorting, no de-duplication.
    """

    root: Note
    intervals: Sequence[Interval]
    name: str = ""
    notes: tuple[Note, ...] = field(init=False)

    def __post_init__(self) -> None:
        if not isinstance(self.root, Note):
            raise TypeMismatch(ErrorMessages.NOT_A_NOTE.format(type_name=type(self.root).__name__))
        intervals = tuple(self.intervals)
        object.__setattr__(self, "intervals", intervals)
        object.__setattr__(
            self, "notes", (self.root, *(interval.interval_note for interval in intervals))
        )

    @classmethod
    def from_quality(
        cls, root: Note, quality: ChordQuality | str, use_flats: bool = False
    ) -> Chord:
        """
        Build a chord from a named quality.

        Args:
            root: The root note
            quality: A ChordQuality or its value ('minor seventh')
            use_flats: Spell black keys as flats

        Returns:
            Chord named like 'C major'
        """
        quality = ChordQuality(quality)
        intervals = [
            Interval(root, interval, Direction.UP, use_flats)  # type: ignore[arg-type]
            for interval in quality.formula
        ]
        return cls(root, intervals, name=f"{root.spelled} {quality.value}")

    @property
    def note_names(self) -> list[str]:
        return [note.name for note in self.notes]

    def __len__(self) -> int:
        return len(self.notes)

    def __str__(self) -> str:
        return self.name or " ".join(self.note_names)
