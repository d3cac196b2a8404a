"""
Interval - a named semitone distance applied to a root Note.

This is the fundamental building block - scales are interval formulas,
chords are interval stacks, fretboards are chains of half steps.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from pitchcraft.constants import SEMITONES_PER_OCTAVE, ErrorMessages
from pitchcraft.core.note import Note
from pitchcraft.core.pitch import spell_index
from pitchcraft.errors import InvalidIntervalDistance, MusicTheoryError, Result, TypeMismatch

logger = logging.getLogger(__name__)


class Direction(str, Enum):
    """Which way an interval moves from its root."""

    UP = "up"
    DOWN = "down"


class IntervalName(str, Enum):
    """
    The 14 named intervals from unison to octave.

    AUGMENTED_4TH and DIMINISHED_5TH are both 6 semitones. Declaration order
    matters: resolving a bare distance picks the first name declared.
    """

    UNISON = "unison"
    MINOR_2ND = "minor 2nd"
    MAJOR_2ND = "major 2nd"
    MINOR_3RD = "minor 3rd"
    MAJOR_3RD = "major 3rd"
    PERFECT_4TH = "perfect 4th"
    AUGMENTED_4TH = "augmented 4th"
    DIMINISHED_5TH = "diminished 5th"
    PERFECT_5TH = "perfect 5th"
    MINOR_6TH = "minor 6th"
    MAJOR_6TH = "major 6th"
    MINOR_7TH = "minor 7th"
    MAJOR_7TH = "major 7th"
    OCTAVE = "octave"

    @property
    def semitones(self) -> int:
        return INTERVAL_SEMITONES[self]

    @property
    def shorthand(self) -> str:
        return INTERVAL_SHORTHANDS[self]


INTERVAL_SEMITONES = MappingProxyType(
    {
        IntervalName.UNISON: 0,
        IntervalName.MINOR_2ND: 1,
        IntervalName.MAJOR_2ND: 2,
        IntervalName.MINOR_3RD: 3,
        IntervalName.MAJOR_3RD: 4,
        IntervalName.PERFECT_4TH: 5,
        IntervalName.AUGMENTED_4TH: 6,
        IntervalName.DIMINISHED_5TH: 6,
        IntervalName.PERFECT_5TH: 7,
        IntervalName.MINOR_6TH: 8,
        IntervalName.MAJOR_6TH: 9,
        IntervalName.MINOR_7TH: 10,
        IntervalName.MAJOR_7TH: 11,
        IntervalName.OCTAVE: 12,
    }
)

INTERVAL_SHORTHANDS = MappingProxyType(
    {
        IntervalName.UNISON: "P1",
        IntervalName.MINOR_2ND: "m2",
        IntervalName.MAJOR_2ND: "M2",
        IntervalName.MINOR_3RD: "m3",
        IntervalName.MAJOR_3RD: "M3",
        IntervalName.PERFECT_4TH: "P4",
        IntervalName.AUGMENTED_4TH: "A4",
        IntervalName.DIMINISHED_5TH: "d5",
        IntervalName.PERFECT_5TH: "P5",
        IntervalName.MINOR_6TH: "m6",
        IntervalName.MAJOR_6TH: "M6",
        IntervalName.MINOR_7TH: "m7",
        IntervalName.MAJOR_7TH: "M7",
        IntervalName.OCTAVE: "P8",
    }
)

# Forward lookup: first declared name wins for shared distances
_CANONICAL_NAMES: dict[int, IntervalName] = {}
for _name, _semitones in INTERVAL_SEMITONES.items():
    _CANONICAL_NAMES.setdefault(_semitones, _name)

_SHORTHAND_LOOKUP = {shorthand: name for name, shorthand in INTERVAL_SHORTHANDS.items()}


def interval_names(semitones: int) -> tuple[IntervalName, ...]:
    """Every interval name for a distance, in declaration order."""
    return tuple(name for name, value in INTERVAL_SEMITONES.items() if value == semitones)


def resolve_interval(distance: int | str | IntervalName) -> IntervalName:
    """
    Resolve a distance, long name or shorthand to an IntervalName.

    Examples:
        resolve_interval(4) -> IntervalName.MAJOR_3RD
        resolve_interval(6) -> IntervalName.AUGMENTED_4TH
        resolve_interval("d5") -> IntervalName.DIMINISHED_5TH
        resolve_interval("minor 7th") -> IntervalName.MINOR_7TH
    """
    if isinstance(distance, IntervalName):
        return distance

    if isinstance(distance, str):
        if distance in _SHORTHAND_LOOKUP:
            return _SHORTHAND_LOOKUP[distance]
        try:
            return IntervalName(distance.strip().lower())
        except ValueError:
            raise InvalidIntervalDistance(
                ErrorMessages.INVALID_INTERVAL_DISTANCE.format(distance=distance)
            ) from None

    # bool is an int subclass but never a distance
    if isinstance(distance, int) and not isinstance(distance, bool):
        if distance in _CANONICAL_NAMES:
            return _CANONICAL_NAMES[distance]

    raise InvalidIntervalDistance(ErrorMessages.INVALID_INTERVAL_DISTANCE.format(distance=distance))


@dataclass(frozen=True)
class Interval:
    """
    A named distance from a root Note, and the Note it lands on.

    The distance may be a semitone count (0-12), an IntervalName, or a long
    or shorthand name string. Bare distances resolve to the first declared
    name, so 6 is an augmented 4th unless DIMINISHED_5TH is passed.

    Immutable and hashable.

    Examples:
        Interval(Note("C4"), IntervalName.MAJOR_3RD).interval_note  -> E4
        Interval(Note("G5"), 10).interval_note  -> F6
        Interval(Note("Bb3"), "P5", Direction.DOWN, use_flats=True)  -> Eb3
    """

    root_note: Note
    distance: int
    direction: Direction = Direction.UP
    use_flats: bool = False

    name: str = field(init=False)
    shorthand: str = field(init=False)
    interval_note: Note = field(init=False)

    def __post_init__(self) -> None:
        if not isinstance(self.root_note, Note):
            raise TypeMismatch(
                ErrorMessages.NOT_A_NOTE.format(type_name=type(self.root_note).__name__)
            )

        interval_name = resolve_interval(self.distance)
        direction = Direction(self.direction)

        object.__setattr__(self, "distance", interval_name.semitones)
        object.__setattr__(self, "direction", direction)
        object.__setattr__(self, "name", interval_name.value)
        object.__setattr__(self, "shorthand", interval_name.shorthand)

        raw_index = self.root_note.chromatic_index + self.semitones
        spelling = spell_index(raw_index % SEMITONES_PER_OCTAVE, self.use_flats)
        # Floor division so descending past C drops the octave
        octave = self.root_note.octave + raw_index // SEMITONES_PER_OCTAVE

        object.__setattr__(self, "interval_note", Note(f"{spelling}{octave}"))

    @classmethod
    def try_build(
        cls,
        root_note: Note,
        distance: int | str | IntervalName,
        direction: Direction = Direction.UP,
        use_flats: bool = False,
    ) -> Result[Interval]:
        """Build an Interval, returning an error Result instead of raising."""
        try:
            return Result.success(cls(root_note, distance, direction, use_flats))  # type: ignore[arg-type]
        except MusicTheoryError as e:
            logger.warning("Interval construction failed: %s", e)
            return Result.failure(e)

    @property
    def semitones(self) -> int:
        """Signed distance (negative when descending)."""
        return self.distance if self.direction == Direction.UP else -self.distance

    def __str__(self) -> str:
        return self.shorthand

    def __repr__(self) -> str:
        arrow = "+" if self.direction == Direction.UP else "-"
        return f"Interval({self.root_note.name} {arrow}{self.shorthand} -> {self.interval_note.name})"
