"""
Tuning model - a named set of open strings.

Tunings are plain data (shipped as YAML) validated into Notes on load.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from pitchcraft.constants import DEFAULT_NUM_FRETS
from pitchcraft.core.fretboard import Fretboard
from pitchcraft.core.note import Note


class Tuning(BaseModel):
    """
    Open-string notes for an instrument, in string order.

    Order is kept as written - re-entrant tunings like ukulele GCEA list the
    high G first.
    """

    name: str = Field(..., description="Tuning identifier, e.g. 'guitar-standard'")
    instrument: str = Field("", description="Instrument family")
    description: str = Field("", description="Human-readable description")
    strings: tuple[str, ...] = Field(..., min_length=1, description="Open-string note names")

    model_config = {"frozen": True}

    @field_validator("strings")
    @classmethod
    def validate_strings(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Every string must be a valid note name; store canonical names."""
        return tuple(Note(name).name for name in v)

    def notes(self) -> tuple[Note, ...]:
        """Open-string Notes."""
        return tuple(Note(name) for name in self.strings)

    def fretboard(self, num_frets: int = DEFAULT_NUM_FRETS) -> Fretboard:
        return Fretboard(self.notes(), num_frets)

    def to_yaml_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "instrument": self.instrument,
            "description": self.description,
            "strings": list(self.strings),
        }
