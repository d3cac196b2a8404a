"""
Instrument tunings.

Built-in Note tuples for the common instruments, plus a YAML-backed loader
for anything else.
"""

from pitchcraft.tunings.loader import TuningLoader
from pitchcraft.tunings.model import Tuning
from pitchcraft.tunings.standard import (
    STANDARD_GUITAR_TUNING,
    STANDARD_MANDOLIN_TUNING,
    STANDARD_UKULELE_TUNING,
)

__all__ = [
    "STANDARD_GUITAR_TUNING",
    "STANDARD_MANDOLIN_TUNING",
    "STANDARD_UKULELE_TUNING",
    "Tuning",
    "TuningLoader",
]
