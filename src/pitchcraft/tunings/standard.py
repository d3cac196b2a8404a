"""Built-in tunings as ready-made Note tuples."""

from pitchcraft.core.note import Note

STANDARD_GUITAR_TUNING: tuple[Note, ...] = tuple(
    Note(name) for name in ("E2", "A2", "D3", "G3", "B3", "E4")
)

STANDARD_UKULELE_TUNING: tuple[Note, ...] = tuple(Note(name) for name in ("G4", "C4", "E4", "A4"))

STANDARD_MANDOLIN_TUNING: tuple[Note, ...] = tuple(
    Note(name) for name in ("G3", "D4", "A4", "E5")
)
