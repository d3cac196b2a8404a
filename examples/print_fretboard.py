#!/usr/bin/env python3
"""
Example: Print fretboard diagrams.

This demonstrates loading tunings from the YAML library and laying out
the notes under each fret, with scale tones highlighted.

Usage:
    python examples/print_fretboard.py [tuning-name]
"""

import sys

from pitchcraft import Note, Scale, ScaleType, TuningLoader


def main() -> None:
    """Print the first 13 frets of a tuning with A minor pentatonic marked."""
    loader = TuningLoader()

    print("Available tunings:")
    for tuning in loader.list_tunings():
        print(f"  {tuning.name:<20} {' '.join(tuning.strings)}")
    print()

    name = sys.argv[1] if len(sys.argv) > 1 else "guitar-standard"
    tuning = loader.get_tuning(name)
    if not tuning:
        print(f"Unknown tuning: {name}")
        return

    scale = Scale(Note("A4"), ScaleType.MINOR_PENTATONIC)
    board = tuning.fretboard(13)

    print(f"{tuning.name} - {scale} marked with *")
    print("      " + "".join(f"{fret:<6}" for fret in range(board.num_frets)))
    # Highest string on top, like a tab
    for row in reversed(board.strings):
        cells = [f"{note.name}{'*' if note in scale else ''}" for note in row]
        print(f"{row[0].spelled:<6}" + "".join(f"{cell:<6}" for cell in cells))
    print()

    target = Note("A4")
    positions = ", ".join(str(p) for p in board.find(target))
    print(f"{target.name} is at: {positions}")


if __name__ == "__main__":
    main()
