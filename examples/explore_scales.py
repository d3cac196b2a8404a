#!/usr/bin/env python3
"""
Example: Scales, chords and intervals.

This demonstrates building scales and chords from a root note, and
checking which notes belong to a scale.

Usage:
    python examples/explore_scales.py
"""

from pitchcraft import Chord, ChordQuality, Interval, IntervalName, Note, Scale, ScaleType


def main() -> None:
    """Print a tour of the theory primitives."""
    print("pitchcraft Scales Demo")
    print("=" * 40)
    print()

    # Notes know their frequency and enharmonic spelling
    for name in ("A4", "C4", "Bb3", "F#2"):
        note = Note(name)
        alt = f" (also {note.enharmonic_note.name})" if note.enharmonic_note else ""
        print(f"  {note.name}: {note.freq} Hz{alt}")
    print()

    # Every scale type on the same root
    root = Note("C4")
    print(f"Scales on {root.name}:")
    for scale_type in ScaleType:
        scale = Scale(root, scale_type)
        print(f"  {scale.name:<18} {' '.join(scale.note_names)}")
    print()

    # Flat keys spell with flats
    f_major = Scale(Note("F4"), ScaleType.MAJOR)
    print(f"{f_major}: {' '.join(f_major.note_names)}")
    for name in ("Bb4", "A#4", "E2"):
        degree = f_major.get_scale_degree(Note(name))
        print(f"  {name}: {'degree ' + str(degree) if degree > 0 else 'not in scale'}")
    print()

    # Chords from qualities
    print("Chords on A3:")
    for quality in (ChordQuality.MAJOR, ChordQuality.MINOR_SEVENTH, ChordQuality.SUS4):
        chord = Chord.from_quality(Note("A3"), quality)
        print(f"  {chord.name:<20} {' '.join(chord.note_names)}")
    print()

    # Chaining intervals
    print("Chaining intervals from C4:")
    note = root
    for step in (IntervalName.MAJOR_3RD, IntervalName.PERFECT_5TH, IntervalName.MAJOR_7TH):
        interval = Interval(note, step)
        print(f"  {note.name} +{interval.shorthand} -> {interval.interval_note.name}")
        note = interval.interval_note


if __name__ == "__main__":
    main()
