"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from pitchcraft import STANDARD_GUITAR_TUNING, Fretboard, Note


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def middle_c() -> Note:
    """C4, the usual root for scale and chord tests."""
    return Note("C4")


@pytest.fixture
def guitar_fretboard() -> Fretboard:
    """Standard guitar with 10 frets (open string through fret 9)."""
    return Fretboard(STANDARD_GUITAR_TUNING, 10)
