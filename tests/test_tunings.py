"""
Tests for the tuning system.

Tests cover:
- Tuning model validation
- TuningLoader discovery, overrides and caching
"""

import logging
from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from pitchcraft import STANDARD_GUITAR_TUNING, STANDARD_UKULELE_TUNING, Fretboard, Note
from pitchcraft.tunings import Tuning, TuningLoader

LIBRARY_PATH = Path(__file__).parent.parent / "src" / "pitchcraft" / "tunings" / "library"


def write_tuning(directory: Path, name: str, strings: list[str]) -> Path:
    path = directory / f"{name}.yaml"
    path.write_text(yaml.safe_dump({"name": name, "instrument": "guitar", "strings": strings}))
    return path


class TestTuning:
    """Tests for Tuning model."""

    def test_minimal_tuning(self) -> None:
        tuning = Tuning(name="test", strings=["E2", "A2"])
        assert tuning.instrument == ""
        assert tuning.description == ""
        assert tuning.strings == ("E2", "A2")

    def test_strings_canonicalised(self) -> None:
        tuning = Tuning(name="test", strings=["e2", "bb3"])
        assert tuning.strings == ("E2", "Bb3")

    def test_invalid_string(self) -> None:
        """Every string must be a valid note name."""
        with pytest.raises(ValidationError):
            Tuning(name="test", strings=["E2", "H2"])

    def test_empty_strings(self) -> None:
        with pytest.raises(ValidationError):
            Tuning(name="test", strings=[])

    def test_notes(self) -> None:
        tuning = Tuning(name="test", strings=["E2", "A2", "D3", "G3", "B3", "E4"])
        assert tuning.notes() == STANDARD_GUITAR_TUNING

    def test_fretboard(self) -> None:
        tuning = Tuning(name="test", strings=["G4", "C4", "E4", "A4"])
        assert tuning.fretboard(7) == Fretboard(STANDARD_UKULELE_TUNING, 7)

    def test_to_yaml_dict(self) -> None:
        tuning = Tuning(name="test", instrument="bass", strings=["E1", "A1"])
        yaml_dict = tuning.to_yaml_dict()
        assert yaml_dict["strings"] == ["E1", "A1"]
        assert yaml_dict["instrument"] == "bass"
        assert Tuning.model_validate(yaml_dict) == tuning


class TestTuningLoader:
    """Tests for TuningLoader."""

    def test_list_library_tunings(self, temp_dir: Path) -> None:
        """Lists built-in library tunings, sorted by name."""
        loader = TuningLoader(library_path=LIBRARY_PATH, project_path=temp_dir)
        names = [t.name for t in loader.list_tunings()]
        assert names == sorted(names)
        for expected in (
            "bass-standard",
            "guitar-dadgad",
            "guitar-drop-d",
            "guitar-standard",
            "mandolin-standard",
            "ukulele-standard",
        ):
            assert expected in names

    def test_default_library_path(self) -> None:
        """The packaged library is used when no path is given."""
        tuning = TuningLoader().get_tuning("guitar-standard")
        assert tuning is not None
        assert tuning.notes() == STANDARD_GUITAR_TUNING

    def test_get_tuning(self, temp_dir: Path) -> None:
        loader = TuningLoader(library_path=LIBRARY_PATH, project_path=temp_dir)
        tuning = loader.get_tuning("guitar-drop-d")
        assert tuning is not None
        assert tuning.instrument == "guitar"
        assert tuning.notes()[0] == Note("D2")

    def test_get_nonexistent_tuning(self, temp_dir: Path) -> None:
        loader = TuningLoader(library_path=LIBRARY_PATH, project_path=temp_dir)
        assert loader.get_tuning("nonexistent-tuning") is None

    def test_project_overrides_library(self, temp_dir: Path) -> None:
        write_tuning(temp_dir, "guitar-standard", ["Eb2", "Ab2", "Db3", "Gb3", "Bb3", "Eb4"])
        loader = TuningLoader(library_path=LIBRARY_PATH, project_path=temp_dir)

        tuning = loader.get_tuning("guitar-standard")
        assert tuning is not None
        assert tuning.strings[0] == "Eb2"

        listed = {t.name: t for t in loader.list_tunings()}
        assert listed["guitar-standard"].strings[0] == "Eb2"

    def test_project_only_tuning(self, temp_dir: Path) -> None:
        write_tuning(temp_dir, "open-g", ["D2", "G2", "D3", "G3", "B3", "D4"])
        loader = TuningLoader(library_path=LIBRARY_PATH, project_path=temp_dir)
        assert "open-g" in [t.name for t in loader.list_tunings()]

    def test_invalid_file_skipped(
        self, temp_dir: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Files that fail validation are skipped with a warning."""
        write_tuning(temp_dir, "broken", ["E2", "H9"])
        (temp_dir / "garbage.yaml").write_text("name: [unclosed")
        loader = TuningLoader(library_path=LIBRARY_PATH, project_path=temp_dir)

        with caplog.at_level(logging.WARNING, logger="pitchcraft.tunings.loader"):
            names = [t.name for t in loader.list_tunings()]
            assert loader.get_tuning("broken") is None

        assert "broken" not in names
        assert "Skipping tuning file" in caplog.text

    def test_missing_project_dir(self, temp_dir: Path) -> None:
        loader = TuningLoader(library_path=LIBRARY_PATH, project_path=temp_dir / "missing")
        assert loader.get_tuning("guitar-standard") is not None

    def test_cache(self, temp_dir: Path) -> None:
        loader = TuningLoader(library_path=LIBRARY_PATH, project_path=temp_dir)
        first = loader.get_tuning("bass-standard")
        assert loader.get_tuning("bass-standard") is first

        loader.clear_cache()
        assert loader.get_tuning("bass-standard") is not first
        assert loader.get_tuning("bass-standard") == first
