"""
Tuning loader - discovers and loads instrument tunings.

Tunings can come from:
1. Built-in library (shipped with package)
2. Project tunings (a user-supplied directory)
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from pitchcraft.tunings.model import Tuning

logger = logging.getLogger(__name__)

LIBRARY_PATH = Path(__file__).parent / "library"


class TuningLoader:
    """
    Discovers and loads tuning definitions.

    Tunings are loaded from YAML files in the library and project directories.
    Project tunings override library tunings with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the tuning loader.

        Args:
            library_path: Path to built-in tuning library
            project_path: Path to project tunings directory
        """
        self.library_path = library_path or LIBRARY_PATH
        self.project_path = project_path
        self._cache: dict[str, Tuning] = {}

    def list_tunings(self) -> list[Tuning]:
        """
        List all available tunings, sorted by name.

        Project tunings take precedence over library tunings.
        """
        tunings: dict[str, Tuning] = {}

        for directory in (self.library_path, self.project_path):
            if directory and directory.exists():
                for path in sorted(directory.glob("*.yaml")):
                    tuning = self._load_tuning_file(path)
                    if tuning:
                        tunings[tuning.name] = tuning

        return [tunings[name] for name in sorted(tunings)]

    def get_tuning(self, name: str) -> Tuning | None:
        """
        Get a tuning by name.

        Project tunings take precedence over library tunings.

        Args:
            name: Tuning name, e.g. 'guitar-drop-d'

        Returns:
            Tuning if found, None otherwise
        """
        if name in self._cache:
            return self._cache[name]

        for directory in (self.project_path, self.library_path):
            if not directory:
                continue
            path = directory / f"{name}.yaml"
            if path.exists():
                tuning = self._load_tuning_file(path)
                if tuning:
                    self._cache[name] = tuning
                    return tuning

        return None

    def _load_tuning_file(self, path: Path) -> Tuning | None:
        """Load a tuning from a YAML file, skipping files that fail to parse."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            return Tuning.model_validate(data)
        except (OSError, yaml.YAMLError, ValidationError) as e:
            logger.warning("Skipping tuning file %s: %s", path, e)
            return None

    def clear_cache(self) -> None:
        """Clear the tuning cache."""
        self._cache.clear()
