"""
Tuning loader - discovers and loads tuning definitions.

Tunings can come from:
1. Built-in catalog (pythagorean, meantones, equal temperaments)
2. Library definitions (YAML shipped with package)
3. Project definitions (user's project/tunings directory)
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from chuk_mcp_tuning.constants import TuningFamily
from chuk_mcp_tuning.core.intonation import TUNINGS, DegenerateBasisError, Tuning
from chuk_mcp_tuning.models.tuning import NAME_PATTERN, TuningDefinition, TuningMetadata

logger = logging.getLogger(__name__)

_BUILTIN_FAMILIES: dict[str, TuningFamily] = {
    "pythagorean": TuningFamily.PYTHAGOREAN,
    "quarter-comma-meantone": TuningFamily.MEANTONE,
    "schismatic-meantone": TuningFamily.MEANTONE,
}

_BUILTIN_DESCRIPTIONS: dict[str, str] = {
    "pythagorean": "Pure octaves and pure fifths (3/2)",
    "quarter-comma-meantone": "Pure octaves and pure major thirds (5/4)",
    "schismatic-meantone": "Pure octaves, eight fourths stack to 10/1",
    "five-tone-equal": "Octave in 5 equal steps (m2 tempered out)",
    "seven-tone-equal": "Octave in 7 equal steps (A1 tempered out)",
    "twelve-tone-equal": "Octave in 12 equal steps (d2 tempered out)",
    "nineteen-tone-equal": "Octave in 19 equal steps (dd2 tempered out)",
    "thirty-one-tone-equal": "Octave in 31 equal steps (dddd3 tempered out)",
    "fifty-three-tone-equal": "Octave in 53 equal steps (31 P8 - 53 P5 tempered out)",
}


def builtin_definition(tuning: Tuning) -> TuningDefinition:
    """Describe a built-in tuning as a definition."""
    return TuningDefinition.from_tuning(
        tuning,
        family=_BUILTIN_FAMILIES.get(tuning.name, TuningFamily.EQUAL),
        description=_BUILTIN_DESCRIPTIONS.get(tuning.name, ""),
    )


class TuningLoader:
    """
    Discovers and loads tuning definitions.

    Definitions are loaded from YAML files in the library and project
    directories. Project definitions override library definitions, which
    override the built-in catalog.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the tuning loader.

        Args:
            library_path: Path to bundled tuning library
            project_path: Path to project tunings directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, TuningDefinition] = {}

    def list_tunings(self) -> list[TuningMetadata]:
        """
        List all available tunings.

        Returns built-in, library and project tunings, with later
        sources taking precedence.
        """
        definitions: dict[str, TuningDefinition] = {
            name: builtin_definition(tuning) for name, tuning in TUNINGS.items()
        }

        for directory in (self.library_path, self.project_path):
            if directory and directory.exists():
                for path in sorted(directory.glob("*.yaml")):
                    definition = self._load_definition_file(path)
                    if definition:
                        definitions[definition.name] = definition

        return [TuningMetadata.from_definition(d) for d in definitions.values()]

    def get_definition(self, name: str) -> TuningDefinition | None:
        """
        Get a tuning definition by name.

        Args:
            name: Tuning name

        Returns:
            TuningDefinition if found, None otherwise
        """
        if not NAME_PATTERN.fullmatch(name):
            logger.warning(f"Rejected tuning name: {name!r}")
            return None

        if name in self._cache:
            return self._cache[name]

        for directory in (self.project_path, self.library_path):
            if directory and directory.exists():
                path = directory / f"{name}.yaml"
                if path.exists():
                    definition = self._load_definition_file(path)
                    if definition:
                        self._cache[name] = definition
                        return definition

        if name in TUNINGS:
            definition = builtin_definition(TUNINGS[name])
            self._cache[name] = definition
            return definition

        return None

    def get_tuning(self, name: str) -> Tuning | None:
        """
        Get a ready-to-use tuning by name.

        Args:
            name: Tuning name

        Returns:
            Tuning if found, None otherwise
        """
        definition = self.get_definition(name)
        if definition is None:
            return None
        return definition.to_tuning()

    def copy_to_project(self, name: str) -> Path | None:
        """
        Copy a library or built-in tuning to the project for customization.

        Args:
            name: Tuning name

        Returns:
            Path to copied file, or None if not found
        """
        if not self.project_path:
            raise ValueError("No project path configured")
        if not NAME_PATTERN.fullmatch(name):
            raise ValueError(f"Invalid tuning name: {name}")

        dest_file = self.project_path / f"{name}.yaml"
        if dest_file.exists():
            raise ValueError(f"Tuning already exists in project: {name}")

        library_file = self.library_path / f"{name}.yaml"
        if library_file.exists():
            content = library_file.read_text()
        elif name in TUNINGS:
            data = builtin_definition(TUNINGS[name]).model_dump(mode="json", by_alias=True)
            content = yaml.safe_dump(data, sort_keys=False)
        else:
            return None

        self.project_path.mkdir(parents=True, exist_ok=True)
        dest_file.write_text(content)

        # Invalidate cache
        self._cache.pop(name, None)

        return dest_file

    def _load_definition_file(self, path: Path) -> TuningDefinition | None:
        """Load a tuning definition from a YAML file, skipping invalid files."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            definition = TuningDefinition.model_validate(data)
            definition.to_tuning()
        except (OSError, yaml.YAMLError, ValidationError, DegenerateBasisError) as e:
            logger.warning(f"Skipping invalid tuning file {path}: {e}")
            return None
        return definition

    def clear_cache(self) -> None:
        """Clear the definition cache."""
        self._cache.clear()
