"""
Set-class catalogue - discovers and loads named set classes.

Set classes can come from:
1. Built-in library (shipped with package)
2. Project catalogue (user's project/set_classes directory)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import yaml

from chuk_mcp_pcset.core import prime
from chuk_mcp_pcset.models.analysis import SetClass

logger = logging.getLogger(__name__)


class SetClassCatalog:
    """
    Discovers and loads named set classes.

    Each YAML file is one family (triads, scales, ...) holding a list of
    entries. Project entries override library entries with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the catalogue.

        Args:
            library_path: Path to built-in catalogue files
            project_path: Path to project catalogue directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, SetClass] | None = None

    def list_set_classes(self, family: str | None = None) -> list[SetClass]:
        """
        List all set classes, optionally restricted to one family.

        Entries are ordered by cardinality, then by prime form.
        """
        entries = self._load_all().values()
        if family is not None:
            entries = [e for e in entries if e.family == family]
        return sorted(entries, key=lambda e: (len(e.prime_form), e.prime_form, e.name))

    def families(self) -> list[str]:
        """Names of all loaded families."""
        return sorted({e.family for e in self._load_all().values()})

    def get(self, name: str) -> SetClass | None:
        """
        Get a set class by name.

        Args:
            name: Set class name

        Returns:
            SetClass if found, None otherwise
        """
        return self._load_all().get(name.lower().replace("-", "_"))

    def identify(self, pcs: Sequence[int]) -> list[SetClass]:
        """
        Find every catalogue entry in the same set class as pcs.

        Args:
            pcs: Pitch classes in any order or transposition

        Returns:
            Matching entries (possibly several, e.g. major and minor triad)
        """
        target = prime(pcs)
        return [e for e in self.list_set_classes() if e.prime_form == target]

    def copy_to_project(self, family: str) -> Path | None:
        """
        Copy a library family file to the project for customization.

        Args:
            family: Family name

        Returns:
            Path to copied file, or None if not found
        """
        if not self.project_path:
            raise ValueError("No project path configured")

        library_file = self.library_path / f"{family}.yaml"
        if not library_file.exists():
            return None

        self.project_path.mkdir(parents=True, exist_ok=True)

        dest_file = self.project_path / f"{family}.yaml"
        if dest_file.exists():
            raise ValueError(f"Set class family already exists in project: {family}")

        dest_file.write_text(library_file.read_text())
        self.clear_cache()

        return dest_file

    def set_project_path(self, project_path: Path | None) -> None:
        """
        Point the catalogue at another project directory.

        Entries are reloaded on the next lookup.
        """
        self.project_path = project_path
        self.clear_cache()

    def clear_cache(self) -> None:
        """Clear the loaded entries."""
        self._cache = None

    def _load_all(self) -> dict[str, SetClass]:
        """Load library then project files, project entries winning."""
        if self._cache is not None:
            return self._cache

        entries: dict[str, SetClass] = {}
        for directory in (self.library_path, self.project_path):
            if directory and directory.exists():
                for path in sorted(directory.glob("*.yaml")):
                    for entry in self._load_family_file(path):
                        entries[entry.name] = entry

        logger.debug(f"Loaded {len(entries)} set classes")
        self._cache = entries
        return entries

    def _load_family_file(self, path: Path) -> list[SetClass]:
        """Load all entries from one YAML file; malformed files are skipped."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)

            return self._parse_family(data, default_family=path.stem)
        except Exception:
            logger.warning(f"Skipping unreadable set class file: {path}")
            return []

    def _parse_family(self, data: dict[str, Any], default_family: str) -> list[SetClass]:
        """Parse a family from YAML data."""
        family = data.get("family", default_family)
        return [
            SetClass(
                name=item["name"],
                family=family,
                description=item.get("description", ""),
                pitch_classes=item["pitch_classes"],
                prime_form=prime(item["pitch_classes"]),
            )
            for item in data.get("set_classes", [])
        ]
