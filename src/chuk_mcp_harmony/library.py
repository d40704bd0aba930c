"""
YAML library loading shared by schemas and themes.

Entries come from two directories:
1. Built-in library (shipped with package)
2. Project directory (user's project/<kind> directory)

An entry is identified by the slug of its file name. Project files
override library files with the same slug. Lookups also accept the
display name stored inside a file, so everything a listing returns can
be fetched by its listed name or its slug.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, Generic, TypeVar

import yaml
from pydantic import ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_SLUG_RE = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    """'Singer/Songwriter' -> 'singer-songwriter'."""
    return _SLUG_RE.sub("-", name.strip().lower()).strip("-")


class YamlLibrary(Generic[T]):
    """
    Library/project lookup with a per-instance cache.

    Subclasses set `kind` and implement `_parse` and `_display_name`.
    """

    kind = "Entry"

    def __init__(self, library_path: Path, project_path: Path | None = None):
        self.library_path = library_path
        self.project_path = project_path
        self._cache: dict[str, T] = {}

    def entries(self) -> list[tuple[str, T]]:
        """All loadable entries as (slug, entry), project files taking precedence."""
        entries: list[tuple[str, T]] = []
        for slug, path in self._files().items():
            entry = self._load_file(path)
            if entry is not None:
                entries.append((slug, entry))
        return entries

    def get(self, name: str) -> T | None:
        """
        Get an entry by slug or display name.

        Args:
            name: File slug ('singer-songwriter') or display name
                ('Singer/Songwriter')

        Returns:
            The entry if found, None otherwise
        """
        slug = slugify(name)
        if slug in self._cache:
            return self._cache[slug]

        path = self._find(slug, self._files())
        if path is None:
            return None

        entry = self._load_file(path)
        if entry is not None:
            self._cache[slug] = entry
        return entry

    def copy_to_project(self, name: str) -> Path | None:
        """
        Copy a library entry to the project for customization.

        Args:
            name: Slug or display name of a library entry

        Returns:
            Path to copied file, or None if not found
        """
        if not self.project_path:
            raise ValueError("No project path configured")

        source = self._find(slugify(name), self._files_in(self.library_path))
        if source is None:
            return None

        self.project_path.mkdir(parents=True, exist_ok=True)

        dest_file = self.project_path / source.name
        if dest_file.exists():
            raise ValueError(f"{self.kind} already exists in project: {source.stem}")

        dest_file.write_text(source.read_text())
        self.clear_cache()

        return dest_file

    def clear_cache(self) -> None:
        """Clear the entry cache."""
        self._cache.clear()

    def _files_in(self, directory: Path | None) -> dict[str, Path]:
        if directory is None or not directory.exists():
            return {}
        return {slugify(path.stem): path for path in sorted(directory.glob("*.yaml"))}

    def _files(self) -> dict[str, Path]:
        files = self._files_in(self.library_path)
        files.update(self._files_in(self.project_path))
        return files

    def _find(self, slug: str, files: dict[str, Path]) -> Path | None:
        """File whose slug matches, else the file whose display name does."""
        if slug in files:
            return files[slug]
        for path in files.values():
            entry = self._load_file(path)
            if entry is not None and slugify(self._display_name(entry)) == slug:
                return path
        return None

    def _load_file(self, path: Path) -> T | None:
        """Load an entry from a YAML file; malformed files are skipped."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            return self._parse(data, path)
        except (OSError, yaml.YAMLError, ValidationError, AttributeError, KeyError, TypeError) as e:
            logger.warning(f"Skipping {self.kind.lower()} file {path}: {e}")
            return None

    def _parse(self, data: dict[str, Any], path: Path) -> T:
        raise NotImplementedError

    def _display_name(self, entry: T) -> str:
        raise NotImplementedError
