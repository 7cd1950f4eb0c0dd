"""Domain datatypes for directory listings."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class CatalogEntry:
    """One immediate child of a listed directory."""

    name: str
    path: Path
    is_dir: bool


@dataclass(frozen=True)
class DirectoryListing:
    """Wholesale snapshot of a directory's immediate children.

    ``skipped`` counts entries dropped because their names could not be
    represented as text.
    """

    directory: Path
    entries: tuple[CatalogEntry, ...] = ()
    skipped: int = 0

    def paths(self) -> list[Path]:
        return [entry.path for entry in self.entries]

    def find(self, path: Path) -> CatalogEntry | None:
        """Return the entry whose path equals ``path``."""
        for entry in self.entries:
            if entry.path == path:
                return entry
        return None

    def with_entry(self, entry: CatalogEntry) -> DirectoryListing:
        """Return a copy with ``entry`` appended, or ``self`` if already listed."""
        if self.find(entry.path) is not None:
            return self
        return DirectoryListing(
            directory=self.directory,
            entries=(*self.entries, entry),
            skipped=self.skipped,
        )


__all__ = [
    "CatalogEntry",
    "DirectoryListing",
]
