"""Filesystem canonicalization and directory enumeration."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from .types import CatalogEntry, DirectoryListing

logger = logging.getLogger(__name__)


def canonicalize(path: Path | str) -> Path:
    """Return the absolute, symlink-free form of ``path``.

    Raises ``FileNotFoundError`` (an ``OSError``) when ``path`` does not exist.
    """
    return Path(path).expanduser().resolve(strict=True)


def is_representable_name(name: str) -> bool:
    """Return whether ``name`` survives a strict UTF-8 round trip.

    Undecodable bytes in POSIX filenames come back from ``os.scandir`` as
    lone surrogates, which fail to encode.
    """
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def entry_for(path: Path) -> CatalogEntry | None:
    """Build a catalog entry for one path, or ``None`` if its name is not text."""
    name = path.name
    if not name or not is_representable_name(name):
        return None
    return CatalogEntry(name=name, path=path, is_dir=path.is_dir())


def load_directory(path: Path | str) -> DirectoryListing:
    """Canonicalize ``path`` and list its immediate children.

    Children keep filesystem enumeration order. Raises ``OSError`` when the
    directory is missing, unreadable, or not a directory.
    """
    directory = canonicalize(path)
    if not directory.is_dir():
        raise NotADirectoryError(f"Not a directory: {directory}")

    entries: list[CatalogEntry] = []
    skipped = 0
    with os.scandir(directory) as children:
        for child in children:
            if not is_representable_name(child.name):
                skipped += 1
                logger.debug("dropping entry with non-text name in %s: %r", directory, child.name)
                continue
            try:
                is_dir = child.is_dir()
            except OSError:
                is_dir = False
            entries.append(CatalogEntry(name=child.name, path=directory / child.name, is_dir=is_dir))

    if skipped:
        logger.debug("skipped %d unrepresentable entries in %s", skipped, directory)
    return DirectoryListing(directory=directory, entries=tuple(entries), skipped=skipped)


def filter_entries(
    entries: Iterable[CatalogEntry],
    query: str = "",
    show_hidden: bool = True,
) -> list[CatalogEntry]:
    """Return entries whose names contain ``query`` case-insensitively."""
    folded = query.casefold()
    matches: list[CatalogEntry] = []
    for entry in entries:
        if not show_hidden and entry.name.startswith("."):
            continue
        if folded and folded not in entry.name.casefold():
            continue
        matches.append(entry)
    return matches
