"""Environment-backed shortcuts: user directories and mounted disks.

Both providers are re-read wholesale whenever the dialog opens or refreshes.
Failures degrade to "no shortcuts" instead of propagating.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import platformdirs
import psutil

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserDirectories:
    """Well-known per-user directories; each is ``None`` when unavailable."""

    home: Path | None = None
    desktop: Path | None = None
    documents: Path | None = None
    downloads: Path | None = None
    audio: Path | None = None
    pictures: Path | None = None
    videos: Path | None = None

    def labelled(self) -> list[tuple[str, Path]]:
        """Return available directories as ``(label, path)`` pairs in display order."""
        candidates = [
            ("Home", self.home),
            ("Desktop", self.desktop),
            ("Documents", self.documents),
            ("Downloads", self.downloads),
            ("Audio", self.audio),
            ("Pictures", self.pictures),
            ("Videos", self.videos),
        ]
        return [(label, path) for label, path in candidates if path is not None]


@dataclass(frozen=True)
class Disk:
    """One mounted device; ``name`` is the device identifier as reported by the OS."""

    name: str
    mount_point: Path


def _existing_dir(raw: str | Path | None) -> Path | None:
    if not raw:
        return None
    path = Path(raw)
    try:
        return path if path.is_dir() else None
    except OSError:
        return None


def load_user_directories() -> UserDirectories:
    """Resolve the current user's well-known directories via ``platformdirs``."""
    try:
        home = Path.home()
    except RuntimeError:
        logger.warning("home directory could not be determined")
        home = None

    return UserDirectories(
        home=_existing_dir(home),
        desktop=_existing_dir(platformdirs.user_desktop_dir()),
        documents=_existing_dir(platformdirs.user_documents_dir()),
        downloads=_existing_dir(platformdirs.user_downloads_dir()),
        audio=_existing_dir(platformdirs.user_music_dir()),
        pictures=_existing_dir(platformdirs.user_pictures_dir()),
        videos=_existing_dir(platformdirs.user_videos_dir()),
    )


def load_disks() -> list[Disk]:
    """List mounted physical partitions via ``psutil``."""
    try:
        partitions = psutil.disk_partitions(all=False)
    except (OSError, RuntimeError) as exc:
        logger.warning("could not enumerate disks: %s", exc)
        return []

    disks: list[Disk] = []
    for partition in partitions:
        if not partition.mountpoint:
            continue
        name = partition.device or partition.mountpoint
        disks.append(Disk(name=name, mount_point=Path(partition.mountpoint)))
    return disks
