"""Public package surface for filepicker.

Exports the dialog controller and its data model. ``main`` is imported
lazily to keep package imports lightweight.
"""

from __future__ import annotations

from .catalog import CatalogEntry, DirectoryListing
from .create_directory import CreateDirectoryDialog
from .dialog import FileDialog
from .navigation import NavigationHistory
from .places import Disk, UserDirectories
from .state import DialogLifecycleState, LifecycleKind, OperationMode, PathSegment


def main(*args, **kwargs):
    """Lazily import CLI entrypoint."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "CatalogEntry",
    "CreateDirectoryDialog",
    "DialogLifecycleState",
    "DirectoryListing",
    "Disk",
    "FileDialog",
    "LifecycleKind",
    "NavigationHistory",
    "OperationMode",
    "PathSegment",
    "UserDirectories",
    "main",
]
