"""Inline create-directory sub-dialog.

The sub-dialog is a small state machine nested in :class:`FileDialog`:
``open(parent)`` starts a request, ``set_name`` edits it, and ``commit``
creates the directory. The owning dialog notifies it of every directory
change through :meth:`CreateDirectoryDialog.directory_changed`.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .validation import validate_directory_name

logger = logging.getLogger(__name__)


class CreateDirectoryDialog:
    """Name-and-create flow for one new directory."""

    def __init__(self) -> None:
        self.is_open = False
        self.parent: Path | None = None
        self.input = ""
        self.error: str | None = None

    def open(self, parent: Path) -> None:
        """Start a request in ``parent`` with an empty, already-validated name."""
        self.close()
        self.is_open = True
        self.parent = parent
        self.error = validate_directory_name(self.input, self.parent)

    def close(self) -> None:
        self.is_open = False
        self.parent = None
        self.input = ""
        self.error = None

    cancel = close

    def set_name(self, text: str) -> None:
        if not self.is_open:
            return
        self.input = text
        self.error = validate_directory_name(self.input, self.parent)

    def can_commit(self) -> bool:
        return self.is_open and self.error is None

    def commit(self) -> Path | None:
        """Create the directory and close, returning its path.

        Returns ``None`` when there is nothing valid to commit. A failed
        ``mkdir`` keeps the sub-dialog open with the typed name and reports
        the failure as the field error.
        """
        if not self.can_commit() or self.parent is None:
            return None
        target = self.parent / self.input
        try:
            target.mkdir()
        except (OSError, ValueError) as exc:
            reason = getattr(exc, "strerror", None) or str(exc)
            logger.warning("could not create directory %s: %s", target, reason)
            self.error = f"Could not create directory: {reason}"
            return None
        logger.debug("created directory %s", target)
        self.close()
        return target

    def directory_changed(self, directory: Path | None) -> None:
        """Close when the owning dialog leaves the directory this request targets."""
        if self.is_open and directory != self.parent:
            self.close()
