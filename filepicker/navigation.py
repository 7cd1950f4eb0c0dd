"""Directory history with browser-style back/forward semantics.

This module intentionally has no filesystem or UI concerns.
It stores canonical directory paths produced by the catalog layer.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class NavigationHistory:
    """Visited directories plus a cursor measured from the most recent entry.

    ``offset`` 0 means the newest entry is current. Whenever ``stack`` is
    non-empty, ``0 <= offset < len(stack)`` holds.
    """

    def __init__(self) -> None:
        self.stack: list[Path] = []
        self.offset = 0

    def current(self) -> Path | None:
        """Return the current directory, or ``None`` before the first visit."""
        if not self.stack:
            return None
        return self.stack[len(self.stack) - 1 - self.offset]

    def can_go_back(self) -> bool:
        return self.offset + 1 < len(self.stack)

    def can_go_forward(self) -> bool:
        return self.offset > 0

    def navigate_to(self, path: Path) -> bool:
        """Visit ``path``, discarding forward history when backed up.

        Returns ``False`` without changes when ``path`` is already current.
        """
        if path == self.current():
            return False
        if self.offset > 0:
            dropped = self.stack[len(self.stack) - self.offset :]
            del self.stack[len(self.stack) - self.offset :]
            logger.debug("discarding %d forward history entries", len(dropped))
        self.stack.append(path)
        self.offset = 0
        return True

    def back(self) -> Path | None:
        """Step one entry back and return the new current directory."""
        if not self.can_go_back():
            return None
        self.offset += 1
        return self.current()

    def forward(self) -> Path | None:
        """Step one entry forward and return the new current directory."""
        if not self.can_go_forward():
            return None
        self.offset -= 1
        return self.current()

    def clear(self) -> None:
        self.stack.clear()
        self.offset = 0
