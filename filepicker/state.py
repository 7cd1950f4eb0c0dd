from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path

from .catalog import DirectoryListing


class OperationMode(enum.Enum):
    SELECT_FILE = "select_file"
    SELECT_DIRECTORY = "select_directory"
    SAVE_FILE = "save_file"


class LifecycleKind(enum.Enum):
    CLOSED = "closed"
    OPEN = "open"
    SELECTED = "selected"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class DialogLifecycleState:
    """Lifecycle of one dialog session; ``path`` is only set once selected."""

    kind: LifecycleKind
    path: Path | None = None

    @classmethod
    def closed(cls) -> DialogLifecycleState:
        return cls(LifecycleKind.CLOSED)

    @classmethod
    def opened(cls) -> DialogLifecycleState:
        return cls(LifecycleKind.OPEN)

    @classmethod
    def selected(cls, path: Path) -> DialogLifecycleState:
        return cls(LifecycleKind.SELECTED, path)

    @classmethod
    def cancelled(cls) -> DialogLifecycleState:
        return cls(LifecycleKind.CANCELLED)

    @property
    def is_terminal(self) -> bool:
        return self.kind in (LifecycleKind.SELECTED, LifecycleKind.CANCELLED)


@dataclass(frozen=True)
class PathSegment:
    """Breadcrumb label plus the cumulative path it leads to."""

    label: str
    path: Path


@dataclass
class DialogSession:
    mode: OperationMode = OperationMode.SELECT_DIRECTORY
    lifecycle: DialogLifecycleState = field(default_factory=DialogLifecycleState.closed)
    listing: DirectoryListing | None = None
    listing_error: OSError | None = None
    load_error: OSError | ValueError | None = None
    selected_item: Path | None = None
    save_name: str = ""
    save_name_error: str | None = None
