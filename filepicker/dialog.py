"""File dialog controller: navigation, selection, and validation state machine.

``FileDialog`` owns one dialog session at a time. A presentation layer reads
its query surface (current directory, listing, selection validity, field
errors) and forwards user intents to its commands. Every command runs
synchronously; IO failures while listing are recovered here and exposed as
``load_error`` instead of propagating.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from .catalog import CatalogEntry, DirectoryListing, canonicalize, entry_for, filter_entries, load_directory
from .config import PickerConfig, load_picker_config
from .create_directory import CreateDirectoryDialog
from .navigation import NavigationHistory
from .places import Disk, UserDirectories, load_disks, load_user_directories
from .state import DialogLifecycleState, DialogSession, LifecycleKind, OperationMode, PathSegment
from .validation import display_name, is_selection_valid, validate_save_name

logger = logging.getLogger(__name__)


class FileDialog:
    """Stateful controller for one file-picker session.

    ``initial_directory`` defaults to the configured starting directory and
    then to the process working directory. The places providers are injected
    so callers (and tests) can replace the environment lookups.
    """

    def __init__(
        self,
        initial_directory: Path | str | None = None,
        *,
        config: PickerConfig | None = None,
        user_directories_provider: Callable[[], UserDirectories] | None = None,
        disks_provider: Callable[[], list[Disk]] | None = None,
    ) -> None:
        self.config = config if config is not None else load_picker_config()
        if initial_directory is None:
            initial_directory = self.config.initial_directory or Path.cwd()
        self.initial_directory = Path(initial_directory)
        self.user_directories_provider = user_directories_provider or load_user_directories
        self.disks_provider = disks_provider or load_disks

        self.session = DialogSession()
        self.history = NavigationHistory()
        self.create_directory = CreateDirectoryDialog()
        self.user_directories = UserDirectories()
        self.disks: list[Disk] = []

    # Queries

    @property
    def state(self) -> DialogLifecycleState:
        return self.session.lifecycle

    @property
    def mode(self) -> OperationMode:
        return self.session.mode

    @property
    def is_open(self) -> bool:
        return self.session.lifecycle.kind is LifecycleKind.OPEN

    @property
    def current_directory(self) -> Path | None:
        return self.history.current()

    @property
    def listing(self) -> DirectoryListing | None:
        return self.session.listing

    @property
    def load_error(self) -> OSError | ValueError | None:
        return self.session.load_error

    @property
    def selected_item(self) -> Path | None:
        return self.session.selected_item

    @property
    def selected_name(self) -> str | None:
        if self.session.selected_item is None:
            return None
        return display_name(self.session.selected_item)

    @property
    def save_name(self) -> str:
        return self.session.save_name

    @property
    def save_name_error(self) -> str | None:
        return self.session.save_name_error

    def can_go_back(self) -> bool:
        return self.history.can_go_back()

    def can_go_forward(self) -> bool:
        return self.history.can_go_forward()

    def can_go_up(self) -> bool:
        current = self.current_directory
        return current is not None and current.parent != current

    def entries(self, search: str = "") -> list[CatalogEntry]:
        """Return the current listing filtered by a case-insensitive name query."""
        if self.session.listing is None:
            return []
        return filter_entries(self.session.listing.entries, search, show_hidden=self.config.show_hidden)

    def path_segments(self) -> list[PathSegment]:
        """Decompose the current directory into breadcrumb segments."""
        directory = self.current_directory
        if directory is None:
            return []
        segments: list[PathSegment] = []
        cumulative: Path | None = None
        for part in directory.parts:
            cumulative = Path(part) if cumulative is None else cumulative / part
            segments.append(PathSegment(label=part, path=cumulative))
        return segments

    def places(self) -> list[tuple[str, Path]]:
        return self.user_directories.labelled()

    def is_selection_valid(self) -> bool:
        return is_selection_valid(
            self.session.mode,
            self.session.selected_item,
            self.session.save_name_error,
        )

    def selected_path(self) -> Path | None:
        """Return the chosen path once the session has finished with a selection."""
        if self.session.lifecycle.kind is LifecycleKind.SELECTED:
            return self.session.lifecycle.path
        return None

    # Session lifecycle

    def open(self, mode: OperationMode, initial_directory: Path | str | None = None) -> None:
        """Start a fresh session in ``mode``.

        A starting directory that cannot be loaded leaves the listing empty
        but keeps the dialog open.
        """
        self._reset()
        self.session.mode = mode
        self.session.lifecycle = DialogLifecycleState.opened()
        self._refresh_places()

        start = Path(initial_directory) if initial_directory is not None else self.initial_directory
        self.navigate(start)
        self._revalidate_save_name()

    def select_file(self) -> None:
        self.open(OperationMode.SELECT_FILE)

    def select_directory(self) -> None:
        self.open(OperationMode.SELECT_DIRECTORY)

    def save_file(self) -> None:
        self.open(OperationMode.SAVE_FILE)

    def confirm(self) -> bool:
        """Finish the session with the current selection if it is valid."""
        if not self.is_open or not self.is_selection_valid():
            return False
        if self.session.mode is OperationMode.SAVE_FILE:
            directory = self.current_directory
            if directory is None:
                return False
            target = directory / self.session.save_name
        else:
            target = self.session.selected_item
            if target is None:
                return False
        logger.debug("dialog finished with %s", target)
        self.create_directory.close()
        self.session.lifecycle = DialogLifecycleState.selected(target)
        return True

    def cancel(self) -> None:
        self.create_directory.close()
        self.session.lifecycle = DialogLifecycleState.cancelled()

    # Navigation

    def navigate(self, path: Path | str) -> bool:
        """Visit ``path`` and reload the listing.

        Relative paths are taken relative to the current directory.
        Re-visiting the current directory is a no-op; use :meth:`refresh` to
        reload it. Paths that do not resolve to a directory leave history
        untouched and are reported through ``load_error`` until the next
        navigation.
        """
        self.session.load_error = self.session.listing_error
        candidate = Path(path).expanduser()
        current = self.current_directory
        if current is not None and not candidate.is_absolute():
            candidate = current / candidate
        try:
            target = canonicalize(candidate)
        except (OSError, ValueError) as exc:
            logger.warning("cannot navigate to %s: %s", path, exc)
            self.session.load_error = exc
            return False
        if not target.is_dir():
            logger.warning("cannot navigate to %s: not a directory", target)
            self.session.load_error = NotADirectoryError(f"Not a directory: {target}")
            return False
        if not self.history.navigate_to(target):
            return False
        logger.debug("navigated to %s", target)
        self._directory_changed()
        return True

    def back(self) -> bool:
        if self.history.back() is None:
            return False
        self._directory_changed()
        return True

    def forward(self) -> bool:
        if self.history.forward() is None:
            return False
        self._directory_changed()
        return True

    def parent(self) -> bool:
        """Navigate to the parent of the current directory, if there is one."""
        current = self.current_directory
        if current is None or current.parent == current:
            return False
        return self.navigate(current.parent)

    def refresh(self) -> None:
        """Re-read places and the current directory without touching history.

        The selection survives only if it is still present in the new listing.
        """
        self._refresh_places()
        self._load_current_directory()
        selected = self.session.selected_item
        listing = self.session.listing
        if selected is not None and (listing is None or listing.find(selected) is None):
            self.session.selected_item = None
        self._revalidate_save_name()

    # Selection

    def select(self, path: Path | str) -> bool:
        """Select an entry of the current listing.

        Relative paths are taken relative to the current directory. In
        save mode, selecting an existing file proposes overwriting it.
        """
        entry = self._find_entry(path)
        if entry is None:
            return False
        self.session.selected_item = entry.path
        if self.session.mode is OperationMode.SAVE_FILE and entry.path.is_file():
            name = display_name(entry.path)
            if name is not None:
                self.session.save_name = name
                self._revalidate_save_name()
        return True

    def activate(self, path: Path | str) -> bool:
        """Open directories; select anything else and confirm when valid."""
        entry = self._find_entry(path)
        if entry is None:
            return False
        if entry.path.is_dir():
            return self.navigate(entry.path)
        self.select(entry.path)
        return self.confirm()

    def set_save_name(self, text: str) -> None:
        self.session.save_name = text
        self._revalidate_save_name()

    # Create-directory sub-dialog

    def open_create_directory(self) -> bool:
        directory = self.current_directory
        if not self.is_open or directory is None or self.create_directory.is_open:
            return False
        self.create_directory.open(directory)
        return True

    def set_create_directory_name(self, text: str) -> None:
        self.create_directory.set_name(text)

    def commit_create_directory(self) -> Path | None:
        created = self.create_directory.commit()
        if created is not None:
            self.create_directory_result(created)
        return created

    def cancel_create_directory(self) -> None:
        self.create_directory.cancel()

    def create_directory_result(self, path: Path) -> None:
        """Insert a freshly created directory into the listing and select it."""
        listing = self.session.listing
        if listing is None:
            return
        if path.parent != listing.directory:
            logger.warning("created directory %s is not a child of %s; not listed", path, listing.directory)
            return
        entry = entry_for(path)
        if entry is None:
            logger.debug("created directory %r has no text name; not listed", path)
            return
        self.session.listing = listing.with_entry(entry)
        self.select(entry.path)

    # Internals

    def _reset(self) -> None:
        self.session = DialogSession()
        self.history.clear()
        self.create_directory.close()

    def _refresh_places(self) -> None:
        self.user_directories = self.user_directories_provider()
        self.disks = list(self.disks_provider())

    def _find_entry(self, path: Path | str) -> CatalogEntry | None:
        listing = self.session.listing
        if listing is None:
            return None
        candidate = Path(path)
        if not candidate.is_absolute():
            candidate = listing.directory / candidate
        return listing.find(candidate)

    def _load_current_directory(self) -> None:
        directory = self.history.current()
        if directory is None:
            self.session.listing = None
            self.session.listing_error = None
            return
        try:
            self.session.listing = load_directory(directory)
        except OSError as exc:
            logger.warning("cannot list %s: %s", directory, exc)
            self.session.listing = DirectoryListing(directory=directory)
            self.session.listing_error = exc
        else:
            self.session.listing_error = None
        self.session.load_error = self.session.listing_error

    def _directory_changed(self) -> None:
        self._load_current_directory()
        self.create_directory.directory_changed(self.current_directory)
        self.session.selected_item = None
        self._revalidate_save_name()

    def _revalidate_save_name(self) -> None:
        if self.session.mode is OperationMode.SAVE_FILE:
            self.session.save_name_error = validate_save_name(self.session.save_name, self.current_directory)
        else:
            self.session.save_name_error = None
