"""Selection and name validation for the file dialog.

Every function here is a pure query over the arguments and the filesystem.
Validation errors are field-scoped messages (``str | None``), never raised.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .catalog import is_representable_name
from .state import OperationMode

logger = logging.getLogger(__name__)

EMPTY_FILE_NAME = "The file name cannot be empty"
NOT_IN_DIRECTORY = "Currently not in a directory"
FILE_EXISTS = "A file with this name already exists"
EMPTY_DIRECTORY_NAME = "The directory name cannot be empty"
NO_PARENT_DIRECTORY = "No parent directory given"
DIRECTORY_EXISTS = "A directory with this name already exists"
NULL_BYTE_IN_NAME = "The name cannot contain a null byte"
NOT_A_PLAIN_NAME = "The name cannot contain path separators"


def name_error(name: str) -> str | None:
    """Reject names that are not a single entry of the directory they are joined to."""
    if "\0" in name:
        return NULL_BYTE_IN_NAME
    separators = {os.sep, os.altsep} - {None}
    if any(sep in name for sep in separators) or name in (".", "..") or Path(name).name != name:
        return NOT_A_PLAIN_NAME
    return None


def display_name(path: Path) -> str | None:
    """Return the final path component when it is representable as text."""
    name = path.name
    if not name or not is_representable_name(name):
        return None
    return name


def is_selection_valid(
    mode: OperationMode,
    selected_item: Path | None,
    save_name_error: str | None,
) -> bool:
    """Return whether the current selection may be confirmed in ``mode``."""
    if mode is OperationMode.SAVE_FILE:
        return save_name_error is None
    if selected_item is None or display_name(selected_item) is None:
        return False
    if mode is OperationMode.SELECT_DIRECTORY:
        return selected_item.is_dir()
    return selected_item.is_file()


def validate_save_name(name: str, current_directory: Path | None) -> str | None:
    """Validate a typed save-file name against the current directory.

    Existing directories with the same name are not rejected here.
    """
    if not name:
        return EMPTY_FILE_NAME
    error = name_error(name)
    if error is not None:
        return error
    if current_directory is None:
        logger.warning("save name validated without a current directory")
        return NOT_IN_DIRECTORY
    if (current_directory / name).is_file():
        return FILE_EXISTS
    return None


def validate_directory_name(name: str, parent: Path | None) -> str | None:
    """Validate the name of a directory about to be created in ``parent``."""
    if not name:
        return EMPTY_DIRECTORY_NAME
    error = name_error(name)
    if error is not None:
        return error
    if parent is None:
        logger.warning("directory name validated without a parent directory")
        return NO_PARENT_DIRECTORY
    if (parent / name).is_dir():
        return DIRECTORY_EXISTS
    return None
