"""Read-only JSON config helpers.

Supplies the default starting directory and hidden-entry preference.
All access is defensive: malformed or missing config falls back safely.
The dialog never writes this file.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "filepicker"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class PickerConfig:
    initial_directory: Path | None = None
    show_hidden: bool = True


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def load_initial_directory(data: dict[str, object] | None = None) -> Path | None:
    """Return the configured starting directory, or ``None`` when unset/invalid."""
    if data is None:
        data = load_config()
    value = data.get("initial_directory")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return Path(stripped).expanduser() if stripped else None


def load_show_hidden(data: dict[str, object] | None = None) -> bool:
    """Return hidden-entry visibility.

    Only explicit boolean values are accepted; any other type falls back to
    ``True`` so listings show every child by default.
    """
    if data is None:
        data = load_config()
    value = data.get("show_hidden")
    return value if isinstance(value, bool) else True


def load_picker_config() -> PickerConfig:
    data = load_config()
    return PickerConfig(
        initial_directory=load_initial_directory(data),
        show_hidden=load_show_hidden(data),
    )
