"""Command-line front door for filepicker.

Opens a dialog session on a directory and either prints a snapshot of what
a presentation layer would show, or performs one scripted pick and prints
the chosen path.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .dialog import FileDialog
from .state import OperationMode

MODE_CHOICES = {
    "file": OperationMode.SELECT_FILE,
    "directory": OperationMode.SELECT_DIRECTORY,
    "save": OperationMode.SAVE_FILE,
}


def render_dialog(dialog: FileDialog, search: str = "") -> str:
    """Render places, breadcrumbs, and the filtered listing as plain text."""
    out: list[str] = []
    places = dialog.places()
    if places:
        out.append("Places")
        for label, path in places:
            out.append(f"  {label:<10} {path}")
    if dialog.disks:
        out.append("Devices")
        for disk in dialog.disks:
            out.append(f"  {disk.name:<10} {disk.mount_point}")

    segments = dialog.path_segments()
    out.append("Path: " + " > ".join(segment.label for segment in segments))
    if dialog.load_error is not None:
        out.append(f"Error: {dialog.load_error}")

    for entry in dialog.entries(search):
        kind = "dir " if entry.is_dir else "file"
        out.append(f"[{kind}] {entry.name}")

    listing = dialog.listing
    if listing is not None and listing.skipped:
        out.append(f"({listing.skipped} entries with unreadable names skipped)")
    return "\n".join(out) + "\n"


def _run_pick(dialog: FileDialog, pick: str | None, save_name: str | None) -> Path:
    if save_name is not None:
        dialog.set_save_name(save_name)
    if pick is not None and not dialog.select(pick):
        raise SystemExit(f"Not in listing: {pick}")
    if not dialog.confirm():
        reason = dialog.save_name_error or f"Selection is not valid for {dialog.mode.value}"
        raise SystemExit(reason)
    selected = dialog.selected_path()
    if selected is None:
        raise SystemExit("No path selected")
    return selected


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and run one dialog session.

    ``default_path`` is primarily for tests; when omitted the configured or
    current working directory is used.
    """
    parser = argparse.ArgumentParser(description="Browse a directory the way the file picker sees it.")
    parser.add_argument("path", nargs="?", default=None, help="Starting directory.")
    parser.add_argument("--mode", choices=sorted(MODE_CHOICES), default="file", help="Dialog operation mode.")
    parser.add_argument("--search", default="", help="Case-insensitive filter on entry names.")
    parser.add_argument("--pick", metavar="NAME", help="Select NAME and confirm, printing the chosen path.")
    parser.add_argument("--save-name", metavar="NAME", help="File name to confirm in save mode.")
    parser.add_argument("--create-dir", metavar="NAME", help="Create directory NAME before anything else.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log navigation details to stderr.")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    start = args.path if args.path is not None else default_path
    dialog = FileDialog(start)
    dialog.open(MODE_CHOICES[args.mode])

    if args.create_dir is not None:
        if not dialog.open_create_directory():
            raise SystemExit("Cannot create a directory here")
        dialog.set_create_directory_name(args.create_dir)
        if dialog.commit_create_directory() is None:
            raise SystemExit(dialog.create_directory.error or "Directory was not created")

    if args.pick is not None or args.save_name is not None:
        selected = _run_pick(dialog, args.pick, args.save_name)
        sys.stdout.write(f"{selected}\n")
        return

    sys.stdout.write(render_dialog(dialog, args.search))


if __name__ == "__main__":
    main()
