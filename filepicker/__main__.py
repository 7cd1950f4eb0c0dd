"""Module entrypoint for ``python -m filepicker``.

All argument parsing and session setup happen in ``filepicker.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
