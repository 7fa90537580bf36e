"""Reading header files from the directory that holds them."""

from __future__ import annotations

from pathlib import Path

DEFAULT_BASE_DIR = "example"


def read_file_content(filename: str, base_dir: str | Path = DEFAULT_BASE_DIR) -> str:
    """Return the whole text of ``filename`` looked up inside ``base_dir``.

    Line endings are kept exactly as they are stored. Raises ``OSError``
    (usually ``FileNotFoundError``) when the file cannot be opened.
    """
    path = Path(base_dir) / filename
    with path.open("r", encoding="utf-8", newline="") as handle:
        return handle.read()