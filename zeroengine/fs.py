"""File system helpers for reading engine assets."""

from __future__ import annotations

import sys
from os import PathLike
from pathlib import Path

ASSETS_DIR = "assets"


def base_path() -> Path:
    """Return the directory that holds the running program."""
    program = sys.argv[0] if sys.argv else ""
    if not program:
        return Path.cwd()
    return Path(program).resolve().parent


def read_file(file_path: str | PathLike[str], base_dir: str | PathLike[str] | None = None) -> str:
    """Read a file below the ``assets`` directory into a string.

    The text ends at the first NUL character, if there is one.
    """
    root = Path(base_dir) if base_dir is not None else base_path()
    data = (root / ASSETS_DIR / file_path).read_bytes()
    text = data.decode("utf-8")
    return text.split("\0", 1)[0]