"""File helpers for the command line."""

from __future__ import annotations

import os
from pathlib import Path


def read_file(path: str | os.PathLike) -> str:
    """Read a file given by a relative or absolute path and return its text."""
    input_path = Path(path)
    if not input_path.is_absolute():
        input_path = Path.cwd() / input_path
    resolved = input_path.resolve(strict=True)
    return resolved.read_text()