"""Reading and writing whole files."""

from __future__ import annotations

import os
from pathlib import Path


def read(file_path: str | os.PathLike) -> bytes:
    """Return the full binary contents of ``file_path``."""
    return Path(file_path).read_bytes()


def write(content: str | bytes, file_path: str | os.PathLike) -> None:
    """Write ``content`` to ``file_path``, replacing anything already there."""
    data = content.encode("utf-8") if isinstance(content, str) else content
    Path(file_path).write_bytes(data)