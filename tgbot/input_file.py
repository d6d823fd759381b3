"""Contents of a file to be uploaded."""

from __future__ import annotations

import os
from dataclasses import dataclass

from tgbot import file_tools
from tgbot.string_tools import split


@dataclass
class InputFile:
    """File contents together with their MIME type and file name."""

    data: bytes = b""
    mime_type: str = ""
    file_name: str = ""

    @classmethod
    def from_file(cls, file_path: str | os.PathLike, mime_type: str) -> "InputFile":
        """Read ``file_path`` into a new InputFile named after its last path part."""
        path = os.fspath(file_path)
        data = file_tools.read(path)
        parts = split(path, "/")
        return cls(data=data, mime_type=mime_type, file_name=parts[-1] if parts else "")