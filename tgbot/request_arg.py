"""A single named argument of an HTTP request."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


def _to_text(value: Any) -> str | bytes:
    if isinstance(value, (str, bytes)):
        return value
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


@dataclass
class HttpReqArg:
    """An argument of a POST request; ``value`` may hold file contents."""

    name: str
    value: Any
    is_file: bool = False
    mime_type: str = "text/plain"
    file_name: str = ""

    def __post_init__(self) -> None:
        self.value = _to_text(self.value)

    @property
    def data(self) -> bytes:
        """The value as bytes."""
        if isinstance(self.value, bytes):
            return self.value
        return self.value.encode("utf-8")