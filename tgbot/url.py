"""Splitting a URL string into its parts."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class _Part(enum.Enum):
    PROTOCOL = enum.auto()
    HOST = enum.auto()
    PATH = enum.auto()
    QUERY = enum.auto()
    FRAGMENT = enum.auto()


@dataclass(frozen=True)
class Url:
    """The parts of a URL.

    ``path`` includes its leading ``/``; ``query`` and ``fragment`` exclude
    their ``?`` and ``#`` markers.
    """

    protocol: str = ""
    host: str = ""
    path: str = ""
    query: str = ""
    fragment: str = ""

    @classmethod
    def parse(cls, url: str) -> "Url":
        """Split ``url`` into protocol, host, path, query and fragment."""
        parts = {part: [] for part in _Part}
        state = _Part.PROTOCOL
        chars = iter(url)
        for char in chars:
            if state is _Part.PROTOCOL:
                if char == ":":
                    state = _Part.HOST
                    # skip the "//" that follows the scheme
                    next(chars, None)
                    next(chars, None)
                else:
                    parts[state].append(char)
            elif state is _Part.HOST:
                if char in "/?#":
                    parts[_Part.PATH].append("/")
                    state = {"/": _Part.PATH, "?": _Part.QUERY, "#": _Part.FRAGMENT}[char]
                else:
                    parts[state].append(char)
            elif state is _Part.PATH:
                if char == "?":
                    state = _Part.QUERY
                elif char == "#":
                    state = _Part.FRAGMENT
                else:
                    parts[state].append(char)
            elif state is _Part.QUERY:
                if char == "#":
                    state = _Part.FRAGMENT
                else:
                    parts[state].append(char)
            else:
                parts[state].append(char)

        return cls(
            protocol="".join(parts[_Part.PROTOCOL]),
            host="".join(parts[_Part.HOST]),
            path="".join(parts[_Part.PATH]),
            query="".join(parts[_Part.QUERY]),
            fragment="".join(parts[_Part.FRAGMENT]),
        )