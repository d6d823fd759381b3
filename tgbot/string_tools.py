"""Small string helpers: prefix checks, splitting, random strings and URL escaping."""

from __future__ import annotations

import random
import string

_RANDOM_CHARS = (
    "qwertyuiopasdfghjklzxcvbnmQWERTYUIOPASDFGHJKLZXCVBNM1234567890"
    "-=[]\\',./!@#$%^&*()_+{}|:\"<>?`~"
)

_LEGIT_CHARS = frozenset(string.ascii_letters + string.digits + "_.-~:")

_rng = random.SystemRandom()


def starts_with(str1: str, str2: str) -> bool:
    """Return True if ``str1`` begins with ``str2``."""
    return str1.startswith(str2)


def ends_with(str1: str, str2: str) -> bool:
    """Return True if ``str1`` ends with ``str2``."""
    return str1.endswith(str2)


def split(string: str, delimiter: str) -> list[str]:
    """Split ``string`` on ``delimiter``.

    A trailing delimiter does not produce a trailing empty item, and an
    empty string yields no items at all.
    """
    parts = string.split(delimiter)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def generate_random_string(length: int) -> str:
    """Return a random string of ``length`` printable ASCII characters."""
    return "".join(_rng.choice(_RANDOM_CHARS) for _ in range(length))


def url_encode(value: str | bytes, additional_legit_chars: str = "") -> str:
    """Percent-encode every byte of ``value`` that is not a safe character."""
    data = value.encode("utf-8") if isinstance(value, str) else value
    extra = set(additional_legit_chars)
    pieces = []
    for byte in data:
        char = chr(byte)
        if byte < 0x80 and (char in _LEGIT_CHARS or char in extra):
            pieces.append(char)
        else:
            pieces.append(f"%{byte:02X}")
    return "".join(pieces)


def _hex_prefix_value(text: str) -> int:
    digits = ""
    for char in text:
        if char not in string.hexdigits:
            break
        digits += char
    if not digits:
        raise ValueError(f"invalid percent escape: %{text}")
    return int(digits, 16)


def url_decode(value: str) -> str:
    """Decode percent escapes in ``value``.

    Raises ValueError when a ``%`` is not followed by a hexadecimal digit.
    """
    result = bytearray()
    chars = iter(value)
    for char in chars:
        if char == "%":
            escape = "".join(c for _, c in zip(range(2), chars))
            result.append(_hex_prefix_value(escape) & 0xFF)
        else:
            result.extend(char.encode("utf-8"))
    return result.decode("utf-8", errors="surrogateescape")