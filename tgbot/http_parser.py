"""Building and parsing raw HTTP/1.1 messages."""

from __future__ import annotations

from collections.abc import Sequence
from typing import AnyStr

from tgbot.request_arg import HttpReqArg
from tgbot.string_tools import generate_random_string, url_encode
from tgbot.url import Url

_CRLF = "\r\n"


def generate_request(url: Url, args: Sequence[HttpReqArg], is_keep_alive: bool = False) -> bytes:
    """Build a GET request, or a POST request when ``args`` is not empty."""
    connection = "keep-alive" if is_keep_alive else "close"
    head = "POST " if args else "GET "
    head += url.path
    if url.query:
        head += "?" + url.query
    head += f" HTTP/1.1\r\nHost: {url.host}\r\nConnection: {connection}\r\n"
    if not args:
        return (head + _CRLF).encode("utf-8")

    boundary = generate_multipart_boundary(args)
    if boundary:
        head += f"Content-Type: multipart/form-data; boundary={boundary}\r\n"
        body = generate_multipart_form_data(args, boundary)
    else:
        head += "Content-Type: application/x-www-form-urlencoded\r\n"
        body = generate_www_form_urlencoded(args).encode("utf-8")
    head += f"Content-Length: {len(body)}\r\n\r\n"
    return head.encode("utf-8") + body


def generate_multipart_form_data(args: Sequence[HttpReqArg], boundary: str) -> bytes:
    """Encode ``args`` as a multipart/form-data body."""
    parts = []
    for item in args:
        header = f"--{boundary}\r\nContent-Disposition: form-data; name=\"{item.name}"
        if item.is_file:
            header += f"\"; filename=\"{item.file_name}"
        header += "\"\r\n"
        if item.is_file:
            header += f"Content-Type: {item.mime_type}\r\n"
        header += _CRLF
        parts.append(header.encode("utf-8") + item.data + b"\r\n")
    parts.append(f"--{boundary}--\r\n".encode("utf-8"))
    return b"".join(parts)


def generate_multipart_boundary(args: Sequence[HttpReqArg]) -> str:
    """Return a boundary absent from every file argument, or "" if none is a file."""
    boundary = ""
    for item in args:
        if item.is_file:
            while not boundary or boundary.encode("utf-8") in item.data:
                boundary += generate_random_string(4)
    return boundary


def generate_www_form_urlencoded(args: Sequence[HttpReqArg]) -> str:
    """Encode ``args`` as an application/x-www-form-urlencoded body."""
    return "&".join(f"{url_encode(item.name)}={url_encode(item.value)}" for item in args)


def generate_response(
    data: str | bytes,
    mime_type: str,
    status_code: int,
    status_str: str,
    is_keep_alive: bool = False,
) -> bytes:
    """Build an HTTP/1.1 response carrying ``data``."""
    connection = "keep-alive" if is_keep_alive else "close"
    body = data.encode("utf-8") if isinstance(data, str) else data
    head = (
        f"HTTP/1.1 {status_code} {status_str}\r\n"
        f"Content-Type: {mime_type}\r\n"
        f"Content-Length: {len(body)}\r\n"
        f"Connection: {connection}\r\n\r\n"
    )
    return head.encode("utf-8") + body


def parse_header(data: str | bytes, is_request: bool) -> dict[str, str]:
    """Parse the header block of an HTTP message.

    Requests yield ``_method`` and ``_path``, responses yield ``_status``,
    alongside the header fields with their values stripped.
    """
    if isinstance(data, bytes):
        data = data.decode("utf-8", errors="replace")
    first_line, _, rest = data.partition(_CRLF)
    tokens = first_line.split(" ", 2)
    headers: dict[str, str] = {}
    if is_request:
        headers["_method"] = tokens[0]
        headers["_path"] = tokens[1] if len(tokens) > 1 else ""
    else:
        headers["_status"] = tokens[1] if len(tokens) > 1 else ""

    # Only lines terminated by CRLF count; the final fragment is dropped.
    for line in rest.split(_CRLF)[:-1]:
        if not line:
            break
        key, sep, value = line.partition(":")
        if sep:
            headers[key] = value.strip()
    return headers


def extract_body(data: AnyStr) -> AnyStr:
    """Return what follows the header block, or ``data`` itself if there is none."""
    separator = b"\r\n\r\n" if isinstance(data, bytes) else "\r\n\r\n"
    head_end = data.find(separator)
    if head_end == -1:
        return data
    return data[head_end + 4:]