"""A minimal HTTP server that hands each request body to a callback."""

from __future__ import annotations

import logging
import os
import socketserver
import threading
from collections.abc import Callable
from typing import Any, Union

from tgbot.http_parser import generate_response, parse_header

logger = logging.getLogger(__name__)

ServerHandler = Callable[[bytes, dict], Union[str, bytes]]

_HEADER_END = b"\r\n\r\n"


class _Connection(socketserver.BaseRequestHandler):
    def _read_header(self) -> tuple[bytes, int] | None:
        data = b""
        while _HEADER_END not in data:
            chunk = self.request.recv(1024)
            if not chunk:
                logger.error("error in HttpServer connection: header not received")
                return None
            data += chunk
        return data, data.index(_HEADER_END) + len(_HEADER_END)

    def handle(self) -> None:
        received = self._read_header()
        if received is None:
            return
        data, header_size = received
        headers = parse_header(data[:header_size], True)
        try:
            size = int(headers.get("Content-Length", "0"))
        except ValueError:
            size = 0
        if size <= 0:
            self.request.sendall(
                generate_response("Bad request", "text/plain", 400, "Bad request", False)
            )
            return

        body = data[header_size:]
        while len(body) < size:
            chunk = self.request.recv(max(size - len(body), 1024))
            if not chunk:
                logger.error("error in HttpServer connection: body not received")
                return
            body += chunk
        body = body[:size]

        try:
            answer = self.server.handler(body, headers)
        except Exception as exc:  # the handler is user code
            logger.error("error in HttpServer connection handler: %s", exc)
            answer = generate_response(
                "Internal server error", "text/plain", 500, "Internal server error", False
            )
        if isinstance(answer, str):
            answer = answer.encode("utf-8")
        self.request.sendall(answer)


class _TcpServer(socketserver.ThreadingMixIn, socketserver.TCPServer):
    daemon_threads = True
    allow_reuse_address = True

    def __init__(self, address: Any, handler: ServerHandler) -> None:
        self.handler = handler
        super().__init__(address, _Connection)


def _unix_server(path: str, handler: ServerHandler) -> socketserver.BaseServer:
    base = getattr(socketserver, "ThreadingUnixStreamServer", None)
    if base is None:
        raise ValueError("unix sockets are not supported on this platform")

    class _UnixServer(base):
        daemon_threads = True

        def __init__(self) -> None:
            self.handler = handler
            super().__init__(path, _Connection)

    return _UnixServer()


class HttpServer:
    """Accepts HTTP connections and answers them with ``handler``.

    ``address`` is a ``(host, port)`` pair for TCP or a filesystem path for a
    unix socket. ``handler`` receives the request body and the parsed
    headers and returns the full response. Requests without a body get a
    400 response; a failing handler produces a 500 response.
    """

    def __init__(self, address: tuple[str, int] | str | os.PathLike, handler: ServerHandler) -> None:
        if isinstance(address, (str, os.PathLike)):
            self._server = _unix_server(os.fspath(address), handler)
        else:
            self._server = _TcpServer(address, handler)
        self._lock = threading.Lock()
        self._started = False
        self._stop_requested = False

    @property
    def server_address(self) -> Any:
        """The address the server is bound to."""
        return self._server.server_address

    def start(self) -> None:
        """Serve connections until ``stop`` is called."""
        with self._lock:
            self._started = True
            stop_requested = self._stop_requested
        try:
            if not stop_requested:
                self._server.serve_forever(poll_interval=0.05)
        finally:
            self._server.server_close()

    def stop(self) -> None:
        """Stop receiving new connections."""
        with self._lock:
            self._stop_requested = True
            started = self._started
        if started:
            self._server.shutdown()