"""HTTP clients that send requests built from ``HttpReqArg`` lists."""

from __future__ import annotations

import http.client
import secrets
import select
import socket
import ssl
import time
from abc import ABC, abstractmethod
from collections.abc import Sequence

from tgbot.http_parser import extract_body, generate_multipart_form_data, generate_request
from tgbot.request_arg import HttpReqArg
from tgbot.url import Url


class HttpClient(ABC):
    """Something that sends an HTTP request and returns the response body."""

    @abstractmethod
    def make_request(self, url: Url, args: Sequence[HttpReqArg]) -> bytes:
        """Send a request to ``url`` and return the response body.

        Without ``args`` a GET request is sent, otherwise a POST request.
        """


class SslSocketHttpClient(HttpClient):
    """Sends requests over a raw TLS socket, always to port 443 by default.

    Server certificates are not verified. If no data arrives within
    ``read_timeout`` seconds after the request is written, TimeoutError
    is raised.
    """

    def __init__(self, port: int = 443, read_timeout: float = 20.0, buffer_size: int = 1024) -> None:
        self.port = port
        self.read_timeout = read_timeout
        self.buffer_size = buffer_size

    @staticmethod
    def _context() -> ssl.SSLContext:
        context = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
        context.minimum_version = ssl.TLSVersion.TLSv1_2
        context.load_default_certs()
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
        return context

    def make_request(self, url: Url, args: Sequence[HttpReqArg]) -> bytes:
        request = generate_request(url, args, False)
        with socket.create_connection((url.host, self.port), timeout=self.read_timeout) as raw:
            with self._context().wrap_socket(raw, server_hostname=url.host) as tls:
                tls.sendall(request)
                if not tls.pending():
                    ready, _, _ = select.select([tls], [], [], self.read_timeout)
                    if not ready:
                        peer = tls.getpeername()[0]
                        raise TimeoutError(f"timeout on read from server {peer}")
                chunks = []
                while True:
                    try:
                        chunk = tls.recv(self.buffer_size)
                    except OSError:
                        break
                    if not chunk:
                        break
                    chunks.append(chunk)
        return extract_body(b"".join(chunks))


def _unique_boundary(args: Sequence[HttpReqArg]) -> str:
    while True:
        boundary = "----" + secrets.token_hex(16)
        encoded = boundary.encode("ascii")
        if not any(encoded in item.data for item in args):
            return boundary


class StdlibHttpClient(HttpClient):
    """Sends requests with ``http.client``.

    Requests with arguments are sent as multipart/form-data. The query
    part of the URL is not sent. Any transport failure is raised as
    RuntimeError.
    """

    def __init__(self, connect_timeout: float = 20.0, timeout: float = 25.0) -> None:
        self.connect_timeout = connect_timeout
        self.timeout = timeout

    def make_request(self, url: Url, args: Sequence[HttpReqArg]) -> bytes:
        if url.protocol == "https":
            connection_cls: type[http.client.HTTPConnection] = http.client.HTTPSConnection
        elif url.protocol == "http":
            connection_cls = http.client.HTTPConnection
        else:
            raise RuntimeError(f"http error: unsupported protocol {url.protocol!r}")

        headers = {"Connection": "close"}
        body = None
        if args:
            boundary = _unique_boundary(args)
            body = generate_multipart_form_data(args, boundary)
            headers["Content-Type"] = f"multipart/form-data; boundary={boundary}"
        method = "POST" if args else "GET"

        deadline = time.monotonic() + self.timeout
        connection = connection_cls(url.host, timeout=self.connect_timeout)
        try:
            connection.connect()
            connection.sock.settimeout(max(deadline - time.monotonic(), 0.001))
            connection.request(method, url.path or "/", body=body, headers=headers)
            data = connection.getresponse().read()
        except (OSError, http.client.HTTPException) as exc:
            raise RuntimeError(f"http error: {exc}") from exc
        finally:
            connection.close()
        return extract_body(data)