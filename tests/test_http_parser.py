import pytest

from tgbot.http_parser import (
    extract_body,
    generate_multipart_boundary,
    generate_multipart_form_data,
    generate_request,
    generate_response,
    generate_www_form_urlencoded,
    parse_header,
)
from tgbot.request_arg import HttpReqArg
from tgbot.url import Url


def test_www_form_urlencoded():
    args = [HttpReqArg("a", 1), HttpReqArg("b", "x y")]
    assert generate_www_form_urlencoded(args) == "a=1&b=x%20y"
    assert generate_www_form_urlencoded([]) == ""


def test_get_request():
    url = Url.parse("http://host/path?q")
    assert generate_request(url, []) == (
        b"GET /path?q HTTP/1.1\r\nHost: host\r\nConnection: close\r\n\r\n"
    )


def test_keep_alive_header():
    request = generate_request(Url.parse("http://host/p"), [], True)
    assert b"Connection: keep-alive\r\n" in request
    assert request.endswith(b"\r\n\r\n")


def test_urlencoded_post_request():
    args = [HttpReqArg("chat_id", 5), HttpReqArg("text", "hi there")]
    request = generate_request(Url.parse("https://host/botX/sendMessage"), args)
    assert request.startswith(b"POST /botX/sendMessage HTTP/1.1\r\n")
    assert b"Content-Type: application/x-www-form-urlencoded\r\n" in request
    body = extract_body(request)
    assert body == generate_www_form_urlencoded(args).encode()
    headers = parse_header(request, True)
    assert headers["_method"] == "POST"
    assert headers["_path"] == "/botX/sendMessage"
    assert int(headers["Content-Length"]) == len(body)


def test_boundary_without_files_is_empty():
    assert generate_multipart_boundary([HttpReqArg("a", "b")]) == ""


def test_boundary_not_in_file_data():
    data = b"--xx" * 50
    args = [HttpReqArg("doc", data, True, "application/octet-stream", "d.bin")]
    for _ in range(20):
        boundary = generate_multipart_boundary(args)
        assert boundary
        assert len(boundary) % 4 == 0
        assert boundary.encode() not in data


def test_multipart_form_data_structure():
    raw = bytes([0, 1, 2, 255])
    args = [HttpReqArg("chat_id", 7), HttpReqArg("photo", raw, True, "image/png", "p.png")]
    body = generate_multipart_form_data(args, "BND")
    assert body.startswith(b"--BND\r\nContent-Disposition: form-data; name=\"chat_id\"\r\n\r\n7\r\n")
    assert b"name=\"photo\"; filename=\"p.png\"\r\nContent-Type: image/png\r\n\r\n" + raw in body
    assert body.endswith(b"--BND--\r\n")
    assert body.count(b"--BND\r\n") == 2


def test_multipart_post_request():
    raw = b"file-contents"
    args = [HttpReqArg("doc", raw, True, "text/plain", "f.txt")]
    request = generate_request(Url.parse("https://host/up"), args)
    headers = parse_header(request, True)
    content_type = headers["Content-Type"]
    assert content_type.startswith("multipart/form-data; boundary=")
    boundary = content_type.split("boundary=", 1)[1]
    body = extract_body(request)
    assert body.endswith(f"--{boundary}--\r\n".encode())
    assert int(headers["Content-Length"]) == len(body)


def test_generate_response_round_trip():
    response = generate_response("Bad request", "text/plain", 400, "Bad request", False)
    assert response.startswith(b"HTTP/1.1 400 Bad request\r\n")
    headers = parse_header(response, False)
    assert headers["_status"] == "400"
    assert headers["Content-Type"] == "text/plain"
    assert headers["Connection"] == "close"
    assert extract_body(response) == b"Bad request"
    assert int(headers["Content-Length"]) == len(b"Bad request")


def test_parse_header_request_strips_values():
    data = "POST /hook HTTP/1.1\r\nHost: example.com\r\nContent-Length:   12  \r\n\r\n"
    headers = parse_header(data, True)
    assert headers["_method"] == "POST"
    assert headers["_path"] == "/hook"
    assert headers["Host"] == "example.com"
    assert headers["Content-Length"] == "12"


def test_parse_header_stops_at_blank_line():
    data = "GET / HTTP/1.1\r\nA: 1\r\n\r\nB: 2\r\n"
    headers = parse_header(data, True)
    assert headers["A"] == "1"
    assert "B" not in headers


@pytest.mark.parametrize("data", ["no separator here", b"raw bytes only"])
def test_extract_body_without_separator(data):
    assert extract_body(data) == data


def test_extract_body_str():
    assert extract_body("H: v\r\n\r\nbody\r\n\r\nmore") == "body\r\n\r\nmore"