# tgbot

Building blocks for chat bots that talk to an HTTP bot API. The package uses
only the Python standard library.

## Modules

- `tgbot.url.Url`: a frozen dataclass with `protocol`, `host`, `path`, `query`
  and `fragment`. `Url.parse("https://example.com/path?a=1#top")` splits a URL
  string. The path keeps its leading `/`. The query and fragment drop their
  `?` and `#` markers.
- `tgbot.request_arg.HttpReqArg`: one form field of a request, given as `name`
  and `value`, with optional `is_file`, `mime_type` (default `"text/plain"`)
  and `file_name`. A value that is not `str` or `bytes` is turned into text;
  booleans become `"1"` or `"0"`. The `data` property gives the value as bytes.
- `tgbot.http_parser`: builds and takes apart raw HTTP/1.1 messages.
  - `generate_request(url, args, is_keep_alive)` returns the request as bytes.
    It is a GET when `args` is empty. Otherwise it is a POST: URL-encoded, or
    multipart/form-data when any argument is a file.
  - The other builders are `generate_multipart_form_data`,
    `generate_multipart_boundary`, `generate_www_form_urlencoded` and
    `generate_response`.
  - `parse_header(data, is_request)` returns a dict of header fields.
    Requests also get `_method` and `_path`; responses get `_status`.
  - `extract_body(data)` returns what follows the blank line, or the whole
    input when there is none.
- `tgbot.http_client`: `HttpClient` is an abstract base with
  `make_request(url, args)`, which returns the response body as bytes.
  - `SslSocketHttpClient` writes the request from `generate_request` over a TLS
    socket, to port 443 unless told otherwise. It does **not** verify server
    certificates. It raises `TimeoutError` when no data arrives within
    `read_timeout` seconds (default 20).
  - `StdlibHttpClient` uses `http.client`. It handles `http` and `https` URLs
    and sends any arguments as multipart/form-data. It does not send the
    query part of the URL. Any transport failure, or an unsupported protocol,
    raises `RuntimeError`.
- `tgbot.http_server.HttpServer(address, handler)`: a threaded HTTP server.
  `address` is a `(host, port)` pair, or a filesystem path for a unix socket.
  `handler(body, headers)` receives the request body as bytes and the parsed
  headers, and must return the complete response, for example one built with
  `generate_response`.
  - A request without a positive `Content-Length` gets a 400 response.
  - A handler that raises produces a 500 response.
  - `start()` serves until `stop()` is called. `server_address` gives the
    bound address.
- `tgbot.long_poll.TgLongPoll(api, event_handler, limit=100, timeout=10,
  allow_updates=None)`: `start()` makes one poll. It calls
  `api.get_updates(offset, limit, timeout, allowed_updates)` and passes each
  update to `event_handler.handle_update(update)`. It then moves the offset
  past the highest `update_id` it has seen, and `last_update_id` reports that
  offset. Call `start()` in a loop.
- `tgbot.string_tools`: `starts_with`, `ends_with`, `split`,
  `generate_random_string`, `url_encode` and `url_decode`. `url_decode`
  raises `ValueError` on a bad `%` escape.
- `tgbot.file_tools`: `read(file_path)` returns the file's bytes.
  `write(content, file_path)` replaces the file's contents.
- Data objects (dataclasses with empty or zero defaults):
  - `tgbot.basic_types`: `PhotoSize`, `Animation`, `Audio`, `BotCommand`,
    `User`, `Contact`, `File`, `Location`, `MaskPosition`, `PollOption`,
    `StickerSet`, `UserProfilePhotos`, `Video`.
  - `tgbot.interaction_types`: `GenericReply`, `InlineKeyboardMarkup`,
    `ReplyKeyboardMarkup`, `CallbackQuery`, `ChatPermissions`,
    `GameHighScore`, `Invoice`, `ShippingAddress`, `OrderInfo`,
    `ResponseParameters`, `ShippingQuery`, `WebhookInfo`.
  - `tgbot.inline_query_result`: `InlineQueryResult` and its subclasses
    `InlineQueryResultAudio`, `InlineQueryResultCachedMpeg4Gif`,
    `InlineQueryResultCachedVideo`, `InlineQueryResultGame`,
    `InlineQueryResultGif`, `InlineQueryResultPhoto` and
    `InlineQueryResultVoice`. Each subclass sets `type` itself, for example
    `"mpeg4_gif"` or `"photo"`.
  - `tgbot.input_file.InputFile`: holds `data`, `mime_type` and `file_name`.
    `InputFile.from_file(path, mime_type)` reads a file and names the result
    after the last part of its path.
  - `tgbot.input_media`: `InputMedia`, whose `type` is an `InputMediaType`
    (`PHOTO`, `VIDEO`, `ANIMATION`, `DOCUMENT` or `AUDIO`).

## Example

```python
from tgbot.url import Url
from tgbot.request_arg import HttpReqArg
from tgbot.http_parser import generate_request, parse_header, extract_body
from tgbot.input_file import InputFile

url = Url.parse("https://api.example.com/sendMessage")
args = [HttpReqArg("chat_id", 42), HttpReqArg("text", "hello")]
request = generate_request(url, args, False)
print(parse_header(request, True)["_method"])   # POST
print(extract_body(request))                    # b'chat_id=42&text=hello'

photo = InputFile.from_file("picture.png", "image/png")
print(photo.file_name, len(photo.data))
```

## What it does not do

The package has no object that calls bot API methods such as sending messages.
It does not turn JSON responses or webhook bodies into the data objects above,
and it has no event dispatcher. `TgLongPoll` and `HttpServer` work with
whatever API object, event handler and request handler you give them.

## Running the tests

```
pip install -e ".[test]"
pytest
```