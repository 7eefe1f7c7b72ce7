"""A minimal HTTP/1.1 client over plain TCP sockets."""

from __future__ import annotations

import re
import socket
import threading
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from mhttpclient.params import (
    build_array_params_get_url,
    build_object_params_get_url,
)

__all__ = [
    "HttpClientError",
    "HttpMethod",
    "HttpResponse",
    "UrlComponents",
    "parse_url",
    "parse_response",
    "build_request",
    "http_request_sync",
    "http_get_sync",
    "http_get_json_sync",
    "http_get_object_params_json_sync",
    "http_get_array_params_json_sync",
    "http_post_sync",
    "http_post_json_sync",
    "http_post_form_sync",
    "http_request_async",
    "http_get_async",
    "http_post_json_async",
    "http_post_form_async",
]

DEFAULT_PORT = 80
BUFFER_SIZE = 4096

ACCEPT_JSON = "Accept: application/json"
CONTENT_TYPE_JSON = "Content-Type: application/json"
CONTENT_TYPE_FORM = "Content-Type: application/x-www-form-urlencoded"

_LEADING_INT_TEXT = re.compile(r"\s*([+-]?\d+)")
_LEADING_INT_BYTES = re.compile(rb"\s*([+-]?\d+)")

Body = Union[str, bytes]
Callback = Callable[[Optional["HttpResponse"], Any], None]


class HttpClientError(Exception):
    """Raised when a request cannot be made or its reply cannot be read."""


class HttpMethod(str, Enum):
    """Supported request methods."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass(frozen=True)
class HttpResponse:
    """A parsed HTTP response."""

    status_code: int
    headers: str
    body: bytes

    @property
    def body_len(self) -> int:
        return len(self.body)

    @property
    def text(self) -> str:
        """The body decoded as UTF-8."""
        return self.body.decode("utf-8", errors="replace")


@dataclass(frozen=True)
class UrlComponents:
    """Host, port and path of a request URL."""

    host: str
    path: str
    port: int


def _leading_int(match: Optional[re.Match]) -> int:
    return int(match.group(1)) if match else 0


def parse_url(url: str) -> UrlComponents:
    """Split an http:// URL (scheme optional) into host, port and path."""
    lowered = url.lower()
    rest = url
    if lowered.startswith("http://"):
        rest = url[7:]
    elif lowered.startswith("https://"):
        raise HttpClientError("HTTPS is not supported")

    end = len(rest)
    for stop in ":/?":
        found = rest.find(stop)
        if found != -1:
            end = min(end, found)
    host = rest[:end]
    rest = rest[end:]

    if rest.startswith(":"):
        rest = rest[1:]
        port = _leading_int(_LEADING_INT_TEXT.match(rest))
        digits = len(rest) - len(rest.lstrip("0123456789"))
        rest = rest[digits:]
    else:
        port = DEFAULT_PORT

    return UrlComponents(host=host, path=rest or "/", port=port)


def parse_response(data: bytes) -> HttpResponse:
    """Parse a raw HTTP response into status code, header block and body."""
    data = bytes(data)
    if not data.startswith(b"HTTP/"):
        raise HttpClientError("malformed response: missing HTTP status line")
    end = len(data)
    pos = 5

    while pos < end and data[pos] not in b" \0":
        pos += 1
    if pos < end and data[pos] == 0x20:
        pos += 1

    status_code = _leading_int(_LEADING_INT_BYTES.match(data, pos))
    while pos < end and data[pos] not in b"\r\n\0":
        pos += 1

    headers_start = pos
    while pos < end and data[pos] != 0:
        if data[pos : pos + 2] == b"\r\n" and data[pos + 2 : pos + 3] in (b"\r", b"\n"):
            break
        pos += 1
    headers = data[headers_start:pos].decode("latin-1")

    while pos < end and data[pos] in b"\r\n":
        pos += 1

    return HttpResponse(status_code=status_code, headers=headers, body=data[pos:])


def _encode_body(body: Body) -> bytes:
    return body.encode("utf-8") if isinstance(body, str) else bytes(body)


def build_request(
    components: UrlComponents,
    method: Union[HttpMethod, str] = HttpMethod.GET,
    headers: Optional[str] = None,
    body: Optional[Body] = None,
) -> bytes:
    """Serialise a request with a Host header and Connection: close."""
    method = HttpMethod(method)
    head = (
        f"{method.value} {components.path} HTTP/1.1\r\n"
        f"Host: {components.host}\r\n"
        "Connection: close\r\n"
    )
    if headers:
        head += f"{headers}\r\n"
    if body is None:
        return (head + "\r\n").encode("utf-8")
    payload = _encode_body(body)
    head += f"Content-Length: {len(payload)}\r\n\r\n"
    return head.encode("utf-8") + payload


def http_request_sync(
    url: str,
    method: Union[HttpMethod, str] = HttpMethod.GET,
    headers: Optional[str] = None,
    body: Optional[Body] = None,
) -> HttpResponse:
    """Send a request and block until the server closes the connection."""
    components = parse_url(url)
    request = build_request(components, method, headers, body)
    chunks = []
    try:
        with socket.create_connection((components.host, components.port)) as sock:
            sock.sendall(request)
            while True:
                chunk = sock.recv(BUFFER_SIZE)
                if not chunk:
                    break
                chunks.append(chunk)
    except OSError as exc:
        raise HttpClientError(
            f"cannot reach {components.host}:{components.port}: {exc}"
        ) from exc

    data = b"".join(chunks)
    if not data:
        raise HttpClientError("empty response")
    return parse_response(data)


def http_get_sync(url: str, headers: Optional[str] = None) -> HttpResponse:
    """Send a GET request."""
    return http_request_sync(url, HttpMethod.GET, headers, None)


def http_get_json_sync(url: str) -> HttpResponse:
    """Send a GET request that accepts JSON."""
    return http_get_sync(url, ACCEPT_JSON)


def http_get_object_params_json_sync(
    url: str, params: Optional[Iterable[tuple[str, str]]]
) -> HttpResponse:
    """Send a JSON GET request with encoded key/value query parameters."""
    return http_get_sync(build_object_params_get_url(url, params), ACCEPT_JSON)


def http_get_array_params_json_sync(
    url: str, params: Sequence[Optional[str]]
) -> HttpResponse:
    """Send a JSON GET request with a flat key, value, ... parameter list."""
    return http_get_sync(build_array_params_get_url(url, params), ACCEPT_JSON)


def http_post_sync(url: str, headers: Optional[str], body: Optional[Body]) -> HttpResponse:
    """Send a POST request."""
    return http_request_sync(url, HttpMethod.POST, headers, body)


def http_post_json_sync(url: str, body: Body) -> HttpResponse:
    """POST a JSON body."""
    return http_post_sync(url, CONTENT_TYPE_JSON, body)


def http_post_form_sync(url: str, body: Body) -> HttpResponse:
    """POST a form-encoded body."""
    return http_post_sync(url, CONTENT_TYPE_FORM, body)


def http_request_async(
    url: str,
    method: Union[HttpMethod, str] = HttpMethod.GET,
    headers: Optional[str] = None,
    body: Optional[Body] = None,
    callback: Optional[Callback] = None,
    user_data: Any = None,
) -> threading.Thread:
    """Run a request on a daemon thread and hand the result to the callback.

    The callback receives None as the response when the request fails.
    """
    method = HttpMethod(method)

    def worker() -> None:
        try:
            response: Optional[HttpResponse] = http_request_sync(url, method, headers, body)
        except HttpClientError:
            response = None
        if callback is not None:
            callback(response, user_data)

    thread = threading.Thread(target=worker, daemon=True)
    thread.start()
    return thread


def http_get_async(
    url: str, callback: Optional[Callback] = None, user_data: Any = None
) -> threading.Thread:
    """Send a GET request in the background."""
    return http_request_async(url, HttpMethod.GET, None, None, callback, user_data)


def http_post_json_async(
    url: str, json_body: Body, callback: Optional[Callback] = None, user_data: Any = None
) -> threading.Thread:
    """POST a JSON body in the background."""
    return http_request_async(
        url, HttpMethod.POST, CONTENT_TYPE_JSON, json_body, callback, user_data
    )


def http_post_form_async(
    url: str, form_data: Body, callback: Optional[Callback] = None, user_data: Any = None
) -> threading.Thread:
    """POST a form-encoded body in the background."""
    return http_request_async(
        url, HttpMethod.POST, CONTENT_TYPE_FORM, form_data, callback, user_data
    )