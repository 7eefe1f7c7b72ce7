"""Query-string helpers for building GET request URLs."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import NamedTuple, Optional, Union

__all__ = [
    "HttpParam",
    "HttpParams",
    "url_encode",
    "build_object_params_get_url",
    "build_array_params_get_url",
]

_UNRESERVED = frozenset(
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_.~"
)


class HttpParam(NamedTuple):
    """A single query parameter."""

    key: str
    value: str


class HttpParams:
    """An ordered collection of query parameters."""

    def __init__(self, params: Optional[Iterable[tuple[str, str]]] = None) -> None:
        self._items: list[HttpParam] = []
        for key, value in params or ():
            self.add(key, value)

    def add(self, key: str, value: str) -> None:
        """Append a parameter, keeping insertion order."""
        self._items.append(HttpParam(key, value))

    def __iter__(self) -> Iterator[HttpParam]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"HttpParams({self._items!r})"


def url_encode(text: Union[str, bytes, None]) -> Optional[str]:
    """Encode text for a query string: unreserved bytes kept, space as '+', others as %XX."""
    if text is None:
        return None
    raw = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    parts = []
    for byte in raw:
        if byte in _UNRESERVED:
            parts.append(chr(byte))
        elif byte == 0x20:
            parts.append("+")
        else:
            parts.append(f"%{byte:02X}")
    return "".join(parts)


def build_object_params_get_url(
    base_url: Optional[str], params: Optional[Iterable[tuple[str, str]]]
) -> str:
    """Append encoded key/value pairs to a base URL; no parameters leaves it unchanged."""
    base = base_url or ""
    pairs = list(params) if params is not None else []
    if not pairs:
        return base
    query = "&".join(f"{url_encode(key)}={url_encode(value)}" for key, value in pairs)
    return f"{base}?{query}"


def build_array_params_get_url(
    base_url: Optional[str], params: Optional[Sequence[Optional[str]]]
) -> str:
    """Build a URL from a flat key, value, key, value... sequence.

    Keys are used as given and values are encoded. A pair with a missing
    key or value is skipped.
    """
    items = list(params) if params is not None else []
    if base_url is None or not items:
        raise ValueError("a base URL and at least one parameter are required")
    if len(items) % 2:
        raise ValueError("parameters must come in key/value pairs")

    parts = [base_url, "?"]
    for index, (key, value) in enumerate(zip(items[::2], items[1::2])):
        if key is None or value is None:
            continue
        if index:
            parts.append("&")
        parts.append(f"{key}={url_encode(value)}")
    return "".join(parts)