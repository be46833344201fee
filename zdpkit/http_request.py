"""Parsing of HTTP request headers."""

from __future__ import annotations

import re
from enum import IntEnum
from typing import Optional, Union

MAX_URL_LENGTH = 2048
MAX_HEADER_SIZE = 8192
MAX_CONTENT_LENGTH = 1 << 20

_HEADER_END = b"\r\n\r\n"
_LINE_SPLIT = re.compile(r"\r?\n")


class HttpStatus(IntEnum):
    """Result of parsing a request header."""

    OK = 200
    BAD_REQUEST = 400
    METHOD_NOT_ALLOWED = 405
    PAYLOAD_TOO_LARGE = 413
    URI_TOO_LONG = 414
    REQUEST_HEADER_FIELDS_TOO_LARGE = 431


class HttpMethod(IntEnum):
    """Known request methods; HEAD shares its number with OPTIONS."""

    UNKNOWN = 0
    GET = 1
    PUT = 2
    POST = 3
    PATCH = 4
    DELETE = 5
    OPTIONS = 6
    HEAD = 6


_METHODS = {
    "GET": HttpMethod.GET,
    "PUT": HttpMethod.PUT,
    "POST": HttpMethod.POST,
    "PATCH": HttpMethod.PATCH,
    "DELETE": HttpMethod.DELETE,
    "OPTIONS": HttpMethod.OPTIONS,
    "HEAD": HttpMethod.HEAD,
}


class HttpRequestHeader:
    """Method, URL and header fields of an HTTP request."""

    def __init__(
        self,
        method: str = "",
        url: str = "",
        headers: Optional[dict[str, str]] = None,
    ) -> None:
        self.method = method
        self.url = url
        self._headers: dict[str, str] = {}
        for key, val in (headers or {}).items():
            self._headers[key.lower()] = val
        self.parse_status = HttpStatus.OK

    @classmethod
    def parse(cls, data: Union[bytes, str]) -> HttpRequestHeader:
        """Parse a request header; problems are reported in ``parse_status``."""
        raw = data.encode("latin-1") if isinstance(data, str) else bytes(data)
        head = raw.split(_HEADER_END, 1)[0]
        header = cls()
        if len(head) > MAX_HEADER_SIZE:
            header.parse_status = HttpStatus.REQUEST_HEADER_FIELDS_TOO_LARGE
            return header

        lines = _LINE_SPLIT.split(head.decode("latin-1"))
        parts = lines[0].split(" ")
        if len(parts) != 3 or not parts[1] or not parts[2].startswith("HTTP/"):
            header.parse_status = HttpStatus.BAD_REQUEST
            return header
        header.method, header.url = parts[0], parts[1]

        for line in lines[1:]:
            if not line:
                continue
            key, sep, val = line.partition(":")
            if not sep or not key.strip():
                header.parse_status = HttpStatus.BAD_REQUEST
                return header
            header._headers[key.strip().lower()] = val.strip()

        header.parse_status = header._check()
        return header

    def _check(self) -> HttpStatus:
        if len(self.url) > MAX_URL_LENGTH:
            return HttpStatus.URI_TOO_LONG
        if self.http_method() == HttpMethod.UNKNOWN:
            return HttpStatus.METHOD_NOT_ALLOWED
        if self.has_key("content-length"):
            text = self._headers["content-length"]
            if not text.isdigit():
                return HttpStatus.BAD_REQUEST
            if int(text) > MAX_CONTENT_LENGTH:
                return HttpStatus.PAYLOAD_TOO_LARGE
        return HttpStatus.OK

    def has_key(self, key: str) -> bool:
        """Return True if the header field ``key`` is present, ignoring case."""
        return key.lower() in self._headers

    def value(self, key: str) -> str:
        """Return the value of a header field; raise KeyError if absent."""
        try:
            return self._headers[key.lower()]
        except KeyError:
            raise KeyError(key) from None

    def content_length(self) -> int:
        """Return the Content-Length, 0 if absent or not a number."""
        text = self._headers.get("content-length", "")
        return int(text) if text.isdigit() else 0

    @property
    def path(self) -> str:
        """The URL without query string or fragment."""
        return re.split(r"[?#]", self.url, maxsplit=1)[0]

    def _components(self) -> list[str]:
        return [part for part in self.path.split("/") if part]

    def path_at(self, index: int) -> str:
        """Return path component ``index``; raise IndexError if there is none."""
        components = self._components()
        if not 0 <= index < len(components):
            raise IndexError(f"no path component {index}")
        return components[index]

    def path_components_count(self) -> int:
        return len(self._components())

    def http_method(self) -> HttpMethod:
        return _METHODS.get(self.method, HttpMethod.UNKNOWN)

    def __repr__(self) -> str:
        return f"HttpRequestHeader({self.method!r}, {self.url!r})"