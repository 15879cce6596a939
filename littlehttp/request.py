"""Parsing of raw HTTP request text into an :class:`HttpRequest`."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Method(Enum):
    """HTTP request method."""

    GET = "GET"
    POST = "POST"
    UNINITIALIZED = "UNINITIALIZED"


class Version(Enum):
    """HTTP protocol version."""

    V1_1 = "HTTP/1.1"
    V2_0 = "HTTP/2.0"
    UNINITIALIZED = "UNINITIALIZED"


@dataclass
class HttpRequest:
    """A parsed HTTP request; ``resource`` is the request path."""

    method: Method = Method.UNINITIALIZED
    version: Version = Version.V1_1
    resource: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    msg_body: str = ""


def parse_method(s: str) -> Method:
    """Map a method token to a :class:`Method`; unknown tokens are UNINITIALIZED."""
    if s == "GET":
        return Method.GET
    if s == "POST":
        return Method.POST
    return Method.UNINITIALIZED


def parse_version(s: str) -> Version:
    """Map a version token to a :class:`Version`; only HTTP/1.1 is recognised."""
    return Version.V1_1 if s == "HTTP/1.1" else Version.UNINITIALIZED


def _lines(text: str):
    """Yield lines split on newlines, dropping a trailing carriage return."""
    if not text:
        return
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    for part in parts:
        yield part[:-1] if part.endswith("\r") else part


def _parse_request_line(line: str) -> tuple[Method, str, Version]:
    words = line.split()
    if len(words) < 3:
        raise ValueError(f"malformed request line: {line!r}")
    method, resource, version = words[:3]
    return parse_method(method), resource, parse_version(version)


def _parse_header_line(line: str) -> tuple[str, str]:
    items = line.split(":")
    key = items[0]
    value = items[1] if len(items) > 1 else ""
    return key, value


def parse_request(text: str) -> HttpRequest:
    """Parse raw request text.

    A line containing ``HTTP`` is the request line, a line containing ``:``
    is a header (only the part up to the next colon is kept as its value),
    blank lines are skipped and any other line becomes the message body.

    Raises ValueError if the request line has fewer than three words.
    """
    request = HttpRequest()
    for line in _lines(text):
        if "HTTP" in line:
            request.method, request.resource, request.version = _parse_request_line(line)
        elif ":" in line:
            key, value = _parse_header_line(line)
            request.headers[key] = value
        elif line:
            request.msg_body = line
    return request