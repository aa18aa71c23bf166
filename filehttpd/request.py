"""Parsing of raw HTTP request text."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

_WHITESPACE = " \t\n\r"


class Method(Enum):
    """HTTP methods the server distinguishes."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass(frozen=True)
class HTTPRequest:
    """A parsed request together with the connection it arrived on."""

    method: Method
    target: str
    http_version: str
    headers: dict[str, str] = field(default_factory=dict)
    content: str = ""
    client: Any = None


def parse_method(text: str) -> Method:
    """Map a method name to a Method; unknown names become GET."""
    try:
        return Method(text)
    except ValueError:
        return Method.GET


def method_name(method: Method) -> str:
    """Return the wire name of ``method``."""
    return method.value


def trim(text: str) -> str:
    """Strip spaces, tabs, carriage returns and newlines from both ends."""
    return text.strip(_WHITESPACE)


def parse_request(raw: str, client: Any = None) -> HTTPRequest:
    """Parse the request line, headers and body of ``raw``."""
    rest = raw
    method_text = target = version = ""

    if rest:
        line, _, rest = rest.partition("\n")
        parts = trim(line).split()
        parts += [""] * (3 - len(parts))
        method_text, target, version = parts[:3]

    headers: dict[str, str] = {}
    while rest:
        line, _, rest = rest.partition("\n")
        if trim(line) == "":
            break
        key, sep, value = line.partition(":")
        if sep:
            headers[trim(key)] = trim(value)

    return HTTPRequest(
        method=parse_method(method_text),
        target=target,
        http_version=version,
        headers=headers,
        content=rest,
        client=client,
    )