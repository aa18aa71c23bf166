"""Reading a request from a client connection and answering it."""

from __future__ import annotations

import contextlib
from typing import Any

from . import log
from .environment import get_server_config
from .handlers import handle_method
from .request import HTTPRequest, Method, method_name, parse_request
from .responses import ERROR_RESPONSE, send_html

_BUFFER_SIZE = 4095
_HEADER_END = b"\r\n\r\n"


def read_request(client: Any) -> HTTPRequest | None:
    """Read from ``client`` until the headers end and parse the request.

    Returns None if the connection is lost first.
    """
    chunks: list[bytes] = []
    while True:
        try:
            data = client.recv(_BUFFER_SIZE)
        except OSError:
            data = b""
        if not data:
            log.error("Connection lost while reading HTTP request")
            return None
        chunks.append(data)
        raw = b"".join(chunks)
        if _HEADER_END in raw:
            return parse_request(raw.decode("utf-8", errors="replace"), client)


def handle_request(request: HTTPRequest) -> None:
    """Answer ``request``: the home page for ``GET /``, otherwise by method."""
    try:
        config = get_server_config()
    except (OSError, ValueError):
        log.error("Could not load server config")
        return

    if request.method is Method.GET and request.target == "/":
        send_html(request.client, config.default_html)
        return

    handle_method(request)


def handle_client(client: Any) -> HTTPRequest | None:
    """Serve one request on ``client`` and close it; return the request served."""
    with contextlib.closing(client):
        request = read_request(client)
        if request is None:
            return None
        try:
            handle_request(request)
        except (OSError, ValueError) as exc:
            log.error(f"Failed to answer request for {request.target}: {exc}")
            with contextlib.suppress(OSError):
                client.sendall(ERROR_RESPONSE)
            return request

    log.debug(f"HTTP Method: {method_name(request.method)}")
    log.debug(f"HTTP Target: {request.target}")
    log.debug(f"HTTP Version: {request.http_version}")
    log.debug(f"HTTP Content: {request.content or '[EMPTY CONTENT]'}")
    return request