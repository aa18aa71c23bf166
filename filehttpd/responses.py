"""Writing responses to connected clients."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from . import log
from .environment import read_file
from .result import ContentType, HTTPResult

ERROR_RESPONSE = b"HTTP/1.1 500 Internal Server Error\r\nContent-Length: 0\r\n\r\n"


def send_result(client: Any, result: HTTPResult) -> None:
    """Write the serialised ``result`` to ``client``."""
    client.sendall(result.to_bytes())


def send_html(client: Any, path: str | Path) -> HTTPResult:
    """Send the file at ``path`` as HTML and return the response sent.

    A missing file is sent as an empty page.
    """
    result = HTTPResult(ContentType.TEXT_HTML, read_file(path))
    send_result(client, result)
    log.debug(f"Responded with HTML: {path}")
    return result