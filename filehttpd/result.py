"""HTTP responses and content-type detection."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import ClassVar


class ContentType(Enum):
    """Kinds of content the server can send."""

    TEXT_HTML = auto()
    TEXT_CSS = auto()
    IMAGE_JPEG = auto()
    IMAGE_PNG = auto()
    IMAGE_GIF = auto()
    IMAGE_X_CON = auto()
    IMAGE_WEBP = auto()
    APPLICATION_PDF = auto()
    APPLICATION_OCTET_STREAM = auto()
    TEXT_JAVASCRIPT = auto()
    TEXT_PLAIN = auto()
    FAVICON = auto()


_EXTENSIONS = {
    ".html": ContentType.TEXT_HTML,
    ".jpg": ContentType.IMAGE_JPEG,
    ".png": ContentType.IMAGE_PNG,
    ".gif": ContentType.IMAGE_GIF,
    ".webp": ContentType.IMAGE_WEBP,
    ".ico": ContentType.FAVICON,
    ".js": ContentType.TEXT_JAVASCRIPT,
    ".css": ContentType.TEXT_CSS,
    ".pdf": ContentType.APPLICATION_PDF,
}

_MIME_TYPES = {
    ContentType.TEXT_HTML: "text/HTML",
    ContentType.IMAGE_JPEG: "image/jpeg",
    ContentType.IMAGE_WEBP: "image/webp",
    ContentType.IMAGE_PNG: "image/png",
    ContentType.IMAGE_GIF: "image/gif",
    ContentType.FAVICON: "image/x-icon",
    ContentType.TEXT_CSS: "text/css",
    ContentType.APPLICATION_PDF: "application/pdf",
    ContentType.APPLICATION_OCTET_STREAM: "application/octet-stream",
    ContentType.TEXT_JAVASCRIPT: "text/javascript",
}


def content_type_for(path: str) -> ContentType:
    """Guess the content type from everything after the first dot in ``path``."""
    dot = path.find(".")
    if dot < 0:
        return ContentType.TEXT_PLAIN
    return _EXTENSIONS.get(path[dot:], ContentType.TEXT_PLAIN)


def mime_type(content_type: ContentType) -> str:
    """Return the Content-Type header value for ``content_type``."""
    return _MIME_TYPES.get(content_type, "text/plain")


@dataclass
class HTTPResult:
    """A response ready to be written to a client."""

    HTTP_VERSION: ClassVar[str] = "HTTP/1.1"

    content_type: ContentType
    content: bytes = b""
    success: bool = True
    length: int | None = None

    def __post_init__(self) -> None:
        if isinstance(self.content, str):
            self.content = self.content.encode("utf-8")
        if self.length is None:
            self.length = len(self.content)

    def add_content(self, key: str, value: str) -> None:
        """Append a ``key: value`` line to the body; the length is left alone."""
        self.content += f"{key}: {value}\n".encode("utf-8")

    def to_bytes(self) -> bytes:
        """Serialise the status line, headers and body."""
        status = "200 OK" if self.success else "404 Not Found"
        head = (
            f"{self.HTTP_VERSION} {status}\r\n"
            f"Content-Type: {mime_type(self.content_type)}\r\n"
            f"Content-Length: {self.length}\r\n"
            "\r\n"
        )
        return head.encode("utf-8") + self.content