"""Per-method request handlers that serve files from the working directory."""

from __future__ import annotations

from . import log
from .environment import load_server_config, read_file
from .request import HTTPRequest, Method, method_name
from .responses import send_result
from .result import ContentType, HTTPResult, content_type_for
from .util_string import remove_first

_HTML_DIRECTORY_TYPES = frozenset(
    {ContentType.TEXT_HTML, ContentType.TEXT_CSS, ContentType.TEXT_JAVASCRIPT}
)


def _send_file(
    request: HTTPRequest, content_type: ContentType, path: str
) -> HTTPResult | None:
    data = read_file(path)
    if not data:
        return None
    result = HTTPResult(content_type, data)
    send_result(request.client, result)
    return result


def _send_download(
    request: HTTPRequest, content_type: ContentType, path: str
) -> HTTPResult | None:
    log.debug("Preparing file")
    data = read_file(path)
    if not data:
        return None
    if content_type is ContentType.TEXT_PLAIN:
        result = HTTPResult(ContentType.APPLICATION_OCTET_STREAM, data)
        result.add_content("Content-Disposition", "attachment")
    else:
        result = HTTPResult(content_type, data)
    send_result(request.client, result)
    log.debug("file sent")
    return result


def _without_action(request: HTTPRequest, expected: Method) -> None:
    """Check ``request`` carries ``expected``; such requests get no response."""
    if request.method is not expected:
        raise ValueError(
            f"{method_name(request.method)} request given to the "
            f"{method_name(expected)} handler"
        )
    log.debug(f"No action for {method_name(expected)} {request.target}")
    return None


def handle_get(request: HTTPRequest) -> HTTPResult | None:
    """Serve a GET request; return the response sent, or None if none was."""
    if request.target == "/favicon.ico":
        result = HTTPResult(ContentType.FAVICON, read_file("images/favicon.ico"))
        send_result(request.client, result)
        return result

    if request.content:
        return None

    trimmed = request.target[1:]
    content_type = content_type_for(trimmed)

    if content_type in _HTML_DIRECTORY_TYPES:
        return _send_file(request, content_type, "html/" + trimmed)

    if trimmed.startswith("page/"):
        path = "html/" + remove_first("page/", trimmed)
        if not path.endswith(".html"):
            path += ".html"
        return _send_file(request, ContentType.TEXT_HTML, path)

    if trimmed.startswith("images/"):
        log.debug("Preparing image")
        return _send_file(request, content_type, trimmed)

    if trimmed.startswith("files/"):
        return _send_download(
            request, content_type, "files/" + remove_first("files/", trimmed)
        )

    config = load_server_config()
    return _send_file(request, ContentType.TEXT_HTML, config.default_html)


def handle_post(request: HTTPRequest) -> HTTPResult | None:
    """Accept a POST request; this server sends nothing back for it."""
    return _without_action(request, Method.POST)


def handle_put(request: HTTPRequest) -> HTTPResult | None:
    """Accept a PUT request; this server sends nothing back for it."""
    return _without_action(request, Method.PUT)


def handle_delete(request: HTTPRequest) -> HTTPResult | None:
    """Accept a DELETE request; this server sends nothing back for it."""
    return _without_action(request, Method.DELETE)


_HANDLERS = {
    Method.GET: handle_get,
    Method.POST: handle_post,
    Method.PUT: handle_put,
    Method.DELETE: handle_delete,
}


def handle_method(request: HTTPRequest) -> HTTPResult | None:
    """Dispatch ``request`` to the handler for its method."""
    return _HANDLERS[request.method](request)