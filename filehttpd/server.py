"""The listening server and its console entry point."""

from __future__ import annotations

import argparse
import socket
import sys
import threading
from types import TracebackType

from . import log
from .environment import ServerConfig, get_server_config, setup_file_environment
from .request_handler import handle_client

_BACKLOG = 5
_ACCEPT_POLL_SECONDS = 0.2
_STOP_WORDS = frozenset({"exit", "quit", "kill", "stop"})


class HTTPServer:
    """Serves the working directory over HTTP on the configured port."""

    config: ServerConfig
    port: int

    def __init__(self) -> None:
        log.info("Loading file environment...")
        setup_file_environment()
        log.info("Loaded file environment...")
        log.info("Loading server config...")
        try:
            self.config = get_server_config()
        except (OSError, ValueError):
            log.error("Could not load server config")
            raise
        log.info("Loaded server config")

        log.info("Starting server...")
        self._stopping = threading.Event()
        self._socket = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        log.info(f"Binding to port {self.config.port}")
        try:
            self._socket.bind(("", self.config.port))
            self._socket.listen(_BACKLOG)
        except OSError:
            log.error("Check to see if there is already an application running on the same port!")
            self._socket.close()
            raise
        self.port = self._socket.getsockname()[1]
        self._socket.settimeout(_ACCEPT_POLL_SECONDS)
        log.info(f"Server listening on port {self.port}")

        self._thread = threading.Thread(
            target=self._serve, name="filehttpd-accept", daemon=True
        )
        self._thread.start()
        log.info("Server is handling incoming connections")

    def _serve(self) -> None:
        while not self._stopping.is_set():
            log.debug("Waiting for connection...")
            try:
                client, _ = self._socket.accept()
            except TimeoutError:
                continue
            except OSError as exc:
                if self._stopping.is_set():
                    break
                log.error(f"Error accepting incoming client connection: {exc}")
                continue
            log.debug("Accepted incoming client connection")
            client.settimeout(None)
            threading.Thread(target=handle_client, args=(client,), daemon=True).start()

    def close(self) -> None:
        """Stop accepting connections and release the listening socket."""
        if self._stopping.is_set():
            return
        log.info("Closing server...")
        self._stopping.set()
        self._thread.join()
        self._socket.close()
        log.info("Server socket closed")

    def __enter__(self) -> HTTPServer:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def main(argv: list[str] | None = None) -> int:
    """Run the server until a stop word is read from standard input."""
    parser = argparse.ArgumentParser(
        prog="filehttpd",
        description="Serve files from the working directory over HTTP. "
        "Type exit, quit, kill or stop to shut down.",
    )
    parser.parse_args(argv)

    try:
        server = HTTPServer()
    except (OSError, ValueError) as exc:
        log.error(f"Could not start server: {exc}")
        return 1

    with server:
        for line in sys.stdin:
            if any(word in _STOP_WORDS for word in line.split()):
                break
    return 0


if __name__ == "__main__":
    sys.exit(main())