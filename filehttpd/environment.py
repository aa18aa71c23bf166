"""Working-directory layout and server configuration."""

from __future__ import annotations

import json
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from . import log

CONFIG_PATH = Path("resources") / "config.json"
DIRECTORIES = ("html", "resources", "images", "files")

DEFAULT_CONFIG = (
    "{\n"
    '  "loggerFilter": -1,\n'
    '  "home": "html/example.html",\n'
    '  "port": 8000\n'
    "}"
)

EXAMPLE_HTML = (
    "<!DOCTYPE html>\n"
    '<html lang="en-US">\n'
    "<head>\n"
    "    <title>Example Page</title>\n"
    "    <h1>This is an example page</h1>\n"
    "</head>\n"
    "</html>"
)


@dataclass(frozen=True)
class ServerConfig:
    """Settings read from ``resources/config.json``."""

    logger_filter: int
    port: int
    default_html: str


_instance: ServerConfig | None = None
_environment_ready = False
_lock = threading.Lock()


def ensure_existence(path: str | Path, default: str | bytes | None = None) -> bool:
    """Create ``path`` holding ``default`` unless it exists.

    Returns True when the file was created, False when it was already there.
    Raises OSError when the file cannot be created.
    """
    log.debug(f"Ensuring file {path}")
    target = Path(path)
    if target.exists():
        return False
    data = default or b""
    if isinstance(data, str):
        data = data.encode("utf-8")
    target.write_bytes(data)
    return True


def read_file(path: str | Path) -> bytes:
    """Return the contents of ``path``, or empty bytes if it cannot be read."""
    log.debug(f"Reading file {path}")
    try:
        return Path(path).read_bytes()
    except OSError:
        log.debug(f"Could not find file: {path}")
        return b""


def _require_int(data: dict[str, Any], key: str) -> int:
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"config key {key!r} must be an integer")
    return value


def _parse_config(data: Any) -> ServerConfig:
    if not isinstance(data, dict):
        raise ValueError("server config must be a JSON object")
    home = data.get("home")
    if not isinstance(home, str):
        raise ValueError("config key 'home' must be a string")
    return ServerConfig(
        logger_filter=_require_int(data, "loggerFilter"),
        port=_require_int(data, "port"),
        default_html=home,
    )


def load_server_config() -> ServerConfig:
    """Read the configuration file and make it the current configuration.

    Raises OSError if the file cannot be read and ValueError if it is invalid.
    """
    global _instance
    with CONFIG_PATH.open(encoding="utf-8") as handle:
        data = json.load(handle)
    config = _parse_config(data)
    _instance = config
    return config


def setup_file_environment() -> None:
    """Create the served directories, the default config and the home page."""
    global _environment_ready
    for name in DIRECTORIES:
        Path(name).mkdir(parents=True, exist_ok=True)

    try:
        created = ensure_existence(CONFIG_PATH, DEFAULT_CONFIG)
    except OSError as exc:
        log.error(f"Could not create server config: {exc}")
    else:
        log.debug(f"Config loaded, created: {created}")

    _environment_ready = True
    try:
        config = load_server_config()
    except (OSError, ValueError):
        log.error("Could not load server config during environment setup")
        _environment_ready = False
        return

    log.set_filter(config.logger_filter)

    try:
        created = ensure_existence(config.default_html, EXAMPLE_HTML)
    except OSError as exc:
        log.error(f"Could not create home html {config.default_html}: {exc}")
    else:
        log.debug(f"Home html loaded, created: {created}")


def get_server_config() -> ServerConfig:
    """Return the current configuration, setting up the environment if needed."""
    with _lock:
        if _instance is not None:
            return _instance
        if not _environment_ready:
            setup_file_environment()
        return load_server_config()