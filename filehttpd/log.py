"""Coloured console logging with a process-wide level filter."""

from __future__ import annotations

import sys
from enum import IntEnum

RESET = "\033[0m"
RED = "\033[31m"
YELLOW = "\033[33m"
CYAN = "\033[36m"


class LogLevel(IntEnum):
    """Severity of a log message; higher is more severe."""

    DEBUG = -1
    INFO = 0
    WARNING = 1
    ERROR = 2


_filter: int = int(LogLevel.INFO)

_PREFIXES = {
    LogLevel.DEBUG: CYAN + "[DEBUG]",
    LogLevel.WARNING: YELLOW + "[WARNING]",
    LogLevel.ERROR: RED + "[ERROR]",
}


def set_filter(level: int) -> None:
    """Suppress every message whose level is below ``level``."""
    global _filter
    _filter = int(level)


def get_filter() -> int:
    """Return the current minimum level that gets printed."""
    return _filter


def level_prefix(level: int) -> str:
    """Return the coloured tag printed in front of a message of ``level``."""
    return _PREFIXES.get(level, RESET + "[INFO]")


def log(level: int, message: str) -> None:
    """Print ``message`` to standard output unless it is filtered out."""
    if level < _filter:
        return
    print(f"{level_prefix(level)} {message}{RESET}", file=sys.stdout, flush=True)


def debug(message: str) -> None:
    log(LogLevel.DEBUG, message)


def info(message: str) -> None:
    log(LogLevel.INFO, message)


def warning(message: str) -> None:
    log(LogLevel.WARNING, message)


def error(message: str) -> None:
    log(LogLevel.ERROR, message)