"""Small string helpers used when mapping request paths to files."""

from __future__ import annotations

from . import log


def remove_first(needle: str, text: str) -> str:
    """Cut ``len(needle)`` characters out of ``text``.

    The cut starts at the first character of ``text`` that occurs anywhere
    in ``needle``. When no such character exists, ``text`` is returned as is.
    """
    log.debug("Removing regex from string")
    chars = set(needle)
    index = next((i for i, ch in enumerate(text) if ch in chars), None)
    if index is None:
        return text
    log.debug("Valid index")
    return text[:index] + text[index + len(needle):]