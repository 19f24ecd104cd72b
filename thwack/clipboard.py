"""Clipboard access for copying the selected path.

Clipboard support is best-effort: when no backend is available the session
simply runs without copy actions.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

import pyperclip

from .errors import ClipboardError


class Clipboard(Protocol):
    def set_contents(self, text: str) -> None: ...


class PyperclipClipboard:
    """Clipboard backed by whichever copy mechanism pyperclip detects."""

    def __init__(self, copy: Callable[[str], None]) -> None:
        self._copy = copy

    def set_contents(self, text: str) -> None:
        try:
            self._copy(text)
        except pyperclip.PyperclipException as exc:
            raise ClipboardError(f"Failed to copy to the clipboard: {exc}") from exc


def open_clipboard(logger: logging.Logger) -> PyperclipClipboard | None:
    """Return a clipboard, or ``None`` (logged at warning level) when unavailable."""
    try:
        copy, _paste = pyperclip.determine_clipboard()
    except pyperclip.PyperclipException as exc:
        logger.warning("Failed to initialize clipboard: %s", exc)
        return None
    # pyperclip hands back a falsy placeholder when no mechanism exists.
    if not copy:
        logger.warning("Failed to initialize clipboard: no copy mechanism found")
        return None
    return PyperclipClipboard(copy)
