"""Canonicalize and validate the directory a search is confined to."""

from __future__ import annotations

import os
from pathlib import Path

from .errors import ArgsError, InvalidUnicodeError


def resolve_starting_point(path: str) -> str:
    """Return the canonical absolute form of ``path``.

    Raises :class:`ArgsError` when the path is missing, not a directory, or
    unreadable, and :class:`InvalidUnicodeError` when it cannot be encoded.
    """
    try:
        resolved = Path(path).resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        raise ArgsError(
            f"The specified starting point {path!r} cannot be normalized. "
            "Perhaps, it might not exist or cannot be read."
        ) from exc

    text = str(resolved)
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        raise InvalidUnicodeError(f"The path {text!r} does not seem to be valid unicode.") from None

    if not resolved.is_dir():
        raise ArgsError(f"The specified starting point {path!r} is not a directory.")
    try:
        with os.scandir(text):
            pass
    except OSError as exc:
        raise ArgsError(f"The specified starting point {path!r} cannot be read: {exc.strerror}") from exc
    return text
