"""Session bootstrap: wire collaborators, run the loop, hand off the result.

The chosen path is invoked only after the session has restored the
terminal, so the external command starts on a normal screen.
"""

from __future__ import annotations

import logging

from ..clipboard import Clipboard
from ..invoke import Invoker
from ..preferences import Preferences
from ..search.walker import Walker
from ..starting_point import resolve_starting_point
from ..terminal import Terminal
from .loop import Session


def run_finder(
    preferences: Preferences,
    logger: logging.Logger,
    terminal: Terminal,
    invoker: Invoker,
    clipboard: Clipboard | None = None,
) -> str | None:
    """Run one finder session and invoke the selection.

    Startup errors (bad starting point) raise before the terminal is
    touched. Returns the invoked path when the invoker returns (spawn-style
    invokers or tests), ``None`` when the user quit or copied.
    """
    starting_point = resolve_starting_point(preferences.starting_point)
    logger.info("Starting point: %s", starting_point)
    walker = Walker(starting_point, preferences.gitignore, logger)
    session = Session(
        preferences,
        starting_point,
        terminal,
        walker,
        logger,
        clipboard=clipboard,
    )
    path = session.run()
    if path is None:
        return None
    logger.info("Invoking `%s %s`", preferences.exec_command, path)
    invoker.invoke(preferences.exec_command, path)
    return path
