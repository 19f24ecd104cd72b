"""Hand the chosen path to the configured command.

The command string is split like a shell would and the path is appended as
the final argument. The current process is replaced, so a successful
invocation never returns.
"""

from __future__ import annotations

import os
import shlex
from collections.abc import Callable
from typing import Protocol

from .errors import ArgsError, ExecError


class Invoker(Protocol):
    def invoke(self, command: str, path: str) -> None: ...


def split_command(command: str) -> list[str]:
    """Split ``command`` into argv words, raising :class:`ArgsError` if it cannot be used."""
    try:
        argv = shlex.split(command)
    except ValueError as exc:
        raise ArgsError(f'The argument of "--exec" cannot be parsed ({command!r}): {exc}') from exc
    if not argv:
        raise ArgsError('"--exec" needs a value. Empty string cannot be processed.')
    return argv


def command_argv(command: str, path: str) -> list[str]:
    """Return argv for running ``command`` on ``path``."""
    return [*split_command(command), path]


class ExecInvoker:
    """Replace the running process with the command (``execvp`` semantics).

    ``execvp`` is injectable so tests can observe the call without exec'ing.
    """

    def __init__(self, execvp: Callable[[str, list[str]], None] = os.execvp) -> None:
        self._execvp = execvp

    def invoke(self, command: str, path: str) -> None:
        argv = command_argv(command, path)
        try:
            self._execvp(argv[0], argv)
        except OSError as exc:
            raise ExecError(f"{command} {path}", exc.errno or 0) from exc
