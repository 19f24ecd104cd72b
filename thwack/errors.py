"""Exception hierarchy shared by the finder, session, and CLI layers.

Every error carries the process exit code the CLI should report.
Per-entry walk failures are logged and skipped; everything else propagates.
"""

from __future__ import annotations

FAILURE = 1


class ThwackError(Exception):
    """Base class for errors surfaced to the user with an exit code."""

    def __init__(self, message: str, exit_code: int = FAILURE) -> None:
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self) -> str:
        return self.message


class ArgsError(ThwackError):
    """Invalid command-line value or unusable starting point."""


class InvalidUnicodeError(ThwackError):
    """A path or argument could not be represented as valid unicode."""


class FileSystemError(ThwackError):
    """Filesystem access failed while walking the starting point."""


class TerminalError(ThwackError):
    """Reading from or writing to the terminal failed."""


class ClipboardError(ThwackError):
    """Clipboard backend is missing or rejected the contents."""


class ExecError(ThwackError):
    """Replacing the process with the configured command failed.

    ``exit_code`` is the underlying OS error number so the caller can exit
    with it, and ``command_line`` is the attempted command for display.
    """

    def __init__(self, command_line: str, errno: int) -> None:
        code = errno if errno > 0 else FAILURE
        super().__init__(f"`{command_line}` failed and returned {errno}", exit_code=code)
        self.command_line = command_line
        self.errno = errno
