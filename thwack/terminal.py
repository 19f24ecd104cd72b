"""Terminal control for the interactive session.

``Terminal`` is the narrow capability the session depends on; tests swap
in a scripted fake. ``TerminalController`` is the real tty implementation:
raw-mode lifecycle, buffered output, bounded input polling, and resize
detection by watching the reported window size.
"""

from __future__ import annotations

import os
import select
import shutil
import termios
import tty
from typing import Protocol

from .errors import TerminalError
from .input import has_pending_input, read_key

RESIZE = "RESIZE"
DEFAULT_SIZE = (80, 24)


class Terminal(Protocol):
    def size(self) -> tuple[int, int]: ...

    def enable_raw_mode(self) -> None: ...

    def disable_raw_mode(self) -> None: ...

    def poll(self, timeout: float) -> bool: ...

    def read_event(self) -> str: ...

    def write(self, text: str) -> None: ...

    def flush(self) -> None: ...


class TerminalController:
    """Drive a real tty through its stdin/stdout file descriptors."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state: list | None = None
        self._buffer: list[str] = []
        self._last_size: tuple[int, int] | None = None
        self._resize_pending = False

    def size(self) -> tuple[int, int]:
        """Return ``(columns, rows)``."""
        term = shutil.get_terminal_size(DEFAULT_SIZE)
        return term.columns, term.lines

    def enable_raw_mode(self) -> None:
        try:
            self._saved_tty_state = termios.tcgetattr(self.stdin_fd)
            tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        except termios.error as exc:
            raise TerminalError(f"Failed to enable raw mode: {exc}") from exc
        self._last_size = self.size()

    def disable_raw_mode(self) -> None:
        if self._saved_tty_state is None:
            return
        try:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)
        except termios.error as exc:
            raise TerminalError(f"Failed to disable raw mode: {exc}") from exc
        self._saved_tty_state = None

    def _check_resize(self) -> bool:
        current = self.size()
        if self._last_size is not None and current != self._last_size:
            self._resize_pending = True
        self._last_size = current
        return self._resize_pending

    def poll(self, timeout: float) -> bool:
        """Wait up to ``timeout`` seconds for a key press or resize."""
        if self._check_resize() or has_pending_input():
            return True
        try:
            ready, _, _ = select.select([self.stdin_fd], [], [], max(0.0, timeout))
        except OSError as exc:
            raise TerminalError(f"Failed to poll the terminal: {exc}") from exc
        if ready:
            return True
        return self._check_resize()

    def read_event(self) -> str:
        """Return the next key token, or ``RESIZE`` after a size change."""
        if self._resize_pending:
            self._resize_pending = False
            return RESIZE
        try:
            return read_key(self.stdin_fd)
        except OSError as exc:
            raise TerminalError(f"Failed to read from the terminal: {exc}") from exc

    def write(self, text: str) -> None:
        self._buffer.append(text)

    def flush(self) -> None:
        data = "".join(self._buffer).encode("utf-8")
        self._buffer.clear()
        try:
            while data:
                written = os.write(self.stdout_fd, data)
                data = data[written:]
        except OSError as exc:
            raise TerminalError(f"Failed to write to the terminal: {exc}") from exc
