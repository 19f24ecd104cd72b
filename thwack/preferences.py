"""Validated user preferences consumed by the session.

Defaults come from the built-in values, then the config file, then the
command line, each layer overriding the previous one.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum

from . import config
from .errors import ArgsError


class StatusLine(str, Enum):
    """What the footer shows for the selected candidate."""

    ABSOLUTE = "absolute"
    RELATIVE = "relative"
    NONE = "none"

    @classmethod
    def parse(cls, value: str) -> StatusLine:
        try:
            return cls(value)
        except ValueError:
            raise ArgsError(
                'The argument of "--status-line" must be one of "absolute", "relative", '
                f'or "none": {value!r} was given.'
            ) from None


def default_exec_command() -> str:
    return "notepad" if os.name == "nt" else "cat"


@dataclass
class Preferences:
    starting_point: str = "."
    query: str = ""
    exec_command: str = field(default_factory=default_exec_command)
    status_line: StatusLine = StatusLine.ABSOLUTE
    gitignore: bool = True
    log_file: str | None = None

    @classmethod
    def from_config(cls) -> Preferences:
        """Build preferences from defaults overlaid with the config file.

        Invalid config values are ignored individually.
        """
        prefs = cls()
        exec_command = config.load_exec_command()
        if exec_command is not None:
            prefs.exec_command = exec_command
        status_line = config.load_status_line()
        if status_line is not None:
            try:
                prefs.status_line = StatusLine(status_line)
            except ValueError:
                pass
        gitignore = config.load_gitignore()
        if gitignore is not None:
            prefs.gitignore = gitignore
        return prefs
