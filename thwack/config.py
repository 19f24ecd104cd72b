"""Persistent JSON config helpers.

Supplies user defaults for the exec command, status line, and ignore policy.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "thwack"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _load_nonempty_string(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_exec_command() -> str | None:
    """Load the command run on Enter, ``None`` when unset/invalid."""
    return _load_nonempty_string("exec")


def load_status_line() -> str | None:
    """Load the raw status-line mode name; validation happens in preferences."""
    return _load_nonempty_string("status_line")


def load_gitignore() -> bool | None:
    """Return the persisted ignore-policy toggle.

    Only explicit boolean values are accepted; anything else is ``None``.
    """
    value = load_config().get("gitignore")
    return value if isinstance(value, bool) else None
