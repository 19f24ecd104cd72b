"""One-line key binding footer shown under the status line."""

from __future__ import annotations

from .ansi import bold

HELP_BINDINGS: tuple[tuple[str, str], ...] = (
    ("<Up>/<Ctrl-p>:", "Up"),
    ("<Down>/<Ctrl-n>:", "Down"),
    ("<Enter>:", "Execute"),
    ("<C-d>/<C-y>:", "Copy (relative/absolute)"),
)
HELP_SEPARATOR = "  "


def help_plain_text() -> str:
    return HELP_SEPARATOR.join(f"{keys} {label}" for keys, label in HELP_BINDINGS)


# Terminals narrower than the footer get no footer at all.
HELP_MIN_COLUMNS = len(help_plain_text())


def help_line() -> str:
    """Styled footer text; key names are bold."""
    return HELP_SEPARATOR.join(f"{bold(keys)} {label}" for keys, label in HELP_BINDINGS)
