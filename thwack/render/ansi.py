"""Grapheme-aware text measurement and ANSI control sequences.

Paths and queries are measured one grapheme cluster at a time so that
combining marks, ZWJ emoji, and flags never split across a boundary.
Wide clusters occupy two terminal columns, everything else one.
"""

from __future__ import annotations

import grapheme
from wcwidth import wcswidth

CLEAR_SCREEN = "\033[2J"
BOLD = "\033[1m"
REVERSE = "\033[7m"
RESET = "\033[0m"
ENTER_ALTERNATE_SCREEN = "\033[?1049h"
LEAVE_ALTERNATE_SCREEN = "\033[?1049l"


def split_graphemes(text: str) -> list[str]:
    """Return the extended grapheme clusters of ``text`` in order."""
    return list(grapheme.graphemes(text))


def grapheme_width(cluster: str) -> int:
    """Return terminal column width for one grapheme cluster.

    East Asian wide/fullwidth and emoji clusters consume two columns; every
    other cluster (including ones ``wcswidth`` cannot measure) consumes one.
    """
    if not cluster:
        return 0
    return 2 if wcswidth(cluster) >= 2 else 1


def display_width(text: str) -> int:
    """Return the total terminal column width of ``text``."""
    return sum(grapheme_width(cluster) for cluster in grapheme.graphemes(text))


def move_to(column: int, row: int) -> str:
    """Cursor-position sequence for zero-based ``column``/``row``."""
    return f"\033[{max(0, row) + 1};{max(0, column) + 1}H"


def bold(text: str) -> str:
    return f"{BOLD}{text}{RESET}"
