"""Compose one full terminal frame for the finder.

Layout, top to bottom: the search prompt, one row per candidate, the status
line, and the key help footer. Rendering is side-effect free; the session
writes the returned string and flushes it.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..preferences import StatusLine
from ..query import Query
from ..search.candidates import CandidateList
from .ansi import BOLD, CLEAR_SCREEN, RESET, REVERSE, bold, display_width, move_to
from .chunks import Chunk
from .help import HELP_MIN_COLUMNS, help_line

SEARCH_PROMPT = "Search: "
SELECTED_MARKER = "> "
UNSELECTED_MARKER = "  "
NO_MATCHES_MESSAGE = "No matching files found."
UNDERLINE = "\033[4m"
NO_UNDERLINE = "\033[24m"


@dataclass(frozen=True)
class ScreenContext:
    columns: int
    rows: int
    query: Query
    candidates: CandidateList
    status_line: StatusLine


def visible_capacity(rows: int, status_line: StatusLine) -> int:
    """Number of candidate rows that fit between prompt and footer."""
    reserved = 2 if status_line is StatusLine.NONE else 3
    return max(0, rows - reserved)


def status_chunks(ctx: ScreenContext) -> list[Chunk] | None:
    """Chunks for the status line, or ``None`` when it is suppressed."""
    if ctx.status_line is StatusLine.NONE:
        return None
    selected = ctx.candidates.selected()
    if selected is None:
        return [Chunk(NO_MATCHES_MESSAGE, False)]
    if ctx.status_line is StatusLine.RELATIVE:
        return selected.relative_chunks(ctx.columns)
    return selected.absolute_chunks(ctx.columns)


def render_candidates(ctx: ScreenContext) -> str:
    out: list[str] = []
    selected_index = ctx.candidates.selected_index
    width = max(0, ctx.columns - len(SELECTED_MARKER))
    for idx, candidate in enumerate(ctx.candidates.paths):
        out.append(move_to(0, idx + 1))
        out.append(SELECTED_MARKER if idx == selected_index else UNSELECTED_MARKER)
        for chunk in candidate.relative_chunks(width):
            out.append(bold(chunk.text) if chunk.matched else chunk.text)
    return "".join(out)


def render_status(ctx: ScreenContext) -> str:
    """Bold reverse bar with the selection's path; matched graphemes underlined."""
    status = status_chunks(ctx)
    if status is None or ctx.rows < 3:
        return ""
    body: list[str] = []
    for chunk in status:
        body.append(f"{UNDERLINE}{chunk.text}{NO_UNDERLINE}" if chunk.matched else chunk.text)
    used = display_width("".join(chunk.text for chunk in status))
    padding = " " * max(0, ctx.columns - used)
    return f"{move_to(0, ctx.rows - 2)}{BOLD}{REVERSE}{''.join(body)}{padding}{RESET}"


def render_help(ctx: ScreenContext) -> str:
    if ctx.columns < HELP_MIN_COLUMNS or ctx.rows < 2:
        return ""
    return f"{move_to(0, ctx.rows - 1)}{help_line()}"


def render_frame(ctx: ScreenContext) -> str:
    """Return the escape-sequence string that redraws the whole screen.

    The terminal cursor is left at the query's insertion point.
    """
    return "".join(
        (
            CLEAR_SCREEN,
            move_to(0, 0),
            SEARCH_PROMPT,
            str(ctx.query),
            render_candidates(ctx),
            render_status(ctx),
            render_help(ctx),
            move_to(len(SEARCH_PROMPT) + ctx.query.cursor_column, 0),
        )
    )
