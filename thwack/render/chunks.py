"""Split a matched path into highlight runs that fit a column budget.

Paths wider than the budget keep their tail (where file names live) and get
a leading ``...`` marker. Joining every chunk's text always reproduces the
displayed string exactly, grapheme clusters included.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .ansi import grapheme_width, split_graphemes

ELLIPSIS = "..."


@dataclass(frozen=True)
class Chunk:
    """Maximal run of graphemes sharing one matched/unmatched flag."""

    text: str
    matched: bool

    def __str__(self) -> str:
        return self.text


def _suffix_start(widths: list[int], max_width: int) -> int | None:
    """Index where the kept suffix begins, or ``None`` when no truncation is needed.

    The suffix is the longest run of trailing clusters whose width fits in
    ``max_width`` minus the ellipsis.
    """
    if sum(widths) <= max_width:
        return None
    budget = max(0, max_width - len(ELLIPSIS))
    used = 0
    start = len(widths)
    while start > 0:
        width = widths[start - 1]
        if used + width > budget:
            break
        used += width
        start -= 1
    return start


def chunks(text: str, positions: Iterable[int], max_width: int) -> list[Chunk]:
    """Return highlight chunks for ``text`` within ``max_width`` columns.

    ``positions`` are grapheme offsets into the full ``text``.
    """
    clusters = split_graphemes(text)
    start = _suffix_start([grapheme_width(c) for c in clusters], max_width)

    result: list[Chunk] = []
    if start is None:
        start = 0
    else:
        result.append(Chunk(ELLIPSIS, False))

    matched = set(positions)
    run: list[str] = []
    run_matched = False
    for idx in range(start, len(clusters)):
        is_matched = idx in matched
        if run and is_matched != run_matched:
            result.append(Chunk("".join(run), run_matched))
            run = []
        run.append(clusters[idx])
        run_matched = is_matched
    if run:
        result.append(Chunk("".join(run), run_matched))
    return result
