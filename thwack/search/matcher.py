"""Fuzzy path matching and ranking.

A query matches a path when every query grapheme can be found in order.
Graphemes are located right-to-left so matches cluster toward the file
name, and candidates rank by match tightness, then depth, then path text.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from ..render.ansi import split_graphemes
from ..render.chunks import Chunk, chunks

SEPARATORS = ("/", "\\")
_ASCII_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")


def _fold_ascii(cluster: str) -> str:
    # Only ASCII letters fold; "É" and "é" stay distinct.
    return cluster.translate(_ASCII_LOWER)


def normalize_query(query: str, sep: str = os.sep, altsep: str | None = os.altsep) -> str:
    """Rewrite alternate separators in ``query`` to the native one.

    On Windows this lets users type ``src/`` to match ``src\\``.
    """
    if altsep:
        return query.replace(altsep, sep)
    return query


def relative_from(starting_point: str, absolute: str) -> str:
    """Strip ``starting_point`` and one leading separator from ``absolute``."""
    if not absolute.startswith(starting_point):
        raise ValueError(f"{absolute!r} is not under starting point {starting_point!r}")
    relative = absolute[len(starting_point):]
    if relative[:1] in SEPARATORS:
        relative = relative[1:]
    return relative


def depth_of(relative: str) -> int:
    return sum(1 for ch in relative if ch in SEPARATORS)


def match_positions(query_graphemes: list[str], haystack: str) -> tuple[int, ...] | None:
    """Locate each query grapheme in ``haystack`` scanning from the right.

    Each grapheme must appear strictly left of the one matched after it.
    Returns grapheme offsets in ascending order, or ``None`` when any
    grapheme is missing.
    """
    folded = [_fold_ascii(cluster) for cluster in split_graphemes(haystack)]
    positions: list[int] = []
    end = len(folded)
    for needle in reversed(query_graphemes):
        needle = _fold_ascii(needle)
        pos = end - 1
        while pos >= 0 and folded[pos] != needle:
            pos -= 1
        if pos < 0:
            return None
        positions.append(pos)
        end = pos
    positions.reverse()
    return tuple(positions)


@dataclass(frozen=True)
class MatchedPath:
    """One candidate path that matched the current query."""

    absolute: str
    relative: str
    positions: tuple[int, ...]
    absolute_positions: tuple[int, ...]
    depth: int

    def distance(self) -> int:
        """Sum of gaps between consecutive matched positions.

        ``(1, 2, 3)`` has distance 2 and ``(1, 4, 5)`` has distance 4, so a
        contiguous match scores ``len(query) - 1``.
        """
        return sum(b - a for a, b in zip(self.positions, self.positions[1:]))

    def sort_key(self) -> tuple[int, int, str]:
        return (self.distance(), self.depth, self.relative)

    def __lt__(self, other: MatchedPath) -> bool:
        if not isinstance(other, MatchedPath):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        return self.relative

    def relative_chunks(self, max_width: int) -> list[Chunk]:
        return chunks(self.relative, self.positions, max_width)

    def absolute_chunks(self, max_width: int) -> list[Chunk]:
        return chunks(self.absolute, self.absolute_positions, max_width)


def match(query: str, starting_point: str, absolute: str) -> MatchedPath | None:
    """Score ``absolute`` against ``query``; ``None`` when it does not match.

    ``absolute`` must begin with ``starting_point`` followed by a separator.
    An empty query matches every path with no positions.
    """
    relative = relative_from(starting_point, absolute)
    query_graphemes = split_graphemes(normalize_query(query))

    positions = match_positions(query_graphemes, relative)
    if positions is None:
        return None
    absolute_positions = match_positions(query_graphemes, absolute)
    if absolute_positions is None:
        # Relative path is a suffix of the absolute one.
        return None

    return MatchedPath(
        absolute=absolute,
        relative=relative,
        positions=positions,
        absolute_positions=absolute_positions,
        depth=depth_of(relative),
    )
