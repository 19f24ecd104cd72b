"""Editable search query with a grapheme-indexed cursor.

The buffer stores one grapheme cluster per slot so cursor movement and
deletion never split user-perceived characters. It also tracks the column
width left of the cursor so the renderer can place the terminal cursor
without re-measuring the whole query.
"""

from __future__ import annotations

from .render.ansi import grapheme_width, split_graphemes


class Query:
    """Search string plus insertion point."""

    def __init__(self, value: str = "") -> None:
        self._graphemes: list[str] = split_graphemes(value)
        self._cursor = len(self._graphemes)
        self._cursor_column = sum(grapheme_width(g) for g in self._graphemes)

    @property
    def cursor(self) -> int:
        """Insertion index in graphemes, always within ``0..len(self)``."""
        return self._cursor

    @property
    def cursor_column(self) -> int:
        """Display width of the text left of the cursor."""
        return self._cursor_column

    @property
    def graphemes(self) -> tuple[str, ...]:
        return tuple(self._graphemes)

    def __len__(self) -> int:
        return len(self._graphemes)

    def __str__(self) -> str:
        return "".join(self._graphemes)

    def __repr__(self) -> str:
        return f"Query({str(self)!r}, cursor={self._cursor})"

    def push(self, text: str) -> int:
        """Insert ``text`` at the cursor and advance past it.

        Text that extends the grapheme before the cursor (a combining mark or
        the rest of a ZWJ sequence) joins that cluster. Returns the column
        width added left of the cursor.
        """
        if not text:
            return 0
        left = split_graphemes("".join(self._graphemes[: self._cursor]) + text)
        self._graphemes[: self._cursor] = left
        self._cursor = len(left)
        column = sum(grapheme_width(g) for g in left)
        delta = column - self._cursor_column
        self._cursor_column = column
        return delta

    def pop(self) -> int:
        """Delete the grapheme before the cursor; no-op at position 0.

        Returns the column width removed left of the cursor.
        """
        if self._cursor == 0:
            return 0
        self._cursor -= 1
        removed = self._graphemes.pop(self._cursor)
        delta = grapheme_width(removed)
        self._cursor_column -= delta
        return delta

    def move_left(self) -> int:
        """Move the cursor one grapheme left; returns the column delta."""
        if self._cursor == 0:
            return 0
        self._cursor -= 1
        delta = grapheme_width(self._graphemes[self._cursor])
        self._cursor_column -= delta
        return delta

    def move_right(self) -> int:
        """Move the cursor one grapheme right; returns the column delta."""
        if self._cursor >= len(self._graphemes):
            return 0
        delta = grapheme_width(self._graphemes[self._cursor])
        self._cursor += 1
        self._cursor_column += delta
        return delta
