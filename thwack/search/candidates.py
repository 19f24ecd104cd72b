"""Ranked candidate list with a clamped selection cursor."""

from __future__ import annotations

from collections.abc import Iterable

from .matcher import MatchedPath, match
from .walker import Walker


class CandidateList:
    """Best-ranked matches for one query, truncated to the visible rows.

    A non-empty list starts with the first row selected; an empty list never
    has a selection.
    """

    def __init__(self, paths: Iterable[MatchedPath] = ()) -> None:
        self._paths: list[MatchedPath] = list(paths)
        self._selected: int | None = 0 if self._paths else None

    @classmethod
    def build(
        cls,
        starting_point: str,
        query: str,
        visible_capacity: int,
        walker: Walker,
    ) -> CandidateList:
        """Walk, match, and rank every path from scratch."""
        matched: list[MatchedPath] = []
        for absolute in walker.paths():
            candidate = match(query, starting_point, absolute)
            if candidate is not None:
                matched.append(candidate)
        matched.sort(key=MatchedPath.sort_key)
        return cls(matched[: max(0, visible_capacity)])

    @property
    def paths(self) -> list[MatchedPath]:
        return list(self._paths)

    @property
    def selected_index(self) -> int | None:
        return self._selected

    def __len__(self) -> int:
        return len(self._paths)

    def selected(self) -> MatchedPath | None:
        if self._selected is None:
            return None
        return self._paths[self._selected]

    def move_down(self) -> None:
        if not self._paths:
            return
        if self._selected is None:
            self._selected = 0
        elif self._selected < len(self._paths) - 1:
            self._selected += 1

    def move_up(self) -> None:
        if not self._paths or self._selected is None:
            return
        if self._selected > 0:
            self._selected -= 1
