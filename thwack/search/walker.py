"""Directory walking for candidate discovery.

Yields every file below the starting point as an absolute path string.
Unreadable entries and undecodable names are logged and skipped so one bad
entry never aborts a search.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from ..errors import FileSystemError
from ..gitignore import GitIgnoreMatcher, load_gitignore_matcher


def _is_valid_unicode(path: str) -> bool:
    # os.walk smuggles undecodable bytes through as lone surrogates.
    try:
        path.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


class Walker:
    """Walk ``starting_point`` applying the configured ignore policy.

    ``starting_point`` must already be canonical (see
    :mod:`thwack.starting_point`). Each call to :meth:`paths` performs a
    fresh walk.
    """

    def __init__(self, starting_point: str, gitignore: bool, logger: logging.Logger) -> None:
        self.starting_point = starting_point
        self.gitignore = gitignore
        self.logger = logger

    def _matcher(self) -> GitIgnoreMatcher | None:
        if not self.gitignore:
            return None
        return load_gitignore_matcher(Path(self.starting_point), self.logger)

    def _ignored_names(self, matcher: GitIgnoreMatcher, dirpath: str, names: list[str]) -> set[str]:
        try:
            return matcher.ignored_names(dirpath, names)
        except (OSError, ValueError) as exc:
            self.logger.error("Ignore check failed for %r: %s", dirpath, exc)
            return set(names)

    def _first_visit(self, dirpath: str, visited: set[tuple[int, int]]) -> bool:
        try:
            st = os.stat(dirpath)
        except OSError as exc:
            self.logger.warning("Skipping unreadable entry %r: %s", dirpath, exc)
            return False
        key = (st.st_dev, st.st_ino)
        if key in visited:
            self.logger.info("Not descending into %r again; it was already walked", dirpath)
            return False
        visited.add(key)
        return True

    def paths(self) -> Iterator[str]:
        """Yield absolute file paths below the starting point.

        Symbolic links to directories are followed; a directory reached a
        second time (a link cycle or a duplicate link) is not listed again.
        Raises :class:`FileSystemError` when the starting point itself cannot
        be listed.
        """
        matcher = self._matcher()
        visited: set[tuple[int, int]] = set()

        def on_error(exc: OSError) -> None:
            if exc.filename == self.starting_point:
                raise FileSystemError(
                    f"The starting point {self.starting_point!r} cannot be read: {exc.strerror}"
                ) from exc
            self.logger.warning("Skipping unreadable entry %r: %s", exc.filename, exc)

        for dirpath, dirnames, filenames in os.walk(self.starting_point, onerror=on_error, followlinks=True):
            if not self._first_visit(dirpath, visited):
                dirnames[:] = []
                continue
            if matcher is not None:
                ignored = self._ignored_names(matcher, dirpath, dirnames + filenames)
                dirnames[:] = [name for name in dirnames if name not in ignored]
                filenames = [name for name in filenames if name not in ignored]
            dirnames.sort()
            for filename in sorted(filenames):
                path = os.path.join(dirpath, filename)
                if not _is_valid_unicode(path):
                    self.logger.warning("The path %r does not seem to be valid unicode", path)
                    continue
                yield path
