"""Gitignore-aware path filtering.

Git itself decides what is ignored: each directory's entries are sent to
``git check-ignore --no-index`` in one batch, so nested ``.gitignore`` files,
``info/exclude`` and the global excludes file all apply, and tracked files
matching an ignore pattern are skipped too.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

GIT_DIR_NAME = ".git"

# check-ignore exits 1 when none of the given paths is ignored.
_CHECK_IGNORE_OK = (0, 1)


@dataclass(frozen=True)
class GitIgnoreMatcher:
    """Ignore oracle for one repository."""

    repo_root: Path

    def covers(self, directory: str) -> bool:
        """Whether ``directory`` (after following links) lies inside the repository."""
        real = Path(os.path.realpath(directory))
        return real == self.repo_root or self.repo_root in real.parents

    def ignored_names(self, directory: str, names: Iterable[str]) -> set[str]:
        """Return the entries of ``directory`` that git ignores.

        ``.git`` is always ignored. Directories reached through a link that
        leaves the repository have no ignore rules. Raises :class:`OSError`
        when git cannot answer.
        """
        names = list(names)
        ignored = {name for name in names if name == GIT_DIR_NAME}
        pending = [name for name in names if name != GIT_DIR_NAME]
        if not pending or not self.covers(directory):
            return ignored

        proc = subprocess.run(
            ["git", "-C", directory, "check-ignore", "--no-index", "-z", "--stdin"],
            input=b"\x00".join(os.fsencode(name) for name in pending),
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
        if proc.returncode not in _CHECK_IGNORE_OK:
            detail = os.fsdecode(proc.stderr).strip() or f"exit status {proc.returncode}"
            raise OSError(f"git check-ignore failed in {directory!r}: {detail}")
        ignored.update(os.fsdecode(raw) for raw in proc.stdout.split(b"\x00") if raw)
        return ignored


def load_gitignore_matcher(root: Path, logger: logging.Logger) -> GitIgnoreMatcher | None:
    """Find the repository containing ``root``.

    Returns ``None`` (logged) when git is unavailable or ``root`` is not
    inside a work tree.
    """
    if shutil.which("git") is None:
        logger.info("git executable not found; ignore rules are disabled")
        return None

    try:
        proc = subprocess.run(
            ["git", "-C", str(root), "rev-parse", "--show-toplevel"],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError):
        logger.info("The starting point `%s` is not a Git repository", root)
        return None

    top_level = os.fsdecode(proc.stdout.strip())
    if not top_level:
        return None
    repo_root = Path(top_level).resolve()
    logger.debug("Ignore rules for %s come from the repository at %s", root, repo_root)
    return GitIgnoreMatcher(repo_root=repo_root)
