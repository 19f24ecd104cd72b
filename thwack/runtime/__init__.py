"""Public runtime orchestration entry points.

This package groups the session bootstrap (`run_finder`) and the lower-level
state machine used by tests and composition code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .loop import Invoke, Session, State


def run_finder(*args, **kwargs):
    """Lazily import the bootstrap to keep package imports lightweight."""
    from .app import run_finder as _run_finder

    return _run_finder(*args, **kwargs)


def __getattr__(name: str):
    if name in {"Invoke", "Session", "State"}:
        from . import loop as _loop

        return getattr(_loop, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "Invoke",
    "Session",
    "State",
    "run_finder",
]
