"""Public package surface for thwack.

Exports ``main`` for programmatic CLI invocation.
Most implementation lives in submodules under ``thwack``.
"""

from __future__ import annotations

__version__ = "0.7.0"


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = ["__version__", "main"]
