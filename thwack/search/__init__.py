"""Search package exports.

Combines path matching, ranking, and directory walking in one import surface.
"""

from __future__ import annotations

from .candidates import CandidateList
from .matcher import MatchedPath, match, match_positions, normalize_query
from .walker import Walker

__all__ = [
    "CandidateList",
    "MatchedPath",
    "Walker",
    "match",
    "match_positions",
    "normalize_query",
]
