"""Shared pytest setup.

Tests import ``thwack`` from this checkout, and never see the user's real
config file.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_CHECKOUT = str(Path(__file__).resolve().parents[1])
if _CHECKOUT not in sys.path:
    sys.path.insert(0, _CHECKOUT)


@pytest.fixture(autouse=True)
def _no_user_config(tmp_path, monkeypatch):
    monkeypatch.setattr("thwack.config.CONFIG_PATH", tmp_path / "config.json")
