"""Shared fixtures."""

from __future__ import annotations

import pytest

from death import cli


@pytest.fixture(autouse=True)
def _no_terminal(monkeypatch):
    """Never prompt during tests, even when pytest runs with `-s` in a terminal."""
    monkeypatch.setattr(cli, "_interactive", lambda: False)
