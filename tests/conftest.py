"""Shared pytest fixtures for tagval tests."""

from __future__ import annotations

import os
from collections.abc import Generator

import pytest


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Drop any ``TAGVAL_*`` variables from the caller's environment.

    Tests that need one set it explicitly via ``monkeypatch.setenv``.
    """
    for name in list(os.environ):
        if name.startswith("TAGVAL_"):
            monkeypatch.delenv(name)
    yield
