"""Shared pytest fixtures for preconditions tests."""

from __future__ import annotations

import pytest

from preconditions.config import FLOAT_FORMAT_ENV, LOG_FAILURES_ENV


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Run every test without PRECONDITIONS_* variables or a stray pyproject.toml."""
    monkeypatch.delenv(FLOAT_FORMAT_ENV, raising=False)
    monkeypatch.delenv(LOG_FAILURES_ENV, raising=False)
    monkeypatch.chdir(tmp_path)
    yield tmp_path
