"""Shared pytest fixtures for the full cleanpaste test suite."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _isolate_cleanpaste_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop `CLEANPASTE_*` variables so host settings never leak into tests."""

    for key in (
        "CLEANPASTE_REMOVE_REFERENCE_MARKS",
        "CLEANPASTE_REMOVE_EXTRA_SPACES",
        "CLEANPASTE_REMOVE_NEWLINES",
        "CLEANPASTE_CONVERT_FULL_WIDTH",
    ):
        monkeypatch.delenv(key, raising=False)
