"""Pytest configuration for test isolation.

The CLI configures the ``eq_ynab`` package logger once per process and loads
``.env`` from the current working directory. Both would leak between tests
(a handler bound to a stream captured by an earlier ``CliRunner`` call, or a
developer's local ``.env``), so each test runs in its own temporary working
directory with logging reset afterwards.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from eq_ynab.logging_setup import LOG_LEVEL_ENV, reset_logging


@pytest.fixture(autouse=True)
def _isolate_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def write_csv(tmp_path: Path):
    """Write ``text`` to ``tmp_path / name`` and return the path."""

    def _write(text: str, name: str = "export.csv") -> Path:
        p = tmp_path / name
        p.write_text(text, encoding="utf-8")
        return p

    return _write
