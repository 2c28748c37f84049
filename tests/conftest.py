"""Shared pytest fixtures and helpers for catalogr tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from catalogr.config import clear_rules_cache


@pytest.fixture(autouse=True)
def _reset_cached_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate tests from CATALOGR_* variables and cached settings."""
    for var in ("CATALOGR_LOG_LEVEL", "CATALOGR_RULES_FILE", "CATALOGR_STRICT_PATHS"):
        monkeypatch.delenv(var, raising=False)
    clear_rules_cache()
    yield
    clear_rules_cache()


@pytest.fixture
def write_rules_file(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes a rules file into tmp_path.

    The helper takes the raw YAML/JSON text and an optional file name; the
    suffix decides YAML vs JSON parsing.
    """

    def _write(content: str, name: str = "rules.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
