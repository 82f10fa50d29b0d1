"""Shared test fixtures and helpers for logbar tests."""

from pathlib import Path

import pytest

from logbar.sinks import ListSink


@pytest.fixture
def sink() -> ListSink:
    """Return an empty in-memory sink."""
    return ListSink()


@pytest.fixture
def write_style(tmp_path: Path):
    """Return a helper that writes YAML text to a style file."""
    def _write(text: str, name: str = "style.yaml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
