"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest


@pytest.fixture
def make_project(tmp_path):
    """Return a helper that writes ``{relative_path: content}`` under tmp_path."""

    def _make(files: dict[str, str]) -> Path:
        for rel, content in files.items():
            target = tmp_path / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return tmp_path

    return _make
