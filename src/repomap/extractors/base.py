"""Extractor protocol — all extractors conform to this interface."""

from __future__ import annotations

from typing import Protocol

from repomap.model import FileRecord


class Extractor(Protocol):
    """Protocol for per-file symbol extractors."""

    def extract(self, path: str, content: str) -> FileRecord:
        """Return the record for *content*, read from *path*."""
        ...
