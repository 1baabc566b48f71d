"""Select the extractor for a file and run it."""

from __future__ import annotations

from pathlib import Path, PurePosixPath

from repomap.extractors.android import (
    MANIFEST_FILENAME,
    AndroidExtractor,
    ManifestExtractor,
)
from repomap.extractors.base import Extractor
from repomap.extractors.ecmascript import EXTENSION_GRAMMARS, EcmaScriptExtractor
from repomap.extractors.flutter import FlutterExtractor
from repomap.model import FileRecord

WIDGET_LANG_EXTENSIONS = {".dart"}
PLATFORM_LANG_EXTENSIONS = {".java", ".kt"}

SUPPORTED_EXTENSIONS = (
    set(EXTENSION_GRAMMARS) | WIDGET_LANG_EXTENSIONS | PLATFORM_LANG_EXTENSIONS
)


def is_supported(path: str) -> bool:
    """Return True if some extractor claims *path*."""
    pure = PurePosixPath(path)
    return (
        pure.name == MANIFEST_FILENAME or pure.suffix.lower() in SUPPORTED_EXTENSIONS
    )


def select_extractor(path: str) -> Extractor | None:
    """Return the extractor for *path*, or None if the file is not mapped."""
    pure = PurePosixPath(path)
    if pure.name == MANIFEST_FILENAME:
        return ManifestExtractor()

    ext = pure.suffix.lower()
    grammar = EXTENSION_GRAMMARS.get(ext)
    if grammar is not None:
        return EcmaScriptExtractor(grammar)
    if ext in WIDGET_LANG_EXTENSIONS:
        return FlutterExtractor()
    if ext in PLATFORM_LANG_EXTENSIONS:
        return AndroidExtractor()
    return None


def extract_file(root: Path, path: str) -> FileRecord:
    """Read *path* (relative to *root*) and extract its record.

    Read and extraction errors propagate to the caller.
    """
    extractor = select_extractor(path)
    if extractor is None:
        raise ValueError(f"No extractor for {path}")
    content = (root / path).read_text(encoding="utf-8", errors="replace")
    return extractor.extract(path, content)
