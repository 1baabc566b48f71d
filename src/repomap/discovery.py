"""Walk a project tree and yield the files an extractor can handle."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from repomap.config import Settings
from repomap.detect import is_supported

logger = logging.getLogger(__name__)


def load_gitignore(project_dir: Path):
    """Return a gitignore matcher for the root .gitignore, or None."""
    import pathspec

    gitignore = project_dir / ".gitignore"
    if not gitignore.is_file():
        return None
    try:
        lines = gitignore.read_text(encoding="utf-8").splitlines()
    except OSError as e:
        logger.debug("Could not read %s: %s", gitignore, e)
        return None
    return pathspec.GitIgnoreSpec.from_lines(lines)


def discover_files(project_dir: Path, settings: Settings | None = None) -> Iterator[str]:
    """Yield POSIX paths, relative to *project_dir*, of supported files.

    Directories are walked in sorted order; ignored directories are never
    entered.
    """
    settings = settings or Settings()
    gitignore = load_gitignore(project_dir) if settings.respect_gitignore else None
    yield from _walk(project_dir, project_dir, settings.ignore_dirs, gitignore)


def _walk(directory: Path, root: Path, ignore_dirs, gitignore) -> Iterator[str]:
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        logger.warning("Could not list %s: %s", directory, e)
        return

    for entry in entries:
        if entry.name in ignore_dirs:
            continue
        rel = entry.relative_to(root).as_posix()
        if entry.is_dir():
            if gitignore is not None and gitignore.match_file(rel + "/"):
                logger.debug("Ignored directory: %s", rel)
                continue
            yield from _walk(entry, root, ignore_dirs, gitignore)
        elif entry.is_file() and is_supported(rel):
            if gitignore is not None and gitignore.match_file(rel):
                logger.debug("Ignored file: %s", rel)
                continue
            yield rel
