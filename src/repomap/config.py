"""Read optional repomap settings from .repomap.toml or pyproject.toml."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_IGNORE_DIRS = frozenset({"node_modules", ".git"})


@dataclass(frozen=True)
class Settings:
    """Discovery settings for one run."""

    exclude: frozenset[str] = field(default_factory=frozenset)
    respect_gitignore: bool = True

    @property
    def ignore_dirs(self) -> frozenset[str]:
        return DEFAULT_IGNORE_DIRS | self.exclude


def load_settings(project_dir: Path) -> Settings:
    """Return settings for *project_dir*; defaults when nothing is configured."""
    table = _read_config_table(project_dir)
    if not isinstance(table, dict):
        return Settings()

    exclude = table.get("exclude", [])
    if not isinstance(exclude, list) or not all(isinstance(e, str) for e in exclude):
        logger.warning("Ignoring invalid repomap 'exclude' setting: %r", exclude)
        exclude = []

    respect_gitignore = table.get("respect_gitignore", True)
    if not isinstance(respect_gitignore, bool):
        logger.warning(
            "Ignoring invalid repomap 'respect_gitignore' setting: %r",
            respect_gitignore,
        )
        respect_gitignore = True

    return Settings(exclude=frozenset(exclude), respect_gitignore=respect_gitignore)


def _read_config_table(project_dir: Path) -> dict | None:
    """Read the [repomap] table from .repomap.toml or [tool.repomap] from pyproject.toml."""
    # Try .repomap.toml first
    repomap_toml = project_dir / ".repomap.toml"
    if repomap_toml.exists():
        try:
            with open(repomap_toml, "rb") as f:
                data = tomllib.load(f)
            return data.get("repomap", {})
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.debug("Could not read %s: %s", repomap_toml, e)

    # Fall back to [tool.repomap] in pyproject.toml
    pyproject = project_dir / "pyproject.toml"
    if pyproject.exists():
        try:
            with open(pyproject, "rb") as f:
                data = tomllib.load(f)
            return data.get("tool", {}).get("repomap")
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.debug("Could not read %s: %s", pyproject, e)

    return None
