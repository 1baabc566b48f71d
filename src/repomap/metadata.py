"""Repository metadata and project descriptor loading."""

from __future__ import annotations

import json
import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


def _git(project_dir: Path, *args: str) -> str | None:
    """Run a git command and return its stripped stdout, or None on failure."""
    try:
        result = subprocess.run(
            ["git", *args],
            capture_output=True,
            text=True,
            cwd=str(project_dir),
            timeout=10,
        )
    except (FileNotFoundError, subprocess.TimeoutExpired) as e:
        logger.debug("Could not run git %s: %s", " ".join(args), e)
        return None

    if result.returncode != 0:
        logger.debug(
            "git %s failed: %s",
            " ".join(args),
            result.stderr.strip() if result.stderr else "unknown error",
        )
        return None
    return result.stdout.strip()


def get_git_info(project_dir: Path) -> dict | None:
    """Return branch, remote, last commit, and author for the repository.

    Returns None when *project_dir* is not inside a git repository or any
    of the values cannot be read.
    """
    if _git(project_dir, "rev-parse", "--git-dir") is None:
        return None

    branch = _git(project_dir, "rev-parse", "--abbrev-ref", "HEAD")
    remote_url = _git(project_dir, "config", "--get", "remote.origin.url")
    last_commit = _git(project_dir, "log", "-1", "--format=%H")
    author_name = _git(project_dir, "config", "user.name")
    author_email = _git(project_dir, "config", "user.email")

    values = (branch, remote_url, last_commit, author_name, author_email)
    if any(v is None for v in values):
        return None

    return {
        "branch": branch,
        "remoteUrl": remote_url,
        "lastCommit": last_commit,
        "author": {"name": author_name, "email": author_email},
    }


def get_project_descriptor(project_dir: Path) -> dict | None:
    """Return parsed package.json, else pubspec.yaml, else None."""
    package_json = project_dir / "package.json"
    if package_json.exists():
        try:
            return json.loads(package_json.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.debug("Could not read %s: %s", package_json, e)
            return None

    pubspec = project_dir / "pubspec.yaml"
    if pubspec.exists():
        import yaml

        try:
            with open(pubspec, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.debug("Could not read %s: %s", pubspec, e)
            return None
        return data if isinstance(data, dict) else None

    return None
