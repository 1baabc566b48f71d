"""Orchestrator: discover → extract → aggregate → render."""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path, PurePosixPath

from repomap.analysis import ReportAggregator
from repomap.config import Settings, load_settings
from repomap.detect import extract_file
from repomap.discovery import discover_files
from repomap.metadata import get_git_info, get_project_descriptor
from repomap.model import ProjectReport
from repomap.renderer.report import render_json, report_to_dict

logger = logging.getLogger(__name__)


def build_report(project_dir: Path, settings: Settings | None = None) -> ProjectReport:
    """Extract every supported file under *project_dir* into a report.

    Files are processed one at a time in discovery order.  A file that
    cannot be read is logged, recorded as a failure, and left out of
    ``files``.
    """
    if not project_dir.is_dir():
        raise FileNotFoundError(f"Project directory not found: {project_dir}")

    settings = settings or load_settings(project_dir)
    aggregator = ReportAggregator()
    seen: Counter[str] = Counter()

    for path in discover_files(project_dir, settings):
        seen[PurePosixPath(path).suffix.lower() or path] += 1
        try:
            record = extract_file(project_dir, path)
        except OSError as e:
            logger.warning("Skipping unreadable file %s: %s", path, e)
            aggregator.add_failure(path, str(e))
            continue
        aggregator.add(record)

    report = aggregator.report
    logger.debug("Discovered: %s", dict(seen))
    logger.debug(
        "Report: %d files, %d custom tags, %d failures",
        len(report.files),
        len(report.custom_markup_registry),
        len(report.failures),
    )
    return report


def run(
    project_dir: Path,
    *,
    output: Path | None = None,
    indent: int | None = None,
    respect_gitignore: bool | None = None,
) -> ProjectReport:
    """Run the full repomap pipeline, write the JSON document, and return the report."""
    project_dir = project_dir.resolve()
    settings = load_settings(project_dir)
    if respect_gitignore is not None:
        settings = Settings(
            exclude=settings.exclude, respect_gitignore=respect_gitignore
        )

    logger.debug("Project: %s, ignore dirs: %s", project_dir, sorted(settings.ignore_dirs))

    report = build_report(project_dir, settings)
    document = report_to_dict(
        report,
        git=get_git_info(project_dir),
        package=get_project_descriptor(project_dir),
    )
    render_json(document, output, indent=indent)

    if output is not None:
        logger.info("Generated %s", output)

    return report
