"""Fold per-file records into the project report."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from repomap.model import FileFailure, FileRecord, ProjectReport

logger = logging.getLogger(__name__)

# Import sources containing any of these mark the project as using a
# JSX-style UI framework.
MARKUP_FRAMEWORK_PACKAGES = ("react", "preact", "solid-js")


class ReportAggregator:
    """Accumulate records into a :class:`ProjectReport`, append-only."""

    def __init__(self) -> None:
        self.report = ProjectReport()
        self._registry: dict[str, None] = {}  # ordered set of custom tags

    def add(self, record: FileRecord) -> bool:
        """Fold *record* into the report.  Returns False if it was dropped as empty."""
        if not record.has_content:
            logger.debug("Dropping empty record: %s", record.path)
            return False

        self.report.files.append(record)

        for name in record.custom_markup_names:
            if name not in self._registry:
                self._registry[name] = None
                self.report.custom_markup_registry.append(name)

        if not self.report.uses_embedded_markup_framework and _uses_markup_framework(
            record
        ):
            self.report.uses_embedded_markup_framework = True

        return True

    def add_failure(self, path: str, reason: str) -> None:
        self.report.failures.append(FileFailure(path=path, reason=reason))


def _uses_markup_framework(record: FileRecord) -> bool:
    if record.has_embedded_markup:
        return True
    return any(
        package in edge.source
        for edge in record.imports
        for package in MARKUP_FRAMEWORK_PACKAGES
    )


def aggregate(records: Iterable[FileRecord]) -> ProjectReport:
    """Build a report from *records* in the given order."""
    aggregator = ReportAggregator()
    for record in records:
        aggregator.add(record)
    return aggregator.report
