"""Scrape the package id and declared components from AndroidManifest.xml."""

from __future__ import annotations

import re

from repomap.model import FileRecord, ManifestInfo

MANIFEST_FILENAME = "AndroidManifest.xml"

# Attribute scraping only; the XML is never parsed structurally.
_PACKAGE_RE = re.compile(r'\bpackage="([^"]+)"')
_COMPONENT_NAME_RE = re.compile(r'\bandroid:name="([^"]+)"')


class ManifestExtractor:
    """Extractor for Android manifest files."""

    def extract(self, path: str, content: str) -> FileRecord:
        package = _PACKAGE_RE.search(content)
        components = tuple(_COMPONENT_NAME_RE.findall(content))

        info = None
        if package or components:
            info = ManifestInfo(
                package=package.group(1) if package else None,
                components=components or None,
            )
        return FileRecord(path=path, manifest_info=info, is_platform_lang_file=True)
