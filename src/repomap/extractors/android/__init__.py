"""Android extractors for Java/Kotlin sources and the manifest."""

from repomap.extractors.android.manifest import MANIFEST_FILENAME, ManifestExtractor
from repomap.extractors.android.source_symbols import AndroidExtractor

__all__ = [
    "MANIFEST_FILENAME",
    "AndroidExtractor",
    "ManifestExtractor",
]
