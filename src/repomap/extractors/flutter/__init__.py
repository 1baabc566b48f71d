"""Flutter/Dart extractors."""

from repomap.extractors.flutter.source_symbols import FlutterExtractor

__all__ = ["FlutterExtractor"]
