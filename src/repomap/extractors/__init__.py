"""Per-dialect extractors producing :class:`repomap.model.FileRecord` values."""
