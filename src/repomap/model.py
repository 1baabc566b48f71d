"""Dialect-agnostic data model for per-file symbol maps and the project report."""

from __future__ import annotations

from dataclasses import dataclass, field

# Fields that only make sense on a class symbol.
_CLASS_ONLY_FIELDS = (
    "properties",
    "methods",
    "extends",
    "is_widget",
    "is_stateful",
    "is_stateless",
    "platform_component",
)


@dataclass(frozen=True)
class Symbol:
    """A function or class declared in a file."""

    name: str
    kind: str  # "function", "class"
    properties: tuple[str, ...] | None = None
    methods: tuple[str, ...] | None = None
    extends: str | None = None
    is_widget: bool | None = None
    is_stateful: bool | None = None
    is_stateless: bool | None = None
    platform_component: str | None = None
    state_management_pattern: str | None = None
    annotations: tuple[str, ...] | None = None
    package_dependencies: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        if self.kind not in ("function", "class"):
            raise ValueError(f"Unknown symbol kind: {self.kind!r}")
        if self.kind == "function":
            for name in _CLASS_ONLY_FIELDS:
                if getattr(self, name) is not None:
                    raise ValueError(
                        f"Function symbol {self.name!r} cannot carry {name!r}"
                    )


@dataclass(frozen=True)
class ImportEdge:
    """A dependency reference from a file to a module or package.

    ``bindings`` is ``None`` for forms that bind no named identifiers
    (side-effect, default, namespace, ``require``); it is never empty.
    """

    source: str
    bindings: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        if self.bindings is not None and not self.bindings:
            raise ValueError(
                f"Import of {self.source!r} has an empty binding list; use None"
            )


@dataclass(frozen=True)
class ManifestInfo:
    """Package id and declared components scraped from a platform manifest."""

    package: str | None = None
    components: tuple[str, ...] | None = None


@dataclass(frozen=True)
class FileRecord:
    """Extraction output for one file.  Empty/false fields count as absent."""

    path: str
    symbols: tuple[Symbol, ...] = ()
    imports: tuple[ImportEdge, ...] = ()
    has_embedded_markup: bool = False
    custom_markup_names: tuple[str, ...] = ()
    is_widget_lang_file: bool = False
    is_widget_framework_file: bool = False
    is_platform_lang_file: bool = False
    manifest_info: ManifestInfo | None = None
    is_test_file: bool = False
    has_widget_tests: bool = False
    dominant_state_pattern: str | None = None

    @property
    def has_content(self) -> bool:
        """True if the record holds anything worth reporting."""
        return bool(
            self.symbols
            or self.imports
            or self.custom_markup_names
            or self.manifest_info is not None
        )


@dataclass(frozen=True)
class FileFailure:
    """A discovered file that could not be extracted."""

    path: str
    reason: str


@dataclass
class ProjectReport:
    """Complete project map produced by the aggregator."""

    files: list[FileRecord] = field(default_factory=list)
    uses_embedded_markup_framework: bool = False
    custom_markup_registry: list[str] = field(default_factory=list)
    failures: list[FileFailure] = field(default_factory=list)
