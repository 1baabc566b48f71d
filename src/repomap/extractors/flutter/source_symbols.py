"""Extract widget classes and state-management signals from Dart source via regex.

No Dart grammar is consulted.  Classes are found by a left-to-right scan,
and every signal other than the class's own superclass (state idiom,
annotations, package dependencies) is scraped from the whole file and
shared by all of its classes.
"""

from __future__ import annotations

import logging
import re

from repomap.extractors.flutter._registries import (
    ANNOTATIONS,
    STATE_IMPORT_FRAGMENTS,
    STATE_MANAGEMENT_PATTERNS,
    TEST_FILE_SUFFIXES,
    WIDGET_BASE_CLASSES,
)
from repomap.model import FileRecord, ImportEdge, Symbol

logger = logging.getLogger(__name__)

# class Name [<T>] [extends Super] [with Mixins] [implements I] {
# The heritage part may not run into another class declaration.
_CLASS_RE = re.compile(r"\bclass\s+(\w+)((?:(?!\bclass\b)[^{;])*)\{")
_EXTENDS_RE = re.compile(r"\bextends\s+([\w.]+)")
_GENERIC_RE = re.compile(r"<[^<>]*>")

_IMPORT_RE = re.compile(
    r"""^\s*import\s+(['"])(.+?)\1([^;]*);""",
    re.MULTILINE,
)
_SHOW_RE = re.compile(r"\bshow\s+([\w\s,]+?)(?:\bhide\b|$)")
_PACKAGE_RE = re.compile(r"\bpackage:([A-Za-z_]\w*)/")
_ANNOTATION_RE = re.compile(r"@\w+")
_IDIOM_NAME_RES = {
    idiom: re.compile(rf"\b{re.escape(idiom)}\b") for idiom in STATE_MANAGEMENT_PATTERNS
}
_WIDGET_TEST_RE = re.compile(r"\btestWidgets\s*\(|\bWidgetTester\b")

_FLUTTER_IMPORT_PREFIX = "package:flutter/"


class FlutterExtractor:
    """Heuristic extractor for Dart/Flutter source files."""

    def extract(self, path: str, content: str) -> FileRecord:
        classes = _scan_classes(content)
        superclasses = {_simple_name(sup) for _, sup in classes if sup}

        state_pattern = _detect_state_pattern(content, superclasses)
        annotations = _scan_annotations(content)
        dependencies = _scan_package_dependencies(content)

        symbols = tuple(
            _class_symbol(
                name,
                superclass,
                content,
                state_pattern=state_pattern,
                annotations=annotations,
                dependencies=dependencies,
            )
            for name, superclass in classes
        )
        imports = _scan_imports(content)

        logger.debug("Dart %s: %d classes, %d imports", path, len(symbols), len(imports))

        return FileRecord(
            path=path,
            symbols=symbols,
            imports=imports,
            is_widget_lang_file=True,
            is_widget_framework_file=any(
                edge.source.startswith(_FLUTTER_IMPORT_PREFIX) for edge in imports
            ),
            is_test_file=path.endswith(TEST_FILE_SUFFIXES),
            has_widget_tests=_WIDGET_TEST_RE.search(content) is not None,
            dominant_state_pattern=_dominant_state_pattern(imports),
        )


def _strip_generics(text: str) -> str:
    """Remove (possibly nested) ``<...>`` type argument lists."""
    previous = None
    while previous != text:
        previous = text
        text = _GENERIC_RE.sub("", text)
    return text


def _simple_name(type_name: str) -> str:
    """``material.StatelessWidget`` -> ``StatelessWidget``."""
    return type_name.rsplit(".", 1)[-1]


def _scan_classes(content: str) -> list[tuple[str, str | None]]:
    """Return ``(name, superclass)`` for every class declaration, in order."""
    classes: list[tuple[str, str | None]] = []
    for m in _CLASS_RE.finditer(content):
        heritage = _strip_generics(m.group(2))
        ext = _EXTENDS_RE.search(heritage)
        classes.append((m.group(1), ext.group(1) if ext else None))
    return classes


def _class_symbol(
    name: str,
    superclass: str | None,
    content: str,
    *,
    state_pattern: str | None,
    annotations: tuple[str, ...] | None,
    dependencies: tuple[str, ...] | None,
) -> Symbol:
    # Stateful/stateless come only from the literal declaration text, which
    # misses generic or prefixed forms that the registry still accepts.
    is_stateless = f"class {name} extends StatelessWidget" in content
    is_stateful = f"class {name} extends StatefulWidget" in content
    in_registry = (
        superclass is not None and _simple_name(superclass) in WIDGET_BASE_CLASSES
    )
    return Symbol(
        name=name,
        kind="class",
        extends=superclass,
        is_widget=in_registry or is_stateless or is_stateful,
        is_stateful=is_stateful,
        is_stateless=is_stateless,
        state_management_pattern=state_pattern,
        annotations=annotations,
        package_dependencies=dependencies,
    )


def _detect_state_pattern(content: str, superclasses: set[str]) -> str | None:
    """Return the first idiom (registry order) seen anywhere in the file.

    An idiom matches on its own name as a whole word, on any of its
    marker tokens, or on a superclass of that name.
    """
    for idiom, markers in STATE_MANAGEMENT_PATTERNS.items():
        if idiom in superclasses or _IDIOM_NAME_RES[idiom].search(content):
            return idiom
        for marker in markers:
            if marker in content or marker.rstrip("<(") in superclasses:
                return idiom
    return None


def _scan_annotations(content: str) -> tuple[str, ...] | None:
    found: dict[str, None] = {}
    for m in _ANNOTATION_RE.finditer(content):
        if m.group(0) in ANNOTATIONS:
            found.setdefault(m.group(0), None)
    return tuple(found) or None


def _scan_package_dependencies(content: str) -> tuple[str, ...] | None:
    found = dict.fromkeys(m.group(1) for m in _PACKAGE_RE.finditer(content))
    return tuple(found) or None


def _scan_imports(content: str) -> tuple[ImportEdge, ...]:
    imports: list[ImportEdge] = []
    for m in _IMPORT_RE.finditer(content):
        bindings = None
        show = _SHOW_RE.search(m.group(3).strip())
        if show:
            bindings = tuple(re.findall(r"\w+", show.group(1))) or None
        imports.append(ImportEdge(source=m.group(2), bindings=bindings))
    return tuple(imports)


def _dominant_state_pattern(imports: tuple[ImportEdge, ...]) -> str | None:
    """Join the idioms whose packages are imported, in registry order."""
    found: set[str] = set()
    for edge in imports:
        for fragment, idiom in STATE_IMPORT_FRAGMENTS:
            if fragment in edge.source:
                found.add(idiom)
    if not found:
        return None
    return ",".join(idiom for idiom in STATE_MANAGEMENT_PATTERNS if idiom in found)
