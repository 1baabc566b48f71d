"""Render a ProjectReport to JSON."""

from __future__ import annotations

import json
import sys
from datetime import datetime, timezone
from pathlib import Path

from repomap.model import FileRecord, ImportEdge, ManifestInfo, ProjectReport, Symbol


def _symbol_to_dict(sym: Symbol) -> dict:
    d: dict = {"name": sym.name, "kind": sym.kind}
    if sym.properties:
        d["properties"] = list(sym.properties)
    if sym.methods:
        d["methods"] = list(sym.methods)
    if sym.extends is not None:
        d["extends"] = sym.extends
    # Widget flags are emitted even when false.
    if sym.is_widget is not None:
        d["isWidget"] = sym.is_widget
    if sym.is_stateful is not None:
        d["isStateful"] = sym.is_stateful
    if sym.is_stateless is not None:
        d["isStateless"] = sym.is_stateless
    if sym.platform_component is not None:
        d["platformComponent"] = sym.platform_component
    if sym.state_management_pattern is not None:
        d["stateManagementPattern"] = sym.state_management_pattern
    if sym.annotations:
        d["annotations"] = list(sym.annotations)
    if sym.package_dependencies:
        d["packageDependencies"] = list(sym.package_dependencies)
    return d


def _import_to_json(edge: ImportEdge) -> str | dict:
    """Bare-source imports serialize as a plain string."""
    if edge.bindings is None:
        return edge.source
    return {"source": edge.source, "bindings": list(edge.bindings)}


def _manifest_to_dict(info: ManifestInfo) -> dict:
    d: dict = {}
    if info.package is not None:
        d["package"] = info.package
    if info.components:
        d["components"] = list(info.components)
    return d


def record_to_dict(record: FileRecord) -> dict:
    """Serialize *record*, omitting every empty or false field."""
    d: dict = {"path": record.path}
    if record.symbols:
        d["symbols"] = [_symbol_to_dict(s) for s in record.symbols]
    if record.imports:
        d["imports"] = [_import_to_json(i) for i in record.imports]
    if record.has_embedded_markup:
        d["hasEmbeddedMarkup"] = True
    if record.custom_markup_names:
        d["customMarkupNames"] = list(record.custom_markup_names)
    if record.is_widget_lang_file:
        d["isWidgetLangFile"] = True
    if record.is_widget_framework_file:
        d["isWidgetFrameworkFile"] = True
    if record.is_platform_lang_file:
        d["isPlatformLangFile"] = True
    if record.manifest_info is not None:
        d["manifestInfo"] = _manifest_to_dict(record.manifest_info)
    if record.is_test_file:
        d["isTestFile"] = True
    if record.has_widget_tests:
        d["hasWidgetTests"] = True
    if record.dominant_state_pattern:
        d["dominantStatePattern"] = record.dominant_state_pattern
    return d


def report_to_dict(
    report: ProjectReport,
    *,
    git: dict | None = None,
    package: dict | None = None,
    timestamp: datetime | None = None,
) -> dict:
    """Wrap *report* with run metadata into the output document."""
    timestamp = timestamp or datetime.now(timezone.utc)
    project: dict = {
        "git": git,
        "package": package,
        "usesEmbeddedMarkupFramework": report.uses_embedded_markup_framework,
        "customMarkupRegistry": list(report.custom_markup_registry),
        "files": [record_to_dict(r) for r in report.files],
    }
    if report.failures:
        project["failures"] = [
            {"path": f.path, "reason": f.reason} for f in report.failures
        ]
    return {
        "timestamp": timestamp.isoformat(timespec="milliseconds").replace(
            "+00:00", "Z"
        ),
        "project": project,
    }


def render_json(
    document: dict,
    output_path: Path | None = None,
    *,
    indent: int | None = None,
) -> None:
    """Write *document* to *output_path*, or stdout when None."""
    if indent is None:
        text = json.dumps(document, separators=(",", ":"))
    else:
        text = json.dumps(document, indent=indent)

    if output_path is None:
        sys.stdout.write(text)
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text, encoding="utf-8")
