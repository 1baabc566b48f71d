"""Tests for the data model invariants."""

import pytest

from repomap.model import FileRecord, ImportEdge, ManifestInfo, Symbol


class TestSymbol:
    def test_unknown_kind(self):
        with pytest.raises(ValueError, match="Unknown symbol kind"):
            Symbol(name="x", kind="variable")

    @pytest.mark.parametrize(
        "field, value",
        [
            ("methods", ("m",)),
            ("properties", ("p",)),
            ("extends", "Base"),
            ("is_widget", False),
            ("platform_component", "activity"),
        ],
    )
    def test_function_rejects_class_only_fields(self, field, value):
        with pytest.raises(ValueError):
            Symbol(name="f", kind="function", **{field: value})

    def test_class_accepts_all_fields(self):
        sym = Symbol(
            name="Home",
            kind="class",
            methods=("build",),
            extends="StatelessWidget",
            is_widget=True,
            is_stateful=False,
            is_stateless=True,
            annotations=("@override",),
        )

        assert sym.is_stateless is True

    def test_frozen(self):
        sym = Symbol(name="f", kind="function")

        with pytest.raises(AttributeError):
            sym.name = "g"


class TestImportEdge:
    def test_empty_bindings_rejected(self):
        with pytest.raises(ValueError):
            ImportEdge(source="react", bindings=())

    def test_bindings_default_to_none(self):
        assert ImportEdge(source="fs").bindings is None


class TestFileRecord:
    @pytest.mark.parametrize(
        "kwargs, expected",
        [
            ({}, False),
            ({"has_embedded_markup": True}, False),
            ({"is_widget_lang_file": True, "is_test_file": True}, False),
            ({"symbols": (Symbol(name="f", kind="function"),)}, True),
            ({"imports": (ImportEdge(source="x"),)}, True),
            ({"custom_markup_names": ("Foo",)}, True),
            ({"manifest_info": ManifestInfo(package="com.app")}, True),
        ],
    )
    def test_has_content(self, kwargs, expected):
        assert FileRecord(path="a", **kwargs).has_content is expected
