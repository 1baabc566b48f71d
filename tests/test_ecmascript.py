"""Tests for the tree-sitter JavaScript/TypeScript extractor."""

import pytest

from repomap.extractors.ecmascript import EcmaScriptExtractor, Grammar
from repomap.extractors.ecmascript.ast_symbols import _HANDLERS, JsNodeKind
from repomap.extractors.ecmascript.known_tags import KNOWN_TAGS, is_known_tag
from repomap.model import ImportEdge, Symbol


def _js(content, path="src/app.js"):
    return EcmaScriptExtractor(Grammar.JAVASCRIPT).extract(path, content)


def _tsx(content, path="src/app.tsx"):
    return EcmaScriptExtractor(Grammar.TSX).extract(path, content)


def _names(record):
    return [s.name for s in record.symbols]


class TestClasses:
    def test_class_with_superclass_and_method(self):
        record = _js("class Dog extends Cat { bark() {} }")

        assert record.symbols == (
            Symbol(name="Dog", kind="class", extends="Cat", methods=("bark",)),
        )

    def test_fields_and_methods_are_partitioned(self):
        record = _js(
            """
class Counter {
  count = 0;
  static total = 0;
  increment() { this.count++; }
  reset() {}
}
"""
        )

        (counter,) = record.symbols
        assert counter.properties == ("count", "total")
        assert counter.methods == ("increment", "reset")
        assert counter.extends is None

    def test_empty_class_has_no_member_lists(self):
        record = _js("class Empty {}")

        (empty,) = record.symbols
        assert empty.properties is None
        assert empty.methods is None

    def test_nested_classes_are_flattened_in_document_order(self):
        record = _js(
            """
class Outer {
  build() {
    class Inner {
      run() {}
    }
    return Inner;
  }
}
"""
        )

        assert _names(record) == ["Outer", "Inner"]
        outer, inner = record.symbols
        assert outer.methods == ("build",)
        assert inner.methods == ("run",)

    def test_member_expression_superclass(self):
        record = _js(
            "class App extends React.Component { render() { return null; } }",
            path="src/App.jsx",
        )

        assert record.symbols[0].extends == "React.Component"

    @pytest.mark.parametrize(
        "source",
        [
            "class Dialog extends withTheme(Base) { open() {} }",
            "class Dialog extends (Base) { open() {} }",
            "class Dialog extends mixins.compose(A, B) { open() {} }",
        ],
    )
    def test_expression_superclass_is_not_a_name(self, source):
        (dialog,) = _js(source).symbols

        assert dialog.name == "Dialog"
        assert dialog.extends is None
        assert dialog.methods == ("open",)

    def test_typescript_class(self):
        record = _tsx(
            """
export abstract class Store<T> extends Base<T> implements Disposable {
  private items: T[] = [];
  abstract load(): void;
  get(index: number): T { return this.items[index]; }
}
interface Shape { area(): number }
""",
            path="src/store.ts",
        )

        assert record.symbols == (
            Symbol(
                name="Store",
                kind="class",
                extends="Base",
                properties=("items",),
                methods=("load", "get"),
            ),
        )

    def test_typescript_implements_only_has_no_superclass(self):
        record = _tsx("class Repo implements Source { fetch() {} }", path="a.ts")

        assert record.symbols[0].extends is None
        assert record.symbols[0].methods == ("fetch",)


class TestFunctions:
    def test_declarations_and_function_values(self):
        record = _js(
            """
function a() {}
const b = () => 1;
const c = function () {};
let d = 42;
function* gen() {}
const e = async () => {}, f = "x";
"""
        )

        assert record.symbols == tuple(
            Symbol(name=n, kind="function") for n in ["a", "b", "c", "gen", "e"]
        )

    def test_nested_functions_are_reported(self):
        record = _js(
            """
function outer() {
  const helper = () => {};
  function inner() {}
}
"""
        )

        assert _names(record) == ["outer", "helper", "inner"]

    def test_exports_are_unwrapped_once(self):
        record = _js(
            """
export function f() {}
export const g = () => {};
export class K {}
"""
        )

        assert _names(record) == ["f", "g", "K"]
        assert [s.kind for s in record.symbols] == ["function", "function", "class"]


class TestImports:
    def test_named_import(self):
        record = _js('import {useState} from "react"')

        assert record.imports == (ImportEdge(source="react", bindings=("useState",)),)

    def test_import_forms_in_occurrence_order(self):
        record = _js(
            """
import React, { useState, useEffect as useMount } from "react";
import * as path from "path";
import "./styles.css";
import Default from './default';
const fs = require("fs");
const lazy = import("./lazy");
const dynamic = require(name);
"""
        )

        assert record.imports == (
            ImportEdge(source="react", bindings=("useState", "useEffect")),
            ImportEdge(source="path"),
            ImportEdge(source="./styles.css"),
            ImportEdge(source="./default"),
            ImportEdge(source="fs"),
            ImportEdge(source="./lazy"),
        )

    def test_bindings_absent_when_no_named_imports(self):
        record = _js('import Default from "./default";\nrequire("x");')

        assert all(edge.bindings is None for edge in record.imports)

    def test_typescript_type_import(self):
        record = _tsx('import type { Props } from "./types";', path="a.ts")

        assert record.imports == (ImportEdge(source="./types", bindings=("Props",)),)


class TestMarkup:
    def test_custom_tags_exclude_known_tags(self):
        record = _js(
            """
const App = () => (
  <Layout>
    <div className="x">
      <Header title="hi" />
      <Button />
      <Header />
    </div>
  </Layout>
);
""",
            path="src/App.jsx",
        )

        assert record.has_embedded_markup is True
        assert record.custom_markup_names == ("Layout", "Header")

    def test_fragment_sets_markup_without_names(self):
        record = _js("const F = () => <></>;", path="src/F.jsx")

        assert record.has_embedded_markup is True
        assert record.custom_markup_names == ()

    def test_no_markup(self):
        record = _js("const x = 1 < 2;")

        assert record.has_embedded_markup is False

    def test_tsx_markup(self):
        record = _tsx(
            "export const Card = ({ title }: Props) => <Panel>{title}</Panel>;"
        )

        assert _names(record) == ["Card"]
        assert record.custom_markup_names == ("Panel",)

    @pytest.mark.parametrize("name", ["div", "DIV", "Button", "svg", "Span"])
    def test_known_tags_are_case_insensitive(self, name):
        assert is_known_tag(name)

    def test_known_tag_registry_size(self):
        assert 75 <= len(KNOWN_TAGS) <= 90
        assert all(tag == tag.lower() for tag in KNOWN_TAGS)


class TestRobustness:
    def test_malformed_input_keeps_well_formed_parts(self):
        record = _js("function ok() {}\nlet = = ;\n")

        assert Symbol(name="ok", kind="function") in record.symbols

    def test_extraction_is_idempotent(self):
        source = 'import {a} from "b";\nclass X extends Y { m() {} }\nconst f = () => <Foo/>;'

        first = _js(source, path="x.jsx")
        second = _js(source, path="x.jsx")

        assert first == second

    def test_every_node_kind_has_a_handler(self):
        assert set(_HANDLERS) == set(JsNodeKind)

    def test_empty_file(self):
        record = _js("")

        assert not record.has_content
