"""Extract functions, classes, imports, and JSX usage from JS/TS source via tree-sitter."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from repomap.extractors.ecmascript._grammars import Grammar, get_parser
from repomap.extractors.ecmascript.known_tags import is_known_tag
from repomap.model import FileRecord, ImportEdge, Symbol

logger = logging.getLogger(__name__)


class JsNodeKind(str, Enum):
    """tree-sitter node types the visitor acts on.  All others are only descended."""

    FUNCTION_DECLARATION = "function_declaration"
    GENERATOR_FUNCTION_DECLARATION = "generator_function_declaration"
    LEXICAL_DECLARATION = "lexical_declaration"
    CLASS_DECLARATION = "class_declaration"
    ABSTRACT_CLASS_DECLARATION = "abstract_class_declaration"
    IMPORT_STATEMENT = "import_statement"
    CALL_EXPRESSION = "call_expression"
    JSX_OPENING_ELEMENT = "jsx_opening_element"
    JSX_SELF_CLOSING_ELEMENT = "jsx_self_closing_element"
    JSX_FRAGMENT = "jsx_fragment"


_KINDS_BY_TYPE = {kind.value: kind for kind in JsNodeKind}

# Initializers that make a const/let binding a function symbol.
# "function" is the pre-0.21 grammar name of "function_expression".
_FUNCTION_VALUE_TYPES = {
    "arrow_function",
    "function",
    "function_expression",
    "generator_function",
}

# Class body members reported as methods / properties.
_METHOD_MEMBER_TYPES = {
    "method_definition",
    "method_signature",
    "abstract_method_signature",
}
_FIELD_MEMBER_TYPES = {
    "field_definition",
    "public_field_definition",
    "private_field_definition",
}

# Only plain or dotted names count as a superclass; calls such as
# `mixin(Base)` and other expressions are left out.
_SUPERCLASS_NAME_TYPES = {"identifier", "member_expression"}


@dataclass
class _VisitContext:
    """Accumulators owned by a single extraction call."""

    symbols: list[Symbol] = field(default_factory=list)
    imports: list[ImportEdge] = field(default_factory=list)
    has_markup: bool = False
    custom_tags: dict[str, None] = field(default_factory=dict)  # ordered set


class EcmaScriptExtractor:
    """Grammar-based extractor for the JavaScript/TypeScript family."""

    def __init__(self, grammar: Grammar = Grammar.JAVASCRIPT) -> None:
        self.grammar = grammar

    def extract(self, path: str, content: str) -> FileRecord:
        tree = get_parser(self.grammar).parse(content.encode("utf-8"))
        if tree.root_node.has_error:
            logger.debug("Partial parse of %s; extracting well-formed subtrees", path)

        ctx = _VisitContext()
        _walk(tree.root_node, ctx)

        return FileRecord(
            path=path,
            symbols=tuple(ctx.symbols),
            imports=tuple(ctx.imports),
            has_embedded_markup=ctx.has_markup,
            custom_markup_names=tuple(ctx.custom_tags),
        )


def _walk(root, ctx: _VisitContext) -> None:
    """Visit every node once, in document order (iterative pre-order)."""
    stack = [root]
    while stack:
        node = stack.pop()
        kind = _KINDS_BY_TYPE.get(node.type)
        if kind is not None:
            _HANDLERS[kind](node, ctx)
        stack.extend(reversed(node.children))


def _text(node) -> str:
    return node.text.decode("utf-8", errors="replace")


def _string_value(node) -> str | None:
    """Return the contents of a string literal node, without quotes."""
    if node is None or node.type != "string":
        return None
    return _text(node)[1:-1]


def _visit_function(node, ctx: _VisitContext) -> None:
    name_node = node.child_by_field_name("name")
    if name_node is not None:
        ctx.symbols.append(Symbol(name=_text(name_node), kind="function"))


def _visit_lexical_declaration(node, ctx: _VisitContext) -> None:
    for declarator in node.named_children:
        if declarator.type != "variable_declarator":
            continue
        name_node = declarator.child_by_field_name("name")
        value = declarator.child_by_field_name("value")
        if (
            name_node is not None
            and name_node.type == "identifier"
            and value is not None
            and value.type in _FUNCTION_VALUE_TYPES
        ):
            ctx.symbols.append(Symbol(name=_text(name_node), kind="function"))


def _superclass_name(heritage) -> str | None:
    """Read the superclass from a class_heritage node (JS or TS shape)."""
    value = None
    for child in heritage.named_children:
        if child.type == "extends_clause":
            # TypeScript: extends_clause(value: expression, type_arguments?)
            value = child.child_by_field_name("value")
            if value is None and child.named_children:
                value = child.named_children[0]
            break
        if child.type not in ("implements_clause", "comment"):
            # JavaScript: class_heritage wraps the expression directly
            value = child
            break
    if value is None or value.type not in _SUPERCLASS_NAME_TYPES:
        return None
    return _text(value)


def _visit_class(node, ctx: _VisitContext) -> None:
    name_node = node.child_by_field_name("name")
    if name_node is None:
        return

    superclass = None
    for child in node.children:
        if child.type == "class_heritage":
            superclass = _superclass_name(child)
            break

    properties: list[str] = []
    methods: list[str] = []
    body = node.child_by_field_name("body")
    if body is not None:
        for member in body.named_children:
            if member.type in _METHOD_MEMBER_TYPES:
                member_name = member.child_by_field_name("name")
                if member_name is not None:
                    methods.append(_text(member_name))
            elif member.type in _FIELD_MEMBER_TYPES:
                member_name = member.child_by_field_name(
                    "property"
                ) or member.child_by_field_name("name")
                if member_name is not None:
                    properties.append(_text(member_name))
            # Nested class declarations are reached by the walk itself and
            # reported as sibling symbols.

    ctx.symbols.append(
        Symbol(
            name=_text(name_node),
            kind="class",
            properties=tuple(properties) or None,
            methods=tuple(methods) or None,
            extends=superclass,
        )
    )


def _import_bindings(node) -> tuple[str, ...] | None:
    names: list[str] = []
    for clause in node.named_children:
        if clause.type != "import_clause":
            continue
        for part in clause.named_children:
            if part.type != "named_imports":
                continue
            for specifier in part.named_children:
                if specifier.type != "import_specifier":
                    continue
                name_node = specifier.child_by_field_name("name")
                if name_node is not None:
                    names.append(_text(name_node))
    return tuple(names) or None


def _visit_import(node, ctx: _VisitContext) -> None:
    source = _string_value(node.child_by_field_name("source"))
    if source is None:
        # TypeScript: import x = require("y")
        for child in node.named_children:
            if child.type == "import_require_clause":
                source = _string_value(child.child_by_field_name("source"))
                break
    if source is None:
        return
    ctx.imports.append(ImportEdge(source=source, bindings=_import_bindings(node)))


def _visit_call(node, ctx: _VisitContext) -> None:
    function = node.child_by_field_name("function")
    if function is None:
        return
    is_require = function.type == "identifier" and _text(function) == "require"
    if not (is_require or function.type == "import"):
        return
    arguments = node.child_by_field_name("arguments")
    if arguments is None or not arguments.named_children:
        return
    source = _string_value(arguments.named_children[0])
    if source is not None:
        ctx.imports.append(ImportEdge(source=source))


def _visit_jsx_tag(node, ctx: _VisitContext) -> None:
    ctx.has_markup = True
    name_node = node.child_by_field_name("name")
    if name_node is None:
        # <> ... </> in grammars without a dedicated fragment node
        return
    name = _text(name_node)
    if not is_known_tag(name):
        ctx.custom_tags.setdefault(name, None)


def _visit_jsx_fragment(node, ctx: _VisitContext) -> None:
    ctx.has_markup = True


_HANDLERS: dict[JsNodeKind, Callable[..., None]] = {
    JsNodeKind.FUNCTION_DECLARATION: _visit_function,
    JsNodeKind.GENERATOR_FUNCTION_DECLARATION: _visit_function,
    JsNodeKind.LEXICAL_DECLARATION: _visit_lexical_declaration,
    JsNodeKind.CLASS_DECLARATION: _visit_class,
    JsNodeKind.ABSTRACT_CLASS_DECLARATION: _visit_class,
    JsNodeKind.IMPORT_STATEMENT: _visit_import,
    JsNodeKind.CALL_EXPRESSION: _visit_call,
    JsNodeKind.JSX_OPENING_ELEMENT: _visit_jsx_tag,
    JsNodeKind.JSX_SELF_CLOSING_ELEMENT: _visit_jsx_tag,
    JsNodeKind.JSX_FRAGMENT: _visit_jsx_fragment,
}
