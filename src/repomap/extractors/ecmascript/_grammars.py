"""Shared tree-sitter grammar selection and parser caching."""

from __future__ import annotations

import logging
from enum import Enum
from functools import lru_cache

logger = logging.getLogger(__name__)


class Grammar(str, Enum):
    """Grammar variant used for an ECMAScript-family file."""

    JAVASCRIPT = "javascript"  # plain JS; the grammar already accepts JSX
    TSX = "tsx"  # typed superset with embedded markup


# Extension -> grammar variant.
EXTENSION_GRAMMARS: dict[str, Grammar] = {
    ".js": Grammar.JAVASCRIPT,
    ".jsx": Grammar.JAVASCRIPT,
    ".ts": Grammar.TSX,
    ".tsx": Grammar.TSX,
}


@lru_cache(maxsize=None)
def get_parser(grammar: Grammar):
    """Return a tree-sitter parser for *grammar*, created on first use."""
    from tree_sitter import Language, Parser

    if grammar is Grammar.TSX:
        import tree_sitter_typescript as tsts

        language = Language(tsts.language_tsx())
    else:
        import tree_sitter_javascript as tsjs

        language = Language(tsjs.language())

    logger.debug("Loaded tree-sitter grammar: %s", grammar.value)
    return Parser(language)
