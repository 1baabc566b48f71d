"""JavaScript/TypeScript extractors."""

from repomap.extractors.ecmascript._grammars import EXTENSION_GRAMMARS, Grammar
from repomap.extractors.ecmascript.ast_symbols import EcmaScriptExtractor

__all__ = [
    "EXTENSION_GRAMMARS",
    "EcmaScriptExtractor",
    "Grammar",
]
