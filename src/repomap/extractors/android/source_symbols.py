"""Extract classes and their Android component kind from Java/Kotlin source via regex."""

from __future__ import annotations

import logging
import re

from repomap.model import FileRecord, Symbol

logger = logging.getLogger(__name__)

# Base class -> component kind.
PLATFORM_COMPONENTS: dict[str, str] = {
    "Activity": "activity",
    "AppCompatActivity": "activity",
    "FragmentActivity": "activity",
    "ComponentActivity": "activity",
    "Fragment": "fragment",
    "DialogFragment": "fragment",
    "BottomSheetDialogFragment": "fragment",
    "Service": "service",
    "IntentService": "service",
    "JobIntentService": "service",
    "LifecycleService": "service",
    "BroadcastReceiver": "broadcast_receiver",
    "ContentProvider": "content_provider",
    "Application": "application",
    "MultiDexApplication": "application",
}

COMPONENT_KINDS = (
    "activity",
    "fragment",
    "service",
    "broadcast_receiver",
    "content_provider",
    "application",
)

# Kotlin classes may have no body, so "{" is not required; the captured
# tail stops at the next class keyword instead.
_CLASS_RE = re.compile(r"\bclass\s+(\w+)((?:(?!\bclass\b)[^{;])*)")
# Both supertype forms must directly follow the class header (after
# generics and parameter lists are stripped), so text after a bodyless
# Kotlin class is never read as its heritage.
_JAVA_EXTENDS_RE = re.compile(r"^\s*extends\s+([\w.]+)")
_KOTLIN_SUPER_RE = re.compile(
    r"^\s*(?:(?:@[\w.]+|public|protected|private|internal)\s+)*"
    r"(?:constructor\s*)?:\s*([\w.]+)"
)
_GENERIC_RE = re.compile(r"<[^<>]*>")
_PARENS_RE = re.compile(r"\([^()]*\)")


class AndroidExtractor:
    """Heuristic extractor for Java/Kotlin Android source files."""

    def extract(self, path: str, content: str) -> FileRecord:
        symbols: list[Symbol] = []
        for m in _CLASS_RE.finditer(content):
            superclass = _superclass(m.group(2))
            component = None
            if superclass is not None:
                component = PLATFORM_COMPONENTS.get(superclass.rsplit(".", 1)[-1])
            symbols.append(
                Symbol(
                    name=m.group(1),
                    kind="class",
                    extends=superclass,
                    platform_component=component,
                )
            )

        logger.debug(
            "Android %s: %d classes, %d components",
            path,
            len(symbols),
            sum(1 for s in symbols if s.platform_component),
        )

        return FileRecord(path=path, symbols=tuple(symbols), is_platform_lang_file=True)


def _strip(pattern: re.Pattern[str], text: str) -> str:
    previous = None
    while previous != text:
        previous = text
        text = pattern.sub("", text)
    return text


def _superclass(heritage: str) -> str | None:
    """Superclass from a Java ``extends X`` or Kotlin ``: X()`` clause."""
    heritage = _strip(_PARENS_RE, _strip(_GENERIC_RE, heritage))
    m = _JAVA_EXTENDS_RE.search(heritage) or _KOTLIN_SUPER_RE.search(heritage)
    return m.group(1) if m else None
