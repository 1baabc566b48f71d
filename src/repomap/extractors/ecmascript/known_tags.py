"""Standard host-markup element names, excluded from custom markup names."""

from __future__ import annotations

# Lowercase; compare with ``name.lower()``.
KNOWN_TAGS = frozenset(
    {
        # document
        "html",
        "head",
        "body",
        "title",
        "meta",
        "link",
        "script",
        "style",
        "noscript",
        "template",
        # sectioning
        "header",
        "footer",
        "main",
        "nav",
        "section",
        "article",
        "aside",
        "div",
        "span",
        # text
        "p",
        "a",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "strong",
        "em",
        "b",
        "i",
        "u",
        "small",
        "code",
        "pre",
        "blockquote",
        "br",
        "hr",
        "abbr",
        "mark",
        "sub",
        "sup",
        "time",
        # lists
        "ul",
        "ol",
        "li",
        "dl",
        "dt",
        "dd",
        # tables
        "table",
        "thead",
        "tbody",
        "tfoot",
        "tr",
        "td",
        "th",
        "caption",
        # forms
        "form",
        "input",
        "button",
        "label",
        "select",
        "option",
        "textarea",
        "fieldset",
        "legend",
        # media
        "img",
        "picture",
        "video",
        "audio",
        "source",
        "iframe",
        "canvas",
        "figure",
        "figcaption",
        # svg
        "svg",
        "path",
        "circle",
        "rect",
        "g",
        "defs",
        # interactive
        "details",
        "summary",
        "dialog",
    }
)


def is_known_tag(name: str) -> bool:
    """Return True if *name* is a standard element (case-insensitive)."""
    return name.lower() in KNOWN_TAGS
