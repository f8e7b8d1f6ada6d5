"""HTML sanitization: the last step before anything is rendered or exported."""

from __future__ import annotations

import logging

import bleach
from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

ALLOWED_TAGS: frozenset[str] = frozenset(bleach.sanitizer.ALLOWED_TAGS) | {
    "p",
    "br",
    "hr",
    "div",
    "span",
    "pre",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "del",
    "ins",
    "s",
    "u",
    "sub",
    "sup",
    "mark",
    "kbd",
    "samp",
    "var",
    "small",
    "cite",
    "q",
    "dl",
    "dt",
    "dd",
    "img",
    "figure",
    "figcaption",
    "table",
    "caption",
    "thead",
    "tbody",
    "tfoot",
    "tr",
    "th",
    "td",
    "colgroup",
    "col",
    "section",
    "article",
    "header",
    "footer",
    "nav",
    "aside",
    "main",
    "details",
    "summary",
}

_HEADING_ATTRS = ["id"]

ALLOWED_ATTRIBUTES: dict[str, list[str]] = {
    **bleach.sanitizer.ALLOWED_ATTRIBUTES,
    "*": ["class", "title", "lang", "dir"],
    "a": ["href", "title", "name", "id"],
    "img": ["src", "alt", "title", "width", "height"],
    "h1": _HEADING_ATTRS,
    "h2": _HEADING_ATTRS,
    "h3": _HEADING_ATTRS,
    "h4": _HEADING_ATTRS,
    "h5": _HEADING_ATTRS,
    "h6": _HEADING_ATTRS,
    "th": ["align", "colspan", "rowspan", "scope"],
    "td": ["align", "colspan", "rowspan"],
    "col": ["span"],
    "colgroup": ["span"],
    "ol": ["start", "type"],
    "li": ["value"],
    "details": ["open"],
    "abbr": ["title"],
    "acronym": ["title"],
    "q": ["cite"],
    "blockquote": ["cite"],
}


ALLOWED_PROTOCOLS: frozenset[str] = frozenset({"http", "https", "mailto"})

# Removed together with everything inside them
DROPPED_ELEMENTS: list[str] = [
    "script",
    "style",
    "noscript",
    "template",
    "iframe",
    "object",
    "embed",
]

MAX_CLEAN_PASSES = 8


def _drop_unsafe_elements(html: str) -> str:
    """Parse *html* as a browser would and drop :data:`DROPPED_ELEMENTS`.

    html5lib reparents misplaced content (for example a paragraph inside a
    table) instead of discarding it, so its text survives the allowlist pass.
    """
    soup = BeautifulSoup(html, "html5lib")
    # outer matches first, so nested ones go with their ancestor
    while (tag := soup.find(DROPPED_ELEMENTS)) is not None:
        tag.decompose()

    parts = [section.decode_contents() for section in (soup.head, soup.body) if section is not None]
    return "".join(parts)


def _clean_once(html: str) -> str:
    return bleach.clean(
        _drop_unsafe_elements(html),
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        protocols=ALLOWED_PROTOCOLS,
        strip=True,
        strip_comments=True,
    )


def sanitize_html(html: str) -> str:
    """Strip script vectors from *html* and return what is safe to render.

    Script-bearing elements are dropped with their content. Other tags
    outside the allowlist are removed but their text is kept, as are
    event-handler and ``style`` attributes, comments, and URLs whose scheme
    is not http, https or mailto.

    Misnested markup can re-nest differently each time it is parsed, so the
    cleaning pass repeats until its output no longer changes. Running the
    result through again yields the same string.
    """
    if not html or not isinstance(html, str):
        return ""

    try:
        cleaned = _clean_once(html)
        for _ in range(MAX_CLEAN_PASSES):
            again = _clean_once(cleaned)
            if again == cleaned:
                break
            cleaned = again
        else:
            logger.warning("Sanitized HTML still changing after %d passes", MAX_CLEAN_PASSES)
        return cleaned
    except Exception:
        logger.exception("Sanitizing HTML failed")
        return ""
