"""Content-type detection by filename extension or by content sniffing."""

from __future__ import annotations

import re

from docs2html.converter.models import ContentType

MARKDOWN_EXTENSIONS: frozenset[str] = frozenset({"md", "markdown", "mdown", "mkd"})
HTML_EXTENSIONS: frozenset[str] = frozenset({"html", "htm"})

_HTML_TAG_RE = re.compile(r"<[^>]+>")
_MARKDOWN_SIGIL_RE = re.compile(r"[#*_\[\]`]")


def get_file_extension(filename: str | None) -> str:
    """Return the lower-cased extension without the dot, or ``""``."""
    if not filename:
        return ""
    parts = filename.split(".")
    return parts[-1].lower() if len(parts) > 1 else ""


def detect_content_type(filename: str | None = None) -> ContentType:
    """Classify a file by its extension. Unknown or missing names are text."""
    ext = get_file_extension(filename)
    if ext in MARKDOWN_EXTENSIONS:
        return ContentType.MARKDOWN
    if ext in HTML_EXTENSIONS:
        return ContentType.HTML
    return ContentType.TEXT


def guess_content_type(content: str) -> ContentType:
    """Sniff raw content. Tag-like markup wins over Markdown sigils."""
    if not content or not isinstance(content, str):
        return ContentType.TEXT
    if _HTML_TAG_RE.search(content):
        return ContentType.HTML
    if _MARKDOWN_SIGIL_RE.search(content):
        return ContentType.MARKDOWN
    return ContentType.TEXT
