"""Markdown and plain-text converters. Both return sanitized HTML."""

from __future__ import annotations

import html
import logging
import re

from markdown_it import MarkdownIt
from markdown_it.rules_core import StateCore
from mdit_py_plugins.anchors import anchors_plugin

from docs2html.config.models import MarkdownConfig
from docs2html.converter.sanitizer import sanitize_html

logger = logging.getLogger(__name__)

DEFAULT_MARKDOWN_CONFIG = MarkdownConfig()

_PARAGRAPH_BREAK_RE = re.compile(r"\n{2,}")
_TEXT_ALIGN_RE = re.compile(r"^text-align:\s*(left|center|right)$")


def _table_align_attrs(state: StateCore) -> None:
    """Turn ``style="text-align:..."`` on table cells into ``align``."""
    for token in state.tokens:
        if token.type not in ("th_open", "td_open"):
            continue
        m = _TEXT_ALIGN_RE.match(str(token.attrGet("style") or ""))
        if m:
            del token.attrs["style"]
            token.attrSet("align", m.group(1))


def build_renderer(config: MarkdownConfig) -> MarkdownIt:
    """Create a renderer for *config*.

    ``gfm`` selects the ``gfm-like`` preset (tables, strikethrough, bare-URL
    autolinks) over plain CommonMark. E-mail autolinks are rendered as plain
    ``mailto:`` links.
    """
    renderer = MarkdownIt(
        "gfm-like" if config.gfm else "commonmark",
        {"breaks": config.breaks, "xhtmlOut": False},
    )
    if config.gfm:
        # bare host names such as "notes.md" stay text
        renderer.linkify.set({"fuzzy_link": False})
        renderer.core.ruler.push("table_align", _table_align_attrs)
    if config.header_ids:
        anchors_plugin(renderer, min_level=1, max_level=6)
    return renderer


def markdown_to_html(markdown: str, config: MarkdownConfig | None = None) -> str:
    """Render GitHub-flavored Markdown to sanitized HTML.

    Returns ``""`` for empty input and when rendering fails.
    """
    if not markdown or not isinstance(markdown, str):
        return ""

    try:
        raw_html = build_renderer(config or DEFAULT_MARKDOWN_CONFIG).render(markdown).strip()
    except Exception:
        logger.exception("Error converting markdown")
        return ""

    return sanitize_html(raw_html)


def text_to_html(text: str) -> str:
    """Wrap plain text in paragraphs.

    Blank-line runs separate paragraphs, single newlines become ``<br>``,
    whitespace-only paragraphs are dropped.
    """
    if not text or not isinstance(text, str):
        return ""

    try:
        paragraphs = []
        for para in _PARAGRAPH_BREAK_RE.split(text):
            if not para.strip():
                continue
            formatted = html.escape(para, quote=False).replace("\n", "<br>")
            paragraphs.append(f"<p>{formatted}</p>")
        result = "\n".join(paragraphs)
    except Exception:
        logger.exception("Error converting text")
        return ""

    return sanitize_html(result)
