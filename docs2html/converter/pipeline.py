"""Conversion pipeline: pick a converter for the content, then sanitize."""

from __future__ import annotations

import logging

from docs2html.config.models import MarkdownConfig
from docs2html.converter.detector import guess_content_type
from docs2html.converter.formats import markdown_to_html, text_to_html
from docs2html.converter.models import ContentType
from docs2html.converter.sanitizer import sanitize_html

logger = logging.getLogger(__name__)


def auto_convert_to_html(
    content: str,
    content_type: ContentType | str = ContentType.AUTO,
    *,
    markdown_config: MarkdownConfig | None = None,
) -> str:
    """Convert *content* to sanitized HTML.

    ``content_type`` selects the converter; ``auto`` (or anything
    unrecognized) sniffs the content first. The result is not beautified.
    """
    if not content:
        return ""

    kind = ContentType.parse(content_type)
    if kind is ContentType.AUTO:
        kind = guess_content_type(content)
        logger.debug("auto-detected content type: %s", kind.value)

    if kind is ContentType.HTML:
        return sanitize_html(content)
    if kind is ContentType.MARKDOWN:
        return markdown_to_html(content, markdown_config)
    return text_to_html(content)

