"""docs2html - convert Markdown, plain text, or HTML into sanitized, indented HTML."""

from docs2html.config import Docs2HtmlConfig, MarkdownConfig, load_config
from docs2html.converter import (
    ContentType,
    auto_convert_to_html,
    beautify_html,
    detect_content_type,
    guess_content_type,
    markdown_to_html,
    sanitize_html,
    text_to_html,
)
from docs2html.converter.document import DocumentConverter
from docs2html.output import HtmlWriter, export_filename

__version__ = "0.1.0"

__all__ = [
    "ContentType",
    "Docs2HtmlConfig",
    "DocumentConverter",
    "HtmlWriter",
    "MarkdownConfig",
    "auto_convert_to_html",
    "beautify_html",
    "detect_content_type",
    "export_filename",
    "guess_content_type",
    "load_config",
    "markdown_to_html",
    "sanitize_html",
    "text_to_html",
]
