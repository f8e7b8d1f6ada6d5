"""Conversion core: detection, converters, sanitizer, beautifier, pipeline."""

from docs2html.converter.beautifier import beautify_html
from docs2html.converter.detector import (
    HTML_EXTENSIONS,
    MARKDOWN_EXTENSIONS,
    detect_content_type,
    get_file_extension,
    guess_content_type,
)
from docs2html.converter.formats import markdown_to_html, text_to_html
from docs2html.converter.models import ContentType, ConversionResult, FileDescriptor
from docs2html.converter.pipeline import auto_convert_to_html
from docs2html.converter.sanitizer import sanitize_html

__all__ = [
    "ContentType",
    "ConversionResult",
    "FileDescriptor",
    "HTML_EXTENSIONS",
    "MARKDOWN_EXTENSIONS",
    "auto_convert_to_html",
    "beautify_html",
    "detect_content_type",
    "get_file_extension",
    "guess_content_type",
    "markdown_to_html",
    "sanitize_html",
    "text_to_html",
]
