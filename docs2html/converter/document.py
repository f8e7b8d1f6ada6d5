"""File-level conversion: read, convert, optionally beautify."""

from __future__ import annotations

import logging
from pathlib import Path

from docs2html.config.models import Docs2HtmlConfig
from docs2html.converter.beautifier import beautify_html
from docs2html.converter.detector import guess_content_type
from docs2html.converter.models import ContentType, ConversionResult
from docs2html.converter.pipeline import auto_convert_to_html
from docs2html.upload import load_upload

logger = logging.getLogger(__name__)


class DocumentConverter:
    """Runs the conversion pipeline with the settings of a loaded config."""

    def __init__(self, config: Docs2HtmlConfig | None = None) -> None:
        self._config = config or Docs2HtmlConfig()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def convert(
        self,
        file_path: str | Path,
        content_type: ContentType | str | None = None,
        beautify: bool | None = None,
    ) -> ConversionResult:
        """Convert a document file to HTML.

        The content type comes from the file extension unless given.
        Raises UnsupportedFileError or FileReadError when the file is
        rejected before conversion.
        """
        content, descriptor = load_upload(
            file_path, self._config.upload.allowed_extensions
        )
        hint = descriptor.content_type if content_type is None else content_type
        return self.convert_text(
            content, hint, source=str(file_path), beautify=beautify
        )

    def convert_text(
        self,
        content: str,
        content_type: ContentType | str | None = None,
        *,
        source: str = "<stdin>",
        beautify: bool | None = None,
    ) -> ConversionResult:
        """Convert in-memory content. A missing hint means ``auto``."""
        kind = ContentType.parse(content_type or ContentType.AUTO)
        if kind is ContentType.AUTO:
            kind = guess_content_type(content)

        html = auto_convert_to_html(
            content, kind, markdown_config=self._config.markdown
        )
        do_beautify = self._config.output.beautify if beautify is None else beautify
        if do_beautify:
            html = beautify_html(html)

        logger.info("converted %s as %s (%d chars)", source, kind.value, len(html))
        return ConversionResult(
            source_path=source,
            content_type=kind,
            html=html,
            beautified=do_beautify,
        )
