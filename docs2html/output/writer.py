"""HtmlWriter — writes converted HTML to <name>.html files on disk."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from docs2html.config.models import OutputConfig

logger = logging.getLogger(__name__)

HTML_MIME_TYPE = "text/html"

_EXTENSION_RE = re.compile(r"\.[^/.]+$")


def export_filename(name: str | None, default_stem: str = "converted") -> str:
    """Derive the download name: drop the last extension, append ``.html``.

    Directory parts are discarded so the result is always a bare filename.
    """
    base = Path(name).name if name else ""
    stem = _EXTENSION_RE.sub("", base) if base else ""
    if not stem or stem.strip(".") == "":
        stem = default_stem
    return f"{stem}.html"


class HtmlWriter:
    """Writes HTML strings to disk as .html files.

    Handles filename derivation, directory creation, and dry-run mode.
    """

    def __init__(self, config: OutputConfig) -> None:
        self.config = config
        self.base_dir = Path(config.base_dir)

    def write(self, html: str, name: str | None = None, *, dry_run: bool = False) -> Path:
        """Write *html* under the configured base directory.

        Returns the Path of the written (or would-be) file.
        """
        dest = self.base_dir / export_filename(name, self.config.default_stem)

        if dry_run:
            logger.debug("dry-run: would write %s", dest)
            return dest

        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(html, encoding="utf-8")
        logger.info("wrote %s (%d bytes)", dest, len(html.encode("utf-8")))
        return dest
