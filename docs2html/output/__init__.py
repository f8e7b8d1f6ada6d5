"""HTML export."""

from docs2html.output.writer import HTML_MIME_TYPE, HtmlWriter, export_filename

__all__ = ["HTML_MIME_TYPE", "HtmlWriter", "export_filename"]
