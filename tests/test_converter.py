"""Tests for DocumentConverter: file and in-memory conversion."""

import pytest

from docs2html.config.models import Docs2HtmlConfig, MarkdownConfig, OutputConfig, UploadConfig
from docs2html.converter.document import DocumentConverter
from docs2html.converter.models import ContentType, ConversionResult
from docs2html.upload import FileReadError, UnsupportedFileError


# ---------------------------------------------------------------------------
# convert (files)
# ---------------------------------------------------------------------------


class TestConvertFile:
    def test_markdown_file(self, docs_dir):
        result = DocumentConverter().convert(docs_dir / "readme.md")
        assert isinstance(result, ConversionResult)
        assert result.content_type == ContentType.MARKDOWN
        assert result.beautified is True
        assert result.source_path == str(docs_dir / "readme.md")
        assert '<h1 id="welcome-to-docs-to-html">Welcome to Docs to HTML</h1>' in result.html
        assert "  <li>Convert Markdown to HTML</li>" in result.html

    def test_text_file(self, docs_dir):
        result = DocumentConverter().convert(docs_dir / "notes.txt")
        assert result.content_type == ContentType.TEXT
        assert result.html.startswith("<p>Welcome to Docs to HTML</p>")

    def test_html_file(self, docs_dir, sample_html):
        result = DocumentConverter().convert(docs_dir / "page.html")
        assert result.content_type == ContentType.HTML
        assert result.html == sample_html

    def test_type_override(self, docs_dir):
        result = DocumentConverter().convert(docs_dir / "readme.md", content_type="text")
        assert result.content_type == ContentType.TEXT
        assert "<h1" not in result.html
        assert "# Welcome to Docs to HTML" in result.html

    def test_auto_override_sniffs_content(self, docs_dir):
        result = DocumentConverter().convert(docs_dir / "notes.txt", content_type="auto")
        assert result.content_type == ContentType.TEXT

    def test_beautify_disabled_by_argument(self, docs_dir):
        result = DocumentConverter().convert(docs_dir / "readme.md", beautify=False)
        assert result.beautified is False
        assert "  <li>" not in result.html

    def test_beautify_disabled_by_config(self, docs_dir):
        cfg = Docs2HtmlConfig(output=OutputConfig(beautify=False))
        result = DocumentConverter(cfg).convert(docs_dir / "readme.md")
        assert result.beautified is False

    def test_rejected_extension(self, docs_dir):
        with pytest.raises(UnsupportedFileError):
            DocumentConverter().convert(docs_dir / "report.pdf")

    def test_configured_extensions(self, tmp_path):
        f = tmp_path / "notes.rst"
        f.write_text("plain words", encoding="utf-8")
        cfg = Docs2HtmlConfig(upload=UploadConfig(allowed_extensions=[".rst"]))
        result = DocumentConverter(cfg).convert(f)
        assert result.content_type == ContentType.TEXT
        assert result.html == "<p>plain words</p>"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileReadError):
            DocumentConverter().convert(tmp_path / "missing.md")

    def test_markdown_config_applied(self, docs_dir):
        cfg = Docs2HtmlConfig(markdown=MarkdownConfig(header_ids=False))
        result = DocumentConverter(cfg).convert(docs_dir / "readme.md")
        assert "<h1>Welcome to Docs to HTML</h1>" in result.html


# ---------------------------------------------------------------------------
# convert_text (in-memory)
# ---------------------------------------------------------------------------


class TestConvertText:
    def test_auto_by_default(self):
        result = DocumentConverter().convert_text("# Hi")
        assert result.content_type == ContentType.MARKDOWN
        assert result.source_path == "<stdin>"

    def test_auto_html(self):
        result = DocumentConverter().convert_text("<div><p>x</p></div>")
        assert result.content_type == ContentType.HTML
        assert result.html == "<div>\n  <p>x</p>\n</div>"

    def test_explicit_type(self):
        result = DocumentConverter().convert_text("a\n\nb", ContentType.TEXT, source="clip")
        assert result.html == "<p>a</p>\n<p>b</p>"
        assert result.source_path == "clip"

    def test_empty_content(self):
        result = DocumentConverter().convert_text("")
        assert result.html == ""
        assert result.content_type == ContentType.TEXT

    def test_output_sanitized_after_beautify(self):
        result = DocumentConverter().convert_text("<div><script>x()</script><p>ok</p></div>", "html")
        assert "<script" not in result.html
        assert "<p>ok</p>" in result.html
