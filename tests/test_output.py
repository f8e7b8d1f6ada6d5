"""Tests for the output subsystem: export naming and HtmlWriter."""

import pytest

from docs2html.config.models import OutputConfig
from docs2html.output import HTML_MIME_TYPE, HtmlWriter, export_filename


# ---------------------------------------------------------------------------
# export_filename
# ---------------------------------------------------------------------------


class TestExportFilename:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("notes.md", "notes.html"),
            ("page.htm", "page.html"),
            ("index.html", "index.html"),
            ("README", "README.html"),
            ("archive.tar.gz", "archive.tar.html"),
            ("docs/guide/intro.markdown", "intro.html"),
        ],
    )
    def test_names(self, name, expected):
        assert export_filename(name) == expected

    def test_missing_name_uses_default(self):
        assert export_filename(None) == "converted.html"
        assert export_filename("") == "converted.html"

    def test_custom_default(self):
        assert export_filename(None, "document") == "document.html"

    def test_extension_only_name_uses_default(self):
        assert export_filename(".md") == "converted.html"

    def test_path_traversal_dropped(self):
        assert export_filename("../../etc/passwd.md") == "passwd.html"

    def test_mime_type(self):
        assert HTML_MIME_TYPE == "text/html"


# ---------------------------------------------------------------------------
# HtmlWriter
# ---------------------------------------------------------------------------


class TestHtmlWriter:
    def test_write_creates_file(self, tmp_path):
        writer = HtmlWriter(OutputConfig(base_dir=str(tmp_path / "out")))
        dest = writer.write("<p>hi</p>", "notes.md")
        assert dest == tmp_path / "out" / "notes.html"
        assert dest.read_text(encoding="utf-8") == "<p>hi</p>"

    def test_write_uses_default_stem(self, tmp_path):
        writer = HtmlWriter(OutputConfig(base_dir=str(tmp_path), default_stem="document"))
        dest = writer.write("<p>hi</p>")
        assert dest.name == "document.html"

    def test_dry_run_does_not_write(self, tmp_path):
        writer = HtmlWriter(OutputConfig(base_dir=str(tmp_path / "out")))
        dest = writer.write("<p>hi</p>", "notes.md", dry_run=True)
        assert dest == tmp_path / "out" / "notes.html"
        assert not dest.exists()
        assert not (tmp_path / "out").exists()

    def test_overwrites_existing(self, tmp_path):
        writer = HtmlWriter(OutputConfig(base_dir=str(tmp_path)))
        writer.write("<p>old</p>", "a.md")
        dest = writer.write("<p>new</p>", "a.md")
        assert dest.read_text(encoding="utf-8") == "<p>new</p>"

    def test_unicode_content(self, tmp_path):
        writer = HtmlWriter(OutputConfig(base_dir=str(tmp_path)))
        dest = writer.write("<p>café ✓</p>", "u.txt")
        assert dest.read_text(encoding="utf-8") == "<p>café ✓</p>"
