"""Shared test fixtures for docs2html."""

import pytest

from docs2html.config.models import Docs2HtmlConfig


SAMPLE_MARKDOWN = """\
# Welcome to Docs to HTML

This is a **beautiful** and *powerful* converter.

## Features

- Convert Markdown to HTML
- Convert Plain Text to HTML
"""

SAMPLE_TEXT = """\
Welcome to Docs to HTML

This is a simple text document.
It will be converted to HTML.

You can have multiple paragraphs."""

SAMPLE_HTML = """\
<h1>HTML Content</h1>
<p>You can also paste HTML content directly.</p>
<ul>
  <li>Item 1</li>
  <li>Item 2</li>
</ul>"""


@pytest.fixture
def sample_config():
    return Docs2HtmlConfig()


@pytest.fixture
def sample_markdown():
    return SAMPLE_MARKDOWN


@pytest.fixture
def sample_text():
    return SAMPLE_TEXT


@pytest.fixture
def sample_html():
    return SAMPLE_HTML


@pytest.fixture
def docs_dir(tmp_path):
    """A temp directory with one file of each accepted kind plus a rejected one."""
    d = tmp_path / "docs"
    d.mkdir()
    (d / "readme.md").write_text(SAMPLE_MARKDOWN, encoding="utf-8")
    (d / "notes.txt").write_text(SAMPLE_TEXT, encoding="utf-8")
    (d / "page.html").write_text(SAMPLE_HTML, encoding="utf-8")
    (d / "report.pdf").write_bytes(b"%PDF-1.4")
    return d


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch):
    """Run with no project-local or user-global config files in reach."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    return tmp_path
