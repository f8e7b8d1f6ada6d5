"""Line-based HTML re-indenter.

This is a formatting heuristic, not a parser: every ``><`` boundary starts a
new line and each line is indented by how many opening tags are still open
above it. Unbalanced input is flattened (depth never drops below zero)
instead of rejected.
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

INDENT = "  "

VOID_ELEMENTS: tuple[str, ...] = ("br", "hr", "img", "input", "meta", "link")

_TAG_BOUNDARY_RE = re.compile(r">\s*<")
_VOID_RE = re.compile(rf"<(?:{'|'.join(VOID_ELEMENTS)})\b", re.IGNORECASE)
_OPEN_TAG_NAME_RE = re.compile(r"<([A-Za-z][\w:-]*)")


def _opens_block(line: str) -> bool:
    """True if *line* leaves an element open for the lines that follow it."""
    if not line.startswith("<") or line.startswith(("</", "<!", "<?")):
        return False
    if line.endswith("/>") or _VOID_RE.search(line):
        return False

    m = _OPEN_TAG_NAME_RE.match(line)
    if m is None:
        return False
    # <p>text</p> on a single line is a leaf
    closing = re.search(rf"</\s*{re.escape(m.group(1))}\s*>\s*$", line, re.IGNORECASE)
    return closing is None


def beautify_html(html: str) -> str:
    """Re-indent *html* by tag nesting, two spaces per level.

    Blank lines are dropped. On any internal error the input is returned
    unchanged.
    """
    if not html or not isinstance(html, str):
        return ""

    try:
        depth = 0
        out: list[str] = []
        for line in _TAG_BOUNDARY_RE.sub(">\n<", html).split("\n"):
            trimmed = line.strip()
            if not trimmed:
                continue

            if trimmed.startswith("</"):
                depth = max(0, depth - 1)

            out.append(INDENT * depth + trimmed)

            if _opens_block(trimmed):
                depth += 1

        return "\n".join(out)
    except Exception:
        logger.exception("Error beautifying HTML")
        return html
