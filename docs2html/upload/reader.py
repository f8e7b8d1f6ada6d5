"""Reading and validating input files."""

from __future__ import annotations

import logging
import mimetypes
from pathlib import Path

from docs2html.converter.detector import detect_content_type
from docs2html.converter.models import FileDescriptor
from docs2html.upload.errors import FileReadError, UnsupportedFileError

logger = logging.getLogger(__name__)

DEFAULT_ALLOWED_TYPES: list[str] = [
    ".txt",
    ".md",
    ".markdown",
    ".html",
    ".htm",
]

_SIZE_UNITS = ("Bytes", "KB", "MB", "GB")


def validate_file_type(filename: str | Path | None, allowed: list[str] | None = None) -> bool:
    """Check a filename against allowed extensions (``.md``) or MIME types."""
    if not filename:
        return False

    name = Path(filename).name.lower()
    mime, _ = mimetypes.guess_type(name)
    types = allowed or DEFAULT_ALLOWED_TYPES

    for entry in types:
        entry = entry.lower()
        if entry.startswith("."):
            if name.endswith(entry):
                return True
        elif mime == entry:
            return True
    return False


def format_file_size(size: int) -> str:
    """Human-readable size: ``0 Bytes``, ``1.5 KB``, ``2 MB``."""
    if size <= 0:
        return "0 Bytes"

    value = float(size)
    i = 0
    while value >= 1024 and i < len(_SIZE_UNITS) - 1:
        value /= 1024
        i += 1
    value = round(value, 2)
    if value == int(value):
        value = int(value)
    return f"{value} {_SIZE_UNITS[i]}"


def read_file_as_text(path: str | Path) -> str:
    """Read a file as UTF-8 text. Raises FileReadError on any failure."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(str(path), e) from e


def describe_file(path: str | Path) -> FileDescriptor:
    p = Path(path)
    return FileDescriptor(
        name=p.name,
        size=p.stat().st_size,
        content_type=detect_content_type(p.name),
    )


def load_upload(
    path: str | Path, allowed: list[str] | None = None
) -> tuple[str, FileDescriptor]:
    """Validate, read and describe one input file.

    Raises UnsupportedFileError for rejected extensions and FileReadError
    when the file cannot be read.
    """
    name = Path(path).name
    if not validate_file_type(name, allowed):
        raise UnsupportedFileError(name, allowed or DEFAULT_ALLOWED_TYPES)

    content = read_file_as_text(path)
    try:
        descriptor = describe_file(path)
    except OSError as e:
        raise FileReadError(str(path), e) from e

    logger.debug(
        "loaded %s (%s, %s)",
        descriptor.name,
        format_file_size(descriptor.size),
        descriptor.content_type.value,
    )
    return content, descriptor
