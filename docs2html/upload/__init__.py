"""Input-file handling: validation, reading, display info."""

from docs2html.upload.errors import Docs2HtmlError, FileReadError, UnsupportedFileError
from docs2html.upload.reader import (
    DEFAULT_ALLOWED_TYPES,
    describe_file,
    format_file_size,
    load_upload,
    read_file_as_text,
    validate_file_type,
)

__all__ = [
    "DEFAULT_ALLOWED_TYPES",
    "Docs2HtmlError",
    "FileReadError",
    "UnsupportedFileError",
    "describe_file",
    "format_file_size",
    "load_upload",
    "read_file_as_text",
    "validate_file_type",
]
