"""Errors raised before content reaches the conversion core."""

from __future__ import annotations


class Docs2HtmlError(Exception):
    """Base class for docs2html errors."""


class UnsupportedFileError(Docs2HtmlError):
    """File extension is not one of the accepted upload types."""

    def __init__(self, filename: str, allowed: list[str]) -> None:
        self.filename = filename
        self.allowed = allowed
        super().__init__(
            f"Unsupported file '{filename}': expected one of {', '.join(allowed)}"
        )


class FileReadError(Docs2HtmlError):
    """File could not be read as UTF-8 text."""

    def __init__(self, path: str, cause: Exception) -> None:
        self.path = path
        super().__init__(f"Failed to read file {path}: {cause}")
        self.__cause__ = cause
