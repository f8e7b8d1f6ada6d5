"""Pydantic models for the conversion subsystem."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class ContentType(str, Enum):
    """Kind of source content. ``AUTO`` is a request hint, never a result."""

    MARKDOWN = "markdown"
    TEXT = "text"
    HTML = "html"
    AUTO = "auto"

    @classmethod
    def parse(cls, value: ContentType | str | None) -> ContentType:
        """Coerce a hint to a member; unknown values mean ``AUTO``."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.AUTO


class FileDescriptor(BaseModel):
    """Display info for an uploaded file."""

    name: str
    size: int
    content_type: ContentType


class ConversionResult(BaseModel):
    """Result of converting one document to HTML."""

    source_path: str
    content_type: ContentType
    html: str
    beautified: bool = False
