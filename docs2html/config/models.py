from pydantic import BaseModel, ConfigDict, Field
from typing import Literal


class MarkdownConfig(BaseModel):
    """Markdown renderer options. Built once and shared read-only."""

    model_config = ConfigDict(frozen=True)

    breaks: bool = True
    gfm: bool = True
    header_ids: bool = True


class UploadConfig(BaseModel):
    allowed_extensions: list[str] = Field(
        default_factory=lambda: [".txt", ".md", ".markdown", ".html", ".htm"]
    )


class OutputConfig(BaseModel):
    base_dir: str = "."
    beautify: bool = True
    default_stem: str = "converted"


class Docs2HtmlConfig(BaseModel):
    markdown: MarkdownConfig = Field(default_factory=MarkdownConfig)
    upload: UploadConfig = Field(default_factory=UploadConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"
