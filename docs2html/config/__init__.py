from .loader import load_config
from .models import (
    Docs2HtmlConfig,
    MarkdownConfig,
    OutputConfig,
    UploadConfig,
)

__all__ = [
    "Docs2HtmlConfig",
    "MarkdownConfig",
    "OutputConfig",
    "UploadConfig",
    "load_config",
]
