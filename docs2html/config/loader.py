"""YAML config loading with env var expansion."""

import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .models import Docs2HtmlConfig

PROJECT_CONFIG = "docs2html.yaml"
USER_CONFIG = Path(".docs2html") / "config.yaml"

_ENV_REF_RE = re.compile(r"\$\{(\w+)\}")


def config_search_paths(cli_path: str | None = None) -> list[Path]:
    """Candidate config files, highest precedence first."""
    paths = [Path(PROJECT_CONFIG), Path.home() / USER_CONFIG]
    if cli_path:
        paths.insert(0, Path(cli_path))
    return paths


def load_config(cli_path: str | None = None) -> Docs2HtmlConfig:
    """Load config with resolution order: CLI > project-local > user-global > defaults.

    A path given on the command line must exist. Empty files are skipped.
    """
    if cli_path and not Path(cli_path).is_file():
        raise ValueError(f"Config file not found: {cli_path}")

    for path in config_search_paths(cli_path):
        if not path.is_file():
            continue
        raw = _read_yaml(path)
        if raw is None:
            continue
        try:
            return Docs2HtmlConfig.model_validate(_expand_env_vars(raw))
        except ValidationError as e:
            raise ValueError(f"Invalid config in {path}: {e}") from e

    return Docs2HtmlConfig()


def _read_yaml(path: Path) -> Any:
    try:
        return yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e


def _expand_env_vars(obj: Any) -> Any:
    """Replace ${VAR} in every string of a parsed YAML tree; unset vars expand to ""."""
    if isinstance(obj, dict):
        return {key: _expand_env_vars(value) for key, value in obj.items()}
    if isinstance(obj, list):
        return [_expand_env_vars(item) for item in obj]
    if isinstance(obj, str):
        return _ENV_REF_RE.sub(lambda m: os.environ.get(m.group(1), ""), obj)
    return obj


# Default YAML template for `docs2html config init`
DEFAULT_CONFIG_TEMPLATE = """\
# docs2html.yaml

# Markdown rendering (GitHub-flavored preset)
markdown:
  breaks: true                 # single newlines become <br>
  gfm: true                    # tables, strikethrough, autolinks
  header_ids: true             # slug ids on headings

# Accepted input files
upload:
  allowed_extensions: [".txt", ".md", ".markdown", ".html", ".htm"]

# Output
output:
  base_dir: "."                # where <name>.html files are written
  beautify: true               # re-indent HTML by tag nesting
  default_stem: "converted"    # used when the input has no name (stdin)

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""
