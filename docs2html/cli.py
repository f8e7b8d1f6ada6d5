"""CLI entry point for docs2html."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from docs2html.config import Docs2HtmlConfig, load_config
from docs2html.config.loader import DEFAULT_CONFIG_TEMPLATE
from docs2html.converter import ContentType
from docs2html.converter.document import DocumentConverter
from docs2html.converter.models import ConversionResult
from docs2html.output import HtmlWriter
from docs2html.upload import Docs2HtmlError, describe_file, format_file_size, validate_file_type

app = typer.Typer(
    name="docs2html",
    help="Convert Markdown, plain text, or HTML into sanitized, pretty-printed HTML.",
)

config_app = typer.Typer(help="Manage docs2html configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: Docs2HtmlConfig | None = None

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

_TYPE_CHOICES = [t.value for t in ContentType]


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def _configure_logging(cfg: Docs2HtmlConfig) -> None:
    handler = logging.StreamHandler(sys.stderr)
    if cfg.log_format == "json":
        handler.setFormatter(_JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logging.basicConfig(level=_LOG_LEVELS[cfg.log_level], handlers=[handler])


def _get_config() -> Docs2HtmlConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to docs2html.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    _configure_logging(_config)


def _check_type(value: str | None) -> str | None:
    if value is None:
        return None
    if value.lower() not in _TYPE_CHOICES:
        raise typer.BadParameter(f"expected one of: {', '.join(_TYPE_CHOICES)}")
    return value.lower()


def _run_conversion(
    converter: DocumentConverter,
    file: str,
    content_type: str | None,
    beautify: bool | None,
) -> ConversionResult:
    """Convert a path, or stdin when *file* is ``-``."""
    if file == "-":
        return converter.convert_text(
            sys.stdin.read(), content_type or ContentType.AUTO, beautify=beautify
        )
    return converter.convert(file, content_type, beautify=beautify)


@app.command()
def convert(
    file: str = typer.Argument(..., help="Document to convert (.md, .txt, .html) or - for stdin"),
    content_type: Annotated[
        str | None,
        typer.Option(
            "--type", "-t", help="markdown | text | html | auto (default: from extension)",
            callback=_check_type,
        ),
    ] = None,
    output_dir: Annotated[
        str | None, typer.Option("--output-dir", "-o", help="Directory for the .html file")
    ] = None,
    beautify: bool | None = typer.Option(
        None, "--beautify/--no-beautify", help="Re-indent the HTML (default: from config)"
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Preview without writing"),
    print_html: bool = typer.Option(False, "--print", help="Also print the HTML"),
) -> None:
    """Convert a document to HTML and write <name>.html."""
    cfg = _get_config()
    converter = DocumentConverter(cfg)

    try:
        result = _run_conversion(converter, file, content_type, beautify)
    except Docs2HtmlError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    output_cfg = cfg.output
    if output_dir is not None:
        output_cfg = output_cfg.model_copy(update={"base_dir": output_dir})
    writer = HtmlWriter(output_cfg)
    dest = writer.write(result.html, None if file == "-" else file, dry_run=dry_run)

    if print_html:
        rprint(Syntax(result.html, "html", word_wrap=True))

    action = "Would write" if dry_run else "Written to"
    rprint(
        Panel(
            f"[dim]Source:[/dim]      {result.source_path}\n"
            f"[dim]Type:[/dim]        {result.content_type.value}\n"
            f"[dim]Beautified:[/dim]  {result.beautified}\n"
            f"[dim]{action}:[/dim]  {dest}",
            title="Conversion Result",
            border_style="green",
        )
    )


@app.command()
def preview(
    file: str = typer.Argument(..., help="Document to preview or - for stdin"),
    content_type: Annotated[
        str | None,
        typer.Option(
            "--type", "-t", help="markdown | text | html | auto (default: from extension)",
            callback=_check_type,
        ),
    ] = None,
) -> None:
    """Show the converted, indented HTML without writing anything."""
    converter = DocumentConverter(_get_config())

    try:
        result = _run_conversion(converter, file, content_type, beautify=True)
    except Docs2HtmlError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if not result.html:
        rprint("[yellow]HTML output is empty.[/yellow]")
        raise typer.Exit(0)

    rprint(Syntax(result.html, "html", line_numbers=True, word_wrap=True))


@app.command()
def detect(
    files: list[str] = typer.Argument(..., help="Files to inspect"),
) -> None:
    """Show the detected content type and size of each file."""
    allowed = _get_config().upload.allowed_extensions

    table = Table(title=f"Files ({len(files)})")
    table.add_column("Name", style="cyan")
    table.add_column("Size", justify="right")
    table.add_column("Type", style="green")
    table.add_column("Accepted", justify="center")

    for f in files:
        path = Path(f)
        if not path.is_file():
            table.add_row(path.name, "-", "-", "[red]missing[/red]")
            continue
        desc = describe_file(path)
        accepted = "[green]yes[/green]" if validate_file_type(desc.name, allowed) else "[red]no[/red]"
        table.add_row(desc.name, format_file_size(desc.size), desc.content_type.value, accepted)
    rprint(table)


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default docs2html.yaml in current directory."""
    target = Path("docs2html.yaml")
    if target.exists() and not force:
        rprint("[yellow]docs2html.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")


if __name__ == "__main__":
    app()
