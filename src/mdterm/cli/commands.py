"""CLI command implementations"""

import json
import logging
from typing import Annotated, Optional

import typer

from mdterm.config import Settings, load_config
from mdterm.core.inline import parse_inline
from mdterm.core.render import render
from mdterm.core.tokenize import tokenize
from mdterm.util.fs import read_sources


logger = logging.getLogger(__name__)


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and set up logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(
        level=settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )
    return settings


def _sources(path: str) -> list[tuple[str, str]]:
    """Read markdown sources with standard CLI error handling."""
    try:
        sources = read_sources(path)
    except (OSError, ValueError) as e:
        _fail(f"Cannot read {path}", e)
    if not sources:
        _fail(f"No markdown files found under {path}")
    return sources


def _dump(items: list, indent: int) -> str:
    return json.dumps(
        [t.model_dump(mode="json", exclude_none=True) for t in items],
        indent=indent or None,
        ensure_ascii=False,
    )


def render_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file, directory, or '-' for stdin")],
    color: Annotated[Optional[bool], typer.Option("--color/--no-color", help="Force styling on or off")] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="Log level (DEBUG..CRITICAL)")] = None,
    ):
    """Render markdown with terminal styling."""
    settings = _settings(overrides={"color": color, "log_level": log_level})
    sources = _sources(path)
    multiple = len(sources) > 1

    for n, (label, text) in enumerate(sources):
        logger.info("Rendering %s (%d chars)", label, len(text))
        if multiple:
            if n:
                typer.echo("", color=settings.color)
            typer.echo(typer.style(label, bold=True), color=settings.color)
        typer.echo(render(text), color=settings.color)


def tokens_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file or '-' for stdin")],
    indent: Annotated[Optional[int], typer.Option("--indent", min=0, help="JSON indent width")] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="Log level (DEBUG..CRITICAL)")] = None,
    ):
    """Print the block tokens of a markdown document as JSON."""
    settings = _settings(overrides={"json_indent": indent, "log_level": log_level})
    sources = _sources(path)
    if len(sources) > 1:
        _fail(f"{path} holds {len(sources)} markdown files; pass a single file")

    label, text = sources[0]
    blocks = tokenize(text)
    logger.info("Tokenized %s into %d block(s)", label, len(blocks))
    typer.echo(_dump(blocks, settings.json_indent))


def inline_cmd(
    text: Annotated[str, typer.Argument(help="Inline markdown text")],
    indent: Annotated[Optional[int], typer.Option("--indent", min=0, help="JSON indent width")] = None,
    ):
    """Print the inline tokens of a single line of markdown as JSON."""
    settings = _settings(overrides={"json_indent": indent})
    typer.echo(_dump(parse_inline(text), settings.json_indent))
