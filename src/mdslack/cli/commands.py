"""CLI command implementations"""

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdslack.config import Settings, load_config
from mdslack.core.errors import MdSlackError
from mdslack.core.export import build_payload
from mdslack.core.parse import parse_file
from mdslack.core.pipeline import convert_doc, run_convert


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def convert_cmd(
    path: Annotated[Path, typer.Argument(help="Markdown file to convert")],
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    max_blocks: Annotated[Optional[int], typer.Option("--max-blocks", help="Max blocks per document")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log skipped tokens and HTML failures")] = False,
    ):
    """Convert one markdown file and print the Slack payload as JSON."""
    _logging(verbose)
    settings = _settings(overrides={"parser_config": parser, "max_blocks": max_blocks})
    if not path.is_file():
        _fail(f"Not a file: {path}")
    try:
        blocks = convert_doc(parse_file(path, settings.parser_config), settings)
    except (MdSlackError, ValueError) as e:
        _fail(f"Failed to convert {path}", e)
    typer.echo(json.dumps(build_payload(blocks), indent=settings.indent, ensure_ascii=False))


def build_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to process")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    max_blocks: Annotated[Optional[int], typer.Option("--max-blocks", help="Max blocks per document")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log skipped tokens and HTML failures")] = False,
    ):
    """Convert every markdown file under path to <slug>.json payloads."""
    _logging(verbose)
    settings = _settings(overrides={"output_dir": out, "parser_config": parser, "max_blocks": max_blocks})
    output_dir = Path(settings.output_dir)
    try:
        results = run_convert(path, output_dir, settings)
    except RuntimeError as e:
        _fail(str(e))
    if not results:
        typer.echo(f"No markdown files found at {path}.")
        raise typer.Exit(1)
    for src, out_file in results:
        typer.echo(f"  {src} -> {out_file}")
    typer.echo(f"Converted {len(results)} document(s) to {output_dir}/")


def tokens_cmd(
    path: Annotated[Path, typer.Argument(help="Markdown file to tokenize")],
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    ):
    """Print the markdown-it syntax tree the converter sees."""
    settings = _settings(overrides={"parser_config": parser})
    if not path.is_file():
        _fail(f"Not a file: {path}")
    try:
        parsed = parse_file(path, settings.parser_config)
    except ValueError as e:
        _fail(f"Failed to parse {path}", e)
    typer.echo(parsed.tree.pretty(indent=2, show_text=True))
