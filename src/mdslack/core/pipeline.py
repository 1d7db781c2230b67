"""Conversion entry points: markdown text to blocks, and markdown files to JSON payloads"""

from pathlib import Path
from typing import Optional

from mdslack.config import Settings
from mdslack.core.convert.router import transform
from mdslack.core.export import to_dicts, write_payload
from mdslack.core.models import Block, ParsedDoc, ParsingOptions
from mdslack.core.parse import discover_files, lex, parse_file
from mdslack.core.validation import (
    MAX_BLOCKS,
    MAX_INPUT_LENGTH,
    validate_block_count,
    validate_input,
)


def markdown_to_blocks(
    body: str,
    options: Optional[ParsingOptions] = None,
    parser_config: str = 'gfm-like',
    max_blocks: int = MAX_BLOCKS,
    max_input_length: int = MAX_INPUT_LENGTH,
    ) -> list[Block]:
    """Convert markdown into Slack blocks.

    Headings become header blocks, lists become rich_text lists, tables become
    native table blocks, and links to known file types become file blocks.

    Raises ValidationError for non-string or over-long input, BlockLimitError
    when the result exceeds max_blocks, and RecursionLimitError for
    pathologically nested inline markup.
    """
    validate_input(body, max_input_length)
    blocks = transform(lex(body, parser_config), options)
    validate_block_count(len(blocks), max_blocks)
    return blocks


def markdown_to_payload(body: str, **kwargs) -> list[dict]:
    """markdown_to_blocks serialized to Slack's JSON block shape."""
    return to_dicts(markdown_to_blocks(body, **kwargs))


def convert_doc(parsed: ParsedDoc, settings: Settings) -> list[Block]:
    """Convert an already parsed document under the limits in settings."""
    validate_input(parsed.markdown, settings.max_input_length)
    blocks = transform(parsed.tree, settings.parsing_options())
    validate_block_count(len(blocks), settings.max_blocks)
    return blocks


def convert_file(path: Path, settings: Settings) -> tuple[ParsedDoc, list[Block]]:
    parsed = parse_file(path, settings.parser_config)
    return parsed, convert_doc(parsed, settings)


def run_convert(
    path: str,
    output_dir: Path,
    settings: Settings,
    ) -> list[tuple[Path, Path]]:
    """Convert path (file or directory) to <slug>.json payloads. Returns (source_path, output_file) pairs."""
    results = []
    for p in discover_files(Path(path)):
        try:
            parsed, blocks = convert_file(p, settings)
            out_file = write_payload(blocks, output_dir / f"{parsed.slug}.json", settings.indent)
            results.append((p, out_file))
        except Exception as e:
            raise RuntimeError(f"Failed to convert {p}: {e}") from e
    return results
