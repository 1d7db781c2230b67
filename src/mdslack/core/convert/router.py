"""Top-level dispatch from markdown-it block nodes to Slack blocks"""

import logging
from typing import Callable, Optional

from mdslack.core.convert.blocks import parse_code, parse_heading, parse_thematic_break
from mdslack.core.convert.context import Context
from mdslack.core.convert.html import parse_html
from mdslack.core.convert.inline import parse_paragraph
from mdslack.core.convert.lists import parse_list
from mdslack.core.convert.quotes import parse_blockquote
from mdslack.core.convert.tables import parse_table
from mdslack.core.models import Block, ParsingOptions


logger = logging.getLogger(__name__)

Handler = Callable[..., list[Block]]

BLOCK_HANDLERS: dict[str, Handler] = {
    'heading':      lambda node, ctx: parse_heading(node),
    'paragraph':    parse_paragraph,
    'fence':        lambda node, ctx: [parse_code(node)],
    'code_block':   lambda node, ctx: [parse_code(node)],
    'blockquote':   parse_blockquote,
    'bullet_list':  lambda node, ctx: [parse_list(node, ctx)],
    'ordered_list': lambda node, ctx: [parse_list(node, ctx)],
    'table':        lambda node, ctx: [parse_table(node)],
    'hr':           lambda node, ctx: [parse_thematic_break(node)],
    'html_block':   lambda node, ctx: parse_html(node),
}


def route(node, ctx: Context) -> list[Block]:
    """Blocks for one top-level node; unsupported node types produce []."""
    handler = BLOCK_HANDLERS.get(node.type)
    if handler is None:
        logger.debug("Skipping unsupported token type %r", node.type)
        return []
    return handler(node, ctx)


def transform(tree, options: Optional[ParsingOptions] = None) -> list[Block]:
    """Convert a markdown-it syntax tree into Slack blocks in document order."""
    ctx = Context(options or ParsingOptions())
    return [block for node in tree.children for block in route(node, ctx)]
