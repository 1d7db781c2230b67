"""Single-block conversions: headings, code, and thematic breaks"""

import logging

from mdslack.core.builders import divider, header, rich_text_code
from mdslack.core.convert.inline import inline_children, plain_text
from mdslack.core.models import DividerBlock, HeaderBlock, RichTextBlock


logger = logging.getLogger(__name__)


def code_text(node) -> str:
    """Literal content of a fence or indented code block without its final newline."""
    return node.content.removesuffix('\n')


def parse_heading(node) -> list[HeaderBlock]:
    """Every heading level becomes a plain-text header; a heading with no text yields nothing."""
    text = ''.join(part for child in inline_children(node) for part in plain_text(child))
    if not text.strip():
        logger.debug("Skipping empty heading")
        return []
    return [header(text)]


def parse_code(node) -> RichTextBlock:
    return rich_text_code(code_text(node))


def parse_thematic_break(node) -> DividerBlock:
    return divider()
