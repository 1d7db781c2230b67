"""Blockquote conversion: one rich_text_quote when possible, quoted block sequence otherwise

A quote is classified once, before any block is built. Simple quotes hold only
paragraphs and no file links; anything else is complex and expands child by
child, with "> " prefixed onto every resulting section.
"""

from mdslack.core.builders import rich_text_quote, section
from mdslack.core.convert.blocks import parse_code, parse_heading
from mdslack.core.convert.context import Context
from mdslack.core.convert.html import parse_html
from mdslack.core.convert.inline import inline_children, parse_paragraph, rich_elements
from mdslack.core.convert.lists import parse_list
from mdslack.core.models import Block, FileBlock, RichTextText, SectionBlock


SIMPLE_TYPES = {'paragraph', 'inline'}


def _quote_inline(child) -> list:
    return inline_children(child) if child.type == 'paragraph' else child.children


def is_simple_quote(node, ctx: Context) -> bool:
    """True when every child is a paragraph and a trial parse produces no file blocks."""
    if not all(child.type in SIMPLE_TYPES for child in node.children):
        return False
    trial = [
        block
        for child in node.children if child.type == 'paragraph'
        for block in parse_paragraph(child, ctx)
    ]
    return not any(isinstance(block, FileBlock) for block in trial)


def _simple_quote(node) -> list[Block]:
    elements = []
    last = len(node.children) - 1
    for index, child in enumerate(node.children):
        children = _quote_inline(child)
        if not children:
            continue
        elements.extend(rich_elements(children))
        if index < last:
            elements.append(RichTextText(text='\n'))
    return [rich_text_quote(elements)] if elements else []


def _quote_child(child, ctx: Context) -> list[Block]:
    if child.type == 'paragraph':
        return parse_paragraph(child, ctx)
    if child.type in ('bullet_list', 'ordered_list'):
        return [parse_list(child, ctx)]
    if child.type in ('fence', 'code_block'):
        return [parse_code(child)]
    if child.type == 'blockquote':
        return parse_blockquote(child, ctx)
    if child.type == 'heading':
        return parse_heading(child)
    if child.type == 'html_block':
        return parse_html(child)
    return []


def quote_section(block: SectionBlock) -> SectionBlock:
    """Prefix every line of a section with the mrkdwn quote marker."""
    return section('> ' + block.text.text.replace('\n', '\n> '))


def parse_blockquote(node, ctx: Context) -> list[Block]:
    if is_simple_quote(node, ctx):
        return _simple_quote(node)

    blocks = [block for child in node.children for block in _quote_child(child, ctx)]
    return [
        quote_section(block) if isinstance(block, SectionBlock) and block.text.text else block
        for block in blocks
    ]
