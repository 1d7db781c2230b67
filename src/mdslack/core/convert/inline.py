"""Inline token conversion: mrkdwn rendering, plain text, rich text elements, and paragraph accumulation

Every function here takes markdown-it SyntaxTreeNode objects for the children
of an `inline` node (text, em, strong, s, code_inline, link, image, breaks).
"""

import logging

from mdslack.core.builders import append_mrkdwn, file, image, section
from mdslack.core.convert.context import Context
from mdslack.core.convert.files import classify_link
from mdslack.core.errors import ValidationError
from mdslack.core.models import (
    Block,
    RichTextInline,
    RichTextLink,
    RichTextStyle,
    RichTextText,
    SectionBlock,
)
from mdslack.core.validation import validate_url


logger = logging.getLogger(__name__)

MRKDWN_MARKERS = {'strong': '*', 'em': '_', 's': '~'}
STYLE_FLAGS = {'strong': 'bold', 'em': 'italic', 's': 'strike'}
TEXT_TYPES = {'text', 'text_special'}
BREAK_TYPES = {'softbreak', 'hardbreak'}


def inline_children(node) -> list:
    """Inline tokens of a block node (paragraph, heading, table cell); [] when it has none."""
    return [c for child in node.children if child.type == 'inline' for c in child.children]


def plain_text(node) -> list[str]:
    """Unstyled text of an inline node, built from the unescaped source text."""
    if node.type in ('link', 'em', 'strong', 's'):
        return [part for child in node.children for part in plain_text(child)]
    if node.type in BREAK_TYPES:
        return []
    if node.type == 'image':
        return [node.attrGet('title') or node.attrGet('src') or '']
    if node.type == 'code_inline':
        return [f"{node.markup}{node.meta.get('raw', node.content)}{node.markup}"]
    if node.type in TEXT_TYPES or node.type == 'html_inline':
        return [node.meta.get('raw', node.content)]
    return []


def render_mrkdwn(node, ctx: Context) -> str:
    """Render an inline node as Slack mrkdwn; raises RecursionLimitError past the nesting ceiling."""
    with ctx.nested():
        if node.type == 'link':
            inner = ''.join(render_mrkdwn(child, ctx) for child in node.children)
            href = node.attrGet('href')
            if not validate_url(href):
                return inner
            return f'<{href}|{inner}> '

        if node.type in MRKDWN_MARKERS:
            marker = MRKDWN_MARKERS[node.type]
            return marker + ''.join(render_mrkdwn(child, ctx) for child in node.children) + marker

        if node.type == 'code_inline':
            return f'`{node.content}`'
        if node.type in TEXT_TYPES:
            return node.content
        if node.type in BREAK_TYPES:
            return '\n'
        return ''


def _flat_text(node) -> str:
    if node.children:
        return ''.join(_flat_text(child) for child in node.children)
    if node.type in BREAK_TYPES:
        return '\n'
    return node.content


def rich_elements(nodes: list) -> list[RichTextInline]:
    """Convert inline nodes into rich text elements.

    Styled runs keep only their outermost style; nested markup is flattened
    into the text of the outer element.
    """
    elements: list[RichTextInline] = []

    for node in nodes:
        if node.type in TEXT_TYPES:
            elements.append(RichTextText(text=node.content))
        elif node.type in STYLE_FLAGS:
            style = RichTextStyle(**{STYLE_FLAGS[node.type]: True})
            elements.append(RichTextText(text=_flat_text(node), style=style))
        elif node.type == 'code_inline':
            elements.append(RichTextText(text=node.content, style=RichTextStyle(code=True)))
        elif node.type == 'link':
            href = node.attrGet('href')
            text = _flat_text(node)
            if validate_url(href):
                elements.append(RichTextLink(url=href, text=text))
            else:
                elements.append(RichTextText(text=text))
        elif node.type == 'image':
            # images cannot sit inline in rich text
            elements.append(RichTextText(text=node.content or node.attrGet('title') or '[image]'))
        elif node.type in BREAK_TYPES:
            elements.append(RichTextText(text='\n'))
        elif node.content:
            elements.append(RichTextText(text=node.content))

    return elements


def add_mrkdwn(content: str, accumulator: list[Block]) -> None:
    """Append content to a trailing section, or start a new section."""
    last = accumulator[-1] if accumulator else None
    if isinstance(last, SectionBlock):
        append_mrkdwn(last, content)
    elif content:
        accumulator.append(section(content))


def add_phrasing(node, accumulator: list[Block], ctx: Context) -> None:
    """Fold one inline node into accumulator as an image, a file, or mrkdwn text."""
    if node.type == 'image':
        src = node.attrGet('src') or ''
        title = node.attrGet('title')
        try:
            accumulator.append(image(src, node.content or title or src, title))
        except ValidationError as e:
            logger.debug("Skipping image: %s", e)
        return

    if node.type == 'link':
        name = classify_link(node.attrGet('href') or '', ''.join(plain_text(node)))
        if name is not None:
            try:
                accumulator.append(file(name))
                return
            except ValidationError as e:
                logger.debug("File block failed, keeping link as text: %s", e)

    add_mrkdwn(render_mrkdwn(node, ctx), accumulator)


def parse_paragraph(node, ctx: Context) -> list[Block]:
    """Convert a paragraph into sections, images, and file blocks in source order."""
    accumulator: list[Block] = []
    for child in inline_children(node):
        add_phrasing(child, accumulator, ctx)
    return accumulator
