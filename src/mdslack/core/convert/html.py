"""Embedded HTML islands: tables, images and videos the markdown dialect cannot express

Islands are parsed with lxml's HTML parser under SECURE_HTML_OPTIONS, so void
tags (<img>, <br>, <col>) need no closing slash and named entities decode.
table, img and video tags are recognized wherever they sit in the island,
except inside another recognized tag; anything else is ignored.
"""

import logging
from typing import Optional

from lxml import etree

from mdslack.core.builders import image, table, video
from mdslack.core.convert.tables import column_settings, style_alignment
from mdslack.core.errors import ParseError, ValidationError
from mdslack.core.models import Block, ImageBlock, RawTextCell, TableBlock, VideoBlock
from mdslack.core.validation import make_html_parser, validate_url


logger = logging.getLogger(__name__)

DEFAULT_VIDEO_TITLE = 'Video'


def _tag(el) -> str:
    return el.tag.lower() if isinstance(el.tag, str) else ''


def _children(el, *tags: str) -> list:
    return [child for child in el if _tag(child) in tags]


def _first(el, tag: str):
    found = _children(el, tag)
    return found[0] if found else None


def parse_island(raw: str):
    """Parse raw HTML and return the <body> element holding the island."""
    try:
        doc = etree.fromstring(f'<html><body>{raw}</body></html>', make_html_parser())
    except (etree.LxmlError, ValueError) as e:
        raise ParseError(str(e)) from e
    body = doc.find('body') if doc is not None else None
    if body is None:
        raise ParseError("HTML block produced no document")
    return body


def visible_text(el) -> str:
    """Text of el and all descendants in document order, whitespace collapsed; <br> counts as a space."""
    def collect(node) -> str:
        parts = [node.text or '']
        for child in node:
            if _tag(child) == 'br':
                parts.append(' ')
            parts.append(collect(child))
            parts.append(child.tail or '')
        return ''.join(parts)

    return ' '.join(collect(el).split())


def _alignment(el) -> Optional[str]:
    align = (el.get('align') or '').lower()
    if align in ('center', 'right'):
        return align
    return style_alignment(el.get('style'))


def _html_row(cells: list, alignments: dict[int, str]) -> list[RawTextCell]:
    row = []
    for index, cell in enumerate(cells):
        align = _alignment(cell)
        if align in ('center', 'right') and index not in alignments:
            alignments[index] = align
        row.append(RawTextCell(text=visible_text(cell)))
    return row


def parse_html_table(el) -> Optional[TableBlock]:
    """Convert a <table> element; returns None when it has no rows."""
    alignments: dict[int, str] = {}

    colgroup = _first(el, 'colgroup')
    if colgroup is not None:
        for index, col in enumerate(_children(colgroup, 'col')):
            align = _alignment(col)
            if align in ('center', 'right'):
                alignments[index] = align

    rows = []
    header_row = None
    thead = _first(el, 'thead')
    if thead is not None:
        header_row = _first(thead, 'tr')
        if header_row is not None:
            cells = _children(header_row, 'th', 'td')
            if cells:
                rows.append(_html_row(cells, alignments))

    body = _first(el, 'tbody')
    for tr in _children(body if body is not None else el, 'tr'):
        if tr is header_row:
            continue
        cells = _children(tr, 'td', 'th')
        if cells:
            rows.append(_html_row(cells, alignments))

    if not rows:
        logger.warning("Dropping HTML table with no rows")
        return None

    width = max(alignments) + 1 if alignments else 0
    return table(rows, column_settings([alignments.get(i) for i in range(width)]))


def parse_html_image(el) -> Optional[ImageBlock]:
    url = el.get('src') or ''
    if not validate_url(url):
        logger.debug("Skipping <img> with invalid src %r", url)
        return None
    return image(url, el.get('alt') or url)


def parse_html_video(el) -> Optional[VideoBlock]:
    """Convert a <video> element; src may also come from its first <source> child."""
    source = _first(el, 'source')
    video_url = el.get('src') or (source.get('src') if source is not None else None) or ''
    poster_url = el.get('poster') or ''
    title = el.get('title') or DEFAULT_VIDEO_TITLE
    alt_text = el.get('alt') or title

    if not validate_url(video_url):
        logger.debug("Skipping <video> with invalid src %r", video_url)
        return None
    if poster_url and not validate_url(poster_url):
        logger.debug("Skipping <video> with invalid poster %r", poster_url)
        return None

    try:
        return video(video_url, poster_url or video_url, title, alt_text)
    except ValidationError as e:
        logger.debug("Skipping <video>: %s", e)
        return None


HTML_HANDLERS = {
    'table': parse_html_table,
    'img':   parse_html_image,
    'video': parse_html_video,
}


def recognized_tags(root) -> list:
    """table/img/video elements in document order, skipping those nested in another one."""
    return [
        el for el in root.iter()
        if _tag(el) in HTML_HANDLERS
        and not any(_tag(parent) in HTML_HANDLERS for parent in el.iterancestors())
    ]


def parse_html(node) -> list[Block]:
    """Convert an html_block node; a malformed island yields no blocks and a warning."""
    try:
        root = parse_island(node.content)
        blocks = []
        for el in recognized_tags(root):
            block = HTML_HANDLERS[_tag(el)](el)
            if block is not None:
                blocks.append(block)
        return blocks
    except (ParseError, ValidationError) as e:
        logger.warning("Failed to parse HTML block: %s", e)
        return []
