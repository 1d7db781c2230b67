"""GFM table conversion with per-cell raw/rich representation and sparse column settings"""

import re
from typing import Optional

from mdslack.core.builders import TABLE_MAX_COLUMN_SETTINGS, table
from mdslack.core.convert.inline import inline_children, rich_elements
from mdslack.core.models import (
    ColumnSetting,
    RawTextCell,
    RichTextBlock,
    RichTextSection,
    TableBlock,
    TableCell,
)


COMPLEX_TYPES = {'strong', 'em', 's', 'link', 'code_inline'}
ALIGN_RE = re.compile(r'text-align\s*:\s*(left|center|right)', re.IGNORECASE)
SETTING_ALIGNMENTS = {'center', 'right'}


def style_alignment(style) -> Optional[str]:
    """Alignment named by a CSS style attribute such as 'text-align:center'."""
    m = ALIGN_RE.search(style) if isinstance(style, str) else None
    return m.group(1).lower() if m else None


def column_settings(alignments: list[Optional[str]]) -> Optional[list[ColumnSetting]]:
    """Index-aligned settings for centre/right columns; left and unset columns are empty holes.

    Trailing holes are dropped, so a table without centre/right columns gets None.
    """
    settings = [
        ColumnSetting(align=align) if align in SETTING_ALIGNMENTS else ColumnSetting()
        for align in alignments[:TABLE_MAX_COLUMN_SETTINGS]
    ]
    while settings and settings[-1].align is None:
        settings.pop()
    return settings or None


def has_complex_formatting(nodes: list) -> bool:
    return any(node.type in COMPLEX_TYPES for node in nodes)


def parse_table_cell(node) -> TableCell:
    """Rich cell when the cell carries styling or links, raw text otherwise."""
    children = inline_children(node)
    if has_complex_formatting(children):
        return RichTextBlock(elements=[RichTextSection(elements=rich_elements(children))])
    return RawTextCell(text=''.join(child.content for child in children))


def parse_table(node) -> TableBlock:
    """Convert a table node (thead/tbody of tr rows) into a table block."""
    rows: list[list[TableCell]] = []
    alignments: list[Optional[str]] = []

    for part in node.children:
        for tr in part.children:
            if part.type == 'thead' and not alignments:
                alignments = [style_alignment(cell.attrGet('style')) for cell in tr.children]
            rows.append([parse_table_cell(cell) for cell in tr.children])

    return table(rows, column_settings(alignments))
