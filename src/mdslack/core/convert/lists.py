"""List conversion to a single rich_text_list block"""

from mdslack.core.builders import rich_text_list
from mdslack.core.convert.blocks import code_text
from mdslack.core.convert.context import Context
from mdslack.core.convert.inline import inline_children, rich_elements
from mdslack.core.models import RichTextBlock, RichTextSection, RichTextStyle, RichTextText


CODE_TYPES = {'fence', 'code_block'}


def parse_list_item(item, ctx: Context) -> RichTextSection:
    """Convert one list_item node; nested lists inside the item are dropped."""
    elements = []
    if item.meta.get('task'):
        prefix = ctx.options.lists.checkbox_prefix(item.meta.get('checked', False))
        elements.append(RichTextText(text=prefix))

    for child in item.children:
        if child.type in ('paragraph', 'inline'):
            elements.extend(rich_elements(inline_children(child) if child.type == 'paragraph' else child.children))
        elif child.type in CODE_TYPES:
            elements.append(RichTextText(text=f'\n{code_text(child)}\n', style=RichTextStyle(code=True)))

    return RichTextSection(elements=elements)


def parse_list(node, ctx: Context) -> RichTextBlock:
    """Convert a bullet_list or ordered_list node; task lists keep bullet style with glyph prefixes."""
    items = [parse_list_item(item, ctx) for item in node.children if item.type == 'list_item']
    style = 'ordered' if node.type == 'ordered_list' else 'bullet'
    return rich_text_list(items, style)
