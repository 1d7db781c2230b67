"""Slack Block Kit models, parsing options, and intermediate parse results"""

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Any, Callable, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from mdslack.core.validation import MAX_RECURSION_DEPTH


# --- composition objects ---

class TextObject(BaseModel):
    type: Literal['plain_text', 'mrkdwn']
    text: str
    emoji: Optional[bool] = None


class RichTextStyle(BaseModel):
    bold:   Optional[bool] = None
    italic: Optional[bool] = None
    strike: Optional[bool] = None
    code:   Optional[bool] = None


class RichTextText(BaseModel):
    type: Literal['text'] = 'text'
    text: str
    style: Optional[RichTextStyle] = None


class RichTextLink(BaseModel):
    type: Literal['link'] = 'link'
    url: str
    text: Optional[str] = None
    style: Optional[RichTextStyle] = None


RichTextInline = Annotated[Union[RichTextText, RichTextLink], Field(discriminator='type')]


class RichTextSection(BaseModel):
    type: Literal['rich_text_section'] = 'rich_text_section'
    elements: list[RichTextInline] = []


class RichTextList(BaseModel):
    type: Literal['rich_text_list'] = 'rich_text_list'
    style: Literal['bullet', 'ordered']
    indent: int = 0
    elements: list[RichTextSection] = []


class RichTextQuote(BaseModel):
    type: Literal['rich_text_quote'] = 'rich_text_quote'
    elements: list[RichTextInline] = []


class RichTextPreformatted(BaseModel):
    type: Literal['rich_text_preformatted'] = 'rich_text_preformatted'
    elements: list[RichTextInline] = []


RichTextElement = Annotated[
    Union[RichTextSection, RichTextList, RichTextQuote, RichTextPreformatted],
    Field(discriminator='type'),
]


# --- blocks ---

class SectionBlock(BaseModel):
    type: Literal['section'] = 'section'
    text: TextObject


class HeaderBlock(BaseModel):
    type: Literal['header'] = 'header'
    text: TextObject


class DividerBlock(BaseModel):
    type: Literal['divider'] = 'divider'


class ImageBlock(BaseModel):
    type: Literal['image'] = 'image'
    image_url: str
    alt_text: str
    title: Optional[TextObject] = None


class VideoBlock(BaseModel):
    type: Literal['video'] = 'video'
    video_url: str
    thumbnail_url: str
    title: TextObject
    alt_text: str
    description: Optional[TextObject] = None
    author_name: Optional[str] = None
    provider_name: Optional[str] = None
    provider_icon_url: Optional[str] = None
    title_url: Optional[str] = None


class FileBlock(BaseModel):
    type: Literal['file'] = 'file'
    external_id: str
    source: Literal['remote'] = 'remote'
    block_id: Optional[str] = None


class RichTextBlock(BaseModel):
    type: Literal['rich_text'] = 'rich_text'
    elements: list[RichTextElement] = []


class RawTextCell(BaseModel):
    type: Literal['raw_text'] = 'raw_text'
    text: str


# a rich cell is a rich_text block holding one rich_text_section
TableCell = Annotated[Union[RawTextCell, RichTextBlock], Field(discriminator='type')]


class ColumnSetting(BaseModel):
    """Per-column table setting; an empty setting is a positional placeholder."""
    align: Optional[Literal['center', 'right']] = None
    is_wrapped: Optional[bool] = None


class TableBlock(BaseModel):
    type: Literal['table'] = 'table'
    rows: list[list[TableCell]]
    column_settings: Optional[list[ColumnSetting]] = None


Block = Annotated[
    Union[
        SectionBlock, HeaderBlock, DividerBlock, ImageBlock, VideoBlock,
        FileBlock, RichTextBlock, TableBlock,
    ],
    Field(discriminator='type'),
]


# --- options ---

def default_checkbox_prefix(checked: bool) -> str:
    """Glyph prepended to task list items."""
    return '✅ ' if checked else '☐ '


class ListOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    checkbox_prefix: Callable[[bool], str] = default_checkbox_prefix


class ParsingOptions(BaseModel):
    """Immutable options for one conversion."""
    model_config = ConfigDict(frozen=True)

    lists: ListOptions = Field(default_factory=ListOptions)
    max_recursion_depth: int = Field(default=MAX_RECURSION_DEPTH, ge=1)


@dataclass
class ParsedDoc:
    """Internal parse result carrying the markdown-it syntax tree; not persisted."""
    path:         Path
    slug:         str
    raw_markdown: str          # full file content (includes frontmatter)
    markdown:     str          # body only (frontmatter stripped)
    frontmatter:  dict[str, Any]
    tree:         Any          # markdown_it.tree.SyntaxTreeNode
