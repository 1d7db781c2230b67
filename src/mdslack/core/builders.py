"""Block constructors enforcing Slack field types and size ceilings"""

from typing import Literal, Optional

from mdslack.core.errors import ValidationError
from mdslack.core.models import (
    ColumnSetting,
    DividerBlock,
    FileBlock,
    HeaderBlock,
    ImageBlock,
    RichTextBlock,
    RichTextInline,
    RichTextList,
    RichTextPreformatted,
    RichTextQuote,
    RichTextSection,
    RichTextText,
    SectionBlock,
    TableBlock,
    TableCell,
    TextObject,
    VideoBlock,
)
from mdslack.core.validation import validate_url


SECTION_TEXT_LIMIT = 3000
HEADER_TEXT_LIMIT = 150
IMAGE_TEXT_LIMIT = 2000
VIDEO_TEXT_LIMIT = 200
VIDEO_AUTHOR_LIMIT = 50
TABLE_MAX_ROWS = 100
TABLE_MAX_CELLS = 20
TABLE_MAX_COLUMN_SETTINGS = 20


def truncate(text: str, limit: int) -> str:
    """Cut text to at most limit characters; slicing by code point never splits a character."""
    return text if len(text) <= limit else text[:limit]


def _require_text(value, what: str) -> str:
    if not isinstance(value, str) or not value:
        raise ValidationError(f"{what} must be a non-empty string")
    return value


def _optional_url(value: Optional[str], what: str) -> Optional[str]:
    if value is None:
        return None
    if not validate_url(value):
        raise ValidationError(f"Invalid {what}: {value!r}")
    return value


def section(text: str) -> SectionBlock:
    if not isinstance(text, str):
        raise ValidationError("Section text must be a string")
    return SectionBlock(text=TextObject(type='mrkdwn', text=truncate(text, SECTION_TEXT_LIMIT)))


def append_mrkdwn(block: SectionBlock, content: str) -> None:
    """Append content to a section while keeping it within the section ceiling."""
    block.text.text = truncate(block.text.text + content, SECTION_TEXT_LIMIT)


def header(text: str) -> HeaderBlock:
    if not isinstance(text, str):
        raise ValidationError("Header text must be a string")
    if not text.strip():
        raise ValidationError("Header text must not be empty")
    return HeaderBlock(text=TextObject(type='plain_text', text=truncate(text, HEADER_TEXT_LIMIT)))


def divider() -> DividerBlock:
    return DividerBlock()


def image(url: str, alt_text: str, title: Optional[str] = None) -> ImageBlock:
    if not isinstance(url, str) or not url:
        raise ValidationError("Image URL must be a non-empty string")
    if not validate_url(url):
        raise ValidationError(f"Invalid image URL: {url!r}")
    if not isinstance(alt_text, str):
        raise ValidationError("Image alt text must be a string")
    return ImageBlock(
        image_url=url,
        alt_text=truncate(alt_text, IMAGE_TEXT_LIMIT),
        title=TextObject(type='plain_text', text=truncate(title, IMAGE_TEXT_LIMIT)) if title else None,
    )


def video(
    video_url: str,
    thumbnail_url: str,
    title: str,
    alt_text: str,
    description: Optional[str] = None,
    author_name: Optional[str] = None,
    provider_name: Optional[str] = None,
    provider_icon_url: Optional[str] = None,
    title_url: Optional[str] = None,
    ) -> VideoBlock:
    """Build a video block; every URL must pass validate_url."""
    _require_text(video_url, "Video URL")
    _require_text(thumbnail_url, "Video thumbnail URL")
    _require_text(title, "Video title")
    _require_text(alt_text, "Video alt text")
    if not validate_url(video_url):
        raise ValidationError(f"Invalid video URL: {video_url!r}")
    if not validate_url(thumbnail_url):
        raise ValidationError(f"Invalid thumbnail URL: {thumbnail_url!r}")

    return VideoBlock(
        video_url=video_url,
        thumbnail_url=thumbnail_url,
        title=TextObject(type='plain_text', text=truncate(title, VIDEO_TEXT_LIMIT), emoji=True),
        alt_text=alt_text,
        description=(
            TextObject(type='plain_text', text=truncate(description, VIDEO_TEXT_LIMIT), emoji=True)
            if description else None
        ),
        author_name=truncate(author_name, VIDEO_AUTHOR_LIMIT) if author_name else None,
        provider_name=provider_name,
        provider_icon_url=_optional_url(provider_icon_url, "provider icon URL"),
        title_url=_optional_url(title_url, "title URL"),
    )


def file(external_id: str) -> FileBlock:
    return FileBlock(external_id=_require_text(external_id, "File external_id"))


def table(
    rows: list[list[TableCell]],
    column_settings: Optional[list[ColumnSetting]] = None,
    ) -> TableBlock:
    """Build a table block capped at TABLE_MAX_ROWS x TABLE_MAX_CELLS."""
    if not rows:
        raise ValidationError("Table must have at least one row")
    return TableBlock(
        rows=[row[:TABLE_MAX_CELLS] for row in rows[:TABLE_MAX_ROWS]],
        column_settings=column_settings[:TABLE_MAX_COLUMN_SETTINGS] if column_settings else None,
    )


def rich_text_list(
    items: list[RichTextSection],
    style: Literal['bullet', 'ordered'] = 'bullet',
    indent: int = 0,
    ) -> RichTextBlock:
    return RichTextBlock(elements=[RichTextList(style=style, indent=indent, elements=items)])


def rich_text_code(code: str) -> RichTextBlock:
    return RichTextBlock(elements=[RichTextPreformatted(elements=[RichTextText(text=code)])])


def rich_text_quote(elements: list[RichTextInline]) -> RichTextBlock:
    return RichTextBlock(elements=[RichTextQuote(elements=elements)])
