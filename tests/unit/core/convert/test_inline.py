"""Unit tests for core/convert/inline.py"""

import pytest

from mdslack.core.convert.inline import (
    add_mrkdwn,
    parse_paragraph,
    plain_text,
    render_mrkdwn,
    rich_elements,
)
from mdslack.core.builders import section
from mdslack.core.models import DividerBlock, FileBlock, ImageBlock, SectionBlock
from mdslack.core.parse import lex


def _mrkdwn(first_inline, ctx, md: str) -> str:
    return ''.join(render_mrkdwn(node, ctx) for node in first_inline(md))


def _dump(elements) -> list[dict]:
    return [e.model_dump(exclude_none=True) for e in elements]


def test_render_nested_styles_and_link(first_inline, ctx):
    """Bold, single-tilde strike and an emphasized link render to mrkdwn."""
    md = "**a ~b~** c[*d*](https://example.com)\n"
    assert _mrkdwn(first_inline, ctx, md) == "*a ~b~* c<https://example.com|_d_> "


def test_render_code_and_escaping(first_inline, ctx):
    assert _mrkdwn(first_inline, ctx, "use `x<y` & go\n") == "use `x&lt;y` &amp; go"


def test_render_softbreak_as_newline(first_inline, ctx):
    assert _mrkdwn(first_inline, ctx, "one\ntwo\n") == "one\ntwo"


def test_render_invalid_link_keeps_text(first_inline, ctx):
    assert _mrkdwn(first_inline, ctx, "[x](ftp://example.com/a)\n") == "x"


def test_render_releases_depth(first_inline, ctx):
    _mrkdwn(first_inline, ctx, "***deep*** text\n")
    assert ctx.depth == 0


def test_plain_text_unescaped(first_inline):
    """plain_text reads the source text, not the mrkdwn-escaped form."""
    nodes = first_inline("Tom & *Jerry* `<b>`\n")
    assert ''.join(p for n in nodes for p in plain_text(n)) == "Tom & Jerry `<b>`"


def test_plain_text_image_uses_title_then_src(first_inline):
    nodes = first_inline('![alt](https://example.com/a.png "Cap") ![](https://example.com/b.png)\n')
    images = [n for n in nodes if n.type == 'image']
    assert [plain_text(n) for n in images] == [["Cap"], ["https://example.com/b.png"]]


def test_rich_elements_outer_style_only(first_inline):
    """Nested styles flatten into the outermost style."""
    elements = rich_elements(first_inline("plain **bold _both_** `code`\n"))
    assert _dump(elements) == [
        {"type": "text", "text": "plain "},
        {"type": "text", "text": "bold both", "style": {"bold": True}},
        {"type": "text", "text": " "},
        {"type": "text", "text": "code", "style": {"code": True}},
    ]


def test_rich_elements_link(first_inline):
    elements = rich_elements(first_inline("[site](https://example.com) [bad](ftp://x)\n"))
    assert _dump(elements) == [
        {"type": "link", "url": "https://example.com", "text": "site"},
        {"type": "text", "text": " "},
        {"type": "text", "text": "bad"},
    ]


def test_rich_elements_strike_and_break(first_inline):
    elements = rich_elements(first_inline("~~old~~  \nnew\n"))
    assert _dump(elements) == [
        {"type": "text", "text": "old", "style": {"strike": True}},
        {"type": "text", "text": "\n"},
        {"type": "text", "text": "new"},
    ]


def test_rich_elements_image_stand_in(first_inline):
    elements = rich_elements(first_inline("![](https://example.com/a.png)\n"))
    assert _dump(elements) == [{"type": "text", "text": "[image]"}]


def test_add_mrkdwn_merges_into_trailing_section():
    acc = [section("a")]
    add_mrkdwn("b", acc)
    assert len(acc) == 1
    assert acc[0].text.text == "ab"


def test_add_mrkdwn_starts_section_after_other_block():
    acc = [DividerBlock()]
    add_mrkdwn("b", acc)
    assert isinstance(acc[1], SectionBlock)


def test_add_mrkdwn_skips_empty_content():
    acc = []
    add_mrkdwn("", acc)
    assert acc == []


def test_parse_paragraph_single_section(ctx):
    """Consecutive inline runs share one section."""
    blocks = parse_paragraph(lex("Hello *world*\nagain **now**\n").children[0], ctx)
    assert len(blocks) == 1
    assert blocks[0].text.text == "Hello _world_\nagain *now*"


def test_parse_paragraph_image_splits_sections(ctx):
    blocks = parse_paragraph(lex('a ![pic](https://example.com/p.png "T") b\n').children[0], ctx)
    assert [type(b) for b in blocks] == [SectionBlock, ImageBlock, SectionBlock]
    assert blocks[1].alt_text == "pic"
    assert blocks[1].title.text == "T"
    assert blocks[2].text.text == " b"


def test_parse_paragraph_invalid_image_skipped(ctx, caplog):
    with caplog.at_level("DEBUG", logger="mdslack.core.convert.inline"):
        blocks = parse_paragraph(lex("![x](ftp://example.com/a.png)\n").children[0], ctx)
    assert blocks == []
    assert "Skipping image" in caplog.text


@pytest.mark.parametrize("md,name", [
    ("[report.pdf](https://example.com/files/report.pdf)\n", "report.pdf"),
    ("[Download](https://example.com/files/q3.xlsx)\n", "q3.xlsx"),
])
def test_parse_paragraph_file_link(ctx, md, name):
    blocks = parse_paragraph(lex(md).children[0], ctx)
    assert len(blocks) == 1
    assert isinstance(blocks[0], FileBlock)
    assert blocks[0].external_id == name
