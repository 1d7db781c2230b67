"""End-to-end conversion of a mixed markdown document"""

from mdslack.core.pipeline import markdown_to_payload


RELEASE = """\
## Weekly update

The **build** is green & took < 5 min. See [dashboard](https://ci.example.com/board).

1. Merge ~parser~ work
2. Tag the release

> Ship it when ready.

<table>
<thead><tr><th>Job</th><th align="center">Status</th></tr></thead>
<tbody><tr><td>lint</td><td>ok</td></tr></tbody>
</table>

Attached: [minutes.docx](https://files.example.com/minutes.docx)
![chart](https://files.example.com/chart.png)
"""


def test_release_document_payload():
    blocks = markdown_to_payload(RELEASE)
    assert [b["type"] for b in blocks] == [
        "header", "section", "rich_text", "rich_text", "table", "section", "file", "section", "image",
    ]
    assert blocks[0]["text"]["text"] == "Weekly update"
    assert blocks[1]["text"]["text"] == (
        "The *build* is green &amp; took &lt; 5 min. See <https://ci.example.com/board|dashboard> ."
    )
    assert blocks[2]["elements"][0]["style"] == "ordered"
    assert blocks[2]["elements"][0]["elements"][0]["elements"][1] == {
        "type": "text", "text": "parser", "style": {"strike": True},
    }
    assert blocks[3]["elements"][0]["type"] == "rich_text_quote"
    assert blocks[4]["column_settings"] == [{}, {"align": "center"}]
    assert blocks[6]["external_id"] == "minutes.docx"
    assert blocks[7]["text"]["text"] == "\n"
    assert blocks[8]["image_url"] == "https://files.example.com/chart.png"
