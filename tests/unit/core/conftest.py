"""Shared fixtures for core unit tests"""

import pytest

from mdslack.core.convert.context import Context
from mdslack.core.convert.router import transform
from mdslack.core.export import to_dicts
from mdslack.core.parse import lex, make_parser


SAMPLE_MD = """\
# Release notes

Ships **today** with ~~old~~ new _features_.

- [x] parser
- [ ] docs

| Name | Qty |
|------|:---:|
| Apple | 3 |

> Quoted line

```python
print("hello")
```

---

Grab the [spec.pdf](https://example.com/files/spec.pdf).
"""


@pytest.fixture(name="parser")
def parser_fixture():
    return make_parser()


@pytest.fixture(name="ctx")
def ctx_fixture():
    return Context()


@pytest.fixture(name="convert")
def convert_fixture():
    """Markdown text -> list of Slack block dicts."""
    def _convert(md: str, options=None) -> list[dict]:
        return to_dicts(transform(lex(md), options))
    return _convert


@pytest.fixture(name="first_inline")
def first_inline_fixture():
    """Inline child nodes of the first top-level block in md."""
    def _inline(md: str) -> list:
        block = lex(md).children[0]
        return [c for child in block.children if child.type == 'inline' for c in child.children]
    return _inline


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD
