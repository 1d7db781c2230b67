"""Unit tests for core/validation.py"""

import pytest

from mdslack.core.errors import BlockLimitError, RecursionLimitError, ValidationError
from mdslack.core.validation import (
    make_html_parser,
    validate_block_count,
    validate_input,
    validate_recursion_depth,
    validate_url,
)


@pytest.mark.parametrize("url", [
    "https://example.com",
    "http://example.com/a/b.png?x=1",
    "data:image/png;base64,iVBORw0KGgo=",
    "/images/logo.png",
    "docs/readme.txt",
])
def test_validate_url_accepts(url):
    assert validate_url(url) is True


@pytest.mark.parametrize("url", [
    "",
    "   ",
    None,
    42,
    "http://",
    "javascript:alert(1)",
    "ftp://example.com/file",
    "//evil.example.com/x",
    "data:nocomma",
])
def test_validate_url_rejects(url):
    assert validate_url(url) is False


def test_validate_recursion_depth_at_limit_ok():
    validate_recursion_depth(5, 5)


def test_validate_recursion_depth_past_limit():
    with pytest.raises(RecursionLimitError, match="Maximum recursion depth of 5 exceeded"):
        validate_recursion_depth(6, 5)


def test_validate_input_rejects_non_string():
    with pytest.raises(ValidationError, match="must be a string"):
        validate_input(b"bytes")


def test_validate_input_rejects_long_text():
    with pytest.raises(ValidationError, match="exceeding the limit of 10"):
        validate_input("x" * 11, 10)


def test_validation_error_is_value_error():
    """Callers catching ValueError also catch builder validation failures."""
    with pytest.raises(ValueError):
        validate_input(None)


def test_validate_block_count():
    validate_block_count(50)
    with pytest.raises(BlockLimitError) as exc:
        validate_block_count(51)
    assert exc.value.count == 51
    assert exc.value.limit == 50


def test_make_html_parser_returns_fresh_instances():
    assert make_html_parser() is not make_html_parser()
