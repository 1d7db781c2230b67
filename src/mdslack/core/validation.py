"""Input, URL, recursion and block-count validation"""

from urllib.parse import urlsplit

from lxml import etree

from mdslack.core.errors import BlockLimitError, RecursionLimitError, ValidationError


MAX_BLOCKS = 50
MAX_INPUT_LENGTH = 100_000
MAX_RECURSION_DEPTH = 100

ALLOWED_SCHEMES = {'http', 'https'}

# HTML parsing never loads a DTD or expands external entities; network fetches stay off too.
SECURE_HTML_OPTIONS = {
    'no_network': True,
    'huge_tree': False,
    'remove_comments': True,
    'remove_pis': True,
    'recover': True,
}


def make_html_parser() -> etree.HTMLParser:
    """Return a fresh lxml HTML parser with SECURE_HTML_OPTIONS; parsers are not shared across calls."""
    return etree.HTMLParser(**SECURE_HTML_OPTIONS)


def validate_url(url) -> bool:
    """Return True for http(s) URLs with a host, data: URLs, and bare relative paths."""
    if not isinstance(url, str) or not url.strip():
        return False
    try:
        parts = urlsplit(url.strip())
    except ValueError:
        return False

    scheme = parts.scheme.lower()
    if scheme in ALLOWED_SCHEMES:
        return bool(parts.netloc) and bool(parts.hostname)
    if scheme == 'data':
        return ',' in parts.path
    if scheme:
        return False
    # protocol-relative URLs carry a host but no scheme
    return not parts.netloc


def validate_recursion_depth(depth: int, limit: int = MAX_RECURSION_DEPTH) -> None:
    """Raise RecursionLimitError when depth is past limit."""
    if depth > limit:
        raise RecursionLimitError(depth, limit)


def validate_input(text, max_length: int = MAX_INPUT_LENGTH) -> None:
    """Reject non-string markdown input and input longer than max_length characters."""
    if not isinstance(text, str):
        raise ValidationError(f"Markdown input must be a string, got {type(text).__name__}")
    if len(text) > max_length:
        raise ValidationError(
            f"Markdown input is {len(text)} characters, exceeding the limit of {max_length}"
        )


def validate_block_count(count: int, limit: int = MAX_BLOCKS) -> None:
    """Raise BlockLimitError when a document converts to more than limit blocks."""
    if count > limit:
        raise BlockLimitError(count, limit)
