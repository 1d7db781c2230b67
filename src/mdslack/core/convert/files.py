"""Decide whether a link points at a downloadable file"""

import re
from typing import Optional
from urllib.parse import urlsplit


FILE_EXTENSIONS = frozenset({
    'pdf', 'doc', 'docx', 'xls', 'xlsx', 'ppt', 'pptx',     # documents
    'zip', 'rar', '7z', 'tar', 'gz',                        # archives
    'txt', 'csv', 'json', 'xml',                            # data
    'jpg', 'jpeg', 'png', 'gif', 'bmp', 'svg',              # images
})
EXTENSION_RE = re.compile(r'\.([a-zA-Z0-9]+)$')
DEFAULT_FILE_NAME = 'Document'


def _strip_query(value: str) -> str:
    return value.split('?')[0].split('#')[0]


def url_path(href: str) -> str:
    """Path component of href with query string and fragment removed."""
    try:
        return urlsplit(href).path
    except ValueError:
        return _strip_query(href)


def detect_extension(value: str) -> Optional[str]:
    """Lower-cased trailing extension of value, ignoring any query or fragment."""
    m = EXTENSION_RE.search(_strip_query(value))
    return m.group(1).lower() if m else None


def is_file_type(extension: Optional[str]) -> bool:
    return extension is not None and extension in FILE_EXTENSIONS


def file_name(path: str) -> str:
    """Last path segment of path, or DEFAULT_FILE_NAME when empty."""
    return _strip_query(path).split('/')[-1] or DEFAULT_FILE_NAME


def classify_link(href: str, text: str) -> Optional[str]:
    """Return the file name a link should be published as, or None for an ordinary link.

    The URL extension decides first and the link text is the fallback. The name
    comes from the link text when the text itself ends in a known extension,
    otherwise from the URL's last path segment.
    """
    url_extension = detect_extension(url_path(href or ''))
    text_extension = detect_extension(text)
    # the text extension is consulted only when the URL path has no extension at all
    if not is_file_type(url_extension or text_extension):
        return None
    if is_file_type(text_extension):
        return file_name(text)
    return file_name(url_path(href))
