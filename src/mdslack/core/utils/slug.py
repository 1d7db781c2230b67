"""Slug generation for output payload file names"""

import re


def slugify(text: str, default: str = 'document') -> str:
    """Convert text to a lowercase, hyphen-separated slug; default when nothing survives."""
    text = re.sub(r'[^\w\s-]', '', text.lower())
    text = re.sub(r'[\s_]+', '-', text)
    return re.sub(r'-+', '-', text).strip('-') or default
