"""Slug generation for report filenames and document ids"""

import re


def slugify(text: str, fallback: str = "") -> str:
    """Convert text to a lowercase, hyphen-separated filename-safe slug; fallback if nothing is left."""
    text = text.lower()
    text = re.sub(r'[^\w\s-]', '', text)
    text = re.sub(r'[\s_]+', '-', text)
    return re.sub(r'-+', '-', text).strip('-') or fallback
