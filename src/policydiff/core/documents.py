"""Load policy Documents from text/markdown files with an optional YAML frontmatter header"""

import re
from pathlib import Path
from typing import Any

import yaml

from policydiff.core.models import Document
from policydiff.core.utils.slug import slugify
from policydiff.errors import InvalidInputError


FRONTMATTER_RE = re.compile(r'^---[ \t]*\n(.*?)\n---[ \t]*(?:\n|$)', re.DOTALL)
METADATA_FIELDS = ("id", "title", "version", "author", "status", "category", "last_modified", "created_at")


def split_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body) with the YAML header removed; ({}, text) if there is none."""
    m = FRONTMATTER_RE.match(text)
    if not m:
        return {}, text
    try:
        fm = yaml.load(m.group(1), Loader=yaml.BaseLoader) or {}
    except yaml.YAMLError as e:
        raise InvalidInputError(f"Invalid YAML frontmatter: {e}") from e
    if not isinstance(fm, dict):
        raise InvalidInputError(f"Invalid YAML frontmatter: expected a mapping, got {type(fm).__name__}")
    return fm, text[m.end():]


def _as_text(value: Any) -> str:
    """Scalars arrive as written; nested lists or mappings are flattened to their repr."""
    return value if isinstance(value, str) else str(value)


def load_document(path: Path) -> Document:
    """Read path as UTF-8 and build a Document from its frontmatter metadata and body.

    title defaults to the file stem, id to the slugified stem. Unknown
    frontmatter keys are ignored.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidInputError(f"Cannot read document {path}: {e}") from e

    frontmatter, body = split_frontmatter(raw)
    meta = {k: _as_text(frontmatter[k]) for k in METADATA_FIELDS if frontmatter.get(k) not in (None, "")}
    meta.setdefault("title", path.stem)
    meta.setdefault("id", slugify(path.stem, fallback="document"))
    return Document(content=body, **meta)
