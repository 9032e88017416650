"""Slug Generation — title string to normalized URL-safe slug.

Invariants:
    - generate_slug is total and deterministic (never raises, same input → same output)
    - Output only contains [a-z0-9-]; may be empty when the title has no alphanumerics
    - slug_candidates yields base, base-1, base-2, ... (strictly increasing suffix)

Design Decisions:
    - NFD + drop combining marks (U+0300–U+036F): accented Latin folds to plain ASCII
    - Leading/trailing hyphens kept as-is: only whitespace is trimmed
    - Empty slug falls back to the entity id — callers never persist an empty slug
"""

import re
import unicodedata
from collections.abc import Iterator
from uuid import UUID

_COMBINING_MARKS = re.compile("[\u0300-\u036f]")
_DISALLOWED = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE_RUN = re.compile(r"\s+")
_HYPHEN_RUN = re.compile(r"-+")


def generate_slug(title: str) -> str:
    """Lower-case, fold accents, keep [a-z0-9 -], hyphenate whitespace runs."""
    slug = unicodedata.normalize("NFD", title.lower())
    slug = _COMBINING_MARKS.sub("", slug)
    slug = _DISALLOWED.sub("", slug)
    slug = slug.strip()
    slug = _WHITESPACE_RUN.sub("-", slug)
    return _HYPHEN_RUN.sub("-", slug)


def slug_or_fallback(title: str, record_id: UUID) -> str:
    """Slug for title, or the record id when the title slugifies to nothing."""
    return generate_slug(title) or str(record_id)


def slug_candidates(base: str) -> Iterator[str]:
    """Infinite candidate sequence consumed by the uniqueness resolver."""
    yield base
    suffix = 1
    while True:
        yield f"{base}-{suffix}"
        suffix += 1
