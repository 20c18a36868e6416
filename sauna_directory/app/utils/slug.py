"""
Slug helpers for human-readable sauna URLs.

Detail pages live at ``/sauna/<slug>`` where the slug is derived from
the sauna's name.  Slugs are not stored; a request is resolved by
turning the slug back into a search term and matching it against every
known name.  The mapping is lossy (diacritics and punctuation are not
recoverable), so matching is fuzzy:

* the normalized name contains the term, or
* the term contains the normalized name, or
* any single word of the normalized name occurs in the term.

The first candidate satisfying any rule wins, in the order given.
Callers pass names sorted by name, so that order decides between
ambiguous names.
"""

import re
from typing import Callable, Iterable, Optional, Sequence, TypeVar

T = TypeVar("T")

_TRANSLITERATION = str.maketrans({"å": "a", "ä": "a", "ö": "o"})

_SLUG_STRIP_RE = re.compile(r"[^a-z0-9\s-]")
_NAME_STRIP_RE = re.compile(r"[^a-z0-9\s]")
_WHITESPACE_RE = re.compile(r"\s+")
_HYPHENS_RE = re.compile(r"-+")


def generate_sauna_slug(name: str) -> str:
    """Return the URL slug for a sauna name.

    >>> generate_sauna_slug("Hellasgården Bastu")
    'hellasgarden-bastu'
    """
    slug = name.lower().translate(_TRANSLITERATION)
    slug = _SLUG_STRIP_RE.sub("", slug)
    slug = _WHITESPACE_RE.sub("-", slug)
    slug = _HYPHENS_RE.sub("-", slug)
    return slug.strip("-")


def slug_to_search_name(slug: str) -> str:
    """Turn a slug back into a search term (hyphens become spaces)."""
    return slug.replace("-", " ").lower()


def normalize_name(name: str) -> str:
    """Normalize a stored name for comparison against a search term."""
    normalized = name.lower().translate(_TRANSLITERATION)
    normalized = _NAME_STRIP_RE.sub("", normalized)
    normalized = _WHITESPACE_RE.sub(" ", normalized)
    return normalized.strip()


def _matches(normalized_name: str, term: str) -> bool:
    return (
        term in normalized_name
        or normalized_name in term
        or any(word in term for word in normalized_name.split(" "))
    )


def find_matching(
    search_name: str,
    candidates: Iterable[T],
    key: Callable[[T], str],
) -> Optional[T]:
    """Return the first candidate whose ``key`` matches ``search_name``."""
    term = search_name.lower().strip()
    for candidate in candidates:
        if _matches(normalize_name(key(candidate)), term):
            return candidate
    return None


def find_matching_name(search_name: str, names: Sequence[str]) -> Optional[str]:
    """Return the first of ``names`` matching ``search_name``, or ``None``."""
    return find_matching(search_name, names, key=lambda name: name)


def find_by_slug(slug: str, candidates: Iterable[T], key: Callable[[T], str]) -> Optional[T]:
    """Resolve ``slug`` against ``candidates`` using their names."""
    return find_matching(slug_to_search_name(slug), candidates, key=key)
