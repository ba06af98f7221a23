"""Slug derivation for event titles."""

import re

from bookings.domain.errors import InvalidInputError

_DISALLOWED = re.compile(r"[^\w\s-]|_")
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-{2,}")


def slugify(title: str) -> str:
    """Turn a title into a lowercase, hyphen-separated slug.

    Letters, digits, spaces and hyphens survive; everything else is dropped.
    ``slugify(slugify(x)) == slugify(x)`` for any title that yields a slug.

    Raises:
        InvalidInputError: If nothing is left after stripping.
    """
    slug = _DISALLOWED.sub("", title.strip().lower())
    slug = _WHITESPACE.sub("-", slug)
    slug = _HYPHENS.sub("-", slug).strip("-")
    if not slug:
        raise InvalidInputError(f"Cannot derive a slug from title {title!r}", field="title")
    return slug
