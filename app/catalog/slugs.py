"""Slug normalization for product titles."""

import re
import unicodedata
from uuid import UUID

_APOSTROPHES = re.compile(r"['’]")
_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """Normalize text into a lowercase-with-hyphens slug.

    Accents are folded to their ASCII base letter; other non-ASCII
    characters are dropped. The result may be empty for text made only
    of punctuation, so callers must check it.

    Example:
        >>> slugify("Men's Chill Crew Neck Sweatshirt")
        'mens-chill-crew-neck-sweatshirt'

    Args:
        text: Title or user-supplied slug.

    Returns:
        Normalized slug.
    """
    folded = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    slug = _APOSTROPHES.sub("", folded.strip().lower())
    return _NON_ALNUM.sub("-", slug).strip("-")


def is_uuid(term: str) -> bool:
    """Check whether a string parses as a UUID."""
    try:
        UUID(term)
    except (ValueError, TypeError, AttributeError):
        return False
    return True


def validate_title(title: str) -> str:
    """Reject titles that would be read back as identifiers.

    Raises:
        ValueError: If the title parses as a UUID.
    """
    if is_uuid(title.strip()):
        raise ValueError("title must not be a UUID")
    return title


def normalized_slug(text: str) -> str:
    """Slugify text and make sure the result is usable for lookup.

    Args:
        text: Title or user-supplied slug.

    Returns:
        Non-empty slug that does not parse as a UUID.

    Raises:
        ValueError: If the slug is empty or UUID-shaped.
    """
    slug = slugify(text)
    if not slug:
        raise ValueError(f"'{text}' does not produce a slug; add letters or digits")
    if is_uuid(slug):
        raise ValueError("slug must not be a UUID")
    return slug
