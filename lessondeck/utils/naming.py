"""
Name normalization helpers for lesson sources.

Source names come straight from file or page names and are numbered
inconsistently ("1.Basic", "03. Collection", "What is new"). These helpers
derive the three things a unit needs from a name:
- a stable id (slug)
- an optional order number (leading integer token)
- a display title (name without its numeric prefix)
"""

import re
import unicodedata
from typing import Optional


# Leading integer, then an optional separator such as "." "-" "_" ")" ":"
NUMERIC_PREFIX = re.compile(r"^\s*(\d+)\s*[.\-_):]?\s*")
SLUG_SEPARATORS = re.compile(r"[\W_]+", re.UNICODE)


def slugify(name: str) -> str:
    """
    Normalize a source name to a unit id.

    Lowercases, folds compatibility characters, and collapses every run of
    non-alphanumeric characters to a single hyphen.

    >>> slugify("03. Collection")
    '03-collection'
    >>> slugify("08. Class & Struct")
    '08-class-struct'
    """
    folded = unicodedata.normalize("NFKC", name).casefold()
    return SLUG_SEPARATORS.sub("-", folded).strip("-")


def parse_order(name: str) -> Optional[int]:
    """Return the leading integer token of a name, or None if unnumbered."""
    match = NUMERIC_PREFIX.match(name)
    if not match:
        return None
    return int(match.group(1))


def derive_title(name: str) -> str:
    """
    Strip the numeric prefix from a name to get its display title.

    A name that is nothing but a number keeps its number as the title.
    """
    title = NUMERIC_PREFIX.sub("", name, count=1).strip()
    return title or name.strip()
