"""Canonical form and codec lookup for the ``charset`` parameter."""

from __future__ import annotations

import codecs

from .text import ascii_upper

CHARSET_PARAMETER = "charset"


def normalize_charset(value: str) -> str:
    """Return the stored form of a charset value (ASCII upper-case)."""
    return ascii_upper(value.strip())


def lookup_charset(value: str | None) -> str | None:
    """Return the Python codec name for *value*, or ``None`` if unknown.

    ``"UTF-8"`` gives ``"utf-8"``, ``"latin1"`` gives ``"iso8859-1"``.
    """
    if not value:
        return None
    try:
        return codecs.lookup(value).name
    except (LookupError, ValueError):
        return None
