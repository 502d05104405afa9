"""ASCII-only case folding.

``str.lower`` folds every Unicode letter, which can rewrite non-ASCII
characters in ways that differ from what a peer expects.  Media type tokens
are folded on ``A-Z`` only.
"""

from __future__ import annotations

import string

_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def ascii_lower(text: str) -> str:
    return text.translate(_TO_LOWER)


def ascii_upper(text: str) -> str:
    return text.translate(_TO_UPPER)
