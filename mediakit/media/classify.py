"""Decide how a resource should be handled from its media type."""

from __future__ import annotations

from pathlib import PurePosixPath

from ..format import classifier
from ..format.media_type import MediaType
from ..format.registry import DEFAULT_TABLE, ClassifierTable, for_extension

# Checked in order; the first predicate that holds names the category.
_ROUTES = (
    ("publication", classifier.is_publication),
    ("opds", classifier.is_opds),
    ("html", classifier.is_html),
    ("bitmap", classifier.is_bitmap),
    ("audio", classifier.is_audio),
    ("video", classifier.is_video),
    ("json", classifier.is_json),
    ("zip", classifier.is_zip),
)

CATEGORIES: tuple[str, ...] = tuple(name for name, _ in _ROUTES) + ("file",)


def classify(
    content_type: MediaType | str | None,
    table: ClassifierTable = DEFAULT_TABLE,
) -> str:
    """Return one of :data:`CATEGORIES`; ``'file'`` when nothing more specific applies."""
    media_type = MediaType.parse(content_type) if isinstance(content_type, str) else content_type
    if media_type is None:
        return "file"
    for name, predicate in _ROUTES:
        if predicate(media_type, table):
            return name
    return "file"


def classify_file_name(file_name: str, table: ClassifierTable = DEFAULT_TABLE) -> str:
    """Route by the extension of *file_name*; the file itself is never opened."""
    return classify(for_extension(PurePosixPath(file_name).suffix), table)
