"""Category predicates over a :class:`ClassifierTable`.

Each predicate is a pure read: a structured syntax suffix lookup and/or
containment checks against the table's constant patterns.  The table is
passed explicitly and defaults to :data:`DEFAULT_TABLE`.
"""

from __future__ import annotations

from collections.abc import Iterable

from .media_type import MediaType
from .registry import DEFAULT_TABLE, ClassifierTable


def _contained(media_type: MediaType, patterns: Iterable[MediaType]) -> bool:
    return any(pattern.contains(media_type) for pattern in patterns)


def is_zip(media_type: MediaType, table: ClassifierTable = DEFAULT_TABLE) -> bool:
    return (
        media_type.structured_syntax_suffix in table.zip_suffixes
        or _contained(media_type, table.zip_types)
    )


def is_json(media_type: MediaType, table: ClassifierTable = DEFAULT_TABLE) -> bool:
    return (
        media_type.structured_syntax_suffix in table.json_suffixes
        or _contained(media_type, table.json_types)
    )


def is_opds(media_type: MediaType, table: ClassifierTable = DEFAULT_TABLE) -> bool:
    """OPDS 1 feeds and entries (Atom with the catalog profile) and OPDS 2 documents.

    The ``profile`` value is compared exactly, so ``profile=OPDS-CATALOG`` is not OPDS.
    """
    return _contained(media_type, table.opds_types)


def is_html(media_type: MediaType, table: ClassifierTable = DEFAULT_TABLE) -> bool:
    return _contained(media_type, table.html_types)


def is_bitmap(media_type: MediaType, table: ClassifierTable = DEFAULT_TABLE) -> bool:
    return _contained(media_type, table.bitmap_types)


def is_audio(media_type: MediaType, table: ClassifierTable = DEFAULT_TABLE) -> bool:
    return _contained(media_type, table.audio_types)


def is_video(media_type: MediaType, table: ClassifierTable = DEFAULT_TABLE) -> bool:
    return _contained(media_type, table.video_types)


def is_rwpm(media_type: MediaType, table: ClassifierTable = DEFAULT_TABLE) -> bool:
    """Readium Web Publication Manifest: audiobook, divina or webpub ``+json``."""
    return _contained(media_type, table.rwpm_types)


def is_publication(media_type: MediaType, table: ClassifierTable = DEFAULT_TABLE) -> bool:
    return _contained(media_type, table.publication_types)
