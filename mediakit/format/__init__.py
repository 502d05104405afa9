"""Media type parsing, matching and classification."""

from . import registry
from .classifier import (
    is_audio,
    is_bitmap,
    is_html,
    is_json,
    is_opds,
    is_publication,
    is_rwpm,
    is_video,
    is_zip,
)
from .errors import InvalidMediaType, InvalidMediaTypeError
from .media_type import MediaType
from .registry import DEFAULT_TABLE, ClassifierTable, for_extension

__all__ = [
    "DEFAULT_TABLE",
    "ClassifierTable",
    "InvalidMediaType",
    "InvalidMediaTypeError",
    "MediaType",
    "for_extension",
    "is_audio",
    "is_bitmap",
    "is_html",
    "is_json",
    "is_opds",
    "is_publication",
    "is_rwpm",
    "is_video",
    "is_zip",
    "registry",
]
