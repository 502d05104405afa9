"""mediakit -- MIME media type parsing, matching and classification."""

from .format import InvalidMediaType, InvalidMediaTypeError, MediaType
from .media.classify import classify

__all__ = [
    "InvalidMediaType",
    "InvalidMediaTypeError",
    "MediaType",
    "classify",
]

__version__ = "0.1.0"
