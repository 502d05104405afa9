"""Failure values for media type parsing."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class InvalidMediaType:
    """Why a string could not be read as a media type.

    This is the failure half of :meth:`MediaType.parse_result` and is
    returned, not raised.
    """

    raw: str
    reason: str

    def __str__(self) -> str:
        return f"Invalid media type {self.raw!r}: {self.reason}"


class InvalidMediaTypeError(ValueError):
    """Raised when a media type is built from a literal that must be valid."""

    def __init__(self, invalid: InvalidMediaType) -> None:
        super().__init__(str(invalid))
        self.invalid = invalid
