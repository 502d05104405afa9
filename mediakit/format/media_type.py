"""The ``MediaType`` value: normalized type, subtype and parameters."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType, ModuleType
from typing import Union

from ..util.result import Result
from .charset import CHARSET_PARAMETER, lookup_charset, normalize_charset
from .errors import InvalidMediaType, InvalidMediaTypeError
from .parser import split_media_type
from .text import ascii_lower

WILDCARD = "*"

#: Anything the matching methods accept: a parsed value, a raw string, or nothing.
MediaTypeLike = Union["MediaType", str, None]


def _classifier() -> ModuleType:
    from . import classifier
    return classifier


class MediaType:
    """A media type such as ``application/atom+xml;profile=opds-catalog``.

    Also known as a content type or MIME type.  Instances are immutable and
    always normalized: type, subtype and parameter names are lower-cased
    (ASCII only) and the ``charset`` value is upper-cased.  Parameter values
    otherwise keep their case.

    Build instances with :meth:`parse`, which returns ``None`` on bad input,
    or :meth:`of` when the input is a literal known to be valid.

    *name* and *file_extension* describe well-known types; they are carried
    along but never take part in equality, hashing, matching or rendering.
    """

    __slots__ = ("_type", "_subtype", "_parameters", "_name", "_file_extension")

    def __init__(
        self,
        type: str,
        subtype: str,
        parameters: Mapping[str, str] | None = None,
        *,
        name: str | None = None,
        file_extension: str | None = None,
    ) -> None:
        type = ascii_lower(type.strip())
        subtype = ascii_lower(subtype.strip())
        raw = f"{type}/{subtype}"

        def reject(reason: str) -> InvalidMediaTypeError:
            return InvalidMediaTypeError(InvalidMediaType(raw, reason))

        # Same grammar as split_media_type, so str() always parses back.
        for token in (type, subtype):
            if not token or "/" in token or ";" in token:
                raise reject("type and subtype must be non-empty tokens without '/' or ';'")

        normalized: dict[str, str] = {}
        for key, value in (parameters or {}).items():
            key = ascii_lower(key.strip())
            if not key or ";" in key or "=" in key:
                raise reject(f"invalid parameter name {key!r}")
            value = value.strip()
            if ";" in value or '"' in value:
                raise reject(f"invalid value for parameter {key!r}")
            if key == CHARSET_PARAMETER:
                value = normalize_charset(value)
            normalized[key] = value

        self._type = type
        self._subtype = subtype
        self._parameters = {k: normalized[k] for k in sorted(normalized)}
        self._name = name
        self._file_extension = file_extension

    # -- constructors ------------------------------------------------------

    @classmethod
    def parse_result(
        cls,
        raw: str,
        *,
        name: str | None = None,
        file_extension: str | None = None,
    ) -> Result[MediaType]:
        """Parse *raw*, reporting failure as an :class:`InvalidMediaType`."""
        parsed = split_media_type(raw)
        if not parsed:
            return Result.fail(parsed.message, error=parsed.error)
        type_, subtype, parameters = parsed.value
        return Result.ok(
            value=cls(type_, subtype, parameters, name=name, file_extension=file_extension)
        )

    @classmethod
    def parse(
        cls,
        raw: str,
        *,
        name: str | None = None,
        file_extension: str | None = None,
    ) -> MediaType | None:
        """Return the media type for *raw*, or ``None`` if it is malformed."""
        return cls.parse_result(raw, name=name, file_extension=file_extension).unwrap_or(None)

    @classmethod
    def of(
        cls,
        raw: str,
        *,
        name: str | None = None,
        file_extension: str | None = None,
    ) -> MediaType:
        """Like :meth:`parse`, but raise :class:`InvalidMediaTypeError` on bad input."""
        result = cls.parse_result(raw, name=name, file_extension=file_extension)
        if not result:
            raise InvalidMediaTypeError(result.error)
        return result.value

    # -- fields ------------------------------------------------------------

    @property
    def type(self) -> str:
        """The type, e.g. ``application`` for ``application/epub+zip``."""
        return self._type

    @property
    def subtype(self) -> str:
        """The subtype, e.g. ``epub+zip`` for ``application/epub+zip``."""
        return self._subtype

    @property
    def parameters(self) -> Mapping[str, str]:
        """Read-only view of the parameters, ordered by name."""
        return MappingProxyType(self._parameters)

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def file_extension(self) -> str | None:
        return self._file_extension

    @property
    def structured_syntax_suffix(self) -> str | None:
        """The last ``+`` segment of the subtype, e.g. ``+zip``, or ``None``.

        ``foo/bar+json+zip`` gives ``+zip``.
        """
        _, plus, suffix = self._subtype.rpartition("+")
        return plus + suffix if plus else None

    @property
    def charset(self) -> str | None:
        """Python codec name of the ``charset`` parameter, if known."""
        return lookup_charset(self._parameters.get(CHARSET_PARAMETER))

    # -- matching ----------------------------------------------------------

    def contains(self, other: MediaTypeLike) -> bool:
        """Whether *other* is an instance of this media type.

        ``*`` matches any type or subtype.  Every parameter of ``self`` must
        be present in *other* with the same value; extra parameters in
        *other* are ignored.  A string that does not parse is never contained.
        """
        other = _coerce(other)
        if other is None:
            return False
        if self._type != WILDCARD and self._type != other._type:
            return False
        if self._subtype != WILDCARD and self._subtype != other._subtype:
            return False
        return all(
            key in other._parameters and other._parameters[key] == value
            for key, value in self._parameters.items()
        )

    def is_part_of(self, other: MediaTypeLike) -> bool:
        """Inverse of :meth:`contains`: ``a.is_part_of(b) == b.contains(a)``."""
        other = _coerce(other)
        return other is not None and other.contains(self)

    def matches(self, other: MediaTypeLike) -> bool:
        """Whether either media type contains the other."""
        other = _coerce(other)
        return other is not None and (self.contains(other) or other.contains(self))

    def matches_any(self, *others: MediaTypeLike) -> bool:
        return any(self.matches(other) for other in others)

    # -- classification ----------------------------------------------------

    @property
    def is_zip(self) -> bool:
        return _classifier().is_zip(self)

    @property
    def is_json(self) -> bool:
        return _classifier().is_json(self)

    @property
    def is_opds(self) -> bool:
        return _classifier().is_opds(self)

    @property
    def is_html(self) -> bool:
        return _classifier().is_html(self)

    @property
    def is_bitmap(self) -> bool:
        return _classifier().is_bitmap(self)

    @property
    def is_audio(self) -> bool:
        return _classifier().is_audio(self)

    @property
    def is_video(self) -> bool:
        return _classifier().is_video(self)

    @property
    def is_rwpm(self) -> bool:
        """Whether this is a Readium Web Publication Manifest."""
        return _classifier().is_rwpm(self)

    @property
    def is_publication(self) -> bool:
        return _classifier().is_publication(self)

    # -- protocols ---------------------------------------------------------

    def __str__(self) -> str:
        params = "".join(f";{key}={value}" for key, value in self._parameters.items())
        return f"{self._type}/{self._subtype}{params}"

    def __repr__(self) -> str:
        return f"MediaType({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MediaType):
            return NotImplemented
        return (
            self._type == other._type
            and self._subtype == other._subtype
            and self._parameters == other._parameters
        )

    def __hash__(self) -> int:
        return hash((self._type, self._subtype, tuple(self._parameters.items())))


def _coerce(value: MediaTypeLike) -> MediaType | None:
    if isinstance(value, str):
        return MediaType.parse(value)
    return value
