"""Split a raw content-type string into type, subtype and parameters.

Grammar accepted here::

    media-type = type "/" subtype *( OWS ";" OWS parameter )
    parameter  = name "=" value

Quoted-string values and comments are not supported; a value containing a
double quote fails the parse instead of being guessed at.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from ..util.result import Result
from .errors import InvalidMediaType
from .text import ascii_lower

logger = logging.getLogger(__name__)


class ParsedMediaType(NamedTuple):
    type: str
    subtype: str
    parameters: dict[str, str]


def _fail(raw: str, reason: str) -> Result[ParsedMediaType]:
    logger.debug("Rejected media type %r: %s", raw, reason)
    return Result.fail(reason, error=InvalidMediaType(raw, reason))


def split_media_type(raw: str) -> Result[ParsedMediaType]:
    """Parse *raw* into its raw fields.

    Type and subtype are trimmed but not case-folded; parameter names are
    trimmed and lower-cased, values are trimmed only.  When a parameter name
    repeats, the last occurrence wins.
    """
    head, *segments = raw.strip().split(";")

    type_, slash, subtype = head.partition("/")
    if not slash:
        return _fail(raw, "missing '/' between type and subtype")
    if "/" in subtype:
        return _fail(raw, "unexpected '/' in subtype")
    type_, subtype = type_.strip(), subtype.strip()
    if not type_:
        return _fail(raw, "empty type")
    if not subtype:
        return _fail(raw, "empty subtype")

    parameters: dict[str, str] = {}
    for segment in segments:
        segment = segment.strip()
        if not segment:
            continue
        name, eq, value = segment.partition("=")
        if not eq:
            return _fail(raw, f"parameter {segment!r} has no '='")
        name, value = ascii_lower(name.strip()), value.strip()
        if not name:
            return _fail(raw, f"parameter {segment!r} has no name")
        if '"' in value:
            return _fail(raw, f"quoted value in parameter {name!r} is not supported")
        if name in parameters:
            logger.debug("Duplicate parameter %r in %r, keeping the last value", name, raw)
        parameters[name] = value

    return Result.ok(value=ParsedMediaType(type_, subtype, parameters))
