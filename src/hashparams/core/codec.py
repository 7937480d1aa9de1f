from __future__ import annotations

from typing import Callable, Mapping, Optional
from urllib.parse import quote, unquote

from .values import ParameterMap, isSequenceValue, stringify, typeCast

SEGMENT_SEPARATOR = "/"
KEY_VAL_SEPARATOR = ":"
ARRAY_SEPARATOR = ","

# The characters encodeURIComponent() leaves alone, on top of quote()'s
# always-safe set
_componentSafe = "!~*'()"


def encodeComponent(text: str) -> str:
    return quote(text, safe=_componentSafe)


def decodeComponent(text: str) -> str:
    return unquote(text)


def decode(
    raw: str, onIgnored: Optional[Callable[[str], None]] = None
) -> ParameterMap:
    """Parse the ``key:value`` segments of a ``/``-separated fragment string.

    Segments that don't split into exactly one key and one value are not
    parameters; they are skipped (and reported to ``onIgnored`` when given,
    empty segments excepted). Values containing the array separator decode
    to lists, each item type-cast on its own. A key occurring more than once
    takes its last value.
    """
    params: ParameterMap = {}
    for segment in raw.split(SEGMENT_SEPARATOR):
        pieces = segment.split(KEY_VAL_SEPARATOR)
        if len(pieces) != 2:
            if segment and onIgnored is not None:
                onIgnored(segment)
            continue
        rawKey, rawValue = pieces
        key = decodeComponent(rawKey)
        if ARRAY_SEPARATOR in rawValue:
            params[key] = [
                typeCast(decodeComponent(item))
                for item in rawValue.split(ARRAY_SEPARATOR)
            ]
        else:
            params[key] = typeCast(decodeComponent(rawValue))
    return params


def encode(params: Optional[Mapping] = None) -> str:
    if not params:
        return ""
    return SEGMENT_SEPARATOR.join(
        encodeComponent(str(key)) + KEY_VAL_SEPARATOR + encodeValue(value)
        for key, value in params.items()
    )


def encodeValue(value) -> str:
    if isSequenceValue(value):
        # stringify() rejects nested sequences
        return ARRAY_SEPARATOR.join(encodeComponent(stringify(item)) for item in value)
    return encodeComponent(stringify(value))


def isViewSegment(segment: str) -> bool:
    # Any colon rules a segment out, even where decode() ignores it
    return bool(segment) and KEY_VAL_SEPARATOR not in segment


def getViewPath(raw: str) -> str:
    """Return the view path of a fragment: its non-empty, colon-free segments
    joined back with ``/``, in their original order. A leading ``#`` is dropped.
    """
    raw = raw.removeprefix("#")
    return SEGMENT_SEPARATOR.join(
        segment for segment in raw.split(SEGMENT_SEPARATOR) if isViewSegment(segment)
    )


def createLink(path: str, params: Optional[Mapping] = None) -> str:
    """Build a ``#path/key:value`` link without touching any location."""
    hashMark = "" if path.startswith("#") else "#"
    slash = "" if path.endswith(SEGMENT_SEPARATOR) else SEGMENT_SEPARATOR
    return hashMark + path + slash + encode(params)
