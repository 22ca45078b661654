"""QueryStringEncoder — record -> flat ``key=value&...`` query string.

Keys and values are escaped with :func:`urllib.parse.quote_plus`: a space
always becomes ``+`` and every reserved character (``&``, ``=``, ``%``,
``+``, ``[``, ``]``, ``#``, ``?``, ...) becomes ``%XX``. Nested records
and sequences are flattened with literal brackets, e.g.
``filter[status]=open&tags[0]=a&tags[1]=b``.
"""

from __future__ import annotations

import datetime
import logging
import math
from collections.abc import Sequence
from decimal import Decimal
from enum import Enum
from typing import Any
from urllib.parse import quote_plus
from uuid import UUID

from .exceptions import EncodeError, UnsupportedTypeError
from .fields import is_record, iter_fields
from .naming import NamingConvention

logger = logging.getLogger("url_query_string.encoder")

DEFAULT_MAX_DEPTH = 32

_Segments = tuple[str, ...]


def _join_path(segments: _Segments) -> str:
    if not segments:
        return ""
    return segments[0] + "".join(f"[{s}]" for s in segments[1:])


def _escaped_key(segments: _Segments) -> str:
    head, *rest = segments
    return quote_plus(head, safe="") + "".join(
        f"[{quote_plus(s, safe='')}]" for s in rest
    )


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(
        value, str | bytes | bytearray
    )


class QueryStringEncoder:
    """Encode one record under one naming convention.

    The encoder holds configuration only; per-call state lives on the
    call stack, so a single instance can be shared freely.
    """

    def __init__(
        self,
        naming: NamingConvention | str | None = None,
        *,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        """
        Initialize QueryStringEncoder.

        Args:
            naming: Convention applied to declared field names
                (defaults to ``NamingConvention.IDENTITY``).
            max_depth: Maximum number of nested records/sequences,
                the top-level record included.
        """
        if max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        self._naming = NamingConvention.parse(naming)
        self._max_depth = max_depth

    @property
    def naming(self) -> NamingConvention:
        return self._naming

    @property
    def max_depth(self) -> int:
        return self._max_depth

    def encode(self, record: Any) -> str:
        """Return the query string for *record* (no leading ``?``).

        Raises:
            UnsupportedTypeError: A value cannot be represented.
        """
        if not is_record(record):
            raise UnsupportedTypeError(
                "", type(record).__name__, "top-level value must be a record"
            )
        pairs: list[str] = []
        self._encode_record(record, (), pairs, [])
        logger.debug(
            "Encoded %s into %d pairs (naming=%s)",
            type(record).__name__,
            len(pairs),
            self._naming.value,
        )
        return "&".join(pairs)

    # ── Traversal ────────────────────────────────────────────────

    def _encode_record(
        self,
        record: Any,
        segments: _Segments,
        pairs: list[str],
        ancestors: list[Any],
    ) -> None:
        self._enter(record, segments, ancestors)
        for slot in iter_fields(record, _join_path(segments)):
            if slot.value is None:
                continue
            if slot.verbatim:
                key = slot.name
            elif slot.rename is not None:
                key = slot.rename
            else:
                key = self._naming.apply(slot.name)
            self._encode_value(slot.value, (*segments, key), pairs, ancestors)
        ancestors.pop()

    def _encode_sequence(
        self,
        items: Sequence[Any],
        segments: _Segments,
        pairs: list[str],
        ancestors: list[Any],
    ) -> None:
        self._enter(items, segments, ancestors)
        for index, item in enumerate(items):
            if item is None:
                continue
            self._encode_value(item, (*segments, str(index)), pairs, ancestors)
        ancestors.pop()

    def _encode_value(
        self,
        value: Any,
        segments: _Segments,
        pairs: list[str],
        ancestors: list[Any],
    ) -> None:
        if isinstance(value, Enum):
            self._encode_value(value.value, segments, pairs, ancestors)
        elif is_record(value):
            self._encode_record(value, segments, pairs, ancestors)
        elif _is_sequence(value):
            self._encode_sequence(value, segments, pairs, ancestors)
        else:
            text = _scalar_text(value, segments)
            pairs.append(f"{_escaped_key(segments)}={quote_plus(text, safe='')}")

    def _enter(
        self, container: Any, segments: _Segments, ancestors: list[Any]
    ) -> None:
        if any(a is container for a in ancestors):
            raise UnsupportedTypeError(
                _join_path(segments), type(container).__name__, "cyclic reference"
            )
        if len(ancestors) >= self._max_depth:
            raise UnsupportedTypeError(
                _join_path(segments),
                type(container).__name__,
                f"nesting exceeds max_depth={self._max_depth}",
            )
        ancestors.append(container)


def _scalar_text(value: Any, segments: _Segments) -> str:
    """Canonical text of a scalar, before escaping."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise UnsupportedTypeError(
                _join_path(segments), "float", f"non-finite value {value!r}"
            )
        return repr(value)
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise UnsupportedTypeError(
                _join_path(segments), "Decimal", f"non-finite value {value}"
            )
        return str(value)
    if isinstance(value, bytes | bytearray):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError as e:
            raise UnsupportedTypeError(
                _join_path(segments), type(value).__name__, "not valid UTF-8"
            ) from e
    if isinstance(value, datetime.date | datetime.time):
        return value.isoformat()
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, set | frozenset):
        raise UnsupportedTypeError(
            _join_path(segments), type(value).__name__, "unordered collection"
        )
    raise UnsupportedTypeError(_join_path(segments), type(value).__name__)


def try_to_query_string(
    record: Any, naming: NamingConvention | str | None = None
) -> str:
    """Encode *record*, raising on failure.

    This is the recommended entry point: an ``UnsupportedTypeError``
    reaches the caller unchanged.
    """
    return QueryStringEncoder(naming).encode(record)


def to_query_string(record: Any, naming: NamingConvention | str | None = None) -> str:
    """Encode *record*, returning ``""`` on failure.

    .. warning::
        Lossy. A failed encoding is indistinguishable from an empty
        record, which can hide bugs and silently drop query parameters.
        Use :func:`try_to_query_string` wherever that matters.
    """
    try:
        return try_to_query_string(record, naming)
    except EncodeError as e:
        logger.warning(
            "Query string encoding of %s failed, returning empty string: %s",
            type(record).__name__,
            e,
        )
        return ""
