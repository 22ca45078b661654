"""url-query-string — encode structured records as URL query strings."""

from __future__ import annotations

from .encoder import (
    DEFAULT_MAX_DEPTH,
    QueryStringEncoder,
    to_query_string,
    try_to_query_string,
)
from .exceptions import EncodeError, UnsupportedTypeError
from .fields import (
    RENAME_METADATA_KEY,
    SKIP_METADATA_KEY,
    FieldSlot,
    is_record,
    iter_fields,
)
from .model import QueryStringModel
from .naming import NamingConvention, split_words

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "EncodeError",
    "FieldSlot",
    "NamingConvention",
    "QueryStringEncoder",
    "QueryStringModel",
    "RENAME_METADATA_KEY",
    "SKIP_METADATA_KEY",
    "UnsupportedTypeError",
    "is_record",
    "iter_fields",
    "split_words",
    "to_query_string",
    "try_to_query_string",
]
