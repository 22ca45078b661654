"""
Encoding exception hierarchy.

All exceptions inherit from ``EncodeError`` and provide ``to_dict()``
for API-friendly error responses.
"""

from __future__ import annotations

from typing import Any


class EncodeError(Exception):
    """Base exception for all query string encoding errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class UnsupportedTypeError(EncodeError):
    """
    A value cannot be represented as flat ``key=value`` pairs.

    Raised for unsupported value types, cyclic references, nesting
    beyond the encoder's depth limit and non-record top-level values.

    Example error message::

        Cannot encode 'filters[tags]' of type 'set': unordered collection
    """

    def __init__(self, path: str, type_name: str, reason: str | None = None) -> None:
        self.path = path
        self.type_name = type_name
        self.reason = reason

        target = f"'{path}'" if path else "record"
        message = f"Cannot encode {target} of type '{type_name}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "UNSUPPORTED_TYPE",
            "path": self.path,
            "type": self.type_name,
            "reason": self.reason,
        }
