"""Tests for exceptions module."""

from __future__ import annotations

from url_query_string.exceptions import EncodeError, UnsupportedTypeError


def test_unsupported_type_message() -> None:
    err = UnsupportedTypeError("filter[tags]", "set", "unordered collection")
    assert str(err) == "Cannot encode 'filter[tags]' of type 'set': unordered collection"
    assert isinstance(err, EncodeError)


def test_unsupported_type_without_path_or_reason() -> None:
    err = UnsupportedTypeError("", "int")
    assert str(err) == "Cannot encode record of type 'int'"
    assert err.reason is None


def test_unsupported_type_to_dict() -> None:
    err = UnsupportedTypeError("blob", "bytes", "not valid UTF-8")
    assert err.to_dict() == {
        "error": "UNSUPPORTED_TYPE",
        "path": "blob",
        "type": "bytes",
        "reason": "not valid UTF-8",
    }


def test_base_error_to_dict() -> None:
    err = EncodeError("boom")
    assert err.to_dict() == {"error": "EncodeError", "message": "boom"}
