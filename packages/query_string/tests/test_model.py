"""Tests for QueryStringModel."""

from __future__ import annotations

import pytest

from url_query_string import NamingConvention, QueryStringModel, UnsupportedTypeError


class ListUsersQuery(QueryStringModel):
    query_naming = NamingConvention.CAMEL

    page: int | None = None
    page_size: int | None = None
    id: str | None = None
    user_id: str | None = None


class TaggedQuery(QueryStringModel):
    tags: set[str] | None = None


def test_class_naming_is_used_by_default() -> None:
    query = ListUsersQuery(page=1, page_size=20, id="test_id", user_id="user_123")
    expected = "page=1&pageSize=20&id=test_id&userId=user_123"
    assert query.to_query_string() == expected
    assert query.try_to_query_string() == expected


def test_explicit_naming_overrides_class_default() -> None:
    query = ListUsersQuery(page_size=20, user_id="u")
    assert query.try_to_query_string(NamingConvention.KEBAB) == "page-size=20&user-id=u"
    assert query.to_query_string("snake_case") == "page_size=20&user_id=u"


def test_default_naming_is_identity() -> None:
    assert QueryStringModel.query_naming is NamingConvention.IDENTITY


def test_empty_model() -> None:
    query = ListUsersQuery()
    assert query.to_query_string() == ""
    assert query.try_to_query_string() == ""


def test_methods_diverge_on_failure() -> None:
    query = TaggedQuery(tags={"a", "b"})
    assert query.to_query_string() == ""
    with pytest.raises(UnsupportedTypeError):
        query.try_to_query_string()
