"""Tests for record introspection."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

import pytest
from pydantic import BaseModel, ConfigDict, Field

from url_query_string.exceptions import UnsupportedTypeError
from url_query_string.fields import FieldSlot, is_record, iter_fields


class Account(BaseModel):
    user_id: str | None = None
    display_name: str | None = Field(default=None, serialization_alias="name")
    password: str | None = Field(default=None, exclude=True)


class OpenAccount(BaseModel):
    model_config = ConfigDict(extra="allow")

    user_id: str | None = None


@dataclass
class Paging:
    page: int | None = None
    page_size: int | None = field(default=None, metadata={"rename": "per_page"})
    cursor: str | None = field(default=None, metadata={"skip": True})


class Region(Enum):
    EU = "eu"


def test_is_record() -> None:
    assert is_record(Account())
    assert is_record(Paging())
    assert is_record({"a": 1})
    assert not is_record(Paging)
    assert not is_record(["a"])
    assert not is_record("abc")
    assert not is_record(None)


def test_model_fields_in_declaration_order() -> None:
    slots = list(iter_fields(Account(user_id="u1", password="hunter2")))
    assert slots == [
        FieldSlot("user_id", "u1"),
        FieldSlot("display_name", None, "name"),
    ]


def test_model_extras_are_verbatim_slots() -> None:
    slots = list(iter_fields(OpenAccount(user_id="u1", sortOrder="desc", limit=5)))
    assert slots == [
        FieldSlot("user_id", "u1"),
        FieldSlot("sortOrder", "desc", verbatim=True),
        FieldSlot("limit", 5, verbatim=True),
    ]


def test_ignoring_model_has_no_extra_slots() -> None:
    assert [s.name for s in iter_fields(Account())] == ["user_id", "display_name"]


def test_dataclass_fields_rename_and_skip() -> None:
    slots = list(iter_fields(Paging(page=1, page_size=50, cursor="abc")))
    assert slots == [
        FieldSlot("page", 1),
        FieldSlot("page_size", 50, "per_page"),
    ]


def test_mapping_keys_are_verbatim() -> None:
    slots = list(iter_fields({"page_size": 1, 7: "x", Region.EU: True}))
    assert slots == [
        FieldSlot("page_size", 1, verbatim=True),
        FieldSlot("7", "x", verbatim=True),
        FieldSlot("eu", True, verbatim=True),
    ]


def test_mapping_rejects_unsupported_key() -> None:
    with pytest.raises(UnsupportedTypeError) as exc_info:
        list(iter_fields({(1, 2): "x"}, "filter"))
    assert exc_info.value.path == "filter[(1, 2)]"
    assert exc_info.value.type_name == "tuple"


def test_mapping_rejects_bool_key() -> None:
    with pytest.raises(UnsupportedTypeError):
        list(iter_fields({True: "x"}))


def test_non_record_raises() -> None:
    with pytest.raises(UnsupportedTypeError, match="not a record"):
        list(iter_fields(42))


def test_iteration_does_not_mutate_record() -> None:
    paging = Paging(page=3)
    list(iter_fields(paging))
    assert paging == Paging(page=3)
