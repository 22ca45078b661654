"""
Record introspection.

A record is anything whose named fields can be listed in declaration
order: pydantic models, dataclasses and mappings. Introspection is
read-only; the record is never mutated.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any, NamedTuple

from pydantic import BaseModel

from .exceptions import UnsupportedTypeError

if TYPE_CHECKING:
    from collections.abc import Iterator

RENAME_METADATA_KEY = "rename"
SKIP_METADATA_KEY = "skip"


class FieldSlot(NamedTuple):
    """One named slot of a record.

    ``rename`` is the explicit output key, if declared. ``verbatim`` marks
    mapping keys and pydantic extras, which are data and bypass the naming
    convention.
    """

    name: str
    value: Any
    rename: str | None = None
    verbatim: bool = False


def is_record(value: Any) -> bool:
    """Return True if *value* is a pydantic model, dataclass instance or mapping."""
    if isinstance(value, BaseModel | Mapping):
        return True
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def iter_fields(record: Any, path: str = "") -> Iterator[FieldSlot]:
    """Yield the record's fields in declaration order.

    *path* is the key of the record itself, used in error messages.
    """
    if isinstance(record, BaseModel):
        yield from _model_fields(record)
    elif isinstance(record, Mapping):
        yield from _mapping_fields(record, path)
    elif dataclasses.is_dataclass(record) and not isinstance(record, type):
        yield from _dataclass_fields(record)
    else:
        raise UnsupportedTypeError(path, type(record).__name__, "not a record")


def _model_fields(model: BaseModel) -> Iterator[FieldSlot]:
    for name, info in type(model).model_fields.items():
        if info.exclude:
            continue
        rename = info.serialization_alias or info.alias
        yield FieldSlot(name, getattr(model, name), rename)
    # extra="allow" values follow the declared fields, keys as given
    for key, value in (model.model_extra or {}).items():
        yield FieldSlot(key, value, verbatim=True)


def _dataclass_fields(instance: Any) -> Iterator[FieldSlot]:
    for f in dataclasses.fields(instance):
        if f.metadata.get(SKIP_METADATA_KEY):
            continue
        yield FieldSlot(
            f.name, getattr(instance, f.name), f.metadata.get(RENAME_METADATA_KEY)
        )


def _mapping_fields(mapping: Mapping[Any, Any], path: str) -> Iterator[FieldSlot]:
    for key, value in mapping.items():
        yield FieldSlot(_mapping_key(key, path), value, verbatim=True)


def _mapping_key(key: Any, path: str) -> str:
    if isinstance(key, Enum):
        key = key.value
    # bool is an int subclass; rejected explicitly
    if isinstance(key, bool) or not isinstance(key, str | int):
        raise UnsupportedTypeError(
            f"{path}[{key!r}]" if path else repr(key),
            type(key).__name__,
            "mapping keys must be str or int",
        )
    return str(key)
