"""QueryStringModel — pydantic base with query string methods."""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel

from .encoder import to_query_string, try_to_query_string
from .naming import NamingConvention


class QueryStringModel(BaseModel):
    """Base class for records that encode themselves as query strings.

    Optional fields default to ``None`` and are omitted when absent.
    Renames come from field aliases; the class-level ``query_naming``
    sets the convention for every other field.

    Usage::

        class ListUsers(QueryStringModel):
            query_naming = NamingConvention.CAMEL

            page: int | None = None
            page_size: int | None = None

        ListUsers(page=1, page_size=20).try_to_query_string()
        # "page=1&pageSize=20"
    """

    query_naming: ClassVar[NamingConvention] = NamingConvention.IDENTITY

    def to_query_string(self, naming: NamingConvention | str | None = None) -> str:
        """Lossy: returns ``""`` if encoding fails."""
        return to_query_string(self, naming or self.query_naming)

    def try_to_query_string(
        self, naming: NamingConvention | str | None = None
    ) -> str:
        """Strict: raises ``UnsupportedTypeError`` if encoding fails."""
        return try_to_query_string(self, naming or self.query_naming)
