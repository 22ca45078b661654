"""Shared fixtures for query string tests."""

from __future__ import annotations

import pytest

from url_query_string import NamingConvention, QueryStringEncoder


@pytest.fixture
def encoder():
    """Encoder with the default (identity) naming convention."""
    return QueryStringEncoder()


@pytest.fixture
def camel_encoder():
    """Encoder that camelCases declared field names."""
    return QueryStringEncoder(NamingConvention.CAMEL)
