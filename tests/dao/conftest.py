"""Fixtures for DAO tests.

The Supabase query builder is faked with a MagicMock whose builder methods
all return the same query object, so a test can set what ``execute()``
returns and inspect the calls afterwards.
"""

from unittest.mock import MagicMock

import pytest

BUILDER_METHODS = ("select", "eq", "gt", "in_", "order", "range", "limit", "insert", "update", "delete")


def _make_query(*results: list[dict]) -> MagicMock:
    """Fake query; each ``execute()`` returns the next result's rows."""
    query = MagicMock()
    for name in BUILDER_METHODS:
        getattr(query, name).return_value = query
    query.execute.side_effect = [MagicMock(data=rows) for rows in results]
    return query


@pytest.fixture
def make_query():
    """Factory for fake queries."""
    return _make_query


@pytest.fixture
def fake_client():
    """Supabase client whose tables are registered with ``fake_client.tables``."""
    client = MagicMock()
    client.tables = {}
    client.table.side_effect = lambda name: client.tables[name]
    return client
