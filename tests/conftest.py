"""
Pytest configuration and fixtures for connection hub tests.
"""

import pytest

from src.connection_hub.core import connection_store, connection_manager
from src.connection_hub.core import ConnectionStore, stores


@pytest.fixture(autouse=True)
def reset_global_instances(monkeypatch):
    """Each test starts with a fresh process-wide store and manager."""
    monkeypatch.setattr(connection_store, "_global_store", None)
    monkeypatch.setattr(connection_manager, "_global_manager", None)
    yield


@pytest.fixture
def store():
    return ConnectionStore()


@pytest.fixture
def named_connections():
    return [
        {
            "store_name": stores.MONGO,
            "connection_name": "edisen-production",
            "connection": {"mock_id": "A"},
        },
        {
            "store_name": stores.MONGO,
            "connection_name": "media-management-production",
            "connection": {"mock_id": "B"},
        },
        {
            "store_name": stores.MYSQL,
            "connection_name": "vigor-league-production",
            "connection": {"mock_id": "C"},
        },
    ]


def as_triples(items):
    """Normalize NamedConnection objects or dicts into comparable tuples."""
    triples = []
    for item in items:
        if isinstance(item, dict):
            triples.append(
                (item["store_name"], item["connection_name"], item["connection"])
            )
        else:
            triples.append((item.store_name, item.connection_name, item.connection))
    return triples
