"""
Shared pytest fixtures and configuration for all tests.
"""

import pytest
from structlog.testing import capture_logs

from gqlcache.logging import get_logger
from gqlcache.store import IdValue, JsonValue


@pytest.fixture
def store():
    """A small normalized store: a root query pointing at people and pets."""
    return {
        "ROOT_QUERY": {
            "viewer": IdValue("User:1"),
            "user": IdValue("User:1"),
            'user({"id":"2"})': IdValue("User:2"),
            "pets": [IdValue("Dog:1"), IdValue("Cat:1")],
            "settings": JsonValue({"theme": "dark", "flags": [1, 2]}),
            "version": 3,
            "motd": None,
        },
        "User:1": {
            "__typename": "User",
            "id": "1",
            "name": "Ada",
            'friends({"first":2,"orderBy":"name"})': [IdValue("User:2"), None],
            "bestFriend": IdValue("User:2"),
            "tags": ["admin", "ops"],
        },
        "User:2": {
            "__typename": "User",
            "id": "2",
            "name": "Grace",
        },
        "Dog:1": {
            "__typename": "Dog",
            "name": "Rex",
            "barks": True,
        },
        "Cat:1": {
            "__typename": "Cat",
            "name": "Tom",
            "meows": True,
        },
    }


@pytest.fixture
def json_store():
    """The same kind of data as loaded from a JSON dump, with tagged dicts."""
    return {
        "ROOT_QUERY": {
            "viewer": {"type": "id", "id": "User:1", "generated": False},
            "config": {"type": "json", "json": {"a": 1}},
        },
        "User:1": {
            "name": "Ada",
            "roles": [{"type": "id", "id": "Role:1", "generated": True}],
        },
        "Role:1": {"label": "admin"},
    }


@pytest.fixture
def captured_logs(monkeypatch):
    """Capture structlog events emitted by the read path.

    The module logger is swapped for a fresh proxy so a logger cached by an
    earlier configure_logging() call cannot bypass the capture.
    """
    monkeypatch.setattr(
        "gqlcache.read_from_store.logger", get_logger("gqlcache.read_from_store")
    )
    with capture_logs() as logs:
        yield logs
