"""
Unit Test Fixtures.

Fixtures for unit tests. The store and repository are mocked so view
models and repository logic are tested without SQLite.
"""

from datetime import datetime
from unittest.mock import MagicMock

import pytest

from notekeeper.core.store import DurableStore
from notekeeper.models.note import Note
from notekeeper.repositories.note import NoteRepository


@pytest.fixture
def mock_store() -> MagicMock:
    """
    Mock durable store whose writes succeed and reads return nothing.

    Usage:
        def test_failure(mock_store):
            mock_store.flush.return_value = False
    """
    store = MagicMock(spec=DurableStore)
    store.insert.side_effect = lambda entity: entity
    store.query.return_value = []
    store.contains.return_value = True
    store.delete.return_value = True
    store.flush.return_value = True
    return store


@pytest.fixture
def mock_repository() -> MagicMock:
    """Mock note repository whose writes succeed."""
    repo = MagicMock(spec=NoteRepository)
    repo.fetch_all.return_value = []
    repo.search.return_value = []
    repo.update.return_value = True
    repo.delete.return_value = True
    repo.set_favorite.return_value = True
    return repo


@pytest.fixture
def make_note():
    """
    Factory for detached Note instances.

    Usage:
        note = make_note("Groceries", content="Milk")
    """
    counter = iter(range(1, 10_000))

    def _make(title: str = "Title", content: str = "", **overrides) -> Note:
        n = next(counter)
        stamp = datetime(2024, 1, 1, 12, 0, n % 60)
        fields = {
            "id": f"note-{n}",
            "title": title,
            "content": content,
            "category": "General",
            "is_favorite": False,
            "color_hex": "#4ECDC4",
            "created_at": stamp,
            "updated_at": stamp,
        }
        fields.update(overrides)
        return Note(**fields)

    return _make


@pytest.fixture
def three_notes(make_note) -> list[Note]:
    return [make_note("One"), make_note("Two"), make_note("Three")]
