"""
Integration Test Fixtures.

Integration tests run the real repository and view models over an
in-memory SQLite store (fixtures in tests/conftest.py).
"""

import pytest

from notekeeper.viewmodels import NotesListViewModel


def pytest_collection_modifyitems(items):
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def list_vm(repository) -> NotesListViewModel:
    return NotesListViewModel(repository)
