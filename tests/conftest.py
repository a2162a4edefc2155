"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

Test Database Configuration:
    Tests use an in-memory SQLite database. Each test gets a fresh engine,
    so no test can see another test's notes.
"""

import random
from collections.abc import Generator
from datetime import datetime, timedelta

import pytest
from sqlalchemy import Engine

from notekeeper.core.database import build_engine, create_store
from notekeeper.core.store import DurableStore
from notekeeper.repositories.note import NoteRepository


class FakeClock:
    """Clock that advances one second on every reading."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, 12, 0, 0)) -> None:
        self.current = start

    def __call__(self) -> datetime:
        self.current += timedelta(seconds=1)
        return self.current


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture
def db_engine() -> Generator[Engine, None, None]:
    """Fresh in-memory SQLite engine for one test."""
    engine = build_engine("sqlite:///:memory:")
    yield engine
    engine.dispose()


@pytest.fixture
def store(db_engine: Engine) -> Generator[DurableStore, None, None]:
    """
    Durable store with the schema created.

    Usage:
        def test_insert(store: DurableStore):
            store.insert(Note(title="a", content=""))
            assert store.flush()
    """
    durable_store = create_store(db_engine)
    yield durable_store
    durable_store.close()


# =============================================================================
# Repository Fixtures
# =============================================================================


@pytest.fixture
def clock() -> FakeClock:
    """Deterministic, strictly increasing clock."""
    return FakeClock()


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for color assignment."""
    return random.Random(1234)


@pytest.fixture
def repository(store: DurableStore, rng: random.Random, clock: FakeClock) -> NoteRepository:
    """Note repository over the in-memory store."""
    return NoteRepository(store, rng=rng, clock=clock)
