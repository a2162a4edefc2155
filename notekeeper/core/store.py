"""
Durable Store.

Transactional record store over a synchronous SQLAlchemy session.
The store is always constructed explicitly and handed to the repository;
there is no process-wide instance.

Surface:
    insert(entity)                  -> entity
    get(model, identifier)          -> entity | None
    query(model, *criteria, order_by=...) -> list[entity]
    delete(entity)                  -> bool
    flush()                         -> bool   (commit pending changes)

Usage:
    from notekeeper.core.database import build_engine
    from notekeeper.core.store import DurableStore

    store = DurableStore(build_engine("sqlite:///:memory:"))
    store.create_schema()
"""

from collections.abc import Iterable
from typing import Any, TypeVar

from sqlalchemy import Engine, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from notekeeper.core.exceptions import PersistenceError
from notekeeper.core.logging import get_logger
from notekeeper.models.base import Base

logger = get_logger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class DurableStore:
    """
    Persistent record store keyed by primary key.

    Reads raise PersistenceError on database failure. Writes are staged
    in the session and only reach disk on flush(), which reports the
    outcome as a boolean and never raises.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        self._session = Session(engine, expire_on_commit=False)

    @property
    def engine(self) -> Engine:
        """The engine this store writes through."""
        return self._engine

    def create_schema(self) -> None:
        """Create all tables known to the model metadata. Safe to repeat."""
        Base.metadata.create_all(self._engine)

    def insert(self, entity: ModelType) -> ModelType:
        """Stage a new entity. Nothing is written until flush()."""
        self._session.add(entity)
        return entity

    def get(self, model: type[ModelType], identifier: Any) -> ModelType | None:
        """
        Get a single entity by primary key.

        Raises:
            PersistenceError: If the database read fails
        """
        try:
            return self._session.get(model, identifier)
        except SQLAlchemyError as e:
            self._session.rollback()
            logger.warning("Store read failed", model=model.__name__, error=str(e))
            raise PersistenceError(f"Failed to load {model.__name__}") from e

    def query(
        self,
        model: type[ModelType],
        *criteria: Any,
        order_by: Iterable[Any] = (),
    ) -> list[ModelType]:
        """
        Query entities matching all criteria in the given order.

        Args:
            model: Mapped class to select
            *criteria: SQLAlchemy filter expressions, combined with AND
            order_by: Sort expressions applied in sequence

        Returns:
            Matching entities

        Raises:
            PersistenceError: If the database read fails
        """
        stmt = select(model)
        if criteria:
            stmt = stmt.where(*criteria)
        sort = tuple(order_by)
        if sort:
            stmt = stmt.order_by(*sort)

        try:
            return list(self._session.scalars(stmt).all())
        except SQLAlchemyError as e:
            self._session.rollback()
            logger.warning("Store query failed", model=model.__name__, error=str(e))
            raise PersistenceError(f"Failed to query {model.__name__}") from e

    def contains(self, entity: Base) -> bool:
        """Whether the entity is currently tracked by this store."""
        return entity in self._session

    def delete(self, entity: Base) -> bool:
        """
        Stage removal of an entity.

        Returns:
            False if the entity is not tracked by this store
        """
        if entity not in self._session:
            return False
        self._session.delete(entity)
        return True

    def has_pending_changes(self) -> bool:
        """Whether there are staged inserts, updates or deletes."""
        session = self._session
        return bool(session.new or session.dirty or session.deleted)

    def flush(self) -> bool:
        """
        Commit pending changes to durable storage.

        Idempotent: with nothing pending this is a no-op that succeeds.
        On failure the transaction is rolled back.

        Returns:
            True if everything pending was committed
        """
        if not self.has_pending_changes():
            return True

        try:
            self._session.commit()
        except SQLAlchemyError as e:
            self._session.rollback()
            logger.error("Store commit failed", error=str(e))
            return False
        return True

    def close(self) -> None:
        """Commit anything pending and release the session."""
        self.flush()
        self._session.close()
