"""
Database Configuration.

SQLAlchemy engine construction and durable store wiring.
Nothing here runs at import time, so importing the package never touches disk.
"""

from pathlib import Path
from typing import Any

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.pool import StaticPool

from notekeeper.core.logging import get_logger
from notekeeper.core.store import DurableStore

logger = get_logger(__name__)


def _casefold(value: str | None) -> str | None:
    return value.casefold() if value is not None else None


def _register_sqlite_functions(dbapi_connection: Any, connection_record: Any) -> None:
    """SQLite's lower() only folds ASCII; expose Python's full Unicode casefold."""
    dbapi_connection.create_function("casefold", 1, _casefold, deterministic=True)


def build_engine(url: str, echo: bool = False) -> Engine:
    """
    Create a synchronous SQLAlchemy engine.

    In-memory SQLite shares one connection so every session sees the
    same database. File-backed SQLite gets its parent directory created.
    SQLite connections get a casefold() SQL function for search.

    Args:
        url: SQLAlchemy database URL
        echo: Log emitted SQL

    Returns:
        SQLAlchemy engine instance
    """
    parsed = make_url(url)
    kwargs: dict[str, Any] = {"echo": echo}

    if parsed.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False}
        database = parsed.database
        if not database or database == ":memory:":
            kwargs["poolclass"] = StaticPool
        else:
            Path(database).parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(url, **kwargs)
    if parsed.get_backend_name() == "sqlite":
        event.listen(engine, "connect", _register_sqlite_functions)
    return engine


def engine_from_config() -> Engine:
    """
    Create the engine described by configuration.

    Raises:
        RuntimeError: If the project root cannot be found
        ValueError: If database.yaml is invalid
    """
    from notekeeper.core.config import get_app_config, get_database_url

    url = get_database_url()
    engine = build_engine(url, echo=get_app_config().database.echo)
    logger.debug("Database engine created", url=make_url(url).render_as_string(hide_password=True))
    return engine


def create_store(engine: Engine | None = None) -> DurableStore:
    """
    Build a durable store with its schema in place.

    Args:
        engine: Engine to use. Defaults to the configured engine.

    Returns:
        Ready-to-use DurableStore
    """
    store = DurableStore(engine if engine is not None else engine_from_config())
    store.create_schema()
    return store
