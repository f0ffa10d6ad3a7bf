"""Database infrastructure for the SQL-backed ledger store.

This module creates and reuses the SQLAlchemy engines holding persisted
ledger collections. It belongs to the infrastructure layer because it deals
with an external system (SQLite by default, any SQLAlchemy URL otherwise).
"""

from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import QueuePool

from tally_budget.application.ports.database import DatabaseEnginePort


def _ensure_sqlite_parent(db_url: str) -> None:
    """Create the folder holding a file-backed SQLite database.

    Args:
        db_url: Fully qualified database URL. Non-SQLite and in-memory URLs
            are left alone.
    """
    url = make_url(db_url)
    if not url.drivername.startswith("sqlite"):
        return
    if url.database in (None, "", ":memory:"):
        return
    Path(url.database).expanduser().parent.mkdir(parents=True, exist_ok=True)


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL.

    Returns:
        Engine: Engine with health checks enabled; server databases also get
        a small connection pool.
    """
    if db_url.startswith("sqlite"):
        _ensure_sqlite_parent(db_url)
        return create_engine(db_url, pool_pre_ping=True, future=True)
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_ledger_engines: dict[str, Engine] = {}


def get_ledger_engine(db_url: str) -> Engine:
    """Get the shared SQLAlchemy engine for a ledger database URL.

    Args:
        db_url: Fully qualified database URL.

    Returns:
        Engine: Lazily initialized engine, one per URL for the process.
    """
    engine = _ledger_engines.get(db_url)
    if engine is None:
        engine = _create_engine(db_url)
        _ledger_engines[db_url] = engine
    return engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by SQLAlchemy engines."""

    def __init__(self, db_url: str) -> None:
        self._db_url = db_url

    def get_ledger_engine(self) -> Engine:
        """Get the engine for the ledger database.

        Returns:
            Engine: SQLAlchemy engine connected to the ledger store.
        """
        return get_ledger_engine(self._db_url)


__all__ = [
    "get_ledger_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
