"""Ledger store keeping each collection as a row of a SQL table."""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from tally_budget.application.ports.database import DatabaseEnginePort
from tally_budget.application.ports.ledger_store import LedgerStorePort
from tally_budget.infrastructure.logging.logger import get_app_logger
from tally_budget.infrastructure.serialization import (
    decode_collection,
    encode_collection,
)

CREATE_COLLECTIONS_SQL = """
CREATE TABLE IF NOT EXISTS ledger_collections (
    name VARCHAR(64) PRIMARY KEY,
    payload TEXT NOT NULL,
    updated_at TIMESTAMP NOT NULL
)
"""

DELETE_COLLECTION_SQL = text(
    "DELETE FROM ledger_collections WHERE name = :name"
)

INSERT_COLLECTION_SQL = text(
    """
    INSERT INTO ledger_collections (name, payload, updated_at)
    VALUES (:name, :payload, :updated_at)
    """
)

SELECT_COLLECTION_SQL = text(
    "SELECT payload FROM ledger_collections WHERE name = :name"
)


class SqlAlchemyLedgerStore(LedgerStorePort):
    """Ledger store backed by a SQLAlchemy engine."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing the ledger engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()
        self._prepared = False

    def prepare(self) -> None:
        """Ensure the collections table exists."""
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_COLLECTIONS_SQL)
        self._prepared = True

    def save(self, collection: Any, name: str) -> None:
        """Replace the stored row for ``name`` in one database transaction."""
        try:
            payload = encode_collection(name, collection)
            if not self._prepared:
                self.prepare()
            engine = self._db_port.get_ledger_engine()
            with engine.begin() as conn:
                conn.execute(DELETE_COLLECTION_SQL, {"name": name})
                conn.execute(
                    INSERT_COLLECTION_SQL,
                    {
                        "name": name,
                        "payload": payload,
                        "updated_at": datetime.now(timezone.utc),
                    },
                )
        except (SQLAlchemyError, KeyError, TypeError, ValueError) as exc:
            self._logger.error(f"Error saving {name}: {exc}")
            return
        self._logger.debug(f"Saved {name} to ledger_collections")

    def load(self, name: str) -> Any | None:
        """Return the decoded row for ``name``, or None."""
        try:
            if not self._prepared:
                self.prepare()
            engine = self._db_port.get_ledger_engine()
            with engine.connect() as conn:
                row = conn.execute(SELECT_COLLECTION_SQL, {"name": name}).first()
            if row is None:
                self._logger.info(f"No stored {name} in ledger_collections")
                return None
            return decode_collection(name, row.payload)
        except (SQLAlchemyError, KeyError, TypeError, ValueError) as exc:
            self._logger.warning(f"Error loading {name}: {exc}")
            return None


__all__ = ["SqlAlchemyLedgerStore", "CREATE_COLLECTIONS_SQL"]
