"""Composition root for wiring the ledger session and its store."""

from tally_budget.application.ports.database import DatabaseEnginePort
from tally_budget.application.ports.ledger_store import LedgerStorePort
from tally_budget.application.session import LedgerSession
from tally_budget.application.use_cases.persist_ledger import (
    LedgerPersistenceUseCase,
)
from tally_budget.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from tally_budget.infrastructure.json_store import JsonFileLedgerStore
from tally_budget.infrastructure.logging.logger import get_app_logger
from tally_budget.infrastructure.settings import LedgerSettings
from tally_budget.infrastructure.sqlalchemy_store import SqlAlchemyLedgerStore


def build_database_adapter(
    settings: LedgerSettings | None = None,
) -> DatabaseEnginePort:
    """Return the database adapter for the configured URL."""
    resolved = settings or LedgerSettings.from_env()
    return SqlAlchemyDatabaseEngineAdapter(db_url=resolved.ledger_db_url)


def build_ledger_store(
    settings: LedgerSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
) -> LedgerStorePort:
    """Return the configured ledger store."""
    resolved = settings or LedgerSettings.from_env()
    logger = get_app_logger()
    if resolved.store_backend == "sqlalchemy":
        return SqlAlchemyLedgerStore(
            db_port or build_database_adapter(resolved),
            logger=logger,
        )
    return JsonFileLedgerStore(resolved.data_dir, logger=logger)


def build_persistence(
    store: LedgerStorePort | None = None,
    settings: LedgerSettings | None = None,
) -> LedgerPersistenceUseCase:
    """Return the persistence use case bound to the configured store."""
    return LedgerPersistenceUseCase(
        store or build_ledger_store(settings),
        logger=get_app_logger(),
    )


def build_session(
    store: LedgerStorePort | None = None,
    settings: LedgerSettings | None = None,
) -> LedgerSession:
    """Load the ledger from the store and open a session over it."""
    resolved = settings or LedgerSettings.from_env()
    persistence = build_persistence(store, resolved)
    return LedgerSession(
        state=persistence.load_state(),
        epoch=resolved.epoch_month,
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_ledger_store",
    "build_persistence",
    "build_session",
]
