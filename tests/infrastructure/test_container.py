"""Tests for the composition root."""

from datetime import date
from decimal import Decimal
from pathlib import Path
from unittest.mock import MagicMock

from tally_budget.domain.constants import CATEGORIES, MONTHLY_BUDGETS
from tally_budget.domain.models import MonthKey
from tally_budget.infrastructure import container
from tally_budget.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from tally_budget.infrastructure.json_store import JsonFileLedgerStore
from tally_budget.infrastructure.settings import LedgerSettings
from tally_budget.infrastructure.sqlalchemy_store import SqlAlchemyLedgerStore


def test_build_ledger_store_picks_backend(tmp_path: Path) -> None:
    json_settings = LedgerSettings(data_dir=tmp_path)
    sql_settings = LedgerSettings(
        store_backend="sqlalchemy",
        db_url=f"sqlite:///{tmp_path / 'tally.db'}",
    )

    assert isinstance(
        container.build_ledger_store(json_settings), JsonFileLedgerStore
    )
    assert isinstance(
        container.build_ledger_store(sql_settings), SqlAlchemyLedgerStore
    )
    assert isinstance(
        container.build_database_adapter(sql_settings),
        SqlAlchemyDatabaseEngineAdapter,
    )


def test_build_session_loads_store_and_pins_epoch(tmp_path: Path) -> None:
    """The session starts from stored data and the configured epoch."""
    settings = LedgerSettings(
        epoch_month=MonthKey(2024, 12), data_dir=tmp_path
    )
    store = MagicMock()
    store.load.return_value = None

    session = container.build_session(store=store, settings=settings)

    assert session.epoch == MonthKey(2024, 12)
    assert len(session.snapshot().categories) == 6


def test_session_round_trips_through_json_store(tmp_path: Path, food) -> None:
    settings = LedgerSettings(data_dir=tmp_path)
    first = container.build_session(settings=settings)
    with first.mutate() as state:
        state.monthly_budgets[MonthKey(2025, 1)] = [food]
        state.rollover_spent_by_month[MonthKey(2025, 1)] = Decimal("1.00")
    container.build_persistence(settings=settings).save_session(first)

    second = container.build_session(settings=settings)

    assert (tmp_path / f"{MONTHLY_BUDGETS}.json").exists()
    assert second.snapshot() == first.snapshot()
    assert second.epoch == MonthKey(2025, 1)
    assert first.epoch == MonthKey.from_date(date.today())


def test_sqlalchemy_store_creates_missing_data_dir(
    tmp_path: Path, food
) -> None:
    """A fresh install persists through the default SQLite file."""
    data_dir = tmp_path / "fresh" / "data"
    settings = LedgerSettings(store_backend="sqlalchemy", data_dir=data_dir)
    logger = MagicMock()
    store = container.build_ledger_store(settings)
    store._logger = logger

    store.save([food], CATEGORIES)

    assert store.load(CATEGORIES) == [food]
    assert (data_dir / "tally.db").exists()
    logger.error.assert_not_called()
