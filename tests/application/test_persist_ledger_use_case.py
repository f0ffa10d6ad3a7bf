"""Tests for LedgerPersistenceUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

from tally_budget.application.use_cases.persist_ledger import (
    LedgerPersistenceUseCase,
)
from tally_budget.domain.constants import (
    CATEGORIES,
    COLLECTION_NAMES,
    MONTHLY_BUDGETS,
    ROLLOVER_SPENT_BY_MONTH,
    TRANSACTIONS,
)
from tally_budget.domain.models import MonthKey


def test_load_state_falls_back_to_defaults() -> None:
    """Nothing stored yields template categories and empty collections."""
    store = MagicMock()
    store.load.return_value = None

    state = LedgerPersistenceUseCase(store, logger=MagicMock()).load_state()

    assert [c.name for c in state.categories] == [
        "Housing",
        "Transportation",
        "Groceries",
        "Healthcare",
        "Entertainment",
        "Misc",
    ]
    assert state.categories[0].base_allocation == Decimal("2400")
    assert state.monthly_budgets == {}
    assert state.transactions == []
    assert state.rollover_spent_by_month == {}
    assert {call.args[0] for call in store.load.call_args_list} == set(
        COLLECTION_NAMES
    )


def test_load_state_keeps_stored_collections() -> None:
    stored = {
        CATEGORIES: [],
        ROLLOVER_SPENT_BY_MONTH: {MonthKey(2025, 1): Decimal("5.00")},
    }
    store = MagicMock()
    store.load.side_effect = stored.get

    state = LedgerPersistenceUseCase(store, logger=MagicMock()).load_state()

    assert state.categories == []
    assert state.rollover_spent_by_month == {
        MonthKey(2025, 1): Decimal("5.00")
    }


def test_save_session_writes_every_collection(session) -> None:
    """Saving writes each canonical collection once under its name."""
    store = MagicMock()

    LedgerPersistenceUseCase(store, logger=MagicMock()).save_session(session)

    saved = {call.args[1]: call.args[0] for call in store.save.call_args_list}
    assert set(saved) == set(COLLECTION_NAMES)
    assert len(saved[MONTHLY_BUDGETS]) == 2
    assert saved[TRANSACTIONS] == []
