"""Shared fixtures for the ledger test suites."""

from dataclasses import replace
from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from tally_budget.application.session import LedgerSession
from tally_budget.domain.constants import (
    ALLOCATIONS,
    CATEGORIES,
    MONTHLY_BUDGETS,
    ROLLOVER_SPENT_BY_MONTH,
    SAVINGS_GOALS,
    SAVINGS_RECORDS,
    TRANSACTIONS,
)
from tally_budget.domain.models import (
    CategoryAllocation,
    CategoryBudget,
    LedgerState,
    MonthKey,
    SavingsGoal,
    SavingsRecord,
    Transaction,
)


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep log files and default data folders inside the test tmp dir."""
    monkeypatch.setenv("TALLY_HOME", str(tmp_path / "home"))
    for name in (
        "TALLY_EPOCH_MONTH",
        "TALLY_STORE_BACKEND",
        "TALLY_DATA_DIR",
        "TALLY_DB_URL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def quiet_logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def food() -> CategoryBudget:
    return CategoryBudget(
        name="Food",
        base_allocation=Decimal("100.00"),
        color="orange",
    )


@pytest.fixture
def ledger(food) -> LedgerState:
    """January and February 2025, each budgeting Food at 100."""
    return LedgerState(
        monthly_budgets={
            MonthKey(2025, 1): [food],
            MonthKey(2025, 2): [replace(food)],
        }
    )


@pytest.fixture
def session(ledger, quiet_logger) -> LedgerSession:
    return LedgerSession(
        state=ledger,
        epoch=MonthKey(2025, 1),
        logger=quiet_logger,
    )


@pytest.fixture
def sample_collections(food) -> dict:
    """One populated value per canonical collection name."""
    goal = SavingsGoal(
        title="Trip",
        target_amount=Decimal("500.00"),
        current_amount=Decimal("40.00"),
    )
    feb = MonthKey(2025, 2)
    return {
        CATEGORIES: [food],
        ALLOCATIONS: [CategoryAllocation(food.id, feb, Decimal("-12.50"))],
        MONTHLY_BUDGETS: {feb: [food], MonthKey(2025, 3): []},
        TRANSACTIONS: [
            Transaction(food.id, date(2025, 2, 3), Decimal("9.99"), "Lunch")
        ],
        SAVINGS_RECORDS: [
            SavingsRecord(goal.id, date(2025, 2, 4), Decimal("40.00"))
        ],
        SAVINGS_GOALS: [goal],
        ROLLOVER_SPENT_BY_MONTH: {feb: Decimal("40.00")},
    }
