"""Tests for ManageBudgetsUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock
from uuid import uuid4

from tally_budget.application.session import LedgerSession
from tally_budget.application.use_cases.manage_budgets import (
    ManageBudgetsUseCase,
)
from tally_budget.application.use_cases.persist_ledger import (
    default_categories,
)
from tally_budget.domain.models import (
    CategoryAllocation,
    LedgerState,
    MonthKey,
    Transaction,
)

JAN = MonthKey(2025, 1)
FEB = MonthKey(2025, 2)
MAR = MonthKey(2025, 3)


def _budgets(session) -> ManageBudgetsUseCase:
    return ManageBudgetsUseCase(session, logger=MagicMock())


def test_start_month_copies_most_recent_configured_month(
    session, food
) -> None:
    """A new month inherits the latest earlier budget set and its ids."""
    budgets = _budgets(session)

    result = budgets.start_month(date(2025, 4, 2))

    assert result.ok
    assert [c.id for c in result.value] == [food.id]
    assert budgets.is_configured(MonthKey(2025, 4))
    assert not budgets.is_configured(MAR)


def test_start_month_falls_back_to_template_categories() -> None:
    template = default_categories()
    session = LedgerSession(
        state=LedgerState(categories=template),
        epoch=JAN,
        logger=MagicMock(),
    )

    result = _budgets(session).start_month(JAN)

    assert result.ok
    assert [c.id for c in result.value] == [c.id for c in template]
    assert [c.name for c in result.value][:2] == ["Housing", "Transportation"]


def test_start_month_blank_and_already_configured(session) -> None:
    """A blank start gives an empty configured set; repeats are rejected."""
    budgets = _budgets(session)

    blank = budgets.start_month(MAR, copy_previous=False)
    repeat = budgets.start_month(FEB)

    assert blank.ok and blank.value == []
    assert budgets.budgets_for_month(MAR) == []
    assert not repeat.ok
    assert repeat.message == "2025-02 already has a budget."


def test_copy_forward_into_unconfigured_month(session, food) -> None:
    budgets = _budgets(session)

    copied = budgets.copy_forward(FEB, MAR)
    rejected = budgets.copy_forward(JAN, FEB)

    assert copied.ok
    assert [c.id for c in budgets.budgets_for_month(MAR)] == [food.id]
    assert not rejected.ok


def test_add_category_validates_input(session) -> None:
    """New categories need a configured month, a unique name and base >= 0."""
    budgets = _budgets(session)

    added = budgets.add_category(FEB, "Rent", "1,200")
    duplicate = budgets.add_category(FEB, "food", "10")
    negative = budgets.add_category(FEB, "Fun", "-1")
    unconfigured = budgets.add_category(MAR, "Fun", "10")

    assert added.ok
    assert added.value.base_allocation == Decimal("1200.00")
    assert added.value.color == "red"
    assert duplicate.message == "A category named 'food' already exists."
    assert negative.message == "Amount cannot be negative."
    assert unconfigured.message == "Set up a budget for 2025-03 first."
    assert len(budgets.budgets_for_month(FEB)) == 2


def test_edit_category_changes_only_one_month(session, food) -> None:
    """Editing February's copy leaves January untouched."""
    budgets = _budgets(session)

    result = budgets.edit_category(
        FEB, food.id, name="Groceries", base_allocation="150"
    )

    assert result.ok
    assert budgets.budgets_for_month(FEB)[0].name == "Groceries"
    assert budgets.budgets_for_month(FEB)[0].base_allocation == Decimal(
        "150.00"
    )
    assert budgets.budgets_for_month(JAN)[0].name == "Food"
    assert session.rollover_leftover(MAR) == Decimal("250.00")


def test_remove_category_is_guarded_by_month_references(
    session, food
) -> None:
    """Categories used by the month's transactions cannot be removed."""
    with session.mutate() as state:
        state.transactions.append(
            Transaction(food.id, date(2025, 2, 3), Decimal("5.00"), "Snack")
        )
    budgets = _budgets(session)

    blocked = budgets.remove_category(FEB, food.id)
    allowed = budgets.remove_category(JAN, food.id)

    assert not blocked.ok
    assert "cannot be removed" in blocked.message
    assert allowed.ok
    assert budgets.budgets_for_month(JAN) == []
    assert len(budgets.budgets_for_month(FEB)) == 1


def test_remove_category_blocked_by_allocation(session, food) -> None:
    with session.mutate() as state:
        state.allocations.append(
            CategoryAllocation(food.id, JAN, Decimal("5.00"))
        )

    assert not _budgets(session).remove_category(JAN, food.id).ok


def test_remove_unknown_allocation_is_rejected(session) -> None:
    result = _budgets(session).remove_allocation(
        uuid4()
    )

    assert not result.ok
    assert result.message == "Allocation not found."
