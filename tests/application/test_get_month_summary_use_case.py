"""Tests for GetMonthSummaryUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from tally_budget.application.use_cases.get_month_summary import (
    GetMonthSummaryUseCase,
)
from tally_budget.domain.models import (
    CategoryAllocation,
    MonthKey,
    Transaction,
)

FEB = MonthKey(2025, 2)


def test_execute_reports_category_and_month_totals(session, food) -> None:
    """The summary combines budgets, allocations, spending and rollover."""
    with session.mutate() as state:
        state.allocations.append(
            CategoryAllocation(food.id, FEB, Decimal("20.00"))
        )
        state.transactions.extend(
            [
                Transaction(food.id, date(2025, 2, 3), Decimal("30.00"), "A"),
                Transaction(food.id, date(2025, 2, 5), Decimal("15.00"), "B"),
                Transaction(food.id, date(2025, 1, 5), Decimal("10.00"), "C"),
            ]
        )
    use_case = GetMonthSummaryUseCase(session, logger=MagicMock())

    summary = use_case.execute(date(2025, 2, 14))

    assert summary.month == FEB
    assert summary.configured
    (food_summary,) = summary.categories
    assert food_summary.name == "Food"
    assert food_summary.allocated == Decimal("20.00")
    assert food_summary.effective_allocation == Decimal("120.00")
    assert food_summary.spent == Decimal("45.00")
    assert food_summary.remaining == Decimal("75.00")
    assert summary.total_allocated == Decimal("120.00")
    assert summary.total_spent == Decimal("45.00")
    assert summary.total_remaining == Decimal("75.00")
    assert summary.rollover_leftover == Decimal("70.00")
    assert use_case.rollover_leftover(FEB) == Decimal("70.00")
    assert len(summary.daily_spending) == 28
    assert summary.daily_spending[-1].cumulative == Decimal("45.00")


def test_execute_on_unconfigured_month(session) -> None:
    """Unconfigured months report no categories but still carry rollover."""
    summary = GetMonthSummaryUseCase(session, logger=MagicMock()).execute(
        MonthKey(2025, 3)
    )

    assert not summary.configured
    assert summary.categories == []
    assert summary.total_allocated == Decimal("0.00")
    assert summary.rollover_leftover == Decimal("200.00")
