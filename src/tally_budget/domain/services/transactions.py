"""Domain services over the transaction ledger."""

import calendar
from collections.abc import Iterable, Mapping
from datetime import date, timedelta
from decimal import Decimal
from logging import Logger
from uuid import UUID

from tally_budget.domain.constants import UNKNOWN_CATEGORY_NAME
from tally_budget.domain.models import (
    CategoryBudget,
    DailySpending,
    MonthKey,
    Transaction,
)
from tally_budget.domain.services.budgets import find_category
from tally_budget.domain.services.months import month_key, same_month


def transactions_for_month(
    transactions: Iterable[Transaction],
    month: MonthKey,
) -> list[Transaction]:
    """Return the transactions dated within ``month``."""
    return [
        transaction
        for transaction in transactions
        if same_month(transaction.date, month)
    ]


def valid_categories_for_month(
    monthly_budgets: Mapping[MonthKey, list[CategoryBudget]],
    month: MonthKey,
) -> list[CategoryBudget]:
    """Return the categories a transaction dated in ``month`` may use."""
    return list(monthly_budgets.get(month) or [])


def is_valid_category(
    monthly_budgets: Mapping[MonthKey, list[CategoryBudget]],
    category_id: UUID,
    on_date: date,
) -> bool:
    return (
        find_category(
            valid_categories_for_month(monthly_budgets, month_key(on_date)),
            category_id,
        )
        is not None
    )


def category_name(
    monthly_budgets: Mapping[MonthKey, list[CategoryBudget]],
    transaction: Transaction,
    logger: Logger | None = None,
) -> str:
    """Resolve a transaction's category name against its own month.

    Args:
        monthly_budgets: Budget sets keyed by month.
        transaction: Transaction whose category is displayed.
        logger: Optional logger warned about dangling category ids.

    Returns:
        str: Category name, or a placeholder when the id does not resolve.
    """
    category = find_category(
        monthly_budgets.get(month_key(transaction.date)),
        transaction.category_id,
    )
    if category is not None:
        return category.name
    if logger is not None:
        logger.warning(
            f"Transaction {transaction.id} references unknown category "
            f"{transaction.category_id} in {month_key(transaction.date)}"
        )
    return UNKNOWN_CATEGORY_NAME


def total_spent(transactions: Iterable[Transaction]) -> Decimal:
    return sum(
        (transaction.amount for transaction in transactions),
        Decimal("0.00"),
    )


def spending_on_day(
    transactions: Iterable[Transaction],
    day: date,
) -> Decimal:
    """Return the total spent on a calendar day."""
    return total_spent(
        transaction for transaction in transactions if transaction.date == day
    )


def daily_cumulative_spending(
    transactions: Iterable[Transaction],
    month: MonthKey,
) -> list[DailySpending]:
    """Build the daily and month-to-date spending series for a month.

    Args:
        transactions: Transactions of any month; others are ignored.
        month: Month to chart.

    Returns:
        list[DailySpending]: One point per calendar day, in order.
    """
    per_day: dict[date, Decimal] = {}
    for transaction in transactions_for_month(transactions, month):
        per_day[transaction.date] = (
            per_day.get(transaction.date, Decimal("0.00")) + transaction.amount
        )

    days_in_month = calendar.monthrange(month.year, month.month)[1]
    cumulative = Decimal("0.00")
    series: list[DailySpending] = []
    for offset in range(days_in_month):
        day = month.first_day() + timedelta(days=offset)
        total = per_day.get(day, Decimal("0.00"))
        cumulative += total
        series.append(DailySpending(day=day, total=total, cumulative=cumulative))
    return series


__all__ = [
    "transactions_for_month",
    "valid_categories_for_month",
    "is_valid_category",
    "category_name",
    "total_spent",
    "spending_on_day",
    "daily_cumulative_spending",
]
