"""Policy deciding whether a category may leave a month's budget set."""

from collections.abc import Iterable
from uuid import UUID

from tally_budget.domain.models import (
    CategoryAllocation,
    MonthKey,
    Transaction,
)
from tally_budget.domain.services.months import same_month


def category_is_referenced(
    category_id: UUID,
    month: MonthKey,
    transactions: Iterable[Transaction],
    allocations: Iterable[CategoryAllocation],
) -> bool:
    """Return True when the month's transactions or allocations use the id."""
    if any(
        tx.category_id == category_id and same_month(tx.date, month)
        for tx in transactions
    ):
        return True
    return any(
        allocation.category_id == category_id and allocation.month == month
        for allocation in allocations
    )


__all__ = ["category_is_referenced"]
