"""Domain services for per-month category budget sets."""

from collections.abc import Iterable, Mapping, MutableMapping
from dataclasses import replace
from decimal import Decimal
from uuid import UUID

from tally_budget.domain.models import (
    CategoryAllocation,
    CategoryBudget,
    MonthKey,
    Transaction,
)
from tally_budget.utils.decimal_utils import round_cents


def budgets_for_month(
    monthly_budgets: Mapping[MonthKey, list[CategoryBudget]],
    key: MonthKey,
) -> list[CategoryBudget] | None:
    """Return the budget set for a month.

    Args:
        monthly_budgets: Budget sets keyed by month.
        key: Month to resolve.

    Returns:
        list[CategoryBudget] | None: ``None`` when the month is unconfigured,
        otherwise the (possibly empty) list of categories.
    """
    categories = monthly_budgets.get(key)
    if categories is None:
        return None
    return list(categories)


def copy_forward(
    monthly_budgets: MutableMapping[MonthKey, list[CategoryBudget]],
    from_key: MonthKey,
    to_key: MonthKey,
) -> list[CategoryBudget]:
    """Copy one month's budget set into another month.

    Copies keep the category ids so transactions stay attributable across
    months. An unconfigured source produces an explicit empty set.

    Args:
        monthly_budgets: Budget sets keyed by month, updated in place.
        from_key: Month to copy from.
        to_key: Month to copy into.

    Returns:
        list[CategoryBudget]: The new budget set for ``to_key``.
    """
    source = monthly_budgets.get(from_key) or []
    copied = [replace(category) for category in source]
    monthly_budgets[to_key] = copied
    return list(copied)


def most_recent_configured_month(
    monthly_budgets: Mapping[MonthKey, list[CategoryBudget]],
    before: MonthKey,
) -> MonthKey | None:
    """Return the latest configured month strictly before ``before``."""
    candidates = [key for key in monthly_budgets if key < before]
    return max(candidates) if candidates else None


def find_category(
    categories: Iterable[CategoryBudget] | None,
    category_id: UUID,
) -> CategoryBudget | None:
    for category in categories or ():
        if category.id == category_id:
            return category
    return None


def spent_by_category(
    categories: Iterable[CategoryBudget],
    transactions: Iterable[Transaction],
) -> dict[UUID, Decimal]:
    """Sum transaction amounts per category.

    Month filtering is the caller's job; every category gets an entry, zero
    when no transaction matches.

    Args:
        categories: Categories to report on.
        transactions: Transactions to aggregate.

    Returns:
        dict[UUID, Decimal]: Spent amount per category id.
    """
    totals = {category.id: Decimal("0.00") for category in categories}
    for transaction in transactions:
        if transaction.category_id in totals:
            totals[transaction.category_id] += transaction.amount
    return totals


def allocations_for_month(
    allocations: Iterable[CategoryAllocation],
    month: MonthKey,
) -> list[CategoryAllocation]:
    return [allocation for allocation in allocations if allocation.month == month]


def allocated_by_category(
    allocations: Iterable[CategoryAllocation],
    month: MonthKey,
) -> dict[UUID, Decimal]:
    """Sum supplemental allocations per category for one month."""
    totals: dict[UUID, Decimal] = {}
    for allocation in allocations_for_month(allocations, month):
        totals[allocation.category_id] = (
            totals.get(allocation.category_id, Decimal("0.00"))
            + allocation.allocated_amount
        )
    return totals


def merge_allocation(
    allocations: Iterable[CategoryAllocation],
    category_id: UUID,
    month: MonthKey,
    amount: Decimal,
) -> tuple[list[CategoryAllocation], CategoryAllocation]:
    """Add ``amount`` to the single allocation row for a category and month.

    A row is created when none exists. A row whose amount reaches zero is
    dropped from the returned list.

    Args:
        allocations: Existing allocations.
        category_id: Category receiving the amount.
        month: Month the allocation applies to.
        amount: Signed, cent-rounded amount to add.

    Returns:
        tuple[list[CategoryAllocation], CategoryAllocation]: New allocation
        list and the merged row.
    """
    merged: CategoryAllocation | None = None
    result: list[CategoryAllocation] = []
    for allocation in allocations:
        if (
            merged is None
            and allocation.category_id == category_id
            and allocation.month == month
        ):
            merged = replace(
                allocation,
                allocated_amount=round_cents(
                    allocation.allocated_amount + amount
                ),
            )
            if merged.allocated_amount != 0:
                result.append(merged)
            continue
        result.append(allocation)
    if merged is None:
        merged = CategoryAllocation(
            category_id=category_id,
            month=month,
            allocated_amount=round_cents(amount),
        )
        result.append(merged)
    return result, merged


def effective_allocation(
    category: CategoryBudget,
    month: MonthKey,
    allocations: Iterable[CategoryAllocation],
) -> Decimal:
    """Return the base allocation plus the month's allocations for a category."""
    extra = allocated_by_category(allocations, month).get(
        category.id, Decimal("0.00")
    )
    return category.base_allocation + extra


__all__ = [
    "budgets_for_month",
    "copy_forward",
    "most_recent_configured_month",
    "find_category",
    "spent_by_category",
    "allocations_for_month",
    "allocated_by_category",
    "merge_allocation",
    "effective_allocation",
]
