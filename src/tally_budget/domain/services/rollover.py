"""Rollover engine computing unspent budget carried between months.

Nothing here is cached: every figure is recomputed from the collections it is
given, so callers must pass a consistent snapshot.
"""

from collections.abc import Iterable, Mapping
from datetime import date
from decimal import Decimal

from tally_budget.domain.models import (
    CategoryAllocation,
    CategoryBudget,
    LedgerState,
    MonthKey,
    Transaction,
)
from tally_budget.domain.services.budgets import allocated_by_category
from tally_budget.domain.services.months import MonthLike, month_key
from tally_budget.domain.services.transactions import (
    total_spent,
    transactions_for_month,
)


def allocated_total_for_month(
    month: MonthKey,
    *,
    monthly_budgets: Mapping[MonthKey, list[CategoryBudget]],
    allocations: Iterable[CategoryAllocation],
) -> Decimal:
    """Sum base and supplemental allocations over a month's budget set.

    Args:
        month: Month to total.
        monthly_budgets: Budget sets keyed by month.
        allocations: All category allocations.

    Returns:
        Decimal: Allocated total, zero for an unconfigured month.
    """
    extras = allocated_by_category(allocations, month)
    return sum(
        (
            category.base_allocation + extras.get(category.id, Decimal("0.00"))
            for category in monthly_budgets.get(month) or []
        ),
        Decimal("0.00"),
    )


def leftover_for_month(
    month: MonthLike,
    *,
    monthly_budgets: Mapping[MonthKey, list[CategoryBudget]],
    allocations: Iterable[CategoryAllocation],
    transactions: Iterable[Transaction],
    rollover_spent: Mapping[MonthKey, Decimal],
) -> Decimal:
    """Return a single month's allocated minus spent minus goal transfers.

    Args:
        month: Month to evaluate.
        monthly_budgets: Budget sets keyed by month.
        allocations: All category allocations.
        transactions: All transactions.
        rollover_spent: Rollover consumed by goal transfers per month.

    Returns:
        Decimal: The month's leftover, possibly negative.
    """
    key = month_key(month)
    allocated = allocated_total_for_month(
        key,
        monthly_budgets=monthly_budgets,
        allocations=allocations,
    )
    spent = total_spent(transactions_for_month(transactions, key))
    return allocated - spent - rollover_spent.get(key, Decimal("0.00"))


def rollover_leftover(
    selected: MonthLike,
    *,
    epoch: MonthLike,
    monthly_budgets: Mapping[MonthKey, list[CategoryBudget]],
    allocations: Iterable[CategoryAllocation],
    transactions: Iterable[Transaction],
    rollover_spent: Mapping[MonthKey, Decimal],
) -> Decimal:
    """Return the unspent budget carried into ``selected``.

    Leftovers of every month from the epoch (inclusive) up to the selected
    month (exclusive) are summed by walking backward one month at a time.
    Allocations and goal transfers made during the selected month are funded
    from that balance immediately, so they are subtracted here.

    Args:
        selected: Month being displayed.
        epoch: First month the ledger considers; nothing carries into it.
        monthly_budgets: Budget sets keyed by month.
        allocations: All category allocations.
        transactions: All transactions.
        rollover_spent: Rollover consumed by goal transfers per month.

    Returns:
        Decimal: Rollover balance, zero for the epoch and earlier months.
    """
    selected_key = month_key(selected)
    epoch_key = month_key(epoch)
    if selected_key <= epoch_key:
        return Decimal("0.00")

    allocations = list(allocations)
    transactions = list(transactions)
    carried = Decimal("0.00")
    current = selected_key
    while current > epoch_key:
        current = current.previous()
        carried += leftover_for_month(
            current,
            monthly_budgets=monthly_budgets,
            allocations=allocations,
            transactions=transactions,
            rollover_spent=rollover_spent,
        )

    allocated_this_month = sum(
        (
            allocation.allocated_amount
            for allocation in allocations
            if allocation.month == selected_key
        ),
        Decimal("0.00"),
    )
    return (
        carried
        - allocated_this_month
        - rollover_spent.get(selected_key, Decimal("0.00"))
    )


def state_rollover_leftover(
    state: LedgerState,
    selected: MonthLike,
    epoch: MonthLike,
) -> Decimal:
    """Compute ``rollover_leftover`` over a ledger state snapshot."""
    return rollover_leftover(
        selected,
        epoch=epoch,
        monthly_budgets=state.monthly_budgets,
        allocations=state.allocations,
        transactions=state.transactions,
        rollover_spent=state.rollover_spent_by_month,
    )


def infer_epoch(state: LedgerState, today: date) -> MonthKey:
    """Return the earliest month holding ledger data.

    Args:
        state: Ledger state to inspect.
        today: Fallback date when the ledger is empty.

    Returns:
        MonthKey: Earliest budgeted, spent, allocated or saved month.
    """
    months: list[MonthKey] = list(state.monthly_budgets)
    months.extend(month_key(tx.date) for tx in state.transactions)
    months.extend(allocation.month for allocation in state.allocations)
    months.extend(month_key(record.date) for record in state.savings_records)
    if not months:
        return month_key(today)
    return min(months)


__all__ = [
    "allocated_total_for_month",
    "leftover_for_month",
    "rollover_leftover",
    "state_rollover_leftover",
    "infer_epoch",
]
