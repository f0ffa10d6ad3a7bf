"""Aggregate holding every collection of a budgeting session."""

from dataclasses import dataclass, field
from decimal import Decimal

from .budget import CategoryAllocation, CategoryBudget, Transaction
from .month import MonthKey
from .savings import SavingsGoal, SavingsRecord


@dataclass
class LedgerState:
    """Mutable container for the seven persisted collections.

    Attributes:
        categories: Template categories used to seed a month with no history.
        allocations: Supplemental per-month category allocations.
        monthly_budgets: Budget set per month; a missing key is unconfigured.
        transactions: All recorded spending.
        savings_records: Contribution history for every goal.
        savings_goals: Savings goals.
        rollover_spent_by_month: Rollover consumed by goal transfers.
    """

    categories: list[CategoryBudget] = field(default_factory=list)
    allocations: list[CategoryAllocation] = field(default_factory=list)
    monthly_budgets: dict[MonthKey, list[CategoryBudget]] = field(
        default_factory=dict
    )
    transactions: list[Transaction] = field(default_factory=list)
    savings_records: list[SavingsRecord] = field(default_factory=list)
    savings_goals: list[SavingsGoal] = field(default_factory=list)
    rollover_spent_by_month: dict[MonthKey, Decimal] = field(
        default_factory=dict
    )


__all__ = ["LedgerState"]
