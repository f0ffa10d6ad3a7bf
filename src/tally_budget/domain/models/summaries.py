"""Read models returned to the presentation layer."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from .month import MonthKey


@dataclass(frozen=True)
class CategorySummary:
    """Budget figures for one category in one month."""

    category_id: UUID
    name: str
    color: str
    base_allocation: Decimal
    allocated: Decimal
    spent: Decimal

    @property
    def effective_allocation(self) -> Decimal:
        """Return the base allocation plus supplemental allocations."""
        return self.base_allocation + self.allocated

    @property
    def remaining(self) -> Decimal:
        return self.effective_allocation - self.spent


@dataclass(frozen=True)
class DailySpending:
    """Spending on a calendar day and the month-to-date total."""

    day: date
    total: Decimal
    cumulative: Decimal


@dataclass(frozen=True)
class MonthSummary:
    """Everything the presentation layer shows for a month.

    Attributes:
        month: Month the figures apply to.
        configured: False when the month has no budget set.
        categories: Per-category figures in budget order.
        total_allocated: Sum of effective allocations.
        total_spent: Sum of every transaction dated in the month.
        rollover_leftover: Rollover carried into the month.
        daily_spending: One point per calendar day of the month.
    """

    month: MonthKey
    configured: bool
    categories: list[CategorySummary]
    total_allocated: Decimal
    total_spent: Decimal
    rollover_leftover: Decimal
    daily_spending: list[DailySpending]

    @property
    def total_remaining(self) -> Decimal:
        return self.total_allocated - self.total_spent


__all__ = ["CategorySummary", "DailySpending", "MonthSummary"]
