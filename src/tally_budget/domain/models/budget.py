"""Domain models for categories, allocations and transactions."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from uuid import UUID, uuid4

from .month import MonthKey


@dataclass(frozen=True)
class CategoryBudget:
    """Spending category valid for one month's budget set.

    Attributes:
        id: Stable identifier shared by copies of the category across months.
        name: Display name.
        base_allocation: Budgeted amount before any top-ups.
        color: Color tag used by the presentation layer.
    """

    name: str
    base_allocation: Decimal
    color: str
    id: UUID = field(default_factory=uuid4)


@dataclass(frozen=True)
class CategoryAllocation:
    """Supplemental funds for a category within a single month.

    Attributes:
        category_id: Weak reference to a ``CategoryBudget`` id.
        month: Month the allocation applies to.
        allocated_amount: Amount added on top of the base allocation.
    """

    category_id: UUID
    month: MonthKey
    allocated_amount: Decimal
    id: UUID = field(default_factory=uuid4)


@dataclass(frozen=True)
class Transaction:
    """Money spent from a category on a given day."""

    category_id: UUID
    date: date
    amount: Decimal
    description: str
    id: UUID = field(default_factory=uuid4)


__all__ = ["CategoryBudget", "CategoryAllocation", "Transaction"]
