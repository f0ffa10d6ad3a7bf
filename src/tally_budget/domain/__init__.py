"""Domain package for ledger rules and core models."""

from .errors import LedgerError, LedgerInvariantError, ValidationError
from .models import (
    CategoryAllocation,
    CategoryBudget,
    CategorySummary,
    DailySpending,
    LedgerState,
    MonthKey,
    MonthSummary,
    SavingsGoal,
    SavingsRecord,
    Transaction,
)

__all__ = [
    "LedgerError",
    "LedgerInvariantError",
    "ValidationError",
    "CategoryAllocation",
    "CategoryBudget",
    "CategorySummary",
    "DailySpending",
    "LedgerState",
    "MonthKey",
    "MonthSummary",
    "SavingsGoal",
    "SavingsRecord",
    "Transaction",
]
