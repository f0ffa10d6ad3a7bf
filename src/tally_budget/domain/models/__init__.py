"""Domain models package."""

from .budget import CategoryAllocation, CategoryBudget, Transaction
from .ledger import LedgerState
from .month import MonthKey
from .savings import SavingsGoal, SavingsRecord
from .summaries import CategorySummary, DailySpending, MonthSummary

__all__ = [
    "MonthKey",
    "CategoryBudget",
    "CategoryAllocation",
    "Transaction",
    "SavingsGoal",
    "SavingsRecord",
    "LedgerState",
    "CategorySummary",
    "DailySpending",
    "MonthSummary",
]
