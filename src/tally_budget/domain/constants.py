"""Domain constants for the budget ledger."""

from decimal import Decimal

CATEGORY_COLORS = (
    "red",
    "green",
    "blue",
    "orange",
    "purple",
    "brown",
    "pink",
    "yellow",
    "mint",
    "indigo",
    "cyan",
)
FALLBACK_COLOR = "gray"

UNKNOWN_CATEGORY_NAME = "Unknown"

# (name, base allocation, color) for a fresh ledger.
DEFAULT_CATEGORIES = (
    ("Housing", Decimal("2400.00"), "yellow"),
    ("Transportation", Decimal("700.00"), "green"),
    ("Groceries", Decimal("900.00"), "orange"),
    ("Healthcare", Decimal("200.00"), "red"),
    ("Entertainment", Decimal("700.00"), "purple"),
    ("Misc", Decimal("500.00"), "brown"),
)

CATEGORIES = "categories"
ALLOCATIONS = "allocations"
MONTHLY_BUDGETS = "monthlyBudgets"
TRANSACTIONS = "transactions"
SAVINGS_RECORDS = "savingsRecords"
SAVINGS_GOALS = "savingsGoals"
ROLLOVER_SPENT_BY_MONTH = "rolloverSpentByMonth"

COLLECTION_NAMES = (
    CATEGORIES,
    ALLOCATIONS,
    MONTHLY_BUDGETS,
    TRANSACTIONS,
    SAVINGS_RECORDS,
    SAVINGS_GOALS,
    ROLLOVER_SPENT_BY_MONTH,
)


__all__ = [
    "CATEGORY_COLORS",
    "FALLBACK_COLOR",
    "UNKNOWN_CATEGORY_NAME",
    "DEFAULT_CATEGORIES",
    "CATEGORIES",
    "ALLOCATIONS",
    "MONTHLY_BUDGETS",
    "TRANSACTIONS",
    "SAVINGS_RECORDS",
    "SAVINGS_GOALS",
    "ROLLOVER_SPENT_BY_MONTH",
    "COLLECTION_NAMES",
]
