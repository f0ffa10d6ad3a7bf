"""Application use cases package."""

from .get_month_summary import GetMonthSummaryUseCase
from .manage_budgets import ManageBudgetsUseCase
from .manage_savings import ManageSavingsUseCase
from .manage_transactions import ManageTransactionsUseCase
from .persist_ledger import LedgerPersistenceUseCase, default_categories
from .results import OperationResult
from .transfer_funds import TransferFundsUseCase

__all__ = [
    "GetMonthSummaryUseCase",
    "ManageBudgetsUseCase",
    "ManageSavingsUseCase",
    "ManageTransactionsUseCase",
    "LedgerPersistenceUseCase",
    "default_categories",
    "OperationResult",
    "TransferFundsUseCase",
]
