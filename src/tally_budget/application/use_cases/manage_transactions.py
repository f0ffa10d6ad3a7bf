"""Use case recording, editing and deleting transactions."""

from dataclasses import replace
from datetime import date
from uuid import UUID

from tally_budget.application.session import LedgerSession
from tally_budget.application.use_cases.results import OperationResult
from tally_budget.domain.errors import ValidationError
from tally_budget.domain.models import CategoryBudget, Transaction
from tally_budget.domain.services.months import (
    MonthLike,
    calendar_day,
    month_key,
)
from tally_budget.domain.services.transactions import (
    category_name,
    is_valid_category,
    transactions_for_month,
    valid_categories_for_month,
)
from tally_budget.domain.services.validation import (
    parse_non_negative_amount,
    parse_positive_amount,
    require_text,
)
from tally_budget.infrastructure.logging.logger import get_app_logger


class ManageTransactionsUseCase:
    """Maintain the transaction ledger.

    A transaction's category must belong to the budget set of the
    transaction's own month. Edits moving a transaction to a month without
    that category are rejected so the caller can ask for a new category.
    """

    def __init__(self, session: LedgerSession, logger=None) -> None:
        self._session = session
        self._logger = logger or get_app_logger()

    def for_month(self, month: MonthLike) -> list[Transaction]:
        """Return the month's transactions ordered by date."""
        with self._session.read() as state:
            return sorted(
                transactions_for_month(state.transactions, month_key(month)),
                key=lambda transaction: transaction.date,
            )

    def valid_categories(self, month: MonthLike) -> list[CategoryBudget]:
        with self._session.read() as state:
            return valid_categories_for_month(
                state.monthly_budgets, month_key(month)
            )

    def category_name(self, transaction: Transaction) -> str:
        """Return the display name of a transaction's category."""
        with self._session.read() as state:
            return category_name(
                state.monthly_budgets, transaction, logger=self._logger
            )

    def add(
        self,
        category_id: UUID,
        on_date: date,
        amount,
        description: str,
    ) -> OperationResult:
        """Record a new transaction.

        Args:
            category_id: Category budgeted in the month of ``on_date``.
            on_date: Day the money was spent.
            amount: Positive amount, rounded to cents.
            description: Transaction title.

        Returns:
            OperationResult: The new ``Transaction`` on success.
        """
        on_date = calendar_day(on_date)
        try:
            with self._session.mutate() as state:
                title = require_text(description, "transaction title")
                value = parse_positive_amount(amount)
                self._require_category(state, category_id, on_date)
                transaction = Transaction(
                    category_id=category_id,
                    date=on_date,
                    amount=value,
                    description=title,
                )
                state.transactions.append(transaction)
        except ValidationError as exc:
            return self._rejected("transaction", exc)
        self._logger.info(
            f"Recorded transaction {transaction.id} of {value} on {on_date}"
        )
        return OperationResult.success(transaction)

    def edit(
        self,
        transaction_id: UUID,
        *,
        category_id: UUID | None = None,
        on_date: date | None = None,
        amount=None,
        description: str | None = None,
    ) -> OperationResult:
        """Update fields of an existing transaction.

        Args:
            transaction_id: Transaction to update.
            category_id: New category, validated against the target month.
            on_date: New date.
            amount: New non-negative amount.
            description: New title.

        Returns:
            OperationResult: The updated ``Transaction`` on success.
        """
        try:
            with self._session.mutate() as state:
                current = next(
                    (tx for tx in state.transactions if tx.id == transaction_id),
                    None,
                )
                if current is None:
                    raise ValidationError("Transaction not found.")
                changes = {}
                if description is not None:
                    changes["description"] = require_text(
                        description, "transaction title"
                    )
                if amount is not None:
                    changes["amount"] = parse_non_negative_amount(amount)
                if on_date is not None:
                    changes["date"] = calendar_day(on_date)
                if category_id is not None:
                    changes["category_id"] = category_id
                updated = replace(current, **changes)
                self._require_category(state, updated.category_id, updated.date)
                state.transactions = [
                    updated if tx.id == transaction_id else tx
                    for tx in state.transactions
                ]
        except ValidationError as exc:
            return self._rejected("transaction edit", exc)
        self._logger.info(f"Updated transaction {transaction_id}")
        return OperationResult.success(updated)

    def remove(self, transaction_id: UUID) -> OperationResult:
        try:
            with self._session.mutate() as state:
                removed = next(
                    (tx for tx in state.transactions if tx.id == transaction_id),
                    None,
                )
                if removed is None:
                    raise ValidationError("Transaction not found.")
                state.transactions = [
                    tx for tx in state.transactions if tx.id != transaction_id
                ]
        except ValidationError as exc:
            return self._rejected("transaction removal", exc)
        self._logger.info(f"Deleted transaction {transaction_id}")
        return OperationResult.success(removed)

    @staticmethod
    def _require_category(state, category_id: UUID, on_date: date) -> None:
        if not is_valid_category(state.monthly_budgets, category_id, on_date):
            raise ValidationError(
                f"Choose a category budgeted for {month_key(on_date)}."
            )

    def _rejected(self, operation: str, exc: ValidationError) -> OperationResult:
        self._logger.info(f"Rejected {operation}: {exc}")
        return OperationResult.failure(str(exc))


__all__ = ["ManageTransactionsUseCase"]
