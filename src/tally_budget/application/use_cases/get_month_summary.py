"""Use case assembling the figures displayed for a month."""

from decimal import Decimal

from tally_budget.application.session import LedgerSession
from tally_budget.domain.models import CategorySummary, MonthSummary
from tally_budget.domain.services.budgets import (
    allocated_by_category,
    spent_by_category,
)
from tally_budget.domain.services.months import MonthLike, month_key
from tally_budget.domain.services.rollover import state_rollover_leftover
from tally_budget.domain.services.transactions import (
    daily_cumulative_spending,
    total_spent,
    transactions_for_month,
)
from tally_budget.infrastructure.logging.logger import get_app_logger


class GetMonthSummaryUseCase:
    """Compute per-category and overall budget figures for a month."""

    def __init__(self, session: LedgerSession, logger=None) -> None:
        """Initialize the use case.

        Args:
            session: Session owning the ledger collections.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._session = session
        self._logger = logger or get_app_logger()

    def execute(self, month: MonthLike) -> MonthSummary:
        """Return the month's summary.

        Args:
            month: Month to summarize.

        Returns:
            MonthSummary: Category figures, totals, rollover and daily series.
        """
        key = month_key(month)
        with self._session.read() as state:
            budget_set = state.monthly_budgets.get(key)
            categories = list(budget_set or [])
            month_transactions = transactions_for_month(state.transactions, key)
            spent = spent_by_category(categories, month_transactions)
            extras = allocated_by_category(state.allocations, key)
            rollover = state_rollover_leftover(state, key, self._session.epoch)

        summaries = [
            CategorySummary(
                category_id=category.id,
                name=category.name,
                color=category.color,
                base_allocation=category.base_allocation,
                allocated=extras.get(category.id, Decimal("0.00")),
                spent=spent[category.id],
            )
            for category in categories
        ]
        total_allocated = sum(
            (summary.effective_allocation for summary in summaries),
            Decimal("0.00"),
        )
        month_spent = total_spent(month_transactions)
        self._logger.debug(
            f"Summary for {key}: allocated={total_allocated}, "
            f"spent={month_spent}, rollover={rollover}"
        )
        return MonthSummary(
            month=key,
            configured=budget_set is not None,
            categories=summaries,
            total_allocated=total_allocated,
            total_spent=month_spent,
            rollover_leftover=rollover,
            daily_spending=daily_cumulative_spending(month_transactions, key),
        )

    def rollover_leftover(self, month: MonthLike) -> Decimal:
        return self._session.rollover_leftover(month)


__all__ = ["GetMonthSummaryUseCase"]
