"""Use case moving rollover funds into categories and savings goals."""

from collections.abc import Callable
from datetime import date
from decimal import Decimal
from uuid import UUID

from tally_budget.application.session import LedgerSession
from tally_budget.application.use_cases.results import OperationResult
from tally_budget.domain.errors import LedgerInvariantError, ValidationError
from tally_budget.domain.models import LedgerState, MonthKey, SavingsRecord
from tally_budget.domain.services.budgets import (
    effective_allocation,
    find_category,
    merge_allocation,
)
from tally_budget.domain.services.months import (
    MonthLike,
    calendar_day,
    month_key,
)
from tally_budget.domain.services.rollover import state_rollover_leftover
from tally_budget.domain.services.savings import (
    apply_contribution,
    find_goal,
    reverse_contribution,
)
from tally_budget.domain.services.validation import parse_positive_amount
from tally_budget.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from tally_budget.utils.decimal_utils import round_cents

INSUFFICIENT_ROLLOVER_MESSAGE = "Insufficient rollover leftover."


class TransferFundsUseCase:
    """Move funds between rollover, category allocations and goals.

    Each operation validates and mutates inside one session mutation, so a
    rejected or failing transfer leaves every collection untouched.
    """

    def __init__(
        self,
        session: LedgerSession,
        logger=None,
        usage_logger=None,
        today: Callable[[], date] = date.today,
    ) -> None:
        """Initialize the use case.

        Args:
            session: Session owning the ledger collections.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger recording completed transfers.
            today: Clock used to date goal contributions.
        """
        self._session = session
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()
        self._today = today

    def to_category(
        self,
        amount,
        category_id: UUID,
        month: MonthLike,
    ) -> OperationResult:
        """Allocate rollover funds to a category for one month.

        Args:
            amount: Amount to move; must be positive and covered by rollover.
            category_id: Category budgeted in ``month``.
            month: Month receiving the allocation.

        Returns:
            OperationResult: The merged ``CategoryAllocation`` on success.
        """
        key = month_key(month)
        try:
            with self._session.mutate() as state:
                value = parse_positive_amount(amount)
                self._require_category(state, category_id, key)
                self._require_rollover(state, value, key)
                state.allocations, allocation = merge_allocation(
                    state.allocations, category_id, key, value
                )
        except ValidationError as exc:
            return self._rejected("category transfer", exc)
        self._usage_logger.info(
            f"Transferred {value} from rollover to category {category_id} "
            f"in {key}"
        )
        return OperationResult.success(allocation)

    def to_goal(
        self,
        amount,
        goal_id: UUID,
        month: MonthLike,
        description: str = "",
        on_date: date | None = None,
    ) -> OperationResult:
        """Contribute rollover funds to a savings goal.

        The goal, its contribution record and the month's rollover-spent
        figure change together or not at all.

        Args:
            amount: Amount to move; must be positive and covered by rollover.
            goal_id: Goal receiving the contribution.
            month: Month whose rollover funds the contribution.
            description: Optional note stored on the savings record.
            on_date: Contribution date inside ``month``; defaults to today
                when today falls in ``month``, else the month's first day.

        Returns:
            OperationResult: The new ``SavingsRecord`` on success.
        """
        key = month_key(month)
        try:
            with self._session.mutate() as state:
                value = parse_positive_amount(amount)
                record_date = self._contribution_date(key, on_date)
                goal = find_goal(state.savings_goals, goal_id)
                if goal is None:
                    raise ValidationError("Please choose a savings goal.")
                self._require_rollover(state, value, key)
                updated = apply_contribution(goal, value)
                record = SavingsRecord(
                    goal_id=goal.id,
                    date=record_date,
                    amount=value,
                    description=(description or "").strip(),
                )
                state.savings_goals = [
                    updated if item.id == goal.id else item
                    for item in state.savings_goals
                ]
                state.savings_records.append(record)
                state.rollover_spent_by_month[key] = round_cents(
                    state.rollover_spent_by_month.get(key, Decimal("0.00"))
                    + value
                )
        except ValidationError as exc:
            return self._rejected("goal transfer", exc)
        self._usage_logger.info(
            f"Transferred {value} from rollover to goal '{updated.title}' "
            f"in {key}"
        )
        return OperationResult.success(record)

    def reverse_goal_contribution(self, record_id: UUID) -> OperationResult:
        """Delete a savings record and undo its effects.

        The goal's current amount is floored at zero; the month's
        rollover-spent figure is not floored.

        Args:
            record_id: Savings record to delete.

        Returns:
            OperationResult: The removed ``SavingsRecord`` on success.
        """
        try:
            with self._session.mutate() as state:
                record = next(
                    (
                        item
                        for item in state.savings_records
                        if item.id == record_id
                    ),
                    None,
                )
                if record is None:
                    raise ValidationError("Savings record not found.")
                goal = find_goal(state.savings_goals, record.goal_id)
                if goal is None:
                    raise LedgerInvariantError(
                        f"Savings record {record.id} references missing goal "
                        f"{record.goal_id}"
                    )
                updated = reverse_contribution(goal, record.amount)
                state.savings_goals = [
                    updated if item.id == goal.id else item
                    for item in state.savings_goals
                ]
                key = month_key(record.date)
                state.rollover_spent_by_month[key] = round_cents(
                    state.rollover_spent_by_month.get(key, Decimal("0.00"))
                    - record.amount
                )
                state.savings_records = [
                    item for item in state.savings_records if item.id != record.id
                ]
        except ValidationError as exc:
            return self._rejected("contribution reversal", exc)
        self._usage_logger.info(
            f"Reversed contribution of {record.amount} to goal "
            f"'{updated.title}' dated {record.date}"
        )
        return OperationResult.success(record)

    def between_categories(
        self,
        amount,
        from_category_id: UUID,
        to_category_id: UUID,
        month: MonthLike,
    ) -> OperationResult:
        """Move budget from one category to another within a month.

        Args:
            amount: Amount to move; limited by the source's allocation.
            from_category_id: Category giving up funds.
            to_category_id: Category receiving funds.
            month: Month both categories are budgeted in.

        Returns:
            OperationResult: The destination allocation on success.
        """
        key = month_key(month)
        try:
            with self._session.mutate() as state:
                value = parse_positive_amount(amount)
                if from_category_id == to_category_id:
                    raise ValidationError("Cannot transfer to the same source.")
                source = self._require_category(state, from_category_id, key)
                self._require_category(state, to_category_id, key)
                if value > effective_allocation(source, key, state.allocations):
                    raise ValidationError(f"Not enough funds in {source.name}.")
                state.allocations, _ = merge_allocation(
                    state.allocations, from_category_id, key, -value
                )
                state.allocations, allocation = merge_allocation(
                    state.allocations, to_category_id, key, value
                )
        except ValidationError as exc:
            return self._rejected("category-to-category transfer", exc)
        self._usage_logger.info(
            f"Moved {value} from category {from_category_id} to "
            f"{to_category_id} in {key}"
        )
        return OperationResult.success(allocation)

    def to_rollover(
        self,
        amount,
        category_id: UUID,
        month: MonthLike,
    ) -> OperationResult:
        """Return budget from a category to the month's rollover balance."""
        key = month_key(month)
        try:
            with self._session.mutate() as state:
                value = parse_positive_amount(amount)
                source = self._require_category(state, category_id, key)
                if value > effective_allocation(source, key, state.allocations):
                    raise ValidationError(f"Not enough funds in {source.name}.")
                state.allocations, allocation = merge_allocation(
                    state.allocations, category_id, key, -value
                )
        except ValidationError as exc:
            return self._rejected("rollover return", exc)
        self._usage_logger.info(
            f"Returned {value} from category {category_id} to rollover in {key}"
        )
        return OperationResult.success(allocation)

    @staticmethod
    def _require_category(state: LedgerState, category_id: UUID, key: MonthKey):
        category = find_category(state.monthly_budgets.get(key), category_id)
        if category is None:
            raise ValidationError(f"Choose a category budgeted for {key}.")
        return category

    def _require_rollover(
        self,
        state: LedgerState,
        value: Decimal,
        key: MonthKey,
    ) -> None:
        available = state_rollover_leftover(state, key, self._session.epoch)
        if value > available:
            raise ValidationError(INSUFFICIENT_ROLLOVER_MESSAGE)

    def _contribution_date(self, key: MonthKey, on_date: date | None) -> date:
        if on_date is not None:
            if not key.contains(on_date):
                raise ValidationError(
                    f"Contribution date must fall within {key}."
                )
            return calendar_day(on_date)
        today = self._today()
        return today if key.contains(today) else key.first_day()

    def _rejected(self, operation: str, exc: ValidationError) -> OperationResult:
        self._logger.info(f"Rejected {operation}: {exc}")
        return OperationResult.failure(str(exc))


__all__ = ["TransferFundsUseCase", "INSUFFICIENT_ROLLOVER_MESSAGE"]
