"""Use case maintaining savings goals and their contribution history."""

from dataclasses import replace
from decimal import Decimal
from uuid import UUID

from tally_budget.application.session import LedgerSession
from tally_budget.application.use_cases.results import OperationResult
from tally_budget.application.use_cases.transfer_funds import (
    TransferFundsUseCase,
)
from tally_budget.domain.errors import ValidationError
from tally_budget.domain.models import SavingsGoal, SavingsRecord
from tally_budget.domain.services.savings import (
    contributions_for_goal,
    find_goal,
    goal_progress,
)
from tally_budget.domain.services.validation import (
    parse_positive_amount,
    require_text,
)
from tally_budget.infrastructure.logging.logger import get_app_logger


class ManageSavingsUseCase:
    """Create, edit and remove goals and their contribution records."""

    def __init__(
        self,
        session: LedgerSession,
        transfers: TransferFundsUseCase | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            session: Session owning the ledger collections.
            transfers: Transfer use case reversing deleted contributions.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._session = session
        self._logger = logger or get_app_logger()
        self._transfers = transfers or TransferFundsUseCase(
            session, logger=self._logger
        )

    def goals(self) -> list[SavingsGoal]:
        with self._session.read() as state:
            return list(state.savings_goals)

    def contributions(self, goal_id: UUID) -> list[SavingsRecord]:
        """Return a goal's contributions, oldest first."""
        with self._session.read() as state:
            return contributions_for_goal(state.savings_records, goal_id)

    def progress(self, goal_id: UUID) -> Decimal | None:
        with self._session.read() as state:
            goal = find_goal(state.savings_goals, goal_id)
            return goal_progress(goal) if goal is not None else None

    def add_goal(self, title: str, target_amount) -> OperationResult:
        """Create a goal with a unique title and a positive target.

        Args:
            title: Goal title, unique ignoring case.
            target_amount: Positive target, rounded to cents.

        Returns:
            OperationResult: The new ``SavingsGoal`` on success.
        """
        try:
            with self._session.mutate() as state:
                cleaned = require_text(title, "goal title")
                self._require_unique_title(state.savings_goals, cleaned)
                goal = SavingsGoal(
                    title=cleaned,
                    target_amount=parse_positive_amount(target_amount),
                )
                state.savings_goals.append(goal)
        except ValidationError as exc:
            return self._rejected("goal creation", exc)
        self._logger.info(
            f"Created goal '{goal.title}' with target {goal.target_amount}"
        )
        return OperationResult.success(goal)

    def edit_goal(
        self,
        goal_id: UUID,
        title: str | None = None,
        target_amount=None,
    ) -> OperationResult:
        """Rename a goal or change its target; the target stays >= saved."""
        try:
            with self._session.mutate() as state:
                goal = find_goal(state.savings_goals, goal_id)
                if goal is None:
                    raise ValidationError("Savings goal not found.")
                changes = {}
                if title is not None:
                    cleaned = require_text(title, "goal title")
                    self._require_unique_title(
                        [item for item in state.savings_goals if item.id != goal_id],
                        cleaned,
                    )
                    changes["title"] = cleaned
                if target_amount is not None:
                    target = parse_positive_amount(target_amount)
                    if target < goal.current_amount:
                        raise ValidationError(
                            f"Target cannot be below the saved "
                            f"{goal.current_amount}."
                        )
                    changes["target_amount"] = target
                updated = replace(goal, **changes)
                state.savings_goals = [
                    updated if item.id == goal_id else item
                    for item in state.savings_goals
                ]
        except ValidationError as exc:
            return self._rejected("goal edit", exc)
        self._logger.info(f"Edited goal '{updated.title}'")
        return OperationResult.success(updated)

    def remove_goal(self, goal_id: UUID) -> OperationResult:
        """Delete a goal that has no contribution records left."""
        try:
            with self._session.mutate() as state:
                goal = find_goal(state.savings_goals, goal_id)
                if goal is None:
                    raise ValidationError("Savings goal not found.")
                if contributions_for_goal(state.savings_records, goal_id):
                    raise ValidationError(
                        f"Delete the contributions to '{goal.title}' first."
                    )
                state.savings_goals = [
                    item for item in state.savings_goals if item.id != goal_id
                ]
        except ValidationError as exc:
            return self._rejected("goal removal", exc)
        self._logger.info(f"Removed goal '{goal.title}'")
        return OperationResult.success(goal)

    def remove_record(self, record_id: UUID) -> OperationResult:
        """Delete a contribution, crediting its month's rollover back."""
        return self._transfers.reverse_goal_contribution(record_id)

    @staticmethod
    def _require_unique_title(goals: list[SavingsGoal], title: str) -> None:
        if any(goal.title.casefold() == title.casefold() for goal in goals):
            raise ValidationError(f"A goal named '{title}' already exists.")

    def _rejected(self, operation: str, exc: ValidationError) -> OperationResult:
        self._logger.info(f"Rejected {operation}: {exc}")
        return OperationResult.failure(str(exc))


__all__ = ["ManageSavingsUseCase"]
