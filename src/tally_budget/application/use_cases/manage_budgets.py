"""Use case managing per-month category budget sets."""

from dataclasses import replace
from uuid import UUID

from tally_budget.application.session import LedgerSession
from tally_budget.application.use_cases.results import OperationResult
from tally_budget.domain.errors import ValidationError
from tally_budget.domain.models import CategoryBudget, LedgerState, MonthKey
from tally_budget.domain.policies import (
    category_is_referenced,
    next_available_color,
)
from tally_budget.domain.services.budgets import (
    budgets_for_month,
    copy_forward,
    find_category,
    most_recent_configured_month,
)
from tally_budget.domain.services.months import MonthLike, month_key
from tally_budget.domain.services.validation import (
    parse_non_negative_amount,
    require_text,
)
from tally_budget.infrastructure.logging.logger import get_app_logger


class ManageBudgetsUseCase:
    """Configure months and edit their categories and allocations."""

    def __init__(self, session: LedgerSession, logger=None) -> None:
        """Initialize the use case.

        Args:
            session: Session owning the ledger collections.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._session = session
        self._logger = logger or get_app_logger()

    def budgets_for_month(self, month: MonthLike) -> list[CategoryBudget] | None:
        """Return the month's categories, or None when it is unconfigured."""
        with self._session.read() as state:
            return budgets_for_month(state.monthly_budgets, month_key(month))

    def is_configured(self, month: MonthLike) -> bool:
        return self.budgets_for_month(month) is not None

    def start_month(
        self,
        month: MonthLike,
        copy_previous: bool = True,
    ) -> OperationResult:
        """Configure an unbudgeted month.

        Args:
            month: Month to configure.
            copy_previous: Copy the most recent configured month (or the
                template categories when none exists) instead of starting
                with an empty set.

        Returns:
            OperationResult: The month's new category list on success.
        """
        key = month_key(month)
        try:
            with self._session.mutate() as state:
                if key in state.monthly_budgets:
                    raise ValidationError(f"{key} already has a budget.")
                if not copy_previous:
                    state.monthly_budgets[key] = []
                    categories: list[CategoryBudget] = []
                else:
                    source = most_recent_configured_month(
                        state.monthly_budgets, key
                    )
                    if source is not None:
                        categories = copy_forward(
                            state.monthly_budgets, source, key
                        )
                    else:
                        categories = [
                            replace(category) for category in state.categories
                        ]
                        state.monthly_budgets[key] = list(categories)
        except ValidationError as exc:
            return self._rejected("month setup", exc)
        self._logger.info(
            f"Configured {key} with {len(categories)} categories "
            f"(copy_previous={copy_previous})"
        )
        return OperationResult.success(categories)

    def copy_forward(
        self,
        from_month: MonthLike,
        to_month: MonthLike,
    ) -> OperationResult:
        """Copy one month's budget set into an unconfigured month."""
        source, target = month_key(from_month), month_key(to_month)
        try:
            with self._session.mutate() as state:
                if target in state.monthly_budgets:
                    raise ValidationError(f"{target} already has a budget.")
                categories = copy_forward(state.monthly_budgets, source, target)
        except ValidationError as exc:
            return self._rejected("budget copy", exc)
        self._logger.info(f"Copied budget from {source} to {target}")
        return OperationResult.success(categories)

    def add_category(
        self,
        month: MonthLike,
        name: str,
        base_allocation,
        color: str | None = None,
    ) -> OperationResult:
        """Add a category to a configured month.

        Args:
            month: Month whose budget set receives the category.
            name: Category name, unique within the month.
            base_allocation: Non-negative budgeted amount.
            color: Optional color tag; the next unused palette color otherwise.

        Returns:
            OperationResult: The new ``CategoryBudget`` on success.
        """
        key = month_key(month)
        try:
            with self._session.mutate() as state:
                categories = self._require_configured(state, key)
                cleaned = require_text(name, "category name")
                self._require_unique_name(categories, cleaned)
                category = CategoryBudget(
                    name=cleaned,
                    base_allocation=parse_non_negative_amount(base_allocation),
                    color=color or next_available_color(categories),
                )
                state.monthly_budgets[key] = [*categories, category]
        except ValidationError as exc:
            return self._rejected("category creation", exc)
        self._logger.info(f"Added category '{category.name}' to {key}")
        return OperationResult.success(category)

    def edit_category(
        self,
        month: MonthLike,
        category_id: UUID,
        name: str | None = None,
        base_allocation=None,
        color: str | None = None,
    ) -> OperationResult:
        """Edit one month's copy of a category; other months are untouched."""
        key = month_key(month)
        try:
            with self._session.mutate() as state:
                categories = self._require_configured(state, key)
                category = find_category(categories, category_id)
                if category is None:
                    raise ValidationError(f"Category not found in {key}.")
                changes = {}
                if name is not None:
                    cleaned = require_text(name, "category name")
                    self._require_unique_name(
                        [item for item in categories if item.id != category_id],
                        cleaned,
                    )
                    changes["name"] = cleaned
                if base_allocation is not None:
                    changes["base_allocation"] = parse_non_negative_amount(
                        base_allocation
                    )
                if color:
                    changes["color"] = color
                updated = replace(category, **changes)
                state.monthly_budgets[key] = [
                    updated if item.id == category_id else item
                    for item in categories
                ]
        except ValidationError as exc:
            return self._rejected("category edit", exc)
        self._logger.info(f"Edited category '{updated.name}' in {key}")
        return OperationResult.success(updated)

    def remove_category(
        self,
        month: MonthLike,
        category_id: UUID,
    ) -> OperationResult:
        """Remove a category unless the month's data still references it."""
        key = month_key(month)
        try:
            with self._session.mutate() as state:
                categories = self._require_configured(state, key)
                category = find_category(categories, category_id)
                if category is None:
                    raise ValidationError(f"Category not found in {key}.")
                if category_is_referenced(
                    category_id, key, state.transactions, state.allocations
                ):
                    raise ValidationError(
                        f"'{category.name}' has transactions or allocations "
                        f"in {key} and cannot be removed."
                    )
                state.monthly_budgets[key] = [
                    item for item in categories if item.id != category_id
                ]
        except ValidationError as exc:
            return self._rejected("category removal", exc)
        self._logger.info(f"Removed category '{category.name}' from {key}")
        return OperationResult.success(category)

    def remove_allocation(self, allocation_id: UUID) -> OperationResult:
        """Delete an allocation, returning its amount to the rollover."""
        try:
            with self._session.mutate() as state:
                allocation = next(
                    (
                        item
                        for item in state.allocations
                        if item.id == allocation_id
                    ),
                    None,
                )
                if allocation is None:
                    raise ValidationError("Allocation not found.")
                state.allocations = [
                    item for item in state.allocations if item.id != allocation_id
                ]
        except ValidationError as exc:
            return self._rejected("allocation removal", exc)
        self._logger.info(
            f"Removed allocation of {allocation.allocated_amount} for category "
            f"{allocation.category_id} in {allocation.month}"
        )
        return OperationResult.success(allocation)

    @staticmethod
    def _require_configured(
        state: LedgerState,
        key: MonthKey,
    ) -> list[CategoryBudget]:
        categories = state.monthly_budgets.get(key)
        if categories is None:
            raise ValidationError(f"Set up a budget for {key} first.")
        return list(categories)

    @staticmethod
    def _require_unique_name(
        categories: list[CategoryBudget],
        name: str,
    ) -> None:
        if any(item.name.casefold() == name.casefold() for item in categories):
            raise ValidationError(f"A category named '{name}' already exists.")

    def _rejected(self, operation: str, exc: ValidationError) -> OperationResult:
        self._logger.info(f"Rejected {operation}: {exc}")
        return OperationResult.failure(str(exc))


__all__ = ["ManageBudgetsUseCase"]
