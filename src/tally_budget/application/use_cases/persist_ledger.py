"""Use case loading and saving the ledger through a store port."""

from tally_budget.application.ports.ledger_store import LedgerStorePort
from tally_budget.application.session import LedgerSession
from tally_budget.domain.constants import (
    ALLOCATIONS,
    CATEGORIES,
    DEFAULT_CATEGORIES,
    MONTHLY_BUDGETS,
    ROLLOVER_SPENT_BY_MONTH,
    SAVINGS_GOALS,
    SAVINGS_RECORDS,
    TRANSACTIONS,
)
from tally_budget.domain.models import CategoryBudget, LedgerState
from tally_budget.infrastructure.logging.logger import get_app_logger


def default_categories() -> list[CategoryBudget]:
    """Return a fresh copy of the built-in category template."""
    return [
        CategoryBudget(name=name, base_allocation=amount, color=color)
        for name, amount, color in DEFAULT_CATEGORIES
    ]


class LedgerPersistenceUseCase:
    """Load every canonical collection at start and save them on demand.

    Missing or undecodable collections fall back to defaults; the store
    adapter logs the underlying failure.
    """

    def __init__(self, store: LedgerStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Port persisting named collections.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    def load_state(self) -> LedgerState:
        """Build a ledger state from the store.

        Returns:
            LedgerState: Loaded collections, defaults where nothing loaded.
        """
        categories = self._store.load(CATEGORIES)
        state = LedgerState(
            categories=(
                categories if categories is not None else default_categories()
            ),
            allocations=self._store.load(ALLOCATIONS) or [],
            monthly_budgets=self._store.load(MONTHLY_BUDGETS) or {},
            transactions=self._store.load(TRANSACTIONS) or [],
            savings_records=self._store.load(SAVINGS_RECORDS) or [],
            savings_goals=self._store.load(SAVINGS_GOALS) or [],
            rollover_spent_by_month=self._store.load(ROLLOVER_SPENT_BY_MONTH)
            or {},
        )
        self._logger.info(
            f"Loaded ledger: {len(state.monthly_budgets)} budgeted months, "
            f"{len(state.transactions)} transactions, "
            f"{len(state.savings_goals)} goals"
        )
        return state

    def save_state(self, state: LedgerState) -> None:
        """Write every collection of ``state`` to the store."""
        self._store.save(state.categories, CATEGORIES)
        self._store.save(state.allocations, ALLOCATIONS)
        self._store.save(state.monthly_budgets, MONTHLY_BUDGETS)
        self._store.save(state.transactions, TRANSACTIONS)
        self._store.save(state.savings_records, SAVINGS_RECORDS)
        self._store.save(state.savings_goals, SAVINGS_GOALS)
        self._store.save(state.rollover_spent_by_month, ROLLOVER_SPENT_BY_MONTH)
        self._logger.info("Saved ledger collections")

    def save_session(self, session: LedgerSession) -> None:
        """Save a consistent snapshot of a live session."""
        self.save_state(session.snapshot())


__all__ = ["LedgerPersistenceUseCase", "default_categories"]
