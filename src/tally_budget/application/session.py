"""Session holder owning the ledger collections.

Every read and mutation goes through one re-entrant lock so the rollover
engine always sees mutually consistent collections. Mutations work on a deep
copy that replaces the live state only when the block exits cleanly.
"""

import copy
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import date
from decimal import Decimal

from tally_budget.domain.models import LedgerState, MonthKey
from tally_budget.domain.services.months import MonthLike
from tally_budget.domain.services.rollover import (
    infer_epoch,
    state_rollover_leftover,
)
from tally_budget.infrastructure.logging.logger import get_app_logger


class LedgerSession:
    """Owns a ``LedgerState`` and serializes access to it."""

    def __init__(
        self,
        state: LedgerState | None = None,
        epoch: MonthKey | None = None,
        logger=None,
        today: date | None = None,
    ) -> None:
        """Initialize the session.

        Args:
            state: Initial collections; an empty ledger when omitted.
            epoch: First month of the rollover computation. Inferred from the
                earliest data (or ``today``) when omitted, then kept fixed.
            logger: Optional logger compatible with logging.Logger-like API.
            today: Reference date used when inferring the epoch.
        """
        self._state = state if state is not None else LedgerState()
        self._lock = threading.RLock()
        self._logger = logger or get_app_logger()
        self._epoch = epoch or infer_epoch(self._state, today or date.today())
        self._logger.info(f"Ledger session opened with epoch {self._epoch}")

    @property
    def epoch(self) -> MonthKey:
        return self._epoch

    @contextmanager
    def read(self) -> Iterator[LedgerState]:
        """Yield the live state under the lock; callers must not mutate it."""
        with self._lock:
            yield self._state

    @contextmanager
    def mutate(self) -> Iterator[LedgerState]:
        """Yield a working copy committed only if the block does not raise."""
        with self._lock:
            working = copy.deepcopy(self._state)
            yield working
            self._state = working

    def snapshot(self) -> LedgerState:
        """Return a deep copy of the current state."""
        with self._lock:
            return copy.deepcopy(self._state)

    def rollover_leftover(self, month: MonthLike) -> Decimal:
        """Return the rollover carried into ``month``."""
        with self._lock:
            return state_rollover_leftover(self._state, month, self._epoch)


__all__ = ["LedgerSession"]
