"""Domain models for savings goals."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from uuid import UUID, uuid4


@dataclass(frozen=True)
class SavingsGoal:
    """Savings target funded from rollover transfers.

    Attributes:
        title: Unique goal title.
        target_amount: Amount to reach, strictly positive.
        current_amount: Amount saved so far, within ``[0, target_amount]``.
    """

    title: str
    target_amount: Decimal
    current_amount: Decimal = Decimal("0.00")
    id: UUID = field(default_factory=uuid4)

    @property
    def remaining(self) -> Decimal:
        """Return how much is still needed to reach the target."""
        return self.target_amount - self.current_amount

    @property
    def is_complete(self) -> bool:
        return self.current_amount >= self.target_amount


@dataclass(frozen=True)
class SavingsRecord:
    """Audit entry for one contribution to a goal."""

    goal_id: UUID
    date: date
    amount: Decimal
    description: str = ""
    id: UUID = field(default_factory=uuid4)


__all__ = ["SavingsGoal", "SavingsRecord"]
