"""Domain services for savings goals and their contribution history."""

from collections.abc import Iterable
from dataclasses import replace
from decimal import Decimal
from uuid import UUID

from tally_budget.domain.errors import ValidationError
from tally_budget.domain.models import SavingsGoal, SavingsRecord


def find_goal(
    goals: Iterable[SavingsGoal],
    goal_id: UUID,
) -> SavingsGoal | None:
    for goal in goals:
        if goal.id == goal_id:
            return goal
    return None


def contributions_for_goal(
    records: Iterable[SavingsRecord],
    goal_id: UUID,
) -> list[SavingsRecord]:
    """Return a goal's contribution history ordered by date."""
    return sorted(
        (record for record in records if record.goal_id == goal_id),
        key=lambda record: record.date,
    )


def apply_contribution(goal: SavingsGoal, amount: Decimal) -> SavingsGoal:
    """Return the goal with ``amount`` added.

    Args:
        goal: Goal receiving the contribution.
        amount: Positive, cent-rounded amount.

    Returns:
        SavingsGoal: Updated goal.

    Raises:
        ValidationError: If the goal is already complete or would overflow.
    """
    if goal.current_amount >= goal.target_amount:
        raise ValidationError(f"Goal '{goal.title}' is already fully funded.")
    if goal.current_amount + amount > goal.target_amount:
        raise ValidationError(
            f"Transfer exceeds the remaining {goal.remaining} for "
            f"'{goal.title}'."
        )
    return replace(goal, current_amount=goal.current_amount + amount)


def reverse_contribution(goal: SavingsGoal, amount: Decimal) -> SavingsGoal:
    """Return the goal with ``amount`` removed, floored at zero."""
    return replace(
        goal,
        current_amount=max(Decimal("0.00"), goal.current_amount - amount),
    )


def goal_progress(goal: SavingsGoal) -> Decimal:
    """Return the funded fraction of a goal within ``[0, 1]``."""
    if goal.target_amount <= 0:
        return Decimal("0")
    fraction = goal.current_amount / goal.target_amount
    return min(max(fraction, Decimal("0")), Decimal("1"))


__all__ = [
    "find_goal",
    "contributions_for_goal",
    "apply_contribution",
    "reverse_contribution",
    "goal_progress",
]
